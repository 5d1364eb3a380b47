# uangkas/utils/members/service.py
"""
Operasi member lewat API. Setiap mutasi diikuti reload penuh oleh pemanggil
(tidak ada patch lokal optimistis).
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from uangkas.utils.core.validators import ValidationError, require_fields
from uangkas.utils.kas.client import KasApiClient
from uangkas.utils.kas.schema import Member, MemberStatus

__all__ = ["muat_members", "get_member", "simpan_member", "hapus_member", "member_form_from"]


def muat_members(client: KasApiClient) -> List[Member]:
    return client.list_members()


def get_member(client: KasApiClient, member_id: str) -> Member:
    return client.get_member(member_id)


def _validasi_form(nama: str, no_hp: str, status: str) -> MemberStatus:
    require_fields({"nama": nama, "no_hp": no_hp}, "nama", "no_hp", message="Nama dan no HP harus diisi")
    try:
        return MemberStatus(status)
    except ValueError:
        raise ValidationError(f"Status member tidak valid: {status!r}") from None


def simpan_member(
    client: KasApiClient,
    *,
    nama: str,
    no_hp: str,
    status: str = MemberStatus.ACTIVE.value,
    member_id: Optional[str] = None,
) -> Member:
    """Create (member_id=None) atau update. ValidationError sebelum request apa pun."""
    status_m = _validasi_form(nama, no_hp, status)
    nama, no_hp = nama.strip(), no_hp.strip()
    if member_id:
        m = client.update_member(member_id, nama, no_hp, status_m)
        logging.info("Member diupdate: %s (%s)", member_id, nama)
    else:
        m = client.create_member(nama, no_hp, status_m)
        logging.info("Member ditambahkan: %s (%s)", m.id, nama)
    return m


def hapus_member(client: KasApiClient, member_id: str) -> Dict:
    ack = client.delete_member(member_id)
    logging.info("Member dihapus: %s", member_id)
    return ack


def member_form_from(member: Optional[Member]) -> Dict[str, str]:
    """Nilai awal form edit; form kosong untuk member baru."""
    if member is None:
        return {"nama": "", "no_hp": "", "status": MemberStatus.ACTIVE.value}
    return {"nama": member.nama, "no_hp": member.no_hp, "status": member.status.value}
