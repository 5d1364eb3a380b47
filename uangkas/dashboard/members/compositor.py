# uangkas/dashboard/members/compositor.py
from __future__ import annotations

from typing import Iterable

import pandas as pd

from uangkas.utils.core.formatters import format_tanggal
from uangkas.utils.kas.schema import Member, MemberStatus

_COLS = ["ID", "Nama", "No HP", "Status", "Terdaftar"]

_STATUS_LABEL = {
    MemberStatus.ACTIVE: "Aktif",
    MemberStatus.INACTIVE: "Tidak Aktif",
}


def status_label(status: MemberStatus) -> str:
    return _STATUS_LABEL[status]


def tabel_members(members: Iterable[Member]) -> pd.DataFrame:
    rows = [
        {
            "ID": m.id,
            "Nama": m.nama,
            "No HP": m.no_hp,
            "Status": status_label(m.status),
            "Terdaftar": format_tanggal(m.created_at) if m.created_at else "-",
        }
        for m in members
    ]
    return pd.DataFrame(rows, columns=_COLS)


def member_options(members: Iterable[Member]) -> dict[str, str]:
    """id → label pilihan ('Budi • 0812...')."""
    return {m.id: f"{m.nama} • {m.no_hp}" for m in members}
