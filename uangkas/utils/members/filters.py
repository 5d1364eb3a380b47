# uangkas/utils/members/filters.py
from __future__ import annotations
from typing import Dict, Iterable, List

from uangkas.utils.kas.schema import Member, MemberStatus


def active_members(members: Iterable[Member]) -> List[Member]:
    """Hanya member aktif yang ditawarkan saat membuat invoice baru."""
    return [m for m in members if m.status is MemberStatus.ACTIVE]


def search_members(members: Iterable[Member], term: str) -> List[Member]:
    members = list(members)
    q = (term or "").strip().lower()
    if not q:
        return members
    return [m for m in members if q in m.nama.lower() or q in m.no_hp.lower()]


def count_by_status(members: Iterable[Member]) -> Dict[str, int]:
    out = {s.value: 0 for s in MemberStatus}
    for m in members:
        out[m.status.value] += 1
    return out
