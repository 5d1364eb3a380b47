# uangkas/utils/rekapan/service.py
from __future__ import annotations

import logging
from typing import Any, Dict

from uangkas.utils.kas.client import KasApiClient
from uangkas.utils.kas.schema import Rekapan
from uangkas.utils.rekapan.aggregator import build_rekapan

__all__ = ["muat_rekapan", "ringkasan_rekapan"]


def muat_rekapan(client: KasApiClient) -> Rekapan:
    """GET /members + GET /invoices lalu bangun matriks (semua member, aktif maupun tidak)."""
    members = client.list_members()
    invoices = client.list_invoices()
    rekapan = build_rekapan(members, invoices)
    logging.info("Rekapan: %d member x %d periode", len(rekapan.rows), len(rekapan.periodes))
    return rekapan


def ringkasan_rekapan(rekapan: Rekapan) -> Dict[str, Any]:
    """KPI kecil di atas tabel."""
    return {
        "members": len(rekapan.rows),
        "periodes": len(rekapan.periodes),
        "total_bayar": sum(r.total_paid for r in rekapan.rows),
        "sel_lunas": sum(r.total_lunas for r in rekapan.rows),
        "sel_belum": sum(r.total_unpaid for r in rekapan.rows),
    }
