# uangkas/utils/rekapan/aggregator.py
"""
Matriks rekapan pembayaran: satu baris per member, satu kolom per periode.

Diturunkan ulang dari Member × Invoice setiap kali dimuat; tidak disimpan.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

import pandas as pd

from uangkas.utils.core.formatters import format_rupiah
from uangkas.utils.kas.schema import (
    Invoice, InvoiceStatus, Member, Rekapan, RekapanCell, RekapanRow,
)

__all__ = ["collect_periodes", "build_rekapan", "rekapan_to_frame", "LUNAS", "BELUM"]

LUNAS = "LUNAS"
BELUM = "BELUM"

_CELL_KOSONG = RekapanCell(status=InvoiceStatus.UNPAID, amount=0)


def collect_periodes(invoices: Iterable[Invoice]) -> List[str]:
    """Union global periode dari semua invoice, urut leksikografis."""
    return sorted({inv.periode for inv in invoices})


def _index_invoices(invoices: Iterable[Invoice]) -> Tuple[Dict[Tuple[str, str], Invoice], Dict[str, int]]:
    """
    (member_id, periode) → invoice untuk sel; member_id → total nominal invoice lunas.
    Invoice lunas menggantikan invoice belum lunas di periode yang sama;
    sesama status, invoice pertama yang dipakai.
    """
    by_key: Dict[Tuple[str, str], Invoice] = {}
    total_paid: Dict[str, int] = {}
    for inv in invoices:
        key = (inv.member_id, inv.periode)
        lama = by_key.get(key)
        if lama is None or (inv.is_paid and not lama.is_paid):
            by_key[key] = inv
        if inv.status is InvoiceStatus.PAID:
            total_paid[inv.member_id] = total_paid.get(inv.member_id, 0) + inv.amount
    return by_key, total_paid


def _cell(inv: Invoice) -> RekapanCell:
    return RekapanCell(
        status=inv.status,
        amount=inv.amount,
        paid_date=inv.paid_at if inv.is_paid else None,
    )


def build_rekapan(members: Iterable[Member], invoices: Iterable[Invoice]) -> Rekapan:
    invoices = list(invoices)
    periodes = collect_periodes(invoices)
    by_key, total_paid = _index_invoices(invoices)

    rows: List[RekapanRow] = []
    for m in members:
        payments: Dict[str, RekapanCell] = {}
        for p in periodes:
            inv = by_key.get((m.id, p))
            payments[p] = _cell(inv) if inv is not None else _CELL_KOSONG
        unpaid = sum(1 for c in payments.values() if c.status is not InvoiceStatus.PAID)
        rows.append(RekapanRow(
            member_id=m.id,
            member_name=m.nama,
            payments=payments,
            total_paid=total_paid.get(m.id, 0),
            total_unpaid=unpaid,
        ))
    return Rekapan(periodes=periodes, rows=rows)


def rekapan_to_frame(rekapan: Rekapan, *, rupiah: bool = True) -> pd.DataFrame:
    """
    Tabel layar/export: 'Nama Member', satu kolom per periode (LUNAS/BELUM),
    'Total Lunas' (periode lunas per baris), 'Total Belum', 'Total Bayar'.
    """
    cols = ["Nama Member", *rekapan.periodes, "Total Lunas", "Total Belum", "Total Bayar"]
    rows = []
    for r in rekapan.rows:
        row = {"Nama Member": r.member_name}
        for p in rekapan.periodes:
            row[p] = LUNAS if r.payments[p].status is InvoiceStatus.PAID else BELUM
        row["Total Lunas"] = r.total_lunas
        row["Total Belum"] = r.total_unpaid
        row["Total Bayar"] = format_rupiah(r.total_paid) if rupiah else r.total_paid
        rows.append(row)
    df = pd.DataFrame(rows, columns=cols)
    # DataFrame kosong kehilangan dtype int; paksa supaya CSV tidak menulis '1.0'
    for c in ("Total Lunas", "Total Belum"):
        df[c] = df[c].astype("int64")
    if not rupiah:
        df["Total Bayar"] = df["Total Bayar"].astype("int64")
    return df
