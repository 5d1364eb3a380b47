# uangkas/dashboard/invoices/compositor.py
from __future__ import annotations

from typing import Dict, Iterable

import pandas as pd

from uangkas.utils.core.formatters import format_periode, format_rupiah
from uangkas.utils.invoices.filters import count_by_status, sum_amount
from uangkas.utils.kas.schema import Invoice, InvoiceStatus

_COLS = ["ID", "Member", "Periode", "Nominal", "Status", "Dibayar", "Bukti"]


def status_label(status: InvoiceStatus) -> str:
    return "Lunas" if status is InvoiceStatus.PAID else "Belum Lunas"


def tabel_invoices(invoices: Iterable[Invoice]) -> pd.DataFrame:
    rows = [
        {
            "ID": i.id,
            "Member": i.member_name,
            "Periode": format_periode(i.periode),
            "Nominal": format_rupiah(i.amount),
            "Status": status_label(i.status),
            "Dibayar": i.paid_at or "-",
            "Bukti": "Ada" if i.bukti_pembayaran else "-",
        }
        for i in invoices
    ]
    return pd.DataFrame(rows, columns=_COLS)


def kpis_invoices(invoices: Iterable[Invoice]) -> Dict[str, object]:
    invoices = list(invoices)
    por_status = count_by_status(invoices)
    return {
        "total": len(invoices),
        "lunas": por_status[InvoiceStatus.PAID.value],
        "belum": por_status[InvoiceStatus.UNPAID.value],
        "terkumpul": format_rupiah(sum_amount(invoices, InvoiceStatus.PAID)),
        "tertunggak": format_rupiah(sum_amount(invoices, InvoiceStatus.UNPAID)),
    }


def invoice_label(i: Invoice) -> str:
    return f"{i.member_name} • {format_periode(i.periode)} • {format_rupiah(i.amount)}"
