# uangkas/utils/invoices/filters.py
from __future__ import annotations
import re
from datetime import date
from typing import Dict, Iterable, List, Optional

from uangkas.utils.core.validators import ValidationError
from uangkas.utils.kas.schema import Invoice, InvoiceStatus

_RE_MONTH_INPUT = re.compile(r"^(\d{4})-(\d{2})$")


def periode_from_month_input(value: str) -> str:
    """Input bulan 'YYYY-MM' → periode 'MMYYYY'."""
    m = _RE_MONTH_INPUT.match(str(value or "").strip())
    if not m or not 1 <= int(m.group(2)) <= 12:
        raise ValidationError(f"Periode tidak valid: {value!r} (format YYYY-MM)")
    year, month = m.groups()
    return f"{month}{year}"


def periode_from_date(d: date) -> str:
    return f"{d.month:02d}{d.year:04d}"


def search_invoices(invoices: Iterable[Invoice], term: str) -> List[Invoice]:
    """Cari berdasarkan nama member atau periode."""
    invoices = list(invoices)
    q = (term or "").strip().lower()
    if not q:
        return invoices
    return [i for i in invoices if q in i.member_name.lower() or q in i.periode.lower()]


def filter_by_status(invoices: Iterable[Invoice], status: Optional[InvoiceStatus]) -> List[Invoice]:
    if status is None:
        return list(invoices)
    return [i for i in invoices if i.status is status]


def count_by_status(invoices: Iterable[Invoice]) -> Dict[str, int]:
    out = {s.value: 0 for s in InvoiceStatus}
    for i in invoices:
        out[i.status.value] += 1
    return out


def sum_amount(invoices: Iterable[Invoice], status: Optional[InvoiceStatus] = None) -> int:
    return sum(i.amount for i in filter_by_status(invoices, status))
