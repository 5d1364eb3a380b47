# uangkas/utils/invoices/service.py
from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from uangkas.config.paths import DEFAULT_INVOICE_AMOUNT
from uangkas.utils.core.validators import ValidationError, require_fields, validate_amount, validate_periode
from uangkas.utils.invoices.filters import periode_from_month_input
from uangkas.utils.kas.client import KasApiClient
from uangkas.utils.kas.schema import Invoice, InvoiceStatus, Member
from uangkas.utils.members.filters import active_members

__all__ = [
    "muat_invoices_dan_members",
    "buat_invoice",
    "setujui_invoice",
    "unggah_bukti",
]


def muat_invoices_dan_members(client: KasApiClient) -> Tuple[List[Invoice], List[Member]]:
    """Invoice + member AKTIF (untuk pilihan di form invoice baru)."""
    invoices = client.list_invoices()
    members = client.list_members()
    return invoices, active_members(members)


def buat_invoice(
    client: KasApiClient,
    members: Iterable[Member],
    *,
    member_id: str,
    periode: str,
    amount: int | str = DEFAULT_INVOICE_AMOUNT,
) -> Invoice:
    """
    `periode` boleh 'YYYY-MM' (input bulan) atau sudah 'MMYYYY'.
    memberName di-snapshot dari member saat invoice dibuat; status selalu unpaid.
    """
    require_fields({"member_id": member_id, "periode": periode}, "member_id", "periode",
                   message="Semua field harus diisi")
    member = next((m for m in active_members(members) if m.id == member_id), None)
    if member is None:
        raise ValidationError("Member tidak ditemukan atau tidak aktif")

    p = str(periode).strip()
    p = periode_from_month_input(p) if "-" in p else validate_periode(p)
    nominal = validate_amount(amount)

    inv = client.create_invoice(member.id, member.nama, p, nominal, InvoiceStatus.UNPAID)
    logging.info("Invoice dibuat: %s member=%s periode=%s amount=%s", inv.id, member.id, p, nominal)
    return inv


def setujui_invoice(client: KasApiClient, invoice: Invoice) -> Invoice:
    """unpaid → paid satu arah; invoice yang sudah lunas tidak dikirim lagi."""
    if invoice.is_paid:
        raise ValidationError("Invoice sudah lunas")
    out = client.approve_invoice(invoice.id)
    logging.info("Pembayaran disetujui: invoice=%s", invoice.id)
    return out


def unggah_bukti(client: KasApiClient, invoice_id: str, filename: str, content: bytes, mime: str | None = None) -> Invoice:
    if not content:
        raise ValidationError("File bukti pembayaran kosong")
    out = client.upload_payment_proof(invoice_id, filename, content, mime or "application/octet-stream")
    logging.info("Bukti pembayaran diunggah: invoice=%s file=%s", invoice_id, filename)
    return out
