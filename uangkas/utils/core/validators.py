"""
Validasi form sebelum request dikirim ke API.

Kegagalan di sini tidak pernah sampai ke layer jaringan.
"""
from __future__ import annotations

import re
from typing import Any, Mapping

_RE_PERIODE = re.compile(r"^(0[1-9]|1[0-2])\d{4}$")


class ValidationError(ValueError):
    """Field wajib kosong atau nilai tidak valid."""


def _kosong(v: Any) -> bool:
    return v is None or (isinstance(v, str) and not v.strip())


def require_fields(values: Mapping[str, Any], *fields: str, message: str) -> None:
    """Lempar ValidationError(message) bila salah satu field kosong."""
    if any(_kosong(values.get(f)) for f in fields):
        raise ValidationError(message)


def validate_periode(periode: str) -> str:
    """Periode tagihan: 6 karakter MMYYYY, bulan 01..12."""
    p = str(periode or "").strip()
    if not _RE_PERIODE.match(p):
        raise ValidationError(f"Periode tidak valid: {periode!r} (format MMYYYY)")
    return p


def validate_amount(amount: Any) -> int:
    try:
        n = int(amount)
    except (TypeError, ValueError):
        raise ValidationError(f"Nominal tidak valid: {amount!r}") from None
    if n < 0:
        raise ValidationError("Nominal tidak boleh negatif")
    return n
