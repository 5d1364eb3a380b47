# uangkas/utils/core/formatters.py
from __future__ import annotations

from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from uangkas.config.paths import APP_TIMEZONE

BULAN_SINGKAT = ["Jan", "Feb", "Mar", "Apr", "Mei", "Jun", "Jul", "Agu", "Sep", "Okt", "Nov", "Des"]


def format_rupiah(amount: int | float | None) -> str:
    """50000 → 'Rp 50.000' (pemisah ribuan id-ID)."""
    n = int(round(float(amount or 0)))
    sign = "-" if n < 0 else ""
    return f"Rp {sign}{abs(n):,}".replace(",", ".")


def format_periode(periode: str) -> str:
    """'012025' → 'Jan 2025'. String tidak valid dikembalikan apa adanya."""
    p = str(periode or "")
    if len(p) != 6 or not p.isdigit():
        return p
    bulan = int(p[:2])
    if not 1 <= bulan <= 12:
        return p
    return f"{BULAN_SINGKAT[bulan - 1]} {p[2:]}"


def to_local(ts: datetime, tz: str = APP_TIMEZONE) -> datetime:
    """Timestamp tanpa offset dianggap sudah waktu lokal."""
    zona = ZoneInfo(tz)
    if ts.tzinfo is None:
        return ts.replace(tzinfo=zona)
    return ts.astimezone(zona)


def format_tanggal(ts: Optional[datetime], tz: str = APP_TIMEZONE) -> str:
    """Label tanggal gaya id-ID: '5 Jan 2025'."""
    if ts is None:
        return "Tanggal tidak valid"
    local = to_local(ts, tz)
    return f"{local.day} {BULAN_SINGKAT[local.month - 1]} {local.year}"


def format_jam(ts: Optional[datetime], tz: str = APP_TIMEZONE) -> str:
    if ts is None:
        return "-"
    return to_local(ts, tz).strftime("%H:%M")
