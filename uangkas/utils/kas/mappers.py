# uangkas/utils/kas/mappers.py
"""
Konversi JSON mentah API → dataclass domain.

Dijalankan sekali, tepat setelah deserialisasi. Setelah titik ini logika
internal tidak lagi memeriksa string status mentah.
"""
from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, TypeVar

from uangkas.utils.kas.schema import (
    Invoice, InvoiceStatus, LoginResult, Member, MemberStatus,
    Notification, NotificationStats, NotificationStatus, PaginatedResponse,
)

T = TypeVar("T")

_SENT = {"sent", "success"}
_FAILED = {"failed"}
_RE_FRACTION = re.compile(r"(\.\d{6})\d+")


def normalize_notification_status(raw: Any) -> NotificationStatus:
    """
    Total dan idempoten:
      Sent/sent/success → sent, Failed/failed → failed, selain itu → pending.
    """
    if isinstance(raw, NotificationStatus):
        return raw
    s = str(raw or "").strip().lower()
    if s in _SENT:
        return NotificationStatus.SENT
    if s in _FAILED:
        return NotificationStatus.FAILED
    return NotificationStatus.PENDING


def normalize_member_status(raw: Any) -> MemberStatus:
    s = str(raw or "").strip().lower()
    return MemberStatus.ACTIVE if s == MemberStatus.ACTIVE.value else MemberStatus.INACTIVE


def normalize_invoice_status(raw: Any) -> InvoiceStatus:
    s = str(raw or "").strip().lower()
    return InvoiceStatus.PAID if s == InvoiceStatus.PAID.value else InvoiceStatus.UNPAID


def parse_timestamp(raw: Any) -> Optional[datetime]:
    """ISO8601 (boleh 'Z' dan nanodetik). None bila kosong/tidak valid."""
    if raw is None or raw == "":
        return None
    if isinstance(raw, datetime):
        return raw
    s = str(raw).strip()
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    s = _RE_FRACTION.sub(r"\1", s)
    try:
        return datetime.fromisoformat(s)
    except ValueError:
        return None


def _int(v: Any, default: int = 0) -> int:
    try:
        return int(v)
    except (TypeError, ValueError):
        return default


def _opt_str(v: Any) -> Optional[str]:
    if v is None:
        return None
    s = str(v).strip()
    return s or None


def member_from_api(raw: Dict[str, Any]) -> Member:
    return Member(
        id=str(raw.get("id", "")),
        nama=str(raw.get("nama") or raw.get("name") or ""),
        no_hp=str(raw.get("noHp") or ""),
        status=normalize_member_status(raw.get("status")),
        created_at=parse_timestamp(raw.get("createdAt")),
    )


def invoice_from_api(raw: Dict[str, Any]) -> Invoice:
    return Invoice(
        id=str(raw.get("id", "")),
        member_id=str(raw.get("memberId", "")),
        member_name=str(raw.get("memberName") or ""),
        periode=str(raw.get("periode") or ""),
        amount=max(0, _int(raw.get("amount"))),
        status=normalize_invoice_status(raw.get("status")),
        bukti_pembayaran=_opt_str(raw.get("buktiPembayaran")),
        created_at=parse_timestamp(raw.get("createdAt")),
        paid_at=_opt_str(raw.get("paidAt")),
    )


def notification_from_api(raw: Dict[str, Any]) -> Notification:
    return Notification(
        id=_int(raw.get("id")),
        receiver=str(raw.get("receiver") or ""),
        time=parse_timestamp(raw.get("time")),
        status=normalize_notification_status(raw.get("status")),
        channel=_opt_str(raw.get("channel")),
        message=_opt_str(raw.get("message")),
    )


def paginated_from_api(raw: Dict[str, Any], item_mapper: Callable[[Dict[str, Any]], T]) -> PaginatedResponse[T]:
    data = raw.get("data") or []
    return PaginatedResponse(
        data=[item_mapper(d) for d in data if isinstance(d, dict)],
        page=_int(raw.get("page")),
        size=_int(raw.get("size"), default=len(data)),
        total_items=_int(raw.get("totalItems")),
        total_pages=_int(raw.get("totalPages")),
        has_next=bool(raw.get("hasNext")),
        has_previous=bool(raw.get("hasPrevious")),
    )


def stats_from_api(raw: Dict[str, Any]) -> NotificationStats:
    return NotificationStats(
        total_notif=_int(raw.get("totalNotif")),
        notif_terkirim=_int(raw.get("notifTerkirim")),
        notif_gagal=_int(raw.get("notifGagal")),
        notif_pending=_int(raw.get("notifPending")),
    )


def login_from_api(raw: Dict[str, Any]) -> LoginResult:
    return LoginResult(
        token=str(raw.get("token") or ""),
        role=_opt_str(raw.get("role")),
        expires_in=_int(raw.get("expires_in")),
    )


def list_from_api(raw: Any, item_mapper: Callable[[Dict[str, Any]], T]) -> List[T]:
    if not isinstance(raw, list):
        raise ValueError(f"payload bukan array JSON: {type(raw).__name__}")
    return [item_mapper(d) for d in raw if isinstance(d, dict)]
