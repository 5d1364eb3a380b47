from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class MemberStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class InvoiceStatus(str, Enum):
    UNPAID = "unpaid"
    PAID = "paid"


class NotificationStatus(str, Enum):
    SENT = "sent"
    FAILED = "failed"
    PENDING = "pending"


@dataclass(frozen=True)
class Member:
    id: str
    nama: str
    no_hp: str
    status: MemberStatus
    created_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status is MemberStatus.ACTIVE


@dataclass(frozen=True)
class Invoice:
    id: str
    member_id: str
    member_name: str
    periode: str  # MMYYYY
    amount: int
    status: InvoiceStatus
    bukti_pembayaran: Optional[str] = None
    created_at: Optional[datetime] = None
    paid_at: Optional[str] = None  # string apa adanya dari API

    @property
    def is_paid(self) -> bool:
        return self.status is InvoiceStatus.PAID


@dataclass(frozen=True)
class Notification:
    id: int
    receiver: str
    time: Optional[datetime]
    status: NotificationStatus
    channel: Optional[str] = None
    message: Optional[str] = None


@dataclass(frozen=True)
class PaginatedResponse(Generic[T]):
    data: List[T]
    page: int  # 0-indexed
    size: int
    total_items: int
    total_pages: int
    has_next: bool
    has_previous: bool


@dataclass(frozen=True)
class NotificationStats:
    total_notif: int
    notif_terkirim: int
    notif_gagal: int
    notif_pending: int


@dataclass(frozen=True)
class LoginResult:
    token: str
    role: Optional[str]
    expires_in: int  # detik


# Rekapan: proyeksi turunan Member × Invoice, tidak disimpan
@dataclass(frozen=True)
class RekapanCell:
    status: InvoiceStatus
    amount: int
    paid_date: Optional[str] = None


@dataclass(frozen=True)
class RekapanRow:
    member_id: str
    member_name: str
    payments: Dict[str, RekapanCell]
    total_paid: int
    total_unpaid: int

    @property
    def total_lunas(self) -> int:
        """Jumlah periode yang lunas pada baris ini."""
        return sum(1 for c in self.payments.values() if c.status is InvoiceStatus.PAID)


@dataclass(frozen=True)
class Rekapan:
    periodes: List[str]
    rows: List[RekapanRow] = field(default_factory=list)
