# uangkas/utils/notifications/aggregator.py
from __future__ import annotations

from typing import Dict, Iterable, List

from uangkas.config.paths import APP_TIMEZONE
from uangkas.utils.core.formatters import format_tanggal
from uangkas.utils.kas.schema import Notification, NotificationStats, NotificationStatus

__all__ = ["group_by_date", "count_by_status", "status_label", "stats_total"]

_LABELS = {
    NotificationStatus.SENT: "Terkirim",
    NotificationStatus.FAILED: "Gagal",
    NotificationStatus.PENDING: "Pending",
}


def group_by_date(notifs: Iterable[Notification], tz: str = APP_TIMEZONE) -> Dict[str, List[Notification]]:
    """
    Tanggal lokal ('5 Jan 2025') → notifikasi pada tanggal itu.
    Urutan kunci = urutan kemunculan pertama; urutan di dalam grup = urutan server.
    """
    out: Dict[str, List[Notification]] = {}
    for n in notifs:
        out.setdefault(format_tanggal(n.time, tz), []).append(n)
    return out


def count_by_status(notifs: Iterable[Notification]) -> Dict[NotificationStatus, int]:
    out = {s: 0 for s in NotificationStatus}
    for n in notifs:
        out[n.status] += 1
    return out


def status_label(status: NotificationStatus) -> str:
    return _LABELS[status]


def stats_total(stats: NotificationStats) -> int:
    """Total kartu dashboard = terkirim + gagal + pending."""
    return stats.notif_terkirim + stats.notif_gagal + stats.notif_pending
