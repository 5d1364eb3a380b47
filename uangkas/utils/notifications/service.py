# uangkas/utils/notifications/service.py
from __future__ import annotations

from typing import Any, Dict

from uangkas.config.paths import DEFAULT_PAGE_SIZE, SERVER_PAGE_SIZE_OPTIONS
from uangkas.utils.kas.client import KasApiClient
from uangkas.utils.kas.schema import Notification
from uangkas.utils.notifications.aggregator import count_by_status, group_by_date, stats_total
from uangkas.utils.pagination.controller import PaginatedResourceController

__all__ = ["make_notification_controller", "ringkasan_notifikasi"]


def make_notification_controller(
    client: KasApiClient,
    *,
    name: str = "notifikasi",
    initial_size: int = DEFAULT_PAGE_SIZE,
) -> PaginatedResourceController[Notification]:
    """Satu controller per layar (dashboard dan log berdiri sendiri)."""
    return PaginatedResourceController(
        client.list_notifications,
        name=name,
        page_size_options=SERVER_PAGE_SIZE_OPTIONS,
        initial_size=initial_size,
    )


def ringkasan_notifikasi(client: KasApiClient, *, page: int = 0, size: int = DEFAULT_PAGE_SIZE) -> Dict[str, Any]:
    """
    Ringkasan serializable (untuk script CLI): statistik server + satu halaman
    log dikelompokkan per tanggal.
    """
    stats = client.notification_stats()
    resp = client.list_notifications(page=page, size=size)
    grup = group_by_date(resp.data)
    return {
        "stats": {
            "total": stats_total(stats),
            "terkirim": stats.notif_terkirim,
            "gagal": stats.notif_gagal,
            "pending": stats.notif_pending,
        },
        "page": {
            "page": resp.page,
            "size": resp.size,
            "total_items": resp.total_items,
            "total_pages": resp.total_pages,
            "has_next": resp.has_next,
            "has_previous": resp.has_previous,
        },
        "status_halaman_ini": {s.value: n for s, n in count_by_status(resp.data).items()},
        "per_tanggal": {
            tanggal: [
                {
                    "id": n.id,
                    "receiver": n.receiver,
                    "time": n.time.isoformat() if n.time else None,
                    "status": n.status.value,
                    "channel": n.channel,
                    "message": n.message,
                }
                for n in isi
            ]
            for tanggal, isi in grup.items()
        },
    }
