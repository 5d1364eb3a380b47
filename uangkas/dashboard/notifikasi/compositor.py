# uangkas/dashboard/notifikasi/compositor.py
from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

import pandas as pd

from uangkas.config.paths import APP_TIMEZONE
from uangkas.utils.core.formatters import format_jam, format_tanggal
from uangkas.utils.kas.schema import Notification, NotificationStats
from uangkas.utils.notifications.aggregator import group_by_date, stats_total, status_label

_COLS = ["Waktu", "Penerima", "Channel", "Status", "Pesan"]

_ICON = {"Terkirim": "✅", "Gagal": "❌", "Pending": "⏳"}


def _row(n: Notification, tz: str, dengan_tanggal: bool) -> Dict[str, str]:
    label = status_label(n.status)
    row = {"Tanggal": format_tanggal(n.time, tz)} if dengan_tanggal else {}
    row.update({
        "Waktu": format_jam(n.time, tz),
        "Penerima": n.receiver,
        "Channel": n.channel or "-",
        "Status": f"{_ICON[label]} {label}",
        "Pesan": n.message or "",
    })
    return row


def tabel_notifikasi(
    notifs: Iterable[Notification],
    tz: str = APP_TIMEZONE,
    *,
    dengan_tanggal: bool = False,
) -> pd.DataFrame:
    cols = ["Tanggal", *_COLS] if dengan_tanggal else _COLS
    return pd.DataFrame([_row(n, tz, dengan_tanggal) for n in notifs], columns=cols)


def tabel_per_tanggal(notifs: Iterable[Notification], tz: str = APP_TIMEZONE) -> List[Tuple[str, pd.DataFrame]]:
    """[(label tanggal, tabel)] dalam urutan kemunculan."""
    return [(tanggal, tabel_notifikasi(isi, tz)) for tanggal, isi in group_by_date(notifs, tz).items()]


def kartu_stats(stats: NotificationStats) -> List[Tuple[str, int]]:
    """Label + nilai kartu statistik dashboard."""
    return [
        ("Total Notifikasi", stats_total(stats)),
        ("Terkirim", stats.notif_terkirim),
        ("Gagal", stats.notif_gagal),
        ("Pending", stats.notif_pending),
    ]
