# pages/00_dashboard.py
from __future__ import annotations

import streamlit as st

from uangkas.dashboard.notifikasi.compositor import kartu_stats, tabel_per_tanggal
from uangkas.dashboard.ui import (
    animated_metrics, get_controller, report_outcome, require_client, server_pager,
)
from uangkas.utils.notifications.service import make_notification_controller
from uangkas.utils.pagination.controller import FetchGuard

st.set_page_config(page_title="Dashboard — Uang Kas", page_icon="📊", layout="wide")
st.title("📊 Dashboard")
st.caption("Statistik notifikasi dan log terbaru, dikelompokkan per tanggal (WIB).")

client = require_client()

stats_guard: FetchGuard = get_controller("dash_stats_guard", lambda: FetchGuard("stats"))
ctrl = get_controller("dash_notif_ctrl", lambda: make_notification_controller(client, name="dashboard"))


def _set_stats(stats) -> None:
    st.session_state["dash_stats"] = stats


with st.spinner("Memuat data..."):
    report_outcome(
        stats_guard.mount(client.notification_stats, _set_stats),
        stats_guard.last_error, "Gagal memuat statistik",
    )
    report_outcome(ctrl.mount(), ctrl.last_error, "Gagal memuat notifikasi")

if st.button("🔁 Muat ulang"):
    with st.spinner("Memuat ulang..."):
        report_outcome(stats_guard.load(client.notification_stats, _set_stats),
                       stats_guard.last_error, "Gagal memuat statistik")
        report_outcome(ctrl.refresh(), ctrl.last_error, "Gagal memuat notifikasi")

# ---------------------- Kartu statistik ----------------------
stats = st.session_state.get("dash_stats")
if stats is not None:
    cols = st.columns(4)
    animated_metrics([(col, label, nilai) for col, (label, nilai) in zip(cols, kartu_stats(stats))], key="dash")
else:
    st.info("Statistik belum tersedia.")

st.divider()

# ---------------------- Notifikasi per tanggal ----------------------
st.subheader("🔔 Notifikasi terbaru")
if not ctrl.items:
    st.info("Tidak ada notifikasi.")
else:
    for tanggal, df in tabel_per_tanggal(ctrl.items):
        st.markdown(f"**{tanggal}**")
        st.dataframe(df, use_container_width=True, hide_index=True)

server_pager(ctrl, key="dash_notif", pesan_gagal="Gagal memuat notifikasi")
