# pages/04_notifikasi.py
from __future__ import annotations

import streamlit as st

from uangkas.dashboard.notifikasi.compositor import tabel_notifikasi
from uangkas.dashboard.ui import get_controller, report_outcome, require_client, server_pager
from uangkas.utils.notifications.aggregator import count_by_status, status_label
from uangkas.utils.notifications.service import make_notification_controller

st.set_page_config(page_title="Notifikasi — Uang Kas", page_icon="🔔", layout="wide")
st.title("🔔 Log Notifikasi")

client = require_client()
ctrl = get_controller("notif_ctrl", lambda: make_notification_controller(client, name="notifikasi"))

with st.spinner("Memuat notifikasi..."):
    report_outcome(ctrl.mount(), ctrl.last_error, "Gagal memuat notifikasi")

c1, c2 = st.columns([1, 5])
with c1:
    st.button(
        "🔁 Muat ulang", use_container_width=True,
        on_click=lambda: report_outcome(ctrl.refresh(), ctrl.last_error, "Gagal memuat notifikasi"),
    )
with c2:
    ringkas = count_by_status(ctrl.items)
    st.caption(" • ".join(f"{status_label(s)}: {n}" for s, n in ringkas.items()) + " (halaman ini)")

if not ctrl.items:
    st.info("Tidak ada notifikasi.")
else:
    st.dataframe(tabel_notifikasi(ctrl.items, dengan_tanggal=True), use_container_width=True, hide_index=True)

server_pager(ctrl, key="notif", pesan_gagal="Gagal memuat notifikasi")
