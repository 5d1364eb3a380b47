# pages/03_rekapan.py
from __future__ import annotations

import streamlit as st

from uangkas.dashboard.rekapan.compositor import tabel_rekapan
from uangkas.dashboard.ui import client_pager, get_controller, report_outcome, require_client
from uangkas.utils.core.formatters import format_rupiah
from uangkas.utils.kas.schema import Rekapan
from uangkas.utils.pagination.controller import ListResourceController
from uangkas.utils.rekapan.export import (
    CSV_MIME, XLSX_MIME, export_filename, rekapan_csv_bytes, rekapan_xlsx_bytes,
)
from uangkas.utils.rekapan.service import muat_rekapan, ringkasan_rekapan

st.set_page_config(page_title="Rekapan — Uang Kas", page_icon="📅", layout="wide")
st.title("📅 Rekapan Pembayaran")
st.caption("Member × periode. ✓ = lunas, ✗ = belum / tidak ada invoice.")

client = require_client()
REKAPAN_KEY = "rekapan_value"


def _fetch():
    rekapan = muat_rekapan(client)
    st.session_state[REKAPAN_KEY] = rekapan
    return rekapan.rows


ctrl: ListResourceController = get_controller("rekapan_ctrl", lambda: ListResourceController(_fetch, name="rekapan"))

with st.spinner("Memuat rekapan..."):
    report_outcome(ctrl.mount(), ctrl.last_error, "Gagal memuat rekapan")

def _reload() -> None:
    report_outcome(ctrl.reload(), ctrl.last_error, "Gagal memuat rekapan")


rekapan: Rekapan = st.session_state.get(REKAPAN_KEY) or Rekapan(periodes=[])

# ---------------------- KPIs ----------------------
r = ringkasan_rekapan(rekapan)
k = st.columns(4)
k[0].metric("Member", r["members"])
k[1].metric("Periode", r["periodes"])
k[2].metric("Total terkumpul", format_rupiah(r["total_bayar"]))
k[3].metric("Tagihan belum lunas", r["sel_belum"])

# ---------------------- Aksi ----------------------
a1, a2, a3 = st.columns([1, 1, 1])
with a1:
    st.button("🔁 Muat ulang", use_container_width=True, on_click=_reload)
with a2:
    st.download_button(
        "📥 Unduh CSV",
        data=rekapan_csv_bytes(rekapan),
        file_name=export_filename("csv"),
        mime=CSV_MIME,
        disabled=not rekapan.rows,
        use_container_width=True,
        key="rekapan_dl_csv",
    )
with a3:
    st.download_button(
        "📥 Unduh Excel (.xlsx)",
        data=rekapan_xlsx_bytes(rekapan),
        file_name=export_filename("xlsx"),
        mime=XLSX_MIME,
        disabled=not rekapan.rows,
        use_container_width=True,
        key="rekapan_dl_xlsx",
    )

# ---------------------- Matriks ----------------------
if not rekapan.rows:
    st.info("Belum ada data rekapan.")
else:
    baris = client_pager(ctrl, rekapan.rows, key="rekapan")
    st.dataframe(
        tabel_rekapan(Rekapan(periodes=rekapan.periodes, rows=baris)),
        use_container_width=True,
        hide_index=True,
    )
