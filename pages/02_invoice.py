# pages/02_invoice.py
from __future__ import annotations

from datetime import date

import streamlit as st

from uangkas.config.paths import DEFAULT_INVOICE_AMOUNT
from uangkas.dashboard.invoices.compositor import invoice_label, kpis_invoices, tabel_invoices
from uangkas.dashboard.members.compositor import member_options
from uangkas.dashboard.ui import client_pager, get_controller, report_outcome, require_client, run_action
from uangkas.utils.invoices.filters import filter_by_status, search_invoices
from uangkas.utils.invoices.service import buat_invoice, muat_invoices_dan_members, setujui_invoice, unggah_bukti
from uangkas.utils.kas.schema import InvoiceStatus
from uangkas.utils.pagination.controller import ListResourceController

st.set_page_config(page_title="Invoice — Uang Kas", page_icon="🧾", layout="wide")
st.title("🧾 Invoice")

client = require_client()
MEMBERS_KEY = "invoice_members"


def _fetch():
    invoices, members = muat_invoices_dan_members(client)
    st.session_state[MEMBERS_KEY] = members
    return invoices


ctrl: ListResourceController = get_controller("invoice_ctrl", lambda: ListResourceController(_fetch, name="invoice"))

with st.spinner("Memuat invoice..."):
    report_outcome(ctrl.mount(), ctrl.last_error, "Gagal memuat invoice")


def _reload() -> None:
    report_outcome(ctrl.reload(), ctrl.last_error, "Gagal memuat invoice")


members_aktif = st.session_state.get(MEMBERS_KEY, [])

# ---------------------- KPIs ----------------------
k = kpis_invoices(ctrl.items)
c = st.columns(5)
c[0].metric("Total invoice", k["total"])
c[1].metric("Lunas", k["lunas"])
c[2].metric("Belum lunas", k["belum"])
c[3].metric("Terkumpul", k["terkumpul"])
c[4].metric("Tertunggak", k["tertunggak"])

# ---------------------- Tabel ----------------------
FILTER_STATUS = {"Semua": None, "Lunas": InvoiceStatus.PAID, "Belum Lunas": InvoiceStatus.UNPAID}
f1, f2, f3 = st.columns([3, 1, 1])
with f1:
    kata_kunci = st.text_input("🔎 Cari (nama member atau periode MMYYYY)", key="invoice_q")
with f2:
    status_sel = st.selectbox("Status", list(FILTER_STATUS), key="invoice_status")
with f3:
    st.write("")
    st.button("🔁 Muat ulang", use_container_width=True, on_click=_reload)

hasil = filter_by_status(search_invoices(ctrl.items, kata_kunci), FILTER_STATUS[status_sel])
if not hasil:
    st.warning("Tidak ada invoice yang cocok." if (kata_kunci or FILTER_STATUS[status_sel]) else "Belum ada invoice.")
else:
    halaman = client_pager(ctrl, hasil, key="invoice")
    st.dataframe(tabel_invoices(halaman), use_container_width=True, hide_index=True)

st.divider()

tab_new, tab_ok, tab_up = st.tabs(["➕ Invoice baru", "✅ Setujui pembayaran", "📎 Unggah bukti"])

# ---------------------- Invoice baru ----------------------
with tab_new:
    opsi = member_options(members_aktif)
    if not opsi:
        st.info("Tidak ada member aktif.")
    else:
        with st.form("invoice_new", clear_on_submit=True):
            mid = st.selectbox("Member (aktif)", list(opsi), format_func=opsi.get)
            periode = st.text_input("Periode (YYYY-MM)", value=date.today().strftime("%Y-%m"))
            nominal = st.number_input("Nominal (Rp)", min_value=0, step=1000, value=DEFAULT_INVOICE_AMOUNT)
            if st.form_submit_button("Buat invoice", type="primary"):
                if run_action(
                    lambda: buat_invoice(client, members_aktif, member_id=mid, periode=periode, amount=int(nominal)),
                    "Invoice dibuat", "Gagal membuat invoice",
                ):
                    _reload()
                    st.rerun()

by_id = {i.id: i for i in ctrl.items}

# ---------------------- Setujui ----------------------
with tab_ok:
    belum = [i.id for i in filter_by_status(ctrl.items, InvoiceStatus.UNPAID)]
    if not belum:
        st.info("Semua invoice sudah lunas.")
    else:
        iid = st.selectbox("Invoice", belum, format_func=lambda x: invoice_label(by_id[x]), key="invoice_ok_sel")
        if st.button("Setujui pembayaran", type="primary"):
            if run_action(lambda: setujui_invoice(client, by_id[iid]),
                          "Pembayaran disetujui", "Gagal menyetujui pembayaran"):
                _reload()
                st.rerun()

# ---------------------- Unggah bukti ----------------------
with tab_up:
    if not by_id:
        st.info("Belum ada invoice.")
    else:
        iid = st.selectbox("Invoice", list(by_id), format_func=lambda x: invoice_label(by_id[x]), key="invoice_up_sel")
        berkas = st.file_uploader("Bukti pembayaran", type=["jpg", "jpeg", "png", "pdf"], key=f"invoice_up_{iid}")
        if st.button("Unggah", type="primary", disabled=berkas is None):
            if run_action(
                lambda: unggah_bukti(client, iid, berkas.name, berkas.getvalue(), berkas.type),
                "Bukti pembayaran diunggah", "Gagal upload bukti pembayaran",
            ):
                _reload()
                st.rerun()
