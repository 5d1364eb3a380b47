# pages/01_member.py
from __future__ import annotations

import streamlit as st

from uangkas.dashboard.members.compositor import member_options, tabel_members
from uangkas.dashboard.ui import client_pager, get_controller, report_outcome, require_client, run_action
from uangkas.utils.kas.schema import MemberStatus
from uangkas.utils.members.filters import count_by_status, search_members
from uangkas.utils.members.service import hapus_member, member_form_from, muat_members, simpan_member
from uangkas.utils.pagination.controller import ListResourceController

st.set_page_config(page_title="Member — Uang Kas", page_icon="👥", layout="wide")
st.title("👥 Member")

client = require_client()
ctrl: ListResourceController = get_controller(
    "member_ctrl", lambda: ListResourceController(lambda: muat_members(client), name="member")
)

with st.spinner("Memuat member..."):
    report_outcome(ctrl.mount(), ctrl.last_error, "Gagal memuat member")


def _reload() -> None:
    report_outcome(ctrl.reload(), ctrl.last_error, "Gagal memuat member")


STATUS_OPTS = [s.value for s in MemberStatus]
STATUS_FMT = {"active": "Aktif", "inactive": "Tidak Aktif"}

# ---------------------- KPIs ----------------------
por_status = count_by_status(ctrl.items)
k1, k2, k3 = st.columns(3)
k1.metric("Total member", len(ctrl.items))
k2.metric("Aktif", por_status["active"])
k3.metric("Tidak aktif", por_status["inactive"])

# ---------------------- Tabel ----------------------
c1, c2 = st.columns([4, 1])
with c1:
    kata_kunci = st.text_input("🔎 Cari (nama atau no HP)", key="member_q", placeholder="Mis.: Budi, 0812...")
with c2:
    st.write("")
    st.button("🔁 Muat ulang", use_container_width=True, on_click=_reload)

hasil = search_members(ctrl.items, kata_kunci)
if not hasil:
    st.warning("Tidak ada member yang cocok." if kata_kunci else "Belum ada member.")
else:
    halaman = client_pager(ctrl, hasil, key="member")
    st.dataframe(tabel_members(halaman), use_container_width=True, hide_index=True)

st.divider()

# ---------------------- Form ----------------------
tab_add, tab_edit, tab_del = st.tabs(["➕ Tambah", "✏️ Ubah", "🗑️ Hapus"])

with tab_add:
    with st.form("member_add", clear_on_submit=True):
        nama = st.text_input("Nama")
        no_hp = st.text_input("No HP")
        status = st.selectbox("Status", STATUS_OPTS, format_func=STATUS_FMT.get)
        if st.form_submit_button("Simpan", type="primary"):
            if run_action(lambda: simpan_member(client, nama=nama, no_hp=no_hp, status=status),
                          "Member ditambahkan", "Gagal menambah member"):
                _reload()
                st.rerun()

# ---------------------- Ubah ----------------------
opsi = member_options(ctrl.items)
by_id = {m.id: m for m in ctrl.items}

with tab_edit:
    if not opsi:
        st.info("Belum ada member.")
    else:
        mid = st.selectbox("Member", list(opsi), format_func=opsi.get, key="member_edit_sel")
        awal = member_form_from(by_id.get(mid))
        with st.form(f"member_edit_{mid}"):
            nama = st.text_input("Nama", value=awal["nama"])
            no_hp = st.text_input("No HP", value=awal["no_hp"])
            status = st.selectbox("Status", STATUS_OPTS, index=STATUS_OPTS.index(awal["status"]),
                                  format_func=STATUS_FMT.get)
            if st.form_submit_button("Simpan perubahan", type="primary"):
                if run_action(
                    lambda: simpan_member(client, nama=nama, no_hp=no_hp, status=status, member_id=mid),
                    "Member diperbarui", "Gagal mengubah member",
                ):
                    _reload()
                    st.rerun()

# ---------------------- Hapus ----------------------
with tab_del:
    if not opsi:
        st.info("Belum ada member.")
    else:
        mid = st.selectbox("Member", list(opsi), format_func=opsi.get, key="member_del_sel")
        konfirmasi = st.checkbox("Saya yakin ingin menghapus member ini", key=f"member_del_ok_{mid}")
        if st.button("Hapus", type="primary", disabled=not konfirmasi):
            if run_action(lambda: hapus_member(client, mid), "Member dihapus", "Gagal menghapus member"):
                _reload()
                st.rerun()
