# home.py
import streamlit as st

from uangkas.dashboard.ui import clear_session_state, get_client, get_session
from uangkas.utils.core.logs import setup_logger
from uangkas.utils.core.validators import ValidationError
from uangkas.utils.kas import KasApiClient, KasApiError, login, logout

st.set_page_config(page_title="Uang Kas — Admin", page_icon="💰", layout="wide")


@st.cache_resource
def _init_logging():
    # sekali per proses
    return setup_logger("dashboard")


_init_logging()
session = get_session()

# ---------------------- Login ----------------------
if not session.authenticated:
    st.title("💰 Uang Kas — Login Admin")
    with st.form("login"):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Masuk", type="primary", use_container_width=True)
    if submitted:
        try:
            ctx = login(KasApiClient(), username, password)
        except ValidationError as e:
            st.error(str(e))
        except KasApiError as e:
            st.error(f"Login gagal: {e}")
        else:
            session.start(ctx)
            st.rerun()
    st.stop()

# ---------------------- Home ----------------------
ctx = session.context
st.title("💰 Uang Kas — Admin")
st.caption(f"Masuk sebagai **{ctx.username}**" + (f" ({ctx.role})" if ctx.role else ""))

st.markdown("""
### Menu
- **📊 Dashboard (00):** statistik notifikasi dan log terbaru per tanggal.
- **👥 Member (01):** daftar, cari, tambah, ubah dan hapus member.
- **🧾 Invoice (02):** tagihan per periode, setujui pembayaran, unggah bukti.
- **📅 Rekapan (03):** matriks pembayaran member × periode, unduh CSV/XLSX.
- **🔔 Notifikasi (04):** log notifikasi lengkap dengan paginasi server.
""")

cols = st.columns(3)
with cols[0]:
    st.page_link("pages/00_dashboard.py", label="📊 Dashboard", icon="↗")
    st.page_link("pages/03_rekapan.py", label="📅 Rekapan", icon="↗")
with cols[1]:
    st.page_link("pages/01_member.py", label="👥 Member", icon="↗")
    st.page_link("pages/04_notifikasi.py", label="🔔 Notifikasi", icon="↗")
with cols[2]:
    st.page_link("pages/02_invoice.py", label="🧾 Invoice", icon="↗")

with st.sidebar:
    st.header("Akun")
    st.write(ctx.username)
    if st.button("🚪 Logout", use_container_width=True):
        try:
            logout(session, get_client())
        except KasApiError:
            st.toast("Logout di server gagal; sesi lokal tetap dihapus")
        clear_session_state()
        st.rerun()
