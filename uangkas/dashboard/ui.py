from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Sequence, Tuple, TypeVar

import streamlit as st

from uangkas.utils.core.count_up import count_up_many
from uangkas.utils.core.validators import ValidationError
from uangkas.utils.kas.client import KasApiClient, KasApiError
from uangkas.utils.kas.session import KasSession
from uangkas.utils.pagination.controller import (
    ListResourceController, LoadOutcome, PaginatedResourceController,
)
from uangkas.utils.pagination.slicer import ELLIPSIS, page_numbers

T = TypeVar("T")

SESSION_KEY = "kas_session"
CLIENT_KEY = "kas_client"


# ---------------------------- sesi ----------------------------

def get_session() -> KasSession:
    """Satu KasSession per sesi browser Streamlit."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = KasSession()
    return st.session_state[SESSION_KEY]


def get_client() -> Optional[KasApiClient]:
    session = get_session()
    if not session.authenticated:
        return None
    cli = st.session_state.get(CLIENT_KEY)
    if cli is None or cli.token != session.context.token:
        cli = session.context.client()
        st.session_state[CLIENT_KEY] = cli
    return cli


def clear_session_state() -> None:
    """Dipanggil setelah logout: buang klien dan semua controller layar."""
    for k in list(st.session_state.keys()):
        if k != SESSION_KEY:
            del st.session_state[k]


def require_client() -> KasApiClient:
    cli = get_client()
    if cli is None:
        st.warning("Silakan login terlebih dahulu.")
        st.page_link("home.py", label="🔐 Ke halaman login")
        st.stop()
    return cli


def get_controller(key: str, factory: Callable[[], T]) -> T:
    """Controller hidup selama sesi; reruns Streamlit memakai instance yang sama."""
    if key not in st.session_state:
        st.session_state[key] = factory()
    return st.session_state[key]


# ---------------------------- feedback ----------------------------

def report_outcome(outcome: LoadOutcome, error: Optional[BaseException], pesan: str) -> None:
    if outcome is LoadOutcome.FAILED:
        st.toast(f"❌ {pesan}")
        if error is not None:
            st.caption(f"Detail: {error}")
    elif outcome is LoadOutcome.SKIPPED:
        logging.debug("Load diabaikan (masih berjalan)")


def run_action(action: Callable[[], Any], sukses: str, gagal: str) -> bool:
    """Eksekusi mutasi; toast hasilnya. ValidationError/KasApiError → toast, UI tetap interaktif."""
    try:
        action()
    except ValidationError as e:
        st.toast(f"⚠️ {e}")
        return False
    except KasApiError as e:
        logging.error("%s: %s", gagal, e)
        st.toast(f"❌ {gagal}")
        return False
    st.toast(f"✅ {sukses}")
    return True


# ---------------------------- paginasi ----------------------------

def server_pager(ctrl: PaginatedResourceController, key: str, pesan_gagal: str = "Gagal memuat data") -> None:
    """
    Kontrol halaman untuk resource berpaginasi server (0-indexed).
    Aksi lewat callback (dieksekusi sebelum rerun); bila load gagal/diabaikan,
    pilihan ukuran halaman dikembalikan ke nilai yang benar-benar tampil.
    """
    size_key, flash_key = f"{key}_size", f"{key}_flash"
    opts = list(ctrl.page_size_options)
    if size_key not in st.session_state:
        st.session_state[size_key] = ctrl.state.size if ctrl.state.size in opts else opts[0]

    def _done(outcome: LoadOutcome) -> None:
        st.session_state[flash_key] = (outcome, ctrl.last_error)

    def _on_size() -> None:
        outcome = ctrl.change_size(st.session_state[size_key])
        if outcome is not LoadOutcome.OK:
            st.session_state[size_key] = ctrl.state.size
        _done(outcome)

    if flash_key in st.session_state:
        outcome, err = st.session_state.pop(flash_key)
        report_outcome(outcome, err, pesan_gagal)

    state = ctrl.state
    c1, c2, c3, c4 = st.columns([2, 1, 1, 2])
    with c1:
        st.selectbox(
            "Per halaman", opts, key=size_key, on_change=_on_size,
            format_func=lambda n: f"{n} per halaman",
        )
    with c2:
        st.button(
            "◀ Sebelumnya", key=f"{key}_prev", disabled=not state.has_previous,
            on_click=lambda: _done(ctrl.previous_page()), use_container_width=True,
        )
    with c3:
        st.button(
            "Berikutnya ▶", key=f"{key}_next", disabled=not state.has_next,
            on_click=lambda: _done(ctrl.next_page()), use_container_width=True,
        )
    with c4:
        awal, akhir = state.window_bounds()
        st.caption(
            f"Menampilkan {awal}–{akhir} dari {state.total_items} • "
            f"halaman {state.page + 1 if state.total_pages else 0} dari {state.total_pages}"
        )


def client_pager(ctrl: ListResourceController, items: Sequence, key: str) -> List:
    """Kontrol halaman lokal (1-indexed). Mengembalikan item halaman aktif."""
    opts = list(ctrl.page_size_options)
    c1, c2 = st.columns([1, 3])
    with c1:
        idx = opts.index(ctrl.slicer.size) if ctrl.slicer.size in opts else 0
        size = st.selectbox(
            "Per halaman", opts, index=idx, key=f"{key}_size",
            format_func=lambda n: f"{n} per halaman",
        )
        if size != ctrl.slicer.size:
            ctrl.set_size(size)
    ctrl.set_page(ctrl.slicer.page, items)
    total = ctrl.total_pages(items)
    with c2:
        tombol = page_numbers(ctrl.slicer.page, total)
        if tombol:
            cols = st.columns(len(tombol))
            for i, (col, b) in enumerate(zip(cols, tombol)):
                if b == ELLIPSIS:
                    col.markdown("…")
                    continue
                jenis = "primary" if b == ctrl.slicer.page else "secondary"
                if col.button(str(b), key=f"{key}_p{i}_{b}", type=jenis):
                    ctrl.set_page(int(b), items)
                    st.rerun()
    awal, akhir = ctrl.slicer.window_bounds(items)
    st.caption(f"Menampilkan {awal}–{akhir} dari {len(items)} data")
    return ctrl.page_items(items)


# ---------------------------- count-up ----------------------------

def _angka(n: int) -> str:
    return f"{n:,}".replace(",", ".")


def animated_metrics(cards: Sequence[Tuple[Any, str, int]], key: str) -> None:
    """
    Kartu (kolom, label, nilai) naik 0 → nilai bersama-sama, sekali per
    kombinasi nilai; rerun berikutnya langsung menampilkan angka final.
    """
    slots = [(col.empty(), label) for col, label, _ in cards]
    targets = [v for _, _, v in cards]
    flag = f"_anim_{key}_{'_'.join(map(str, targets))}"
    frames = [tuple(targets)] if st.session_state.get(flag) else count_up_many(targets)
    for values in frames:
        for (ph, label), v in zip(slots, values):
            ph.metric(label, _angka(v))
    st.session_state[flag] = True
