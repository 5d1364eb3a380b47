# uangkas/utils/pagination/controller.py
"""
Controller resource berpaginasi + guard fetch.

FetchGuard: paling banyak satu request berjalan per resource. Panggilan load
saat masih ada request berjalan diabaikan (tidak diantrekan). Gagal → state
lama tetap utuh, error dicatat di `last_error`, flag dilepas di `finally`.

PaginatedResourceController: satu implementasi untuk semua layar yang
dipaginasi server (dashboard + log notifikasi). ListResourceController:
padanannya untuk endpoint list biasa dengan paginasi lokal.
"""
from __future__ import annotations

import dataclasses
import logging
import threading
from enum import Enum
from typing import Callable, Generic, List, Optional, Sequence, Tuple, TypeVar

from uangkas.config.paths import CLIENT_PAGE_SIZE_OPTIONS, DEFAULT_PAGE_SIZE, SERVER_PAGE_SIZE_OPTIONS
from uangkas.utils.kas.schema import PaginatedResponse
from uangkas.utils.pagination.slicer import ClientSlicer
from uangkas.utils.pagination.state import PaginationState

T = TypeVar("T")
R = TypeVar("R")


class LoadOutcome(str, Enum):
    OK = "ok"
    FAILED = "failed"
    SKIPPED = "skipped"


class FetchGuard:
    def __init__(self, name: str = "resource") -> None:
        self.name = name
        self._lock = threading.Lock()
        self._mounted = False
        self.loading = False
        self.last_error: Optional[BaseException] = None

    @property
    def in_flight(self) -> bool:
        return self._lock.locked()

    @property
    def mounted(self) -> bool:
        return self._mounted

    def load(
        self,
        fetch: Callable[[], R],
        apply: Callable[[R], None],
        *,
        show_loading: bool = True,
    ) -> LoadOutcome:
        if not self._lock.acquire(blocking=False):
            logging.info("%s: load masih berjalan, panggilan diabaikan", self.name)
            return LoadOutcome.SKIPPED
        try:
            if show_loading:
                self.loading = True
            try:
                result = fetch()
            except Exception as e:
                self.last_error = e
                logging.exception("%s: gagal memuat data: %s", self.name, e)
                return LoadOutcome.FAILED
            apply(result)
            self.last_error = None
            return LoadOutcome.OK
        finally:
            if show_loading:
                self.loading = False
            self._lock.release()

    def mount(self, fetch: Callable[[], R], apply: Callable[[R], None], *, show_loading: bool = True) -> LoadOutcome:
        """Load awal tepat satu kali; mount berikutnya no-op."""
        if self._mounted:
            return LoadOutcome.SKIPPED
        self._mounted = True
        return self.load(fetch, apply, show_loading=show_loading)


class PaginatedResourceController(Generic[T]):
    """
    Parameter: fetch_page(page, size) → PaginatedResponse[T].

    Perubahan page/size disiapkan pada salinan state; state asli hanya ditimpa
    dari respons server yang berhasil. Jadi request gagal/diabaikan tidak
    mengubah apa yang sedang ditampilkan.
    """

    def __init__(
        self,
        fetch_page: Callable[[int, int], PaginatedResponse[T]],
        *,
        name: str = "resource",
        page_size_options: Sequence[int] = SERVER_PAGE_SIZE_OPTIONS,
        initial_size: int = DEFAULT_PAGE_SIZE,
        on_applied: Optional[Callable[[PaginatedResponse[T]], None]] = None,
    ) -> None:
        self.fetch_page = fetch_page
        self.page_size_options: Tuple[int, ...] = tuple(page_size_options)
        self.state = PaginationState(size=initial_size)
        self.items: List[T] = []
        self.guard = FetchGuard(name)
        self.on_applied = on_applied

    @property
    def loading(self) -> bool:
        return self.guard.loading

    @property
    def last_error(self) -> Optional[BaseException]:
        return self.guard.last_error

    def _apply(self, resp: PaginatedResponse[T]) -> None:
        self.items = list(resp.data)
        self.state.apply_server_response(resp)
        if self.on_applied is not None:
            self.on_applied(resp)

    def _load(self, target: PaginationState, show_loading: bool) -> LoadOutcome:
        page, size = target.page, target.size
        return self.guard.load(lambda: self.fetch_page(page, size), self._apply, show_loading=show_loading)

    def mount(self, show_loading: bool = True) -> LoadOutcome:
        page, size = self.state.page, self.state.size
        return self.guard.mount(lambda: self.fetch_page(page, size), self._apply, show_loading=show_loading)

    def refresh(self, show_loading: bool = True) -> LoadOutcome:
        return self._load(dataclasses.replace(self.state), show_loading)

    def change_page(self, p: int, show_loading: bool = True) -> LoadOutcome:
        target = dataclasses.replace(self.state)
        target.set_page(p)
        return self._load(target, show_loading)

    def change_size(self, new_size: int, show_loading: bool = True) -> LoadOutcome:
        target = dataclasses.replace(self.state)
        target.set_size(new_size)
        return self._load(target, show_loading)

    def next_page(self, show_loading: bool = True) -> LoadOutcome:
        target = dataclasses.replace(self.state)
        if not target.next_page():
            return LoadOutcome.SKIPPED
        return self._load(target, show_loading)

    def previous_page(self, show_loading: bool = True) -> LoadOutcome:
        target = dataclasses.replace(self.state)
        if not target.previous_page():
            return LoadOutcome.SKIPPED
        return self._load(target, show_loading)


class ListResourceController(Generic[T]):
    """Endpoint list biasa (tanpa paginasi server): muat semua, iris lokal (1-indexed)."""

    def __init__(
        self,
        fetch_all: Callable[[], Sequence[T]],
        *,
        name: str = "list",
        page_size_options: Sequence[int] = CLIENT_PAGE_SIZE_OPTIONS,
        initial_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self.fetch_all = fetch_all
        self.page_size_options: Tuple[int, ...] = tuple(page_size_options)
        self.slicer = ClientSlicer(page=1, size=initial_size)
        self.items: List[T] = []
        self.guard = FetchGuard(name)

    @property
    def loading(self) -> bool:
        return self.guard.loading

    @property
    def last_error(self) -> Optional[BaseException]:
        return self.guard.last_error

    def _apply(self, data: Sequence[T]) -> None:
        self.items = list(data)
        # data baru bisa lebih pendek; jaga halaman tetap valid
        self.slicer.set_page(self.slicer.page, self.items)

    def mount(self, show_loading: bool = True) -> LoadOutcome:
        return self.guard.mount(self.fetch_all, self._apply, show_loading=show_loading)

    def reload(self, show_loading: bool = True) -> LoadOutcome:
        return self.guard.load(self.fetch_all, self._apply, show_loading=show_loading)

    def page_items(self, items: Optional[Sequence[T]] = None) -> List[T]:
        """Item halaman aktif; `items` boleh berupa hasil filter pencarian."""
        return self.slicer.current_items(self.items if items is None else items)

    def total_pages(self, items: Optional[Sequence[T]] = None) -> int:
        return self.slicer.total_pages(self.items if items is None else items)

    def set_page(self, p: int, items: Optional[Sequence[T]] = None) -> int:
        return self.slicer.set_page(p, self.items if items is None else items)

    def set_size(self, new_size: int) -> None:
        self.slicer.set_size(new_size)
