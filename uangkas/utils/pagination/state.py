# uangkas/utils/pagination/state.py
"""
State paginasi untuk layar yang dipaginasi server (page 0-indexed).

Server adalah satu-satunya sumber metadata: total_pages/has_next/has_previous
diambil apa adanya dari respons, tidak dihitung ulang di klien.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from uangkas.config.paths import DEFAULT_PAGE_SIZE
from uangkas.utils.kas.schema import PaginatedResponse


def compute_total_pages(total_items: int, size: int) -> int:
    if size < 1:
        raise ValueError(f"size harus >= 1 (diterima {size})")
    return math.ceil(max(0, total_items) / size)


def compute_has_next(page: int, total_pages: int) -> bool:
    return page + 1 < total_pages


def compute_has_previous(page: int) -> bool:
    return page > 0


def clamp_page(page: int, total_pages: int) -> int:
    """Batasi ke [0, total_pages-1]; 0 bila belum ada halaman."""
    if total_pages <= 0:
        return 0
    return min(max(0, page), total_pages - 1)


@dataclass
class PaginationState:
    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    total_items: int = 0
    total_pages: int = 0
    has_next: bool = False
    has_previous: bool = False

    def set_size(self, new_size: int) -> None:
        # offset item dengan size lama tidak berlaku lagi → kembali ke halaman pertama
        if int(new_size) < 1:
            raise ValueError(f"size harus >= 1 (diterima {new_size})")
        self.size = int(new_size)
        self.page = 0

    def can_go_to(self, p: int) -> bool:
        if self.total_pages == 0:
            return p == 0
        return 0 <= p < self.total_pages

    def set_page(self, p: int) -> None:
        if not self.can_go_to(p):
            raise ValueError(f"Halaman {p} di luar rentang (total_pages={self.total_pages})")
        self.page = int(p)

    def next_page(self) -> bool:
        if not self.has_next:
            return False
        self.page += 1
        return True

    def previous_page(self) -> bool:
        if not self.has_previous:
            return False
        self.page -= 1
        return True

    def apply_server_response(self, resp: PaginatedResponse) -> None:
        self.page = resp.page
        self.size = resp.size
        self.total_items = resp.total_items
        self.total_pages = resp.total_pages
        self.has_next = resp.has_next
        self.has_previous = resp.has_previous

    def window_bounds(self) -> tuple[int, int]:
        """(awal, akhir) 1-based item yang tampil, untuk teks 'Menampilkan X–Y dari N'."""
        if self.total_items <= 0:
            return 0, 0
        start = self.page * self.size + 1
        end = min(self.total_items, (self.page + 1) * self.size)
        return start, end
