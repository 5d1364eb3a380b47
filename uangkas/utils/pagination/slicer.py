# uangkas/utils/pagination/slicer.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, TypeVar, Union

from uangkas.config.paths import DEFAULT_PAGE_SIZE

T = TypeVar("T")

ELLIPSIS = "..."


@dataclass
class ClientSlicer:
    """Paginasi lokal untuk endpoint list biasa. page 1-indexed."""

    page: int = 1
    size: int = DEFAULT_PAGE_SIZE

    def total_pages(self, items: Sequence) -> int:
        return math.ceil(len(items) / self.size)

    def current_items(self, items: Sequence[T]) -> List[T]:
        start = (self.page - 1) * self.size
        return list(items[start:start + self.size])

    def set_size(self, new_size: int) -> None:
        if int(new_size) < 1:
            raise ValueError(f"size harus >= 1 (diterima {new_size})")
        self.size = int(new_size)
        self.page = 1

    def set_page(self, p: int, items: Sequence) -> int:
        total = max(1, self.total_pages(items))
        self.page = min(max(1, int(p)), total)
        return self.page

    def window_bounds(self, items: Sequence) -> tuple[int, int]:
        n = len(items)
        if n == 0:
            return 0, 0
        start = (self.page - 1) * self.size + 1
        return min(start, n), min(n, self.page * self.size)


def page_numbers(current: int, total: int, max_visible: int = 5) -> List[Union[int, str]]:
    """
    Daftar tombol halaman ringkas (1-indexed), mis.:
      total<=5          → [1, 2, 3, 4, 5]
      current<=3        → [1, 2, 3, 4, "...", N]
      current>=N-2      → [1, "...", N-3, N-2, N-1, N]
      tengah            → [1, "...", c-1, c, c+1, "...", N]
    """
    if total <= max_visible:
        return list(range(1, total + 1))
    if current <= 3:
        return [1, 2, 3, 4, ELLIPSIS, total]
    if current >= total - 2:
        return [1, ELLIPSIS] + list(range(total - 3, total + 1))
    return [1, ELLIPSIS, current - 1, current, current + 1, ELLIPSIS, total]
