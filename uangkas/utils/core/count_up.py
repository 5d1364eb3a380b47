# uangkas/utils/core/count_up.py
from __future__ import annotations

import math
import time
from typing import Callable, Iterator, Sequence, Tuple

DEFAULT_DURATION_SEC = 0.8
DEFAULT_FPS = 30


def count_up_value(target: int, elapsed: float, duration: float = DEFAULT_DURATION_SEC) -> int:
    """Nilai animasi pada waktu `elapsed`: floor(min(elapsed/duration, 1) * target)."""
    if duration <= 0:
        return int(target)
    percent = min(max(elapsed, 0.0) / duration, 1.0)
    return int(math.floor(percent * target))


def count_up_many(
    targets: Sequence[int],
    duration: float = DEFAULT_DURATION_SEC,
    fps: int = DEFAULT_FPS,
    *,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> Iterator[Tuple[int, ...]]:
    """
    Beberapa angka naik bersama dengan jam yang sama (kartu statistik).
    Tuple hanya dikirim bila ada yang berubah; tuple terakhir selalu = targets.
    """
    targets = tuple(int(t) for t in targets)
    start = clock()
    last = None
    interval = 1.0 / max(1, fps)
    while True:
        elapsed = clock() - start
        values = tuple(count_up_value(t, elapsed, duration) for t in targets)
        if values != last:
            yield values
            last = values
        if elapsed >= duration:
            break
        sleep(interval)
    if last != targets:
        yield targets


def count_up_frames(
    target: int,
    duration: float = DEFAULT_DURATION_SEC,
    fps: int = DEFAULT_FPS,
    *,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> Iterator[int]:
    """Urutan nilai 0 → target (naik monoton, tanpa nilai berulang)."""
    for (value,) in count_up_many([target], duration, fps, clock=clock, sleep=sleep):
        yield value
