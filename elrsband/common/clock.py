# elrsband/common/clock.py
from __future__ import annotations

import time
from typing import Callable, Optional

DEFAULT_TICK_S = 0.01  # 10 ms, the radio's getTime() resolution


class MonotonicClock:
    """
    Integer tick counter derived from a monotonic time source.

    Ticks count from construction, so the first reading is 0.
    """

    def __init__(self, tick_s: float = DEFAULT_TICK_S, source: Optional[Callable[[], float]] = None):
        if tick_s <= 0:
            raise ValueError(f"tick_s must be > 0, got {tick_s}")
        self.tick_s = float(tick_s)
        self._source = source or time.monotonic
        self._t0 = self._source()

    def now(self) -> int:
        return int((self._source() - self._t0) / self.tick_s)
