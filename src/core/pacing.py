"""Fixed-rate loop pacing.

`FramePacer` measures how long a tick took and sleeps for what is left of the
tick budget. The sleep never drops below `min_sleep_ms`, so an overrunning
tick still yields the CPU briefly instead of spinning.
"""

from __future__ import annotations

import time
from typing import Callable

from config import FPS, MIN_SLEEP_MS


class FramePacer:
    def __init__(
        self,
        fps: int = FPS,
        min_sleep_ms: float = MIN_SLEEP_MS,
        *,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.budget_ms = 1000.0 / fps
        self.min_sleep_ms = float(min_sleep_ms)
        self._clock = clock
        self._sleep = sleep
        self._tick_start = clock()

    def begin_tick(self) -> None:
        self._tick_start = self._clock()

    def remaining_ms(self, elapsed_ms: float) -> float:
        return max(self.min_sleep_ms, self.budget_ms - elapsed_ms)

    def end_tick(self) -> float:
        """Sleep out the rest of the tick. Returns the sleep length in ms."""
        elapsed_ms = (self._clock() - self._tick_start) * 1000.0
        wait_ms = self.remaining_ms(elapsed_ms)
        self._sleep(wait_ms / 1000.0)
        return wait_ms


__all__ = ["FramePacer"]
