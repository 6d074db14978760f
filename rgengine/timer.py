"""Monotonic timer measuring whole milliseconds."""

from __future__ import annotations

import time
from typing import Callable

_NS_PER_MS = 1_000_000


class Timer:
    """Tracks time since creation and between successive ticks."""

    def __init__(self, clock: Callable[[], int] = time.monotonic_ns) -> None:
        self._clock = clock
        now = clock()
        self._start = now
        self._previous = now
        self._current = now

    def tick(self) -> None:
        self._previous = self._current
        self._current = self._clock()

    def elapsed_milliseconds(self) -> float:
        return float((self._clock() - self._start) // _NS_PER_MS)

    def elapsed_seconds(self) -> float:
        return self.elapsed_milliseconds() / 1000.0

    def delta_milliseconds(self) -> float:
        return float((self._current - self._previous) // _NS_PER_MS)

    def delta_seconds(self) -> float:
        return self.delta_milliseconds() / 1000.0