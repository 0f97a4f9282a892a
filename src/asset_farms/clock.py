"""Clock implementations."""

from __future__ import annotations

import time


class SystemClock:
    """Wall-clock nanoseconds that never go backwards within a process."""

    def __init__(self) -> None:
        self._last = 0

    def now(self) -> int:
        self._last = max(self._last, time.time_ns())
        return self._last


class FixedClock:
    """Manually driven clock for replays and tests."""

    def __init__(self, start: int = 0) -> None:
        self._now = start

    def now(self) -> int:
        return self._now

    def set(self, timestamp: int) -> None:
        self._now = timestamp

    def advance(self, nanos: int) -> int:
        self._now += nanos
        return self._now
