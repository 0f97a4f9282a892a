"""Clock protocol - the host's logical time source."""

from __future__ import annotations

from typing import Protocol


class Clock(Protocol):
    """Monotonically non-decreasing nanosecond timestamps."""

    def now(self) -> int:
        ...
