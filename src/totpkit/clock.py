"""Time sources for the TOTP engine.

The engine never calls ``time.time()`` itself; it reads the wall clock through
a ``Clock`` callable so tests (and the CLI ``--time`` flag) can pin it.
"""

from __future__ import annotations

import time
from collections.abc import Callable

Clock = Callable[[], float]


def system_clock() -> float:
    """Current Unix time in seconds."""
    return time.time()


class FixedClock:
    """A clock that only moves when told to."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def set(self, now: float) -> None:
        self.now = now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __repr__(self) -> str:
        return f"FixedClock(now={self.now!r})"
