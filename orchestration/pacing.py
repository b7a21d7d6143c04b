"""
Request pacing for sequential fetches.

The upstream price source has no published rate limit, so requests are
spaced by a fixed interval. Pacers are swappable so a smarter limiter
can replace the interval gate without touching fetch logic.
"""

import time
from typing import Callable, Protocol


class Pacer(Protocol):
    """Gate called before every request; the first call never blocks."""

    def wait(self) -> None:
        ...


class IntervalPacer:
    """
    Enforce a minimum interval between the starts of consecutive requests.

    Only the remainder of the interval is slept: time spent inside the
    previous request counts toward it.
    """

    def __init__(
        self,
        interval_seconds: float,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if interval_seconds < 0:
            raise ValueError(f"interval_seconds must be >= 0, got {interval_seconds}")
        self.interval_seconds = interval_seconds
        self._clock = clock
        self._sleep = sleep
        self._last: float | None = None

    def wait(self) -> None:
        now = self._clock()
        if self._last is not None:
            remaining = self.interval_seconds - (now - self._last)
            if remaining > 0:
                self._sleep(remaining)
                now = self._clock()
        self._last = now


class NoPacing:
    """Pacer that never waits (offline sources, tests)."""

    def wait(self) -> None:
        return None
