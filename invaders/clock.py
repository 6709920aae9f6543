"""Clock abstractions injected into time dependent components."""
from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Anything able to report a monotonic timestamp in seconds."""

    def now(self) -> float:
        ...


class MonotonicClock:
    """Clock backed by :func:`time.monotonic`."""

    def now(self) -> float:
        return time.monotonic()


class ManualClock:
    """Clock that only moves when told to.

    The update loop advances it by one timestep per simulated tick so that
    cooldowns depend on simulated time rather than on how fast the host
    machine happens to run.
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = start

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> float:
        if seconds < 0:
            raise ValueError("Clocks cannot run backwards")
        self._now += seconds
        return self._now


__all__ = ["Clock", "ManualClock", "MonotonicClock"]
