"""Frame driver that turns wall-clock time into simulation ticks."""
from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Optional, Tuple

from loguru import logger

from .clock import ManualClock
from .session import GameSession, InputSample, TickReport


class LoopMode(Enum):
    FIXED = "fixed"
    VARIABLE = "variable"


class UpdateLoop:
    """Feeds frames into a :class:`GameSession`.

    In ``FIXED`` mode elapsed time accumulates and the session is ticked with
    a constant step until less than one step remains, which keeps movement
    independent of the display refresh rate.  In ``VARIABLE`` mode the session
    is ticked exactly once per frame and speeds follow the frame rate.

    The loop owns the session's simulated clock: every tick advances it by
    the time that tick represents, so shot cooldowns are measured in
    simulated seconds.
    """

    def __init__(self, session: GameSession, mode: LoopMode = LoopMode.FIXED, tick_rate: Optional[int] = None):
        if not isinstance(session.clock, ManualClock):
            raise TypeError("UpdateLoop needs a session driven by a ManualClock")
        self.session = session
        self.mode = mode
        self.tick_rate = tick_rate or session.config.tick_rate
        if self.tick_rate <= 0:
            raise ValueError("Tick rate must be positive")
        self.step = 1.0 / self.tick_rate
        self.time_accumulator = 0.0
        self.frames = 0
        self.running = True
        self._pointer_x: Optional[float] = None
        self._fire_requested = False
        self._pause_requested = False

    def stop(self) -> None:
        """Stop ticking.  Takes effect before the next tick, never during one."""
        if self.running:
            logger.debug("Update loop stopped after {} frames", self.frames)
        self.running = False
        self.time_accumulator = 0.0
        self._fire_requested = False
        self._pause_requested = False

    def resume(self) -> None:
        self.running = True

    def advance(self, elapsed: float, sample: Optional[InputSample] = None) -> List[TickReport]:
        """Account for ``elapsed`` seconds of wall time and run the due ticks.

        Fire and pause requests are held until a tick consumes them: a frame
        shorter than one step keeps them for the next frame, and a frame that
        runs several catch-up steps applies them to the first step only.
        """
        if elapsed < 0:
            raise ValueError("Elapsed time cannot be negative")
        if not self.running:
            return []
        self.frames += 1
        clock = self.session.clock
        if self.mode is LoopMode.VARIABLE:
            clock.advance(elapsed)
            return [self.session.tick(sample)]

        if sample is not None:
            if sample.pointer_x is not None:
                self._pointer_x = sample.pointer_x
            self._fire_requested = self._fire_requested or sample.fire
            self._pause_requested = self._pause_requested or sample.pause

        reports = []
        self.time_accumulator += elapsed
        while self.running and self.time_accumulator >= self.step:
            self.time_accumulator -= self.step
            clock.advance(self.step)
            reports.append(self.session.tick(self._take_input()))
        return reports

    def _take_input(self) -> InputSample:
        sample = InputSample(pointer_x=self._pointer_x, fire=self._fire_requested, pause=self._pause_requested)
        self._fire_requested = False
        self._pause_requested = False
        return sample

    def run(self, frames: Iterable[Tuple[float, Optional[InputSample]]]) -> List[TickReport]:
        reports: List[TickReport] = []
        for elapsed, sample in frames:
            if not self.running:
                break
            reports.extend(self.advance(elapsed, sample))
        return reports
