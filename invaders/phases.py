"""Session phase state machine."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, FrozenSet, List, Optional

from loguru import logger

from .clock import Clock, MonotonicClock


class SessionPhase(Enum):
    MENU = "menu"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    LEVEL_COMPLETE = "level_complete"


TRANSITIONS: Dict[SessionPhase, FrozenSet[SessionPhase]] = {
    SessionPhase.MENU: frozenset({SessionPhase.PLAYING}),
    SessionPhase.PLAYING: frozenset({SessionPhase.PAUSED, SessionPhase.GAME_OVER, SessionPhase.LEVEL_COMPLETE}),
    SessionPhase.PAUSED: frozenset({SessionPhase.PLAYING, SessionPhase.MENU}),
    SessionPhase.GAME_OVER: frozenset({SessionPhase.MENU}),
    SessionPhase.LEVEL_COMPLETE: frozenset({SessionPhase.PLAYING, SessionPhase.MENU}),
}


@dataclass(frozen=True)
class PhaseTransition:
    source: SessionPhase
    target: SessionPhase
    timestamp: float


TransitionListener = Callable[[PhaseTransition], None]


class PhaseMachine:
    """Tracks the current session phase and rejects illegal moves.

    Rejected transitions are not errors: UI races such as a double click can
    request the same move twice, so :meth:`transition_to` simply reports
    whether the move happened.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock = clock or MonotonicClock()
        self.current = SessionPhase.MENU
        self.previous: Optional[SessionPhase] = None
        self.history: List[PhaseTransition] = []
        self._listeners: List[TransitionListener] = []

    def subscribe(self, listener: TransitionListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: TransitionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def can_transition_to(self, target: SessionPhase) -> bool:
        return target in TRANSITIONS[self.current]

    def transition_to(self, target: SessionPhase) -> bool:
        if not self.can_transition_to(target):
            logger.debug("Rejected phase transition {} -> {}", self.current.value, target.value)
            return False
        record = PhaseTransition(source=self.current, target=target, timestamp=self._clock.now())
        self.previous = self.current
        self.current = target
        self.history.append(record)
        logger.debug("Phase transition {} -> {}", record.source.value, record.target.value)
        for listener in list(self._listeners):
            listener(record)
        return True

    def go_back(self) -> bool:
        if self.previous is None:
            return False
        return self.transition_to(self.previous)
