"""Score, lives and level progression."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Dict, Optional

from loguru import logger

from .config import LEVEL_BONUS_FACTOR, STARTING_LIVES, STREAK_LENGTH
from .persistence import HighScoreStore


@dataclass
class GameState:
    """Scalar progress of one play session."""

    score: float = 0.0
    lives: int = STARTING_LIVES
    level: int = 1
    consecutive_hits: int = 0
    high_score: float = 0.0
    is_over: bool = False

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, object]) -> "GameState":
        return cls(
            score=float(data.get("score", 0.0)),
            lives=int(data.get("lives", STARTING_LIVES)),
            level=int(data.get("level", 1)),
            consecutive_hits=int(data.get("consecutive_hits", 0)),
            high_score=float(data.get("high_score", 0.0)),
            is_over=bool(data.get("is_over", False)),
        )


def streak_multiplier(consecutive_hits: int) -> int:
    return 1 + consecutive_hits // STREAK_LENGTH


class ScoreTracker:
    """Applies hit and damage events to a :class:`GameState`."""

    def __init__(self, state: GameState, store: Optional[HighScoreStore] = None) -> None:
        self.state = state
        self._store = store

    @property
    def multiplier(self) -> int:
        return streak_multiplier(self.state.consecutive_hits)

    @property
    def level_bonus(self) -> float:
        return self.state.level * LEVEL_BONUS_FACTOR

    def register_hit(self, points: float) -> float:
        """Count a hit and return the score it awarded."""
        state = self.state
        if not math.isfinite(points) or points <= 0:
            logger.warning("Ignoring invalid hit value {!r}", points)
            points = 0
        state.consecutive_hits += 1
        awarded = points * self.multiplier * self.level_bonus
        state.score += awarded
        if state.score > state.high_score:
            state.high_score = state.score
            if self._store is not None:
                self._store.store(state.high_score)
        return awarded

    def lose_life(self) -> bool:
        """Take one life away.  Returns ``True`` if that ended the game."""
        state = self.state
        if state.is_over:
            return False
        state.lives -= 1
        state.consecutive_hits = 0
        logger.info("Life lost, {} remaining", max(state.lives, 0))
        if state.lives <= 0:
            state.lives = 0
            state.is_over = True
            logger.info("Game over with score {}", state.score)
            return True
        return False

    def end_game(self) -> None:
        state = self.state
        if state.is_over:
            return
        state.lives = 0
        state.consecutive_hits = 0
        state.is_over = True
        logger.info("Game over with score {}", state.score)

    def next_level(self) -> int:
        self.state.level += 1
        self.state.consecutive_hits = 0
        logger.info("Advancing to level {}", self.state.level)
        return self.state.level
