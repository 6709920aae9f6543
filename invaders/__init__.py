"""Simulation core for a single-player arcade shooter.

The package models the player ship, the marching enemy formation, bullets,
scoring and the session phases of a classic fixed-screen shooter.  Drawing,
device polling and high score storage are collaborators: the core hands out
read-only snapshots, consumes :class:`InputSample` values and writes through a
:class:`HighScoreStore`, so the whole game can be tested without a display.
"""

from .config import GameConfig
from .geometry import AABB, Vector2, overlaps
from .loop import LoopMode, UpdateLoop
from .persistence import JsonHighScoreStore, MemoryHighScoreStore
from .phases import SessionPhase
from .session import GameSession, InputSample, SessionNotStartedError

__all__ = [
    "AABB",
    "GameConfig",
    "GameSession",
    "InputSample",
    "JsonHighScoreStore",
    "LoopMode",
    "MemoryHighScoreStore",
    "SessionNotStartedError",
    "SessionPhase",
    "UpdateLoop",
    "Vector2",
    "overlaps",
]
