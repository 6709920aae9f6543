"""High score storage backends."""
from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Protocol, Union

from loguru import logger


class HighScoreStore(Protocol):
    def load(self) -> float:
        ...

    def store(self, value: float) -> None:
        ...


class MemoryHighScoreStore:
    """Keeps the high score in memory.  Useful for tests and demos."""

    def __init__(self, value: float = 0.0) -> None:
        self.value = value
        self.writes = 0

    def load(self) -> float:
        return self.value

    def store(self, value: float) -> None:
        self.value = value
        self.writes += 1


class JsonHighScoreStore:
    """Persists the high score as a tiny JSON document on disk."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self) -> float:
        if not self.path.exists():
            return 0.0
        try:
            value = float(json.loads(self.path.read_text())["high_score"])
        except (OSError, ValueError, KeyError, TypeError) as exc:
            logger.warning("Could not read high score from {}: {}", self.path, exc)
            return 0.0
        if not math.isfinite(value):
            logger.warning("Ignoring non-finite high score {!r} in {}", value, self.path)
            return 0.0
        return max(value, 0.0)

    def store(self, value: float) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"high_score": value}))
        logger.debug("Stored high score {} in {}", value, self.path)
