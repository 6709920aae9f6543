"""Domain entities moved around by the simulation."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict

from .geometry import AABB


class BulletOwner(str, Enum):
    """Side that fired a bullet."""

    PLAYER = "player"
    ENEMY = "enemy"


UP = -1
DOWN = 1


@dataclass
class Player(AABB):
    """The player's ship, steered towards a horizontal target."""

    speed: float = 0.0
    last_shot_at: float = -math.inf
    target_x: float = 0.0

    def serialise(self) -> Dict[str, object]:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "target_x": self.target_x,
        }


@dataclass
class Enemy(AABB):
    """A single member of the formation.

    ``speed`` is fixed when the wave spawns and never recomputed.
    """

    id: int = 0
    row: int = 0
    column: int = 0
    speed: float = 0.0
    points: int = 0

    def serialise(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "row": self.row,
            "column": self.column,
        }


@dataclass
class Bullet(AABB):
    """A projectile travelling straight up (player) or down (enemy)."""

    id: int = 0
    speed: float = 0.0
    direction: int = UP
    owner: BulletOwner = BulletOwner.PLAYER

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.direction not in (UP, DOWN):
            raise ValueError("Bullet direction must be -1 or +1")

    def advance(self) -> None:
        self.y += self.speed * self.direction

    def is_outside(self, canvas_height: float) -> bool:
        return self.bottom <= 0 or self.y >= canvas_height

    def serialise(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "owner": self.owner.value,
        }


__all__ = ["Bullet", "BulletOwner", "DOWN", "Enemy", "Player", "UP"]
