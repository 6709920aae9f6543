"""Vector and bounding-box primitives used by the simulation."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Vector2:
    """Simple 2D vector used for positions and velocities."""

    x: float
    y: float


@dataclass
class AABB:
    """Axis-aligned bounding box with a top-left origin."""

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Bounding boxes must have a positive size")

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @center_x.setter
    def center_x(self, value: float) -> None:
        self.x = value - self.width / 2

    @property
    def position(self) -> Vector2:
        return Vector2(self.x, self.y)


def overlaps(a: AABB, b: AABB) -> bool:
    """Return ``True`` when the interiors of ``a`` and ``b`` intersect.

    Boxes that only share an edge or a corner do not overlap.
    """
    return a.x < b.x + b.width and a.x + a.width > b.x and a.y < b.y + b.height and a.y + a.height > b.y


__all__ = ["AABB", "Vector2", "overlaps"]
