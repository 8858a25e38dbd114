"""Two-dimensional points used to address actuators on a haptic plane."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["Point2"]


@dataclass(frozen=True, order=True)
class Point2:
    """An immutable 2D point, ordered lexicographically by ``(x, y)``."""

    x: int | float = 0
    y: int | float = 0

    def distance(self, other: Point2) -> float:
        """Return the Euclidean distance between this point and ``other``."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def __sub__(self, other: object) -> float:
        if not isinstance(other, Point2):
            return NotImplemented
        return self.distance(other)