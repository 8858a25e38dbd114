"""Output planes: sets of actuators addressed by 2D positions."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TypeVar

from senseshift.interface import COORDINATE_MAX, COORDINATE_MIN, Actuator
from senseshift.point2 import Point2

__all__ = [
    "OutputPlane",
    "OutputPlaneClosest",
    "map_matrix_coordinates",
    "map_point",
]

_log = logging.getLogger(__name__)

T = TypeVar("T")


class OutputPlane:
    """A surface (chest, palm, finger...) holding actuators at fixed positions."""

    def __init__(self, actuators: Mapping[Point2, Actuator] | None = None) -> None:
        items = dict(actuators or {})
        self._actuators: dict[Point2, Actuator] = {p: items[p] for p in sorted(items)}
        self._states: dict[Point2, float] = {p: 0.0 for p in self._actuators}

    def setup(self) -> None:
        """Initialise every actuator on the plane."""
        for actuator in self._actuators.values():
            actuator.init()

    def effect(self, position: Point2, value: float) -> None:
        """Write ``value`` to the actuator at ``position``, if there is one."""
        actuator = self._actuators.get(position)
        if actuator is None:
            _log.warning("No actuator for point (%s, %s)", position.x, position.y)
            return
        actuator.write_state(value)
        self._states[position] = value

    def available_points(self) -> frozenset[Point2]:
        """Positions that have an actuator."""
        return frozenset(self._actuators)

    def actuator_states(self) -> dict[Point2, float]:
        """Last value written to each actuator, ordered by position."""
        return dict(self._states)


class OutputPlaneClosest(OutputPlane):
    """A plane that routes each effect to the nearest existing actuator."""

    def effect(self, position: Point2, value: float) -> None:
        closest = self.find_closest_point(self.available_points(), position)
        super().effect(closest, value)

    @staticmethod
    def find_closest_point(points: Iterable[Point2], target: Point2) -> Point2:
        """Return ``target`` if present, else the nearest point (ties: smallest point)."""
        candidates = set(points)
        if not candidates:
            raise ValueError("no points to choose from")
        if target in candidates:
            return target
        return min(candidates, key=lambda p: (target.distance(p), p))


def _remap(value: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    return (value - in_min) * (out_max - out_min) // (in_max - in_min) + out_min


def map_point(x: int, y: int, x_max: int, y_max: int) -> Point2:
    """Map grid indices to plane coordinates, leaving a margin at each edge."""
    return Point2(
        _remap(x + 1, 0, x_max + 2, COORDINATE_MIN, COORDINATE_MAX),
        _remap(y + 1, 0, y_max + 2, COORDINATE_MIN, COORDINATE_MAX),
    )


def map_matrix_coordinates(matrix: Iterable[Iterable[T]]) -> dict[Point2, T]:
    """Map a 2D matrix (rows of items) to a ``{position: item}`` dictionary."""
    rows = [list(row) for row in matrix]
    y_max = len(rows) - 1
    points: dict[Point2, T] = {}
    for y, row in enumerate(rows):
        x_max = len(row) - 1
        for x, item in enumerate(row):
            points[map_point(x, y, x_max, y_max)] = item
    return points