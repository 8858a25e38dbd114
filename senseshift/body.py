"""A haptic body: output planes attached to body targets."""

from __future__ import annotations

import logging

from senseshift.interface import Target
from senseshift.plane import OutputPlane
from senseshift.point2 import Point2

__all__ = ["OutputBody"]

_log = logging.getLogger(__name__)


class OutputBody:
    """Holds the output plane for each body target."""

    def __init__(self) -> None:
        self._targets: dict[Target, OutputPlane] = {}

    def setup(self) -> None:
        """Set up every plane on the body."""
        for plane in self._targets.values():
            plane.setup()

    def add_target(self, target: Target, plane: OutputPlane) -> None:
        """Attach ``plane`` to ``target``, replacing any previous plane."""
        self._targets[target] = plane

    def get_target(self, target: Target) -> OutputPlane | None:
        """Return the plane for ``target``, or ``None`` if there is none."""
        return self._targets.get(target)

    def effect(self, target: Target, position: Point2, value: float) -> None:
        """Play ``value`` at ``position`` on the plane of ``target``."""
        plane = self.get_target(target)
        if plane is None:
            _log.warning("No target found for effect: %s", target)
            return
        plane.effect(position, value)

    def targets(self) -> dict[Target, OutputPlane]:
        """The target-to-plane mapping, ordered by target."""
        return {t: self._targets[t] for t in sorted(self._targets)}