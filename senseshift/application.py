"""Application: owns the vibration body and dispatches events to listeners."""

from __future__ import annotations

import abc
import logging
import time
from dataclasses import dataclass

from senseshift.body import OutputBody

__all__ = ["Application", "Event", "EventListener"]

_log = logging.getLogger("application")


@dataclass(frozen=True)
class Event:
    """A named application event."""

    name: str


class EventListener(abc.ABC):
    """Receives events posted to an application."""

    @abc.abstractmethod
    def handle_event(self, event: Event) -> None:
        """React to ``event``."""


class Application:
    """Holds the haptic body and a list of event listeners."""

    def __init__(self) -> None:
        self._vibro_body = OutputBody()
        self._listeners: list[EventListener] = []
        self._started = time.monotonic()

    def vibro_body(self) -> OutputBody:
        """The body that vibration effects are played on."""
        return self._vibro_body

    def post_event(self, event: Event) -> None:
        """Deliver ``event`` to every listener, in the order they were added."""
        elapsed_ms = int((time.monotonic() - self._started) * 1000)
        _log.info("Event dispatched at %u: %s", elapsed_ms, event.name)
        for listener in self._listeners:
            listener.handle_event(event)

    def add_event_listener(self, listener: EventListener) -> None:
        """Register ``listener`` for future events."""
        self._listeners.append(listener)

    def __copy__(self) -> Application:
        clone = Application()
        for target, plane in self._vibro_body.targets().items():
            clone._vibro_body.add_target(target, plane)
        clone._listeners = list(self._listeners)
        clone._started = self._started
        return clone