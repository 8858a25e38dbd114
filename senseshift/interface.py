"""Core haptic types: effects, body targets, effect data and actuators."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from enum import IntEnum

from senseshift.point2 import Point2

__all__ = [
    "COORDINATE_MAX",
    "COORDINATE_MIN",
    "Actuator",
    "Effect",
    "EffectRequest",
    "Position",
    "Target",
    "VibroEffectData",
]

Position = Point2
"""Positions on a plane use 8-bit unsigned coordinates."""

COORDINATE_MIN = 0
COORDINATE_MAX = 0xFF

EFFECT_INVALID = 0xFF
TARGET_INVALID = 0xFF


class Effect(IntEnum):
    """Kind of haptic effect."""

    INVALID = EFFECT_INVALID
    VIBRO = 0x00


class Target(IntEnum):
    """Body location an output plane is attached to."""

    INVALID = TARGET_INVALID
    CHEST_FRONT = 0x00
    CHEST_BACK = 0x01
    # Kept for backward compatibility only.
    ACCESSORY = 0x02
    FACE_FRONT = 0x03

    HAND_LEFT_THUMB = 0x04
    HAND_LEFT_INDEX = 0x05
    HAND_LEFT_MIDDLE = 0x06
    HAND_LEFT_RING = 0x07
    HAND_LEFT_LITTLE = 0x08
    HAND_LEFT_VOLAR = 0x09
    HAND_LEFT_DORSAL = 0x0A

    HAND_RIGHT_THUMB = 0x0B
    HAND_RIGHT_INDEX = 0x0C
    HAND_RIGHT_MIDDLE = 0x0D
    HAND_RIGHT_RING = 0x0E
    HAND_RIGHT_LITTLE = 0x0F
    HAND_RIGHT_VOLAR = 0x10
    HAND_RIGHT_DORSAL = 0x11


@dataclass(frozen=True)
class VibroEffectData:
    """Vibration intensity, nominally between 0.0 and 1.0."""

    INTENSITY_MIN = 0.0
    INTENSITY_MAX = 1.0

    intensity: float = 0.0

    def __float__(self) -> float:
        return float(self.intensity)


@dataclass
class EffectRequest:
    """A single request to play an effect at a position on a target."""

    effect: Effect = Effect.INVALID
    target: Target = Target.INVALID
    position: Point2 = field(default_factory=lambda: Point2(0, 0))
    data: VibroEffectData = field(default_factory=VibroEffectData)


class Actuator(abc.ABC):
    """An output device that accepts floating-point states."""

    def init(self) -> None:
        """Prepare the actuator for use."""

    @abc.abstractmethod
    def write_state(self, value: float) -> None:
        """Drive the actuator with ``value``."""