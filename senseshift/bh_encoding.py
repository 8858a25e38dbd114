"""Decoders for bHaptics motor packets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol, Union

from senseshift.interface import Effect, Target, VibroEffectData
from senseshift.point2 import Point2

__all__ = ["Decoder", "Payload"]

Payload = Union[bytes, bytearray, memoryview, str, Iterable[int]]

OutputLayout = tuple[Target, Point2]


class _EffectSink(Protocol):
    def effect(self, target: Target, position: Point2, value: float) -> None: ...


def _to_buffer(value: Payload, size: int) -> bytes:
    """Copy at most ``size`` bytes of ``value``, zero-padding the rest."""
    if isinstance(value, str):
        raw = value.encode("latin-1")
    else:
        raw = bytes(value)
    raw = raw[:size]
    return raw + bytes(size - len(raw))


def _effect_data(byte: int, max_value: int = 100) -> VibroEffectData:
    return VibroEffectData(byte / max_value)


class Decoder:
    """Applies bHaptics-encoded motor payloads to a haptic body."""

    VEST_LAYOUT_SIZE = 40
    VEST_PAYLOAD_SIZE = 20

    @staticmethod
    def apply_plain(
        output: _EffectSink,
        value: Payload,
        layout: Sequence[OutputLayout],
        effect: Effect = Effect.VIBRO,
    ) -> None:
        """Apply one byte (0..100) per ``(target, position)`` entry of ``layout``."""
        buffer = _to_buffer(value, len(layout))
        for (target, position), byte in zip(layout, buffer):
            output.effect(target, position, float(_effect_data(byte)))

    @staticmethod
    def apply_plain_target(
        output: _EffectSink,
        value: Payload,
        layout: Sequence[Point2],
        effect: Effect,
        target: Target,
    ) -> None:
        """Apply one byte (0..100) per position of ``layout`` on a single ``target``."""
        buffer = _to_buffer(value, len(layout))
        for position, byte in zip(layout, buffer):
            output.effect(target, position, float(_effect_data(byte)))

    @classmethod
    def _check_vest_layout(cls, layout: Sequence[OutputLayout]) -> None:
        if len(layout) != cls.VEST_LAYOUT_SIZE:
            raise ValueError(
                f"vest layout must have {cls.VEST_LAYOUT_SIZE} entries, got {len(layout)}"
            )

    @classmethod
    def _unpack_vest(cls, value: Payload) -> list[int]:
        result: list[int] = []
        for byte in _to_buffer(value, cls.VEST_PAYLOAD_SIZE):
            result.append((byte >> 4) & 0xF)
            result.append(byte & 0xF)
        return result

    @staticmethod
    def apply_vest(output: _EffectSink, value: Payload, layout: Sequence[OutputLayout]) -> None:
        """Apply a vest payload: two 4-bit intensities per byte, high nibble first."""
        Decoder._check_vest_layout(layout)
        for (target, position), nibble in zip(layout, Decoder._unpack_vest(value)):
            output.effect(target, position, float(_effect_data(nibble, 15)))

    @staticmethod
    def apply_vest_grouped(
        output: _EffectSink,
        value: Payload,
        layout: Sequence[OutputLayout],
        layout_groups: Sequence[int],
    ) -> None:
        """Apply a vest payload folded onto grouped outputs, using each group's maximum."""
        Decoder._check_vest_layout(layout)
        result = Decoder._unpack_vest(value)

        for group in layout_groups:
            # Top three rows of a 10-motor block fold together, the bottom two likewise.
            members = (group, group + 2, group + 4) if group % 10 >= 4 else (group, group + 2)
            peak = max(result[i] for i in members)
            for i in members:
                result[i] = peak

        wanted = set(layout_groups)
        for index, ((target, position), nibble) in enumerate(zip(layout, result)):
            if index in wanted:
                output.effect(target, position, float(_effect_data(nibble, 15)))