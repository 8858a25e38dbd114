"""Actuator layouts and firmware constants for bHaptics-compatible devices."""

from __future__ import annotations

from senseshift.interface import Target
from senseshift.plane import map_point
from senseshift.point2 import Point2

__all__ = [
    "AUDIO_CABLE",
    "FIRMWARE_VERSION",
    "FIRMWARE_VERSION_MAJOR",
    "FIRMWARE_VERSION_MINOR",
    "NO_AUDIO_CABLE",
    "OutputLayout",
    "TACTAL_LAYOUT",
    "TACTAL_SIZE",
    "TACTOSY2_LAYOUT",
    "TACTOSY2_SIZE",
    "TACTOSYF_LAYOUT",
    "TACTOSYF_SIZE",
    "TACTOSYH_LAYOUT",
    "TACTOSYH_SIZE",
    "TACTSUIT_X16_GROUPS",
    "TACTSUIT_X16_LAYOUT",
    "TACTSUIT_X16_SIZE",
    "TACTSUIT_X40_LAYOUT",
    "TACTSUIT_X40_SIZE",
    "TACTVISOR_LAYOUT",
    "TACTVISOR_SIZE",
    "WRIST_MOTOR_POSITION",
    "firmware_version",
    "grid_point",
]

OutputLayout = tuple[Target, Point2]

NO_AUDIO_CABLE = 0
AUDIO_CABLE = 1

FIRMWARE_VERSION_MAJOR = 0xFF
FIRMWARE_VERSION_MINOR = 0xFF


def firmware_version(major: int = FIRMWARE_VERSION_MAJOR, minor: int = FIRMWARE_VERSION_MINOR) -> int:
    """Pack an 8-bit major and minor version into a 16-bit firmware version."""
    for name, part in (("major", major), ("minor", minor)):
        if not 0 <= part <= 0xFF:
            raise ValueError(f"{name} version must be in 0..255, got {part}")
    return ((major << 8) | minor) & 0xFFFF


FIRMWARE_VERSION = firmware_version()


def grid_point(x: int, y: int, size_x: int, size_y: int) -> Point2:
    """Map a cell of a ``size_x`` by ``size_y`` actuator grid to plane coordinates."""
    if size_x < 1 or size_y < 1:
        raise ValueError(f"grid size must be positive, got {size_x}x{size_y}")
    if not (0 <= x < size_x and 0 <= y < size_y):
        raise ValueError(f"cell ({x}, {y}) is outside a {size_x}x{size_y} grid")
    return map_point(x, y, size_x - 1, size_y - 1)


def _grid_row_major(size_x: int, size_y: int) -> tuple[Point2, ...]:
    return tuple(grid_point(x, y, size_x, size_y) for y in range(size_y) for x in range(size_x))


# TactSuit X40: 4x5 grid on the front and on the back.
_X40_SIZE_X, _X40_SIZE_Y = 4, 5
TACTSUIT_X40_SIZE = 40


def _x40_layout() -> tuple[OutputLayout, ...]:
    blocks = (
        (Target.CHEST_FRONT, (0, 1)),
        (Target.CHEST_BACK, (0, 1)),
        (Target.CHEST_BACK, (2, 3)),
        (Target.CHEST_FRONT, (2, 3)),
    )
    return tuple(
        (target, grid_point(x, y, _X40_SIZE_X, _X40_SIZE_Y))
        for target, columns in blocks
        for y in range(_X40_SIZE_Y)
        for x in columns
    )


TACTSUIT_X40_LAYOUT: tuple[OutputLayout, ...] = _x40_layout()

# TactSuit X16 uses the X40 packet structure; motors are grouped in firmware.
_X16_SIZE_X, _X16_SIZE_Y = 4, 2
TACTSUIT_X16_SIZE = 40
# Rows of each 10-motor X40 block folded onto the two X16 rows.
_X16_ROW_FOLD = (0, 0, 1, 1, 1)


def _x16_layout() -> tuple[OutputLayout, ...]:
    blocks = (
        (Target.CHEST_FRONT, (0, 1)),
        (Target.CHEST_BACK, (0, 1)),
        (Target.CHEST_BACK, (2, 3)),
        (Target.CHEST_FRONT, (2, 3)),
    )
    return tuple(
        (target, grid_point(x, y, _X16_SIZE_X, _X16_SIZE_Y))
        for target, columns in blocks
        for y in _X16_ROW_FOLD
        for x in columns
    )


TACTSUIT_X16_LAYOUT: tuple[OutputLayout, ...] = _x16_layout()

# Output indices responsible for the X40 to X16 grouping.
TACTSUIT_X16_GROUPS: tuple[int, ...] = (0, 1, 4, 5, 10, 11, 14, 15, 20, 21, 24, 25, 30, 31, 34, 35)

TACTAL_SIZE = 6 * 1
TACTAL_LAYOUT: tuple[Point2, ...] = _grid_row_major(6, 1)

TACTVISOR_SIZE = 4 * 1
TACTVISOR_LAYOUT: tuple[Point2, ...] = _grid_row_major(4, 1)

TACTOSY2_SIZE = 3 * 2
TACTOSY2_LAYOUT: tuple[Point2, ...] = _grid_row_major(3, 2)

TACTOSYH_SIZE = 1 * 3
TACTOSYH_LAYOUT: tuple[Point2, ...] = _grid_row_major(1, 3)

TACTOSYF_SIZE = 1 * 3
TACTOSYF_LAYOUT: tuple[Point2, ...] = _grid_row_major(1, 3)

# TactGlove wrist motor position.
WRIST_MOTOR_POSITION = Point2(127, 191)