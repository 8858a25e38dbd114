"""Battery state and voltage lookup tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

__all__ = ["LIPO_1S_42", "BatteryState"]

# Voltage to charge fraction for 1S 4.2V LiPo cells.
LIPO_1S_42: dict[float, float] = {
    3.27: 0.0,
    3.61: 0.05,
    3.69: 0.1,
    3.71: 0.15,
    3.73: 0.2,
    3.75: 0.25,
    3.77: 0.3,
    3.79: 0.35,
    3.8: 0.4,
    3.82: 0.45,
    3.84: 0.5,
    3.85: 0.55,
    3.87: 0.6,
    3.91: 0.65,
    3.95: 0.7,
    3.98: 0.75,
    4.02: 0.8,
    4.08: 0.85,
    4.11: 0.9,
    4.15: 0.95,
    4.2: 1.0,
}


@dataclass(frozen=True)
class BatteryState:
    """Battery charge level as an unsigned 8-bit value."""

    MAX_LEVEL: ClassVar[int] = 0xFF

    level: int

    def __post_init__(self) -> None:
        if not 0 <= self.level <= self.MAX_LEVEL:
            raise ValueError(f"battery level must be in 0..{self.MAX_LEVEL}, got {self.level}")

    def fraction(self) -> float:
        """Charge level as a fraction between 0.0 and 1.0."""
        return self.level / self.MAX_LEVEL