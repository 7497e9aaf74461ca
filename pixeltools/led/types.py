from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

SERIAL_PORT_ENV_VAR = "PIXELTOOLS_SERIAL"

ARRANGEMENT_STRIP = "strip"
ARRANGEMENT_RING = "ring"
ARRANGEMENT_MATRIX = "matrix"
ARRANGEMENTS: Tuple[str, ...] = (ARRANGEMENT_STRIP, ARRANGEMENT_RING, ARRANGEMENT_MATRIX)

MAX_BRIGHTNESS = 255


def _clamp_channel(value: float) -> int:
    return int(max(0, min(255, value)))


@dataclass(frozen=True)
class Rgb:
    r: int = 0
    g: int = 0
    b: int = 0

    @classmethod
    def clamped(cls, r: float, g: float, b: float) -> "Rgb":
        """Build a color from float channels, flooring and clamping to 0-255."""
        return cls(_clamp_channel(r), _clamp_channel(g), _clamp_channel(b))

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)


BLACK = Rgb(0, 0, 0)


def _default_port() -> Optional[str]:
    return os.environ.get(SERIAL_PORT_ENV_VAR) or None


@dataclass
class LedSettings:
    port: Optional[str] = field(default_factory=_default_port)
    baud_rate: int = 115200
    led_count: int = 8
    arrangement: str = ARRANGEMENT_RING
    brightness: int = 128

    def validate(self) -> None:
        validate_led_count(self.led_count)
        validate_brightness(self.brightness)
        validate_arrangement(self.arrangement)


def validate_led_count(count: int) -> None:
    if count <= 0:
        raise ValueError("LED count must be greater than zero")


def validate_brightness(value: int) -> None:
    if not 0 <= value <= MAX_BRIGHTNESS:
        raise ValueError(f"Brightness must be between 0 and {MAX_BRIGHTNESS}")


def validate_arrangement(arrangement: str) -> None:
    if arrangement not in ARRANGEMENTS:
        raise ValueError("Arrangement must be one of: " + ", ".join(ARRANGEMENTS))
