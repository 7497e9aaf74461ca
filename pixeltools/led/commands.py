from __future__ import annotations

from typing import Sequence

from .types import MAX_BRIGHTNESS, Rgb, validate_brightness, validate_led_count

LINE_ENDING = "\r\n"


def encode_line(command: str) -> bytes:
    """Terminate a command and encode it for the serial link."""
    return (command + LINE_ENDING).encode("ascii")


def led_count_cmd(count: int) -> str:
    validate_led_count(count)
    return f"led_count:{count}"


def brightness_cmd(value: int) -> str:
    validate_brightness(value)
    return f"brightness:{value}"


def apply_brightness(color: Rgb, brightness: int) -> Rgb:
    return Rgb(
        color.r * brightness // MAX_BRIGHTNESS,
        color.g * brightness // MAX_BRIGHTNESS,
        color.b * brightness // MAX_BRIGHTNESS,
    )


def frame_cmd(colors: Sequence[Rgb], brightness: int) -> str:
    """Build the per-frame update covering every LED index once."""
    validate_brightness(brightness)
    parts = []
    for index, color in enumerate(colors):
        adjusted = apply_brightness(color, brightness)
        parts.append(f"{index}:{adjusted.r},{adjusted.g},{adjusted.b}")
    return ";".join(parts)
