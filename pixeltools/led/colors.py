from __future__ import annotations

import math
import re

from .types import Rgb

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")


def parse_hex_color(value: str) -> Rgb:
    match = _HEX_RE.match(value.strip())
    if not match:
        raise ValueError(f"Invalid color '{value}', expected #rrggbb")
    return Rgb(*(int(part, 16) for part in match.groups()))


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> Rgb:
    """Convert HSL (hue in degrees, saturation/lightness in percent).

    Picks the hue sextant explicitly and rounds channels half up.
    """
    h = (hue % 360) / 360.0
    s = saturation / 100.0
    l = lightness / 100.0
    chroma = (1 - abs(2 * l - 1)) * s
    x = chroma * (1 - abs(math.fmod(h * 6, 2) - 1))
    m = l - chroma / 2
    if h < 1 / 6:
        r, g, b = chroma, x, 0.0
    elif h < 1 / 3:
        r, g, b = x, chroma, 0.0
    elif h < 1 / 2:
        r, g, b = 0.0, chroma, x
    elif h < 2 / 3:
        r, g, b = 0.0, x, chroma
    elif h < 5 / 6:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x
    return Rgb(_round_channel(r + m), _round_channel(g + m), _round_channel(b + m))


def _round_channel(value: float) -> int:
    return max(0, min(255, math.floor(value * 255 + 0.5)))
