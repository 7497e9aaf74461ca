from __future__ import annotations

import math
import random
from typing import List

from ..colors import hsl_to_rgb
from ..types import BLACK, Rgb
from .base import FramePattern

WIPE_COLORS = (Rgb(255, 0, 0), Rgb(0, 255, 0), Rgb(0, 0, 255), Rgb(255, 255, 0))
METEOR_TAIL = (Rgb(255, 255, 255), Rgb(100, 100, 255), Rgb(50, 50, 200), Rgb(20, 20, 100))


def rainbow_wave(frame: int, count: int) -> List[Rgb]:
    return [hsl_to_rgb((i * 360 / count + frame * 2) % 360, 100, 50) for i in range(count)]


def fire(frame: int, count: int) -> List[Rgb]:
    colors = []
    for i in range(count):
        heat = max(0.0, math.sin((i + frame) * 0.3) * 255)
        colors.append(Rgb.clamped(heat, heat * 0.4, 0))
    return colors


def scanner(frame: int, count: int) -> List[Rgb]:
    pos = abs(frame % (count * 2) - count)
    return [Rgb.clamped(255 - abs(i - pos) * 50, 0, 0) for i in range(count)]


def color_wipe(frame: int, count: int) -> List[Rgb]:
    color = WIPE_COLORS[(frame // count) % len(WIPE_COLORS)]
    pos = frame % count
    return [color if i <= pos else BLACK for i in range(count)]


def breathing(frame: int, count: int) -> List[Rgb]:
    level = (math.sin(frame * 0.1) + 1) * 127.5
    return [Rgb.clamped(0, level, level)] * count


def chase(frame: int, count: int) -> List[Rgb]:
    return [Rgb(255, 100, 0) if (i + frame) % 3 == 0 else BLACK for i in range(count)]


def twinkle(frame: int, count: int) -> List[Rgb]:
    colors = []
    for _ in range(count):
        level = random.randrange(255) if random.random() > 0.7 else 0
        colors.append(Rgb(level, level, level))
    return colors


def meteor(frame: int, count: int) -> List[Rgb]:
    pos = frame % (count + 10)
    colors = []
    for i in range(count):
        distance = pos - i
        colors.append(METEOR_TAIL[distance] if 0 <= distance < len(METEOR_TAIL) else BLACK)
    return colors


def fade_colors(frame: int, count: int) -> List[Rgb]:
    return [hsl_to_rgb((frame * 2) % 360, 100, 50)] * count


def wave(frame: int, count: int) -> List[Rgb]:
    colors = []
    for i in range(count):
        level = (math.sin((i + frame * 0.2) * 0.5) + 1) * 127.5
        colors.append(Rgb.clamped(level, 0, 255 - int(level)))
    return colors


STRIP_PATTERNS = (
    FramePattern("Rainbow Wave", 100, rainbow_wave),
    FramePattern("Fire Effect", 80, fire),
    FramePattern("Scanner", 150, scanner),
    FramePattern("Color Wipe", 200, color_wipe),
    FramePattern("Breathing", 50, breathing),
    FramePattern("Chase", 120, chase),
    FramePattern("Twinkle", 100, twinkle),
    FramePattern("Meteor", 100, meteor),
    FramePattern("Fade Colors", 80, fade_colors),
    FramePattern("Wave", 60, wave),
)
