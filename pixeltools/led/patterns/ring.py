from __future__ import annotations

import math
from typing import Dict, List

from ..colors import hsl_to_rgb
from ..types import BLACK, Rgb
from .base import FramePattern

RED = Rgb(255, 0, 0)
GREEN = Rgb(0, 255, 0)
BLUE = Rgb(0, 0, 255)
WHITE = Rgb(255, 255, 255)


def _markers(count: int, marks: Dict[int, Rgb], background: Rgb = BLACK) -> List[Rgb]:
    return [marks.get(i, background) for i in range(count)]


def rotate_rainbow(frame: int, count: int) -> List[Rgb]:
    return [hsl_to_rgb(((i + frame) * 360 / count) % 360, 100, 50) for i in range(count)]


def pulse_ring(frame: int, count: int) -> List[Rgb]:
    level = (math.sin(frame * 0.2) + 1) * 127.5
    return [Rgb.clamped(level, 0, level)] * count


def spinning_dot(frame: int, count: int) -> List[Rgb]:
    return _markers(count, {frame % count: WHITE})


def clock(frame: int, count: int) -> List[Rgb]:
    # First match wins when the hands overlap.
    marks = {frame % count: GREEN}
    marks[(frame // 12) % count] = RED
    return _markers(count, marks)


def opposite_spin(frame: int, count: int) -> List[Rgb]:
    marks = {(count - frame) % count: BLUE}
    marks[frame % count] = RED
    return _markers(count, marks)


def ring_fill(frame: int, count: int) -> List[Rgb]:
    amount = frame % (count * 2)
    lit = amount if amount <= count else count * 2 - amount
    return [Rgb(0, 255, 255) if i < lit else BLACK for i in range(count)]


def compass(frame: int, count: int) -> List[Rgb]:
    marks = {
        (3 * count) // 4: Rgb(255, 255, 0),
        count // 4: BLUE,
        count // 2: GREEN,
        0: RED,
    }
    return _markers(count, marks, background=Rgb(10, 10, 10))


def ring_wave(frame: int, count: int) -> List[Rgb]:
    colors = []
    for i in range(count):
        angle = i / count * math.pi * 2
        level = int((math.sin(angle + frame * 0.2) + 1) * 127.5)
        colors.append(Rgb.clamped(level, level / 2, 255 - level))
    return colors


def orbit(frame: int, count: int) -> List[Rgb]:
    marks = {
        int((frame + 2 * count / 3) % count): BLUE,
        int((frame + count / 3) % count): GREEN,
        frame % count: RED,
    }
    return _markers(count, marks)


def ring_bounce(frame: int, count: int) -> List[Rgb]:
    pos = abs(frame % (count * 2) - count)
    colors = []
    for i in range(count):
        distance = min(abs(i - pos), count - abs(i - pos))
        level = 255 - distance * 80
        colors.append(Rgb.clamped(level, level, 0))
    return colors


RING_PATTERNS = (
    FramePattern("Rotate Rainbow", 100, rotate_rainbow),
    FramePattern("Pulse Ring", 80, pulse_ring),
    FramePattern("Spinning Dot", 150, spinning_dot),
    FramePattern("Clock", 200, clock),
    FramePattern("Opposite Spin", 120, opposite_spin),
    FramePattern("Ring Fill", 200, ring_fill),
    FramePattern("Compass", 100, compass),
    FramePattern("Ring Wave", 60, ring_wave),
    FramePattern("Orbit", 80, orbit),
    FramePattern("Ring Bounce", 100, ring_bounce),
)
