from __future__ import annotations

import math
import random
from typing import List, Tuple

from ..types import BLACK, Rgb
from .base import FramePattern, matrix_size


def _grid(count: int) -> List[Tuple[int, int]]:
    size = matrix_size(count)
    return [(i % size, i // size) for i in range(count)]


def _polar(x: int, y: int, size: int) -> Tuple[float, float]:
    center = size // 2
    dx = x - center
    dy = y - center
    return math.hypot(dx, dy), math.atan2(dy, dx)


def matrix_rain(frame: int, count: int) -> List[Rgb]:
    size = matrix_size(count)
    colors = []
    for x, y in _grid(count):
        drop = (frame + x * 3) % (size + 5)
        level = {0: 255, 1: 128, 2: 64}.get(drop - y, 0)
        colors.append(Rgb(0, level, 0))
    return colors


def diagonal_sweep(frame: int, count: int) -> List[Rgb]:
    size = matrix_size(count)
    colors = []
    for x, y in _grid(count):
        diagonal = (x + y + frame) % (size * 2)
        level = 255 - diagonal * 80 if diagonal < 3 else 0
        colors.append(Rgb.clamped(level, 0, level))
    return colors


def spiral(frame: int, count: int) -> List[Rgb]:
    size = matrix_size(count)
    colors = []
    for x, y in _grid(count):
        distance, angle = _polar(x, y, size)
        # fmod keeps the sign, so arms near the negative angle stay lit.
        arm = math.fmod(distance + angle * 2 + frame, size * 2)
        colors.append(Rgb(255, 255, 0) if arm < 2 else BLACK)
    return colors


def checkerboard(frame: int, count: int) -> List[Rgb]:
    return [Rgb(255, 255, 255) if (x + y + frame) % 2 == 0 else BLACK for x, y in _grid(count)]


def concentric_circles(frame: int, count: int) -> List[Rgb]:
    size = matrix_size(count)
    colors = []
    for x, y in _grid(count):
        distance, _ = _polar(x, y, size)
        ring = math.fmod(math.floor(distance + frame * 0.5), size / 2)
        colors.append(Rgb(0, 255, 255) if ring < 1 else BLACK)
    return colors


def matrix_pulse(frame: int, count: int) -> List[Rgb]:
    level = (math.sin(frame * 0.1) + 1) * 127.5
    return [Rgb.clamped(0, level, 0)] * count


def random_matrix(frame: int, count: int) -> List[Rgb]:
    def channel() -> int:
        return random.randrange(255) if random.random() > 0.8 else 0

    return [Rgb(channel(), channel(), channel()) for _ in range(count)]


def matrix_wave(frame: int, count: int) -> List[Rgb]:
    colors = []
    for x, y in _grid(count):
        wave1 = math.sin((x + frame * 0.2) * 0.5)
        wave2 = math.sin((y + frame * 0.3) * 0.5)
        level = int(((wave1 + wave2) / 2 + 1) * 127.5)
        colors.append(Rgb.clamped(level, 0, 255 - level))
    return colors


def matrix_explosion(frame: int, count: int) -> List[Rgb]:
    size = matrix_size(count)
    colors = []
    for x, y in _grid(count):
        distance, _ = _polar(x, y, size)
        blast = math.fmod(frame - distance * 2, size * 2)
        level = 255 - blast * 80 if 0 < blast < 3 else 0
        colors.append(Rgb.clamped(level, level / 2, 0))
    return colors


def matrix_clock(frame: int, count: int) -> List[Rgb]:
    size = matrix_size(count)
    hour_angle = (frame / 12) * math.pi / 6
    minute_angle = frame * math.pi / 30
    colors = []
    for x, y in _grid(count):
        _, angle = _polar(x, y, size)
        if abs(angle - hour_angle) < 0.3:
            colors.append(Rgb(255, 0, 0))
        elif abs(angle - minute_angle) < 0.3:
            colors.append(Rgb(0, 255, 0))
        else:
            colors.append(BLACK)
    return colors


def matrix_snake(frame: int, count: int) -> List[Rgb]:
    length = min(8, matrix_size(count))
    head = frame % count
    colors = []
    for i in range(count):
        distance = (head - i + count) % count
        if distance < length:
            colors.append(Rgb.clamped(0, 255 - distance * 255 / length, 0))
        else:
            colors.append(BLACK)
    return colors


MATRIX_PATTERNS = (
    FramePattern("Matrix Rain", 150, matrix_rain),
    FramePattern("Diagonal Sweep", 120, diagonal_sweep),
    FramePattern("Spiral", 100, spiral),
    FramePattern("Checkerboard", 200, checkerboard),
    FramePattern("Concentric Circles", 80, concentric_circles),
    FramePattern("Matrix Pulse", 60, matrix_pulse),
    FramePattern("Random Matrix", 150, random_matrix),
    FramePattern("Matrix Wave", 70, matrix_wave),
    FramePattern("Matrix Explosion", 100, matrix_explosion),
    FramePattern("Matrix Clock", 200, matrix_clock),
    FramePattern("Matrix Snake", 120, matrix_snake),
)
