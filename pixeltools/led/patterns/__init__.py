from __future__ import annotations

from typing import Dict, Tuple

from ..types import ARRANGEMENT_MATRIX, ARRANGEMENT_RING, ARRANGEMENT_STRIP, validate_arrangement
from .base import FramePattern, matrix_size
from .matrix import MATRIX_PATTERNS
from .ring import RING_PATTERNS
from .strip import STRIP_PATTERNS

PATTERNS: Dict[str, Tuple[FramePattern, ...]] = {
    ARRANGEMENT_STRIP: STRIP_PATTERNS,
    ARRANGEMENT_RING: RING_PATTERNS,
    ARRANGEMENT_MATRIX: MATRIX_PATTERNS,
}


def patterns_for(arrangement: str) -> Tuple[FramePattern, ...]:
    validate_arrangement(arrangement)
    return PATTERNS[arrangement]


def find_pattern(arrangement: str, name: str) -> FramePattern:
    target = name.strip().lower()
    for pattern in patterns_for(arrangement):
        if pattern.name.lower() == target:
            return pattern
    raise ValueError(f"Unknown pattern '{name}' for {arrangement} arrangement")


__all__ = ["find_pattern", "FramePattern", "matrix_size", "PATTERNS", "patterns_for"]
