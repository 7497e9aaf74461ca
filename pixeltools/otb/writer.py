from __future__ import annotations

from typing import List

from .bits import pack_bits
from .types import MAX_DIMENSION, MONOCHROME_DEPTH


def encode_otb(pixels: List[int], width: int, height: int) -> bytes:
    """Write 0/1 pixels (1 = ink) as an OTB byte stream."""
    if not (1 <= width <= MAX_DIMENSION and 1 <= height <= MAX_DIMENSION):
        raise ValueError(f"OTB dimensions must be 1-{MAX_DIMENSION}, got {width}x{height}")
    if len(pixels) != width * height:
        raise ValueError(f"Expected {width * height} pixels, got {len(pixels)}")
    header = bytes([0x00, width, height, MONOCHROME_DEPTH])
    return header + pack_bits(pixels)
