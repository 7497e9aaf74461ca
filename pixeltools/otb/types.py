from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .bits import read_bit

HEADER_SIZE = 4
MONOCHROME_DEPTH = 1
MAX_DIMENSION = 255


def packed_size(width: int, height: int) -> int:
    """Return the byte count of a continuous 1-bit bitstream."""
    return (width * height + 7) // 8


@dataclass(frozen=True)
class OtbImage:
    """Parsed OTB bitmap: header fields plus the packed pixel bitstream."""

    width: int
    height: int
    color_depth: int
    data: bytes
    info_field: int = 0

    @property
    def row_bits(self) -> int:
        return self.width

    @property
    def total_bits(self) -> int:
        return self.width * self.height

    @property
    def packed_byte_count(self) -> int:
        return packed_size(self.width, self.height)

    def pixel(self, x: int, y: int) -> int:
        """Return the source bit at (x, y); 1 means ink."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return read_bit(self.data, y * self.width + x)

    def rows(self) -> List[List[int]]:
        return [[self.pixel(x, y) for x in range(self.width)] for y in range(self.height)]
