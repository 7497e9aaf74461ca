from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import List, Tuple

from .bits import has_bit, pack_bits, read_bit, unpack_bits
from .types import OtbImage

BMP_SIGNATURE = b"BM"
FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
BITS_PER_PIXEL = 1
COLORS_USED = 2
PIXELS_PER_METER = 2835  # ~72 DPI

# Index 0 is written as 00 00 00 00 and index 1 as FF FF FF 00. Together
# with the bit inversion below this renders OTB ink as black.
COLOR_TABLE = bytes([0, 0, 0, 0, 255, 255, 255, 0])

PIXEL_DATA_OFFSET = FILE_HEADER_SIZE + INFO_HEADER_SIZE + len(COLOR_TABLE)

_FILE_HEADER = struct.Struct("<2sIII")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")


@dataclass(frozen=True)
class BmpLayout:
    """Sizes of the 1-bit BMP container for a given image size."""

    width: int
    height: int

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Width and height must be greater than zero")

    @property
    def bytes_per_row(self) -> int:
        return (self.width + 7) // 8

    @property
    def padded_bytes_per_row(self) -> int:
        return (self.bytes_per_row + 3) // 4 * 4

    @property
    def image_size(self) -> int:
        return self.padded_bytes_per_row * self.height

    @property
    def file_size(self) -> int:
        return PIXEL_DATA_OFFSET + self.image_size


def _output_bit(packed: bytes, index: int) -> int:
    if not has_bit(packed, index):
        return 1
    return 0 if read_bit(packed, index) else 1


def encode_bmp(width: int, height: int, packed: bytes) -> bytes:
    """Re-encode a packed OTB bitstream as a top-down 1-bit BMP."""
    layout = BmpLayout(width, height)
    layout.validate()
    out = bytearray(layout.file_size)
    _FILE_HEADER.pack_into(out, 0, BMP_SIGNATURE, layout.file_size, 0, PIXEL_DATA_OFFSET)
    _INFO_HEADER.pack_into(
        out,
        FILE_HEADER_SIZE,
        INFO_HEADER_SIZE,
        width,
        -height,
        1,
        BITS_PER_PIXEL,
        0,
        layout.image_size,
        PIXELS_PER_METER,
        PIXELS_PER_METER,
        COLORS_USED,
        COLORS_USED,
    )
    table_offset = FILE_HEADER_SIZE + INFO_HEADER_SIZE
    out[table_offset : table_offset + len(COLOR_TABLE)] = COLOR_TABLE

    for y in range(height):
        row = pack_bits(_output_bit(packed, y * width + x) for x in range(width))
        start = PIXEL_DATA_OFFSET + y * layout.padded_bytes_per_row
        out[start : start + len(row)] = row
    return bytes(out)


def encode_image(image: OtbImage) -> bytes:
    """Encode a parsed OTB image as BMP bytes."""
    return encode_bmp(image.width, image.height, image.data)


def decode_bmp(data: bytes) -> Tuple[int, int, List[List[int]]]:
    """Read back a 1-bit BMP; returns width, height and rows top to bottom."""
    if len(data) < PIXEL_DATA_OFFSET:
        raise ValueError("BMP data too small")
    signature, _, _, offset = _FILE_HEADER.unpack_from(data, 0)
    if signature != BMP_SIGNATURE:
        raise ValueError("Not a BMP file")
    fields = _INFO_HEADER.unpack_from(data, FILE_HEADER_SIZE)
    width, raw_height, bpp = fields[1], fields[2], fields[4]
    if bpp != BITS_PER_PIXEL:
        raise ValueError(f"Unsupported BMP bit depth: {bpp}")
    height = abs(raw_height)
    layout = BmpLayout(width, height)
    layout.validate()
    if len(data) < offset + layout.image_size:
        raise ValueError("BMP pixel data truncated")
    rows = []
    for y in range(height):
        start = offset + y * layout.padded_bytes_per_row
        rows.append(unpack_bits(data[start : start + layout.bytes_per_row], width))
    if raw_height > 0:
        rows.reverse()
    return width, height, rows
