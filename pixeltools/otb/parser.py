from __future__ import annotations

from .errors import (
    InsufficientBitmapDataError,
    InvalidDimensionsError,
    TooSmallError,
    UnsupportedColorDepthError,
)
from .types import HEADER_SIZE, MONOCHROME_DEPTH, OtbImage, packed_size


def parse_otb(data: bytes) -> OtbImage:
    """Parse and validate an OTB byte stream.

    Checks run in a fixed order so a given input always fails the same
    way: size, dimensions, bitmap length, then color depth.
    """
    data = bytes(data)
    if len(data) <= HEADER_SIZE:
        raise TooSmallError()

    info_field, width, height, color_depth = data[0], data[1], data[2], data[3]
    bitmap = data[HEADER_SIZE:]

    if width == 0 or height == 0:
        raise InvalidDimensionsError(width, height)

    expected = packed_size(width, height)
    if len(bitmap) < expected:
        raise InsufficientBitmapDataError(expected, len(bitmap))

    if color_depth != MONOCHROME_DEPTH:
        raise UnsupportedColorDepthError(color_depth)

    return OtbImage(
        width=width,
        height=height,
        color_depth=color_depth,
        data=bitmap,
        info_field=info_field,
    )
