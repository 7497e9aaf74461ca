from .bits import pack_bits, read_bit, unpack_bits
from .bmp import BmpLayout, COLOR_TABLE, PIXEL_DATA_OFFSET, decode_bmp, encode_bmp, encode_image
from .errors import (
    InsufficientBitmapDataError,
    InvalidDimensionsError,
    OtbError,
    TooSmallError,
    UnsupportedColorDepthError,
)
from .parser import parse_otb
from .types import MAX_DIMENSION, OtbImage, packed_size
from .writer import encode_otb

__all__ = [
    "BmpLayout",
    "COLOR_TABLE",
    "decode_bmp",
    "encode_bmp",
    "encode_image",
    "encode_otb",
    "InsufficientBitmapDataError",
    "InvalidDimensionsError",
    "MAX_DIMENSION",
    "OtbError",
    "OtbImage",
    "pack_bits",
    "packed_size",
    "parse_otb",
    "PIXEL_DATA_OFFSET",
    "read_bit",
    "TooSmallError",
    "unpack_bits",
    "UnsupportedColorDepthError",
]
