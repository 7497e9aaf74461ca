from __future__ import annotations


class OtbError(ValueError):
    """Base class for rejected OTB input."""


class TooSmallError(OtbError):
    def __init__(self) -> None:
        super().__init__("Invalid OTB file: File too small")


class InvalidDimensionsError(OtbError):
    def __init__(self, width: int, height: int) -> None:
        super().__init__("Invalid dimensions: Width and height must be greater than 0")
        self.width = width
        self.height = height


class InsufficientBitmapDataError(OtbError):
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"Invalid OTB file: Expected {expected} bytes for bitmap data, got {actual}")
        self.expected = expected
        self.actual = actual


class UnsupportedColorDepthError(OtbError):
    def __init__(self, color_depth: int) -> None:
        super().__init__("Unsupported color depth: Only 1-bit OTB files are supported")
        self.color_depth = color_depth
