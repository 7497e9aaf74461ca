from __future__ import annotations

import io
import os
import re
from dataclasses import dataclass
from typing import Optional

from .otb import MAX_DIMENSION, OtbImage, encode_image, encode_otb, parse_otb
from .rendering.converters import SUPPORTED_EXTENSIONS, fit_to_bounds, load_image
from .rendering.renderer import image_to_bw_pixels, otb_to_image

OUTPUT_FORMATS = ("bmp", "png")
# Nokia picture messages are 72x28.
DEFAULT_MAX_WIDTH = 72
DEFAULT_MAX_HEIGHT = 28

_EXTENSION_RE = re.compile(r"\.[^/.]+$")


def suggest_output_name(filename: str, extension: str) -> str:
    """Replace the extension of `filename`, e.g. 1.otb -> 1.bmp."""
    return _EXTENSION_RE.sub("", filename) + extension


@dataclass
class ConversionSettings:
    output_format: str = "bmp"
    dither: bool = True
    max_width: int = DEFAULT_MAX_WIDTH
    max_height: int = DEFAULT_MAX_HEIGHT


@dataclass(frozen=True)
class ConversionResult:
    image: OtbImage
    payload: bytes
    output_name: str


class OtbConverter:
    def __init__(self, settings: Optional[ConversionSettings] = None) -> None:
        self.settings = settings or ConversionSettings()
        if self.settings.output_format not in OUTPUT_FORMATS:
            raise ValueError("Supported output formats: " + ", ".join(OUTPUT_FORMATS))

    def convert_file(self, path: str) -> ConversionResult:
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")
        with open(path, "rb") as handle:
            data = handle.read()
        return self.convert_bytes(data, os.path.basename(path))

    def convert_bytes(self, data: bytes, filename: str) -> ConversionResult:
        image = parse_otb(data)
        if self.settings.output_format == "png":
            payload = self._render_png(image)
        else:
            payload = encode_image(image)
        return ConversionResult(
            image=image,
            payload=payload,
            output_name=suggest_output_name(filename, "." + self.settings.output_format),
        )

    @staticmethod
    def _render_png(image: OtbImage) -> bytes:
        buffer = io.BytesIO()
        otb_to_image(image).save(buffer, format="PNG")
        return buffer.getvalue()


class ImageToOtbBuilder:
    def __init__(self, settings: Optional[ConversionSettings] = None) -> None:
        self.settings = settings or ConversionSettings()

    def build_from_file(self, path: str) -> bytes:
        self._validate_input_path(path)
        max_width = self._bounded(self.settings.max_width)
        max_height = self._bounded(self.settings.max_height)
        img = fit_to_bounds(load_image(path), max_width, max_height)
        pixels = image_to_bw_pixels(img, dither=self.settings.dither)
        return encode_otb(pixels, img.width, img.height)

    @staticmethod
    def _bounded(value: int) -> int:
        if not 1 <= value <= MAX_DIMENSION:
            raise ValueError(f"Size limits must be between 1 and {MAX_DIMENSION}")
        return value

    @staticmethod
    def _validate_input_path(path: str) -> None:
        ext = os.path.splitext(path)[1].lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
        if not os.path.isfile(path):
            raise FileNotFoundError(f"File not found: {path}")
