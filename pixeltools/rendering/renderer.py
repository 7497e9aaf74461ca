from __future__ import annotations

from typing import List

from PIL import Image

from ..otb import OtbImage

# Mean-luminance offset for the non-dithered threshold; keeps mid greys white.
THRESHOLD_BIAS = 13


def image_to_bw_pixels(img: Image.Image, dither: bool) -> List[int]:
    """Return row-major 0/1 pixels where 1 is ink (dark)."""
    if dither:
        # Mode "1" packs bits in tobytes(); widen back to one byte per pixel.
        levels = img.convert("1").convert("L").tobytes()
        return [1 if level == 0 else 0 for level in levels]
    levels = img.convert("L").tobytes()
    mean = sum(levels) / len(levels) if levels else 0
    threshold = int(max(0, min(255, mean - THRESHOLD_BIAS)))
    return [1 if level <= threshold else 0 for level in levels]


def otb_to_image(image: OtbImage) -> Image.Image:
    """Render an OTB bitmap as a mode "1" image with black ink on white."""
    ink = bytes(0 if bit else 255 for row in image.rows() for bit in row)
    return Image.frombytes("L", (image.width, image.height), ink).convert("1")
