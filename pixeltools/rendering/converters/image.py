from __future__ import annotations

from PIL import Image

from .base import RasterLoader


class ImageFileLoader(RasterLoader):
    def load(self, path: str) -> Image.Image:
        return self._normalize_image(self._open_upright(path))
