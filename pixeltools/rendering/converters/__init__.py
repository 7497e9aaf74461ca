from __future__ import annotations

import os
from typing import Dict, Optional, Set

from PIL import Image

from .base import ImageLoader, fit_to_bounds
from .image import ImageFileLoader

SUPPORTED_EXTENSIONS: Set[str] = {".png", ".jpg", ".jpeg", ".gif", ".bmp"}


class PageLoader:
    def __init__(self, loaders: Optional[Dict[str, ImageLoader]] = None) -> None:
        if loaders is None:
            loaders = {}
            image_loader = ImageFileLoader()
            for ext in SUPPORTED_EXTENSIONS:
                loaders[ext] = image_loader
        self._loaders = loaders

    @property
    def supported_extensions(self) -> Set[str]:
        return set(self._loaders.keys())

    def load(self, path: str) -> Image.Image:
        ext = os.path.splitext(path)[1].lower()
        loader = self._loaders.get(ext)
        if not loader:
            raise ValueError(f"Unsupported file extension: {ext}")
        return loader.load(path)


def load_image(path: str) -> Image.Image:
    return PageLoader().load(path)


__all__ = ["fit_to_bounds", "ImageLoader", "load_image", "PageLoader", "SUPPORTED_EXTENSIONS"]
