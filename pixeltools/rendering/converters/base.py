from __future__ import annotations

from PIL import Image, ImageOps


class ImageLoader:
    def load(self, path: str) -> Image.Image:
        raise NotImplementedError


class RasterLoader(ImageLoader):
    @staticmethod
    def _open_upright(path: str) -> Image.Image:
        """Read the first frame fully into memory, rotated per its EXIF tag."""
        with Image.open(path) as img:
            img.seek(0)
            return ImageOps.exif_transpose(img)

    @staticmethod
    def _normalize_image(img: Image.Image) -> Image.Image:
        if img.mode in ("RGBA", "LA") or (img.mode == "P" and "transparency" in img.info):
            # Transparent areas become background, not ink.
            rgba = img.convert("RGBA")
            background = Image.new("RGBA", rgba.size, (255, 255, 255, 255))
            return Image.alpha_composite(background, rgba).convert("RGB")
        if img.mode not in ("RGB", "L"):
            return img.convert("RGB")
        return img


def fit_to_bounds(img: Image.Image, max_width: int, max_height: int) -> Image.Image:
    """Shrink an image to fit the bounds, keeping its aspect ratio."""
    if img.width <= max_width and img.height <= max_height:
        return img
    ratio = min(max_width / float(img.width), max_height / float(img.height))
    width = max(1, min(max_width, round(img.width * ratio)))
    height = max(1, min(max_height, round(img.height * ratio)))
    return img.resize((width, height), Image.LANCZOS)
