import logging
from enum import Enum

import numpy as np
from PIL import Image, ImageFilter

from symbolize.errors import InvalidInputError

logger = logging.getLogger(__name__)

Colour = tuple[int, int, int]

# Blur radius (in source pixels) applied before a Gaussian resample at scale 1.0
GAUSSIAN_SIGMA = 0.5


class FilterType(Enum):
    """Resampling filters selectable when scaling the source image."""

    NEAREST = "nearest"
    TRIANGLE = "triangle"
    CATMULL_ROM = "catmull_rom"
    GAUSSIAN = "gaussian"
    LANCZOS3 = "lanczos3"

    @classmethod
    def from_name(cls, name: "FilterType | str") -> "FilterType":
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).lower())
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            raise InvalidInputError(f"unknown filter type {name!r}, expected one of: {choices}") from None


_RESAMPLING = {
    FilterType.NEAREST: Image.Resampling.NEAREST,
    FilterType.TRIANGLE: Image.Resampling.BILINEAR,
    FilterType.CATMULL_ROM: Image.Resampling.BICUBIC,
    FilterType.GAUSSIAN: Image.Resampling.BILINEAR,
    FilterType.LANCZOS3: Image.Resampling.LANCZOS,
}


def scaled_size(width: int, height: int, scale: float) -> tuple[int, int]:
    """Target (width, height) for ``scale``, truncated toward zero."""
    return int(width * scale), int(height * scale)


def resize_image(image: Image.Image, scale: float, filter_type: FilterType = FilterType.TRIANGLE) -> np.ndarray:
    """Scale an image and return its pixels as an (H, W, 3) uint8 array.

    A target with zero width or height yields an empty array of that shape
    without calling Pillow.
    """
    image = image.convert("RGB")
    width, height = scaled_size(image.width, image.height, scale)
    logger.debug("scaling %dx%d -> %dx%d with %s", image.width, image.height, width, height, filter_type.value)
    if width == 0 or height == 0:
        return np.zeros((height, width, 3), dtype=np.uint8)

    # Same size means an unchanged copy, whatever the filter
    if (width, height) != image.size:
        if filter_type is FilterType.GAUSSIAN:
            image = image.filter(ImageFilter.GaussianBlur(GAUSSIAN_SIGMA * max(1.0, 1.0 / scale)))
        image = image.resize((width, height), _RESAMPLING[filter_type])
    return image_to_array(image)


def image_to_array(image: Image.Image) -> np.ndarray:
    return np.asarray(image.convert("RGB"), dtype=np.uint8)


def count_colours(pixels: np.ndarray) -> dict[Colour, int]:
    """Count occurrences of every distinct colour in an (H, W, 3) array.

    Keys are ordered by ascending colour value.
    """
    flat = np.asarray(pixels, dtype=np.uint8).reshape(-1, 3)
    if flat.shape[0] == 0:
        return {}
    colours, counts = np.unique(flat, axis=0, return_counts=True)
    result = {(int(r), int(g), int(b)): int(n) for (r, g, b), n in zip(colours, counts)}
    logger.debug("found %d distinct colours in %d pixels", len(result), flat.shape[0])
    return result
