from __future__ import annotations

import logging
from typing import Tuple

from PIL import Image

logger = logging.getLogger(__name__)

Dimensions = Tuple[int, int]

DEFAULT_RESAMPLE = Image.Resampling.BILINEAR

RESAMPLE_FILTERS = {
    "nearest": Image.Resampling.NEAREST,
    "box": Image.Resampling.BOX,
    "bilinear": Image.Resampling.BILINEAR,
    "hamming": Image.Resampling.HAMMING,
    "bicubic": Image.Resampling.BICUBIC,
    "lanczos": Image.Resampling.LANCZOS,
}


def resample_from_name(name: str) -> Image.Resampling:
    try:
        return RESAMPLE_FILTERS[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown resample filter '{name}'. Choose from: " + ", ".join(sorted(RESAMPLE_FILTERS))
        ) from None


def smallest_dimensions(dim_1: Dimensions, dim_2: Dimensions) -> Dimensions:
    """Return the dimensions with fewer pixels; ties go to ``dim_2``."""
    if dim_1[0] * dim_1[1] < dim_2[0] * dim_2[1]:
        return dim_1
    return dim_2


def standardize_size(
    image_1: Image.Image,
    image_2: Image.Image,
    resample: Image.Resampling = DEFAULT_RESAMPLE,
) -> Tuple[Image.Image, Image.Image]:
    """Resize the larger image exactly to the size of the smaller one."""
    width, height = smallest_dimensions(image_1.size, image_2.size)
    if image_2.size == (width, height):
        if image_1.size != (width, height):
            logger.debug("Resizing first image %dx%d -> %dx%d", image_1.width, image_1.height, width, height)
        return image_1.resize((width, height), resample), image_2
    logger.debug("Resizing second image %dx%d -> %dx%d", image_2.width, image_2.height, width, height)
    return image_1, image_2.resize((width, height), resample)
