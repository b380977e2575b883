from __future__ import annotations

import logging

from PIL import Image

from ..errors import ImageSaveError
from .types import PixelBuffer

logger = logging.getLogger(__name__)

# Encoders that reject an alpha channel.
RGB_ONLY_FORMATS = {"JPEG", "MPO", "PPM", "EPS"}


def save_buffer(buffer: PixelBuffer, width: int, height: int, path: str, image_format: str) -> None:
    try:
        img = Image.frombytes("RGBA", (width, height), buffer.data)
    except ValueError as exc:
        raise ImageSaveError(path, str(exc)) from exc
    if image_format.upper() in RGB_ONLY_FORMATS:
        img = img.convert("RGB")
    try:
        img.save(path, format=image_format)
    except (OSError, ValueError, KeyError) as exc:
        raise ImageSaveError(path, str(exc)) from exc
    logger.debug("Saved %dx%d %s image to %s", width, height, image_format, path)
