from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

from ..errors import ImageDecodeError, ImageFormatError, ImageReadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecodedImage:
    image: Image.Image
    format: str

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size


class ImageLoader:
    def load(self, path: str) -> DecodedImage:
        self._validate_input_path(path)
        try:
            with Image.open(path) as img:
                image_format = img.format
                if not image_format:
                    raise ImageFormatError(path)
                try:
                    img.load()
                except (OSError, SyntaxError, ValueError) as exc:
                    raise ImageDecodeError(path, str(exc)) from exc
                image = img.copy()
        except UnidentifiedImageError as exc:
            raise ImageFormatError(path) from exc
        except OSError as exc:
            raise ImageReadError(path, exc.strerror or str(exc)) from exc
        logger.debug("Loaded %s: %s %dx%d (%s)", path, image_format, image.width, image.height, image.mode)
        return DecodedImage(image, image_format)

    @staticmethod
    def _validate_input_path(path: str) -> None:
        if not os.path.exists(path):
            raise ImageReadError(path, "file not found")
        if not os.path.isfile(path):
            raise ImageReadError(path, "not a regular file")


def load_image(path: str) -> DecodedImage:
    return ImageLoader().load(path)
