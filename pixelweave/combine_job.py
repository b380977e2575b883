from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from PIL import Image

from .errors import FormatMismatchError
from .imaging import (
    DEFAULT_RESAMPLE,
    ImageLoader,
    OutputImage,
    PixelBuffer,
    interleave,
    save_buffer,
    standardize_size,
)

logger = logging.getLogger(__name__)


@dataclass
class CombineSettings:
    resample: Image.Resampling = DEFAULT_RESAMPLE


@dataclass
class CombineJobBuilder:
    settings: CombineSettings = field(default_factory=CombineSettings)
    loader: ImageLoader = field(default_factory=ImageLoader)

    def build(self, path_1: str, path_2: str, output_path: str) -> OutputImage:
        first = self.loader.load(path_1)
        second = self.loader.load(path_2)
        if first.format != second.format:
            raise FormatMismatchError(first.format, second.format)

        image_1, image_2 = standardize_size(first.image, second.image, self.settings.resample)
        output = OutputImage(image_1.width, image_1.height, output_path)
        combined = self.combine(image_1, image_2)
        output.set_data(combined)

        save_buffer(PixelBuffer(output.data), output.width, output.height, output.path, first.format)
        logger.info("Wrote %dx%d %s image to %s", output.width, output.height, first.format, output.path)
        return output

    @staticmethod
    def combine(image_1: Image.Image, image_2: Image.Image) -> PixelBuffer:
        return interleave(PixelBuffer.from_image(image_1), PixelBuffer.from_image(image_2))


def combine_files(
    path_1: str,
    path_2: str,
    output_path: str,
    settings: Optional[CombineSettings] = None,
) -> OutputImage:
    return CombineJobBuilder(settings or CombineSettings()).build(path_1, path_2, output_path)
