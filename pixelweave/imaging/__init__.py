from .interleave import CYCLE_BYTES, interleave
from .loader import DecodedImage, ImageLoader, load_image
from .resize import (
    DEFAULT_RESAMPLE,
    RESAMPLE_FILTERS,
    resample_from_name,
    smallest_dimensions,
    standardize_size,
)
from .types import PIXEL_BYTES, OutputImage, PixelBuffer
from .writer import save_buffer

__all__ = [
    "CYCLE_BYTES",
    "DEFAULT_RESAMPLE",
    "DecodedImage",
    "ImageLoader",
    "interleave",
    "load_image",
    "OutputImage",
    "PIXEL_BYTES",
    "PixelBuffer",
    "RESAMPLE_FILTERS",
    "resample_from_name",
    "save_buffer",
    "smallest_dimensions",
    "standardize_size",
]
