from .arithmetic import format_expression, operate
from .combine_job import CombineJobBuilder, CombineSettings, combine_files
from .imaging import OutputImage, PixelBuffer, interleave

__all__ = [
    "CombineJobBuilder",
    "CombineSettings",
    "combine_files",
    "format_expression",
    "interleave",
    "operate",
    "OutputImage",
    "PixelBuffer",
]
