from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from PIL import Image

from ..combine_job import CombineJobBuilder, CombineSettings
from ..errors import CombineError
from ..imaging import DEFAULT_RESAMPLE, RESAMPLE_FILTERS, resample_from_name

RESAMPLE_ENV_VAR = "PIXELWEAVE_RESAMPLE"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="pixelweave-combine",
        description="Combine two images by alternating their pixels into a new image.",
    )
    parser.add_argument("image_1", help="First input image (supplies even pixels and the output format)")
    parser.add_argument("image_2", help="Second input image, same file format as the first")
    parser.add_argument("output", help="Path of the combined image to write")
    parser.add_argument(
        "--resample",
        choices=sorted(RESAMPLE_FILTERS),
        help=f"Resize filter for the larger image (default: ${RESAMPLE_ENV_VAR} or bilinear)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return parser.parse_args(argv)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def resolve_resample(args: argparse.Namespace) -> Image.Resampling:
    if args.resample:
        return resample_from_name(args.resample)
    env_value = os.environ.get(RESAMPLE_ENV_VAR)
    if env_value:
        return resample_from_name(env_value)
    return DEFAULT_RESAMPLE


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    try:
        settings = CombineSettings(resample=resolve_resample(args))
        CombineJobBuilder(settings).build(args.image_1, args.image_2, args.output)
    except (CombineError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
