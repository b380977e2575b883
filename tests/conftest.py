"""Shared fixtures: small generated images written to ``tmp_path``."""

from pathlib import Path
from typing import Callable

import pytest
from PIL import Image

ImageFactory = Callable[..., str]


@pytest.fixture
def make_image(tmp_path: Path) -> ImageFactory:
    """Return a factory that writes a solid-color image and returns its path."""

    def _make(
        name: str,
        size: tuple[int, int] = (4, 2),
        color: tuple[int, ...] = (10, 10, 10, 255),
        mode: str = "RGBA",
        image_format: str = "PNG",
    ) -> str:
        path = tmp_path / name
        Image.new(mode, size, color).save(path, format=image_format)
        return str(path)

    return _make


@pytest.fixture
def png_pair(make_image: ImageFactory) -> tuple[str, str]:
    """Two same-size PNGs with distinct solid colors."""
    first = make_image("first.png", size=(4, 2), color=(10, 10, 10, 255))
    second = make_image("second.png", size=(4, 2), color=(20, 20, 20, 255))
    return first, second
