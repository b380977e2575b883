"""Tests for decoding images from disk."""

from pathlib import Path

import pytest

from pixelweave.errors import ImageDecodeError, ImageFormatError, ImageReadError
from pixelweave.imaging import ImageLoader, load_image


def test_load_png(make_image):
    """A PNG loads with its format and size."""
    path = make_image("a.png", size=(5, 3))

    decoded = load_image(path)

    assert decoded.format == "PNG"
    assert decoded.size == (5, 3)


def test_load_jpeg_detects_format(make_image):
    """The format comes from the file content, not the extension."""
    path = make_image("photo.png", mode="RGB", color=(1, 2, 3), image_format="JPEG")

    assert ImageLoader().load(path).format == "JPEG"


def test_missing_file(tmp_path: Path):
    """A missing path is a read error."""
    with pytest.raises(ImageReadError, match="file not found"):
        load_image(str(tmp_path / "nope.png"))


def test_directory_path(tmp_path: Path):
    """A directory is not a readable image."""
    with pytest.raises(ImageReadError):
        load_image(str(tmp_path))


def test_unrecognized_content(tmp_path: Path):
    """Bytes that are no known image format raise ImageFormatError."""
    path = tmp_path / "notes.png"
    path.write_bytes(b"definitely not an image")

    with pytest.raises(ImageFormatError):
        load_image(str(path))


def test_truncated_image(make_image):
    """A recognized but truncated file fails to decode."""
    path = Path(make_image("big.png", size=(64, 64), color=(1, 2, 3, 4)))
    data = path.read_bytes()
    path.write_bytes(data[: data.index(b"IDAT") + 10])

    with pytest.raises(ImageDecodeError):
        load_image(str(path))
