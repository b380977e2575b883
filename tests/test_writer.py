"""Tests for encoding pixel buffers to disk."""

from pathlib import Path

import pytest
from PIL import Image

from pixelweave.errors import ImageSaveError
from pixelweave.imaging import PixelBuffer, save_buffer


def test_save_png_keeps_alpha(tmp_path: Path):
    """PNG output stores the RGBA pixels unchanged."""
    path = tmp_path / "out.png"
    buffer = PixelBuffer(bytes([1, 2, 3, 4, 5, 6, 7, 8]))

    save_buffer(buffer, 2, 1, str(path), "PNG")

    with Image.open(path) as img:
        assert img.mode == "RGBA"
        assert img.tobytes() == buffer.data


def test_save_jpeg_drops_alpha(tmp_path: Path):
    """JPEG output is written as RGB."""
    path = tmp_path / "out.jpg"

    save_buffer(PixelBuffer(bytes([200, 100, 50, 128] * 4)), 2, 2, str(path), "JPEG")

    with Image.open(path) as img:
        assert img.format == "JPEG"
        assert img.mode == "RGB"


def test_save_into_missing_directory(tmp_path: Path):
    """A write failure surfaces as ImageSaveError."""
    path = tmp_path / "missing" / "out.png"

    with pytest.raises(ImageSaveError):
        save_buffer(PixelBuffer(bytes(4)), 1, 1, str(path), "PNG")


def test_save_short_buffer(tmp_path: Path):
    """Too little data for the requested size cannot be encoded."""
    with pytest.raises(ImageSaveError):
        save_buffer(PixelBuffer(bytes(4)), 2, 2, str(tmp_path / "out.png"), "PNG")


def test_save_mpo_drops_alpha(tmp_path: Path):
    """MPO, Pillow's name for many camera JPEGs, is written without alpha."""
    path = tmp_path / "out.mpo"

    save_buffer(PixelBuffer(bytes([200, 100, 50, 128] * 4)), 2, 2, str(path), "MPO")

    with Image.open(path) as img:
        assert img.mode == "RGB"
        assert img.size == (2, 2)
