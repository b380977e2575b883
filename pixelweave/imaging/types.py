from __future__ import annotations

from dataclasses import dataclass, field

from PIL import Image

from ..errors import BufferLengthError, BufferTooSmallError

PIXEL_BYTES = 4


@dataclass(frozen=True)
class PixelBuffer:
    """Row-major RGBA byte buffer, one 4-byte block per pixel."""

    data: bytes

    def validate(self) -> None:
        """Validate that the buffer holds whole RGBA pixels."""
        if len(self.data) % PIXEL_BYTES != 0:
            raise BufferLengthError(
                f"Buffer length {len(self.data)} is not a multiple of {PIXEL_BYTES}"
            )

    def __len__(self) -> int:
        return len(self.data)

    @property
    def pixel_count(self) -> int:
        """Return the number of complete pixels in the buffer."""
        self.validate()
        return len(self.data) // PIXEL_BYTES

    def pixel(self, index: int) -> bytes:
        """Return the RGBA block of pixel ``index``."""
        if index < 0 or index >= self.pixel_count:
            raise IndexError(f"Pixel index {index} out of range")
        start = index * PIXEL_BYTES
        return self.data[start : start + PIXEL_BYTES]

    @classmethod
    def from_image(cls, image: Image.Image) -> "PixelBuffer":
        if image.mode != "RGBA":
            image = image.convert("RGBA")
        return cls(image.tobytes())


@dataclass
class OutputImage:
    width: int
    height: int
    path: str
    data: bytes = field(default=b"", repr=False)

    @property
    def capacity(self) -> int:
        return self.width * self.height * PIXEL_BYTES

    def set_data(self, buffer: PixelBuffer) -> None:
        if len(buffer) > self.capacity:
            raise BufferTooSmallError(len(buffer), self.capacity)
        self.data = buffer.data

    def to_image(self) -> Image.Image:
        return Image.frombytes("RGBA", (self.width, self.height), self.data)
