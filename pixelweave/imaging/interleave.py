from __future__ import annotations

from ..errors import BufferLengthError
from .types import PIXEL_BYTES, PixelBuffer

# Offsets that are a multiple of the cycle take their pixel from the first buffer.
CYCLE_BYTES = PIXEL_BYTES * 2


def interleave(first: PixelBuffer, second: PixelBuffer) -> PixelBuffer:
    """Alternate pixel blocks from two equally sized RGBA buffers.

    Even pixels come from ``first``, odd pixels from ``second``.
    """
    first.validate()
    second.validate()
    if len(first) != len(second):
        raise BufferLengthError(
            f"Buffers differ in length ({len(first)} vs {len(second)} bytes)"
        )
    out = bytearray(len(first))
    for offset in range(0, len(out), PIXEL_BYTES):
        source = first.data if offset % CYCLE_BYTES == 0 else second.data
        out[offset : offset + PIXEL_BYTES] = source[offset : offset + PIXEL_BYTES]
    return PixelBuffer(bytes(out))
