"""Swap the byte order of 16-bit pixels for the display controller."""

from __future__ import annotations

from assetpack.errors import MalformedInputError


def swap_pixel_bytes(buffer: bytearray, start: int = 0) -> bytearray:
    """Swap each 2-byte pixel of ``buffer[start:]`` in place and return the buffer."""
    if start < 0 or start > len(buffer):
        raise MalformedInputError(f"Pixel region start {start} outside a {len(buffer)} byte buffer")
    length = len(buffer) - start
    if length % 2:
        raise MalformedInputError(f"Pixel region of {length} bytes is not a whole number of 16-bit pixels")
    low = buffer[start::2]
    buffer[start::2] = buffer[start + 1 :: 2]
    buffer[start + 1 :: 2] = low
    return buffer
