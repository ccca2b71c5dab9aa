"""Decode source images and re-encode them as RGB565 bitmaps."""

from __future__ import annotations

import io
import logging
import struct
from pathlib import Path

from PIL import Image, ImageOps, UnidentifiedImageError

from assetpack.bitmap import build_container, row_stride
from assetpack.errors import DecodeError

LOGGER = logging.getLogger(__name__)

_PIXEL = struct.Struct("<H")


def rgb565(r: int, g: int, b: int) -> int:
    """Pack 8-bit channels into a 5-6-5 value."""
    return ((r & 0xF8) << 8) | ((g & 0xFC) << 3) | (b >> 3)


def decode_image(data: bytes, source: str | Path = "<memory>") -> Image.Image:
    """Decode raw file bytes into a fully loaded Pillow image."""
    try:
        image = Image.open(io.BytesIO(data))
        image.load()
    except UnidentifiedImageError as exc:
        raise DecodeError(f"Not a recognized image: {source}") from exc
    except (OSError, EOFError, ValueError, SyntaxError, Image.DecompressionBombError) as exc:
        # Pillow reports truncated or corrupt pixel data through these
        raise DecodeError(f"Failed to decode {source}: {exc}") from exc
    LOGGER.debug("Decoded %s (%s, %dx%d)", source, image.mode, image.width, image.height)
    return image


def encode_rows(image: Image.Image) -> bytearray:
    """Encode an image as bottom-up RGB565 rows padded to 4 bytes."""
    rgb = image.convert("RGB")
    width, height = rgb.size
    stride = row_stride(width)
    raw = rgb.tobytes()
    data = bytearray(stride * height)
    for y in range(height):
        row_start = (height - 1 - y) * stride
        source = y * width * 3
        for x in range(width):
            r, g, b = raw[source + 3 * x : source + 3 * x + 3]
            _PIXEL.pack_into(data, row_start + 2 * x, rgb565(r, g, b))
    return data


def normalize_rgb565(image: Image.Image, *, flip_vertical: bool = True) -> bytearray:
    """Return a new bitmap buffer holding the image as 16bpp RGB565.

    With ``flip_vertical`` the image is mirrored before encoding, so the
    bottom-up bitmap rows end up top-down in the pixel data region. That is
    the order the display driver streams rows to the panel.
    """
    if flip_vertical:
        image = ImageOps.flip(image)
    pixel_data = encode_rows(image)
    return build_container(image.width, image.height, pixel_data)
