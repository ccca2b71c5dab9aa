"""Fixed-offset access to the minimal bitmap container.

Only the four header fields the packer needs are read: total size, pixel data
offset, width and height. The magic signature and compression mode are not
checked; any buffer long enough to hold the fields is accepted.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass

from assetpack.errors import MalformedInputError

SIZE_OFFSET = 0x02
DATA_OFFSET_OFFSET = 0x0A
WIDTH_OFFSET = 0x12
HEIGHT_OFFSET = 0x16
FIELD_SIZE = 4
MIN_HEADER_LENGTH = HEIGHT_OFFSET + FIELD_SIZE

FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
BI_BITFIELDS = 3
RGB565_MASKS = (0xF800, 0x07E0, 0x001F)
PIXELS_PER_METER = 2835

_U32 = struct.Struct("<I")


@dataclass(frozen=True)
class BitmapHeader:
    total_size: int
    pixel_data_offset: int
    width: int
    height: int


def _read_u32(buffer: bytes | bytearray, offset: int) -> int:
    end = offset + FIELD_SIZE
    if offset < 0 or end > len(buffer):
        raise MalformedInputError(
            f"Bitmap field at 0x{offset:02X} needs {end} bytes, buffer has {len(buffer)}"
        )
    return _U32.unpack_from(buffer, offset)[0]


def read_header_fields(buffer: bytes | bytearray) -> BitmapHeader:
    """Read the fixed-offset header fields from a bitmap buffer."""
    if len(buffer) < MIN_HEADER_LENGTH:
        raise MalformedInputError(
            f"Bitmap buffer too short: {len(buffer)} bytes, need at least {MIN_HEADER_LENGTH}"
        )
    header = BitmapHeader(
        total_size=_read_u32(buffer, SIZE_OFFSET),
        pixel_data_offset=_read_u32(buffer, DATA_OFFSET_OFFSET),
        width=_read_u32(buffer, WIDTH_OFFSET),
        height=_read_u32(buffer, HEIGHT_OFFSET),
    )
    if header.pixel_data_offset > len(buffer):
        raise MalformedInputError(
            f"Pixel data offset {header.pixel_data_offset} is past the end of a {len(buffer)} byte buffer"
        )
    return header


def row_stride(width: int, bytes_per_pixel: int = 2) -> int:
    """Row length in bytes, padded to a 4-byte boundary."""
    return (width * bytes_per_pixel + 3) & ~3


def build_container(
    width: int,
    height: int,
    pixel_data: bytes | bytearray,
    masks: tuple[int, int, int] = RGB565_MASKS,
) -> bytearray:
    """Wrap 16-bit pixel rows in a BI_BITFIELDS bitmap container."""
    data_offset = FILE_HEADER_SIZE + INFO_HEADER_SIZE + 4 * len(masks)
    total_size = data_offset + len(pixel_data)
    buffer = bytearray(data_offset)
    buffer[0:2] = b"BM"
    _U32.pack_into(buffer, SIZE_OFFSET, total_size)
    _U32.pack_into(buffer, DATA_OFFSET_OFFSET, data_offset)
    struct.pack_into(
        "<IiiHHIIiiII",
        buffer,
        FILE_HEADER_SIZE,
        INFO_HEADER_SIZE,
        width,
        height,
        1,  # planes
        16,  # bits per pixel
        BI_BITFIELDS,
        len(pixel_data),
        PIXELS_PER_METER,
        PIXELS_PER_METER,
        0,
        0,
    )
    struct.pack_into(f"<{len(masks)}I", buffer, FILE_HEADER_SIZE + INFO_HEADER_SIZE, *masks)
    buffer.extend(pixel_data)
    return buffer
