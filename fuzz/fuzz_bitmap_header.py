import sys

import atheris

with atheris.instrument_imports():
    from assetpack.bitmap import read_header_fields
    from assetpack.byteswap import swap_pixel_bytes
    from assetpack.errors import MalformedInputError


def TestOneInput(data: bytes) -> None:
    """Fuzz the header reader and byte swapper with arbitrary buffers."""
    buffer = bytearray(data)

    try:
        header = read_header_fields(buffer)
    except MalformedInputError:
        return  # Expected for short or inconsistent buffers

    original = bytes(buffer)
    try:
        swap_pixel_bytes(swap_pixel_bytes(buffer, header.pixel_data_offset), header.pixel_data_offset)
    except MalformedInputError:
        return  # Expected for odd-length pixel regions
    if bytes(buffer) != original:
        raise RuntimeError("Swapping twice did not restore the buffer")


def main() -> None:
    atheris.Setup(sys.argv, TestOneInput)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
