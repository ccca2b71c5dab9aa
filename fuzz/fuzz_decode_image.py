import sys

import atheris

with atheris.instrument_imports():
    from assetpack.errors import DecodeError
    from assetpack.normalizer import decode_image, normalize_rgb565


def TestOneInput(data: bytes) -> None:
    # Any input either decodes to an image or raises DecodeError.
    try:
        image = decode_image(data, "<fuzz>")
    except DecodeError:
        return
    if image.width * image.height > 1 << 16:
        return  # Keep iterations fast
    normalize_rgb565(image)


def main() -> None:
    atheris.Setup(sys.argv, TestOneInput)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
