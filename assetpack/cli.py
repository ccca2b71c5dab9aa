"""Command-line entry point: pack a folder of bitmaps for flashing."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from assetpack.config import ERROR_POLICIES, PackerConfig
from assetpack.errors import AssetPackError
from assetpack.packer import AssetPacker

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="assetpack",
        description="Pack a directory of bitmaps into pictureFiles.txt and pictureFilesHeader.h",
    )
    parser.add_argument("source", help="Directory containing the .bmp files")
    parser.add_argument("--output-dir", help="Where to write the blob and header (defaults to the source directory)")
    parser.add_argument("--capacity", type=int, help="Asset storage capacity in bytes")
    parser.add_argument("--baud", type=int, help="Nominal transfer rate used for the load-time estimate")
    parser.add_argument("--on-error", choices=sorted(ERROR_POLICIES), help="Abort the batch or skip undecodable files")
    parser.add_argument("--no-flip", action="store_true", help="Keep bitmap rows bottom-up instead of top-down")
    parser.add_argument("--reverse", action="store_true", help="Pack files in reverse name order")
    parser.add_argument("--log-level", default="INFO")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    try:
        config = PackerConfig.from_env().with_overrides(
            capacity_bytes=args.capacity,
            baud_rate=args.baud,
            on_error=args.on_error,
            flip_vertical=False if args.no_flip else None,
            reverse_order=True if args.reverse else None,
        )
    except ValueError as exc:
        LOGGER.error("Invalid configuration: %s", exc)
        return 2

    source = Path(args.source).expanduser()
    if not source.is_dir():
        LOGGER.error("Source directory not found: %s", source)
        return 1

    packer = AssetPacker(config)
    try:
        result = packer.pack_directory(source, args.output_dir)
    except (AssetPackError, OSError) as exc:
        LOGGER.error("Packing failed, no output written: %s", exc)
        return 1

    for skipped in result.skipped:
        LOGGER.warning("Not packed: %s (%s)", skipped.path, skipped.reason)
    print(
        f"Packed {len(result.assets)} asset(s): {result.total_used} bytes used, "
        f"{result.summary.percent_used}% of {config.capacity_bytes}"
    )
    return 0
