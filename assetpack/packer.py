"""Batch packing of bitmap assets into a flash blob and offset header.

Each accepted file goes through decode, RGB565 normalization, header read and
byte swap, then lands in the data stream as ``[width][height][payload]``. The
running offset before each asset is recorded as ``<name>_OFFSET`` and a memory
summary closes the header once every file has been packed.

Files are processed strictly in the order given; offsets depend on it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from pathlib import Path
from typing import BinaryIO, TextIO

from assetpack.bitmap import read_header_fields
from assetpack.byteswap import swap_pixel_bytes
from assetpack.config import PackerConfig
from assetpack.errors import DecodeError, MalformedInputError
from assetpack.normalizer import decode_image, normalize_rgb565
from assetpack.symbols import MemorySummary, SymbolTable
from assetpack.utils import sanitize_symbol_name

LOGGER = logging.getLogger(__name__)

PREFIX_SIZE = 2
TEMP_SUFFIX = ".tmp"


@dataclass(frozen=True)
class PackedAsset:
    name: str
    source: Path
    width: int
    height: int
    payload_length: int
    offset: int = 0

    @property
    def prefix(self) -> bytes:
        return bytes((self.width & 0xFF, self.height & 0xFF))

    @property
    def packed_length(self) -> int:
        return self.payload_length + PREFIX_SIZE


@dataclass(frozen=True)
class SkippedFile:
    path: Path
    reason: str


@dataclass(frozen=True)
class PackResult:
    assets: tuple[PackedAsset, ...]
    skipped: tuple[SkippedFile, ...]
    summary: MemorySummary

    @property
    def total_used(self) -> int:
        return self.summary.used

    @property
    def complete(self) -> bool:
        """True when every accepted file made it into the blob."""
        return not self.skipped


class AssetPacker:
    """Packs bitmaps into one blob plus a header of offset symbols."""

    def __init__(self, config: PackerConfig | None = None, logger: logging.Logger | None = None) -> None:
        self._config = config or PackerConfig()
        self._logger = logger or LOGGER

    @property
    def config(self) -> PackerConfig:
        return self._config

    def select_bitmaps(self, paths: Iterable[str | Path]) -> list[Path]:
        """Keep paths with a recognized bitmap extension, preserving order."""
        selected: list[Path] = []
        for raw in paths:
            path = Path(raw)
            if self._config.accepts(path.suffix):
                selected.append(path)
            else:
                self._logger.debug("Ignoring %s (not a bitmap)", path)
        return selected

    def transcode(self, path: str | Path) -> tuple[PackedAsset, bytearray]:
        """Convert one file into its asset record and byte-swapped RGB565 payload.

        The returned asset has offset 0; :meth:`pack` places it.
        """
        path = Path(path)
        image = decode_image(path.read_bytes(), path)
        buffer = normalize_rgb565(image, flip_vertical=self._config.flip_vertical)
        header = read_header_fields(buffer)
        payload_length = len(buffer) - header.pixel_data_offset
        swap_pixel_bytes(buffer, header.pixel_data_offset)
        if header.width > 0xFF or header.height > 0xFF:
            self._logger.warning(
                "%s is %dx%d; the size prefix only holds 8 bits per dimension",
                path.name,
                header.width,
                header.height,
            )
        asset = PackedAsset(
            name=sanitize_symbol_name(path.stem),
            source=path,
            width=header.width,
            height=header.height,
            payload_length=payload_length,
        )
        return asset, buffer[header.pixel_data_offset :]

    def pack(
        self,
        paths: Iterable[str | Path],
        data_stream: BinaryIO,
        header_stream: TextIO,
    ) -> PackResult:
        """Pack every bitmap in ``paths`` into the two output streams."""
        table = SymbolTable()
        assets: list[PackedAsset] = []
        skipped: list[SkippedFile] = []
        offset = 0

        for path in self.select_bitmaps(paths):
            try:
                asset, payload = self.transcode(path)
                table.add(asset.name, offset)
            except (DecodeError, MalformedInputError) as exc:
                if self._config.on_error == "abort":
                    raise
                self._logger.warning("Skipping %s: %s", path, exc)
                skipped.append(SkippedFile(path=path, reason=str(exc)))
                continue

            asset = replace(asset, offset=offset)
            data_stream.write(asset.prefix)
            data_stream.write(payload)
            offset += asset.packed_length
            assets.append(asset)
            self._logger.info(
                "Packed %s as %s_OFFSET %d (%dx%d, %d bytes)",
                path.name,
                asset.name,
                asset.offset,
                asset.width,
                asset.height,
                asset.packed_length,
            )

        summary = MemorySummary.compute(offset, self._config.capacity_bytes, self._config.baud_rate)
        if summary.available < 0:
            self._logger.warning(
                "Packed assets use %d bytes, %d more than the %d byte capacity",
                summary.used,
                -summary.available,
                self._config.capacity_bytes,
            )
        header_stream.write(table.render(summary))
        self._logger.info(
            "Packed %d asset(s): %d bytes used, %d available (%d%%)",
            len(assets),
            summary.used,
            summary.available,
            summary.percent_used,
        )
        return PackResult(assets=tuple(assets), skipped=tuple(skipped), summary=summary)

    def list_directory(self, directory: str | Path) -> list[Path]:
        """Return the regular files in ``directory`` in packing order."""
        files = sorted(path for path in Path(directory).iterdir() if path.is_file())
        if self._config.reverse_order:
            files.reverse()
        return files

    def pack_directory(self, directory: str | Path, output_dir: str | Path | None = None) -> PackResult:
        """Pack a directory and write both artifacts next to it, or into ``output_dir``.

        Outputs are written to temporary siblings and only renamed into place
        after the whole batch succeeds.
        """
        directory = Path(directory)
        target_dir = Path(output_dir) if output_dir is not None else directory
        paths = self.list_directory(directory)

        data_path = target_dir / self._config.data_filename
        header_path = target_dir / self._config.header_filename
        data_tmp = data_path.with_name(data_path.name + TEMP_SUFFIX)
        header_tmp = header_path.with_name(header_path.name + TEMP_SUFFIX)

        try:
            with data_tmp.open("wb") as data_stream, header_tmp.open("w", encoding="ascii", newline="\n") as header_stream:
                result = self.pack(paths, data_stream, header_stream)
            data_tmp.replace(data_path)
            header_tmp.replace(header_path)
        except BaseException:
            for tmp_path in (data_tmp, header_tmp):
                tmp_path.unlink(missing_ok=True)
            raise

        self._logger.info("Wrote %s and %s", data_path, header_path)
        return result
