"""Configuration helpers for the bitmap asset packer."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Literal

from assetpack.utils import parse_bool, parse_int, split_csv

ErrorPolicy = Literal["abort", "skip"]

# 256 sectors of 64KB in the external flash
DEFAULT_CAPACITY_BYTES = 256 * 65536
DEFAULT_BAUD_RATE = 57600
DEFAULT_EXTENSIONS = (".bmp",)
DEFAULT_DATA_FILENAME = "pictureFiles.txt"
DEFAULT_HEADER_FILENAME = "pictureFilesHeader.h"
ERROR_POLICIES = {"abort", "skip"}


def _normalize_extension(value: str) -> str:
    lowered = value.strip().lower()
    if lowered and not lowered.startswith("."):
        lowered = "." + lowered
    return lowered


def _normalize_choice(value: str | None, allowed: set[str], default: str) -> str:
    if not value:
        return default
    lowered = value.strip().lower()
    if lowered in allowed:
        return lowered
    return default


def _positive_int(value: str | None, default: int) -> int:
    parsed = parse_int(value, default)
    return parsed if parsed > 0 else default


@dataclass(frozen=True)
class PackerConfig:
    capacity_bytes: int = DEFAULT_CAPACITY_BYTES
    baud_rate: int = DEFAULT_BAUD_RATE
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    on_error: ErrorPolicy = "abort"
    flip_vertical: bool = True
    reverse_order: bool = False
    data_filename: str = DEFAULT_DATA_FILENAME
    header_filename: str = DEFAULT_HEADER_FILENAME

    def __post_init__(self) -> None:
        if self.capacity_bytes <= 0:
            raise ValueError("capacity_bytes must be positive")
        if self.baud_rate <= 0:
            raise ValueError("baud_rate must be positive")
        if self.on_error not in ERROR_POLICIES:
            raise ValueError(f"on_error must be one of {sorted(ERROR_POLICIES)}")

    def accepts(self, suffix: str) -> bool:
        """Return True when a file suffix is one of the recognized bitmap extensions."""
        return suffix.lower() in self.extensions

    def with_overrides(self, **changes: object) -> PackerConfig:
        """Return a copy with every non-None override applied."""
        applied = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **applied)  # type: ignore[arg-type]

    @staticmethod
    def from_env(env: dict[str, str] | None = None) -> PackerConfig:
        source = env if env is not None else os.environ
        extensions = tuple(
            ext for ext in (_normalize_extension(raw) for raw in split_csv(source.get("ASSETPACK_EXTENSIONS"))) if ext
        )
        return PackerConfig(
            capacity_bytes=_positive_int(source.get("ASSETPACK_CAPACITY_BYTES"), DEFAULT_CAPACITY_BYTES),
            baud_rate=_positive_int(source.get("ASSETPACK_BAUD_RATE"), DEFAULT_BAUD_RATE),
            extensions=extensions or DEFAULT_EXTENSIONS,
            on_error=_normalize_choice(source.get("ASSETPACK_ON_ERROR"), ERROR_POLICIES, "abort"),  # type: ignore[arg-type]
            flip_vertical=parse_bool(source.get("ASSETPACK_FLIP_VERTICAL"), True),
            reverse_order=parse_bool(source.get("ASSETPACK_REVERSE_ORDER"), False),
            data_filename=(source.get("ASSETPACK_DATA_FILENAME") or "").strip() or DEFAULT_DATA_FILENAME,
            header_filename=(source.get("ASSETPACK_HEADER_FILENAME") or "").strip() or DEFAULT_HEADER_FILENAME,
        )
