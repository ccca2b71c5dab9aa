"""Tests for assetpack.config — packer configuration."""

from __future__ import annotations

import pytest

from assetpack.config import (
    DEFAULT_BAUD_RATE,
    DEFAULT_CAPACITY_BYTES,
    DEFAULT_DATA_FILENAME,
    DEFAULT_HEADER_FILENAME,
    PackerConfig,
)


class TestDefaults:
    def test_device_constants(self) -> None:
        config = PackerConfig()
        assert config.capacity_bytes == 16_777_216 == DEFAULT_CAPACITY_BYTES
        assert config.baud_rate == 57600 == DEFAULT_BAUD_RATE
        assert config.extensions == (".bmp",)
        assert config.on_error == "abort"
        assert config.flip_vertical is True
        assert config.reverse_order is False

    def test_output_names(self) -> None:
        config = PackerConfig()
        assert config.data_filename == DEFAULT_DATA_FILENAME == "pictureFiles.txt"
        assert config.header_filename == DEFAULT_HEADER_FILENAME == "pictureFilesHeader.h"

    def test_accepts_is_case_insensitive(self) -> None:
        config = PackerConfig()
        assert config.accepts(".bmp")
        assert config.accepts(".BMP")
        assert not config.accepts(".png")
        assert not config.accepts("")


class TestValidation:
    @pytest.mark.parametrize("field", ["capacity_bytes", "baud_rate"])
    def test_non_positive_rejected(self, field: str) -> None:
        with pytest.raises(ValueError):
            PackerConfig(**{field: 0})

    def test_unknown_policy_rejected(self) -> None:
        with pytest.raises(ValueError):
            PackerConfig(on_error="retry")  # type: ignore[arg-type]


class TestFromEnv:
    def test_empty_env_gives_defaults(self) -> None:
        assert PackerConfig.from_env({}) == PackerConfig()

    def test_reads_all_variables(self) -> None:
        config = PackerConfig.from_env(
            {
                "ASSETPACK_CAPACITY_BYTES": "4096",
                "ASSETPACK_BAUD_RATE": "115200",
                "ASSETPACK_EXTENSIONS": "bmp, .DIB",
                "ASSETPACK_ON_ERROR": "Skip",
                "ASSETPACK_FLIP_VERTICAL": "false",
                "ASSETPACK_REVERSE_ORDER": "yes",
                "ASSETPACK_DATA_FILENAME": "assets.bin",
                "ASSETPACK_HEADER_FILENAME": "assets.h",
            }
        )
        assert config == PackerConfig(
            capacity_bytes=4096,
            baud_rate=115200,
            extensions=(".bmp", ".dib"),
            on_error="skip",
            flip_vertical=False,
            reverse_order=True,
            data_filename="assets.bin",
            header_filename="assets.h",
        )

    def test_bad_values_fall_back(self) -> None:
        config = PackerConfig.from_env(
            {
                "ASSETPACK_CAPACITY_BYTES": "-5",
                "ASSETPACK_BAUD_RATE": "fast",
                "ASSETPACK_ON_ERROR": "retry",
                "ASSETPACK_EXTENSIONS": " , ",
                "ASSETPACK_DATA_FILENAME": "  ",
            }
        )
        assert config == PackerConfig()


class TestWithOverrides:
    def test_none_values_ignored(self) -> None:
        base = PackerConfig(capacity_bytes=1024)
        assert base.with_overrides(capacity_bytes=None, baud_rate=None) == base

    def test_values_applied(self) -> None:
        config = PackerConfig().with_overrides(baud_rate=9600, on_error="skip")
        assert config.baud_rate == 9600
        assert config.on_error == "skip"

    def test_invalid_override_rejected(self) -> None:
        with pytest.raises(ValueError):
            PackerConfig().with_overrides(capacity_bytes=-1)
