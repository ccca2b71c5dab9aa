"""Shared test fixtures for the asset packer test suite.

This module provides reusable fixtures for:
- Writing small bitmaps (and other images) into a temporary directory
- Logger mocking
- Packer configuration objects
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from unittest.mock import Mock

import pytest
from PIL import Image

from assetpack.config import PackerConfig

ImageWriter = Callable[..., Path]


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing.

    Returns a Mock with spec=logging.Logger to ensure only valid
    logger methods can be called.
    """
    return Mock(spec=logging.Logger)


# ============================================================================
# Image Fixtures
# ============================================================================


@pytest.fixture
def write_image(tmp_path: Path) -> ImageWriter:
    """Factory that saves a solid-color image into ``tmp_path``.

    Usage:
        path = write_image("icon.bmp", (4, 4), color=(255, 0, 0))
    """

    def _write(
        name: str,
        size: tuple[int, int],
        color: tuple[int, int, int] = (255, 0, 0),
        directory: Path | None = None,
    ) -> Path:
        target = (directory or tmp_path) / name
        Image.new("RGB", size, color).save(target)
        return target

    return _write


@pytest.fixture
def truncated_bitmap(tmp_path: Path) -> Path:
    """A bitmap whose pixel data has been cut short."""
    path = tmp_path / "broken.bmp"
    Image.new("RGB", (8, 8), (0, 255, 0)).save(path)
    data = path.read_bytes()
    path.write_bytes(data[: len(data) - 40])
    return path


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def config() -> PackerConfig:
    """Default packer configuration."""
    return PackerConfig()


@pytest.fixture
def skip_config() -> PackerConfig:
    """Configuration that skips undecodable files instead of aborting."""
    return PackerConfig(on_error="skip")
