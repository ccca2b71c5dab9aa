"""Exception hierarchy for the asset packer."""

from __future__ import annotations


class AssetPackError(Exception):
    """Base class for packing failures."""


class MalformedInputError(AssetPackError):
    """Raised when a buffer does not have the layout the packer expects."""


class DecodeError(AssetPackError):
    """Raised when an input file cannot be decoded as an image."""
