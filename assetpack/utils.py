"""
Shared utility functions for parsing and naming

Provides common helpers for:
- String parsing: Environment variable conversion (parse_bool, parse_int, split_csv)
- Symbol sanitization: Converting file names to C-safe identifiers

These utilities are used by the packer configuration and the header generator.
"""

from __future__ import annotations

import re

_INVALID_SYMBOL_CHARS = re.compile(r"[^A-Za-z0-9_]")


def sanitize_symbol_name(name: str) -> str:
    """Convert a file stem to a C identifier usable in a #define."""
    symbol = _INVALID_SYMBOL_CHARS.sub("_", name.strip())
    if not symbol:
        return "_"
    if symbol[0].isdigit():
        return f"_{symbol}"
    return symbol


def parse_bool(value: str | None, default: bool = False) -> bool:
    """Interpret env-style booleans."""
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def parse_int(value: str | None, default: int) -> int:
    """Best-effort int parser with fallback."""
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def split_csv(value: str | None) -> list[str]:
    """Split comma-separated strings into trimmed tokens."""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]
