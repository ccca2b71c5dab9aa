#!/usr/bin/env python3
"""Pack a folder of bitmaps into the flash blob and offset header."""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from assetpack.cli import main  # noqa: E402

if __name__ == "__main__":  # pragma: no cover - manual utility
    sys.exit(main())
