"""
assetpack - Bitmap asset packer for flash-backed displays

Converts a folder of bitmaps into one packed binary blob plus a C header of
offsets, ready to be flashed next to firmware that streams images straight
from external memory to an RGB565 display controller.

Core modules:
- bitmap: Fixed-offset bitmap header fields and the minimal container layout
- normalizer: Image decoding and RGB565 re-encoding
- byteswap: 16-bit pixel byte order swapping
- symbols: Offset symbol table and header rendering
- packer: Batch orchestration and atomic output
- config: Packer configuration from defaults, environment and CLI flags
"""

__version__ = "0.3.1"
