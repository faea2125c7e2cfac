"""Generic pixel formats and their conversion to the canonical 8-bit pixel.

pixbridge routes every conversion through a single canonical representation:

- RGB8 (``uint8``, shape ``(..., 3)``)
- RGBA8 (``uint8``, shape ``(..., 4)``)
"""

from __future__ import annotations

from .color_convert import from_canonical, to_canonical
from .formats import (
    PIXEL_FORMATS,
    PixelFormat,
    PixelFormatRegistry,
    get_pixel_format,
    list_pixel_formats,
    register_formats_from_config,
    register_pixel_format,
)

__all__ = [
    "PIXEL_FORMATS",
    "PixelFormat",
    "PixelFormatRegistry",
    "from_canonical",
    "get_pixel_format",
    "list_pixel_formats",
    "register_formats_from_config",
    "register_pixel_format",
    "to_canonical",
]
