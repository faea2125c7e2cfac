"""pixbridge - packed 32-bit bitmaps <-> generic numpy pixel images.

Keep top-level imports lightweight: submodules are lazy-loaded on demand so
that `import pixbridge` and `import pixbridge.cli` stay cheap.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__version__ = "0.1.0"

__all__ = [
    # Modules
    "alpha",
    "bitmap",
    "codec",
    "config",
    "converter",
    "image",
    "io",
    "pixels",
    "utils",
    # Types
    "BitmapFormat",
    "DimensionOverflowError",
    "GenericImage",
    "GenericImageView",
    "PackedBitmap",
    "PixelFormat",
    # Conversions
    "bitmap_to_generic_image",
    "generic_view_to_bitmap",
    "packed_rgb_to_pixel",
    "packed_rgba_to_pixel",
    "pixel_to_packed_rgb",
    "pixel_to_packed_rgba",
    # Formats
    "get_pixel_format",
    "register_pixel_format",
]


_LAZY_SUBMODULES = {
    "alpha",
    "bitmap",
    "codec",
    "config",
    "converter",
    "image",
    "io",
    "pixels",
    "utils",
}

_LAZY_EXPORTS = {
    "BitmapFormat": ("bitmap", "BitmapFormat"),
    "PackedBitmap": ("bitmap", "PackedBitmap"),
    "DimensionOverflowError": ("errors", "DimensionOverflowError"),
    "GenericImage": ("image", "GenericImage"),
    "GenericImageView": ("image", "GenericImageView"),
    "PixelFormat": ("pixels.formats", "PixelFormat"),
    "get_pixel_format": ("pixels.formats", "get_pixel_format"),
    "register_pixel_format": ("pixels.formats", "register_pixel_format"),
    "bitmap_to_generic_image": ("converter", "bitmap_to_generic_image"),
    "generic_view_to_bitmap": ("converter", "generic_view_to_bitmap"),
    "packed_rgb_to_pixel": ("codec", "packed_rgb_to_pixel"),
    "packed_rgba_to_pixel": ("codec", "packed_rgba_to_pixel"),
    "pixel_to_packed_rgb": ("codec", "pixel_to_packed_rgb"),
    "pixel_to_packed_rgba": ("codec", "pixel_to_packed_rgba"),
}


def __getattr__(name: str) -> Any:  # pragma: no cover - thin delegation
    if name in _LAZY_SUBMODULES:
        module = import_module(f"{__name__}.{name}")
        globals()[name] = module
        return module

    target = _LAZY_EXPORTS.get(name)
    if target is not None:
        module_name, attr = target
        module = import_module(f"{__name__}.{module_name}")
        value = getattr(module, attr)
        globals()[name] = value
        return value

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
