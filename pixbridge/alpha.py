"""Alpha capability of packed bitmaps and generic pixel formats.

For a packed bitmap, alpha is a runtime property of the bitmap instance. For
generic images it is a static property of the pixel format, so images and
views are classified by their format alone, never by their contents.
"""

from __future__ import annotations

from typing import Union

from pixbridge.bitmap import PackedBitmap
from pixbridge.image import GenericImage, GenericImageView
from pixbridge.pixels.formats import PixelFormat, get_pixel_format


def bitmap_has_alpha(bitmap: PackedBitmap) -> bool:
    return bitmap.has_alpha_channel()


def pixel_format_has_alpha(
    fmt: Union[str, PixelFormat, GenericImage, GenericImageView],
) -> bool:
    if isinstance(fmt, (GenericImage, GenericImageView)):
        fmt = fmt.format
    return get_pixel_format(fmt).has_alpha
