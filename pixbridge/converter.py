"""Whole-image conversion between packed bitmaps and generic images.

Both directions decide the alpha path once per call and then apply the same
row function to every row, top to bottom.
"""

from __future__ import annotations

import logging
from typing import Callable, Union

import numpy as np

from pixbridge.alpha import bitmap_has_alpha, pixel_format_has_alpha
from pixbridge.bitmap import BitmapFormat, PackedBitmap
from pixbridge.codec import decode_rgb, decode_rgba, encode_rgb, encode_rgba
from pixbridge.errors import GENERIC_COORD_MAX, PACKED_COORD_MAX, check_dimensions
from pixbridge.image import GenericImage, GenericImageView
from pixbridge.pixels.color_convert import from_canonical, to_canonical
from pixbridge.pixels.formats import PixelFormat

logger = logging.getLogger(__name__)

# packed row -> canonical row
DecodeFunc = Callable[[np.ndarray], np.ndarray]
# generic row -> packed row
EncodeFunc = Callable[[np.ndarray], np.ndarray]


def _bitmap_to_generic_image_impl(
    src_bitmap: PackedBitmap,
    dst_image: GenericImage,
    decode: DecodeFunc,
) -> None:
    w, h = check_dimensions(
        src_bitmap.width, src_bitmap.height, limit=GENERIC_COORD_MAX, target="generic image"
    )
    if dst_image.width != w or dst_image.height != h:
        dst_image.recreate(w, h)

    fmt = dst_image.format
    for y in range(h):
        dst_image.row(y)[:] = from_canonical(decode(src_bitmap.row(y)), fmt)


def _generic_view_to_bitmap_impl(
    src_view: GenericImageView,
    bitmap_format: BitmapFormat,
    encode: EncodeFunc,
) -> PackedBitmap:
    w, h = check_dimensions(
        src_view.width, src_view.height, limit=PACKED_COORD_MAX, target="packed bitmap"
    )
    dst_bitmap = PackedBitmap(w, h, bitmap_format)
    for y, row in enumerate(src_view.rows()):
        dst_bitmap.set_row(y, encode(row))
    return dst_bitmap


def bitmap_to_generic_image(src_bitmap: PackedBitmap, dst_image: GenericImage) -> None:
    """Fill `dst_image` with the pixels of `src_bitmap`.

    `dst_image` is recreated to the bitmap's dimensions when they differ, and
    each packed value is rendered in the image's own pixel format. Alpha moves
    across only when both sides have it; a missing side is fully opaque.

    Raises
    ------
    DimensionOverflowError
        If the bitmap's dimensions do not fit the generic image coordinates.
    """

    has_alpha = bitmap_has_alpha(src_bitmap)
    logger.debug(
        "bitmap -> %s: %dx%d, %s decode",
        dst_image.format.name,
        src_bitmap.width,
        src_bitmap.height,
        "rgba" if has_alpha else "rgb",
    )
    if has_alpha:
        return _bitmap_to_generic_image_impl(src_bitmap, dst_image, decode_rgba)
    return _bitmap_to_generic_image_impl(src_bitmap, dst_image, decode_rgb)


def generic_view_to_bitmap(src_view: Union[GenericImageView, GenericImage]) -> PackedBitmap:
    """Render a generic image view into a newly allocated packed bitmap.

    The bitmap is `BitmapFormat.ARGB32` when the view's pixel format carries
    alpha and `BitmapFormat.RGB32` otherwise.

    Raises
    ------
    DimensionOverflowError
        If the view's dimensions do not fit the packed bitmap coordinates.
    """

    if isinstance(src_view, GenericImage):
        src_view = src_view.view()
    fmt: PixelFormat = src_view.format

    has_alpha = pixel_format_has_alpha(fmt)
    logger.debug(
        "%s -> bitmap: %dx%d, %s encode",
        fmt.name,
        src_view.width,
        src_view.height,
        "argb32" if has_alpha else "rgb32",
    )
    if has_alpha:
        return _generic_view_to_bitmap_impl(
            src_view,
            BitmapFormat.ARGB32,
            lambda row: encode_rgba(to_canonical(row, fmt, alpha=True)),
        )
    return _generic_view_to_bitmap_impl(
        src_view,
        BitmapFormat.RGB32,
        lambda row: encode_rgb(to_canonical(row, fmt, alpha=False)),
    )
