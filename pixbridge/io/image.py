from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import numpy as np
from PIL import Image

from pixbridge.bitmap import BitmapFormat, PackedBitmap
from pixbridge.codec import decode_rgb, decode_rgba, encode_rgb, encode_rgba

logger = logging.getLogger(__name__)

_ALPHA_MODES = ("RGBA", "RGBa", "LA", "La", "PA")


def pil_has_alpha(image: Image.Image) -> bool:
    """Whether a Pillow image carries transparency (alpha band or palette/color key)."""

    return image.mode in _ALPHA_MODES or "transparency" in image.info


def bitmap_from_pil(image: Image.Image) -> PackedBitmap:
    """Pack a Pillow image into ARGB32 (if it has transparency) or RGB32."""

    has_alpha = pil_has_alpha(image)
    rgba = np.asarray(image.convert("RGBA"), dtype=np.uint8)
    width, height = image.size
    if has_alpha:
        return PackedBitmap(width, height, BitmapFormat.ARGB32, data=encode_rgba(rgba))
    return PackedBitmap(width, height, BitmapFormat.RGB32, data=encode_rgb(rgba))


def bitmap_to_pil(bitmap: PackedBitmap) -> Image.Image:
    """Unpack a bitmap into an ``RGBA`` (ARGB32) or ``RGB`` (RGB32) Pillow image."""

    if bitmap.has_alpha_channel():
        return Image.fromarray(np.ascontiguousarray(decode_rgba(bitmap.data)))
    return Image.fromarray(np.ascontiguousarray(decode_rgb(bitmap.data)))


def read_bitmap(path: str | Path) -> PackedBitmap:
    """Read an image file from disk via Pillow."""

    path_str = str(path)
    with Image.open(path_str) as image:
        image.load()
        bitmap = bitmap_from_pil(image)
    logger.info("Read %s as %dx%d %s", path_str, bitmap.width, bitmap.height, bitmap.format.value)
    return bitmap


def write_bitmap(bitmap: PackedBitmap, path: str | Path, *, format: Optional[str] = None) -> None:
    """Write a bitmap to disk via Pillow; the file format follows the suffix unless given."""

    path_str = str(path)
    bitmap_to_pil(bitmap).save(path_str, format=format)
    logger.info("Wrote %dx%d %s to %s", bitmap.width, bitmap.height, bitmap.format.value, path_str)
