from __future__ import annotations

from .image import bitmap_from_pil, bitmap_to_pil, pil_has_alpha, read_bitmap, write_bitmap

__all__ = [
    "bitmap_from_pil",
    "bitmap_to_pil",
    "pil_has_alpha",
    "read_bitmap",
    "write_bitmap",
]
