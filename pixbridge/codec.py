"""Packed ``0xAARRGGBB`` values <-> canonical RGB8/RGBA8 pixels.

All functions accept a Python int / single pixel or numpy arrays of any shape,
so the converters can run them over a whole row at once.
"""

from __future__ import annotations

from typing import Union

import numpy as np

from pixbridge.pixels.color_convert import from_canonical, to_canonical
from pixbridge.pixels.formats import PixelFormat

PackedLike = Union[int, np.ndarray]
FormatLike = Union[str, PixelFormat]


def q_red(packed: PackedLike) -> PackedLike:
    return (packed >> 16) & 0xFF


def q_green(packed: PackedLike) -> PackedLike:
    return (packed >> 8) & 0xFF


def q_blue(packed: PackedLike) -> PackedLike:
    return packed & 0xFF


def q_alpha(packed: PackedLike) -> PackedLike:
    return (packed >> 24) & 0xFF


def q_rgb(r: int, g: int, b: int) -> int:
    return q_rgba(r, g, b, 0xFF)


def q_rgba(r: int, g: int, b: int, a: int) -> int:
    return ((a & 0xFF) << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


# ----------------------------------------------------------------------
def decode_rgb(packed: PackedLike) -> np.ndarray:
    """Packed values -> canonical RGB8 of shape ``(..., 3)``; alpha is ignored."""

    p = np.asarray(packed, dtype=np.uint32)
    return np.stack([q_red(p), q_green(p), q_blue(p)], axis=-1).astype(np.uint8)


def decode_rgba(packed: PackedLike) -> np.ndarray:
    """Packed values -> canonical RGBA8 of shape ``(..., 4)``."""

    p = np.asarray(packed, dtype=np.uint32)
    return np.stack([q_red(p), q_green(p), q_blue(p), q_alpha(p)], axis=-1).astype(np.uint8)


def _canonical_planes(canonical: np.ndarray) -> np.ndarray:
    c = np.asarray(canonical)
    if c.ndim < 1 or c.shape[-1] not in (3, 4):
        raise ValueError(
            f"Expected canonical RGB8/RGBA8 pixels (last axis 3 or 4), got shape {c.shape}"
        )
    return np.clip(c, 0, 255).astype(np.uint32)


def encode_rgb(canonical: np.ndarray) -> np.ndarray:
    """Canonical pixels -> packed values with alpha forced to ``0xff``."""

    c = _canonical_planes(canonical)
    return np.uint32(0xFF000000) | (c[..., 0] << 16) | (c[..., 1] << 8) | c[..., 2]


def encode_rgba(canonical: np.ndarray) -> np.ndarray:
    """Canonical pixels -> packed values carrying the source alpha (opaque for RGB8)."""

    c = _canonical_planes(canonical)
    alpha = c[..., 3] if c.shape[-1] == 4 else np.uint32(0xFF)
    return (alpha << 24) | (c[..., 0] << 16) | (c[..., 1] << 8) | c[..., 2]


# ----------------------------------------------------------------------
def _as_packed_result(values: np.ndarray) -> PackedLike:
    values = np.asarray(values, dtype=np.uint32)
    return int(values) if values.ndim == 0 else values


def packed_rgb_to_pixel(packed: PackedLike, fmt: FormatLike) -> np.ndarray:
    """Packed value -> pixel of `fmt`, ignoring the packed alpha byte."""
    return from_canonical(decode_rgb(packed), fmt)


def packed_rgba_to_pixel(packed: PackedLike, fmt: FormatLike) -> np.ndarray:
    """Packed value -> pixel of `fmt`, keeping alpha if `fmt` has an alpha channel."""
    return from_canonical(decode_rgba(packed), fmt)


def pixel_to_packed_rgb(pixel: np.ndarray, fmt: FormatLike) -> PackedLike:
    """Pixel of `fmt` -> opaque packed value."""
    return _as_packed_result(encode_rgb(to_canonical(pixel, fmt, alpha=False)))


def pixel_to_packed_rgba(pixel: np.ndarray, fmt: FormatLike) -> PackedLike:
    """Pixel of `fmt` -> packed value with the pixel's alpha (255 if it has none)."""
    return _as_packed_result(encode_rgba(to_canonical(pixel, fmt, alpha=True)))
