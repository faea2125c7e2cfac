"""Conversion between generic pixels and the canonical 8-bit RGB/RGBA pixel.

Every conversion in pixbridge goes through one of two canonical layouts:

- RGB8: ``uint8`` array of shape ``(..., 3)``
- RGBA8: ``uint8`` array of shape ``(..., 4)``

Both functions here work on any leading shape, so a single pixel, a row and a
whole image go through the same code.
"""

from __future__ import annotations

from typing import Union

import numpy as np

from .formats import PixelFormat, get_pixel_format

# Luminance weights for rgb -> gray.
GRAY_WEIGHTS = (0.30, 0.59, 0.11)


def _require_channels(pixels: np.ndarray, count: int, what: str) -> None:
    if pixels.ndim < 1 or pixels.shape[-1] != count:
        raise ValueError(f"Expected {what} with {count} channels in the last axis, got shape {pixels.shape}")


def _to_canonical_scale(values: np.ndarray, fmt: PixelFormat) -> np.ndarray:
    """Channel values of `fmt` -> float64 on the 0..255 scale."""

    values = values.astype(np.float64, copy=False)
    if fmt.is_float:
        # NaN reads as 0
        values = np.nan_to_num(values, nan=0.0, posinf=1.0, neginf=0.0)
        return np.clip(values, 0.0, 1.0) * 255.0
    if fmt.max_value == 255:
        return values
    return values * (255.0 / fmt.max_value)


def _from_canonical_scale(values: np.ndarray, fmt: PixelFormat) -> np.ndarray:
    """float64 on the 0..255 scale -> channel values of `fmt`."""

    values = np.clip(values, 0.0, 255.0)
    if fmt.is_float:
        return (values / 255.0).astype(fmt.dtype)
    if fmt.max_value != 255:
        values = values * (fmt.max_value / 255.0)
    return np.rint(values).astype(fmt.dtype)


def _round_u8(values: np.ndarray) -> np.ndarray:
    return np.clip(np.rint(values), 0.0, 255.0).astype(np.uint8)


def to_canonical(
    pixels: np.ndarray,
    fmt: Union[str, PixelFormat],
    *,
    alpha: bool = False,
) -> np.ndarray:
    """Convert generic pixels of `fmt` into canonical RGB8 (or RGBA8 if `alpha`).

    A format without an alpha channel yields fully opaque alpha (255).
    """

    fmt = get_pixel_format(fmt)
    pixels = np.asarray(pixels)
    _require_channels(pixels, fmt.channel_count, f"{fmt.name} pixels")

    def channel(letter: str) -> np.ndarray:
        return _to_canonical_scale(pixels[..., fmt.channel_index(letter)], fmt)

    space = fmt.color_space
    if space == "gray":
        lum = channel("l")
        r = g = b = lum
    elif space == "rgb":
        r, g, b = channel("r"), channel("g"), channel("b")
    else:
        k = channel("k")
        r = (255.0 - channel("c")) * (255.0 - k) / 255.0
        g = (255.0 - channel("m")) * (255.0 - k) / 255.0
        b = (255.0 - channel("y")) * (255.0 - k) / 255.0

    planes = [r, g, b]
    if alpha:
        if fmt.has_alpha:
            planes.append(channel("a"))
        else:
            planes.append(np.full(pixels.shape[:-1], 255.0))

    return _round_u8(np.stack(planes, axis=-1))


def from_canonical(canonical: np.ndarray, fmt: Union[str, PixelFormat]) -> np.ndarray:
    """Convert canonical RGB8/RGBA8 pixels into pixels of `fmt`.

    RGB8 input is treated as fully opaque. Alpha is dropped when `fmt` has no
    alpha channel.
    """

    fmt = get_pixel_format(fmt)
    canonical = np.asarray(canonical)
    if canonical.ndim < 1 or canonical.shape[-1] not in (3, 4):
        raise ValueError(
            f"Expected canonical RGB8/RGBA8 pixels (last axis 3 or 4), got shape {canonical.shape}"
        )

    values = np.clip(canonical.astype(np.float64, copy=False), 0.0, 255.0)
    r, g, b = values[..., 0], values[..., 1], values[..., 2]
    lead = values.shape[:-1]

    planes: dict[str, np.ndarray] = {
        "a": values[..., 3] if values.shape[-1] == 4 else np.full(lead, 255.0),
        "x": np.full(lead, 255.0),
    }
    space = fmt.color_space
    if space == "gray":
        wr, wg, wb = GRAY_WEIGHTS
        planes["l"] = wr * r + wg * g + wb * b
    elif space == "rgb":
        planes.update(r=r, g=g, b=b)
    else:
        k = 255.0 - np.maximum(np.maximum(r, g), b)
        opaque_black = k >= 255.0
        denom = np.where(opaque_black, 1.0, 255.0 - k)
        for letter, source in (("c", r), ("m", g), ("y", b)):
            planes[letter] = np.where(opaque_black, 0.0, (255.0 - source - k) * 255.0 / denom)
        planes["k"] = k

    out = np.empty(lead + (fmt.channel_count,), dtype=fmt.dtype)
    for i, letter in enumerate(fmt.channels):
        out[..., i] = _from_canonical_scale(planes[letter], fmt)
    return out
