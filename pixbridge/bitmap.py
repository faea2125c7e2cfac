"""Packed 32-bit bitmap.

Each pixel is one ``uint32`` laid out as ``0xAARRGGBB``:

- `BitmapFormat.RGB32`: the alpha byte is always ``0xff``
- `BitmapFormat.ARGB32`: the alpha byte carries per-pixel alpha

The buffer is a row-major numpy array of shape ``(height, width)``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

import numpy as np

from pixbridge.errors import PACKED_COORD_MAX, check_dimensions

OPAQUE_MASK = 0xFF000000


class BitmapFormat(str, Enum):
    """Supported packed pixel layouts."""

    RGB32 = "rgb32"
    ARGB32 = "argb32"

    @property
    def has_alpha(self) -> bool:
        return self is BitmapFormat.ARGB32


def parse_bitmap_format(raw: str | BitmapFormat) -> BitmapFormat:
    if isinstance(raw, BitmapFormat):
        return raw
    try:
        return BitmapFormat(str(raw).lower())
    except Exception as exc:  # noqa: BLE001 - value validation helper
        raise ValueError(f"Unknown bitmap format: {raw!r}") from exc


class PackedBitmap:
    """A width x height grid of packed ``0xAARRGGBB`` values."""

    def __init__(
        self,
        width: int,
        height: int,
        fmt: str | BitmapFormat = BitmapFormat.ARGB32,
        *,
        data: Optional[Any] = None,
    ) -> None:
        width, height = check_dimensions(
            width, height, limit=PACKED_COORD_MAX, target="packed bitmap"
        )
        self._format = parse_bitmap_format(fmt)

        if data is None:
            fill = 0 if self._format.has_alpha else OPAQUE_MASK
            self._data = np.full((height, width), fill, dtype=np.uint32)
        else:
            arr = np.array(data, dtype=np.uint32)
            if arr.shape != (height, width):
                raise ValueError(
                    f"Expected packed data of shape {(height, width)}, got {arr.shape}"
                )
            if not self._format.has_alpha:
                arr |= np.uint32(OPAQUE_MASK)
            self._data = arr

    # ------------------------------------------------------------------
    @property
    def width(self) -> int:
        return int(self._data.shape[1])

    @property
    def height(self) -> int:
        return int(self._data.shape[0])

    @property
    def size(self) -> tuple[int, int]:
        """(width, height)"""
        return self.width, self.height

    @property
    def format(self) -> BitmapFormat:
        return self._format

    @property
    def data(self) -> np.ndarray:
        return self._data

    def has_alpha_channel(self) -> bool:
        return self._format.has_alpha

    # ------------------------------------------------------------------
    def _check_coords(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel ({x}, {y}) is outside the {self.width}x{self.height} bitmap"
            )

    def pixel(self, x: int, y: int) -> int:
        self._check_coords(x, y)
        return int(self._data[y, x])

    def set_pixel(self, x: int, y: int, value: int) -> None:
        self._check_coords(x, y)
        value = int(value) & 0xFFFFFFFF
        if not self._format.has_alpha:
            value |= OPAQUE_MASK
        self._data[y, x] = value

    def row(self, y: int) -> np.ndarray:
        if not 0 <= y < self.height:
            raise IndexError(f"Row {y} is outside the {self.width}x{self.height} bitmap")
        return self._data[y]

    def set_row(self, y: int, values: np.ndarray) -> None:
        row = self.row(y)
        values = np.asarray(values, dtype=np.uint32)
        if values.shape != row.shape:
            raise ValueError(f"Expected a row of shape {row.shape}, got {values.shape}")
        if not self._format.has_alpha:
            values = values | np.uint32(OPAQUE_MASK)
        row[:] = values

    def copy(self) -> "PackedBitmap":
        return PackedBitmap(self.width, self.height, self._format, data=self._data)

    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackedBitmap):
            return NotImplemented
        return self._format is other._format and np.array_equal(self._data, other._data)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PackedBitmap(width={self.width}, height={self.height}, format={self._format.value!r})"
