"""Generic images: numpy pixel buffers tagged with a `PixelFormat`.

`GenericImage` owns its buffer and can be recreated in place;
`GenericImageView` only references a buffer (possibly a window of a larger
one). Both store pixels as ``(height, width, channels)`` arrays whose dtype
and channel count match the pixel format.
"""

from __future__ import annotations

from typing import Iterator, Union

import numpy as np

from pixbridge.errors import GENERIC_COORD_MAX, check_dimensions
from pixbridge.pixels.formats import PixelFormat, get_pixel_format

FormatLike = Union[str, PixelFormat]


def _resolve_format(fmt: FormatLike) -> PixelFormat:
    try:
        return get_pixel_format(fmt)
    except KeyError as exc:
        raise TypeError(f"Generic images need a registered pixel format: {exc}") from exc


def _check_buffer(array: np.ndarray, fmt: PixelFormat) -> np.ndarray:
    if not isinstance(array, np.ndarray):
        raise TypeError(f"Expected np.ndarray, got {type(array)}")
    if array.ndim == 2 and fmt.channel_count == 1:
        array = array[..., np.newaxis]
    if array.ndim != 3 or array.shape[2] != fmt.channel_count:
        raise TypeError(
            f"Expected shape (H,W,{fmt.channel_count}) for {fmt.name}, got {array.shape}"
        )
    if array.dtype != fmt.dtype:
        raise TypeError(f"Expected dtype={fmt.dtype} for {fmt.name}, got {array.dtype}")
    return array


def _check_row(array: np.ndarray, y: int) -> None:
    height, width = array.shape[:2]
    if not 0 <= y < height:
        raise IndexError(f"Row {y} is outside the {width}x{height} image")


class GenericImageView:
    """Non-owning, row-major view over a buffer of generic pixels."""

    def __init__(self, array: np.ndarray, fmt: FormatLike) -> None:
        self._format = _resolve_format(fmt)
        self._array = _check_buffer(array, self._format)

    @property
    def width(self) -> int:
        return int(self._array.shape[1])

    @property
    def height(self) -> int:
        return int(self._array.shape[0])

    @property
    def format(self) -> PixelFormat:
        return self._format

    # the pixel type of the view
    value_type = format

    @property
    def array(self) -> np.ndarray:
        return self._array

    def row(self, y: int) -> np.ndarray:
        _check_row(self._array, y)
        return self._array[y]

    def rows(self) -> Iterator[np.ndarray]:
        for y in range(self.height):
            yield self._array[y]

    def pixel(self, x: int, y: int) -> np.ndarray:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel ({x}, {y}) is outside the {self.width}x{self.height} image"
            )
        return self._array[y, x]

    def subview(self, x: int, y: int, width: int, height: int) -> "GenericImageView":
        """Window of `width` x `height` pixels starting at (x, y), sharing memory."""

        if x < 0 or y < 0 or width < 0 or height < 0 or x + width > self.width or y + height > self.height:
            raise ValueError(
                f"Subview ({x}, {y}, {width}, {height}) exceeds the {self.width}x{self.height} view"
            )
        return GenericImageView(self._array[y : y + height, x : x + width], self._format)

    def __repr__(self) -> str:
        return f"GenericImageView(width={self.width}, height={self.height}, format={self._format.name!r})"


class GenericImage:
    """Owning buffer of generic pixels that can be recreated in place."""

    def __init__(self, width: int = 0, height: int = 0, fmt: FormatLike = "rgba8") -> None:
        self._format = _resolve_format(fmt)
        self._array = self._allocate(width, height)

    def _allocate(self, width: int, height: int) -> np.ndarray:
        width, height = check_dimensions(
            width, height, limit=GENERIC_COORD_MAX, target="generic image"
        )
        return np.zeros((height, width, self._format.channel_count), dtype=self._format.dtype)

    @classmethod
    def from_array(cls, array: np.ndarray, fmt: FormatLike) -> "GenericImage":
        """Create an image holding a copy of `array`."""

        fmt = _resolve_format(fmt)
        array = _check_buffer(array, fmt)
        image = cls(0, 0, fmt)
        image._array = np.array(array, copy=True)
        return image

    @property
    def width(self) -> int:
        return int(self._array.shape[1])

    @property
    def height(self) -> int:
        return int(self._array.shape[0])

    @property
    def format(self) -> PixelFormat:
        return self._format

    value_type = format

    @property
    def array(self) -> np.ndarray:
        return self._array

    def view(self) -> GenericImageView:
        return GenericImageView(self._array, self._format)

    def row(self, y: int) -> np.ndarray:
        _check_row(self._array, y)
        return self._array[y]

    def recreate(self, width: int, height: int) -> None:
        """Reallocate to `width` x `height`, discarding the current pixels."""

        if (width, height) == (self.width, self.height):
            return
        self._array = self._allocate(width, height)

    def __repr__(self) -> str:
        return f"GenericImage(width={self.width}, height={self.height}, format={self._format.name!r})"
