"""
Pixel format registry.

A :class:`PixelFormat` describes the layout of one generic pixel: which
channels it carries, in which order, and the numpy dtype each channel is
stored as. Whether a format carries alpha is a static property of the
format, never a per-image flag.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Union

import numpy as np

from pixbridge.config.io import pixel_format_entries

logger = logging.getLogger(__name__)

# l = luminance, x = padding (ignored on read, full scale on write)
CHANNEL_LETTERS = frozenset("rgbalcmykx")

_COLOR_SPACES = {
    frozenset("l"): "gray",
    frozenset("rgb"): "rgb",
    frozenset("cmyk"): "cmyk",
}


def _normalize_channels(channels: Union[str, Sequence[str]]) -> tuple[str, ...]:
    if isinstance(channels, str):
        return tuple(channels.lower())
    return tuple(str(c).lower() for c in channels)


@dataclass(frozen=True)
class PixelFormat:
    """Channel layout and storage type of a generic pixel."""

    name: str
    channels: tuple[str, ...]
    dtype: np.dtype = field(default=np.dtype(np.uint8))

    def __post_init__(self) -> None:
        channels = _normalize_channels(self.channels)
        dtype = np.dtype(self.dtype)

        unknown = [c for c in channels if c not in CHANNEL_LETTERS]
        if not channels or unknown:
            raise ValueError(
                f"Pixel format {self.name!r}: invalid channels {channels!r}. "
                f"Use letters from {''.join(sorted(CHANNEL_LETTERS))!r}."
            )
        if len(set(channels)) != len(channels):
            raise ValueError(f"Pixel format {self.name!r}: duplicate channels in {channels!r}")

        colors = frozenset(c for c in channels if c not in ("a", "x"))
        if colors not in _COLOR_SPACES:
            raise ValueError(
                f"Pixel format {self.name!r}: channels {channels!r} do not form a "
                "gray, rgb or cmyk color space"
            )
        if dtype.kind not in ("u", "f"):
            raise ValueError(
                f"Pixel format {self.name!r}: dtype must be unsigned int or float, got {dtype}"
            )
        if dtype.kind == "u" and dtype.itemsize > 4:
            raise ValueError(
                f"Pixel format {self.name!r}: unsigned channels wider than 32 bits are not supported, got {dtype}"
            )

        object.__setattr__(self, "channels", channels)
        object.__setattr__(self, "dtype", dtype)

    @property
    def channel_count(self) -> int:
        return len(self.channels)

    @property
    def has_alpha(self) -> bool:
        return "a" in self.channels

    @property
    def color_space(self) -> str:
        return _COLOR_SPACES[frozenset(c for c in self.channels if c not in ("a", "x"))]

    @property
    def is_float(self) -> bool:
        return self.dtype.kind == "f"

    @property
    def max_value(self) -> Union[int, float]:
        if self.is_float:
            return 1.0
        return int(np.iinfo(self.dtype).max)

    def channel_index(self, letter: str) -> Optional[int]:
        try:
            return self.channels.index(letter)
        except ValueError:
            return None

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "channels": "".join(self.channels),
            "dtype": self.dtype,
            "color_space": self.color_space,
            "has_alpha": self.has_alpha,
        }


class PixelFormatRegistry:
    """Registry of named pixel formats."""

    def __init__(self) -> None:
        self._registry: Dict[str, PixelFormat] = {}

    # ------------------------------------------------------------------
    def register(self, fmt: PixelFormat, *, overwrite: bool = False) -> PixelFormat:
        if not isinstance(fmt, PixelFormat):
            raise TypeError(f"Expected PixelFormat, got {type(fmt).__name__}")
        if not overwrite and fmt.name in self._registry:
            raise KeyError(
                f"Pixel format {fmt.name!r} already exists. Set overwrite=True to replace it."
            )
        self._registry[fmt.name] = fmt
        return fmt

    def unregister(self, name: str) -> None:
        self._registry.pop(name, None)

    def get(self, name: str) -> PixelFormat:
        try:
            return self._registry[name]
        except KeyError as exc:
            available = ", ".join(sorted(self._registry)) or "<empty>"
            raise KeyError(
                f"Pixel format {name!r} not found. Available formats: {available}"
            ) from exc

    def available(self, *, alpha: Optional[bool] = None) -> List[str]:
        if alpha is None:
            return sorted(self._registry)
        return sorted(name for name, fmt in self._registry.items() if fmt.has_alpha == alpha)

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __iter__(self) -> Iterator[PixelFormat]:
        return iter(self._registry[name] for name in sorted(self._registry))

    def __len__(self) -> int:
        return len(self._registry)


PIXEL_FORMATS = PixelFormatRegistry()


def register_pixel_format(
    name: str,
    channels: Union[str, Sequence[str]],
    dtype: Any = np.uint8,
    *,
    overwrite: bool = False,
) -> PixelFormat:
    """Define and register a pixel format.

    Parameters
    ----------
    name : str
        Unique format name, e.g. ``"bgra8"``.
    channels : str or sequence of str
        Channel letters in memory order, e.g. ``"bgra"``.
    dtype : numpy dtype-like
        Per-channel storage type; unsigned integers or floats in ``[0, 1]``.
    overwrite : bool, default=False
        Replace an existing format of the same name.

    Examples
    --------
    >>> fmt = register_pixel_format("xbgr8", "xbgr", "uint8")
    >>> fmt.has_alpha
    False
    """

    fmt = PIXEL_FORMATS.register(
        PixelFormat(name=str(name), channels=channels, dtype=dtype),
        overwrite=overwrite,
    )
    logger.debug("Registered pixel format %s (%s, %s)", fmt.name, "".join(fmt.channels), fmt.dtype)
    return fmt


def get_pixel_format(fmt: Union[str, PixelFormat]) -> PixelFormat:
    """Resolve a format name (or pass through a `PixelFormat`)."""

    if isinstance(fmt, PixelFormat):
        return fmt
    if isinstance(fmt, str):
        return PIXEL_FORMATS.get(fmt)
    raise TypeError(f"Expected pixel format name or PixelFormat, got {type(fmt).__name__}")


def list_pixel_formats(*, alpha: Optional[bool] = None) -> List[str]:
    return PIXEL_FORMATS.available(alpha=alpha)


def register_formats_from_config(config: Mapping[str, Any]) -> List[PixelFormat]:
    """Register the formats listed under ``pixel_formats`` in a loaded config.

    Each entry is an object with ``name``, ``channels`` and ``dtype`` keys and
    an optional ``overwrite`` flag. ``overwrite`` must be a real boolean; see
    :func:`pixbridge.config.io.pixel_format_entries`.
    """

    # Validate every entry before registering any of them.
    entries = pixel_format_entries(config)
    out: List[PixelFormat] = []
    for entry in entries:
        out.append(
            register_pixel_format(
                entry["name"],
                entry["channels"],
                entry["dtype"],
                overwrite=entry["overwrite"],
            )
        )

    logger.info("Registered %d pixel format(s) from config", len(out))
    return out


_BUILTIN_FORMATS: Iterable[tuple[str, str, Any]] = (
    ("gray8", "l", np.uint8),
    ("gray16", "l", np.uint16),
    ("gray32f", "l", np.float32),
    ("graya8", "la", np.uint8),
    ("graya16", "la", np.uint16),
    ("rgb8", "rgb", np.uint8),
    ("bgr8", "bgr", np.uint8),
    ("rgb16", "rgb", np.uint16),
    ("bgr16", "bgr", np.uint16),
    ("rgb32f", "rgb", np.float32),
    ("rgbx8", "rgbx", np.uint8),
    ("rgba8", "rgba", np.uint8),
    ("bgra8", "bgra", np.uint8),
    ("argb8", "argb", np.uint8),
    ("abgr8", "abgr", np.uint8),
    ("rgba16", "rgba", np.uint16),
    ("bgra16", "bgra", np.uint16),
    ("rgba32f", "rgba", np.float32),
    ("cmyk8", "cmyk", np.uint8),
    ("cmyk16", "cmyk", np.uint16),
)

for _name, _channels, _dtype in _BUILTIN_FORMATS:
    register_pixel_format(_name, _channels, _dtype)
