"""Precondition failures raised by the conversion engine.

Dimension overflow is a programmer error rather than bad input, so it derives
from `AssertionError`. It is raised explicitly instead of through `assert` so
that running under ``python -O`` does not silently disable the check.
"""

from __future__ import annotations

import sys
from numbers import Integral

# Exclusive upper bounds. QImage-style packed bitmaps address pixels with
# signed 32-bit coordinates.
PACKED_COORD_MAX = 2**31 - 1
# numpy buffers are indexed with the platform's Py_ssize_t.
GENERIC_COORD_MAX = sys.maxsize


class DimensionOverflowError(AssertionError):
    """Width/height outside the coordinate domain of the target representation."""


def check_dimensions(
    width: int,
    height: int,
    *,
    limit: int,
    target: str = "image",
) -> tuple[int, int]:
    """Validate ``width``/``height`` against ``[0, limit)`` and return them as ints."""

    for name, value in (("width", width), ("height", height)):
        if not isinstance(value, Integral) or isinstance(value, bool):
            raise TypeError(f"{target} {name} must be an integer, got {type(value).__name__}")
        if value < 0 or value >= limit:
            raise DimensionOverflowError(
                f"{target} {name}={int(value)} is outside the coordinate domain [0, {limit})"
            )
    return int(width), int(height)
