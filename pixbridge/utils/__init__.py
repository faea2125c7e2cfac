"""Utility helpers for pixbridge."""

from __future__ import annotations

from .jsonable import to_jsonable
from .optional_deps import optional_import, require

__all__ = [
    "optional_import",
    "require",
    "to_jsonable",
]
