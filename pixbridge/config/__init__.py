from __future__ import annotations

from .io import load_config, load_pixel_format_entries, pixel_format_entries

__all__ = ["load_config", "load_pixel_format_entries", "pixel_format_entries"]
