from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from pixbridge.utils.optional_deps import require

_PIXEL_FORMAT_KEYS = frozenset({"name", "channels", "dtype", "overwrite"})


def load_config(path: str | Path) -> dict[str, Any]:
    """Load a config file into a Python dict.

    Supported formats:
    - JSON (.json) always
    - YAML (.yml/.yaml) only when PyYAML is installed
    """

    config_path = Path(path)
    suffix = str(config_path.suffix).lower()

    if suffix == ".json":
        with config_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    elif suffix in (".yml", ".yaml"):
        yaml = require("yaml", extra="yaml", purpose="YAML config files (PyYAML)")
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    else:
        raise ValueError(
            f"Unsupported config extension: {suffix!r} for {str(config_path)!r}. "
            "Supported: .json, .yml, .yaml."
        )

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(
            "Config must be an object/dict at the top level, "
            f"got {type(data).__name__} from {str(config_path)!r}."
        )

    return dict(data)


def pixel_format_entries(config: Mapping[str, Any]) -> list[dict[str, Any]]:
    """Validate the ``pixel_formats`` section of a loaded config.

    Returns one dict per entry with ``name``, ``channels``, ``dtype`` (default
    ``"uint8"``) and ``overwrite`` (default ``False``). A missing section gives
    an empty list.
    """

    entries = config.get("pixel_formats", [])
    if not isinstance(entries, list):
        raise ValueError(
            f"config 'pixel_formats' must be a list, got {type(entries).__name__}"
        )

    out: list[dict[str, Any]] = []
    for i, entry in enumerate(entries):
        where = f"config pixel_formats[{i}]"
        if not isinstance(entry, Mapping):
            raise ValueError(f"{where} must be an object")
        missing = [key for key in ("name", "channels") if key not in entry]
        if missing:
            raise ValueError(f"{where} is missing {', '.join(missing)}")
        unknown = sorted(set(entry) - _PIXEL_FORMAT_KEYS)
        if unknown:
            raise ValueError(f"{where} has unknown keys: {unknown}")
        if not isinstance(entry["name"], str) or not entry["name"]:
            raise ValueError(f"{where} 'name' must be a non-empty string")

        overwrite = entry.get("overwrite", False)
        # "false" in a config file is a string, not a bool
        if not isinstance(overwrite, bool):
            raise ValueError(
                f"{where} 'overwrite' must be true/false, got {overwrite!r}"
            )

        out.append(
            {
                "name": entry["name"],
                "channels": entry["channels"],
                "dtype": entry.get("dtype", "uint8"),
                "overwrite": overwrite,
            }
        )
    return out


def load_pixel_format_entries(path: str | Path) -> list[dict[str, Any]]:
    """`load_config` followed by `pixel_format_entries`."""

    return pixel_format_entries(load_config(path))
