from __future__ import annotations

from pathlib import Path
from typing import Any

import numpy as np


def to_jsonable(value: Any) -> Any:
    """Convert common numpy/python objects into JSON-serializable values.

    - `pathlib.Path` → `str`
    - `numpy.dtype` → its name (``"uint8"``)
    - `numpy` scalars → builtin Python scalars via `.item()`
    - `numpy.ndarray` → nested Python lists via `.tolist()`
    - Recurses through `dict` / `list` / `tuple`
    """

    if isinstance(value, Path):
        return str(value)
    if isinstance(value, np.dtype):
        return value.name
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, np.ndarray):
        return value.tolist()

    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value
