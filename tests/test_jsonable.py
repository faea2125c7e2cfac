from __future__ import annotations

from pathlib import Path

import numpy as np

from pixbridge.utils.jsonable import to_jsonable


def test_to_jsonable_converts_common_types(tmp_path) -> None:
    value = {
        "path": tmp_path / "x.npy",
        "arr": np.asarray([1, 2, 3], dtype=np.uint32),
        "dtype": np.dtype(np.uint16),
        "scalar": np.float32(0.5),
        "nested": {2: np.bool_(True), "t": (np.uint8(1), np.uint8(2))},
    }

    converted = to_jsonable(value)

    assert converted["path"].endswith("x.npy")
    assert converted["arr"] == [1, 2, 3]
    assert converted["dtype"] == "uint16"
    assert converted["scalar"] == 0.5
    assert converted["nested"]["2"] is True
    assert converted["nested"]["t"] == [1, 2]


def test_to_jsonable_leaves_builtin_types_unchanged() -> None:
    assert to_jsonable(1) == 1
    assert to_jsonable("x") == "x"
    assert to_jsonable(None) is None
    assert to_jsonable(Path("a/b")) == "a/b"
