import json

import numpy as np
from PIL import Image

from pixbridge.cli import main
from pixbridge.pixels.formats import PIXEL_FORMATS


def test_cli_formats_json(capsys):
    assert main(["formats", "--json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    by_name = {row["name"]: row for row in rows}
    assert by_name["bgra8"] == {
        "name": "bgra8",
        "channels": "bgra",
        "dtype": "uint8",
        "color_space": "rgb",
        "has_alpha": True,
    }


def test_cli_formats_text(capsys):
    assert main(["formats"]) == 0
    out = capsys.readouterr().out
    assert "rgba16" in out
    assert "cmyk8" in out


def test_cli_to_array_and_back(tmp_path):
    arr = np.zeros((2, 3, 4), dtype=np.uint8)
    arr[0, 1] = [10, 20, 30, 40]
    src = tmp_path / "in.png"
    Image.fromarray(arr).save(src)

    npy = tmp_path / "out.npy"
    assert main(["to-array", str(src), str(npy), "--format", "bgra8"]) == 0
    data = np.load(npy)
    assert data.shape == (2, 3, 4)
    assert data[0, 1].tolist() == [30, 20, 10, 40]

    png = tmp_path / "back.png"
    assert main(["to-image", str(npy), str(png), "--format", "bgra8"]) == 0
    assert np.array_equal(np.asarray(Image.open(png)), arr)


def test_cli_unknown_format_reports_error(tmp_path, capsys):
    npy = tmp_path / "x.npy"
    np.save(npy, np.zeros((1, 1, 3), dtype=np.uint8))

    code = main(["to-image", str(npy), str(tmp_path / "x.png"), "--format", "nope"])

    assert code == 2
    assert "error:" in capsys.readouterr().err


def test_cli_formats_config_registers_extra_formats(tmp_path, capsys):
    cfg = tmp_path / "formats.json"
    cfg.write_text(
        json.dumps({"pixel_formats": [{"name": "cli_xrgb8", "channels": "xrgb"}]}),
        encoding="utf-8",
    )
    try:
        assert main(["--formats-config", str(cfg), "formats", "--json"]) == 0
        names = [row["name"] for row in json.loads(capsys.readouterr().out)]
        assert "cli_xrgb8" in names
    finally:
        PIXEL_FORMATS.unregister("cli_xrgb8")
