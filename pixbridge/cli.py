from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import numpy as np

from pixbridge.config.io import load_config
from pixbridge.converter import bitmap_to_generic_image, generic_view_to_bitmap
from pixbridge.image import GenericImage, GenericImageView
from pixbridge.io.image import read_bitmap, write_bitmap
from pixbridge.pixels.formats import PIXEL_FORMATS, get_pixel_format, register_formats_from_config
from pixbridge.utils.jsonable import to_jsonable

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pixbridge")
    parser.add_argument(
        "--formats-config",
        default=None,
        help="JSON/YAML file with extra 'pixel_formats' to register before running",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-v: info, -vv: debug)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    formats = sub.add_parser("formats", help="List registered pixel formats")
    formats.add_argument("--json", action="store_true", help="Print formats as JSON")

    to_array = sub.add_parser(
        "to-array", help="Convert an image file into a .npy array of a pixel format"
    )
    to_array.add_argument("input", help="Input image file (any format Pillow reads)")
    to_array.add_argument("output", help="Output .npy path")
    to_array.add_argument("--format", required=True, help="Target pixel format name, e.g. bgra8")

    to_image = sub.add_parser(
        "to-image", help="Convert a .npy array of a pixel format into an image file"
    )
    to_image.add_argument("input", help="Input .npy path holding an (H,W,C) array")
    to_image.add_argument("output", help="Output image file (format from the suffix)")
    to_image.add_argument("--format", required=True, help="Pixel format of the input array")

    return parser


def _configure_logging(verbosity: int) -> None:
    if verbosity <= 0:
        return
    level = logging.INFO if verbosity == 1 else logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _cmd_formats(args: argparse.Namespace) -> None:
    rows = [fmt.describe() for fmt in PIXEL_FORMATS]
    if args.json:
        print(json.dumps(to_jsonable(rows), indent=2, sort_keys=True))
        return
    for row in rows:
        alpha = "alpha" if row["has_alpha"] else "-"
        print(f"{row['name']:<12} {row['channels']:<6} {row['dtype'].name:<8} {alpha}")


def _cmd_to_array(args: argparse.Namespace) -> None:
    bitmap = read_bitmap(args.input)
    image = GenericImage(0, 0, get_pixel_format(args.format))
    bitmap_to_generic_image(bitmap, image)
    np.save(Path(args.output), image.array)
    logger.info("Saved %s array %s to %s", image.format.name, image.array.shape, args.output)


def _cmd_to_image(args: argparse.Namespace) -> None:
    array = np.load(Path(args.input), allow_pickle=False)
    view = GenericImageView(array, get_pixel_format(args.format))
    write_bitmap(generic_view_to_bitmap(view), args.output)


_COMMANDS = {
    "formats": _cmd_formats,
    "to-array": _cmd_to_array,
    "to-image": _cmd_to_image,
}


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(int(args.verbose))

    try:
        if args.formats_config:
            register_formats_from_config(load_config(args.formats_config))
        _COMMANDS[args.command](args)
        return 0
    except Exception as exc:  # noqa: BLE001 - CLI boundary
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
