"""Command line entry point that slices an image into tiles."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .core import save_tiles, slice_image
from .utils import get_basename

_NO_OPERATION = (
    "No operation specified. You need to either specify the number of tiles to slice "
    "automatically, or specify the row and columns to customize the slice."
)


def _unsigned(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {text}")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="slice-image", description="Slice an image into tiles.")
    parser.add_argument("--image", required=True, help="image file to slice")
    parser.add_argument("--num-tiles", type=_unsigned, default=0, help="number of tiles")
    parser.add_argument("--dir", default="./", help="directory to write tiles to")
    parser.add_argument("--format", default="png", help="format of the written tiles")
    parser.add_argument("--rows", type=_unsigned, default=1, help="number of rows")
    parser.add_argument("--columns", type=_unsigned, default=1, help="number of columns")
    return parser


def main(argv=None) -> int:
    """Slice the image named on the command line and save its tiles."""
    args = _build_parser().parse_args(argv)
    print(f"Current directory: {Path.cwd()}")

    if args.num_tiles == 0 and args.rows == 1 and args.columns == 1:
        print(_NO_OPERATION, file=sys.stderr)
        return 1

    try:
        tiles = slice_image(
            args.image,
            args.num_tiles if args.num_tiles > 0 else None,
            args.columns if args.columns > 1 else None,
            args.rows if args.rows > 1 else None,
            False,
        )
        save_tiles(tiles, get_basename(args.image), Path(args.dir), args.format)
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())