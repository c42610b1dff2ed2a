"""Helpers for file names, directories and tile positions."""

from __future__ import annotations

import os
import re
from pathlib import Path, PurePath

from PIL import Image

_INTEGER = re.compile(r"[+-]?[0-9]+")


def get_basename(filename: str | os.PathLike[str]) -> str:
    """Return the file name without its directory and extension."""
    return PurePath(filename).stem


def _parse_position(filename: str | os.PathLike[str]) -> tuple[int, int] | None:
    """Read the trailing ``RR_CC`` pair from a tile file name.

    Returns ``(first, second)`` as written in the name, or ``None`` when the
    name does not end in such a pair.
    """
    tail = PurePath(filename).stem[-5:]
    first, sep, second = tail.partition("_")
    if not sep or not _INTEGER.fullmatch(first) or not _INTEGER.fullmatch(second):
        return None
    return int(first), int(second)


def open_images(directory: str | os.PathLike[str]) -> list[Image.Image]:
    """Open every regular file in ``directory`` as an image.

    Raises ``OSError`` if the directory cannot be read and
    ``PIL.UnidentifiedImageError`` if a file is not an image.
    """
    images = []
    for path in sorted(Path(directory).iterdir()):
        if path.is_file():
            with Image.open(path) as img:
                images.append(img.copy())
    return images


def get_columns_rows(filenames) -> tuple[int, int]:
    """Derive ``(num_columns, num_rows)`` from tile file names.

    Names that do not end in a ``RR_CC`` pair are ignored; with no usable
    names the result is ``(0, 0)``.
    """
    positions = [pos for pos in map(_parse_position, filenames) if pos is not None]
    num_rows = max((row for row, _ in positions), default=0)
    num_columns = max((column for _, column in positions), default=0)
    return num_columns, num_rows