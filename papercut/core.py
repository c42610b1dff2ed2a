"""Slicing images into tiles and joining tiles back into one image."""

from __future__ import annotations

import math
import os
from pathlib import Path
from typing import Iterable, Sequence

from PIL import Image

from .tile import Tile
from .utils import _parse_position, get_basename

SPLIT_LIMIT = 99
TILE_LIMIT = SPLIT_LIMIT * SPLIT_LIMIT


def calc_columns_rows(n: int) -> tuple[int, int]:
    """Return ``(num_columns, num_rows)`` needed to divide an image into ``n`` parts."""
    if n <= 0:
        return 0, 0
    num_columns = math.ceil(math.sqrt(n))
    num_rows = math.ceil(n / num_columns)
    return num_columns, num_rows


def get_combined_size(tiles: Sequence[Tile]) -> tuple[int, int]:
    """Return the ``(width, height)`` of the image the tiles make up together."""
    if not tiles:
        raise ValueError("There are no tiles to combine.")
    columns, rows = calc_columns_rows(len(tiles))
    first = tiles[0].image
    return first.width * columns, first.height * rows


def validate_image(number_tiles: int) -> int:
    """Check that ``number_tiles`` is within the allowed range and return it."""
    if not 2 <= number_tiles <= TILE_LIMIT:
        raise ValueError(
            f"Number of tiles must be between 2 and {TILE_LIMIT} "
            f"(you asked for {number_tiles})."
        )
    return number_tiles


def validate_image_col_row(col: int, row: int) -> tuple[int, int]:
    """Check the column and row counts and return them."""
    if col < 1 or row < 1 or col > SPLIT_LIMIT or row > SPLIT_LIMIT:
        raise ValueError(
            f"Number of columns and rows must be between 1 and {SPLIT_LIMIT} "
            f"(you asked for rows: {row} and col: {col})."
        )
    if col == 1 and row == 1:
        raise ValueError("There is nothing to divide. You asked for the entire image.")
    return col, row


def slice_image(
    filename: str | os.PathLike[str],
    number_tiles: int | None = None,
    col: int | None = None,
    row: int | None = None,
    save: bool = False,
) -> list[Tile]:
    """Split an image file into tiles.

    Either ``number_tiles`` or both ``col`` and ``row`` must be given.
    With ``save`` the tiles are written as PNG files next to the image.
    """
    full_path = Path(filename).resolve(strict=True)
    try:
        with Image.open(full_path) as opened:
            im = opened.copy()
    except OSError as exc:
        raise ValueError(f"can not open image {full_path}") from exc
    im_w, im_h = im.size

    if number_tiles is not None:
        validate_image(number_tiles)
        columns, rows = calc_columns_rows(number_tiles)
    elif col is not None and row is not None:
        columns, rows = validate_image_col_row(col, row)
    else:
        raise ValueError("Invalid tile configuration.")

    tile_w = im_w // columns
    tile_h = im_h // rows
    if tile_w == 0 or tile_h == 0:
        raise ValueError(
            f"Image of {im_w}x{im_h} pixels is too small for "
            f"{columns} columns and {rows} rows."
        )

    tiles = []
    number = 1
    for pos_y in range(0, im_h, tile_h):
        for pos_x in range(0, im_w, tile_w):
            if pos_x + tile_w > im_w or pos_y + tile_h > im_h:
                continue
            area = (pos_x, pos_y, pos_x + tile_w, pos_y + tile_h)
            position = (pos_x // tile_w + 1, pos_y // tile_h + 1)
            tiles.append(Tile(im.crop(area), number, position, (pos_x, pos_y)))
            number += 1

    if save:
        prefix = get_basename(filename)
        directory = Path(filename).parent
        try:
            save_tiles(tiles, prefix, directory, "png")
        except (OSError, ValueError) as exc:
            raise OSError("can not save tiles") from exc

    return tiles


def save_tiles(
    tiles: Iterable[Tile],
    prefix: str,
    directory: str | os.PathLike[str] | None = None,
    format: str = "png",
) -> list[Tile]:
    """Write tiles to ``directory``, creating it if needed, and return them."""
    target_dir = Path(directory) if directory is not None else Path.cwd()
    target_dir.mkdir(parents=True, exist_ok=True)
    saved = []
    for tile in tiles:
        tile.save(tile.generate_filename(target_dir, prefix, format, True), format)
        saved.append(tile)
    return saved


def get_image_column_row(filename: str | os.PathLike[str]) -> tuple[int, int]:
    """Return the zero-based ``(column, row)`` encoded at the end of a tile file name."""
    parsed = _parse_position(filename)
    if parsed is None:
        raise ValueError("Invalid filename format for extracting column and row")
    row, column = parsed
    return column - 1, row - 1


def open_images_in(directory: str | os.PathLike[str]) -> list[Tile]:
    """Open every tile file in ``directory`` and return the tiles.

    Files are taken when their name holds an underscore and does not start
    with ``joined``.
    """
    files = sorted(
        path
        for path in Path(directory).iterdir()
        if "_" in path.name and not path.name.startswith("joined")
    )
    tiles = []
    for number, path in enumerate(files, start=1):
        pos = get_image_column_row(path.name)
        with Image.open(path) as opened:
            im = opened.copy()
        coords = (pos[0] * im.width, pos[1] * im.height)
        tiles.append(Tile(im, number, pos, coords, path))
    return tiles


def join(tiles: Sequence[Tile], width: int = 0, height: int = 0) -> Image.Image:
    """Paste tiles at their coordinates onto one RGBA image.

    When ``width`` or ``height`` is not positive the size is derived from
    the tiles.
    """
    if width > 0 and height > 0:
        size = (width, height)
    else:
        size = get_combined_size(tiles)
    target = Image.new("RGBA", size)
    for tile in tiles:
        x, y = tile.coords
        sub_image = tile.image.convert("RGBA")
        if x < 0 or y < 0 or x + sub_image.width > size[0] or y + sub_image.height > size[1]:
            raise ValueError("can not copy from tile")
        target.paste(sub_image, (x, y))
    return target