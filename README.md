# papercut

Slice an image into a grid of equally sized tiles, save them to disk, and
join saved tiles back into a single image.

## Installation

```
pip install .
```

## Command line

Slice an image into a given number of tiles; the grid is chosen automatically:

```
papercut --image photo.png --num-tiles 4
```

Or give the grid yourself:

```
papercut --image photo.png --rows 2 --columns 3 --dir tiles --format jpg
```

Options:

| Option        | Default    | Meaning                               |
|---------------|------------|---------------------------------------|
| `--image`     | (required) | Image file to slice                   |
| `--num-tiles` | 0          | Number of tiles, 2 to 9801            |
| `--rows`      | 1          | Number of rows, up to 99              |
| `--columns`   | 1          | Number of columns, up to 99           |
| `--dir`       | `./`       | Directory the tiles are written to    |
| `--format`    | `png`      | Image format of the tiles             |

The command first prints the current directory. Give either `--num-tiles`,
or both `--rows` and `--columns` with values of at least 2 each; a grid
with only one of them above 1 is rejected as an invalid tile configuration.
With neither, the command reports that there is nothing to do and exits
with status 1. Any other error is printed as `Error: ...` and the exit
status is 1. The target directory is created if it does not exist.

Pixels left over when the image size is not a multiple of the tile size
are dropped. Tiles are named `<basename>_<RR>_<CC>.<ext>`, where `RR` is
the 1-based row counted from the top and `CC` the 1-based column counted
from the left, both written with two digits (for example `photo_01_02.png`
is the second tile of the first row). A format of `jpeg` gives the
extension `jpg`.

## Library

```python
from pathlib import Path

from papercut.core import join, open_images_in, save_tiles, slice_image
from papercut.utils import get_basename

tiles = slice_image("photo.png", 4, None, None, False)
save_tiles(tiles, get_basename("photo.png"), Path("tiles"), "png")

restored = open_images_in(Path("tiles"))
image = join(restored, 0, 0)
image.save("joined.png")
```

- `papercut.core.slice_image(filename, number_tiles, col, row, save)` splits
  an image file into `Tile` objects. Pass `number_tiles`, or both `col` and
  `row`. With `save` true the tiles are written as PNG files next to the
  image.
- `papercut.core.save_tiles(tiles, prefix, directory, format)` writes tiles
  into `directory` (the current directory when `None`), creating it if
  needed, and returns them.
- `papercut.core.open_images_in(directory)` opens every file whose name
  holds an underscore and does not start with `joined`, reading each
  tile's place from its filename.
- `papercut.core.join(tiles, width, height)` pastes tiles at their pixel
  coordinates onto a new RGBA image. When `width` or `height` is not
  positive, the size comes from `get_combined_size`.
- `papercut.core.calc_columns_rows(n)` gives the `(columns, rows)` grid for
  `n` tiles.
- `papercut.core.get_combined_size(tiles)` gives the size of the image the
  tiles make up, from the first tile's size and the grid for their count.
- `papercut.core.validate_image(number_tiles)` and
  `papercut.core.validate_image_col_row(col, row)` check tile counts and
  grids.
- `papercut.core.get_image_column_row(filename)` reads the zero-based
  `(column, row)` out of a tile's filename.
- `papercut.utils.get_columns_rows(filenames)` works out the
  `(columns, rows)` grid size from a set of tile filenames; names without
  a trailing `NN_NN` pair are ignored.
- `papercut.utils.get_basename(filename)` strips directory and extension.
- `papercut.utils.open_images(directory)` opens every file in a directory
  as an image.
- `papercut.tile.Tile` holds one tile's `image`, `number`, `position`,
  `coords` and `filename`, with the `row`, `column` and `basename`
  properties, `generate_filename(directory, prefix, format, path)` and
  `save(filename, format)`.

Invalid tile counts or grids, images too small for the grid, unreadable
images and tiles that do not fit when joining raise `ValueError`. A
missing image file raises `FileNotFoundError`.

The command line only slices; joining tiles is done through the library.

## Tests

```
pip install .[test]
pytest
```