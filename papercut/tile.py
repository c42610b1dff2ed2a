"""A single piece of a sliced image together with its place in the grid."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from PIL import Image


@dataclass(repr=False)
class Tile:
    """Image data of one tile, its grid position and its pixel coordinates."""

    image: Image.Image
    number: int
    position: tuple[int, int]
    coords: tuple[int, int]
    filename: Path | None = None

    def __post_init__(self) -> None:
        if self.filename is not None:
            self.filename = Path(self.filename)

    @property
    def row(self) -> int:
        """Row position of the tile."""
        return self.position[0]

    @property
    def column(self) -> int:
        """Column position of the tile."""
        return self.position[1]

    @property
    def basename(self) -> str | None:
        """File name without directory and extension, if the tile has one."""
        if self.filename is None:
            return None
        return self.filename.stem

    def generate_filename(
        self,
        directory: str | os.PathLike[str] | None = None,
        prefix: str = "tile",
        format: str = "png",
        path: bool = True,
    ) -> Path:
        """Build a file name of the form ``prefix_CC_RR.ext``.

        With ``path`` true the name is placed in ``directory`` (the current
        working directory when none is given).
        """
        ext = format.lower().replace("jpeg", "jpg")
        name = f"{prefix}_{self.column:02d}_{self.row:02d}.{ext}"
        if not path:
            return Path(name)
        base = Path(directory) if directory is not None else Path.cwd()
        return base / name

    def save(
        self,
        filename: str | os.PathLike[str] | None = None,
        format: str = "png",
    ) -> None:
        """Write the tile to disk and remember where it was written."""
        target = (
            Path(filename)
            if filename is not None
            else self.generate_filename(None, "tile", format, True)
        )
        self.image.save(target)
        self.filename = target

    def __repr__(self) -> str:
        if self.filename is None:
            return f"<Tile #{self.number}>"
        return f"<Tile #{self.number} - {self.filename.name}>"