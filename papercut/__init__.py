"""Slice images into tiles and join tiles back into images."""

__version__ = "0.1.2"

__all__ = ["cli", "core", "tile", "utils"]