"""A basic in-memory image made of pixel values in row-major order."""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Image:
    """A width x height grid of pixels stored row by row, top row first."""

    pixels: list[Any]
    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Neither width or height can be 0.")
        if len(self.pixels) != self.width * self.height:
            raise ValueError("Buffer length must match image dimensions.")

    @classmethod
    def from_color(cls, color, width: int, height: int) -> Image:
        """An image of the given size filled with one color."""
        if width <= 0 or height <= 0:
            raise ValueError("Neither width or height can be 0.")
        return cls([color] * (width * height), width, height)

    @classmethod
    def from_pixels(cls, pixels: Iterable, width: int, height: int) -> Image:
        """An image built from row-major pixels; their count must match the size."""
        return cls(list(pixels), width, height)

    def __len__(self) -> int:
        return len(self.pixels)

    def __iter__(self) -> Iterator:
        return iter(self.pixels)

    def copy(self) -> Image:
        """A deep copy of the image."""
        return Image(copy.deepcopy(self.pixels), self.width, self.height)

    def index_for(self, x: int, y: int) -> int:
        """The position of pixel (x, y) in the row-major pixel list."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        return y * self.width + x

    def _resolve(self, key) -> int:
        if isinstance(key, tuple):
            x, y = key
            return self.index_for(x, y)
        return key

    def __getitem__(self, key):
        """A pixel by flat index or by an (x, y) pair."""
        return self.pixels[self._resolve(key)]

    def __setitem__(self, key, value) -> None:
        """Replace a pixel by flat index or by an (x, y) pair."""
        self.pixels[self._resolve(key)] = value

    def set_subsection(self, offset_x: int, offset_y: int, other: Image) -> None:
        """Copy ``other`` into this image with its top left corner at the offset."""
        if other.width + offset_x > self.width or other.height + offset_y > self.height:
            raise ValueError(
                f"a {other.width}x{other.height} image at ({offset_x}, {offset_y}) "
                f"does not fit in a {self.width}x{self.height} image"
            )
        for row in range(other.height):
            start = self.index_for(offset_x, offset_y + row)
            source = row * other.width
            self.pixels[start:start + other.width] = other.pixels[source:source + other.width]