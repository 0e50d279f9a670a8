# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
#
# This source code is licensed under the BSD-style license found in the
# LICENSE file in the root directory of this source tree.

"""
Rectangular tile grid backed by a numpy object array of characters.

Cells are addressed as ``grid[x, y]`` with x growing rightwards and y growing
downwards. Reads return a :class:`Tile`, or the raw character for tiles
outside the level alphabet.
"""

from typing import Iterator, List, Tuple

import numpy as np

from ..models import Cell, Tile


class Grid:
    """Owned, bounds-checked ``height x width`` board of tile characters."""

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")
        self._cells = np.full((height, width), Tile.EMPTY.value, dtype=object)

    @classmethod
    def from_rows(cls, rows: List[str]) -> "Grid":
        """Build a grid from rows, right-padding short rows with empty floor."""
        width = max((len(row) for row in rows), default=0)
        grid = cls(width, len(rows))
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                grid._cells[y, x] = ch
        return grid

    @property
    def width(self) -> int:
        return self._cells.shape[1]

    @property
    def height(self) -> int:
        return self._cells.shape[0]

    @property
    def shape(self) -> Tuple[int, int]:
        """(height, width), matching the numpy layout."""
        return self._cells.shape

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) outside {self.width}x{self.height} grid")

    def __getitem__(self, pos: Tuple[int, int]) -> Cell:
        x, y = pos
        self._check(x, y)
        return Tile.from_char(str(self._cells[y, x]))

    def __setitem__(self, pos: Tuple[int, int], tile: Cell) -> None:
        x, y = pos
        self._check(x, y)
        value = tile.value if isinstance(tile, Tile) else tile
        if len(value) != 1:
            raise ValueError(f"A cell holds exactly one character, got {value!r}")
        self._cells[y, x] = value

    def count(self, *tiles: Tile) -> int:
        """Count the cells holding any of ``tiles``."""
        return int(np.count_nonzero(np.isin(self._cells, [t.value for t in tiles])))

    def find(self, *tiles: Tile) -> List[Tuple[int, int]]:
        """Return (x, y) of every cell holding any of ``tiles``, in row-major order."""
        ys, xs = np.nonzero(np.isin(self._cells, [t.value for t in tiles]))
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    def rows(self) -> List[str]:
        return ["".join(row) for row in self._cells]

    def copy(self) -> "Grid":
        clone = Grid(0, 0)
        clone._cells = self._cells.copy()
        return clone

    def __iter__(self) -> Iterator[Tuple[int, int, Cell]]:
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self[x, y]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        return f"Grid({self.width}x{self.height})"
