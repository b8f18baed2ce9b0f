# MIT License (see LICENSE)
"""
Monochrome pixel grid.

The grid is a fixed-size boolean buffer, row-major (cells[y, x]), where
False is background and True is foreground. Writes outside the grid are
ignored so that rasterizers never need their own bounds checks.
"""
from __future__ import annotations
from enum import IntEnum
import math
from typing import Iterable

import numpy as np

from ..constants import HEIGHT, WIDTH


class Pixel(IntEnum):
    """Two-state pixel value. Interchangeable with bool (BG is falsy)."""
    BG = 0
    FG = 1


class PixelGrid:
    """
    Fixed-size 2D boolean pixel buffer.

    Example:
        grid = PixelGrid(80, 22)
        grid.set(3, 4)
        grid.count()   # 1
        grid.clear()
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT):
        if width < 1 or height < 1:
            raise ValueError(f"grid size must be positive, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.cells = np.zeros((self.height, self.width), dtype=bool)

    def __repr__(self) -> str:
        return f"PixelGrid({self.width}x{self.height}, fg={self.count()})"

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def clear(self, fill: bool | Pixel = False) -> None:
        """Set every cell to fill."""
        self.cells.fill(bool(fill))

    def _cell(self, x: int | float, y: int | float) -> tuple[int, int] | None:
        """Floor (x, y) to a cell index, or None if it is off the grid."""
        if not (math.isfinite(x) and math.isfinite(y)):
            return None
        x, y = math.floor(x), math.floor(y)
        if not self.in_bounds(x, y):
            return None
        return x, y

    def set(self, x: int | float, y: int | float, value: bool | Pixel = True) -> None:
        """Write one cell; out-of-bounds coordinates are a no-op."""
        cell = self._cell(x, y)
        if cell is not None:
            self.cells[cell[1], cell[0]] = bool(value)

    def get(self, x: int | float, y: int | float) -> bool:
        """Read one cell; out-of-bounds reads as background."""
        cell = self._cell(x, y)
        if cell is None:
            return False
        return bool(self.cells[cell[1], cell[0]])

    def count(self) -> int:
        """Number of foreground cells."""
        return int(np.count_nonzero(self.cells))

    def to_text(self, fg: str = "#", bg: str = ".") -> str:
        """One character per cell, rows separated by newlines."""
        chars = np.where(self.cells, fg, bg)
        return "\n".join("".join(row) for row in chars)

    @classmethod
    def from_rows(cls, rows: Iterable[str], fg: str = "#") -> "PixelGrid":
        """
        Build a grid from text rows (inverse of to_text).

        Every character equal to fg becomes foreground; all rows must have
        the same length.
        """
        rows = list(rows)
        if not rows or any(len(r) != len(rows[0]) for r in rows):
            raise ValueError("rows must be non-empty and of equal length")
        grid = cls(len(rows[0]), len(rows))
        grid.cells[:] = np.array([[c == fg for c in r] for r in rows], dtype=bool)
        return grid
