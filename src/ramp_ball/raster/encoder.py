# MIT License (see LICENSE)
"""
Row-pair text encoding.

Terminal cells are roughly twice as tall as they are wide, so each text row
shows two grid rows. With background = 0 and foreground = 1, the glyph for a
column is table[top * 2 + bottom]:

| top | bottom | glyph   |
| :-: | :----: | :-----: |
|  .  |   .    | <SPACE> |
|  *  |   .    |    ^    |
|  .  |   *    |    _    |
|  *  |   *    |    S    |

For instance

    *.***....*.*
    .****...*.**

becomes

    ^_SSS   _^_S
"""
from __future__ import annotations
from typing import Iterator

import numpy as np

from ..constants import GLYPH_TABLE
from .grid import PixelGrid


def encode_row_pairs(grid: PixelGrid, table: str = GLYPH_TABLE) -> Iterator[str]:
    """
    Yield one text row per pair of grid rows, top to bottom.

    The rows are computed lazily from the grid's current contents.

    Raises:
        ValueError: If the grid height is odd or table is not 4 glyphs long.
    """
    if grid.height % 2:
        raise ValueError(f"grid height must be even to pair rows, got {grid.height}")
    if len(table) != 4:
        raise ValueError(f"glyph table needs exactly 4 glyphs, got {table!r}")

    glyphs = np.array(list(table))
    for y in range(0, grid.height, 2):
        top = grid.cells[y].astype(np.intp)
        bottom = grid.cells[y + 1].astype(np.intp)
        yield "".join(glyphs[top * 2 + bottom])


def encode_frame(grid: PixelGrid, table: str = GLYPH_TABLE) -> str:
    """The whole grid as newline-terminated text rows."""
    return "".join(row + "\n" for row in encode_row_pairs(grid, table))
