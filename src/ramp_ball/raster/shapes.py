# MIT License (see LICENSE)
"""
Shape rasterizers.

Each rasterizer scans the cells inside the shape's bounding box (clipped to
the grid) and turns on the cells the shape covers. Rasterizers only ever set
cells, so drawing the same shape twice gives the same grid as drawing it
once.

The per-cell tests are evaluated with numpy over the whole clipped box at
once; this is brute force, which is fine for grids of a few thousand cells.
"""
from __future__ import annotations
import math

import numpy as np

from ..constants import LINE_BAND_WIDTH
from ..types import Ball, Circle, LineSegment
from .grid import PixelGrid


def _cell_span(lo: float, hi: float, size: int) -> tuple[int, int]:
    """
    Integer cell range [start, stop) covering [lo, hi), clipped to [0, size).

    Returns an empty range (start >= stop) when the span misses the grid.
    """
    start = max(math.floor(lo), 0)
    stop = min(math.ceil(hi), size)
    return start, stop


def rasterize_circle(grid: PixelGrid, circle: Circle) -> None:
    """
    Fill every cell whose center lies inside the circle.

    A cell (x, y) is sampled at (x + 0.5, y + 0.5) and is foreground when
        (x + 0.5 - cx)² + (y + 0.5 - cy)² ≤ r²

    Args:
        grid: Target grid (modified in-place).
        circle: The disc to draw.
    """
    min_x, min_y, max_x, max_y = circle.bounds()
    x0, x1 = _cell_span(min_x, max_x, grid.width)
    y0, y1 = _cell_span(min_y, max_y, grid.height)
    if x0 >= x1 or y0 >= y1:
        return

    cx, cy = circle.center
    dx = (np.arange(x0, x1) + 0.5) - cx
    dy = (np.arange(y0, y1) + 0.5) - cy
    inside = dx[np.newaxis, :] ** 2 + dy[:, np.newaxis] ** 2 <= circle.radius * circle.radius
    grid.cells[y0:y1, x0:x1] |= inside


def rasterize_line(grid: PixelGrid, line: LineSegment, band_width: int = LINE_BAND_WIDTH) -> None:
    """
    Draw a line segment as a band band_width rows thick.

    Within the segment's bounding box, a cell (x, y) is foreground when
        -band_width ≤ f(x) - y ≤ 0,   f(x) = slope·x + y_intercept
    i.e. the band starts at the line and extends band_width rows down the
    screen. f is the infinite line (LineSegment.fx without clipping); only the
    bounding box limits how far the band reaches.

    Args:
        grid: Target grid (modified in-place).
        line: The segment to draw.
        band_width: Thickness of the band in rows.
    """
    min_x, min_y, max_x, max_y = line.bounds()
    x0, x1 = _cell_span(min_x, max_x, grid.width)
    y0, y1 = _cell_span(min_y, max_y, grid.height)
    if x0 >= x1 or y0 >= y1:
        return

    fx = line.slope * np.arange(x0, x1, dtype=np.float64) + line.y_intercept
    offset = fx[np.newaxis, :] - np.arange(y0, y1, dtype=np.float64)[:, np.newaxis]
    grid.cells[y0:y1, x0:x1] |= (offset >= -band_width) & (offset <= 0)


def rasterize(grid: PixelGrid, shape: Circle | LineSegment | Ball, band_width: int = LINE_BAND_WIDTH) -> None:
    """
    Draw any supported shape onto the grid.

    Raises:
        TypeError: If the shape is not a Circle, LineSegment or Ball.
    """
    if isinstance(shape, Ball):
        rasterize_circle(grid, shape.circle)
    elif isinstance(shape, Circle):
        rasterize_circle(grid, shape)
    elif isinstance(shape, LineSegment):
        rasterize_line(grid, shape, band_width)
    else:
        raise TypeError(f"Unknown shape type: {type(shape)}")
