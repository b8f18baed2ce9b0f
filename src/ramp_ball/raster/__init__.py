# MIT License (see LICENSE)
"""
Rasterization pipeline.

This subpackage turns continuous geometry into terminal text:
    - PixelGrid: fixed-size monochrome buffer.
    - rasterize_circle, rasterize_line: paint shapes into a grid.
    - encode_row_pairs: pack two grid rows into one row of glyphs.

Typical usage:
    from ramp_ball.raster import PixelGrid, rasterize, encode_frame

    grid = PixelGrid(80, 22)
    rasterize(grid, Circle((10, 10), 3))
    print(encode_frame(grid), end="")
"""
from .grid import Pixel, PixelGrid
from .shapes import rasterize, rasterize_circle, rasterize_line
from .encoder import encode_frame, encode_row_pairs

__all__ = [
    # Grid
    "Pixel",
    "PixelGrid",
    # Rasterizers
    "rasterize",
    "rasterize_circle",
    "rasterize_line",
    # Encoder
    "encode_row_pairs",
    "encode_frame",
]
