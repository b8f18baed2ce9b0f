# MIT License (see LICENSE)
"""
Default constants for the demo.

Units are grid cells (one cell = one pixel of the monochrome grid) and
seconds. Each terminal character row shows two grid rows, so the grid
height should be even.
"""
from __future__ import annotations

# Grid size in pixels. 80 columns x 22 rows renders as 80x11 characters.
WIDTH: int = 80
HEIGHT: int = 22

# Frames per second; the physics timestep is 1/FPS.
FPS: int = 30

# Downward acceleration in cells/s² (y grows downward on screen).
GRAVITY: tuple[float, float] = (0.0, 120.0)

# Rows painted beneath the exact line position, giving the ramp some thickness.
LINE_BAND_WIDTH: int = 2

# Glyph index = top * 2 + bottom, with background = 0 and foreground = 1.
GLYPH_TABLE: str = " _^S"

# Extra distance past the right edge before a ball counts as gone.
RESPAWN_MARGIN: float = 2.0

# Pause before the next ball is released, in seconds.
RESPAWN_DELAY: float = 0.5

# VT100 sequences
HIDE_CURSOR: str = "\x1b[?25l"
SHOW_CURSOR: str = "\x1b[?25h"


def cursor_back(width: int, height: int) -> str:
    """Escape sequence moving the cursor to the top-left of a frame just written."""
    return f"\x1b[{width}D\x1b[{height // 2}A"
