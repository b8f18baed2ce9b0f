# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides abstract and concrete renderer implementations:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - TerminalRenderer: Draws frames in place on a VT100 terminal.
    - BufferedRenderer: Records encoded frames for tests or export.
    - NullRenderer: No-op renderer for headless runs.
    - hidden_cursor: Context manager hiding the cursor while animating.

Typical usage:
    from ramp_ball.renderer import TerminalRenderer, hidden_cursor

    renderer = TerminalRenderer(80, 22)
    with hidden_cursor(renderer.output):
        renderer.render_scene(scene)
"""
from .adapter import (
    RendererAdapter,
    GridRenderer,
    TerminalRenderer,
    BufferedRenderer,
    NullRenderer,
)
from .terminal import hidden_cursor

__all__ = [
    "RendererAdapter",
    "GridRenderer",
    "TerminalRenderer",
    "BufferedRenderer",
    "NullRenderer",
    "hidden_cursor",
]
