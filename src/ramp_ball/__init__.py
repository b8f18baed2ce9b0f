# MIT License (see LICENSE)
"""
ramp_ball - A ball bouncing down a ramp, rasterized into the terminal.

A circle and a line segment are rasterized every frame into a small
monochrome pixel grid; pairs of grid rows are then packed into one row of
glyphs (" ", "^", "_", "S") and drawn in place on a VT100 terminal.

Main entry points:
    - Scene: The ball, the ramp and the physics tick.
    - run: The animation loop.
    - PixelGrid, rasterize, encode_frame: The rasterization pipeline.
    - SimConfig: All tunables.

Submodules:
    - raster: Pixel grid, shape rasterizers, row-pair encoder.
    - core: Euler integrator and energy helpers.
    - collision: Floor and ramp collision response.
    - renderer: Terminal, buffered and null renderers.

Example:
    from ramp_ball import Scene, BufferedRenderer

    scene = Scene()
    renderer = BufferedRenderer(80, 22)
    renderer.render_scene(scene)
    print(renderer.frames[0], end="")
"""
from .config import SimConfig
from .loop import run
from .materials import Damping
from .raster import Pixel, PixelGrid, encode_frame, encode_row_pairs, rasterize
from .renderer import BufferedRenderer, NullRenderer, TerminalRenderer, hidden_cursor
from .scene import Scene
from .types import Ball, Circle, LineSegment

__all__ = [
    # Simulation
    "Scene",
    "SimConfig",
    "Damping",
    "run",
    # Shapes
    "Ball",
    "Circle",
    "LineSegment",
    # Rasterization
    "Pixel",
    "PixelGrid",
    "rasterize",
    "encode_row_pairs",
    "encode_frame",
    # Rendering
    "TerminalRenderer",
    "BufferedRenderer",
    "NullRenderer",
    "hidden_cursor",
]
