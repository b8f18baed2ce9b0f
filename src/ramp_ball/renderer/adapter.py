# MIT License (see LICENSE)
"""
Renderer adapters for the demo.

This module provides an abstract base class for rendering and the concrete
text renderers built on the pixel grid. The physics code has no rendering
dependency; a scene can be stepped without any renderer at all.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from ..constants import GLYPH_TABLE, LINE_BAND_WIDTH, cursor_back
from ..raster.encoder import encode_frame
from ..raster.grid import PixelGrid
from ..raster.shapes import rasterize

if TYPE_CHECKING:
    from ..config import SimConfig
    from ..scene import Scene


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Usage:
        renderer.begin_frame(scene.time)
        for shape in scene.shapes:
            renderer.draw_shape(shape)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_scene(scene)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame for rendering.

        Args:
            time: Current simulation time in seconds.
        """
        ...

    @abstractmethod
    def draw_shape(self, shape) -> None:
        """
        Draw a single shape (Ball, Circle or LineSegment).
        """
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """
        Finalize the current frame.

        Called after all shapes have been drawn for this frame.
        """
        ...

    def render_scene(self, scene: "Scene") -> None:
        """
        Convenience method to render every shape in a scene.

        Args:
            scene: The scene to render.
        """
        self.begin_frame(scene.time)
        for shape in scene.shapes:
            self.draw_shape(shape)
        self.end_frame()


class GridRenderer(RendererAdapter):
    """
    Base for renderers that rasterize into a PixelGrid and encode it as text.

    Subclasses decide what happens to the encoded frame in emit().
    """

    def __init__(
        self,
        width: int,
        height: int,
        glyphs: str = GLYPH_TABLE,
        band_width: int = LINE_BAND_WIDTH,
    ):
        self.grid = PixelGrid(width, height)
        self.glyphs = glyphs
        self.band_width = band_width

    def begin_frame(self, time: float) -> None:
        """Clear the grid to background."""
        self.grid.clear()

    def draw_shape(self, shape) -> None:
        rasterize(self.grid, shape, self.band_width)

    def end_frame(self) -> None:
        """Encode the grid and hand the text to emit()."""
        self.emit(encode_frame(self.grid, self.glyphs))

    @abstractmethod
    def emit(self, text: str) -> None:
        ...


class TerminalRenderer(GridRenderer):
    """
    Draws frames in place on a VT100-compatible terminal.

    Each frame is written as height/2 text rows, followed by an escape
    sequence that moves the cursor back to the frame's top-left corner so the
    next frame overwrites it.

    Example:
        renderer = TerminalRenderer.from_config(SimConfig())
        with hidden_cursor(renderer.output):
            renderer.render_scene(scene)
    """

    def __init__(self, width: int, height: int, output: TextIO | None = None, **kwargs):
        """
        Args:
            width: Grid width in pixels (= text columns).
            height: Grid height in pixels (= 2 x text rows).
            output: Output stream (defaults to sys.stdout).
            **kwargs: glyphs / band_width, passed to GridRenderer.
        """
        super().__init__(width, height, **kwargs)
        self.output = output or sys.stdout
        self._rewind = cursor_back(width, height)

    @classmethod
    def from_config(cls, config: "SimConfig", output: TextIO | None = None) -> "TerminalRenderer":
        return cls(
            config.width,
            config.height,
            output=output,
            glyphs=config.glyphs,
            band_width=config.band_width,
        )

    def emit(self, text: str) -> None:
        self.output.write(text)
        self.output.write(self._rewind)
        self.output.flush()


class BufferedRenderer(GridRenderer):
    """
    Renderer that keeps every encoded frame in memory.

    Useful for tests and for dumping a run without a terminal.

    Example:
        renderer = BufferedRenderer(80, 22)
        for _ in range(100):
            renderer.render_scene(scene)
            scene.step()
        print(renderer.frames[-1], end="")
    """

    def __init__(self, width: int, height: int, **kwargs):
        super().__init__(width, height, **kwargs)
        self.frames: list[str] = []

    def emit(self, text: str) -> None:
        self.frames.append(text)


class NullRenderer(RendererAdapter):
    """
    No-op renderer that does nothing.

    Useful for running the physics headless or timing it without rendering.
    """

    def begin_frame(self, time: float) -> None:
        pass

    def draw_shape(self, shape) -> None:
        pass

    def end_frame(self) -> None:
        pass
