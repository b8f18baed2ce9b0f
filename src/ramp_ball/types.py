# MIT License (see LICENSE)
"""
Core type definitions for the demo.

Defines the geometry that gets rasterized:
- Circle: a disc given by center and radius.
- LineSegment: a non-vertical segment, with its line equation precomputed.
- Ball: the moving body, a circle plus a velocity.

All coordinates are in grid cells, screen oriented (y grows downward). The
line through a segment is y = slope * x + y_intercept.
"""
from __future__ import annotations
from dataclasses import dataclass, field
import math

import numpy as np

from .util import f64, is_finite_vec


def _check_radius(radius: float) -> None:
    if not math.isfinite(radius) or radius <= 0:
        raise ValueError(f"radius must be a positive finite number, got {radius!r}")


# =============================================================================
# Shape Definitions
# =============================================================================

@dataclass(frozen=True, eq=False)
class Circle:
    """
    Disc shape.

    Attributes:
        center: Center [x, y] in cells.
        radius: Distance from center to edge in cells. Must be > 0.
    """
    center: np.ndarray
    radius: float

    def __post_init__(self) -> None:
        """Store center as float64 and reject degenerate circles."""
        object.__setattr__(self, "center", f64(self.center))
        _check_radius(self.radius)
        if not is_finite_vec(self.center):
            raise ValueError(f"circle center must be finite, got {self.center!r}")

    def bounds(self) -> tuple[float, float, float, float]:
        """Axis-aligned bounding box (min_x, min_y, max_x, max_y)."""
        cx, cy = self.center
        r = self.radius
        return (cx - r, cy - r, cx + r, cy + r)


@dataclass(frozen=True, eq=False)
class LineSegment:
    """
    Straight segment between two points, with a cached line equation.

    The slope, angle and y-intercept are derived once from start and end.
    Vertical segments have no slope and are rejected.

    Attributes:
        start: First endpoint [x, y].
        end: Second endpoint [x, y].
        slope: dy/dx of the segment.
        angle: atan(slope), in radians. Positive angles go down to the right.
        y_intercept: Value of the line at x = 0.
    """
    start: np.ndarray
    end: np.ndarray
    slope: float = field(init=False)
    angle: float = field(init=False)
    y_intercept: float = field(init=False)

    def __post_init__(self) -> None:
        start, end = f64(self.start), f64(self.end)
        if not (is_finite_vec(start) and is_finite_vec(end)):
            raise ValueError("line segment endpoints must be finite")
        if start[0] == end[0]:
            raise ValueError(f"vertical line segments are not supported (x = {start[0]})")

        # m = (y1 - y0) / (x1 - x0)
        slope = float((end[1] - start[1]) / (end[0] - start[0]))
        # y = m (x - x0) + y0, evaluated at x = 0
        y_intercept = float(slope * (0.0 - start[0]) + start[1])

        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)
        object.__setattr__(self, "slope", slope)
        object.__setattr__(self, "angle", math.atan(slope))
        object.__setattr__(self, "y_intercept", y_intercept)

    @property
    def left_x(self) -> float:
        return float(min(self.start[0], self.end[0]))

    @property
    def right_x(self) -> float:
        return float(max(self.start[0], self.end[0]))

    def spans(self, x: float) -> bool:
        """True if x lies within the segment's horizontal extent."""
        return self.left_x <= x <= self.right_x

    def fx(self, x: float, clip: bool = False) -> float | None:
        """
        Height of the line at x.

        By default the infinite line is evaluated, so every x has a value.
        With clip=True, x outside the segment's span gives None.
        """
        if clip and not self.spans(x):
            return None
        return self.slope * x + self.y_intercept

    def bounds(self) -> tuple[float, float, float, float]:
        """Axis-aligned bounding box (min_x, min_y, max_x, max_y)."""
        return (
            self.left_x,
            float(min(self.start[1], self.end[1])),
            self.right_x,
            float(max(self.start[1], self.end[1])),
        )


# =============================================================================
# Ball
# =============================================================================

@dataclass
class Ball:
    """
    The moving body: a circle with a velocity.

    Attributes:
        center: Center position [x, y] in cells.
        radius: Radius in cells. Must be > 0.
        velocity: Velocity [vx, vy] in cells/s.

    Note:
        center and velocity are converted to float64 arrays on init and
        updated in place by the integrator and collision response.
    """
    center: np.ndarray | tuple[float, float]
    radius: float
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        _check_radius(self.radius)
        self.center = f64(self.center)
        self.velocity = f64(self.velocity)

    @property
    def bottom(self) -> float:
        """y of the lowest point of the ball."""
        return float(self.center[1] + self.radius)

    @property
    def circle(self) -> Circle:
        """Snapshot of the ball's current shape."""
        return Circle(self.center.copy(), self.radius)

    def reset(self, center: tuple[float, float] | np.ndarray) -> None:
        """Move the ball to center and bring it to rest."""
        self.center = f64(center)
        self.velocity = np.zeros(2, dtype=np.float64)
