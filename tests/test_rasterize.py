import math

import numpy as np
import pytest
from ramp_ball.raster.grid import PixelGrid
from ramp_ball.raster.shapes import rasterize, rasterize_circle, rasterize_line
from ramp_ball.types import Ball, Circle, LineSegment


def reference_circle(width, height, cx, cy, r):
    """Cells whose centers are within r of (cx, cy), by checking every cell."""
    cells = np.zeros((height, width), dtype=bool)
    for y in range(height):
        for x in range(width):
            dx = (x + 0.5) - cx
            dy = (y + 0.5) - cy
            cells[y, x] = dx * dx + dy * dy <= r * r
    return cells


def test_circle_exact_cells():
    """Circle (10, 10) r=3 covers exactly the cells with (x+.5-10)² + (y+.5-10)² ≤ 9."""
    grid = PixelGrid(80, 22)
    rasterize_circle(grid, Circle((10.0, 10.0), 3.0))

    expected = reference_circle(80, 22, 10.0, 10.0, 3.0)
    assert np.array_equal(grid.cells, expected)
    assert grid.count() == int(expected.sum())
    # the 6x6 block of candidate cells minus its 4 corners
    assert grid.count() == 32


@pytest.mark.parametrize("cx, cy, r", [
    (0.0, 0.0, 3.0),        # clipped by the top-left corner
    (79.3, 21.7, 4.2),      # clipped by the bottom-right corner
    (40.25, -2.0, 5.5),     # mostly above the grid
    (5.5, 0.1333, 5.5),     # the ball just after release
    (17.7, 9.1, 0.4),       # smaller than a cell
])
def test_circle_matches_brute_force(cx, cy, r):
    grid = PixelGrid(80, 22)
    rasterize_circle(grid, Circle((cx, cy), r))
    assert np.array_equal(grid.cells, reference_circle(80, 22, cx, cy, r))


@pytest.mark.parametrize("r", [2.0, 3.5, 5.0, 7.25, 9.0])
def test_circle_area(r):
    """Foreground count ≈ πr², within one perimeter's worth of cells."""
    grid = PixelGrid(80, 22)
    rasterize_circle(grid, Circle((40.0, 11.0), r))
    area = math.pi * r * r
    print("r", r, "count", grid.count(), "area", area)
    assert abs(grid.count() - area) <= 2 * math.pi * r


def test_circle_outside_grid_is_noop():
    grid = PixelGrid(80, 22)
    rasterize_circle(grid, Circle((-10.0, -10.0), 3.0))
    rasterize_circle(grid, Circle((200.0, 5.0), 10.0))
    rasterize_circle(grid, Circle((40.0, 40.0), 5.0))
    assert grid.count() == 0


def test_rasterize_is_idempotent():
    shapes = [
        Circle((12.3, 7.9), 4.4),
        LineSegment((-5.5, 7.5), (40.0, 22.0)),
    ]
    once = PixelGrid(80, 22)
    twice = PixelGrid(80, 22)
    for shape in shapes:
        rasterize(once, shape)
        rasterize(twice, shape)
        rasterize(twice, shape)
    assert np.array_equal(once.cells, twice.cells)


def test_rasterize_never_clears():
    grid = PixelGrid(20, 10)
    grid.clear(True)
    rasterize(grid, Circle((5.0, 5.0), 2.0))
    rasterize(grid, LineSegment((0.0, 0.0), (20.0, 10.0)))
    assert grid.count() == 200


def test_line_equation():
    """Segment (0,10)→(10,0): slope -1, intercept 10, f(5) = 5."""
    line = LineSegment((0.0, 10.0), (10.0, 0.0))
    assert line.slope == -1.0
    assert line.y_intercept == 10.0
    assert line.fx(5.0) == 5.0
    assert line.angle == pytest.approx(-math.pi / 4)


def test_line_fx_evaluates_infinite_line():
    """
    fx is not limited to the segment's span unless asked: x = 100 lies far
    right of (0,10)→(10,0) and still gets a value on the extended line.
    """
    line = LineSegment((0.0, 10.0), (10.0, 0.0))
    assert line.fx(100.0) == -90.0
    assert line.fx(-3.0) == 13.0
    assert line.fx(100.0, clip=True) is None
    assert line.fx(-3.0, clip=True) is None
    assert line.fx(5.0, clip=True) == 5.0
    assert line.fx(10.0, clip=True) == 0.0


def test_line_band_cells():
    """
    Within the bounding box [0,10)x[0,10), the band is the cells with
    -2 ≤ f(x) - y ≤ 0, i.e. f(x) ≤ y ≤ f(x) + 2.
    """
    grid = PixelGrid(80, 22)
    rasterize_line(grid, LineSegment((0.0, 10.0), (10.0, 0.0)))

    expected = np.zeros((22, 80), dtype=bool)
    for y in range(10):
        for x in range(10):
            offset = (10.0 - x) - y
            expected[y, x] = -2 <= offset <= 0
    assert np.array_equal(grid.cells, expected)
    # Three rows per column except where the box cuts the band off
    assert grid.cells[:, 5].sum() == 3
    assert grid.cells[:, 0].sum() == 0


def test_line_band_width_parameter():
    grid = PixelGrid(40, 20)
    rasterize_line(grid, LineSegment((0.0, 0.0), (40.0, 0.5)), band_width=0)
    thin = grid.count()
    grid.clear()
    rasterize_line(grid, LineSegment((0.0, 0.0), (40.0, 20.0)), band_width=4)
    assert thin <= 40
    assert grid.cells[:, 10].sum() == 5


def test_default_ramp_stays_in_its_box():
    """The classic ramp only touches columns left of the screen middle."""
    grid = PixelGrid(80, 22)
    rasterize_line(grid, LineSegment((-5.5, 7.5), (40.0, 22.0)))

    columns = grid.cells.any(axis=0)
    assert columns[:37].all()
    assert not columns[40:].any()


def test_line_outside_grid_is_noop():
    grid = PixelGrid(80, 22)
    rasterize_line(grid, LineSegment((100.0, 0.0), (120.0, 10.0)))
    rasterize_line(grid, LineSegment((0.0, -30.0), (80.0, -20.0)))
    assert grid.count() == 0


def test_ball_dispatch_and_unknown_shape():
    grid = PixelGrid(80, 22)
    rasterize(grid, Ball(center=(10.0, 10.0), radius=3.0))
    assert grid.count() == 32

    with pytest.raises(TypeError):
        rasterize(grid, "not a shape")


def test_invalid_shapes_rejected():
    with pytest.raises(ValueError):
        Circle((0.0, 0.0), 0.0)
    with pytest.raises(ValueError):
        Circle((0.0, 0.0), -1.0)
    with pytest.raises(ValueError):
        Circle((float("nan"), 0.0), 1.0)
    with pytest.raises(ValueError):
        LineSegment((3.0, 0.0), (3.0, 10.0))
    with pytest.raises(ValueError):
        Ball(center=(0.0, 0.0), radius=0.0)
