# MIT License (see LICENSE)
"""
Collision response against the floor and the ramp.

Both surfaces are handled by projection: if the ball's lowest point has
passed the surface, the ball is moved back onto it and its velocity is
damped/redirected. There is no contact persistence and no impulse solver;
each call looks only at the current state.
"""
from __future__ import annotations
import math

import numpy as np

from ..materials import Damping
from ..types import Ball, LineSegment


def collide_floor(ball: Ball, floor_y: float, damping: Damping) -> bool:
    """
    Bounce the ball off a horizontal floor at y = floor_y.

    On contact the ball rests on the floor, vy is scaled by
    damping.floor_bounce (negative, so it flips) and vx by
    damping.floor_friction.

    Returns:
        True if the ball touched the floor.
    """
    rest_y = floor_y - ball.radius
    if ball.center[1] < rest_y:
        return False

    ball.center[1] = rest_y
    ball.velocity[1] *= damping.floor_bounce
    ball.velocity[0] *= damping.floor_friction
    return True


def collide_ramp(ball: Ball, ramp: LineSegment, damping: Damping, clip: bool = False) -> bool:
    """
    Deflect the ball off an inclined ramp.

    The ramp height under the ball's center is f(cx). If the ball's bottom is
    at or below it, the ball is placed on the surface and the incoming
    vertical speed vy is split along the ramp angle θ:
        Δvx = sin(θ)·vy
        Δvy = -cos(θ)·vy·damping.ramp_rebound
    after which vx is scaled by damping.ramp_friction.

    Args:
        ball: Ball to test (modified in-place on contact).
        ramp: The ramp segment.
        damping: Damping coefficients.
        clip: If True, ignore the ramp when cx is outside its horizontal span.
              Otherwise the ramp acts as an infinite line.

    Returns:
        True if the ball touched the ramp.
    """
    surface_y = ramp.fx(float(ball.center[0]), clip=clip)
    if surface_y is None:
        return False

    rest_y = surface_y - ball.radius
    if ball.center[1] < rest_y:
        return False

    ball.center[1] = rest_y
    vy = float(ball.velocity[1])
    kick = np.array([
        math.sin(ramp.angle) * vy,
        -math.cos(ramp.angle) * vy * damping.ramp_rebound,
    ])
    ball.velocity = ball.velocity + kick
    ball.velocity[0] *= damping.ramp_friction
    return True
