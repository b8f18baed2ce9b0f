# MIT License (see LICENSE)
"""
Time integration for the ball.

The demo uses explicit (semi-implicit) Euler with a fixed timestep:
    v(t+dt) = v(t) + g·dt
    x(t+dt) = x(t) + v(t+dt)·dt

The position update uses the already-updated velocity, which is what makes a
ball released at rest move g·dt² in its first step.

Reference:
    https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations

import numpy as np

from ..types import Ball


def euler_step(ball: Ball, gravity: np.ndarray, dt: float) -> None:
    """
    Advance the ball by dt under constant acceleration.

    Args:
        ball: Ball to integrate (modified in-place).
        gravity: Acceleration [gx, gy] in cells/s².
        dt: Timestep in seconds.
    """
    # V = V0 + g·Δt
    ball.velocity = ball.velocity + gravity * dt
    # S = S0 + V·Δt
    ball.center = ball.center + ball.velocity * dt
