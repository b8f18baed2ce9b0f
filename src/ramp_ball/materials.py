# MIT License (see LICENSE)
"""
Damping coefficients for collision response.

The demo has no real materials; each surface just scales the ball's
velocity components when it is hit.
"""
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Damping:
    """
    Velocity multipliers applied on contact.

    Attributes:
        floor_bounce: Factor applied to vy after hitting the floor. Negative
                      so the ball bounces back up; |value| < 1 loses energy.
        floor_friction: Factor applied to vx after hitting the floor.
        ramp_rebound: Scale of the normal (upward) kick from the ramp, relative
                      to the incoming vertical speed.
        ramp_friction: Factor applied to vx after touching the ramp.
    """
    floor_bounce: float = -0.8
    floor_friction: float = 0.98
    ramp_rebound: float = 0.5
    ramp_friction: float = 0.99
