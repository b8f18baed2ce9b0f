# MIT License (see LICENSE)
"""
Energy bookkeeping for the ball.

Used to check that collisions only ever remove energy: with damping factors
of magnitude below one, the mechanical energy after a bounce must not exceed
the energy before it. Values are per unit mass, since the ball has none.
"""
from __future__ import annotations
import numpy as np

from ..types import Ball
from ..util import norm


def kinetic_energy(ball: Ball) -> float:
    """T = ½ |v|²"""
    speed = norm(ball.velocity)
    return 0.5 * speed * speed


def potential_energy(ball: Ball, gravity: np.ndarray, floor_y: float) -> float:
    """
    Gravitational potential relative to the resting height on the floor.

    Screen y grows downward, so height above the floor is
    (floor_y - radius) - center.y and U = |g| · height.
    """
    height = (floor_y - ball.radius) - float(ball.center[1])
    return norm(gravity) * height


def mechanical_energy(ball: Ball, gravity: np.ndarray, floor_y: float) -> float:
    """E = T + U"""
    return kinetic_energy(ball) + potential_energy(ball, gravity, floor_y)
