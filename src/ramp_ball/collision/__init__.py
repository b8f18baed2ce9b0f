# MIT License (see LICENSE)
"""
Collision response subsystem.

This subpackage provides:
    - collide_floor: bounce off the horizontal floor.
    - collide_ramp: deflect off the inclined ramp segment.

Typical usage:
    from ramp_ball.collision import collide_floor, collide_ramp

    collide_floor(ball, floor_y=22.0, damping=Damping())
    collide_ramp(ball, ramp, Damping())
"""
from .response import collide_floor, collide_ramp

__all__ = [
    "collide_floor",
    "collide_ramp",
]
