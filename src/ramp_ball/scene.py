# MIT License (see LICENSE)
"""
The demo world and its physics tick.

The Scene holds:
- The ball and the fixed ramp.
- The floor (the bottom edge of the grid).
- The configuration (grid size, gravity, timestep, damping).

Each step():
    1. Integrates the ball under gravity (explicit Euler).
    2. Resolves the floor collision.
    3. Resolves the ramp collision.

Once the ball leaves past the right edge, is_ball_out() turns true and the
caller decides when to respawn() it (the loop waits respawn_delay first).
"""
from __future__ import annotations
from dataclasses import dataclass, field
import logging

import numpy as np

from .collision.response import collide_floor, collide_ramp
from .config import SimConfig
from .core.integrators import euler_step
from .types import Ball, LineSegment
from .util import f64

logger = logging.getLogger(__name__)


def default_ramp(config: SimConfig) -> LineSegment:
    """
    The classic ramp: from just left of the screen, a little below the
    ball's spawn point, down to the middle of the floor.
    """
    radius = config.height / 4
    return LineSegment((-radius, radius + 2), (config.width / 2, config.height))


@dataclass
class Scene:
    """
    Ball-and-ramp simulation state.

    Attributes:
        config: Simulation parameters.
        ball: The moving ball. Defaults to radius height/4, resting at the
              top-left corner.
        ramp: The static ramp. Defaults to default_ramp(config).
        time: Simulated time in seconds.
        frame: Number of completed steps.
        respawns: Number of times the ball has been re-released.
    """
    config: SimConfig = field(default_factory=SimConfig)
    ball: Ball | None = None
    ramp: LineSegment | None = None
    time: float = 0.0
    frame: int = 0
    respawns: int = 0

    def __post_init__(self) -> None:
        """Fill in the default ball and ramp."""
        self._g = f64(self.config.gravity)
        if self.ball is None:
            radius = self.config.height / 4
            self.ball = Ball(center=(radius, 0.0), radius=radius)
        if self.ramp is None:
            self.ramp = default_ramp(self.config)
        self._spawn = self.ball.center.copy()
        logger.debug("ramp slope: %s", self.ramp.slope)

    @property
    def floor_y(self) -> float:
        return float(self.config.height)

    @property
    def shapes(self) -> list:
        """Everything to draw this frame, back to front."""
        return [self.ball, self.ramp]

    def step(self) -> None:
        """Advance the simulation by one fixed timestep."""
        cfg = self.config
        euler_step(self.ball, self._g, cfg.dt)
        collide_floor(self.ball, self.floor_y, cfg.damping)
        collide_ramp(self.ball, self.ramp, cfg.damping, clip=cfg.clip_ramp)
        self.time += cfg.dt
        self.frame += 1

    def is_ball_out(self) -> bool:
        """True once the ball has fully left past the right edge."""
        limit = self.config.width + self.ball.radius + self.config.respawn_margin
        return bool(self.ball.center[0] > limit)

    def respawn(self) -> None:
        """Put the ball back at its spawn point, at rest."""
        self.ball.reset(self._spawn)
        self.respawns += 1
        logger.debug("ball respawned (#%d) at t=%.3f", self.respawns, self.time)
