# MIT License (see LICENSE)
"""
Simulation configuration.

SimConfig gathers every tunable of the demo. Defaults reproduce the classic
80x22 scene; environment variables (RAMP_BALL_*) can override the most
common ones, and the command line overrides those in turn.
"""
from __future__ import annotations
from dataclasses import dataclass, field, replace
import os
from typing import Mapping

from . import constants
from .materials import Damping
from .util import env_flag


@dataclass(frozen=True)
class SimConfig:
    """
    Tunables for grid, physics and pacing.

    Attributes:
        width: Grid width in pixels.
        height: Grid height in pixels. Must be even (two rows per text line).
        fps: Frames per second; also fixes the physics timestep dt = 1/fps.
        gravity: Acceleration [gx, gy] in cells/s² (y grows downward).
        damping: Collision damping coefficients.
        respawn_delay: Seconds to wait before re-releasing the ball.
        respawn_margin: Cells past the right edge (beyond the radius) at
                        which the ball counts as gone.
        band_width: Rows painted beneath the ramp line.
        glyphs: Four glyphs indexed by top * 2 + bottom.
        clip_ramp: Only collide with the ramp within its horizontal span.
    """
    width: int = constants.WIDTH
    height: int = constants.HEIGHT
    fps: int = constants.FPS
    gravity: tuple[float, float] = constants.GRAVITY
    damping: Damping = field(default_factory=Damping)
    respawn_delay: float = constants.RESPAWN_DELAY
    respawn_margin: float = constants.RESPAWN_MARGIN
    band_width: int = constants.LINE_BAND_WIDTH
    glyphs: str = constants.GLYPH_TABLE
    clip_ramp: bool = False

    def __post_init__(self) -> None:
        self.validate()

    @property
    def dt(self) -> float:
        """Fixed physics timestep in seconds."""
        return 1.0 / self.fps

    def validate(self) -> None:
        """Raise ValueError if the configuration cannot be rendered."""
        if self.width < 1:
            raise ValueError(f"width must be positive, got {self.width}")
        if self.height < 2 or self.height % 2:
            raise ValueError(f"height must be a positive even number, got {self.height}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if len(self.glyphs) != 4:
            raise ValueError(f"glyph table needs exactly 4 glyphs, got {self.glyphs!r}")
        if self.band_width < 0:
            raise ValueError(f"band_width must be >= 0, got {self.band_width}")
        if self.respawn_delay < 0:
            raise ValueError(f"respawn_delay must be >= 0, got {self.respawn_delay}")

    def with_overrides(self, **changes) -> "SimConfig":
        """Return a copy with the non-None entries of changes applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SimConfig":
        """
        Build a config from RAMP_BALL_* environment variables.

        Recognised: RAMP_BALL_WIDTH, RAMP_BALL_HEIGHT, RAMP_BALL_FPS,
        RAMP_BALL_GRAVITY (vertical component only) and RAMP_BALL_CLIP_RAMP
        ("1" to enable). Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        changes: dict = {}
        if "RAMP_BALL_WIDTH" in env:
            changes["width"] = int(env["RAMP_BALL_WIDTH"])
        if "RAMP_BALL_HEIGHT" in env:
            changes["height"] = int(env["RAMP_BALL_HEIGHT"])
        if "RAMP_BALL_FPS" in env:
            changes["fps"] = int(env["RAMP_BALL_FPS"])
        if "RAMP_BALL_GRAVITY" in env:
            changes["gravity"] = (0.0, float(env["RAMP_BALL_GRAVITY"]))
        changes["clip_ramp"] = env_flag("RAMP_BALL_CLIP_RAMP", environ=env)
        return cls(**changes)
