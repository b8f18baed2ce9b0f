# MIT License (see LICENSE)
"""
The main animation loop.

Each iteration renders the current state, advances the physics one tick,
waits for the next frame and, if the ball has left the screen, waits
respawn_delay more and releases a new ball.

Time is injected: pass a fake sleep to run the loop instantly and
deterministically in tests.
"""
from __future__ import annotations
from contextlib import nullcontext
import logging
import time
from typing import Callable

from .renderer.adapter import RendererAdapter, TerminalRenderer
from .renderer.terminal import hidden_cursor
from .scene import Scene

logger = logging.getLogger(__name__)


def run(
    scene: Scene,
    renderer: RendererAdapter,
    frames: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Animate the scene.

    When drawing to a terminal the cursor is hidden for the duration of the
    run and shown again however the loop ends. Errors writing the output are
    not caught.

    Args:
        scene: Scene to simulate (modified in-place).
        renderer: Where frames go.
        frames: Stop after this many frames; None runs until interrupted.
        sleep: Blocking wait, called with a duration in seconds.

    Returns:
        Number of frames rendered.
    """
    cfg = scene.config
    frame_interval = 1.0 / cfg.fps
    guard = hidden_cursor(renderer.output) if isinstance(renderer, TerminalRenderer) else nullcontext()

    count = 0
    logger.info("starting loop: %dx%d @ %d fps", cfg.width, cfg.height, cfg.fps)
    with guard:
        while frames is None or count < frames:
            renderer.render_scene(scene)
            count += 1

            scene.step()
            sleep(frame_interval)

            if scene.is_ball_out():
                sleep(cfg.respawn_delay)
                scene.respawn()
    logger.info("loop finished after %d frames", count)
    return count
