# MIT License (see LICENSE)
"""
Command line entry point.

Run:
    python -m ramp_ball
    python -m ramp_ball --width 60 --height 16 --fps 20 --frames 300
"""
from __future__ import annotations
import argparse
import logging
import sys
import time
from typing import Callable, Sequence, TextIO

from .config import SimConfig
from .loop import run
from .renderer.adapter import NullRenderer, TerminalRenderer
from .scene import Scene

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ramp-ball",
        description="A ball bouncing down a ramp, drawn in the terminal.",
    )
    parser.add_argument("--width", type=int, default=None, help="grid width in pixels (default 80)")
    parser.add_argument("--height", type=int, default=None, help="grid height in pixels, even (default 22)")
    parser.add_argument("--fps", type=int, default=None, help="frames per second (default 30)")
    parser.add_argument("--gravity", type=float, default=None, help="downward acceleration in cells/s² (default 120)")
    parser.add_argument("--frames", type=int, default=None, help="stop after N frames (default: run until Ctrl-C)")
    parser.add_argument("--clip-ramp", action="store_true", default=None,
                        help="only collide with the ramp inside its horizontal span")
    parser.add_argument("--headless", action="store_true", help="simulate without drawing")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="stderr log level")
    return parser


def main(
    argv: Sequence[str] | None = None,
    output: TextIO | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = SimConfig.from_env().with_overrides(
            width=args.width,
            height=args.height,
            fps=args.fps,
            gravity=None if args.gravity is None else (0.0, args.gravity),
            clip_ramp=args.clip_ramp,
        )
    except ValueError as exc:
        parser.error(str(exc))
    if args.frames is not None and args.frames < 0:
        parser.error("--frames must be >= 0")

    scene = Scene(config=config)
    if args.headless:
        renderer = NullRenderer()
    else:
        renderer = TerminalRenderer.from_config(config, output=output or sys.stdout)

    try:
        run(scene, renderer, frames=args.frames, sleep=sleep)
    except KeyboardInterrupt:
        logger.info("interrupted at frame %d", scene.frame)

    if isinstance(renderer, TerminalRenderer):
        # Leave the prompt below the last frame instead of on top of it.
        renderer.output.write("\n" * (config.height // 2))
        renderer.output.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
