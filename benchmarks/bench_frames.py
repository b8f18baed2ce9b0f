"""
Microbenchmark: time per frame for physics and for rendering.
Run:
  python benchmarks/bench_frames.py
"""
import io
import time

from ramp_ball.config import SimConfig
from ramp_ball.renderer import NullRenderer, TerminalRenderer
from ramp_ball.scene import Scene


def run(config: SimConfig, renderer_factory, frames: int = 2000):
    scene = Scene(config=config)
    renderer = renderer_factory(config)

    # warmup
    for _ in range(30):
        renderer.render_scene(scene)
        scene.step()

    t0 = time.perf_counter()
    for _ in range(frames):
        renderer.render_scene(scene)
        scene.step()
        if scene.is_ball_out():
            scene.respawn()
    t1 = time.perf_counter()
    return (t1 - t0) / frames


if __name__ == "__main__":
    for width, height in [(80, 22), (160, 48), (320, 96)]:
        cfg = SimConfig(width=width, height=height)
        physics = run(cfg, lambda c: NullRenderer())
        full = run(cfg, lambda c: TerminalRenderer.from_config(c, output=io.StringIO()))
        print(f"{width:4d}x{height:<3d}  physics={1e6*physics:8.1f} us  "
              f"physics+render={1e6*full:8.1f} us  frames/s={1/full:8.1f}")
