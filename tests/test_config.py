import io
import logging

import pytest
from ramp_ball.__main__ import main
from ramp_ball.config import SimConfig
from ramp_ball.constants import HIDE_CURSOR, SHOW_CURSOR
from ramp_ball.materials import Damping
from ramp_ball.scene import Scene


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("WIDTH", "HEIGHT", "FPS", "GRAVITY", "CLIP_RAMP"):
        monkeypatch.delenv(f"RAMP_BALL_{name}", raising=False)


def test_defaults():
    cfg = SimConfig()
    assert (cfg.width, cfg.height, cfg.fps) == (80, 22, 30)
    assert cfg.gravity == (0.0, 120.0)
    assert cfg.dt == pytest.approx(1 / 30)
    assert cfg.damping == Damping(-0.8, 0.98, 0.5, 0.99)
    assert cfg.glyphs == " _^S"
    assert cfg.clip_ramp is False


@pytest.mark.parametrize("changes", [
    {"height": 21},
    {"height": 0},
    {"width": 0},
    {"fps": 0},
    {"glyphs": "ab"},
    {"band_width": -1},
    {"respawn_delay": -0.1},
])
def test_invalid_config_rejected(changes):
    with pytest.raises(ValueError):
        SimConfig(**changes)


def test_with_overrides_skips_none():
    cfg = SimConfig().with_overrides(width=60, height=None, fps=None)
    assert cfg.width == 60
    assert cfg.height == 22


def test_from_env_mapping():
    cfg = SimConfig.from_env({
        "RAMP_BALL_WIDTH": "60",
        "RAMP_BALL_HEIGHT": "16",
        "RAMP_BALL_FPS": "20",
        "RAMP_BALL_GRAVITY": "90.5",
        "RAMP_BALL_CLIP_RAMP": "1",
    })
    assert (cfg.width, cfg.height, cfg.fps) == (60, 16, 20)
    assert cfg.gravity == (0.0, 90.5)
    assert cfg.clip_ramp is True


def test_from_env_process(monkeypatch):
    monkeypatch.setenv("RAMP_BALL_HEIGHT", "30")
    cfg = SimConfig.from_env()
    assert cfg.height == 30
    assert cfg.width == 80


def test_scene_geometry_follows_config():
    """Ball radius is height/4; the ramp runs from (-r, r+2) to (width/2, height)."""
    scene = Scene(config=SimConfig(width=60, height=16))
    assert scene.ball.radius == 4.0
    assert scene.ramp.start == pytest.approx([-4.0, 6.0])
    assert scene.ramp.end == pytest.approx([30.0, 16.0])
    assert scene.floor_y == 16.0


def test_cli_renders_frames():
    out = io.StringIO()
    waits = []
    argv = ["--frames", "2", "--width", "40", "--height", "10"]
    assert main(argv, output=out, sleep=waits.append) == 0
    text = out.getvalue()
    assert text.startswith(HIDE_CURSOR)
    assert "\x1b[40D\x1b[5A" in text
    assert SHOW_CURSOR in text
    assert text.endswith("\n" * 5)
    assert waits == pytest.approx([1 / 30] * 2)


def test_cli_headless_writes_nothing():
    out = io.StringIO()
    waits = []
    assert main(["--frames", "3", "--headless"], output=out, sleep=waits.append) == 0
    assert out.getvalue() == ""
    assert len(waits) == 3


def test_cli_ctrl_c_exits_cleanly(caplog):
    """Ctrl-C during the frame wait stops the demo with exit code 0."""
    def interrupt(seconds):
        raise KeyboardInterrupt

    out = io.StringIO()
    with caplog.at_level(logging.INFO, logger="ramp_ball.__main__"):
        assert main(["--height", "10"], output=out, sleep=interrupt) == 0
    assert out.getvalue().endswith(SHOW_CURSOR + "\n" * 5)
    records = [r for r in caplog.records if r.name == "ramp_ball.__main__"]
    assert [r.getMessage() for r in records] == ["interrupted at frame 1"]


@pytest.mark.parametrize("argv", [
    ["--height", "21"],
    ["--fps", "0"],
    ["--frames", "-1"],
    ["--log-level", "LOUD"],
])
def test_cli_rejects_bad_arguments(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv, output=io.StringIO())
    assert exc.value.code == 2
