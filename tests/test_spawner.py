import math
from collections import deque

import pytest

from flappy_remix.game.settings import PatternConfig, PipeConfig
from flappy_remix.game.spawner import Spawner, build_pattern


def test_classic_keeps_baseline():
    assert build_pattern("Classic", 12.3, 200.0, 70, 380) == 200.0


def test_unknown_pattern_falls_back_to_classic():
    assert build_pattern("Zigzag", 12.3, 200.0, 70, 380) == 200.0


def test_wave_follows_sine():
    t = 1.0
    expected = 200.0 + math.sin(t * 0.9) * 70
    assert build_pattern("Wave", t, 200.0, 70, 380) == pytest.approx(expected)


def test_wave_is_clamped():
    # sin(0.9 * t) == 1 at t = pi / 1.8
    t = math.pi / 1.8
    assert build_pattern("Wave", t, 370.0, 70, 380) == 380
    assert build_pattern("Wave", -t, 75.0, 70, 380) == 70


def test_stairs_steps_around_baseline():
    # step = floor(t * 0.8 % 6), offset = (step - 2.5) * 28
    assert build_pattern("Stairs", 0.0, 200.0, 70, 380) == pytest.approx(200.0 - 70.0)
    assert build_pattern("Stairs", 2.5, 200.0, 70, 380) == pytest.approx(200.0 - 14.0)
    assert build_pattern("Stairs", 6.5, 200.0, 70, 380) == pytest.approx(200.0 + 70.0)
    # wraps after 6 steps
    assert build_pattern("Stairs", 8.0, 200.0, 70, 380) == pytest.approx(200.0 - 70.0)


def test_stairs_respects_custom_config():
    cfg = PatternConfig(stairs_step_rate=1.0, stairs_steps=2, stairs_step_h=10.0)
    assert build_pattern("Stairs", 0.0, 200.0, 70, 380, cfg) == pytest.approx(195.0)
    assert build_pattern("Stairs", 1.0, 200.0, 70, 380, cfg) == pytest.approx(205.0)


def test_spawn_appends_with_fixed_geometry(rng):
    rng.value = 0.5
    pipes = deque()
    sp = Spawner(rng=rng)
    pipe = sp.spawn(pipes, x=400, gap=150.0, w=62.0, mode="Classic", time_alive=0.0)

    assert list(pipes) == [pipe]
    assert pipe.x == 400
    assert pipe.top_h == pytest.approx(70 + 0.5 * 310)
    assert pipe.gap == 150.0
    assert pipe.w == 62.0
    assert pipe.bottom_y == pytest.approx(pipe.top_h + 150.0)
    assert not pipe.passed


def test_spawn_keeps_order(rng):
    pipes = deque()
    sp = Spawner(rng=rng)
    for x in (100, 200, 300):
        sp.spawn(pipes, x=x, gap=165.0, w=62.0, mode="Classic", time_alive=0.0)
    assert [p.x for p in pipes] == [100, 200, 300]


def test_update_spawns_on_interval_and_resets_timer(rng):
    pipes = deque()
    sp = Spawner(PipeConfig(spawn_every=0.1), rng=rng)

    assert sp.update(0.05, pipes, x=400, gap=165.0, mode="Classic", time_alive=0.0) is None
    assert len(pipes) == 0
    assert sp.update(0.05, pipes, x=400, gap=165.0, mode="Classic", time_alive=0.0) is not None
    assert len(pipes) == 1
    assert sp.timer == 0.0
