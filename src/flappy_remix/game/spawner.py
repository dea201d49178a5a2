import math
import random

from .collision import clamp, range_random
from .entities import PipePair
from .settings import PatternConfig, PipeConfig


def build_pattern(mode, t, base_top, min_top, max_top, cfg=None):
    """Shape a gate height according to the run's generation pattern."""
    cfg = cfg or PatternConfig()

    if mode == "Wave":
        wave = math.sin(t * cfg.wave_frequency) * cfg.wave_amplitude
        return clamp(base_top + wave, min_top, max_top)

    if mode == "Stairs":
        step = math.floor((t * cfg.stairs_step_rate) % cfg.stairs_steps)
        stair = (step - (cfg.stairs_steps - 1) / 2) * cfg.stairs_step_h
        return clamp(base_top + stair, min_top, max_top)

    # Classic and anything unknown
    return base_top


class Spawner:
    def __init__(self, pipes_cfg: PipeConfig = None, pattern_cfg: PatternConfig = None, rng=None):
        self.cfg = pipes_cfg or PipeConfig()
        self.pattern_cfg = pattern_cfg or PatternConfig()
        self.rng = rng or random.Random()
        self.timer = 0.0

    def reset(self):
        self.timer = 0.0

    def spawn(self, pipes, x, gap, w, mode, time_alive):
        """Append one gate to pipes. gap and w stay fixed for its lifetime."""
        base = range_random(self.cfg.min_top, self.cfg.max_top, self.rng)
        top_h = build_pattern(mode, time_alive, base, self.cfg.min_top, self.cfg.max_top, self.pattern_cfg)
        pipe = PipePair(x, top_h, gap, w)
        pipes.append(pipe)
        return pipe

    def update(self, dt, pipes, x, gap, mode, time_alive):
        self.timer += dt
        if self.timer >= self.cfg.spawn_every:
            self.timer = 0.0
            return self.spawn(pipes, x, gap, self.cfg.w, mode, time_alive)
        return None
