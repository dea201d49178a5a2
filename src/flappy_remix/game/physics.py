# src/flappy_remix/game/physics.py
#
# One simulation tick: bird integration, bounds, pipe scroll/spawn/cull,
# collision and pass detection.
# Knows nothing about the state machine; the controller only calls step()
# while playing and reacts to the returned StepResult.

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, List, Optional

from .collision import circle_rect_overlap, clamp
from .entities import Bird, PipePair
from .settings import GameConfig, Settings, difficulty_profile
from .spawner import Spawner
from ..ui.input import InputState


class DeathCause(Enum):
    GROUND = "ground"
    CEILING = "ceiling"
    PIPE = "pipe"


@dataclass
class PassEvent:
    pipe: PipePair
    perfect: bool


@dataclass
class StepResult:
    dt: float
    death: Optional[DeathCause] = None
    passes: List[PassEvent] = field(default_factory=list)


@dataclass
class RunState:
    time_alive: float = 0.0
    score: int = 0
    coins: int = 0
    pipes: Deque[PipePair] = field(default_factory=deque)
    mode: str = "Classic"
    theme: str = "Day"
    practice: bool = False
    mission: Optional[object] = None

    def clear(self):
        self.time_alive = 0.0
        self.score = 0
        self.coins = 0
        self.pipes.clear()


def sanitize_dt(dt, max_dt, nominal_dt) -> float:
    """Frame hitches and bogus deltas are replaced by the nominal step."""
    try:
        dt = float(dt)
    except (TypeError, ValueError):
        return nominal_dt
    # NaN fails both comparisons
    if not (0.0 < dt <= max_dt):
        return nominal_dt
    return dt


class Physics:
    def __init__(self, cfg: GameConfig, spawner: Spawner):
        self.cfg = cfg
        self.spawner = spawner

    def gap_now(self, settings: Settings) -> float:
        return self.cfg.pipes.gap * difficulty_profile(settings.difficulty).gap_mul

    def speed_now(self, settings: Settings, time_alive: float) -> float:
        d = difficulty_profile(settings.difficulty)
        # gentle ramp: harder the longer you survive
        ramp = 1.0 + time_alive * d.ramp
        return self.cfg.pipes.speed * d.speed_mul * ramp

    def spawn_first(self, run: RunState, settings: Settings) -> PipePair:
        return self.spawner.spawn(
            run.pipes,
            x=self.cfg.world.width + self.cfg.pipes.first_offset,
            gap=self.gap_now(settings),
            w=self.cfg.pipes.w,
            mode=run.mode,
            time_alive=run.time_alive,
        )

    def step(self, run: RunState, bird: Bird, dt, settings: Settings,
             input_state: Optional[InputState] = None) -> StepResult:
        world = self.cfg.world
        bcfg = self.cfg.bird
        dt = sanitize_dt(dt, world.max_dt, world.nominal_dt)
        result = StepResult(dt=dt)

        run.time_alive += dt

        # hold mode: gently counter gravity while the flap control is held
        if settings.hold_mode and input_state is not None and input_state.flap_held:
            bird.vy = min(bird.vy, world.hold_terminal_v)

        bird.vy += bcfg.gravity * dt
        bird.vy = clamp(bird.vy, bcfg.max_rise, bcfg.max_fall)
        bird.y += bird.vy * dt

        if not settings.reduced_motion:
            target = bcfg.tilt_up if bird.vy < 0 else bcfg.tilt_down
            bird.tilt += (target - bird.tilt) * bcfg.tilt_smoothing
        else:
            bird.tilt = 0.0

        ground_y = world.ground_y
        if bird.y + bird.r >= ground_y:
            bird.y = ground_y - bird.r
            result.death = DeathCause.GROUND
            return result
        if bird.y - bird.r <= 0:
            bird.y = bird.r
            result.death = DeathCause.CEILING
            return result

        pipes = run.pipes
        speed = self.speed_now(settings, run.time_alive)
        for p in pipes:
            p.x -= speed * dt

        self.spawner.update(
            dt,
            pipes,
            x=world.width + self.cfg.pipes.spawn_offset,
            gap=self.gap_now(settings),
            mode=run.mode,
            time_alive=run.time_alive,
        )

        while pipes and pipes[0].is_offscreen(self.cfg.pipes.cull_margin):
            pipes.popleft()

        cr = bcfg.collision_r
        for p in pipes:
            # passed pipes stay solid until culled
            hit_top = circle_rect_overlap(p.x, 0.0, p.w, p.top_h, bird.x, bird.y, cr)
            by = p.bottom_y
            hit_bot = circle_rect_overlap(p.x, by, p.w, max(0.0, ground_y - by), bird.x, bird.y, cr)
            if hit_top or hit_bot:
                result.death = DeathCause.PIPE
                return result

            if not p.passed and p.right < bird.x - bird.r:
                p.passed = True
                run.score += 1
                perfect = abs(bird.y - p.gap_mid) <= self.cfg.pipes.perfect_dist
                bird.last_pass_perfect = perfect
                if perfect:
                    bird.perfect_passes += 1
                result.passes.append(PassEvent(p, perfect))

        return result
