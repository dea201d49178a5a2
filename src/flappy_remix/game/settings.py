# src/flappy_remix/game/settings.py
#
# Tunables as dataclasses (defaults come from main/config.py) plus the
# player-facing settings snapshot and the difficulty table lookup.

from dataclasses import dataclass, field, fields
from typing import Any, Mapping, Optional

from ..main import config


# =========================
# Tunables
# =========================
@dataclass
class BirdConfig:
    x: float = config.BIRD_X
    r: float = config.BIRD_R
    hitbox_pad: float = config.HITBOX_PAD
    min_collision_r: float = config.MIN_COLLISION_R
    gravity: float = config.GRAVITY
    jump_v: float = config.JUMP_V
    max_fall: float = config.MAX_FALL
    max_rise: float = config.MAX_RISE
    tilt_up: float = config.TILT_UP
    tilt_down: float = config.TILT_DOWN
    tilt_smoothing: float = config.TILT_SMOOTHING
    start_y: float = config.START_Y

    @property
    def collision_r(self) -> float:
        return max(self.min_collision_r, self.r - self.hitbox_pad)


@dataclass
class PipeConfig:
    gap: float = config.PIPE_GAP
    w: float = config.PIPE_W
    min_top: float = config.MIN_TOP
    max_top: float = config.MAX_TOP
    spawn_every: float = config.SPAWN_EVERY
    speed: float = config.PIPE_SPEED
    first_offset: float = config.FIRST_PIPE_OFFSET
    spawn_offset: float = config.SPAWN_OFFSET
    cull_margin: float = config.CULL_MARGIN
    perfect_dist: float = config.PERFECT_DIST


@dataclass
class PatternConfig:
    wave_amplitude: float = config.WAVE_AMPLITUDE
    wave_frequency: float = config.WAVE_FREQUENCY
    stairs_step_rate: float = config.STAIRS_STEP_RATE
    stairs_steps: int = config.STAIRS_STEPS
    stairs_step_h: float = config.STAIRS_STEP_H


@dataclass
class CoinConfig:
    base_per_run: int = config.COINS_BASE_PER_RUN
    per_score: int = config.COINS_PER_SCORE
    perfect_bonus: int = config.COINS_PERFECT_BONUS


@dataclass
class WorldConfig:
    width: float = config.WORLD_WIDTH
    height: float = config.WORLD_HEIGHT
    ground_h: float = config.GROUND_H
    max_dt: float = config.MAX_DT
    nominal_dt: float = config.NOMINAL_DT
    hold_terminal_v: float = config.HOLD_TERMINAL_V

    @property
    def ground_y(self) -> float:
        return self.height - self.ground_h


@dataclass
class GameConfig:
    world: WorldConfig = field(default_factory=WorldConfig)
    bird: BirdConfig = field(default_factory=BirdConfig)
    pipes: PipeConfig = field(default_factory=PipeConfig)
    patterns: PatternConfig = field(default_factory=PatternConfig)
    coins: CoinConfig = field(default_factory=CoinConfig)


# =========================
# Difficulty
# =========================
@dataclass(frozen=True)
class DifficultyProfile:
    gap_mul: float
    speed_mul: float
    ramp: float


def difficulty_profile(name: Optional[str]) -> DifficultyProfile:
    """Unknown names fall back to the default difficulty."""
    values = config.DIFFICULTY.get(name) if isinstance(name, str) else None
    values = values or config.DIFFICULTY[config.DEFAULT_DIFFICULTY]
    return DifficultyProfile(*values)


# =========================
# Player settings
# =========================
INPUT_MODES = ("tap", "hold")


@dataclass(frozen=True)
class Settings:
    sound: bool = True
    music: bool = True
    vibration: bool = True
    reduced_motion: bool = False
    high_contrast: bool = False
    input_mode: str = "tap"
    difficulty: str = config.DEFAULT_DIFFICULTY

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "Settings":
        """
        Build a snapshot from a stored dict.
        Unknown keys are ignored, unknown enum values fall back to defaults.
        """
        if not data:
            return cls()
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in known}

        mode = kwargs.get("input_mode")
        if not isinstance(mode, str) or mode not in INPUT_MODES:
            kwargs.pop("input_mode", None)
        name = kwargs.get("difficulty")
        if not isinstance(name, str) or name not in config.DIFFICULTY:
            kwargs.pop("difficulty", None)
        for k in ("sound", "music", "vibration", "reduced_motion", "high_contrast"):
            if k in kwargs:
                kwargs[k] = bool(kwargs[k])
        return cls(**kwargs)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @property
    def hold_mode(self) -> bool:
        return self.input_mode == "hold"
