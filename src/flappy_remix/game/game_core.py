import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from .entities import Bird
from .feedback import Feedback
from .missions import Mission, MissionSelector, mission_result_text
from .physics import DeathCause, Physics, RunState, StepResult
from .settings import GameConfig, Settings
from .spawner import Spawner
from .storage import MemoryStorage, PersistentStats
from ..main import config
from ..ui.input import InputState
from ..ui.state import AppState, Effect, Event, transition

logger = logging.getLogger(__name__)

HINTS = (
    "“One more run.”",
    "“Clean lines win.”",
    "“You were close.”",
    "“Breathe. Tap.”",
)

_CAUSE_SUFFIX = {
    DeathCause.PIPE: "(Clipped a pipe)",
    DeathCause.GROUND: "(Too low)",
    DeathCause.CEILING: "(Too high)",
}


@dataclass(frozen=True)
class RunSummary:
    score: int
    best: int
    coins: int
    perfect_passes: int
    time_alive: float
    cause: DeathCause
    practice: bool
    mission_text: str
    hint: str


class Game:
    def __init__(self, storage=None, sink=None, rng: Optional[random.Random] = None,
                 cfg: Optional[GameConfig] = None):
        self.cfg = cfg or GameConfig()
        self.rng = rng or random.Random()
        self.storage = storage if storage is not None else MemoryStorage()
        self.feedback = Feedback(sink)

        self.state = AppState.HOME
        self.bird = Bird(self.cfg.bird.x, self.cfg.bird.r, self.cfg.bird.start_y)
        self.run = RunState()

        self.spawner = Spawner(self.cfg.pipes, self.cfg.patterns, self.rng)
        self.physics = Physics(self.cfg, self.spawner)
        self.missions = MissionSelector(self.storage, self.rng)
        self.daily_missions: List[Mission] = []

        self.best = self.storage.get_stats().best
        self.paused_by_focus = False
        self.last_result: Optional[RunSummary] = None
        self._cause: Optional[DeathCause] = None
        self.feedback.music(self.settings)

    # -------- read side --------
    @property
    def settings(self) -> Settings:
        return self.storage.get_settings()

    @property
    def pipes(self):
        return self.run.pipes

    @property
    def score(self) -> int:
        return self.run.score

    @property
    def mission(self) -> Optional[Mission]:
        return self.run.mission

    def stats(self) -> PersistentStats:
        return self.storage.get_stats()

    # -------- state machine --------
    def _dispatch(self, event: Event) -> bool:
        t = transition(self.state, event)
        if t.state is self.state and not t.effects:
            return False
        prev, self.state = self.state, t.state
        for effect in t.effects:
            self._apply(effect)
        logger.debug("%s --%s--> %s", prev.name, event.name, self.state.name)
        return True

    def _apply(self, effect: Effect):
        if effect is Effect.RESET_RUN:
            self._reset_run()
        elif effect is Effect.CLEAR_PAUSE:
            self.paused_by_focus = False
        elif effect is Effect.MARK_FOCUS_PAUSE:
            self.paused_by_focus = True
        elif effect is Effect.FINALIZE_RUN:
            self._finalize_run()
        elif effect is Effect.SHOW_HOME:
            self.best = self.storage.get_stats().best

    # -------- driver API --------
    def start_run(self, practice: bool = False, instant: bool = False):
        self.feedback.ui(self.settings)
        self.run.practice = bool(practice)
        self._dispatch(Event.START_INSTANT if instant else Event.START)

    def handle_flap(self):
        if self.state is AppState.HOME:
            self.start_run(practice=False, instant=False)
        elif self.state is AppState.READY:
            self._dispatch(Event.FLAP)
        elif self.state is AppState.PLAYING:
            self.flap()
        elif self.state is AppState.RESULT:
            self._dispatch(Event.RETRY)

    def flap(self):
        if self.state is not AppState.PLAYING:
            return
        self.bird.vy = self.cfg.bird.jump_v
        self.feedback.flap(self.settings)

    def pause(self) -> bool:
        changed = self._dispatch(Event.PAUSE)
        if changed:
            self.feedback.ui(self.settings)
            logger.info("Paused at score %d", self.run.score)
        return changed

    def focus_lost(self) -> bool:
        changed = self._dispatch(Event.FOCUS_LOST)
        if changed:
            logger.info("Paused (focus lost) at score %d", self.run.score)
        return changed

    def focus_gained(self):
        # stay paused until the player resumes explicitly
        self.paused_by_focus = False

    def resume(self) -> bool:
        changed = self._dispatch(Event.RESUME)
        if changed:
            self.feedback.ui(self.settings)
            logger.info("Resumed")
        return changed

    def restart(self):
        if self.state is AppState.HOME:
            return
        self.start_run(practice=self.run.practice, instant=True)

    def quit_to_home(self):
        self.feedback.ui(self.settings)
        self._dispatch(Event.QUIT)

    def update_settings(self, **partial):
        before = self.settings
        self.storage.set_settings(**partial)
        after = self.settings
        if after.music != before.music:
            self.feedback.music(after)

    def reset_all_data(self):
        self.storage.reset_all()
        self.best = 0
        self.daily_missions = []
        self.feedback.music(self.settings)

    # -------- simulation --------
    def tick(self, dt, input_state: Optional[InputState] = None) -> Optional[StepResult]:
        if self.state is not AppState.PLAYING or not self.bird.alive:
            return None

        settings = self.settings
        result = self.physics.step(self.run, self.bird, dt, settings, input_state)

        for ev in result.passes:
            self.feedback.passed(settings, ev.perfect)

        if result.death is not None:
            self._die(result.death)
        return result

    def _reset_run(self):
        run = self.run
        run.clear()
        self.spawner.reset()
        self.bird.reset(self.cfg.bird.start_y)
        self._cause = None
        self.last_result = None

        run.mode = self.rng.choice(config.PATTERNS)
        run.theme = self.rng.choice(config.THEMES)
        self.physics.spawn_first(run, self.settings)

        run.mission = self.missions.pick_active()
        self.daily_missions = self.missions.daily()

        logger.info("Run started: mode=%s theme=%s mission=%s practice=%s",
                    run.mode, run.theme, run.mission.id, run.practice)

    def _die(self, cause: DeathCause):
        if self.state is not AppState.PLAYING:
            return
        self.bird.alive = False
        self._cause = cause
        self.feedback.died(self.settings)
        self._dispatch(Event.DIE)

    def coins_for(self, score: int, perfect_passes: int, practice: bool) -> int:
        if practice:
            return 0
        c = self.cfg.coins
        return c.base_per_run + score * c.per_score + perfect_passes * c.perfect_bonus

    def _finalize_run(self):
        run = self.run
        bird = self.bird
        run.coins = self.coins_for(run.score, bird.perfect_passes, run.practice)

        stats = self.storage.get_stats()
        if not run.practice:
            stats.runs += 1
            stats.total_score += run.score
            stats.coins += run.coins
            stats.best = max(stats.best, run.score)
            stats.best_streak = max(stats.best_streak, run.score)
            self.storage.set_stats(stats)
        self.best = stats.best

        self.last_result = RunSummary(
            score=run.score,
            best=stats.best,
            coins=run.coins,
            perfect_passes=bird.perfect_passes,
            time_alive=run.time_alive,
            cause=self._cause,
            practice=run.practice,
            mission_text=mission_result_text(run.mission, run.score, bird.perfect_passes, run.time_alive),
            hint=self._hint_text(self._cause),
        )
        logger.info("Run over (%s): score=%d perfect=%d coins=%d",
                    self._cause.value if self._cause else "?", run.score, bird.perfect_passes, run.coins)

    def _hint_text(self, cause: Optional[DeathCause]) -> str:
        pick = self.rng.choice(HINTS)
        if self.run.practice:
            return f"{pick} (Practice)"
        suffix = _CAUSE_SUFFIX.get(cause)
        return f"{pick} {suffix}" if suffix else pick
