# src/flappy_remix/game/missions.py
#
# Daily missions: two objectives per local calendar day, drawn from a fixed pool.

import logging
import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

logger = logging.getLogger(__name__)

DAILY_COUNT = 2


class MissionKind(Enum):
    SCORE = "score"
    PERFECT = "perfect"
    TIME = "time"


@dataclass(frozen=True)
class Mission:
    id: str
    name: str
    kind: MissionKind
    target: int

    def progress(self, score: int, perfect_passes: int, time_alive: float) -> float:
        if self.kind is MissionKind.SCORE:
            return score
        if self.kind is MissionKind.PERFECT:
            return perfect_passes
        return time_alive

    def completed(self, score: int, perfect_passes: int, time_alive: float) -> bool:
        return self.progress(score, perfect_passes, time_alive) >= self.target


POOL = (
    Mission("score10", "Score 10+", MissionKind.SCORE, 10),
    Mission("score20", "Score 20+", MissionKind.SCORE, 20),
    Mission("perfect3", "3 Perfect Passes", MissionKind.PERFECT, 3),
    Mission("survive30", "Survive 30s", MissionKind.TIME, 30),
)
_BY_ID = {m.id: m for m in POOL}


def mission_result_text(mission: Optional[Mission], score: int, perfect_passes: int, time_alive: float) -> str:
    if mission is None:
        return "—"
    if mission.completed(score, perfect_passes, time_alive):
        return "Completed"
    if mission.kind is MissionKind.TIME:
        return f"Progress: {math.floor(time_alive)}/{mission.target}s"
    return f"Progress: {int(mission.progress(score, perfect_passes, time_alive))}/{mission.target}"


class MissionSelector:
    def __init__(self, storage, rng: Optional[random.Random] = None, pool=POOL):
        self.storage = storage
        self.rng = rng or random.Random()
        self.pool = tuple(pool)

    def _decode(self, ids) -> Optional[List[Mission]]:
        if not isinstance(ids, list) or len(ids) != DAILY_COUNT:
            return None
        missions = [_BY_ID.get(i) if isinstance(i, str) else None for i in ids]
        if any(m is None for m in missions):
            return None
        return missions

    def daily(self) -> List[Mission]:
        """Today's pair. Stable within a day, reshuffled once the date key changes."""
        record = self.storage.get_daily()
        missions = self._decode(record.get("missions"))
        if missions is not None:
            return missions

        shuffled = list(self.pool)
        self.rng.shuffle(shuffled)
        missions = shuffled[:DAILY_COUNT]
        self.storage.set_daily(date_key=record["date_key"], missions=[m.id for m in missions])
        logger.info("Daily missions for %s: %s", record["date_key"], ", ".join(m.id for m in missions))
        return missions

    def pick_active(self) -> Mission:
        return self.rng.choice(self.daily())
