# src/flappy_remix/game/storage.py
#
# Persistence collaborator: settings, lifetime stats and the daily mission
# record. The core only reads/writes through get_*/set_*; a failing backend
# degrades to in-memory defaults and never reaches the tick loop.

import copy
import datetime as _dt
import json
import logging
import math
import os
from dataclasses import asdict, dataclass, fields
from typing import Any, Callable, Dict, Optional

from .settings import Settings

logger = logging.getLogger(__name__)


@dataclass
class PersistentStats:
    best: int = 0
    runs: int = 0
    total_score: int = 0
    coins: int = 0
    best_streak: int = 0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PersistentStats":
        if not data:
            return cls()
        out = cls()
        for f in fields(cls):
            v = data.get(f.name)
            # json.load accepts NaN and Infinity
            if isinstance(v, (int, float)) and not isinstance(v, bool) and math.isfinite(v):
                setattr(out, f.name, int(v))
        return out


def date_key(day: _dt.date) -> str:
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


class MemoryStorage:
    def __init__(self, today: Callable[[], _dt.date] = _dt.date.today):
        self.today = today
        self.data = self._load() or self._defaults()
        self._sanitize()
        self._save()

    def _defaults(self) -> Dict[str, Any]:
        return {
            "settings": Settings().to_dict(),
            "stats": asdict(PersistentStats()),
            "daily": {"date_key": self._date_key(), "missions": None},
        }

    def _date_key(self) -> str:
        return date_key(self.today())

    def _sanitize(self):
        # fill missing/corrupt sections one by one
        defaults = self._defaults()
        for k, v in defaults.items():
            if not isinstance(self.data.get(k), dict):
                self.data[k] = v
        self.data["settings"] = Settings.from_dict(self.data["settings"]).to_dict()
        self.data["stats"] = asdict(PersistentStats.from_dict(self.data["stats"]))

    # backends override these two
    def _load(self) -> Optional[Dict[str, Any]]:
        return None

    def _save(self):
        pass

    def get_settings(self) -> Settings:
        return Settings.from_dict(self.data["settings"])

    def set_settings(self, **partial):
        merged = {**self.data["settings"], **partial}
        self.data["settings"] = Settings.from_dict(merged).to_dict()
        self._save()

    def get_stats(self) -> PersistentStats:
        return PersistentStats.from_dict(self.data["stats"])

    def set_stats(self, stats: PersistentStats):
        self.data["stats"] = asdict(stats)
        self._save()

    def get_daily(self) -> Dict[str, Any]:
        """The daily record, rolled over (missions cleared) when the date changed."""
        key = self._date_key()
        if self.data["daily"].get("date_key") != key:
            self.data["daily"] = {"date_key": key, "missions": None}
            self._save()
        return copy.deepcopy(self.data["daily"])

    def set_daily(self, **partial):
        self.data["daily"] = {**self.data["daily"], **partial}
        self._save()

    def reset_all(self):
        self.data = self._defaults()
        self._save()


class JsonFileStorage(MemoryStorage):
    def __init__(self, path: str, today: Callable[[], _dt.date] = _dt.date.today):
        self.path = path
        super().__init__(today=today)

    def _load(self) -> Optional[Dict[str, Any]]:
        if not os.path.isfile(self.path):
            return None
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as exc:
            logger.warning("Could not read %s (%s), using defaults", self.path, exc)
            return None
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed save file %s", self.path)
            return None
        return data

    def _save(self):
        tmp = self.path + ".tmp"
        try:
            with open(tmp, "w", encoding="utf-8") as fh:
                json.dump(self.data, fh, indent=2)
            os.replace(tmp, self.path)
        except OSError as exc:
            logger.warning("Could not write %s (%s), keeping state in memory", self.path, exc)
