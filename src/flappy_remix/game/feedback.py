# src/flappy_remix/game/feedback.py
#
# Audio/haptic sinks. The core fires and forgets: settings gate the calls
# and a sink that raises is logged, never propagated into the tick.

import logging
from typing import List, Tuple

from ..main import config

logger = logging.getLogger(__name__)


class NullSink:
    """Does nothing. Subclass and override what you need."""

    def jump(self):
        pass

    def score(self):
        pass

    def hit(self):
        pass

    def ui_tap(self):
        pass

    def vibrate(self, ms: int):
        pass

    def music(self, on: bool):
        pass


class RecordingSink(NullSink):
    def __init__(self):
        self.calls: List[Tuple] = []

    def jump(self):
        self.calls.append(("jump",))

    def score(self):
        self.calls.append(("score",))

    def hit(self):
        self.calls.append(("hit",))

    def ui_tap(self):
        self.calls.append(("ui_tap",))

    def vibrate(self, ms: int):
        self.calls.append(("vibrate", ms))

    def music(self, on: bool):
        self.calls.append(("music", on))

    def names(self) -> List[str]:
        return [c[0] for c in self.calls]


class Feedback:
    def __init__(self, sink=None):
        self.sink = sink or NullSink()

    def _call(self, name, *args):
        try:
            getattr(self.sink, name)(*args)
        except Exception:
            logger.exception("Feedback sink failed on %s", name)

    def _sound(self, settings, name):
        if settings.sound:
            self._call(name)

    def _vibrate(self, settings, ms):
        if settings.vibration:
            self._call("vibrate", ms)

    def flap(self, settings):
        self._sound(settings, "jump")
        self._vibrate(settings, config.VIBRATE_FLAP_MS)

    def passed(self, settings, perfect):
        self._sound(settings, "score")
        self._vibrate(settings, config.VIBRATE_PERFECT_MS if perfect else config.VIBRATE_PASS_MS)

    def died(self, settings):
        self._sound(settings, "hit")
        self._vibrate(settings, config.VIBRATE_HIT_MS)

    def ui(self, settings):
        self._sound(settings, "ui_tap")

    def music(self, settings):
        self._call("music", bool(settings.music))
