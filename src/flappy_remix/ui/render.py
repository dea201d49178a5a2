# src/flappy_remix/ui/render.py
# Draws a read-only snapshot of the game onto a BGR frame with OpenCV.

import math
import time
from typing import Optional, Tuple

import cv2
import numpy as np

from .state import AppState

# BGR: (top, bottom) gradient per theme
THEME_COLORS = {
    "Day": ((120, 90, 40), (45, 28, 18)),
    "Sunset": ((110, 140, 230), (50, 20, 40)),
    "Night": ((70, 40, 30), (26, 14, 10)),
    "Rain": ((110, 100, 80), (30, 20, 14)),
}

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
FONT = cv2.FONT_HERSHEY_SIMPLEX

OVERLAY_CAPTIONS = {
    AppState.HOME: ("FLAPPY REMIX", "Space: play   T: practice"),
    AppState.READY: ("Get ready", "Space to flap"),
    AppState.PAUSED: ("Paused", "P: resume   R: restart   Q: quit"),
}


def _gradient(h: int, w: int, top, bottom) -> np.ndarray:
    t = np.linspace(0.0, 1.0, h, dtype=np.float32)[:, None]
    top = np.array(top, dtype=np.float32)
    bottom = np.array(bottom, dtype=np.float32)
    col = (1.0 - t) * top + t * bottom
    return np.repeat(col[:, None, :], w, axis=1).astype(np.uint8)


class Renderer:
    def __init__(self, width: int, height: int, ground_h: int):
        self.width = int(width)
        self.height = int(height)
        self.ground_y = int(height - ground_h)
        self._bg_cache = {}

    def _background(self, theme: str) -> np.ndarray:
        if theme not in self._bg_cache:
            top, bottom = THEME_COLORS.get(theme, THEME_COLORS["Day"])
            self._bg_cache[theme] = _gradient(self.height, self.width, top, bottom)
        return self._bg_cache[theme].copy()

    def _rain(self, frame, now: float):
        for i in range(60):
            x = int((i * 37 + now * 120) % self.width)
            y = int((i * 83 + now * 220) % (self.height - 90))
            cv2.line(frame, (x, y), (x - 6, y + 14), (230, 220, 200), 1, cv2.LINE_AA)

    def _pipes(self, frame, pipes, high_contrast: bool):
        fill = (230, 230, 230) if high_contrast else (90, 110, 90)
        edge = BLACK if high_contrast else (140, 160, 140)
        cap = BLACK if high_contrast else (50, 60, 50)
        for p in pipes:
            x0, x1 = int(p.x), int(p.x + p.w)
            top = int(p.top_h)
            by = int(p.bottom_y)

            cv2.rectangle(frame, (x0, 0), (x1, top), fill, thickness=-1)
            cv2.rectangle(frame, (x0, 0), (x1, top), edge, thickness=2)
            if by < self.ground_y:
                cv2.rectangle(frame, (x0, by), (x1, self.ground_y), fill, thickness=-1)
                cv2.rectangle(frame, (x0, by), (x1, self.ground_y), edge, thickness=2)

            cv2.rectangle(frame, (x0 - 2, top - 10), (x1 + 2, top), cap, thickness=-1)
            cv2.rectangle(frame, (x0 - 2, by), (x1 + 2, by + 10), cap, thickness=-1)

    def _ground(self, frame, high_contrast: bool):
        cv2.rectangle(frame, (0, self.ground_y), (self.width, self.height),
                      (225, 225, 225) if high_contrast else (20, 22, 26), thickness=-1)
        cv2.line(frame, (0, self.ground_y), (self.width, self.ground_y),
                 BLACK if high_contrast else (60, 60, 60), 3)

    def _bird(self, frame, bird, high_contrast: bool):
        cx, cy, r = int(bird.x), int(bird.y), int(bird.r)
        c, s = math.cos(bird.tilt), math.sin(bird.tilt)

        def rot(px: float, py: float) -> Tuple[int, int]:
            return int(cx + px * c - py * s), int(cy + px * s + py * c)

        cv2.circle(frame, (cx, cy), r, WHITE if high_contrast else (215, 215, 215), thickness=-1, lineType=cv2.LINE_AA)
        cv2.circle(frame, (cx, cy), r, BLACK if high_contrast else (60, 60, 60), thickness=2, lineType=cv2.LINE_AA)
        cv2.circle(frame, rot(5, -4), 2, BLACK, thickness=-1)

        beak = np.array([rot(r - 1, 0), rot(r + 7, 2), rot(r - 1, 6)], dtype=np.int32)
        cv2.fillPoly(frame, [beak], (40, 40, 40))

    def _text(self, frame, text: str, y: int, scale: float = 0.7, thick: int = 2):
        (tw, _), _ = cv2.getTextSize(text, FONT, scale, thick)
        cv2.putText(frame, text, ((self.width - tw) // 2, y), FONT, scale, WHITE, thick, cv2.LINE_AA)

    def _hud(self, frame, game):
        run = game.run
        cv2.putText(frame, str(run.score), (self.width // 2 - 10, 60), FONT, 1.4, WHITE, 3, cv2.LINE_AA)
        mission = run.mission.name if run.mission else "—"
        cv2.putText(frame, f"Mode: {run.mode}", (10, self.height - 60), FONT, 0.5, WHITE, 1, cv2.LINE_AA)
        cv2.putText(frame, f"Mission: {mission}", (10, self.height - 35), FONT, 0.5, WHITE, 1, cv2.LINE_AA)
        if run.practice:
            cv2.putText(frame, "PRACTICE", (self.width - 100, self.height - 35), FONT, 0.5, WHITE, 1, cv2.LINE_AA)

    def _overlay(self, frame, game):
        shade = frame.copy()
        cv2.rectangle(shade, (20, 180), (self.width - 20, 420), (0, 0, 0), thickness=-1)
        cv2.addWeighted(shade, 0.55, frame, 0.45, 0, dst=frame)

        if game.state is AppState.RESULT and game.last_result is not None:
            res = game.last_result
            self._text(frame, "Run over", 220, 1.0)
            self._text(frame, f"Score {res.score}   Best {res.best}", 265)
            self._text(frame, f"Coins +{res.coins}", 300)
            self._text(frame, f"Mission: {res.mission_text}", 335, 0.55, 1)
            self._text(frame, res.hint, 370, 0.5, 1)
            self._text(frame, "Space: retry   Q: home", 405, 0.5, 1)
            return

        title, sub = OVERLAY_CAPTIONS.get(game.state, ("", ""))
        self._text(frame, title, 270, 1.0)
        self._text(frame, sub, 320, 0.55, 1)
        if game.state is AppState.HOME:
            st = game.stats()
            self._text(frame, f"Best {st.best}   Runs {st.runs}   Total {st.total_score}", 360, 0.5, 1)
            self._text(frame, f"Coins {st.coins}   Best streak {st.best_streak}", 390, 0.5, 1)

    def draw(self, game, now: Optional[float] = None) -> np.ndarray:
        """Render one frame. Reads game state, never mutates it."""
        settings = game.settings
        now = time.time() if now is None else now

        frame = self._background(game.run.theme)
        if game.run.theme == "Rain" and not settings.reduced_motion:
            self._rain(frame, now)

        if game.state is not AppState.HOME:
            self._pipes(frame, game.pipes, settings.high_contrast)
        self._ground(frame, settings.high_contrast)
        if game.state is not AppState.HOME:
            self._bird(frame, game.bird, settings.high_contrast)

        if game.state in (AppState.READY, AppState.PLAYING, AppState.PAUSED):
            self._hud(frame, game)
        if game.state is not AppState.PLAYING:
            self._overlay(frame, game)
        return frame
