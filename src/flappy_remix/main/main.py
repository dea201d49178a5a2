# src/flappy_remix/main/main.py
#
# Desktop driver: OpenCV window + keyboard/mouse -> Game.
#
#   python -m flappy_remix.main.main      (or the `flappy-remix` script)
#
# Keys:
#   space      - flap / start / retry
#   mouse      - flap (hold it down in hold-input mode)
#   t          - start a practice run
#   p          - pause / resume
#   r          - restart
#   h          - toggle tap / hold input
#   1 / 2 / 3  - soft / normal / hard
#   q / esc    - back home (quit from home)

import logging
import time

import cv2 as cv

from ..game.game_core import Game
from ..game.storage import JsonFileStorage
from ..ui.input import InputState
from ..ui.render import Renderer
from ..ui.state import AppState
from . import config

WINDOW = "Flappy Remix"
DIFFICULTY_KEYS = {ord("1"): "soft", ord("2"): "normal", ord("3"): "hard"}


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    game = Game(storage=JsonFileStorage(config.STORAGE_FILE))
    renderer = Renderer(config.WORLD_WIDTH, config.WORLD_HEIGHT, config.GROUND_H)
    inputs = InputState()

    def on_mouse(event, x, y, flags, param):
        if event == cv.EVENT_LBUTTONDOWN:
            inputs.press()
            game.handle_flap()
        elif event == cv.EVENT_LBUTTONUP:
            inputs.release()

    cv.namedWindow(WINDOW, cv.WINDOW_AUTOSIZE)
    if cv.getWindowProperty(WINDOW, cv.WND_PROP_VISIBLE) < 0:
        raise RuntimeError("Could not open the game window.")
    cv.setMouseCallback(WINDOW, on_mouse)

    print("Flappy Remix started.")
    print("Keys: space flap | t practice | p pause | r restart | h tap/hold | 1/2/3 difficulty | q/esc quit")

    last_time = time.time()

    while True:
        now = time.time()
        dt = now - last_time
        last_time = now

        game.tick(dt, inputs)
        cv.imshow(WINDOW, renderer.draw(game, now))

        key = cv.waitKey(1) & 0xFF
        if cv.getWindowProperty(WINDOW, cv.WND_PROP_VISIBLE) < 1:
            break

        if key == ord(" "):
            game.handle_flap()
        elif key == ord("t"):
            if game.state in (AppState.HOME, AppState.RESULT):
                game.start_run(practice=True, instant=False)
        elif key == ord("p"):
            if game.state is AppState.PLAYING:
                game.pause()
            elif game.state is AppState.PAUSED:
                game.resume()
        elif key == ord("r"):
            game.restart()
        elif key == ord("h"):
            mode = "tap" if game.settings.hold_mode else "hold"
            game.update_settings(input_mode=mode)
            print(f"Input mode: {mode}")
        elif key in DIFFICULTY_KEYS:
            game.update_settings(difficulty=DIFFICULTY_KEYS[key])
            print(f"Difficulty: {DIFFICULTY_KEYS[key]}")
        elif key in (ord("q"), 27):
            if game.state is AppState.HOME:
                break
            game.quit_to_home()

    cv.destroyAllWindows()


if __name__ == "__main__":
    main()
