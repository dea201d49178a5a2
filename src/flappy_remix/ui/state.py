# src/flappy_remix/ui/state.py
#
# Run state machine as a pure function: (state, event) -> (state, effects).
# The controller applies the effects; nothing here touches the game.

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple


class AppState(Enum):
    HOME = auto()
    READY = auto()
    PLAYING = auto()
    PAUSED = auto()
    RESULT = auto()


class Event(Enum):
    START = auto()          # start a run, wait for a flap
    START_INSTANT = auto()  # start a run and play immediately
    FLAP = auto()
    PAUSE = auto()
    FOCUS_LOST = auto()
    RESUME = auto()
    DIE = auto()
    RETRY = auto()
    QUIT = auto()


class Effect(Enum):
    RESET_RUN = auto()
    CLEAR_PAUSE = auto()
    FINALIZE_RUN = auto()
    MARK_FOCUS_PAUSE = auto()
    SHOW_HOME = auto()


@dataclass(frozen=True)
class Transition:
    state: AppState
    effects: Tuple[Effect, ...] = ()


def transition(state: AppState, event: Event) -> Transition:
    """
    Unhandled (state, event) pairs return the same state with no effects.
    A run may be (re)started from any state. RETRY only applies to a
    finished run; restarting from playing/paused goes through START_INSTANT.
    """
    if event is Event.QUIT:
        return Transition(AppState.HOME, (Effect.SHOW_HOME,))

    if event is Event.START:
        return Transition(AppState.READY, (Effect.RESET_RUN,))

    if event is Event.START_INSTANT or (event is Event.RETRY and state is AppState.RESULT):
        return Transition(AppState.PLAYING, (Effect.RESET_RUN, Effect.CLEAR_PAUSE))

    if state is AppState.READY and event is Event.FLAP:
        return Transition(AppState.PLAYING, (Effect.CLEAR_PAUSE,))

    if state is AppState.PLAYING and event is Event.PAUSE:
        return Transition(AppState.PAUSED)

    if state is AppState.PLAYING and event is Event.FOCUS_LOST:
        return Transition(AppState.PAUSED, (Effect.MARK_FOCUS_PAUSE,))

    if state is AppState.PAUSED and event is Event.RESUME:
        return Transition(AppState.PLAYING, (Effect.CLEAR_PAUSE,))

    if state is AppState.PLAYING and event is Event.DIE:
        return Transition(AppState.RESULT, (Effect.FINALIZE_RUN,))

    return Transition(state)
