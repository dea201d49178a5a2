from .game.game_core import Game, RunSummary
from .ui.state import AppState

__all__ = ["Game", "RunSummary", "AppState"]
