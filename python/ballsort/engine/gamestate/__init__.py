from ballsort.engine.gamestate.state import GameState

__all__ = ["GameState"]
