from tilemerge.engine.gamestate.state import GameProgress, GameState

__all__ = ["GameProgress", "GameState"]
