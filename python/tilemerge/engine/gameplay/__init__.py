from tilemerge.engine.gameplay.game import GridEngine, collapse_row

__all__ = ["GridEngine", "collapse_row"]
