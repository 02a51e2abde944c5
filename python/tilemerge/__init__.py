"""Rule engine for a sliding-tile merge puzzle."""

from tilemerge.engine.gameplay import GridEngine, collapse_row
from tilemerge.engine.gamestate import GameState
from tilemerge.models import Cell, Direction, Grid, Point

__all__ = [
    "Cell",
    "Direction",
    "GameState",
    "Grid",
    "GridEngine",
    "Point",
    "collapse_row",
]
