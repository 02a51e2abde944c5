from tilemerge.models.cell import Cell, Point
from tilemerge.models.grid import Direction, Grid, normalize

__all__ = ["Cell", "Direction", "Grid", "Point", "normalize"]
