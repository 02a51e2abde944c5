"""Grid model for the merge puzzle."""

from __future__ import annotations

from enum import StrEnum

from tilemerge.models.cell import Cell, Point, is_tile_value


class Direction(StrEnum):
    """The direction the tiles slide towards."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


def normalize(row: int, column: int, direction: Direction, size: int) -> Point:
    """Translate a logical (row, column) in *direction* to grid coordinates.

    Column 0 is always the slot nearest the edge the tiles slide towards, so
    one row-collapsing routine serves all four directions.
    """
    if direction in (Direction.DOWN, Direction.RIGHT):
        column = size - 1 - column
    # Vertical slides treat grid columns as logical rows.
    if direction in (Direction.UP, Direction.DOWN):
        row, column = column, row
    return Point(x=column, y=row)


class Grid:
    """An N×N arena of cell slots.

    Slots are stored row-major (``slots[y][x]``); ``None`` marks an empty
    coordinate.  Each slot is the sole owner of the cell it holds, and a
    stored cell's ``position`` always equals the slot's coordinate.
    """

    def __init__(self, size: int) -> None:
        if size < 2:
            raise ValueError(f"Grid size must be at least 2, got {size}.")
        self.size = size
        self.slots: list[list[Cell | None]] = [
            [None] * size for _ in range(size)
        ]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> Grid:
        """Create a grid from a row-major matrix of values, 0 meaning empty.

        Example::

            Grid.from_rows([[2, 0], [0, 4]])
        """
        size = len(rows)
        if size < 2 or any(len(row) != size for row in rows):
            raise ValueError(
                f"Expected a square matrix of at least 2×2, got rows of "
                f"lengths {[len(row) for row in rows]}."
            )
        grid = cls(size)
        for y, row in enumerate(rows):
            for x, value in enumerate(row):
                if value == 0:
                    continue
                if not is_tile_value(value):
                    raise ValueError(
                        f"Invalid tile value {value} at ({x}, {y})."
                    )
                grid.place(Cell.spawned(value, Point(x, y)))
        return grid

    def to_rows(self) -> list[list[int]]:
        return [
            [cell.value if cell else 0 for cell in row] for row in self.slots
        ]

    def copy(self) -> Grid:
        grid = Grid(self.size)
        grid.slots = [row[:] for row in self.slots]
        return grid

    # -- queries --------------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, x: int, y: int) -> Cell | None:
        if not self.in_bounds(x, y):
            return None
        return self.slots[y][x]

    def cells(self) -> list[Cell]:
        return [cell for row in self.slots for cell in row if cell is not None]

    def free_locations(self) -> list[Point]:
        return [
            Point(x, y)
            for y, row in enumerate(self.slots)
            for x, cell in enumerate(row)
            if cell is None
        ]

    def extract_row(
        self, index: int, direction: Direction
    ) -> tuple[list[Cell], bool]:
        """Return the occupied cells of logical row *index* in slide order.

        The flag is True when an empty coordinate precedes an occupied cell,
        meaning at least one cell in the row will slide.
        """
        row: list[Cell] = []
        has_gap = False
        empty_seen = False
        for column in range(self.size):
            x, y = normalize(index, column, direction, self.size)
            cell = self.slots[y][x]
            if cell is None:
                empty_seen = True
                continue
            row.append(cell)
            if empty_seen:
                has_gap = True
        return row, has_gap

    # -- mutation -------------------------------------------------------------

    def place(self, cell: Cell) -> None:
        x, y = cell.position
        self.slots[y][x] = cell

    def clear(self, point: Point | None = None) -> None:
        """Empty one coordinate, or the whole grid when *point* is omitted."""
        if point is None:
            self.slots = [[None] * self.size for _ in range(self.size)]
        else:
            self.slots[point.y][point.x] = None
