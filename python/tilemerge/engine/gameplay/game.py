"""Core gameplay logic — slides, merges, spawns, and end conditions."""

from __future__ import annotations

import random

from tilemerge.engine.gamespawn import TileSpawner
from tilemerge.engine.gamestate import GameProgress, GameState
from tilemerge.models.cell import Cell, Point, is_tile_value
from tilemerge.models.grid import Direction, Grid, normalize

DEFAULT_SIZE = 4
DEFAULT_TARGET = 2048

# Any move open in LEFT/UP is mirrored by one in RIGHT/DOWN.
_END_CHECK_DIRECTIONS = (Direction.RIGHT, Direction.DOWN)


def collapse_row(row: list[Cell]) -> tuple[bool, int]:
    """Merge adjacent equal cells of a gap-free *row* in place.

    Each pair merges at most once per pass: a merged cell is never the left
    side of another comparison.  Returns whether anything merged and the
    points scored (the sum of the merged values).
    """
    merged = False
    points = 0
    index = 1
    while index < len(row):
        if row[index].value == row[index - 1].value:
            merged = True
            row[index] = row[index].doubled()
            points += row[index].value
            del row[index - 1]
        index += 1
    return merged, points


class GridEngine:
    """Owns the grid, the free-location list, the score, and the state tag.

    All randomness comes from *rng*; pass a seeded ``random.Random`` for
    reproducible games.
    """

    def __init__(
        self,
        size: int = DEFAULT_SIZE,
        target: int = DEFAULT_TARGET,
        rng: random.Random | None = None,
    ) -> None:
        self._setup(Grid(size), target, rng)
        self.start()

    @classmethod
    def from_rows(
        cls,
        rows: list[list[int]],
        *,
        target: int = DEFAULT_TARGET,
        state: GameState = GameState.PLAYING,
        score: int = 0,
        rng: random.Random | None = None,
    ) -> GridEngine:
        """Resume a game from a row-major value matrix (0 = empty).

        End conditions are not evaluated; call ``check_end_conditions`` to
        classify a restored board.
        """
        obj = object.__new__(cls)
        obj._setup(Grid.from_rows(rows), target, rng)
        obj.progress = GameProgress(state, score)
        return obj

    def _setup(
        self, grid: Grid, target: int, rng: random.Random | None
    ) -> None:
        if not is_tile_value(target):
            raise ValueError(
                f"Target must be a power of two >= 2, got {target}."
            )
        self._grid = grid
        self.target = target
        self.spawner = TileSpawner(rng)
        self.progress = GameProgress()
        self._free_locations = grid.free_locations()
        self._last_spawned: Cell | None = None

    # -- lifecycle ------------------------------------------------------------

    def start(self) -> None:
        """Clear the board and place the two opening tiles.

        Both opening tiles share one spawn roll and always land on the same
        two coordinates.
        """
        self._grid.clear()
        self.progress = GameProgress()
        value = self.spawner.spawn_value()
        for point in self.spawner.start_locations():
            self._spawn_at(point, value)
        self._free_locations = self._grid.free_locations()

    def resume_after_win(self) -> None:
        """Keep playing past a win; end conditions are no longer checked."""
        self.progress.resume_after_win()

    # -- movement -------------------------------------------------------------

    def move(self, direction: Direction) -> bool:
        """Slide every tile towards *direction*.

        Returns True if any tile moved or merged.  Only then is a tile
        spawned and the end conditions re-evaluated; otherwise the grid,
        score, and state are left exactly as they were.
        """
        size = self._grid.size
        staged = Grid(size)
        free: list[Point] = []
        changed = False
        points = 0

        for index in range(size):
            row, has_gap = self._grid.extract_row(index, direction)
            merged, gained = collapse_row(row)
            changed = changed or has_gap or merged
            points += gained
            self._write_row(staged, row, index, direction, free)

        self._free_locations = free
        if not changed:
            return False

        self._grid = staged
        self.progress.add_score(points)
        self.progress.increment_moves()

        assert self._free_locations, "a change always frees a coordinate"
        target = self.spawner.choose_location(self._free_locations)
        self._spawn_at(target, self.spawner.spawn_value())
        self._free_locations.remove(target)

        self.check_end_conditions()
        return True

    def check_end_conditions(self) -> GameState:
        """Update and return the state tag for the current board."""
        if not self.progress.is_evaluated:
            return self.progress.state

        can_move = False
        for direction in _END_CHECK_DIRECTIONS:
            for index in range(self._grid.size):
                row, _ = self._grid.extract_row(index, direction)
                if any(cell.value >= self.target for cell in row):
                    self.progress.win()
                if self.progress.state is not GameState.PLAYING:
                    continue
                if len(row) < self._grid.size:
                    can_move = True
                elif any(a.value == b.value for a, b in zip(row, row[1:])):
                    can_move = True

        if not can_move:
            self.progress.lose()
        return self.progress.state

    # -- queries --------------------------------------------------------------

    def cell_at(self, x: int, y: int) -> Cell | None:
        return self._grid.get(x, y)

    def to_rows(self) -> list[list[int]]:
        return self._grid.to_rows()

    @property
    def size(self) -> int:
        return self._grid.size

    @property
    def last_spawned_cell(self) -> Cell | None:
        return self._last_spawned

    @property
    def state(self) -> GameState:
        return self.progress.state

    @property
    def score(self) -> int:
        return self.progress.score

    @property
    def moves(self) -> int:
        return self.progress.moves

    @property
    def free_locations(self) -> tuple[Point, ...]:
        return tuple(self._free_locations)

    @property
    def best_tile(self) -> int:
        return max((cell.value for cell in self._grid.cells()), default=0)

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _write_row(
        grid: Grid,
        row: list[Cell],
        index: int,
        direction: Direction,
        free: list[Point],
    ) -> None:
        """Write a collapsed *row* over logical row *index* of *grid*.

        Slots past the end of the row are emptied and recorded in *free*.
        """
        for column in range(grid.size):
            point = normalize(index, column, direction, grid.size)
            if column < len(row):
                grid.place(row[column].moved_to(point))
            else:
                grid.clear(point)
                free.append(point)

    def _spawn_at(self, point: Point, value: int) -> None:
        assert self._grid.get(*point) is None, f"{point} is occupied"
        self._last_spawned = Cell.spawned(value, point)
        self._grid.place(self._last_spawned)
