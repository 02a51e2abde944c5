"""Cell model: a tile value plus the positions a renderer needs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple


class Point(NamedTuple):
    x: int
    y: int


def is_tile_value(value: int) -> bool:
    """Return True if *value* is a power of two no smaller than 2."""
    return value >= 2 and value & (value - 1) == 0


@dataclass(frozen=True)
class Cell:
    """A single tile on the grid.

    ``previous_position`` is where the tile sat before the latest move was
    written back, so callers can interpolate the slide.  A freshly spawned
    cell has both positions equal.
    """

    value: int
    position: Point
    previous_position: Point

    def __post_init__(self) -> None:
        if not is_tile_value(self.value):
            raise ValueError(
                f"Tile values must be powers of two >= 2, got {self.value}."
            )

    # -- construction helpers -------------------------------------------------

    @classmethod
    def spawned(cls, value: int, position: Point) -> Cell:
        return cls(value=value, position=position, previous_position=position)

    def moved_to(self, position: Point) -> Cell:
        return Cell(self.value, position, self.position)

    def doubled(self) -> Cell:
        return Cell(self.value * 2, self.position, self.previous_position)
