"""Rolls spawn values and picks spawn targets."""

from __future__ import annotations

import random
from collections.abc import Sequence

from tilemerge.models.cell import Point

# One spawn in FOUR_ODDS is a 4, the rest are 2.
FOUR_ODDS = 10


class TileSpawner:
    """Draws every random decision of a game from one injected generator."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def spawn_value(self) -> int:
        return 4 if self.rng.randrange(FOUR_ODDS) == 0 else 2

    def choose_location(self, free: Sequence[Point]) -> Point:
        """Return a uniformly chosen coordinate from *free*."""
        assert free, "no free location to spawn on"
        return free[self.rng.randrange(len(free))]

    @staticmethod
    def start_locations() -> tuple[Point, Point]:
        """Fixed coordinates of the two opening tiles."""
        return Point(0, 0), Point(0, 1)
