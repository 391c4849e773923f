"""Shared value types, sentinels and random helpers for the maze programs."""

from __future__ import annotations

import random
from dataclasses import dataclass
from functools import total_ordering

BiteID = int
ContourID = int
ConnectionID = int
ContourHeight = int
Name = str
Cost = float
Distance = int

DEF_MAZE_WIDTH = 100
DEF_MAZE_HEIGHT = 100

NO_BITE: BiteID = -1
NO_CONTOUR: ContourID = -2
NO_CONNECTION: ConnectionID = -3
NO_CONTOUR_HEIGHT: ContourHeight = 0
MAX_CONTOUR_HEIGHT: ContourHeight = 9
NO_NAME: Name = "!NO_NAME!"
NO_COST: Cost = 0.0

# Smallest 32-bit signed integer, used where an integer value is unknown.
NO_VALUE = -(2**31)
NO_DISTANCE: Distance = NO_VALUE

DEFAULT_MAX_HEIGHT = 100
DEFAULT_MIN_HEIGHT = 1
ROOT_BIAS_MULTIPLIER = 0.05
LEAF_BIAS_MULTIPLIER = 0.5

rand_engine = random.Random()


def random_in_range(start: int, end: int) -> int:
    """Return a uniformly chosen integer from the inclusive range [start, end]."""
    if end < start:
        raise ValueError(f"empty range: {start}..{end}")
    return rand_engine.randint(start, end)


@total_ordering
@dataclass(frozen=True)
class Coord:
    """A grid coordinate; ordered by row (y) first, then by column (x)."""

    x: int = NO_VALUE
    y: int = NO_VALUE

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Coord):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)

    def __iter__(self):
        yield self.x
        yield self.y


NO_COORD = Coord(NO_VALUE, NO_VALUE)
DEFAULT_MIN_COORD = Coord(1, 1)
DEFAULT_MAX_COORD = Coord(10000, 10000)