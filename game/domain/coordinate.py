"""
Coordinate value type - a signed 2D grid point.
"""

import random
from typing import NamedTuple

from .constants import BOARD_WIDTH, BOARD_HEIGHT


def _wrap_int8(value: int) -> int:
    """Wrap an integer into the signed 8-bit range -128..127."""
    return ((value + 128) % 256) - 128


class Coordinate(NamedTuple):
    """
    An immutable (x, y) grid point.

    Components live in the signed 8-bit domain. Being a tuple, a Coordinate
    compares equal to a plain (x, y) tuple with the same values.
    """

    x: int
    y: int

    def __add__(self, other: "Coordinate") -> "Coordinate":
        return Coordinate(_wrap_int8(self.x + other[0]), _wrap_int8(self.y + other[1]))

    def __floordiv__(self, k: int) -> "Coordinate":
        # Python's // already floors toward negative infinity
        return Coordinate(self.x // k, self.y // k)

    def in_bounds(self, width: int = BOARD_WIDTH, height: int = BOARD_HEIGHT) -> bool:
        """Return True if this point lies inside a width x height board."""
        return 0 <= self.x < width and 0 <= self.y < height

    @classmethod
    def random(cls, rng: random.Random) -> "Coordinate":
        """Draw a uniformly random on-board coordinate from the given source."""
        return cls(rng.randrange(0, BOARD_WIDTH), rng.randrange(0, BOARD_HEIGHT))

    def __repr__(self):
        return f"({self.x}, {self.y})"


# Board size as a point; its floor-half is the starting head position
SCREEN = Coordinate(BOARD_WIDTH, BOARD_HEIGHT)
