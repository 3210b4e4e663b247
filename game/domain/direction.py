"""
Movement directions and the controller that guards against reversals.
"""

from enum import IntEnum

from .coordinate import Coordinate


class Direction(IntEnum):
    """
    Movement direction. Values are chosen so that d ^ 2 is the opposite of d.
    """

    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def offset(self) -> Coordinate:
        """Unit step added to the head each tick."""
        return _OFFSETS[self]

    @property
    def reverse(self) -> "Direction":
        return Direction(self ^ 0b10)


_OFFSETS = {
    Direction.UP: Coordinate(0, -1),     # y grows downward on screen
    Direction.RIGHT: Coordinate(1, 0),
    Direction.DOWN: Coordinate(0, 1),
    Direction.LEFT: Coordinate(-1, 0),
}


class DirectionController:
    """
    Holds the current direction of a snake.

    Attributes:
        direction: current Direction (starts as RIGHT)
        offset: unit Coordinate matching direction
    """

    def __init__(self, direction: Direction = Direction.RIGHT):
        self.direction = Direction(direction)
        self.offset = self.direction.offset

    def update_input(self, requested: Direction) -> bool:
        """
        Apply a requested direction.

        Requesting the current direction or its reverse is ignored, so the
        snake can never turn back into its own neck on the next tick.

        Returns:
            True if the direction changed.
        """
        requested = Direction(requested)
        if requested == self.direction or requested == self.direction.reverse:
            return False

        self.direction = requested
        self.offset = requested.offset
        return True

    def __repr__(self):
        return f"<DirectionController {self.direction.name} offset={self.offset}>"
