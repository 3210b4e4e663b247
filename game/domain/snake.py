"""
Snake entity for the game engine.
"""

import logging
from enum import Enum

from .body import Body
from .constants import BOARD_WIDTH, BOARD_HEIGHT
from .coordinate import Coordinate, SCREEN
from .direction import Direction, DirectionController
from .node_pool import NodePool

logger = logging.getLogger(__name__)


class UpdateResult(Enum):
    """Outcome of a single tick."""

    APPLE = "apple"
    NONE = "none"
    DEATH = "death"


class Snake:
    """
    Represents the player's snake on the board.

    Attributes:
        body: Body with the head at the front and the tail at the back
        controller: DirectionController holding the current heading
    """

    def __init__(self, pool: NodePool, head: Coordinate = SCREEN // 2,
                 direction: Direction = Direction.RIGHT):
        self.body = Body(pool, head)
        self.controller = DirectionController(direction)

    @property
    def head(self) -> Coordinate:
        """Return the head position (first element)."""
        return self.body.head

    @property
    def direction(self) -> Direction:
        return self.controller.direction

    def update_input(self, requested: Direction) -> bool:
        return self.controller.update_input(requested)

    def update(self, apple: Coordinate) -> UpdateResult:
        """
        Advance the snake by one tick.

        The body always grows a new head first. Landing on the apple keeps
        that extra segment; otherwise the old tail is dropped, so the snake
        just moves. Only leaving the board kills the snake; running into its
        own body does not.
        """
        new_head = self.body.head + self.controller.offset
        self.body.grow_front(new_head)
        if new_head == apple:
            return UpdateResult.APPLE

        self.body.shrink_back()

        if not self.body.head.in_bounds(BOARD_WIDTH, BOARD_HEIGHT):
            logger.debug("Head left the board at %s", self.body.head)
            return UpdateResult.DEATH

        return UpdateResult.NONE

    def teardown(self) -> None:
        self.body.teardown()

    def __len__(self) -> int:
        return len(self.body)

    def __repr__(self):
        return f"<Snake len={len(self.body)} head={self.body.head} dir={self.direction.name}>"
