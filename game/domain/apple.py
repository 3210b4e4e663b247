"""
Apple placement.
"""

import logging
import random

from .body import Body
from .coordinate import Coordinate

logger = logging.getLogger(__name__)


def place_apple(rng: random.Random, body: Body) -> Coordinate:
    """
    Return a random board cell not occupied by the body.

    Draws until a free cell comes up. There is no retry limit: the body
    always covers fewer cells than the board while the game is running.
    """
    rejected = 0
    while True:
        pos = Coordinate.random(rng)
        if not body.contains(pos):
            if rejected:
                logger.debug("Placed apple at %s after %d rejected draws", pos, rejected)
            return pos
        rejected += 1
