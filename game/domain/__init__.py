"""
Domain entities for the terminal snake engine.

This module contains the core game entities that are independent of
terminal concerns (curses, keyboard, sleeping).
"""

from .constants import BOARD_WIDTH, BOARD_HEIGHT, TICK_MS, QUIT
from .errors import (
    SnakeError,
    AllocationError,
    InvalidReleaseError,
    EmptyBodyError,
    BodyTornDownError,
)
from .coordinate import Coordinate, SCREEN
from .node_pool import NodePool, BodyNode
from .body import Body
from .direction import Direction, DirectionController
from .snake import Snake, UpdateResult
from .apple import place_apple
from .game_state import GameState

__all__ = [
    'BOARD_WIDTH', 'BOARD_HEIGHT', 'TICK_MS', 'QUIT',
    'SnakeError', 'AllocationError', 'InvalidReleaseError',
    'EmptyBodyError', 'BodyTornDownError',
    'Coordinate', 'SCREEN',
    'NodePool', 'BodyNode',
    'Body',
    'Direction', 'DirectionController',
    'Snake', 'UpdateResult',
    'place_apple',
    'GameState',
]
