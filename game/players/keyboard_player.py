"""
Keyboard player - reads keys from a non-blocking curses window.
"""

import curses
from typing import Dict

from domain.constants import QUIT
from domain.direction import Direction
from domain.game_state import GameState
from .base import Move, Player


KEY_BINDINGS: Dict[int, Move] = {
    curses.KEY_UP: Direction.UP,
    ord('w'): Direction.UP,
    curses.KEY_RIGHT: Direction.RIGHT,
    ord('d'): Direction.RIGHT,
    curses.KEY_DOWN: Direction.DOWN,
    ord('s'): Direction.DOWN,
    curses.KEY_LEFT: Direction.LEFT,
    ord('a'): Direction.LEFT,
    ord('q'): QUIT,
}


def move_for_key(key: int) -> Move:
    """Map a curses key code to a move; unknown keys and -1 (no key) give None."""
    return KEY_BINDINGS.get(key)


class KeyboardPlayer(Player):
    """
    Human player. The window must be in nodelay mode so getch() returns -1
    instead of waiting when nothing was pressed.
    """

    def __init__(self, window):
        self.window = window

    def get_move(self, game_state: GameState) -> Move:
        return move_for_key(self.window.getch())
