"""
Scripted player - replays a fixed sequence of per-frame moves.
"""

from typing import Iterable

from domain.game_state import GameState
from .base import Move, Player


class ScriptedPlayer(Player):
    """
    Returns one move per frame from a prepared list, then None forever.

    Handy for demos and for driving the game loop deterministically.
    """

    def __init__(self, moves: Iterable[Move] = ()):
        self.moves = list(moves)
        self.frames_polled = 0

    def get_move(self, game_state: GameState) -> Move:
        idx = self.frames_polled
        self.frames_polled += 1
        if idx < len(self.moves):
            return self.moves[idx]
        return None
