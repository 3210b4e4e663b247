"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from domain.coordinate import Coordinate
from domain.direction import Direction
from domain.game_state import GameState
from .base import Move, Player


class RandomPlayer(Player):
    """
    An autopilot that picks a random direction avoiding walls and its own body.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_move(self, game_state: GameState) -> Move:
        snake_positions = game_state.snake_positions
        head = Coordinate(*snake_positions[0])
        current = Direction(game_state.direction)

        # Filter out moves that:
        # 1. Reverse into the neck (the controller would ignore them anyway)
        # 2. Hit walls
        # 3. Hit own body (except tail, which will move)
        valid_moves: List[Direction] = []
        for move in Direction:
            if move == current.reverse:
                continue

            new_pos = head + move.offset
            if not new_pos.in_bounds(game_state.width, game_state.height):
                continue

            if new_pos in snake_positions[:-1]:
                continue

            valid_moves.append(move)

        # If no valid moves, just return a random move (we'll die anyway)
        if not valid_moves:
            return self.rng.choice(list(Direction))

        return self.rng.choice(valid_moves)
