"""
Base player interface for the game engine.
"""

from typing import Optional, Union

from domain.direction import Direction
from domain.game_state import GameState

# What a player can hand back for one frame: a direction request, the QUIT
# command, or None when there was no input.
Move = Optional[Union[Direction, str]]


class Player:
    """
    Base class/interface for input sources.

    A player is polled once per frame and must never block: returning None
    means "no input this frame" and the game keeps its cadence.
    """

    def get_move(self, game_state: GameState) -> Move:
        """
        Return the input for this frame given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            A Direction, domain.constants.QUIT, or None
        """
        raise NotImplementedError
