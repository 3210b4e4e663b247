"""
Player implementations for the terminal snake.

This module contains the input-source abstractions that steer the snake:
a human at the keyboard, or an autopilot for headless runs.
"""

from .base import Move, Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer
from .variant_registry import get_player_class, list_players, AVAILABLE_PLAYERS

__all__ = [
    'Move',
    'Player',
    'RandomPlayer',
    'ScriptedPlayer',
    'get_player_class',
    'list_players',
    'AVAILABLE_PLAYERS',
]
