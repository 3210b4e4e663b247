"""
Registry for player kinds.

Maps player keys (e.g., 'keyboard', 'random') to player classes. To add a
new kind, create the module with its Player subclass, add a loader here and
an entry to PLAYER_LOADERS.
"""

from typing import Callable, Dict, Optional, Type

from .base import Player


# Lazy imports: the keyboard player pulls in curses, which headless runs
# (and some platforms) do without.
def _get_keyboard_player() -> Type[Player]:
    from .keyboard_player import KeyboardPlayer
    return KeyboardPlayer


def _get_random_player() -> Type[Player]:
    from .random_player import RandomPlayer
    return RandomPlayer


def _get_scripted_player() -> Type[Player]:
    from .scripted_player import ScriptedPlayer
    return ScriptedPlayer


# Registry: maps player key -> callable that returns the player class
PLAYER_LOADERS: Dict[str, Callable[[], Type[Player]]] = {
    "keyboard": _get_keyboard_player,
    "random": _get_random_player,
    "scripted": _get_scripted_player,
}

# Canonical list of available player keys (for CLI choices)
AVAILABLE_PLAYERS = list(PLAYER_LOADERS.keys())


def get_player_class(player_key: Optional[str] = None) -> Type[Player]:
    """
    Get the player class for a given key.

    Args:
        player_key: One of 'keyboard', 'random', 'scripted'. If None or empty,
                    returns the keyboard player.

    Returns:
        The player class (subclass of Player).

    Raises:
        ValueError: If player_key is not recognized.
    """
    if not player_key or player_key.strip() == "":
        player_key = "keyboard"

    player_key = player_key.strip().lower()

    if player_key not in PLAYER_LOADERS:
        available = ", ".join(AVAILABLE_PLAYERS)
        raise ValueError(
            f"Unknown player '{player_key}'. Available players: {available}"
        )

    return PLAYER_LOADERS[player_key]()


def list_players() -> list:
    """
    Return metadata about all available players.

    Returns:
        List of dicts with 'key' and 'description' for each player.
    """
    return [
        {"key": "keyboard", "description": "Human at the keyboard (arrow keys / WASD, q to quit)"},
        {"key": "random", "description": "Autopilot picking random moves that avoid walls"},
        {"key": "scripted", "description": "Replays a fixed list of moves, then goes idle"},
    ]
