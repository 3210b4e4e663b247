"""
Runtime configuration for the terminal snake.

Values come from the environment (optionally seeded from a .env file via
python-dotenv). Board size and tick period are fixed in domain.constants and
are deliberately not configurable here. Command-line flags in main.py take
precedence over anything read from this module.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_PLAYER = "keyboard"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def get_log_level() -> str:
    return os.getenv("SNAKE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_log_file() -> Optional[str]:
    """Log file path, or None to log to stderr."""
    return os.getenv("SNAKE_LOG_FILE") or None


def get_player_key() -> str:
    """Player key from SNAKE_PLAYER, trimmed and lowercased."""
    return normalize_player_key(os.getenv("SNAKE_PLAYER", DEFAULT_PLAYER))


def normalize_player_key(raw: Optional[str]) -> str:
    """Trim and lowercase a player key; blank means the default player."""
    key = (raw or "").strip().lower()
    return key or DEFAULT_PLAYER


def get_seed() -> Optional[int]:
    """
    Seed for the apple RNG, from SNAKE_SEED.

    Returns:
        The seed, or None to seed from OS entropy.

    Raises:
        ValueError: If SNAKE_SEED is set but not an integer
    """
    raw = os.getenv("SNAKE_SEED")
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"SNAKE_SEED must be an integer, got {raw!r}") from None


def configure_logging(log_level: Optional[str] = None,
                      log_file: Optional[str] = None,
                      terminal_ui: bool = False) -> None:
    """
    Configure root logging.

    Curses owns the terminal while a game is on screen, so without a log file
    only warnings and errors are let through to stderr in that mode.
    """
    level = (log_level or get_log_level()).upper()
    log_file = log_file or get_log_file()

    if log_file:
        logging.basicConfig(level=level, format=LOG_FORMAT, filename=log_file, force=True)
    else:
        numeric = logging.getLevelName(level)
        if terminal_ui and isinstance(numeric, int) and numeric < logging.WARNING:
            level = "WARNING"
        logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
