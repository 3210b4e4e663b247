"""
Render sinks that don't need a terminal.

Each renderer gets one GameState per frame via draw(). The curses renderer
lives in services/curses_ui.py.
"""

import sys
from typing import Optional, TextIO

from domain.game_state import GameState


class Renderer:
    """Base class/interface for render sinks."""

    def draw(self, game_state: GameState) -> None:
        raise NotImplementedError


class NullRenderer(Renderer):
    """Draws nothing; counts frames. Used for fast headless runs."""

    def __init__(self):
        self.frames_drawn = 0

    def draw(self, game_state: GameState) -> None:
        self.frames_drawn += 1


class TextRenderer(Renderer):
    """Writes the score line and an ASCII board to a text stream each frame."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def draw(self, game_state: GameState) -> None:
        self.stream.write(f"\n{game_state.score_text}\n{game_state.print_board()}\n")
        self.stream.flush()
