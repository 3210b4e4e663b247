"""
Curses terminal session and renderer.

The board is drawn inside a '*' box. Each cell is two characters wide so the
grid looks square in most terminal fonts, which puts cell (x, y) at screen
column 2x+1, row y+1.
"""

import curses
import locale
import logging
from contextlib import contextmanager

from domain.constants import (
    APPLE_GLYPH,
    BOARD_HEIGHT,
    BOARD_WIDTH,
    BODY_GLYPH,
    BORDER_GLYPH,
)
from domain.game_state import GameState
from .renderers import Renderer

logger = logging.getLogger(__name__)

WINDOW_ROWS = BOARD_HEIGHT + 2
WINDOW_COLS = BOARD_WIDTH * 2 + 2


@contextmanager
def curses_session():
    """
    Start curses, yield a game window, and always restore the terminal.

    The window is non-blocking (getch returns -1 when no key is pressed),
    decodes arrow keys, and hides the cursor.
    """
    locale.setlocale(locale.LC_ALL, "")
    stdscr = curses.initscr()
    try:
        curses.cbreak()
        curses.noecho()
        window = curses.newwin(WINDOW_ROWS, WINDOW_COLS, 0, 0)
        window.nodelay(True)
        window.keypad(True)
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")
        logger.info("Curses session started (%dx%d window)", WINDOW_COLS, WINDOW_ROWS)
        yield window
    finally:
        stdscr.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        logger.info("Curses session ended")


class CursesRenderer(Renderer):
    """Draws the board, snake, apple and score into a curses window."""

    def __init__(self, window):
        self.window = window

    def draw(self, game_state: GameState) -> None:
        win = self.window
        win.erase()
        border = ord(BORDER_GLYPH)
        win.box(border, border)

        for x, y in game_state.snake_positions:
            win.addstr(y + 1, x * 2 + 1, BODY_GLYPH)

        ax, ay = game_state.apple
        win.addstr(ay + 1, ax * 2 + 1, APPLE_GLYPH)

        score_text = game_state.score_text
        win.addnstr(0, 0, score_text, len(score_text))
        win.refresh()
