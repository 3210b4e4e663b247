"""
Tests for clocks, renderers and the curses session.
"""

import io
import os
import sys
from unittest.mock import MagicMock, Mock, call, patch

import pytest

# Add game root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.direction import Direction
from domain.game_state import GameState
from services.clock import MonotonicClock, SteppedClock
from services.curses_ui import CursesRenderer, curses_session, WINDOW_ROWS, WINDOW_COLS
from services.renderers import NullRenderer, TextRenderer


def make_state():
    return GameState(
        tick_number=4,
        snake_positions=[(3, 2), (2, 2)],
        apple=(7, 5),
        score=1,
        direction=Direction.RIGHT,
    )


class TestClocks:
    """Tests for frame clocks."""

    def test_stepped_clock_half_tick_sleeps(self):
        """Two sleeps make one frame with the default 200ms tick."""
        clock = SteppedClock()
        assert clock.frame() == 0
        clock.sleep()
        assert clock.frame() == 0
        clock.sleep()
        assert clock.frame() == 1
        assert clock.sleeps == 2

    def test_stepped_clock_advance(self):
        clock = SteppedClock(tick_ms=100)
        clock.advance(250)
        assert clock.frame() == 2
        assert clock.sleeps == 0

    @patch("services.clock.time.monotonic", return_value=12.5)
    def test_monotonic_clock_frame(self, mock_monotonic):
        """frame() is elapsed milliseconds floor-divided by the tick period."""
        clock = MonotonicClock()
        assert clock.now_ms() == 12500
        assert clock.frame() == 12500 // 200

    @patch("services.clock.time.sleep")
    def test_monotonic_clock_sleeps_half_a_tick(self, mock_sleep):
        MonotonicClock(tick_ms=200).sleep()
        mock_sleep.assert_called_once_with(0.1)


class TestRenderers:
    """Tests for the terminal-free renderers."""

    def test_null_renderer_counts_frames(self):
        renderer = NullRenderer()
        renderer.draw(make_state())
        renderer.draw(make_state())
        assert renderer.frames_drawn == 2

    def test_text_renderer_writes_score_and_board(self):
        stream = io.StringIO()
        TextRenderer(stream).draw(make_state())

        text = stream.getvalue()
        assert "Score: 1" in text
        assert "H" in text and "A" in text


class TestCursesRenderer:
    """Tests for the curses renderer against a mock window."""

    def test_draws_box_body_apple_and_score(self):
        window = Mock()
        CursesRenderer(window).draw(make_state())

        window.erase.assert_called_once_with()
        window.box.assert_called_once_with(ord("*"), ord("*"))
        # Cell (x, y) sits at row y+1, column 2x+1
        window.addstr.assert_has_calls([
            call(3, 7, "██"),
            call(3, 5, "██"),
            call(6, 15, "@@"),
        ])
        window.addnstr.assert_called_once_with(0, 0, "Score: 1", len("Score: 1"))
        window.refresh.assert_called_once_with()


class TestCursesSession:
    """Tests for terminal setup and teardown."""

    @patch("services.curses_ui.locale")
    @patch("services.curses_ui.curses")
    def test_session_configures_window(self, mock_curses, mock_locale):
        window = MagicMock()
        mock_curses.newwin.return_value = window

        with curses_session() as win:
            assert win is window

        mock_curses.newwin.assert_called_once_with(WINDOW_ROWS, WINDOW_COLS, 0, 0)
        window.nodelay.assert_called_once_with(True)
        window.keypad.assert_called_once_with(True)
        mock_curses.cbreak.assert_called_once_with()
        mock_curses.noecho.assert_called_once_with()
        mock_curses.endwin.assert_called_once_with()

    @patch("services.curses_ui.locale")
    @patch("services.curses_ui.curses")
    def test_session_restores_terminal_on_error(self, mock_curses, mock_locale):
        with pytest.raises(RuntimeError):
            with curses_session():
                raise RuntimeError("boom")

        mock_curses.endwin.assert_called_once_with()

    def test_window_fits_board(self):
        """The window holds the 20x20 board, two columns per cell, plus a border."""
        assert WINDOW_ROWS == 22
        assert WINDOW_COLS == 42
