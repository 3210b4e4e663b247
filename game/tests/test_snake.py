"""
Tests for the tick engine (Snake.update), apple placement and GameState.
"""

import os
import random
import sys
from unittest.mock import Mock

import pytest

# Add game root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.apple import place_apple
from domain.body import Body
from domain.coordinate import Coordinate
from domain.direction import Direction
from domain.errors import AllocationError
from domain.game_state import GameState
from domain.node_pool import NodePool
from domain.snake import Snake, UpdateResult

FAR_APPLE = Coordinate(0, 0)


def grow_snake(pool, head, direction, apples):
    """Build a snake by feeding it apples placed straight ahead."""
    snake = Snake(pool, head=head, direction=direction)
    for apple in apples:
        assert snake.update(apple) is UpdateResult.APPLE
    return snake


class TestSnakeUpdate:
    """Tests for the per-tick state machine."""

    def test_starts_at_board_center_facing_right(self):
        """The default snake is one segment at (10, 10) heading RIGHT."""
        snake = Snake(NodePool())
        assert snake.body.positions() == [(10, 10)]
        assert snake.direction == Direction.RIGHT

    def test_plain_move(self):
        """From (10, 10) heading RIGHT with no apple ahead, the snake moves to (11, 10)."""
        pool = NodePool()
        snake = Snake(pool)

        result = snake.update(FAR_APPLE)

        assert result is UpdateResult.NONE
        assert snake.body.positions() == [(11, 10)]
        assert pool.outstanding == 1

    def test_eating_apple_keeps_new_segment(self):
        """Landing on the apple grows the body by one, head first."""
        snake = Snake(NodePool(), head=Coordinate(11, 10))

        result = snake.update(Coordinate(12, 10))

        assert result is UpdateResult.APPLE
        assert snake.body.positions() == [(12, 10), (11, 10)]

    def test_leaving_left_edge_is_death(self):
        """Moving LEFT from x=0 puts the head at x=-1 and kills the snake."""
        snake = Snake(NodePool(), head=Coordinate(0, 10), direction=Direction.LEFT)

        result = snake.update(FAR_APPLE)

        assert result is UpdateResult.DEATH
        assert snake.head == (-1, 10)
        assert len(snake) == 1

    def test_every_cell_and_direction(self):
        """Length is unchanged without an apple; death happens exactly off-board."""
        for x in range(20):
            for y in range(20):
                for d in Direction:
                    pool = NodePool()
                    start = Coordinate(x, y)
                    snake = Snake(pool, head=start, direction=d)

                    # The apple sits on the old head, so it can never be eaten
                    result = snake.update(start)

                    new_head = start + d.offset
                    assert len(snake) == 1
                    assert snake.head == new_head
                    if new_head.in_bounds():
                        assert result is UpdateResult.NONE
                    else:
                        assert result is UpdateResult.DEATH

                    snake.teardown()
                    assert pool.outstanding == 0

    def test_growth_then_steady_length(self):
        """Each apple adds one segment; later plain moves keep the length."""
        pool = NodePool()
        snake = grow_snake(pool, Coordinate(5, 5), Direction.RIGHT,
                           [Coordinate(6, 5), Coordinate(7, 5)])
        assert len(snake) == 3

        assert snake.update(FAR_APPLE) is UpdateResult.NONE
        assert snake.body.positions() == [(8, 5), (7, 5), (6, 5)]
        assert pool.outstanding == len(snake)

    def test_turning_into_own_body_is_not_death(self):
        """The head may cross the body; only walls kill."""
        snake = grow_snake(NodePool(), Coordinate(5, 5), Direction.RIGHT,
                           [Coordinate(6, 5), Coordinate(7, 5), Coordinate(8, 5), Coordinate(9, 5)])
        assert snake.body.positions() == [(9, 5), (8, 5), (7, 5), (6, 5), (5, 5)]

        snake.update_input(Direction.UP)
        assert snake.update(FAR_APPLE) is UpdateResult.NONE
        snake.update_input(Direction.LEFT)
        assert snake.update(FAR_APPLE) is UpdateResult.NONE
        snake.update_input(Direction.DOWN)
        result = snake.update(FAR_APPLE)

        assert result is UpdateResult.NONE
        assert snake.head == (8, 5)
        assert snake.body.positions().count(Coordinate(8, 5)) == 2

    def test_reversal_request_keeps_heading(self):
        """A reversal request between ticks does not change where the head goes."""
        snake = Snake(NodePool())
        snake.update_input(Direction.LEFT)
        snake.update(FAR_APPLE)
        assert snake.head == (11, 10)

    def test_allocation_failure_propagates(self):
        """Running out of nodes mid-tick raises instead of returning an outcome."""
        snake = Snake(NodePool(capacity=1))

        with pytest.raises(AllocationError):
            snake.update(FAR_APPLE)

    def test_teardown_releases_all_segments(self):
        """Tearing the snake down empties the pool."""
        pool = NodePool()
        snake = grow_snake(pool, Coordinate(5, 5), Direction.RIGHT,
                           [Coordinate(6, 5), Coordinate(7, 5)])
        snake.teardown()
        assert pool.deinit() is True


class TestPlaceApple:
    """Tests for apple placement."""

    def test_apple_never_on_body(self):
        """Placed apples never coincide with a body segment."""
        pool = NodePool()
        body = Body(pool, Coordinate(0, 0))
        for x in range(1, 20):
            body.grow_front(Coordinate(x, 0))

        rng = random.Random(99)
        for _ in range(200):
            apple = place_apple(rng, body)
            assert apple not in body
            assert apple.in_bounds()

    def test_rejected_draws_are_retried(self):
        """Draws on the body are discarded until a free cell comes up."""
        body = Body(NodePool(), Coordinate(10, 10))
        rng = Mock()
        rng.randrange.side_effect = [10, 10, 10, 10, 3, 4]

        assert place_apple(rng, body) == Coordinate(3, 4)
        assert rng.randrange.call_count == 6

    def test_only_free_cell_is_found(self):
        """With a single free cell left, that cell is returned."""
        body = Body(NodePool(), Coordinate(0, 0))
        for y in range(20):
            for x in range(20):
                if (x, y) in ((0, 0), (19, 19)):
                    continue
                body.grow_front(Coordinate(x, y))
        assert len(body) == 399

        assert place_apple(random.Random(5), body) == Coordinate(19, 19)


class TestGameState:
    """Tests for the GameState snapshot."""

    def make_state(self, **overrides):
        params = dict(
            tick_number=3,
            snake_positions=[(5, 5), (4, 5), (3, 5)],
            apple=(7, 2),
            score=2,
            direction=Direction.RIGHT,
        )
        params.update(overrides)
        return GameState(**params)

    def test_defaults(self):
        """Board size defaults to 20x20 and the snake to alive."""
        state = self.make_state()
        assert state.width == 20
        assert state.height == 20
        assert state.alive is True
        assert state.head == (5, 5)

    def test_score_text(self):
        """The score line reads 'Score: N'."""
        assert self.make_state(score=12).score_text == "Score: 12"

    def test_print_board_marks_cells(self):
        """Head, body and apple land in the right rows and columns."""
        board = self.make_state().print_board().split("\n")

        # 20 rows plus the x-axis label line, row 0 first
        assert len(board) == 21
        assert board[0].startswith(" 0 ")

        row5 = board[5].split()
        assert row5[0] == "5"
        assert row5[1 + 5] == "H"
        assert row5[1 + 4] == "T"
        assert row5[1 + 3] == "T"

        row2 = board[2].split()
        assert row2[1 + 7] == "A"

    def test_print_board_skips_dead_snake(self):
        """A dead snake is not drawn."""
        board = self.make_state(alive=False).print_board()
        assert "H" not in board
        assert "T" not in board

    def test_print_board_ignores_off_board_head(self):
        """An off-board head after death-by-wall does not break rendering."""
        board = self.make_state(snake_positions=[(-1, 10)]).print_board()
        assert "H" not in board

    def test_repr(self):
        """GameState has a useful string representation."""
        text = repr(self.make_state())
        assert "tick=3" in text
        assert "score=2" in text
