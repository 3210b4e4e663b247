"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Tuple

from .constants import BOARD_WIDTH, BOARD_HEIGHT
from .direction import Direction


class GameState:
    """
    A snapshot of the game at a specific point in time.

    This is what players and renderers get to see; it holds plain copies, so
    nothing handed out here aliases the live body.

    Attributes:
        tick_number: how many ticks have been simulated (0-based)
        snake_positions: list of (x, y) from head to tail
        apple: (x, y) of the current apple
        score: apples eaten so far
        direction: current heading of the snake
        alive: whether the snake is still alive
        width, height: board dimensions
    """

    def __init__(
        self,
        tick_number: int,
        snake_positions: List[Tuple[int, int]],
        apple: Tuple[int, int],
        score: int,
        direction: Direction,
        alive: bool = True,
        width: int = BOARD_WIDTH,
        height: int = BOARD_HEIGHT,
    ):
        self.tick_number = tick_number
        self.snake_positions = snake_positions
        self.apple = apple
        self.score = score
        self.direction = direction
        self.alive = alive
        self.width = width
        self.height = height

    @property
    def head(self) -> Tuple[int, int]:
        return self.snake_positions[0]

    @property
    def score_text(self) -> str:
        return f"Score: {self.score}"

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        A = apple
        H = snake head
        T = snake body/tail
        Row 0 is printed first (top of the screen), x-axis labels at the bottom.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        ax, ay = self.apple
        if 0 <= ax < self.width and 0 <= ay < self.height:
            board[ay][ax] = 'A'

        if self.alive:
            # Draw tail first so the head wins if segments overlap
            for pos_idx in range(len(self.snake_positions) - 1, -1, -1):
                x, y = self.snake_positions[pos_idx]
                if not (0 <= x < self.width and 0 <= y < self.height):
                    continue
                board[y][x] = 'H' if pos_idx == 0 else 'T'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(self.height)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, apple={self.apple}, "
            f"length={len(self.snake_positions)}, score={self.score}>"
        )
