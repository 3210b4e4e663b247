import argparse
import logging
import random
import sys
from typing import Any, Dict, Optional, TextIO

import config
from domain.apple import place_apple
from domain.constants import QUIT
from domain.coordinate import Coordinate, SCREEN
from domain.direction import Direction
from domain.game_state import GameState
from domain.node_pool import NodePool
from domain.snake import Snake, UpdateResult
from players.base import Player
from players.variant_registry import AVAILABLE_PLAYERS, get_player_class
from services.clock import MonotonicClock, SteppedClock
from services.renderers import Renderer, TextRenderer

logger = logging.getLogger(__name__)


class SnakeGame:
    """
    Manages:
      - The snake (body + direction)
      - The apple
      - Score
      - Tick counter and frame pacing
      - The player (input) and renderer (output) collaborators
    """
    def __init__(
        self,
        player: Player,
        renderer: Renderer,
        clock,
        rng: random.Random,
        pool: Optional[NodePool] = None,
        max_ticks: Optional[int] = None,
    ):
        self.player = player
        self.renderer = renderer
        self.clock = clock
        self.rng = rng
        self.pool = pool if pool is not None else NodePool()
        self.max_ticks = max_ticks

        self.snake = Snake(self.pool, head=SCREEN // 2, direction=Direction.RIGHT)
        self.apple: Coordinate = place_apple(rng, self.snake.body)
        self.score = 0
        self.tick_number = 0
        self.game_over = False
        self.end_reason: Optional[str] = None

        self.frame = clock.frame()

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick_number=self.tick_number,
            snake_positions=[tuple(pos) for pos in self.snake.body],
            apple=tuple(self.apple),
            score=self.score,
            direction=self.snake.direction,
            alive=self.end_reason != "death",
        )

    def run_frame(self) -> Optional[UpdateResult]:
        """
        Execute one frame:
          1) Render the current state
          2) Sample the player's input (QUIT ends the game right here)
          3) Advance the snake one tick
          4) Handle apple-eating (score + new apple) or death

        Returns the tick outcome, or None if no tick was run.
        """
        if self.game_over:
            logger.warning("Game is already over. No more frames.")
            return None

        state = self.get_current_state()
        self.renderer.draw(state)

        move = self.player.get_move(state)
        if move == QUIT:
            self.end_game("quit")
            return None
        if move is not None:
            self.snake.update_input(move)

        result = self.snake.update(self.apple)
        self.tick_number += 1

        if result is UpdateResult.APPLE:
            self.score += 1
            self.apple = place_apple(self.rng, self.snake.body)
            logger.debug("Apple eaten at tick %d, score %d, next apple at %s",
                         self.tick_number, self.score, self.apple)
        elif result is UpdateResult.DEATH:
            self.end_game("death")

        if not self.game_over and self.max_ticks is not None and self.tick_number >= self.max_ticks:
            self.end_game("max_ticks")

        return result

    def wait_for_next_tick(self):
        """Sleep in half-tick steps until the clock reaches the next frame."""
        while self.clock.frame() == self.frame:
            self.clock.sleep()
        self.frame = self.clock.frame()

    def run(self) -> Dict[str, Any]:
        """Run frames until the game ends and return a summary."""
        logger.info("Game started: head at %s, apple at %s", self.snake.head, self.apple)
        while not self.game_over:
            self.run_frame()
            if self.game_over:
                break
            self.wait_for_next_tick()
        return self.summary()

    def end_game(self, reason: str):
        self.game_over = True
        self.end_reason = reason
        logger.info("Game Over: %s after %d ticks, score %d, length %d",
                    reason, self.tick_number, self.score, len(self.snake))

    def summary(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "ticks": self.tick_number,
            "end_reason": self.end_reason,
            "length": len(self.snake),
        }

    def close(self) -> bool:
        """
        Release the snake's body and check the pool for leaks.

        Must be called exactly once, after the game is over.

        Returns:
            True if no body nodes are still outstanding.
        """
        self.teardown()
        return self.check_leaks()

    def teardown(self):
        """Release every body node back to the pool. Must be called exactly once."""
        self.snake.teardown()

    def check_leaks(self) -> bool:
        """Return True if the pool has no outstanding nodes (logs each leak otherwise)."""
        return self.pool.deinit()


# -------------------------------
# Game Runner
# -------------------------------

def run_game(
    player: Player,
    renderer: Renderer,
    clock,
    rng: random.Random,
    pool: Optional[NodePool] = None,
    max_ticks: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Play a single game to completion.

    The body is always torn down afterwards, even if the game loop raised.

    Returns:
        The game summary plus 'leak_free' (bool) from the shutdown check.
    """
    game = SnakeGame(player, renderer, clock, rng, pool=pool, max_ticks=max_ticks)
    try:
        result = play_game(game)
    finally:
        leak_free = game.check_leaks()
    result["leak_free"] = leak_free
    return result


def play_game(game: SnakeGame) -> Dict[str, Any]:
    """Run the game, then release its body even if the loop raised."""
    try:
        return game.run()
    finally:
        game.teardown()


def report_shutdown(score: int, leak_free: bool,
                    out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """
    Print the final score and turn the leak check into a process exit code.

    Returns:
        0 on a clean shutdown, 1 if body nodes were leaked.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    print(f"Game over, score: {score}", file=out)
    if not leak_free:
        print("Memory leak detected.", file=err)
        return 1
    return 0


def _build_player(player_key: str, window, rng: random.Random) -> Player:
    player_cls = get_player_class(player_key)
    if player_key == "keyboard":
        return player_cls(window)
    if player_key == "random":
        return player_cls(random.Random(rng.getrandbits(32)))
    return player_cls()


# -------------------------------
# Main Entry Point
# -------------------------------
def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Play snake in the terminal on a 20x20 board."
    )
    parser.add_argument("--player", type=str, choices=AVAILABLE_PLAYERS,
                        default=config.get_player_key(),
                        help="Who steers the snake (default: $SNAKE_PLAYER or keyboard)")
    parser.add_argument("--ui", type=str, choices=["curses", "text"], default=None,
                        help="Render with curses or plain text (default: curses for keyboard, text otherwise)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for apple placement (default: $SNAKE_SEED or random)")
    parser.add_argument("--max-ticks", type=int, default=None,
                        help="Stop after this many ticks (default: no limit)")
    parser.add_argument("--no-delay", action="store_true",
                        help="Use virtual time instead of waiting 200ms per tick")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (default: $SNAKE_LOG_LEVEL or INFO)")

    args = parser.parse_args(argv)

    # argparse does not check the environment-supplied default against choices
    player_key = config.normalize_player_key(args.player)
    if player_key not in AVAILABLE_PLAYERS:
        parser.error(f"unknown player '{args.player}' (choose from {', '.join(AVAILABLE_PLAYERS)})")

    ui = args.ui or ("curses" if player_key == "keyboard" else "text")
    if player_key == "keyboard" and ui != "curses":
        parser.error("the keyboard player needs --ui curses")

    config.configure_logging(args.log_level, terminal_ui=(ui == "curses"))

    seed = args.seed if args.seed is not None else config.get_seed()
    rng = random.Random(seed)
    clock = SteppedClock() if args.no_delay else MonotonicClock()
    logger.info("Starting game: player=%s ui=%s seed=%s", player_key, ui, seed)

    game = None
    try:
        if ui == "curses":
            from services.curses_ui import CursesRenderer, curses_session

            with curses_session() as window:
                game = SnakeGame(_build_player(player_key, window, rng), CursesRenderer(window),
                                 clock, rng, max_ticks=args.max_ticks)
                play_game(game)
        else:
            game = SnakeGame(_build_player(player_key, None, rng), TextRenderer(),
                             clock, rng, max_ticks=args.max_ticks)
            play_game(game)
    finally:
        # The terminal is restored by now, so leak diagnostics and the score
        # line are readable even when the game died with an exception.
        score = game.score if game is not None else 0
        leak_free = game.check_leaks() if game is not None else True
        exit_code = report_shutdown(score, leak_free)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
