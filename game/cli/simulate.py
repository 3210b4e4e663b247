#!/usr/bin/env python3
"""Headless autopilot runs of the snake game.

Plays a batch of games with the random autopilot, virtual time and no
rendering, then logs a score summary. Useful for smoke-testing the engine and
for checking that no run leaks body nodes.

Usage examples (from the game/ directory):

    python cli/simulate.py --games 100 --seed 7

    python cli/simulate.py --games 10 --max-ticks 500 --log-level DEBUG
"""

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# Ensure game modules are importable
GAME_ROOT = Path(__file__).resolve().parent.parent
if str(GAME_ROOT) not in sys.path:
    sys.path.insert(0, str(GAME_ROOT))

import config  # noqa: E402
from main import run_game  # noqa: E402
from players.random_player import RandomPlayer  # noqa: E402
from services.clock import SteppedClock  # noqa: E402
from services.renderers import NullRenderer  # noqa: E402


logger = logging.getLogger(__name__)

DEFAULT_MAX_TICKS = 2000


def simulate_game(seed: int, max_ticks: Optional[int] = DEFAULT_MAX_TICKS) -> Dict[str, Any]:
    """Play one autopilot game and return its summary."""
    rng = random.Random(seed)
    player = RandomPlayer(random.Random(seed + 1))
    result = run_game(player, NullRenderer(), SteppedClock(), rng, max_ticks=max_ticks)
    result["seed"] = seed
    return result


def summarize(results: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Aggregate per-game summaries."""
    if not results:
        return {"games": 0, "mean_score": 0.0, "max_score": 0, "deaths": 0, "leaks": 0}

    scores = [r["score"] for r in results]
    return {
        "games": len(results),
        "mean_score": sum(scores) / len(scores),
        "max_score": max(scores),
        "deaths": sum(1 for r in results if r["end_reason"] == "death"),
        "leaks": sum(1 for r in results if not r["leak_free"]),
    }


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Run headless autopilot snake games and report scores",
    )
    parser.add_argument(
        "--games",
        type=int,
        default=20,
        help="Number of games to play (default: 20)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Base seed; game i uses seed+i (default: $SNAKE_SEED or 0)",
    )
    parser.add_argument(
        "--max-ticks",
        type=int,
        default=DEFAULT_MAX_TICKS,
        help=f"Tick limit per game (default: {DEFAULT_MAX_TICKS})",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Logging level (default: $SNAKE_LOG_LEVEL or INFO)",
    )

    args = parser.parse_args(argv)

    config.configure_logging(args.log_level)

    base_seed = args.seed
    if base_seed is None:
        base_seed = config.get_seed() or 0

    results = []
    for idx in range(args.games):
        result = simulate_game(base_seed + idx, max_ticks=args.max_ticks)
        logger.info(
            "[%d/%d] seed=%d score=%d ticks=%d end=%s",
            idx + 1,
            args.games,
            result["seed"],
            result["score"],
            result["ticks"],
            result["end_reason"],
        )
        results.append(result)

    summary = summarize(results)
    logger.info(
        "Done. games=%d, mean_score=%.2f, max_score=%d, deaths=%d, leaks=%d",
        summary["games"],
        summary["mean_score"],
        summary["max_score"],
        summary["deaths"],
        summary["leaks"],
    )

    return 1 if summary["leaks"] else 0


if __name__ == "__main__":
    sys.exit(main())
