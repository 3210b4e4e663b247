"""
Frame clocks for the game loop.

A clock exposes a frame counter (elapsed time divided by the tick period) and
a sleep() that suspends for half a tick. The loop sleeps until the counter
moves on, which gives a fixed tick cadence regardless of how long rendering
and input took, as long as a frame's work fits in one tick.
"""

import time

from domain.constants import TICK_MS


class MonotonicClock:
    """Real time, measured with time.monotonic()."""

    def __init__(self, tick_ms: int = TICK_MS):
        self.tick_ms = tick_ms

    def now_ms(self) -> int:
        return int(time.monotonic() * 1000)

    def frame(self) -> int:
        return self.now_ms() // self.tick_ms

    def sleep(self) -> None:
        """Suspend for half a tick."""
        time.sleep(self.tick_ms / 2 / 1000)


class SteppedClock:
    """
    Virtual time: sleep() advances the clock by half a tick instantly.

    Used for headless simulation and tests, where nothing should actually wait.

    Attributes:
        sleeps: number of sleep() calls so far
    """

    def __init__(self, tick_ms: int = TICK_MS, start_ms: int = 0):
        self.tick_ms = tick_ms
        self._now_ms = start_ms
        self.sleeps = 0

    def now_ms(self) -> int:
        return self._now_ms

    def frame(self) -> int:
        return self._now_ms // self.tick_ms

    def sleep(self) -> None:
        self._now_ms += self.tick_ms // 2
        self.sleeps += 1

    def advance(self, ms: int) -> None:
        """Move virtual time forward without counting a sleep."""
        self._now_ms += ms
