"""Millisecond interval timer."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Reports when more than a given number of milliseconds have passed."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock if clock is not None else time.monotonic
        self._mark = 0.0
        self.delay_ms = -1

    def start(self, delay_ms: int) -> None:
        """Set the interval and restart counting from now."""
        self.delay_ms = delay_ms
        self._mark = self._clock()

    def stop(self) -> None:
        self.delay_ms = -1

    def update(self, delay_ms: int) -> None:
        """Change the interval and restart counting from now."""
        self.start(delay_ms)

    def elapsed_ms(self) -> int:
        """Whole milliseconds since the last restart."""
        return int((self._clock() - self._mark) * 1000)

    def time_over(self) -> bool:
        """Return True and restart if the interval has passed."""
        if self.elapsed_ms() > self.delay_ms:
            self._mark = self._clock()
            return True
        return False

    def describe(self) -> str:
        return f"Timer:  {self.elapsed_ms()}"