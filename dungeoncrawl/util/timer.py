"""Wall-clock timer for the fixed-step game loop."""

from __future__ import annotations

import time


class Timer:
    """Measures seconds elapsed between successive calls."""

    def __init__(self) -> None:
        self._previous = time.perf_counter()

    def elapsed(self) -> float:
        """Seconds since creation or the previous call."""
        current = time.perf_counter()
        difference = current - self._previous
        self._previous = current
        return difference