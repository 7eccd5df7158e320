"""A simple elapsed-time timer."""

from __future__ import annotations

import time
from enum import Enum
from typing import Callable


class TimeUnit(Enum):
    """Units that elapsed time can be reported in, valued in nanoseconds."""

    NANOSECONDS = 1
    MILLISECONDS = 1_000_000
    SECONDS = 1_000_000_000


class Timer:
    """Measures time elapsed since creation or the last reset."""

    def __init__(self, clock: Callable[[], int] = time.perf_counter_ns) -> None:
        self._clock = clock
        self._start = clock()

    def reset(self) -> None:
        """Restart the measurement from now."""
        self._start = self._clock()

    def since(self, unit: TimeUnit = TimeUnit.SECONDS) -> float:
        """Return whole units elapsed since the start, truncated, as a float."""
        elapsed = self._clock() - self._start
        return float(elapsed // unit.value)