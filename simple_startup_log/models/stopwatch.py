"""Wall-clock stopwatch used to time application startup."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable


def current_millis() -> int:
    """Return the current wall-clock time in milliseconds since the epoch."""
    return int(time.time() * 1000)


@dataclass
class StopWatch:
    """Two timestamps in epoch milliseconds.

    ``stop()`` must be called after ``start()``; the order is not checked and
    the elapsed value is meaningless otherwise.
    """

    start_ms: int = 0
    end_ms: int = 0
    clock: Callable[[], int] = field(default=current_millis, repr=False, compare=False)

    def start(self) -> None:
        self.start_ms = self.clock()

    def stop(self) -> None:
        self.end_ms = self.clock()

    def total_time_millis(self) -> int:
        return self.end_ms - self.start_ms

    def elapsed_seconds(self) -> float:
        return self.total_time_millis() / 1000.0
