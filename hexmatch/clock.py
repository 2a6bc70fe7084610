"""Frame clock measuring elapsed and per-frame time in milliseconds."""

from __future__ import annotations

import time
from typing import Callable


class Clock:
    """Tracks time since creation and the duration of the last frame."""

    def __init__(
        self,
        counter: Callable[[], int] = time.perf_counter_ns,
        frequency: float = 1_000_000_000,
    ) -> None:
        self._counter = counter
        self._frequency = float(frequency)
        self._start = counter()
        self._now = self._start
        self._last = 0
        self.delta_ms = 0.0

    def _to_ms(self, counts: float) -> float:
        return counts / self._frequency * 1000.0

    def elapsed_ms(self) -> float:
        """Milliseconds since the clock was created."""
        return self._to_ms(self._counter() - self._start)

    def update(self) -> None:
        """Mark the end of a frame and recompute ``delta_ms``."""
        self._last = self._now
        self._now = self._counter()
        self.delta_ms = self._to_ms(self._now - self._last)