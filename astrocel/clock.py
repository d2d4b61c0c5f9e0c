"""Frame timing and simulation time scale."""

from __future__ import annotations

import time
from collections.abc import Callable


class Clock:
    """Tracks the time elapsed between updates and a simulation time scale."""

    def __init__(self, time_source: Callable[[], float] = time.perf_counter) -> None:
        self._time_source = time_source
        self.delta_time: float = 0.0
        self.time_scale: float = 0.0
        self._previous_time = time_source()

    def update_delta_time(self) -> float:
        """Measure the time since the previous update and return it in seconds."""
        current = self._time_source()
        self.delta_time = current - self._previous_time
        self._previous_time = current
        return self.delta_time