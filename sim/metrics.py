"""Metrics tracking for elimination runs."""

import time


class SolveMetrics:
    """Collects elimination counters and wall-clock time."""

    def __init__(self):
        self.start_time = None
        self.end_time = None
        self.row_swaps = 0
        self.row_eliminations = 0
        self.points_checked = 0

    def start(self):
        self.start_time = time.time()

    def stop(self):
        self.end_time = time.time()

    @property
    def elapsed(self):
        if self.start_time is None:
            return 0.0
        end = self.end_time if self.end_time else time.time()
        return end - self.start_time

    def summary(self) -> dict[str, int | float]:
        return {
            "row_swaps": self.row_swaps,
            "row_eliminations": self.row_eliminations,
            "points_checked": self.points_checked,
            "elapsed": self.elapsed,
        }
