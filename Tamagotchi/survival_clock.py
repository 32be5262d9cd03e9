import time
from typing import Callable, Optional


class SurvivalClock:
    """Measures how long the pet has been alive.

    STOPPED -> RUNNING on start(), RUNNING -> STOPPED on stop(). Repeated
    start/stop calls in the same state do nothing, so the stop instant of a
    finished game stays frozen.
    """

    def __init__(self, time_source: Callable[[], float] = time.monotonic):
        self._now = time_source
        self.start_time: Optional[float] = None
        self.stop_time: Optional[float] = None
        self.running = False

    def start(self):
        if not self.running:
            self.start_time = self._now()
            self.stop_time = None
            self.running = True

    def stop(self):
        if self.running:
            self.stop_time = self._now()
            self.running = False

    def reset(self):
        """Clear both timestamps. Call start() afterwards to count again."""
        self.start_time = None
        self.stop_time = None
        self.running = False

    def elapsed(self) -> float:
        """Seconds between start and now (running) or the stop instant (stopped)."""
        if self.start_time is None:
            return 0.0
        end = self._now() if self.running else self.stop_time
        return max(0.0, end - self.start_time)

    def elapsed_seconds(self) -> int:
        return int(self.elapsed())
