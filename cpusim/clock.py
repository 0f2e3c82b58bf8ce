"""A simple cycle-counting clock."""

import time


class Clock:
    """Counts cycles, optionally pausing for ``delay_ms`` milliseconds per tick."""

    def __init__(self, delay_ms: int = 0) -> None:
        self._cycle = 0
        self._delay_ms = delay_ms

    def tick(self) -> None:
        """Advance the clock by one cycle."""
        self._cycle += 1
        if self._delay_ms > 0:
            time.sleep(self._delay_ms / 1000)

    def reset(self) -> None:
        """Set the cycle count back to zero."""
        self._cycle = 0

    @property
    def cycle(self) -> int:
        """The number of cycles elapsed since construction or the last reset."""
        return self._cycle