"""
Interval Timer - Repeating tick source polled by an external driver.

The timer owns no thread. Whatever runs the frame loop calls poll() with
the current time in milliseconds and the timer fires its callback once
for every period that has elapsed since it was started.
"""
import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class IntervalTimer:
    """
    Fixed-period tick source.

    Stopping is idempotent. Starting again begins a fresh interval
    measured from the time passed to start().
    """

    # Ticks fired per poll() before the timer gives up catching up
    MAX_CATCH_UP = 5

    def __init__(self, period_ms: int, callback: Callable[[], None]):
        """
        Initialize the timer.

        Args:
            period_ms: Milliseconds between ticks
            callback: Invoked once per tick
        """
        if period_ms <= 0:
            raise ValueError(f"period_ms must be positive, got {period_ms}")

        self.period_ms = period_ms
        self.callback = callback
        self._next_due: Optional[int] = None

    @property
    def active(self) -> bool:
        """True while the timer is scheduled."""
        return self._next_due is not None

    def start(self, now_ms: int) -> None:
        """Schedule the first tick one period after now_ms."""
        self._next_due = now_ms + self.period_ms

    def stop(self) -> None:
        """Cancel the timer. Safe to call when not running."""
        self._next_due = None

    def poll(self, now_ms: int) -> int:
        """
        Fire every tick that is due.

        The callback may stop the timer; no further ticks fire once it does.

        Args:
            now_ms: Current time in milliseconds

        Returns:
            Number of ticks fired
        """
        fired = 0
        while self._next_due is not None and now_ms >= self._next_due:
            if fired >= self.MAX_CATCH_UP:
                # Fell far behind (window drag, debugger): resync instead of bursting
                logger.debug("Timer behind by %d ms, resyncing", now_ms - self._next_due)
                self._next_due = now_ms + self.period_ms
                break

            self._next_due += self.period_ms
            fired += 1
            self.callback()

        return fired
