"""
scheduler.py - Variable-rate tick timer.

A single cancellable slot: the controller schedules the next tick after
every tick, so the delay can change with the score. Scheduling replaces
whatever was pending, so there is never more than one tick stream.

The clock is injected (pygame.time.get_ticks in the game, a fake in tests)
and polled once per frame via update().
"""

from typing import Callable, Optional


class TickScheduler:
    """setTimeout/clearTimeout for the pygame main loop."""

    def __init__(self, clock: Callable[[], int]):
        self._clock = clock
        self._due: Optional[int] = None
        self._callback: Optional[Callable[[], None]] = None
        self._fired_due: Optional[int] = None

    @property
    def pending(self) -> bool:
        return self._callback is not None

    @property
    def due(self) -> Optional[int]:
        return self._due

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> None:
        """Run callback delay_ms after now."""
        self._set(self._clock(), delay_ms, callback)

    def reschedule(self, delay_ms: int, callback: Callable[[], None]) -> None:
        """Run callback delay_ms after the tick that just fired was due.

        Frame lateness carries over into the next delay, so ticks keep their
        cadence instead of losing part of a frame every time. Outside a
        callback this behaves like schedule().
        """
        base = self._fired_due if self._fired_due is not None else self._clock()
        self._set(base, delay_ms, callback)

    def cancel(self) -> None:
        self._due = None
        self._callback = None
        self._fired_due = None

    def update(self) -> bool:
        """Fire the pending callback if it is due. Returns True if it fired."""
        if self._callback is None or self._clock() < self._due:
            return False
        callback, due = self._callback, self._due
        # Clear first: the callback normally schedules the next tick.
        self.cancel()
        self._fired_due = due
        try:
            callback()
        finally:
            self._fired_due = None
        return True

    def _set(self, base: int, delay_ms: int, callback: Callable[[], None]) -> None:
        if delay_ms < 0:
            raise ValueError(f"delay must be non-negative, got {delay_ms}")
        self._due = base + delay_ms
        self._callback = callback
