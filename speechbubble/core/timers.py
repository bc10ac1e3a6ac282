"""
Millisecond timer scheduler driven by the fixed-timestep game loop.

Timers are repeating callbacks registered at a millisecond interval. The
game loop advances the scheduler every fixed update; due timers fire in
time order and each callback runs to completion before the next one.

Usage:
    handle = scheduler.every(100, on_tick)
    ...
    scheduler.update(dt)      # from Scene/Game update
    ...
    handle.cancel()           # or scheduler.cancel(handle)
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable

logger = logging.getLogger(__name__)


TimerCallback = Callable[[], None]


@dataclass(eq=False)
class TimerHandle:
    """
    A registered repeating timer.

    Attributes:
        interval_ms: Time between firings
        callback: Function called on each firing
        next_due_ms: Scheduler time of the next firing
        order: Registration sequence, breaks ties between timers due together
    """
    interval_ms: float
    callback: TimerCallback
    next_due_ms: float
    order: int
    _scheduler: TimerScheduler | None = field(default=None, repr=False)

    @property
    def active(self) -> bool:
        """Whether the timer is still registered."""
        return self._scheduler is not None

    def cancel(self) -> None:
        """Unregister the timer. Safe to call more than once."""
        if self._scheduler is not None:
            self._scheduler.cancel(self)


class TimerScheduler:
    """
    Cooperative scheduler for repeating timers.

    Single-threaded: firings happen only inside update()/advance(), so a
    timer cancelled from any callback never fires again.
    """

    def __init__(self):
        self._timers: list[TimerHandle] = []
        self._now_ms: float = 0.0
        self._sequence = itertools.count()

    @property
    def now_ms(self) -> float:
        """Scheduler time in milliseconds."""
        return self._now_ms

    @property
    def active_count(self) -> int:
        """Number of registered timers."""
        return len(self._timers)

    def every(self, interval_ms: float, callback: TimerCallback) -> TimerHandle:
        """
        Register a repeating callback.

        The first firing happens one interval from now.

        Raises:
            ValueError: If interval_ms is not positive
        """
        if interval_ms <= 0:
            raise ValueError(f"Timer interval must be positive, got {interval_ms}")

        handle = TimerHandle(
            interval_ms=interval_ms,
            callback=callback,
            next_due_ms=self._now_ms + interval_ms,
            order=next(self._sequence),
            _scheduler=self,
        )
        self._timers.append(handle)
        return handle

    def cancel(self, handle: TimerHandle) -> None:
        """Unregister a timer. Unknown or already-cancelled handles are ignored."""
        if handle in self._timers:
            self._timers.remove(handle)
        handle._scheduler = None

    def clear(self) -> None:
        """Cancel every timer."""
        for handle in list(self._timers):
            self.cancel(handle)

    def update(self, dt: float) -> None:
        """
        Advance by a game-loop delta.

        Args:
            dt: Delta time in seconds
        """
        self.advance(dt * 1000.0)

    def advance(self, ms: float) -> None:
        """Advance the clock by `ms` milliseconds, firing every due timer."""
        target = self._now_ms + ms

        while True:
            timer = self._next_due(target)
            if timer is None:
                break

            self._now_ms = timer.next_due_ms
            timer.next_due_ms += timer.interval_ms

            try:
                timer.callback()
            except Exception:
                logger.exception("Error in timer callback %r", timer.callback)

        self._now_ms = target

    def _next_due(self, target: float) -> TimerHandle | None:
        """Earliest timer due at or before `target`."""
        due = [t for t in self._timers if t.next_due_ms <= target]
        if not due:
            return None
        return min(due, key=lambda t: (t.next_due_ms, t.order))
