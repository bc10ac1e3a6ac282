"""
Reveal clock - advances a cursor over a message one character per tick.
"""

from __future__ import annotations

from typing import Callable, Optional

from speechbubble.core.timers import TimerHandle, TimerScheduler


class RevealClock:
    """
    Single-timer typewriter clock.

    Each firing reveals one more character by calling on_tick with the new
    prefix length. The firing after the last character stops the timer and
    calls on_complete once.

    At most one timer is registered at a time: start() cancels the previous
    one before registering, and stop()/pause() unregister synchronously.
    """

    def __init__(self, scheduler: TimerScheduler):
        self._scheduler = scheduler
        self._handle: Optional[TimerHandle] = None
        self._paused = False

        self._message = ""
        self._cursor = 0
        self._interval_ms: float = 0

        self._on_tick: Optional[Callable[[int], None]] = None
        self._on_complete: Optional[Callable[[], None]] = None

    @property
    def message(self) -> str:
        return self._message

    @property
    def cursor(self) -> int:
        """Number of characters revealed so far."""
        return self._cursor

    @property
    def running(self) -> bool:
        """True while a timer is registered."""
        return self._handle is not None

    @property
    def paused(self) -> bool:
        return self._paused

    def start(
        self,
        message: str,
        interval_ms: float,
        on_tick: Callable[[int], None],
        on_complete: Callable[[], None],
    ) -> None:
        """Begin revealing `message` from the first character."""
        self.stop()

        self._message = message
        self._cursor = 0
        self._interval_ms = interval_ms
        self._on_tick = on_tick
        self._on_complete = on_complete

        self._handle = self._scheduler.every(interval_ms, self._fire)

    def stop(self) -> None:
        """Cancel the timer. Does nothing when already stopped."""
        if self._handle is not None:
            self._scheduler.cancel(self._handle)
            self._handle = None
        self._paused = False

    def pause(self) -> None:
        """Unregister the timer but keep the cursor."""
        if self._handle is not None:
            self._scheduler.cancel(self._handle)
            self._handle = None
            self._paused = True

    def resume(self) -> None:
        """Re-register a paused timer; the next firing is one interval away."""
        if self._paused:
            self._paused = False
            self._handle = self._scheduler.every(self._interval_ms, self._fire)

    def _fire(self) -> None:
        handle = self._handle
        if handle is None:
            # Stale firing after stop()
            return

        if self._cursor < len(self._message):
            position = self._cursor + 1
            try:
                self._on_tick(position)
            except Exception:
                self.stop()
                raise
            # on_tick may have restarted or stopped the clock
            if self._handle is handle:
                self._cursor = position
        else:
            self.stop()
            self._on_complete()
