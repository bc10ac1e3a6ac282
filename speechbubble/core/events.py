"""
Typed event bus.

Scene lifecycle hooks, dialog progress and audio playback are announced
here, so the dialog stack never needs a reference to the scene manager.

Usage:
    event_bus.subscribe(EngineEvent.SCENE_PUSHED, on_scene_pushed)
    event_bus.publish(DialogEvent.STARTED, message="Hello")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable


class EngineEvent(Enum):
    """Game and scene lifecycle."""
    GAME_START = auto()
    GAME_QUIT = auto()

    SCENE_PUSHED = auto()
    SCENE_POPPED = auto()
    SCENE_SWITCHED = auto()


class DialogEvent(Enum):
    """Dialog bubble lifecycle."""
    STARTED = auto()
    FINISHED = auto()
    CANCELLED = auto()


class AudioEvent(Enum):
    SFX_PLAYED = auto()


@dataclass
class Event:
    """An event type plus its keyword data."""
    type: Enum
    data: dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]


EventHandler = Callable[[Event], None]


class EventBus:
    """
    Publish/subscribe by event type.

    Handlers run in subscription order. An event published from inside a
    handler is queued and dispatched after the current one finishes, so
    handlers never re-enter each other.
    """

    def __init__(self):
        self._handlers: dict[Enum, list[EventHandler]] = {}
        self._queue: list[Event] = []
        self._dispatching = False

    def subscribe(self, event_type: Enum, handler: EventHandler) -> None:
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: Enum, handler: EventHandler) -> None:
        """Remove a handler. Unknown handlers are ignored."""
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)

    def publish(self, event_type: Enum, **data: Any) -> Event:
        """
        Publish an event to every handler of its type.

        Returns:
            The Event object that was (or will be) dispatched
        """
        event = Event(type=event_type, data=data)
        self._queue.append(event)

        if not self._dispatching:
            self._drain()

        return event

    def _drain(self) -> None:
        self._dispatching = True
        try:
            while self._queue:
                event = self._queue.pop(0)
                for handler in list(self._handlers.get(event.type, [])):
                    try:
                        handler(event)
                    except Exception:
                        logging.exception(f"Error in event handler for {event.type}")
        finally:
            self._dispatching = False
