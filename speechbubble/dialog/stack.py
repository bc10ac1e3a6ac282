"""
Process-wide stack of dialog controllers tied to the scene stack.

A dialog belongs to the scene it was started in. Pushing a scene pauses
the current speaker and gives the new scene a fresh controller; popping a
scene cancels its controller, so no timer keeps drawing on a torn-down
sprite, and resumes the one underneath.

Usage:
    dialogs = init_dialog_stack(scheduler, event_bus, audio=audio)
    dialogs.current().start("Hello!", Volume.LOUD)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from speechbubble.core.events import EngineEvent, Event
from speechbubble.dialog.config import DialogConfig
from speechbubble.dialog.controller import DialogController

if TYPE_CHECKING:
    from speechbubble.audio.manager import AudioManager
    from speechbubble.core.events import EventBus
    from speechbubble.core.timers import TimerScheduler

logger = logging.getLogger(__name__)


class DialogStack:
    """
    Ordered controllers; the top one is the active speaker.

    Scene hooks are registered once, when the stack is created, and
    removed by close().
    """

    def __init__(
        self,
        scheduler: TimerScheduler,
        event_bus: EventBus,
        audio: Optional[AudioManager] = None,
        config: Optional[DialogConfig] = None,
    ):
        self.scheduler = scheduler
        self.event_bus = event_bus
        self.audio = audio
        self.config = config or DialogConfig()

        self._stack: list[DialogController] = []

        event_bus.subscribe(EngineEvent.SCENE_PUSHED, self._on_scene_pushed)
        event_bus.subscribe(EngineEvent.SCENE_POPPED, self._on_scene_popped)
        event_bus.subscribe(EngineEvent.SCENE_SWITCHED, self._on_scene_switched)

    def __len__(self) -> int:
        return len(self._stack)

    @property
    def controllers(self) -> tuple[DialogController, ...]:
        """Bottom to top."""
        return tuple(self._stack)

    def create_controller(self) -> DialogController:
        return DialogController(
            self.scheduler,
            audio=self.audio,
            config=self.config,
            event_bus=self.event_bus,
        )

    def current(self) -> DialogController:
        """The active controller, created if the stack is empty."""
        if not self._stack:
            self._stack.append(self.create_controller())
        return self._stack[-1]

    def on_scene_push(self) -> DialogController:
        """Pause the current speaker and push a fresh idle controller."""
        if self._stack:
            self._stack[-1].pause()

        controller = self.create_controller()
        self._stack.append(controller)
        logger.debug(f"Dialog controller pushed (depth {len(self._stack)})")
        return controller

    def on_scene_pop(self) -> None:
        """Cancel and discard the top controller, resume the next one."""
        if not self._stack:
            return

        self._stack.pop().destroy()
        logger.debug(f"Dialog controller popped (depth {len(self._stack)})")

        if self._stack:
            self._stack[-1].resume()

    def on_scene_switch(self) -> DialogController:
        """Replace the top controller with a fresh one."""
        if self._stack:
            self._stack.pop().destroy()

        controller = self.create_controller()
        self._stack.append(controller)
        return controller

    def close(self) -> None:
        """Destroy every controller and unregister the scene hooks."""
        while self._stack:
            self._stack.pop().destroy()

        self.event_bus.unsubscribe(EngineEvent.SCENE_PUSHED, self._on_scene_pushed)
        self.event_bus.unsubscribe(EngineEvent.SCENE_POPPED, self._on_scene_popped)
        self.event_bus.unsubscribe(EngineEvent.SCENE_SWITCHED, self._on_scene_switched)

    # Event handlers

    def _on_scene_pushed(self, event: Event) -> None:
        self.on_scene_push()

    def _on_scene_popped(self, event: Event) -> None:
        self.on_scene_pop()

    def _on_scene_switched(self, event: Event) -> None:
        self.on_scene_switch()


_dialog_stack: Optional[DialogStack] = None


def init_dialog_stack(
    scheduler: TimerScheduler,
    event_bus: EventBus,
    audio: Optional[AudioManager] = None,
    config: Optional[DialogConfig] = None,
) -> DialogStack:
    """
    Create the process-wide dialog stack.

    Later calls with the same scheduler and event bus return the existing
    stack unchanged, so scene hooks are only ever registered once.

    Raises:
        RuntimeError: If a stack already exists for a different scheduler
            or event bus
    """
    global _dialog_stack
    if _dialog_stack is None:
        _dialog_stack = DialogStack(scheduler, event_bus, audio=audio, config=config)
        logger.debug("Dialog stack initialized")
    elif _dialog_stack.scheduler is not scheduler or _dialog_stack.event_bus is not event_bus:
        raise RuntimeError(
            "Dialog stack already initialized with a different scheduler or event bus; "
            "call shutdown_dialog_stack() first"
        )
    return _dialog_stack


def get_dialog_stack() -> DialogStack:
    """
    The process-wide dialog stack.

    Raises:
        RuntimeError: If init_dialog_stack() has not been called
    """
    if _dialog_stack is None:
        raise RuntimeError("Dialog stack not initialized; call init_dialog_stack() first")
    return _dialog_stack


def shutdown_dialog_stack() -> None:
    """Tear down the process-wide stack. Does nothing if none exists."""
    global _dialog_stack
    if _dialog_stack is not None:
        _dialog_stack.close()
        _dialog_stack = None
        logger.debug("Dialog stack shut down")
