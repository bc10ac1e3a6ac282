"""
Scene management system.

Scenes represent different game states (title screen, a conversation,
a cutscene, etc.). The SceneManager handles a stack of scenes:
- Push: Add a new scene on top
- Pop: Remove the top scene
- Switch: Replace the current scene entirely

Every executed operation is announced on the event bus
(SCENE_PUSHED / SCENE_POPPED / SCENE_SWITCHED); these are the scene
push/pop hooks the dialog stack listens to.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

import pygame

from speechbubble.core.events import EngineEvent

if TYPE_CHECKING:
    from speechbubble.core.game import Game


class Scene(ABC):
    """
    Abstract base class for game scenes.

    Lifecycle:
        1. __init__: Called when scene is created
        2. on_enter: Called when scene becomes active
        3. update/render: Called each frame while active
        4. on_exit: Called when scene is removed or covered
        5. on_destroy: Called when scene is permanently removed
    """

    def __init__(self, game: Game):
        self.game = game
        self._is_active = False
        self._is_transparent = False  # If True, scene below is also rendered

    @property
    def is_active(self) -> bool:
        """Whether this scene is currently the top scene."""
        return self._is_active

    @property
    def is_transparent(self) -> bool:
        """Whether scenes below should also be rendered."""
        return self._is_transparent

    def on_enter(self) -> None:
        """Called when scene becomes active (pushed or uncovered)."""
        self._is_active = True

    def on_exit(self) -> None:
        """Called when scene is deactivated (popped or covered)."""
        self._is_active = False

    def on_destroy(self) -> None:
        """Called when scene is permanently removed from the stack."""
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """
        Update scene logic.

        Args:
            dt: Delta time in seconds (fixed timestep)
        """
        pass

    @abstractmethod
    def render(self, surface: pygame.Surface) -> None:
        """Draw the scene onto the window surface."""
        pass

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a pygame event.

        Returns:
            True if the event was consumed (don't propagate)
        """
        return False


class SceneManager:
    """
    Manages a stack of scenes.

    Operations are queued and executed at the start of the next update,
    so a scene can push or pop from inside its own update.
    """

    def __init__(self, game: Game):
        self.game = game
        self._stack: list[Scene] = []
        self._pending_operations: list[tuple[str, Any]] = []

    @property
    def current(self) -> Scene | None:
        """Get the current (top) scene."""
        return self._stack[-1] if self._stack else None

    @property
    def is_empty(self) -> bool:
        return len(self._stack) == 0

    def __len__(self) -> int:
        return len(self._stack)

    def push(self, scene: Scene) -> None:
        """Push a new scene onto the stack."""
        self._pending_operations.append(("push", scene))

    def pop(self) -> None:
        """Pop the current scene from the stack."""
        self._pending_operations.append(("pop", None))

    def switch(self, scene: Scene) -> None:
        """Replace the current scene with a new one."""
        self._pending_operations.append(("switch", scene))

    def clear(self) -> None:
        """Clear all scenes from the stack."""
        self._pending_operations.append(("clear", None))

    def update(self, dt: float) -> None:
        """Apply pending operations, then update the top scene."""
        self.process_pending()

        if self.current:
            self.current.update(dt)

    def render(self, surface: pygame.Surface) -> None:
        """Render scenes bottom to top, respecting transparency."""
        for scene in self._get_render_list():
            scene.render(surface)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Pass event to the current scene."""
        if self.current:
            self.current.handle_event(event)

    def process_pending(self) -> None:
        """Process pending scene operations."""
        while self._pending_operations:
            op, arg = self._pending_operations.pop(0)

            if op == "push":
                self._do_push(arg)
            elif op == "pop":
                self._do_pop()
            elif op == "switch":
                self._do_switch(arg)
            elif op == "clear":
                self._do_clear()

    def _do_push(self, scene: Scene) -> None:
        if self._stack:
            self._stack[-1].on_exit()
        self._stack.append(scene)
        self._publish(EngineEvent.SCENE_PUSHED, scene)
        scene.on_enter()

    def _do_pop(self) -> None:
        if not self._stack:
            return

        scene = self._stack.pop()
        scene.on_exit()
        scene.on_destroy()
        self._publish(EngineEvent.SCENE_POPPED, scene)

        if self._stack:
            self._stack[-1].on_enter()

    def _do_switch(self, scene: Scene) -> None:
        if self._stack:
            old_scene = self._stack.pop()
            old_scene.on_exit()
            old_scene.on_destroy()

        self._stack.append(scene)
        self._publish(EngineEvent.SCENE_SWITCHED, scene)
        scene.on_enter()

    def _do_clear(self) -> None:
        while self._stack:
            self._do_pop()

    def _publish(self, event_type: EngineEvent, scene: Scene) -> None:
        event_bus = getattr(self.game, "event_bus", None)
        if event_bus is not None:
            event_bus.publish(event_type, scene=scene)

    def _get_render_list(self) -> list[Scene]:
        """Get list of scenes to render (bottom to top)."""
        result = []
        # Walk down from the top until a non-transparent scene
        for scene in reversed(self._stack):
            result.insert(0, scene)
            if not scene.is_transparent:
                break
        return result
