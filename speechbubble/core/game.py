"""
Core Game class with fixed timestep game loop.

The Game class is the host for dialog bubbles. It handles:
- Window creation (Pygame)
- Fixed timestep update loop driving the timer scheduler
- Scene management delegation
- Audio and the process-wide dialog stack
"""

from __future__ import annotations

import time

import pygame

from speechbubble.audio.manager import AudioManager
from speechbubble.core.events import EventBus, EngineEvent
from speechbubble.core.scene import SceneManager
from speechbubble.core.timers import TimerScheduler
from speechbubble.dialog.stack import DialogStack, init_dialog_stack, shutdown_dialog_stack


class GameConfig:
    """Configuration for the game window and loop."""

    def __init__(
        self,
        title: str = "Speech Bubble",
        width: int = 640,
        height: int = 480,
        target_fps: int = 60,
        fixed_timestep: float = 1 / 60,
        max_frame_skip: int = 5,
        background: tuple[int, int, int] = (0, 0, 0),
        master_volume: float = 1.0,
    ):
        self.title = title
        self.width = width
        self.height = height
        self.target_fps = target_fps
        self.fixed_timestep = fixed_timestep
        self.max_frame_skip = max_frame_skip
        self.background = background
        self.master_volume = master_volume


class Game:
    """
    Main game class.

    Implements a fixed timestep game loop with variable rendering. Timers
    (and therefore typewriter ticks) advance only inside fixed updates.

    Usage:
        game = Game(GameConfig(title="My Game"))
        game.scene_manager.push(MyScene(game))
        game.run()
    """

    def __init__(self, config: GameConfig | None = None):
        self.config = config or GameConfig()
        self._running = False

        pygame.init()

        self.screen = pygame.display.set_mode((self.config.width, self.config.height))
        pygame.display.set_caption(self.config.title)

        # Core systems
        self.event_bus = EventBus()
        self.scheduler = TimerScheduler()
        self.audio = AudioManager(self.event_bus, master_volume=self.config.master_volume)
        self.audio.init()
        self.scene_manager = SceneManager(self)

        self._dialogs: DialogStack | None = None

        # Timing
        self._clock = pygame.time.Clock()
        self._accumulator = 0.0
        self._current_time = time.perf_counter()

    @property
    def dialogs(self) -> DialogStack:
        """Process-wide dialog stack, created on first access."""
        if self._dialogs is None:
            self._dialogs = init_dialog_stack(
                self.scheduler, self.event_bus, audio=self.audio
            )
        return self._dialogs

    def run(self) -> None:
        """
        Start the main game loop.

        Uses a fixed timestep for updates with variable rendering.
        """
        self._running = True
        self._current_time = time.perf_counter()
        self.event_bus.publish(EngineEvent.GAME_START)

        try:
            while self._running:
                new_time = time.perf_counter()
                frame_time = new_time - self._current_time
                self._current_time = new_time

                # Prevent spiral of death
                if frame_time > 0.25:
                    frame_time = 0.25

                self._accumulator += frame_time

                self._process_events()

                updates = 0
                while self._accumulator >= self.config.fixed_timestep:
                    self._fixed_update(self.config.fixed_timestep)
                    self._accumulator -= self.config.fixed_timestep
                    updates += 1

                    if updates >= self.config.max_frame_skip:
                        self._accumulator = 0
                        break

                self._render()
                self._clock.tick(self.config.target_fps)
        finally:
            self._shutdown()

    def quit(self) -> None:
        """Request game shutdown."""
        self._running = False

    def _process_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit()
            else:
                self.scene_manager.handle_event(event)

    def _fixed_update(self, dt: float) -> None:
        """
        Fixed timestep update.

        Args:
            dt: Fixed delta time (always config.fixed_timestep)
        """
        self.scene_manager.update(dt)
        self.scheduler.update(dt)

    def _render(self) -> None:
        self.screen.fill(self.config.background)
        self.scene_manager.render(self.screen)
        pygame.display.flip()

    def _shutdown(self) -> None:
        """Clean shutdown."""
        self.event_bus.publish(EngineEvent.GAME_QUIT)
        self.scene_manager.clear()
        self.scene_manager.process_pending()

        if self._dialogs is not None:
            shutdown_dialog_stack()
            self._dialogs = None

        self.scheduler.clear()
        self.audio.quit()
        pygame.quit()
