"""
Speech Bubble

Typewriter dialog bubbles for 2D pygame games: text appears one character
at a time, word-wrapped to a fixed-width bubble, scrolling when it exceeds
the visible lines, with an optional per-character tick sound.

Quick Start:
    from speechbubble import Game, GameConfig, Scene, Volume

    class TalkScene(Scene):
        def on_enter(self) -> None:
            super().on_enter()
            self.game.dialogs.current().start("Hello world!", Volume.LOUD)

        def update(self, dt: float) -> None:
            pass

        def render(self, surface) -> None:
            self.game.dialogs.current().sprite.draw(surface)

    game = Game(GameConfig(title="My Game"))
    game.scene_manager.push(TalkScene(game))
    game.run()
"""

__version__ = "0.1.0"

# core first: it pulls in audio and dialog through the game module
from speechbubble.core import (
    Game,
    GameConfig,
    Scene,
    SceneManager,
    TimerScheduler,
    EventBus,
    Event,
    EngineEvent,
    DialogEvent,
)
from speechbubble.audio import AudioManager, TickSound
from speechbubble.graphics import Canvas, BubbleSprite
from speechbubble.dialog import (
    DialogController,
    DialogState,
    DialogStack,
    DialogConfig,
    Volume,
    Speed,
    wrap_text,
)

__all__ = [
    # Core
    "Game",
    "GameConfig",
    "Scene",
    "SceneManager",
    "TimerScheduler",
    "EventBus",
    "Event",
    "EngineEvent",
    "DialogEvent",
    # Audio / graphics
    "AudioManager",
    "TickSound",
    "Canvas",
    "BubbleSprite",
    # Dialog
    "DialogController",
    "DialogState",
    "DialogStack",
    "DialogConfig",
    "Volume",
    "Speed",
    "wrap_text",
]
