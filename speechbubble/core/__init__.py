"""
Core host module.

Exports:
- Game, GameConfig: Main game class and configuration
- Scene, SceneManager: Scene management (push/pop hooks)
- TimerScheduler, TimerHandle: Millisecond repeating timers
- EventBus, Event, EngineEvent, DialogEvent, AudioEvent: Event system
"""

from speechbubble.core.events import EventBus, Event, EngineEvent, DialogEvent, AudioEvent
from speechbubble.core.timers import TimerScheduler, TimerHandle
from speechbubble.core.scene import Scene, SceneManager
from speechbubble.core.game import Game, GameConfig

__all__ = [
    # Game
    "Game",
    "GameConfig",
    # Scene
    "Scene",
    "SceneManager",
    # Timers
    "TimerScheduler",
    "TimerHandle",
    # Events
    "EventBus",
    "Event",
    "EngineEvent",
    "DialogEvent",
    "AudioEvent",
]
