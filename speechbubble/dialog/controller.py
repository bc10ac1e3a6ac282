"""
Dialog controller - runs one typewriter dialog on one bubble.

Usage:
    controller = DialogController(scheduler, audio=audio_manager)
    controller.start("Hello world! This prints like a typewriter", Volume.LOUD)

    # Each scheduler firing reveals one more character
    scheduler.update(dt)
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional, Union

import pygame

from speechbubble.audio.tick import DEFAULT_TICK, TickSound
from speechbubble.core.events import DialogEvent
from speechbubble.dialog.bubble import DialogBubble
from speechbubble.dialog.clock import RevealClock
from speechbubble.dialog.config import (
    DialogConfig,
    Speed,
    Volume,
    level_to_gain,
    volume_level,
)
from speechbubble.graphics.canvas import Canvas
from speechbubble.graphics.sprite import BubbleSprite

if TYPE_CHECKING:
    from speechbubble.audio.manager import AudioManager
    from speechbubble.core.events import EventBus
    from speechbubble.core.timers import TimerScheduler

logger = logging.getLogger(__name__)


class DialogState(Enum):
    """Lifecycle of a controller."""
    IDLE = auto()
    RUNNING = auto()
    FINISHED = auto()
    CANCELLED = auto()


class DialogController:
    """
    Orchestrates one active dialog.

    Owns a RevealClock and a DialogBubble (with its canvas and sprite);
    no other controller ever draws on them.

    States: IDLE -> RUNNING -> FINISHED | CANCELLED. Both end states leave
    the bubble cleared; start() from either goes back to RUNNING.
    """

    def __init__(
        self,
        scheduler: TimerScheduler,
        audio: Optional[AudioManager] = None,
        config: Optional[DialogConfig] = None,
        event_bus: Optional[EventBus] = None,
        canvas: Optional[Canvas] = None,
        sprite: Optional[BubbleSprite] = None,
    ):
        self.config = (config or DialogConfig()).clone()
        self.audio = audio
        self.event_bus = event_bus

        style = self.config.bubble
        if canvas is None:
            canvas = Canvas(style.width, style.height, font_size=style.font_size)
            canvas.fill(style.background_color)
        if sprite is None:
            sprite = BubbleSprite(canvas.surface)

        self.bubble = DialogBubble(canvas, sprite, self.config.wrap, style)
        self._clock = RevealClock(scheduler)

        self.sound_enabled: bool = self.config.sound_enabled
        self.tick_sound: Union[TickSound, str] = DEFAULT_TICK

        self._state = DialogState.IDLE
        self._volume: Union[Volume, int] = Volume.NORMAL

    # Properties

    @property
    def state(self) -> DialogState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state == DialogState.RUNNING

    @property
    def is_paused(self) -> bool:
        return self._clock.paused

    @property
    def message(self) -> str:
        return self._clock.message

    @property
    def cursor(self) -> int:
        """Characters revealed so far."""
        return self._clock.cursor

    @property
    def sprite(self) -> BubbleSprite:
        return self.bubble.sprite

    @property
    def speed(self) -> Speed:
        return self.config.speed

    @speed.setter
    def speed(self, speed: Speed) -> None:
        """Takes effect on the next start()."""
        self.config.speed = speed

    @property
    def interval_ms(self) -> int:
        return self.config.interval_ms

    # Control

    def start(self, message: str, volume: Union[Volume, int] = Volume.NORMAL) -> None:
        """
        Reveal `message` from the beginning.

        Any dialog already running on this controller is replaced; its
        timer is cancelled before the new one is registered.

        Args:
            message: Full text to reveal
            volume: Tick loudness, a Volume tag or a raw 0-255 level
        """
        self._volume = volume
        self._state = DialogState.RUNNING
        self._clock.start(message, self.interval_ms, self._on_tick, self._on_complete)

        logger.debug(f"Dialog started ({len(message)} chars, {self.interval_ms} ms/char)")
        self._publish(DialogEvent.STARTED, message=message)

    def cancel(self) -> None:
        """Stop a running dialog and clear the bubble. No-op otherwise."""
        if self._state != DialogState.RUNNING:
            return

        logger.debug(f"Dialog cancelled at {self.cursor}/{len(self.message)}")
        self._abort()

    def _abort(self) -> None:
        self._clock.stop()
        self._state = DialogState.CANCELLED
        self.bubble.clear()

        self._publish(DialogEvent.CANCELLED, message=self.message, cursor=self.cursor)

    def pause(self) -> None:
        """Suspend the reveal while the controller is not on top."""
        if self._state == DialogState.RUNNING:
            self._clock.pause()

    def resume(self) -> None:
        if self._state == DialogState.RUNNING:
            self._clock.resume()

    def destroy(self) -> None:
        """Cancel and release the timer. Safe to call more than once."""
        self.cancel()
        self._clock.stop()

    # Appearance

    def set_bubble_color(self, color: int) -> None:
        """Change the bubble fill colour (palette index)."""
        self.bubble.bubble_color = color
        self._rerender()

    def set_letter_color(self, color: int) -> None:
        """Change the text colour (palette index)."""
        self.bubble.letter_color = color
        self._rerender()

    def _rerender(self) -> None:
        # Only a running dialog has text on screen
        if self._state == DialogState.RUNNING:
            self.bubble.redraw(self.message[:self.cursor])

    # Clock callbacks

    def _on_tick(self, revealed: int) -> None:
        try:
            self.bubble.redraw(self.message[:revealed])
        except Exception:
            # Undrawable text ends the dialog
            logger.exception(f"Dialog redraw failed at {revealed}/{len(self.message)}")
            self._abort()
            return

        if self.sound_enabled:
            self._play_tick()

    def _on_complete(self) -> None:
        self._state = DialogState.FINISHED
        self.bubble.clear()

        logger.debug("Dialog finished")
        self._publish(DialogEvent.FINISHED, message=self.message)

    def _play_tick(self) -> None:
        if self.audio is None:
            return

        gain = level_to_gain(volume_level(self._volume))
        try:
            if isinstance(self.tick_sound, str):
                self.audio.play_sfx(self.tick_sound, volume=gain)
            else:
                self.audio.play_tone(self.tick_sound, volume=gain)
        except pygame.error as e:
            # Don't break text on sound error
            logger.warning(f"Tick sound failed: {e}")

    def _publish(self, event_type: DialogEvent, **data) -> None:
        if self.event_bus is not None:
            self.event_bus.publish(event_type, controller=self, **data)
