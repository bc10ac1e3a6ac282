"""
Audio manager for dialog tick sounds.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from speechbubble.audio.tick import TickSound
from speechbubble.core.events import EventBus, AudioEvent


class AudioManager:
    """
    Plays short fire-and-forget sounds.

    Handles:
    - Sound file caching
    - Synthesised tones (typewriter ticks)
    - A master volume applied on top of each call's own volume
    """

    def __init__(self, event_bus: EventBus | None = None, master_volume: float = 1.0):
        self.event_bus = event_bus
        self._master_volume: float = max(0.0, min(1.0, master_volume))

        self._sound_cache: dict[str, pygame.mixer.Sound] = {}
        self._tone_cache: dict[TickSound, pygame.mixer.Sound] = {}

        self._initialized: bool = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    def init(self, frequency: int = 22050, size: int = -16, channels: int = 2, buffer: int = 512) -> None:
        """Open the mixer. Failure is logged and leaves the manager silent."""
        if self._initialized:
            return

        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=frequency, size=size, channels=channels, buffer=buffer)
            pygame.mixer.set_num_channels(32)  # Fast speeds overlap ticks
            self._initialized = True
            logging.info("Audio system initialized.")
        except pygame.error as e:
            logging.error(f"Failed to initialize audio system: {e}")

    def quit(self) -> None:
        self._sound_cache.clear()
        self._tone_cache.clear()
        pygame.mixer.quit()
        self._initialized = False

    # --- Volume ---

    @property
    def master_volume(self) -> float:
        return self._master_volume

    def set_master_volume(self, volume: float) -> None:
        """Set master volume, clamped to 0.0-1.0."""
        self._master_volume = max(0.0, min(1.0, volume))

    # --- Loading ---

    def _get_sound(self, file_path: str) -> pygame.mixer.Sound | None:
        if not self._initialized:
            return None

        if file_path not in self._sound_cache:
            if not Path(file_path).exists():
                logging.warning(f"Audio file not found: {file_path}")
                return None
            try:
                self._sound_cache[file_path] = pygame.mixer.Sound(file_path)
            except pygame.error as e:
                logging.error(f"Failed to load sound {file_path}: {e}")
                return None

        return self._sound_cache[file_path]

    def _get_tone(self, tone: TickSound) -> pygame.mixer.Sound | None:
        """Synthesise a tone in the mixer's format, once per tone."""
        if not self._initialized:
            return None

        if tone not in self._tone_cache:
            mixer_format = pygame.mixer.get_init()
            if not mixer_format:
                logging.warning("Audio system not initialized, cannot build tone.")
                return None

            frequency, _, channels = mixer_format
            try:
                self._tone_cache[tone] = pygame.sndarray.make_sound(
                    tone.samples(sample_rate=frequency, channels=channels)
                )
            except (pygame.error, ValueError) as e:
                logging.error(f"Failed to build tone {tone}: {e}")
                return None

        return self._tone_cache[tone]

    # --- Playback ---

    def play_sfx(self, file_path: str, volume: float = 1.0) -> pygame.mixer.Channel | None:
        """
        Play a sound file.

        Args:
            file_path: Sound file path
            volume: Volume before the master volume is applied (0.0 to 1.0)

        Returns:
            The channel used, or None if nothing was played.
        """
        sound = self._get_sound(file_path)
        if not sound:
            return None
        return self._play(sound, volume, file_path)

    def play_tone(self, tone: TickSound, volume: float = 1.0) -> pygame.mixer.Channel | None:
        sound = self._get_tone(tone)
        if not sound:
            return None
        return self._play(sound, volume, repr(tone))

    def _play(self, sound: pygame.mixer.Sound, volume: float, name: str) -> pygame.mixer.Channel | None:
        final_vol = max(0.0, min(1.0, self._master_volume * volume))

        channel = pygame.mixer.find_channel()
        if not channel:
            # Steal the oldest channel when all are busy
            channel = pygame.mixer.find_channel(True)

        if not channel:
            return None

        channel.set_volume(final_vol)
        channel.play(sound)

        if self.event_bus:
            self.event_bus.publish(AudioEvent.SFX_PLAYED, file=name, volume=final_vol)

        return channel
