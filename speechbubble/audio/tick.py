"""
Synthesised tick tone played once per revealed character.

The default tick is a single C5 note, one beat at 150 bpm, shaped by an
envelope with a 20 ms attack, 10 ms decay and no sustain or release, so
what is heard is a short blip at the start of the note.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class TickSound:
    """
    Square-wave note with an attack/decay/sustain/release envelope.

    Frozen so it can key the audio manager's sound cache.
    """
    frequency: float = 523.25   # C5
    beats: float = 1.0
    tempo: int = 150
    attack_ms: int = 20
    decay_ms: int = 10
    sustain: float = 0.0        # level 0.0 - 1.0
    release_ms: int = 0
    amplitude: float = 0.3

    @property
    def duration_ms(self) -> float:
        """Note length from beats and tempo."""
        return self.beats * 60000.0 / self.tempo

    def envelope(self, sample_rate: int) -> np.ndarray:
        """Per-sample gain over the whole note."""
        count = max(1, int(sample_rate * self.duration_ms / 1000.0))
        t_ms = np.arange(count) * 1000.0 / sample_rate

        attack_end = self.attack_ms
        decay_end = attack_end + self.decay_ms
        release_start = max(decay_end, self.duration_ms - self.release_ms)

        points = [0.0, attack_end, decay_end, release_start, self.duration_ms]
        levels = [0.0, 1.0, self.sustain, self.sustain, 0.0]
        return np.interp(t_ms, points, levels)

    def samples(self, sample_rate: int = 22050, channels: int = 2) -> np.ndarray:
        """
        Render the note as signed 16-bit PCM.

        Returns:
            Array of shape (n,) for mono or (n, channels) otherwise
        """
        gain = self.envelope(sample_rate)
        t = np.arange(len(gain)) / sample_rate
        wave = np.sign(np.sin(2 * np.pi * self.frequency * t))
        data = (wave * gain * self.amplitude * (2**15 - 1)).astype(np.int16)

        if channels == 1:
            return data
        return np.column_stack([data] * channels)


DEFAULT_TICK = TickSound()
