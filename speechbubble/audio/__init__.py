"""
Audio playback.

Exports:
- AudioManager: Fire-and-forget SFX and tone playback with volume categories
- TickSound, DEFAULT_TICK: Synthesised per-character tick
"""

from speechbubble.audio.tick import TickSound, DEFAULT_TICK
from speechbubble.audio.manager import AudioManager

__all__ = [
    "AudioManager",
    "TickSound",
    "DEFAULT_TICK",
]
