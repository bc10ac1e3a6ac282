"""
Typewriter dialog bubbles.

Exports:
- wrap_text, visible_window: Greedy word wrap and scroll window
- RevealClock: One-character-per-tick reveal timer
- DialogBubble: Canvas layout and drawing
- DialogController, DialogState: One running dialog
- DialogStack, init_dialog_stack, get_dialog_stack, shutdown_dialog_stack:
  Scene-scoped controller stack
- DialogConfig, WrapConfig, BubbleConfig, Volume, Speed: Configuration
"""

from speechbubble.dialog.config import (
    DialogConfig,
    WrapConfig,
    BubbleConfig,
    Volume,
    Speed,
    VOLUME_LEVELS,
    SPEED_INTERVALS_MS,
)
from speechbubble.dialog.wrap import wrap_text, visible_window
from speechbubble.dialog.clock import RevealClock
from speechbubble.dialog.bubble import DialogBubble
from speechbubble.dialog.controller import DialogController, DialogState
from speechbubble.dialog.stack import (
    DialogStack,
    init_dialog_stack,
    get_dialog_stack,
    shutdown_dialog_stack,
)

__all__ = [
    # Layout
    "wrap_text",
    "visible_window",
    # Runtime
    "RevealClock",
    "DialogBubble",
    "DialogController",
    "DialogState",
    "DialogStack",
    "init_dialog_stack",
    "get_dialog_stack",
    "shutdown_dialog_stack",
    # Config
    "DialogConfig",
    "WrapConfig",
    "BubbleConfig",
    "Volume",
    "Speed",
    "VOLUME_LEVELS",
    "SPEED_INTERVALS_MS",
]
