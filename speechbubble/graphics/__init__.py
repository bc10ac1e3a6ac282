"""
Graphics primitives for dialog bubbles.

Exports:
- Canvas: Fixed-size indexed-colour drawing surface
- BubbleSprite: Renderable owner of a canvas image
- Palette, ARCADE_PALETTE: Colour index tables
"""

from speechbubble.graphics.palette import Palette, ARCADE_PALETTE
from speechbubble.graphics.canvas import Canvas
from speechbubble.graphics.sprite import BubbleSprite

__all__ = [
    "Canvas",
    "BubbleSprite",
    "Palette",
    "ARCADE_PALETTE",
]
