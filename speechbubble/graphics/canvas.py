"""
Fixed-size drawing canvas backed by a pygame Surface.

Provides the image primitive the dialog bubble draws with:
fill, fill_rect and print, all taking palette colour indices.
"""

from __future__ import annotations

import pygame

from speechbubble.graphics.palette import ARCADE_PALETTE, Palette


class Canvas:
    """
    A width x height image with per-pixel alpha.

    The font is created on first print so a canvas can be built before
    pygame.font is initialised.
    """

    def __init__(
        self,
        width: int,
        height: int,
        palette: Palette = ARCADE_PALETTE,
        font: pygame.font.Font | None = None,
        font_size: int = 12,
    ):
        self.width = width
        self.height = height
        self.palette = palette
        self.font_size = font_size
        self._font = font
        self._surface = pygame.Surface((width, height), pygame.SRCALPHA)

    @property
    def surface(self) -> pygame.Surface:
        """The underlying pygame Surface."""
        return self._surface

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, self.font_size)
        return self._font

    def fill(self, color: int) -> None:
        """Fill the whole canvas with a palette colour."""
        self._surface.fill(self.palette.rgba(color))

    def fill_rect(self, x: int, y: int, width: int, height: int, color: int) -> None:
        """Fill a rectangle, clipped to the canvas."""
        self._surface.fill(self.palette.rgba(color), pygame.Rect(x, y, width, height))

    def print(self, text: str, x: int, y: int, color: int) -> None:
        """Draw a single line of text with its top-left corner at (x, y)."""
        if not text:
            return
        glyphs = self.font.render(text, False, self.palette.rgb(color))
        self._surface.blit(glyphs, (x, y))
