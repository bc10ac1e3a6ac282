"""
Sprite that displays a canvas on screen.
"""

from __future__ import annotations

import pygame


class BubbleSprite(pygame.sprite.Sprite):
    """
    Renderable owner of a bubble image.

    The bubble publishes its surface through set_image() after every
    redraw; the scene draws the sprite wherever it sits.
    """

    def __init__(self, image: pygame.Surface, x: int = 0, y: int = 0):
        super().__init__()
        self.image = image
        self.rect = image.get_rect(topleft=(x, y))
        self.updates = 0

    def set_image(self, image: pygame.Surface) -> None:
        """Replace the displayed image, keeping the sprite's position."""
        self.image = image
        self.rect = image.get_rect(topleft=self.rect.topleft)
        self.updates += 1

    def set_position(self, x: int, y: int) -> None:
        self.rect.topleft = (x, y)

    def draw(self, surface: pygame.Surface) -> None:
        surface.blit(self.image, self.rect)
