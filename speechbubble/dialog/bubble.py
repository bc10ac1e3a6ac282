"""
Dialog bubble - lays out and draws the revealed text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from speechbubble.dialog.config import BubbleConfig, WrapConfig
from speechbubble.dialog.wrap import visible_window, wrap_text

if TYPE_CHECKING:
    from speechbubble.graphics.canvas import Canvas
    from speechbubble.graphics.sprite import BubbleSprite


class DialogBubble:
    """
    Fixed-size speech bubble.

    Every redraw wraps the prefix from scratch, keeps the trailing
    max_lines lines (so long text scrolls up), paints the bubble and
    publishes the canvas to the sprite.
    """

    def __init__(
        self,
        canvas: Canvas,
        sprite: BubbleSprite,
        wrap: WrapConfig | None = None,
        style: BubbleConfig | None = None,
    ):
        self.canvas = canvas
        self.sprite = sprite
        self.wrap = wrap or WrapConfig()
        self.style = style or BubbleConfig()

        self._prefix = ""
        self._lines: list[str] = []
        self._visible: list[str] = []

    @property
    def prefix(self) -> str:
        """Text drawn by the last redraw ('' when cleared)."""
        return self._prefix

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def visible_lines(self) -> list[str]:
        return list(self._visible)

    @property
    def letter_color(self) -> int:
        return self.style.letter_color

    @letter_color.setter
    def letter_color(self, color: int) -> None:
        self.style.letter_color = color

    @property
    def bubble_color(self) -> int:
        return self.style.bubble_color

    @bubble_color.setter
    def bubble_color(self, color: int) -> None:
        self.style.bubble_color = color

    def redraw(self, prefix: str) -> None:
        """Lay out and draw the revealed prefix."""
        style = self.style

        self._prefix = prefix
        self._lines = wrap_text(prefix, self.wrap.max_chars_per_line)
        self._visible = visible_window(self._lines, self.wrap.max_lines)

        self.canvas.fill(style.background_color)
        self.canvas.fill_rect(0, 0, style.width, style.height, style.bubble_color)

        for i, line in enumerate(self._visible):
            self.canvas.print(
                line,
                style.margin_left,
                style.margin_top + i * style.line_height,
                style.letter_color,
            )

        self.sprite.set_image(self.canvas.surface)

    def refresh(self) -> None:
        """Redraw the current prefix, e.g. after a colour change."""
        self.redraw(self._prefix)

    def clear(self) -> None:
        """Blank the surface; no text remains visible."""
        self._prefix = ""
        self._lines = []
        self._visible = []

        self.canvas.fill(self.style.background_color)
        self.sprite.set_image(self.canvas.surface)
