"""
Indexed colour palette.

Bubble colours are small integers into a 16-entry palette, the way
handheld-style retro consoles address colour. Index 0 is transparent.
"""

from __future__ import annotations

from dataclasses import dataclass


RGBA = tuple[int, int, int, int]


def _hex(value: str, alpha: int = 255) -> RGBA:
    value = value.lstrip("#")
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16), alpha)


@dataclass(frozen=True)
class Palette:
    """Fixed list of RGBA colours addressed by index."""
    colors: tuple[RGBA, ...]

    def __len__(self) -> int:
        return len(self.colors)

    def rgba(self, index: int) -> RGBA:
        """
        Resolve a colour index.

        Raises:
            ValueError: If the index is outside the palette
        """
        if not 0 <= index < len(self.colors):
            raise ValueError(f"Colour index {index} outside palette of {len(self.colors)}")
        return self.colors[index]

    def rgb(self, index: int) -> tuple[int, int, int]:
        r, g, b, _ = self.rgba(index)
        return (r, g, b)


ARCADE_PALETTE = Palette((
    (0, 0, 0, 0),       # 0 transparent
    _hex("#ffffff"),    # 1 white
    _hex("#ff2121"),    # 2 red
    _hex("#ff93c4"),    # 3 pink
    _hex("#ff8135"),    # 4 orange
    _hex("#fff609"),    # 5 yellow
    _hex("#249ca3"),    # 6 teal
    _hex("#78dc52"),    # 7 green
    _hex("#003fad"),    # 8 blue
    _hex("#87f2ff"),    # 9 light blue
    _hex("#8e2ec4"),    # 10 purple
    _hex("#a4839f"),    # 11 light purple
    _hex("#5c406c"),    # 12 dark purple
    _hex("#e5cdc4"),    # 13 tan
    _hex("#91463d"),    # 14 brown
    _hex("#000000"),    # 15 black
))
