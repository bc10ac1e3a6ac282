"""
Greedy word wrapping.
"""

from __future__ import annotations


def wrap_text(text: str, max_chars_per_line: int) -> list[str]:
    """
    Wrap text into lines of at most `max_chars_per_line` characters.

    Words are separated by runs of whitespace. A word that does not fit on
    the current line starts a new one; a word longer than the limit gets a
    line of its own and overflows rather than being broken.

    Raises:
        ValueError: If max_chars_per_line is less than 1
    """
    if max_chars_per_line < 1:
        raise ValueError(f"max_chars_per_line must be positive, got {max_chars_per_line}")

    lines: list[str] = []
    current = ""

    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if current and len(candidate) > max_chars_per_line:
            lines.append(current)
            current = word
        else:
            current = candidate

    if current:
        lines.append(current)
    return lines


def visible_window(lines: list[str], max_lines: int) -> list[str]:
    """The trailing `max_lines` lines: the scrolled view of the bubble."""
    if len(lines) <= max_lines:
        return list(lines)
    return lines[-max_lines:]
