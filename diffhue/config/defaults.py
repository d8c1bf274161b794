from __future__ import annotations

from typing import NamedTuple


class Color(NamedTuple):
    """24-bit terminal color."""

    r: int
    g: int
    b: int


class Palette(NamedTuple):
    """Background tints for added and removed lines.

    These are fixed dark tints and are not taken from the syntax theme, so
    the tint stays subtle whatever foreground colors the theme uses.
    """

    added: Color
    removed: Color


DEFAULT_THEME = "monokai"
DEFAULT_WIDTH = 100
MAX_WIDTH = 65535

GREEN = Color(0x01, 0x18, 0x00)
RED = Color(0x24, 0x00, 0x01)

DEFAULT_PALETTE = Palette(added=GREEN, removed=RED)

__all__ = [
    "Color",
    "Palette",
    "DEFAULT_THEME",
    "DEFAULT_WIDTH",
    "MAX_WIDTH",
    "GREEN",
    "RED",
    "DEFAULT_PALETTE",
]
