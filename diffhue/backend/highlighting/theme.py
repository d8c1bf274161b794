"""Pygments styles seen as foreground color maps."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Type

from pygments.style import Style
from pygments.styles import get_all_styles, get_style_by_name
from pygments.token import _TokenType
from pygments.util import ClassNotFound

from ...config.defaults import DEFAULT_THEME, Color
from ...config.exceptions import UnknownThemeError

logger = logging.getLogger(__name__)

LIGHT_FOREGROUND = Color(0xD0, 0xD0, 0xD0)
DARK_FOREGROUND = Color(0x20, 0x20, 0x20)

# xterm defaults for the ansi* color names a style may use instead of hex.
ANSI_COLORS: Dict[str, Color] = {
    "ansiblack": Color(0x00, 0x00, 0x00),
    "ansired": Color(0xCD, 0x00, 0x00),
    "ansigreen": Color(0x00, 0xCD, 0x00),
    "ansiyellow": Color(0xCD, 0xCD, 0x00),
    "ansiblue": Color(0x00, 0x00, 0xEE),
    "ansimagenta": Color(0xCD, 0x00, 0xCD),
    "ansicyan": Color(0x00, 0xCD, 0xCD),
    "ansigray": Color(0xE5, 0xE5, 0xE5),
    "ansibrightblack": Color(0x7F, 0x7F, 0x7F),
    "ansibrightred": Color(0xFF, 0x00, 0x00),
    "ansibrightgreen": Color(0x00, 0xFF, 0x00),
    "ansibrightyellow": Color(0xFF, 0xFF, 0x00),
    "ansibrightblue": Color(0x5C, 0x5C, 0xFF),
    "ansibrightmagenta": Color(0xFF, 0x00, 0xFF),
    "ansibrightcyan": Color(0x00, 0xFF, 0xFF),
    "ansiwhite": Color(0xFF, 0xFF, 0xFF),
}


def parse_hex_color(value: Optional[str]) -> Optional[Color]:
    """Parse ``"#rrggbb"`` / ``"rrggbb"`` / ``"#rgb"`` into a :class:`Color`."""

    if not value:
        return None
    digits = value.lstrip("#")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    if len(digits) != 6:
        return None
    try:
        return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
    except ValueError:
        return None


def _is_dark(color: Color) -> bool:
    # Rec. 601 luma
    return (0.299 * color.r + 0.587 * color.g + 0.114 * color.b) < 128


class Theme:
    """Foreground colors of a Pygments style, looked up by token type."""

    def __init__(self, name: str, style: Type[Style]) -> None:
        self.name = name
        self.style = style
        self.background = parse_hex_color(style.background_color)
        if self.background is None or _is_dark(self.background):
            self.default_foreground = LIGHT_FOREGROUND
        else:
            self.default_foreground = DARK_FOREGROUND
        self._cache: Dict[_TokenType, Color] = {}

    def foreground_for(self, ttype: _TokenType) -> Color:
        color = self._cache.get(ttype)
        if color is None:
            color = self._lookup(ttype)
            self._cache[ttype] = color
        return color

    def _lookup(self, ttype: _TokenType) -> Color:
        # Lexers may emit token subtypes the style never mentions.
        styled = ttype
        while not self.style.styles_token(styled) and styled.parent is not None:
            styled = styled.parent
        if not self.style.styles_token(styled):
            return self.default_foreground

        definition = self.style.style_for_token(styled)
        color = parse_hex_color(definition.get("color"))
        if color is None and definition.get("ansicolor"):
            color = ANSI_COLORS.get(definition["ansicolor"])
        return color or self.default_foreground

    def __repr__(self) -> str:
        return f"Theme({self.name!r})"


def resolve_theme(name: Optional[str] = None) -> Theme:
    """Load the theme for a run. ``None`` selects :data:`DEFAULT_THEME`."""

    theme_name = name or DEFAULT_THEME
    try:
        style = get_style_by_name(theme_name)
    except ClassNotFound as exc:
        raise UnknownThemeError(theme_name) from exc
    logger.debug("Using theme: %s", theme_name)
    return Theme(theme_name, style)


def list_themes() -> List[str]:
    return sorted(get_all_styles())


__all__ = [
    "Theme",
    "resolve_theme",
    "list_themes",
    "parse_hex_color",
]
