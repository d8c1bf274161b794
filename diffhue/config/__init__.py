from __future__ import annotations

from .defaults import (
    DEFAULT_PALETTE,
    DEFAULT_THEME,
    DEFAULT_WIDTH,
    Color,
    Palette,
)
from .exceptions import (
    ConfigError,
    InvalidWidthError,
    UnknownThemeError,
)
from .settings import RunSettings

__all__ = [
    "Color",
    "Palette",
    "DEFAULT_PALETTE",
    "DEFAULT_THEME",
    "DEFAULT_WIDTH",
    "RunSettings",
    "ConfigError",
    "InvalidWidthError",
    "UnknownThemeError",
]
