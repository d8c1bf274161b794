from __future__ import annotations


class ConfigError(Exception):
    """Base exception for configuration errors."""


class UnknownThemeError(ConfigError):
    """Raised when a theme name does not match an installed style."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown theme: {name!r}")
        self.name = name


class InvalidWidthError(ConfigError):
    """Raised when the padding width is outside the accepted range."""


__all__ = [
    "ConfigError",
    "UnknownThemeError",
    "InvalidWidthError",
]
