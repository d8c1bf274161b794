from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass, field
from typing import Optional

from .defaults import DEFAULT_PALETTE, DEFAULT_THEME, DEFAULT_WIDTH, MAX_WIDTH, Palette
from .exceptions import InvalidWidthError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunSettings:
    """Options that apply to a single run of the filter."""

    width: int = DEFAULT_WIDTH
    theme: str = DEFAULT_THEME
    light: bool = False
    dark: bool = False
    palette: Palette = field(default=DEFAULT_PALETTE)

    def __post_init__(self) -> None:
        if not 0 <= self.width <= MAX_WIDTH:
            raise InvalidWidthError(
                f"Width must be between 0 and {MAX_WIDTH}, got {self.width}"
            )

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "RunSettings":
        width = args.width if args.width is not None else DEFAULT_WIDTH
        theme = args.theme or DEFAULT_THEME
        settings = cls(
            width=width,
            theme=theme,
            light=bool(args.light),
            dark=bool(args.dark),
        )
        if settings.light or settings.dark:
            # Reserved for theme selection; the tint palette is fixed.
            logger.debug(
                "Color scheme requested: %s", "light" if settings.light else "dark"
            )
        return settings

    @property
    def color_scheme(self) -> Optional[str]:
        if self.light:
            return "light"
        if self.dark:
            return "dark"
        return None


__all__ = ["RunSettings"]
