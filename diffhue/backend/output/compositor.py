"""Rendering of hunk content lines as 24-bit ANSI text.

The foreground comes from the syntax highlighter, span by span. Added and
removed lines also get a background tint, which is repeated before every
span. Spans are never reset individually, so the tint runs unbroken across
the line, and a single reset closes it.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ...config.defaults import DEFAULT_WIDTH, Color, Palette
from ..highlighting.resolver import LineHighlighter, StyledSpan

RESET = "\x1b[0m"


def background_escape(color: Color) -> str:
    return f"\x1b[48;2;{color.r};{color.g};{color.b}m"


def foreground_escape(color: Color) -> str:
    return f"\x1b[38;2;{color.r};{color.g};{color.b}m"


def paint(
    text: str,
    foreground: Optional[Color] = None,
    background: Optional[Color] = None,
    reset: bool = False,
) -> str:
    """Return ``text`` wrapped in the escapes for the given colors."""

    parts = []
    if background is not None:
        parts.append(background_escape(background))
        if reset:
            parts.append(RESET)
    if foreground is not None:
        parts.append(foreground_escape(foreground))
        parts.append(text)
        if reset:
            parts.append(RESET)
    else:
        parts.append(text)
    return "".join(parts)


def paint_ranges(spans: Iterable[StyledSpan], background: Optional[Color] = None) -> str:
    """Paint styled spans in order, followed by one trailing reset."""

    painted = [paint(text, foreground, background) for foreground, text in spans]
    painted.append(RESET)
    return "".join(painted)


def tint_for(line: str, palette: Palette) -> Optional[Color]:
    if line.startswith("+"):
        return palette.added
    if line.startswith("-"):
        return palette.removed
    return None


def pad(line: str, width: int) -> str:
    # Padding only, long lines are kept whole.
    if len(line) < width:
        return line + " " * (width - len(line))
    return line


def compose_hunk_line(
    line: str,
    highlighter: Optional[LineHighlighter],
    palette: Palette,
    width: int = DEFAULT_WIDTH,
) -> Optional[str]:
    """Render one hunk content line.

    Returns ``None`` when there is no highlighter for the current file, in
    which case the caller emits the line as it came in.
    """

    if highlighter is None:
        return None

    output = []
    background = tint_for(line, palette)
    if background is not None:
        # The +/- marker becomes a tinted space so columns stay aligned.
        line = line[1:]
        output.append(paint(" ", background=background))

    output.append(paint_ranges(highlighter.highlight(pad(line, width)), background))
    return "".join(output)


__all__ = [
    "RESET",
    "paint",
    "paint_ranges",
    "tint_for",
    "pad",
    "compose_hunk_line",
]
