"""Helpers for removing terminal escape sequences from incoming text."""

from __future__ import annotations

from colorama.ansitowin32 import AnsiToWin32

_ANSI_PATTERNS = (AnsiToWin32.ANSI_OSC_RE, AnsiToWin32.ANSI_CSI_RE)


def strip_ansi_codes(text: str) -> str:
    """Return ``text`` with CSI (colors, cursor movement) and OSC
    (hyperlinks, titles) escape sequences removed."""

    if "\x1b" not in text:
        return text
    for pattern in _ANSI_PATTERNS:
        text = pattern.sub("", text)
    return text


__all__ = ["strip_ansi_codes"]
