from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, TextIO

from ...config.defaults import DEFAULT_PALETTE, DEFAULT_WIDTH, Palette
from ...utils.ansi import strip_ansi_codes
from ..diff.classifier import DiffState, classify_line
from ..highlighting.resolver import HighlightResolver, LineHighlighter
from ..highlighting.theme import Theme
from .compositor import compose_hunk_line

logger = logging.getLogger(__name__)


class InputReadError(Exception):
    """Reading the next input line failed for a reason other than end of input."""


@dataclass
class FileContext:
    """Highlighting context of the file diff currently being read."""

    theme: Theme
    extension: Optional[str] = None
    highlighter: Optional[LineHighlighter] = None


def _chomp(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


class StreamDriver:
    """Runs the filter over a stream of diff lines.

    Owns the diff state and the file context for the whole run. Every input
    line produces exactly one output line, in order.
    """

    def __init__(
        self,
        resolver: HighlightResolver,
        theme: Theme,
        palette: Palette = DEFAULT_PALETTE,
        width: int = DEFAULT_WIDTH,
    ) -> None:
        self.resolver = resolver
        self.palette = palette
        self.width = width
        self.state = DiffState.UNKNOWN
        self.context = FileContext(theme=theme)

    def _enter_file(self, extension: Optional[str]) -> None:
        self.context.extension = extension
        self.context.highlighter = self.resolver.highlighter_for(extension, self.context.theme)

    def process_line(self, raw_line: str) -> str:
        """Return the text to emit for ``raw_line`` (no trailing newline)."""

        line = strip_ansi_codes(raw_line)
        transition = classify_line(self.state, line)
        self.state = transition.state

        if transition.file_changed:
            self._enter_file(transition.extension)
        elif transition.is_hunk_content:
            composed = compose_hunk_line(
                line, self.context.highlighter, self.palette, self.width
            )
            if composed is not None:
                return composed
        return raw_line

    def run(self, lines: Iterable[str], output: TextIO) -> int:
        """Filter ``lines`` into ``output``. Returns the number of lines written.

        Read errors are raised as :class:`InputReadError`, write errors propagate
        unchanged.
        """

        count = 0
        iterator = iter(lines)
        while True:
            try:
                line = next(iterator)
            except StopIteration:
                break
            except (OSError, UnicodeDecodeError) as exc:
                raise InputReadError(exc) from exc
            output.write(self.process_line(_chomp(line)))
            output.write("\n")
            count += 1
        output.flush()
        logger.debug("Processed %d lines", count)
        return count


__all__ = ["FileContext", "InputReadError", "StreamDriver"]
