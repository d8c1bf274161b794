"""Grammar lookup and per-file highlighters backed by Pygments."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Protocol, Tuple

from pygments.lexer import Lexer
from pygments.lexers import find_lexer_class_for_filename, get_all_lexers

from ...config.defaults import Color
from .theme import Theme

logger = logging.getLogger(__name__)

StyledSpan = Tuple[Color, str]

# Spans must cover the input text exactly.
LEXER_OPTIONS = {"stripnl": False, "ensurenl": False}


def _lexable(text: str) -> str:
    """Replace the characters Pygments would rewrite with spaces."""

    text = text.replace("\r", " ")
    if text.startswith("\ufeff"):
        text = " " + text[1:]
    return text


class GrammarRegistry(Protocol):
    def lookup(self, extension: str) -> Optional[Lexer]:
        ...


class LineHighlighter(Protocol):
    def highlight(self, text: str) -> Iterator[StyledSpan]:
        ...


class PygmentsGrammarRegistry:
    """Finds a lexer by matching ``file.<extension>`` against the filename
    patterns of the installed Pygments lexers."""

    def lookup(self, extension: str) -> Optional[Lexer]:
        for candidate in dict.fromkeys((extension, extension.lower())):
            lexer_class = find_lexer_class_for_filename(f"file.{candidate}")
            if lexer_class is not None:
                return lexer_class(**LEXER_OPTIONS)
        return None


class Highlighter:
    """A grammar bound to a theme. One instance serves every line of a file."""

    def __init__(self, grammar: Lexer, theme: Theme) -> None:
        self.grammar = grammar
        self.theme = theme

    def highlight(self, text: str) -> Iterator[StyledSpan]:
        # Pygments rewrites carriage returns and drops a leading BOM. Lex a
        # same-length stand-in and slice the spans out of the real text.
        position = 0
        for ttype, value in self.grammar.get_tokens(_lexable(text)):
            chunk = text[position:position + len(value)]
            if chunk:
                yield self.theme.foreground_for(ttype), chunk
            position += len(value)
        if position < len(text):
            yield self.theme.default_foreground, text[position:]


class HighlightResolver:
    """Maps file extensions to grammars, remembering earlier lookups."""

    def __init__(self, registry: Optional[GrammarRegistry] = None) -> None:
        self.registry = registry or PygmentsGrammarRegistry()
        self._grammars: Dict[str, Optional[Lexer]] = {}

    def resolve(self, extension: Optional[str]) -> Optional[Lexer]:
        if not extension:
            return None
        if extension not in self._grammars:
            grammar = self.registry.lookup(extension)
            if grammar is None:
                logger.debug("No grammar for extension '%s'; lines pass through", extension)
            else:
                logger.debug("Extension '%s' uses grammar %s", extension, grammar.name)
            self._grammars[extension] = grammar
        return self._grammars[extension]

    def highlighter_for(self, extension: Optional[str], theme: Theme) -> Optional[Highlighter]:
        grammar = self.resolve(extension)
        if grammar is None:
            return None
        return Highlighter(grammar, theme)


def list_languages() -> List[Tuple[str, List[str]]]:
    """Return ``(language name, filename patterns)`` for every installed lexer."""

    languages = [
        (name, list(filenames))
        for name, _aliases, filenames, _mimetypes in get_all_lexers()
        if filenames
    ]
    return sorted(languages, key=lambda item: item[0].lower())


__all__ = [
    "StyledSpan",
    "GrammarRegistry",
    "LineHighlighter",
    "PygmentsGrammarRegistry",
    "Highlighter",
    "HighlightResolver",
    "list_languages",
]
