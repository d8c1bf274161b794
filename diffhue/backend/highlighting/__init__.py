from .resolver import (
    GrammarRegistry,
    HighlightResolver,
    Highlighter,
    LineHighlighter,
    PygmentsGrammarRegistry,
    StyledSpan,
    list_languages,
)
from .theme import Theme, list_themes, resolve_theme

__all__ = [
    "GrammarRegistry",
    "HighlightResolver",
    "Highlighter",
    "LineHighlighter",
    "PygmentsGrammarRegistry",
    "StyledSpan",
    "Theme",
    "list_languages",
    "list_themes",
    "resolve_theme",
]
