from __future__ import annotations

from typing import Optional

import pytest
from pygments.lexers import PythonLexer
from pygments.token import Token

from diffhue.backend.highlighting.resolver import (
    HighlightResolver,
    Highlighter,
    PygmentsGrammarRegistry,
    list_languages,
)
from diffhue.backend.highlighting.theme import (
    DARK_FOREGROUND,
    LIGHT_FOREGROUND,
    list_themes,
    parse_hex_color,
    resolve_theme,
)
from diffhue.config.defaults import DEFAULT_THEME, Color
from diffhue.config.exceptions import ConfigError, UnknownThemeError


class CountingRegistry:
    def __init__(self) -> None:
        self.lookups: list[str] = []

    def lookup(self, extension: str) -> Optional[PythonLexer]:
        self.lookups.append(extension)
        if extension == "py":
            return PythonLexer(stripnl=False, ensurenl=False)
        return None


@pytest.fixture(scope="module")
def theme():
    return resolve_theme()


def test_resolve_theme_defaults_to_builtin_theme(theme):
    assert theme.name == DEFAULT_THEME


def test_resolve_unknown_theme_raises_config_error():
    with pytest.raises(UnknownThemeError) as excinfo:
        resolve_theme("no-such-theme")
    assert isinstance(excinfo.value, ConfigError)
    assert excinfo.value.name == "no-such-theme"


def test_list_themes_contains_default():
    themes = list_themes()
    assert DEFAULT_THEME in themes
    assert themes == sorted(themes)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("#272822", Color(0x27, 0x28, 0x22)),
        ("f8f8f2", Color(0xF8, 0xF8, 0xF2)),
        ("#abc", Color(0xAA, 0xBB, 0xCC)),
        ("", None),
        (None, None),
        ("#12345", None),
        ("#gggggg", None),
    ],
)
def test_parse_hex_color(value, expected):
    assert parse_hex_color(value) == expected


def test_dark_theme_gets_light_default_foreground(theme):
    assert theme.default_foreground == LIGHT_FOREGROUND


def test_light_theme_gets_dark_default_foreground():
    assert resolve_theme("default").default_foreground == DARK_FOREGROUND


def test_foreground_uses_theme_colors(theme):
    assert theme.foreground_for(Token.Text) == Color(0xF8, 0xF8, 0xF2)
    assert isinstance(theme.foreground_for(Token.Keyword), Color)


def test_unknown_token_subtype_inherits_from_parent(theme):
    custom = Token.Keyword.SomethingNoStyleDefines
    assert theme.foreground_for(custom) == theme.foreground_for(Token.Keyword)


def test_registry_finds_lexer_by_extension():
    registry = PygmentsGrammarRegistry()
    assert registry.lookup("py").name == "Python"
    assert registry.lookup("PY").name == "Python"
    assert registry.lookup("unknownext") is None


def test_resolver_returns_none_without_extension():
    resolver = HighlightResolver(CountingRegistry())
    assert resolver.resolve(None) is None
    assert resolver.resolve("") is None
    assert resolver.registry.lookups == []


def test_resolver_memoizes_hits_and_misses():
    registry = CountingRegistry()
    resolver = HighlightResolver(registry)

    first = resolver.resolve("py")
    assert resolver.resolve("py") is first
    assert resolver.resolve("unknownext") is None
    assert resolver.resolve("unknownext") is None
    assert registry.lookups == ["py", "unknownext"]


def test_highlighter_for_unknown_extension_is_none(theme):
    resolver = HighlightResolver(CountingRegistry())
    assert resolver.highlighter_for("unknownext", theme) is None
    assert isinstance(resolver.highlighter_for("py", theme), Highlighter)


def test_highlighter_spans_cover_text_exactly(theme):
    highlighter = HighlightResolver().highlighter_for("py", theme)
    text = 'print("hi")'.ljust(100)

    spans = list(highlighter.highlight(text))

    assert "".join(value for _, value in spans) == text
    assert all(isinstance(color, Color) for color, _ in spans)
    assert spans[0][1] == "print"


def test_highlighter_keeps_leading_and_trailing_whitespace(theme):
    highlighter = HighlightResolver().highlighter_for("py", theme)
    text = "    return x  "
    assert "".join(value for _, value in highlighter.highlight(text)) == text


def test_highlighter_on_empty_text_yields_nothing_visible(theme):
    highlighter = HighlightResolver().highlighter_for("py", theme)
    assert "".join(value for _, value in highlighter.highlight("")) == ""


def test_highlight_returns_one_shot_iterator(theme):
    highlighter = HighlightResolver().highlighter_for("py", theme)
    spans = highlighter.highlight("x = 1")
    assert list(spans)
    assert list(spans) == []


def test_list_languages_includes_python():
    languages = dict(list_languages())
    assert "*.py" in languages["Python"]


@pytest.mark.parametrize(
    "text",
    [
        "x = 1\ry = 2",
        "a\r\nb",
        "trailing\r",
        "\ufeffimport os",
        "\ufeff\ufeff",
        "\tindented = True",
    ],
)
def test_highlighter_reproduces_text_pygments_would_rewrite(theme, text):
    highlighter = HighlightResolver().highlighter_for("py", theme)
    spans = list(highlighter.highlight(text))
    assert "".join(value for _, value in spans) == text
    assert all(value for _, value in spans)
