from __future__ import annotations

import logging
from typing import Iterator, Optional

import pytest

from diffhue.config.defaults import Color
from diffhue.utils.color_support import color_support


class StubHighlighter:
    """Colors every line with a single span of one color."""

    def __init__(self, color: Color = Color(1, 2, 3)) -> None:
        self.color = color
        self.calls: list[str] = []

    def highlight(self, text: str):
        self.calls.append(text)
        if text:
            yield self.color, text


@pytest.fixture
def stub_highlighter() -> StubHighlighter:
    return StubHighlighter()


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    force_color: Optional[bool] = getattr(color_support, "_force_color", None)
    try:
        yield
    finally:
        for handler in set(root_logger.handlers) - set(handlers):
            handler.close()
        root_logger.handlers.clear()
        for handler in handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(level)
        color_support.set_force_color(force_color)
