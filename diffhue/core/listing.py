"""Tables printed by ``--list-themes`` and ``--list-languages``."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from diffhue.backend.highlighting.resolver import list_languages
from diffhue.backend.highlighting.theme import list_themes
from diffhue.config.defaults import DEFAULT_THEME


def print_themes(console: Optional[Console] = None) -> None:
    console = console or Console()
    table = Table(title="Themes", show_lines=False)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Default", justify="center")
    for name in list_themes():
        table.add_row(name, "*" if name == DEFAULT_THEME else "")
    console.print(table)


def print_languages(console: Optional[Console] = None) -> None:
    console = console or Console()
    table = Table(title="Languages")
    table.add_column("Language", style="cyan", no_wrap=True)
    table.add_column("File patterns")
    for name, patterns in list_languages():
        table.add_row(escape(name), escape(", ".join(patterns)))
    console.print(table)
