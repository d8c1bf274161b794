import argparse
from typing import Optional

from diffhue import __version__
from diffhue.backend.highlighting.theme import list_themes
from diffhue.config.defaults import DEFAULT_THEME, DEFAULT_WIDTH, MAX_WIDTH


def width_type(value: str) -> int:
    try:
        width = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid width: {value!r}")
    if not 0 <= width <= MAX_WIDTH:
        raise argparse.ArgumentTypeError(
            f"width must be between 0 and {MAX_WIDTH}, got {width}"
        )
    return width


def parse_arguments(argv: Optional[list[str]] = None):
    parser = argparse.ArgumentParser(
        prog="diffhue",
        description=(
            "Reads git diff output on standard input and writes it to standard "
            "output with syntax highlighting and added/removed line tinting."
        ),
        epilog=(
            "Examples:\n"
            "  git diff | diffhue\n"
            "  git log -p | diffhue --width 120 | less -R\n"
            "  git show HEAD | diffhue --theme solarized-dark\n"
            "  git config --global core.pager 'diffhue | less -R'\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Color scheme
    parser.add_argument(
        "--light",
        action="store_true",
        help="Use diff highlighting colors appropriate for a light terminal background.",
    )
    parser.add_argument(
        "--dark",
        action="store_true",
        help="Use diff highlighting colors appropriate for a dark terminal background.",
    )
    parser.add_argument(
        "--theme",
        type=str,
        choices=list_themes(),
        default=None,
        metavar="NAME",
        help=f"Syntax highlighting theme (default: {DEFAULT_THEME}). See --list-themes.",
    )
    parser.add_argument(
        "-w",
        "--width",
        type=width_type,
        default=None,
        help=(
            "The width (in characters) of the diff highlighting. Shorter lines "
            f"are padded to this width (default: {DEFAULT_WIDTH})."
        ),
    )

    # Listings
    parser.add_argument(
        "--list-themes",
        action="store_true",
        help="List the available syntax highlighting themes and exit.",
    )
    parser.add_argument(
        "--list-languages",
        action="store_true",
        help="List the highlighted languages and their file patterns and exit.",
    )

    # Diagnostics
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enables verbose logging.",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Path to the log file.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(argv)
