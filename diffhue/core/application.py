import codecs
import logging
import os
import sys
from typing import Optional, TextIO, Tuple

from diffhue.backend.highlighting.resolver import HighlightResolver
from diffhue.backend.highlighting.theme import resolve_theme
from diffhue.backend.output.stream_driver import InputReadError, StreamDriver
from diffhue.backend.services.logging.logging_service import setup_logging
from diffhue.cli.parser import parse_arguments
from diffhue.config import ConfigError, RunSettings
from diffhue.core.listing import print_languages, print_themes

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def _configure_streams() -> Tuple[TextIO, TextIO]:
    """Switch the standard streams to strict UTF-8.

    ``newline="\\n"`` on stdin splits lines on line feeds only, so a lone
    carriage return stays inside its line.
    """

    stdin, stdout = sys.stdin, sys.stdout
    if hasattr(stdin, "reconfigure"):
        stdin.reconfigure(encoding="utf-8", errors="strict", newline="\n")
    if hasattr(stdout, "reconfigure") and codecs.lookup(stdout.encoding).name != "utf-8":
        stdout.reconfigure(encoding="utf-8")
    return stdin, stdout


def _silence_stdout() -> None:
    """Point stdout at the null device after the reader closed the pipe, so
    the interpreter's final flush does not fail again."""

    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        # stdout was replaced by an in-memory stream; nothing to redirect.
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def _run_listing(args) -> bool:
    if args.list_themes:
        print_themes()
        return True
    if args.list_languages:
        print_languages()
        return True
    return False


def run(argv: Optional[list] = None) -> None:
    args = parse_arguments(argv)

    setup_logging(args.verbose, args.log_file)

    try:
        settings = RunSettings.from_args(args)
        theme = resolve_theme(settings.theme)
    except ConfigError as exc:
        logging.error("Invalid configuration: %s", exc)
        sys.exit(EXIT_USAGE)

    logging.debug("Theme: %s", theme.name)
    logging.debug("Width: %s", settings.width)
    logging.debug("Color scheme: %s", settings.color_scheme or "unspecified")

    try:
        if _run_listing(args):
            sys.stdout.flush()
            sys.exit(EXIT_OK)

        stdin, stdout = _configure_streams()
        driver = StreamDriver(
            resolver=HighlightResolver(),
            theme=theme,
            palette=settings.palette,
            width=settings.width,
        )
        driver.run(stdin, stdout)
    except BrokenPipeError:
        # The reader (usually a pager) exited early.
        _silence_stdout()
        sys.exit(EXIT_OK)
    except InputReadError as exc:
        logging.error("Error reading input: %s", exc.__cause__ or exc)
        sys.exit(EXIT_FAILURE)
    except OSError as exc:
        logging.error("Error writing output: %s", exc)
        sys.exit(EXIT_FAILURE)
    except KeyboardInterrupt:
        logging.warning("Programme interrupted by user (CTRL+C).")
        sys.exit(EXIT_FAILURE)
