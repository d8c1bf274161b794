# diffhue/backend/services/logging/formatters/color_formatter.py

import logging
from typing import Dict, Any
from colorama import Fore
from .....utils.color_support import color_support

class ColorFormatter(logging.Formatter):
    """
    A logging formatter for the diagnostic stream that colors level names
    and messages when the terminal supports it.
    """

    LEVEL_COLORS: Dict[int, str] = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.MAGENTA,
    }

    LEVEL_STYLES: Dict[str, Dict[str, Any]] = {
        'DEBUG': {'color': Fore.CYAN},
        'INFO': {'color': Fore.GREEN},
        'WARNING': {'color': Fore.YELLOW, 'bright': True},
        'ERROR': {'color': Fore.RED, 'bright': True},
        'CRITICAL': {'color': Fore.MAGENTA, 'bright': True},
    }

    def __init__(
        self,
        fmt: str = None,
        style: str = '%',
        validate: bool = True
    ):
        super().__init__(
            fmt or self._get_default_format(),
            None,
            style,
            validate
        )

    @staticmethod
    def _get_default_format() -> str:
        """Get the default log format."""
        return 'diffhue: [%(levelname)s] %(message)s'

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the log record with colors if supported.

        Args:
            record: The log record to format

        Returns:
            Formatted log message string
        """
        orig_msg = record.msg
        orig_levelname = record.levelname

        try:
            if color_support.supports_color():
                style = self.LEVEL_STYLES.get(record.levelname, {})
                record.levelname = color_support.colored(
                    record.levelname,
                    color=style.get('color'),
                    bright=style.get('bright', False)
                )

                if isinstance(record.msg, str):
                    color = self.LEVEL_COLORS.get(record.levelno)
                    if color:
                        record.msg = color_support.colored(record.msg, color)

            return super().format(record)
        finally:
            record.msg = orig_msg
            record.levelname = orig_levelname

