# diffhue/utils/color_support.py

import os
import sys
from typing import Optional, TextIO
from functools import lru_cache
from colorama import Fore, Style, AnsiToWin32

class ColorSupport:
    """Manages color support detection for diagnostic output.

    Only the diagnostic stream (stderr) is affected. Highlighted diff output
    on stdout is always written with its escape codes intact.
    """

    def __init__(self):
        self._force_color: Optional[bool] = self._get_env_force_color()

    def _get_env_force_color(self) -> Optional[bool]:
        force_color = os.environ.get('FORCE_COLOR', '').lower()
        no_color = os.environ.get('NO_COLOR') is not None

        if no_color:
            return False
        if force_color in ('1', 'true', 'yes'):
            return True
        return None

    def set_force_color(self, force: Optional[bool]) -> None:
        """Force or reset color support detection.

        Args:
            force: ``True`` to force-enable colors, ``False`` to disable them and
                ``None`` to fall back to automatic (environment-based) detection.
        """

        if force not in (True, False, None):
            raise ValueError("force must be True, False or None")

        target_force = self._get_env_force_color() if force is None else force

        if target_force == self._force_color:
            return

        self._force_color = target_force
        # reset cached detection results so the change takes immediate effect
        self.supports_color.cache_clear()

    @lru_cache(maxsize=1)
    def supports_color(self) -> bool:
        """Determine if the diagnostic stream supports color output."""
        if self._force_color is not None:
            return self._force_color

        term = os.environ.get('TERM', '').lower()

        if 'dumb' in term:
            return False

        if sys.platform == 'win32':
            return (
                'ANSICON' in os.environ or
                'WT_SESSION' in os.environ or  # Windows Terminal
                'ConEmuANSI' in os.environ or  # ConEmu
                os.environ.get('TERM_PROGRAM', '') == 'vscode'  # VS Code terminal
            )

        return hasattr(sys.stderr, 'isatty') and sys.stderr.isatty()

    def wrap_stream(self, stream: TextIO) -> TextIO:
        """Wrap a diagnostic stream so escape codes are stripped or converted
        according to the detected color support."""
        wrapper = AnsiToWin32(stream, strip=not self.supports_color(), convert=None)
        if wrapper.should_wrap():
            return wrapper.stream
        return stream

    def colored(self, text: str, color: Optional[str] = None,
                bright: bool = False) -> str:
        """
        Apply color to text if supported.

        Args:
            text: The text to color
            color: Foreground color (Fore.*)
            bright: Whether to apply bright style

        Returns:
            Colored text if supported, original text otherwise
        """
        if not self.supports_color() or not text:
            return text

        result = []
        if bright:
            result.append(Style.BRIGHT)
        if color:
            result.append(color)

        result.append(str(text))
        result.append(Style.RESET_ALL)

        return ''.join(result)

    def error(self, text: str) -> str:
        """Format text as error message."""
        return self.colored(text, Fore.RED)

    def success(self, text: str) -> str:
        """Format text as success message."""
        return self.colored(text, Fore.GREEN)

    def info(self, text: str) -> str:
        """Format text as info message."""
        return self.colored(text, Fore.CYAN)

# Global instance
color_support = ColorSupport()
