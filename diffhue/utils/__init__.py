from .ansi import strip_ansi_codes
from .color_support import color_support

__all__ = ["strip_ansi_codes", "color_support"]
