from .compositor import compose_hunk_line, paint, paint_ranges
from .stream_driver import FileContext, InputReadError, StreamDriver

__all__ = [
    "compose_hunk_line",
    "paint",
    "paint_ranges",
    "FileContext",
    "InputReadError",
    "StreamDriver",
]
