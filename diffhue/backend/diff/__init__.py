from .classifier import (
    DiffState,
    Transition,
    classify_line,
    get_file_extension_from_diff_line,
)

__all__ = [
    "DiffState",
    "Transition",
    "classify_line",
    "get_file_extension_from_diff_line",
]
