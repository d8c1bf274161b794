"""Line classification for git diff / git log -p output.

Each line moves the filter between four states based purely on its prefix:

* ``diff --``  starts a new file diff (``DIFF_META``); the file extension is
  read from the line so the highlighter can be switched.
* ``commit``   starts a commit header (``COMMIT``).
* ``@@``       starts a hunk (``DIFF_HUNK``).

Any other line keeps the current state. Lines seen while in ``DIFF_HUNK``
are hunk content and may be highlighted.
"""

from __future__ import annotations

import posixpath
from enum import Enum
from typing import NamedTuple, Optional

DIFF_META_PREFIX = "diff --"
COMMIT_PREFIX = "commit"
HUNK_PREFIX = "@@"


class DiffState(Enum):
    COMMIT = "commit"
    DIFF_META = "diff_meta"
    DIFF_HUNK = "diff_hunk"
    UNKNOWN = "unknown"


class Transition(NamedTuple):
    """Result of classifying one line."""

    state: DiffState
    is_hunk_content: bool = False
    file_changed: bool = False
    extension: Optional[str] = None


def get_file_extension_from_diff_line(line: str) -> Optional[str]:
    """Return the extension of the last path on a ``diff --`` line.

    ``diff --git a/src/app.py b/src/app.py`` gives ``"py"``. For renames the
    new path wins. Paths without a dotted suffix give ``None``.
    """

    tokens = line.split()
    if not tokens:
        return None
    path = tokens[-1].strip('"')
    name = posixpath.basename(path)
    _, dot, extension = name.rpartition(".")
    if not dot or not extension:
        return None
    return extension


def classify_line(state: DiffState, line: str) -> Transition:
    """Compute the state transition caused by ``line`` in ``state``."""

    if line.startswith(DIFF_META_PREFIX):
        return Transition(
            DiffState.DIFF_META,
            file_changed=True,
            extension=get_file_extension_from_diff_line(line),
        )
    if line.startswith(COMMIT_PREFIX):
        return Transition(DiffState.COMMIT)
    if line.startswith(HUNK_PREFIX):
        return Transition(DiffState.DIFF_HUNK)
    return Transition(state, is_hunk_content=state is DiffState.DIFF_HUNK)


__all__ = [
    "DiffState",
    "Transition",
    "classify_line",
    "get_file_extension_from_diff_line",
]
