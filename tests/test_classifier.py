from __future__ import annotations

import pytest

from diffhue.backend.diff.classifier import (
    DiffState,
    classify_line,
    get_file_extension_from_diff_line,
)


@pytest.mark.parametrize(
    "line, expected",
    [
        ("diff --git a/foo.py b/foo.py", "py"),
        ("diff --git a/src/app/main.rs b/src/app/main.rs", "rs"),
        ("diff --git a/archive.tar.gz b/archive.tar.gz", "gz"),
        ("diff --git a/old.js b/new.ts", "ts"),
        ('diff --git "a/my file.md" "b/my file.md"', "md"),
        ("diff --cc conflicted.c", "c"),
        ("diff --git a/.bashrc b/.bashrc", "bashrc"),
        ("diff --git a/Makefile b/Makefile", None),
        ("diff --git a/v1.2/README b/v1.2/README", None),
        ("diff --git a/trailing. b/trailing.", None),
        ("", None),
    ],
)
def test_get_file_extension_from_diff_line(line, expected):
    assert get_file_extension_from_diff_line(line) == expected


def test_diff_line_enters_meta_state_with_extension():
    transition = classify_line(DiffState.DIFF_HUNK, "diff --git a/foo.py b/foo.py")
    assert transition.state is DiffState.DIFF_META
    assert transition.file_changed is True
    assert transition.extension == "py"
    assert transition.is_hunk_content is False


def test_diff_line_without_extension_still_changes_file():
    transition = classify_line(DiffState.UNKNOWN, "diff --git a/Makefile b/Makefile")
    assert transition.state is DiffState.DIFF_META
    assert transition.file_changed is True
    assert transition.extension is None


@pytest.mark.parametrize("state", list(DiffState))
def test_commit_line_enters_commit_state(state):
    transition = classify_line(state, "commit 4b825dc642cb6eb9a060e54bf8d69288fbee4904")
    assert transition.state is DiffState.COMMIT
    assert not transition.file_changed
    assert not transition.is_hunk_content


@pytest.mark.parametrize("state", list(DiffState))
def test_hunk_header_enters_hunk_state(state):
    transition = classify_line(state, "@@ -1,3 +1,4 @@ def main():")
    assert transition.state is DiffState.DIFF_HUNK
    assert not transition.is_hunk_content


@pytest.mark.parametrize("line", ["+added", "-removed", " context", ""])
def test_lines_inside_hunk_are_content(line):
    transition = classify_line(DiffState.DIFF_HUNK, line)
    assert transition.state is DiffState.DIFF_HUNK
    assert transition.is_hunk_content is True


@pytest.mark.parametrize(
    "state", [DiffState.UNKNOWN, DiffState.COMMIT, DiffState.DIFF_META]
)
@pytest.mark.parametrize(
    "line", ["Author: A U Thor <author@example.com>", "index 83db48f..bf269f4 100644", "+++ b/foo.py"]
)
def test_other_lines_keep_state_and_pass_through(state, line):
    transition = classify_line(state, line)
    assert transition.state is state
    assert not transition.is_hunk_content
    assert not transition.file_changed


def test_prefix_must_be_at_line_start():
    transition = classify_line(DiffState.DIFF_HUNK, " diff --git a/x.py b/x.py")
    assert transition.state is DiffState.DIFF_HUNK
    assert transition.is_hunk_content is True
