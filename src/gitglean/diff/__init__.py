"""Diff hunk model and per-line selection."""

from gitglean.diff.models import DiffHunk, DiffHunkHeader, DiffLine, DiffLineType, TextDiff
from gitglean.diff.parser import DiffParser, parse_hunk_header
from gitglean.diff.selection import DiffSelection, DiffSelectionType, parse_line_spec

__all__ = [
    "DiffHunk",
    "DiffHunkHeader",
    "DiffLine",
    "DiffLineType",
    "DiffParser",
    "DiffSelection",
    "DiffSelectionType",
    "TextDiff",
    "parse_hunk_header",
    "parse_line_spec",
]
