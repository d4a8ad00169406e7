"""Hunk model of a unified text diff."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class DiffLineType(str, Enum):
    CONTEXT = "context"
    ADD = "add"
    DELETE = "delete"
    HUNK = "hunk"


@dataclass(frozen=True)
class DiffLine:
    """A single line of a hunk.

    ``text`` keeps the leading ``+``/``-``/`` `` marker (or the whole ``@@``
    header for HUNK lines). ``absolute_index`` is the line's position in the
    unified diff counted from the first hunk header, and is what selections
    are keyed on.
    """

    text: str
    type: DiffLineType
    absolute_index: int
    old_line_number: Optional[int] = None
    new_line_number: Optional[int] = None
    no_trailing_newline: bool = False

    @property
    def content(self) -> str:
        """Line text without its diff marker."""
        if self.type is DiffLineType.HUNK:
            return self.text
        return self.text[1:]

    @property
    def is_include_able(self) -> bool:
        return self.type in (DiffLineType.ADD, DiffLineType.DELETE)


@dataclass(frozen=True)
class DiffHunkHeader:
    old_start_line: int
    old_line_count: int
    new_start_line: int
    new_line_count: int
    section_heading: str = ""


@dataclass
class DiffHunk:
    header: DiffHunkHeader
    lines: List[DiffLine]
    unified_diff_start: int
    unified_diff_end: int

    def changed_lines(self) -> List[DiffLine]:
        return [line for line in self.lines if line.is_include_able]


@dataclass
class TextDiff:
    """A parsed text diff for one file."""

    text: str = ""
    header_lines: List[str] = field(default_factory=list)
    hunks: List[DiffHunk] = field(default_factory=list)
    is_binary: bool = False
    max_line_number: int = 0

    def selectable_lines(self) -> set[int]:
        """Absolute indices of every add/delete line."""
        return {
            line.absolute_index
            for hunk in self.hunks
            for line in hunk.lines
            if line.is_include_able
        }

    def line_at(self, index: int) -> Optional[DiffLine]:
        for hunk in self.hunks:
            if hunk.unified_diff_start <= index <= hunk.unified_diff_end:
                return hunk.lines[index - hunk.unified_diff_start]
        return None
