"""Unified diff parser: builds the hunk model for a single file's diff.

Every line from the first hunk header on gets an absolute index (the hunk
header itself included), which is what line selections refer to. The
``\\ No newline at end of file`` marker does not get an index; it flags the
line before it instead.
"""

from __future__ import annotations

import re
from dataclasses import replace
from typing import List, Optional

from gitglean.diff.models import DiffHunk, DiffHunkHeader, DiffLine, DiffLineType, TextDiff

# --- Regex patterns for diff parsing ---

_HUNK_HEADER_RE = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@ ?(.*)$")
_BINARY_RE = re.compile(r"^Binary files .* and .* differ$")
_GIT_BINARY_PATCH_RE = re.compile(r"^GIT binary patch$")
_NO_NEWLINE_RE = re.compile(r"^\\ No newline at end of file$")


def parse_hunk_header(line: str) -> Optional[DiffHunkHeader]:
    m = _HUNK_HEADER_RE.match(line)
    if not m:
        return None
    return DiffHunkHeader(
        old_start_line=int(m.group(1)),
        old_line_count=int(m.group(2)) if m.group(2) is not None else 1,
        new_start_line=int(m.group(3)),
        new_line_count=int(m.group(4)) if m.group(4) is not None else 1,
        section_heading=m.group(5).strip(),
    )


class DiffParser:
    """Parse the unified diff of one file into a TextDiff.

    Usage::

        diff = DiffParser(diff_text).parse()
        for hunk in diff.hunks:
            ...
    """

    def __init__(self, diff_text: str) -> None:
        self._text = diff_text
        self._lines = diff_text.split("\n")
        if self._lines and self._lines[-1] == "":
            self._lines.pop()

    def parse(self) -> TextDiff:
        header_lines: List[str] = []
        idx = 0
        total = len(self._lines)

        while idx < total and not self._lines[idx].startswith("@@"):
            line = self._lines[idx].rstrip("\r")
            if _BINARY_RE.match(line) or _GIT_BINARY_PATCH_RE.match(line):
                return TextDiff(text=self._text, header_lines=header_lines, is_binary=True)
            header_lines.append(line)
            idx += 1

        hunks: List[DiffHunk] = []
        lines: List[DiffLine] = []
        header: Optional[DiffHunkHeader] = None
        hunk_start = 0
        absolute = 0
        old_line = new_line = 0
        max_line_number = 0

        def close_hunk() -> None:
            if header is not None:
                hunks.append(
                    DiffHunk(
                        header=header,
                        lines=list(lines),
                        unified_diff_start=hunk_start,
                        unified_diff_end=absolute - 1,
                    )
                )

        while idx < total:
            raw_line = self._lines[idx].rstrip("\r")
            idx += 1

            # --- Hunk header ---
            parsed = parse_hunk_header(raw_line)
            if parsed is not None:
                close_hunk()
                header = parsed
                lines = [DiffLine(text=raw_line, type=DiffLineType.HUNK, absolute_index=absolute)]
                hunk_start = absolute
                absolute += 1
                old_line = parsed.old_start_line
                new_line = parsed.new_start_line
                continue

            if header is None:
                continue

            # --- "\ No newline at end of file" → flag previous line ---
            if _NO_NEWLINE_RE.match(raw_line):
                if lines and lines[-1].type is not DiffLineType.HUNK:
                    lines[-1] = replace(lines[-1], no_trailing_newline=True)
                continue

            # --- Content lines ---
            if raw_line.startswith("+"):
                line = DiffLine(raw_line, DiffLineType.ADD, absolute, new_line_number=new_line)
                max_line_number = max(max_line_number, new_line)
                new_line += 1
            elif raw_line.startswith("-"):
                line = DiffLine(raw_line, DiffLineType.DELETE, absolute, old_line_number=old_line)
                max_line_number = max(max_line_number, old_line)
                old_line += 1
            elif raw_line.startswith(" ") or raw_line == "":
                line = DiffLine(
                    raw_line or " ",
                    DiffLineType.CONTEXT,
                    absolute,
                    old_line_number=old_line,
                    new_line_number=new_line,
                )
                max_line_number = max(max_line_number, old_line, new_line)
                old_line += 1
                new_line += 1
            else:
                # Unknown line, e.g. the start of another file's diff
                continue

            lines.append(line)
            absolute += 1

        close_hunk()
        return TextDiff(
            text=self._text,
            header_lines=header_lines,
            hunks=hunks,
            max_line_number=max_line_number,
        )
