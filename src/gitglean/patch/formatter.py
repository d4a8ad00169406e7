"""Rebuild patches from a hunk model and a line selection.

Two modes share the header helpers:

* staging (``format_patch``) keeps only the selected changes so the patch
  can be applied to the index;
* discarding (``format_patch_to_discard_changes``) reverses the selected
  changes so the patch can be applied to the working tree.

Hunk line counts are always recomputed from the emitted lines.
"""

from __future__ import annotations

from typing import List, Optional

from gitglean.diff.models import DiffHunk, DiffLineType, TextDiff
from gitglean.diff.selection import DiffSelection
from gitglean.exceptions import NoChangesError
from gitglean.status.models import AppFileStatusKind, WorkingDirectoryFileChange

NO_NEWLINE_MARKER = "\\ No newline at end of file"


def format_patch_header(from_path: Optional[str], to_path: Optional[str]) -> str:
    """``---``/``+++`` lines; a missing side is ``/dev/null``."""
    from_ = f"a/{from_path}" if from_path is not None else "/dev/null"
    to = f"b/{to_path}" if to_path is not None else "/dev/null"
    return f"--- {from_}\n+++ {to}\n"


def format_patch_header_for_file(file: WorkingDirectoryFileChange) -> str:
    if file.status.kind in (AppFileStatusKind.NEW, AppFileStatusKind.UNTRACKED):
        return format_patch_header(None, file.path)
    return format_patch_header(file.path, file.path)


def format_hunk_header(
    old_start_line: int,
    old_line_count: int,
    new_start_line: int,
    new_line_count: int,
    section_heading: Optional[str] = None,
) -> str:
    """``@@ -l[,s] +l[,s] @@[ heading]``; a count of 1 is left implicit."""
    before = str(old_start_line) if old_line_count == 1 else f"{old_start_line},{old_line_count}"
    after = str(new_start_line) if new_line_count == 1 else f"{new_start_line},{new_line_count}"
    heading = f" {section_heading}" if section_heading else ""
    return f"@@ -{before} +{after} @@{heading}\n"


def _emit(buf: List[str], text: str, no_trailing_newline: bool) -> None:
    buf.append(f"{text}\n")
    if no_trailing_newline:
        buf.append(f"{NO_NEWLINE_MARKER}\n")


def _stage_hunk(hunk: DiffHunk, selection: DiffSelection, is_new_file: bool) -> Optional[str]:
    buf: List[str] = []
    old_count = new_count = 0
    any_changes = False

    for line in hunk.lines:
        if line.type is DiffLineType.HUNK:
            continue

        if line.type is DiffLineType.CONTEXT:
            _emit(buf, line.text, line.no_trailing_newline)
            old_count += 1
            new_count += 1
        elif selection.is_selected(line.absolute_index):
            _emit(buf, line.text, line.no_trailing_newline)
            if line.type is DiffLineType.ADD:
                new_count += 1
            else:
                old_count += 1
            any_changes = True
        elif is_new_file or line.type is DiffLineType.ADD:
            # Not in the index, so not part of this patch.
            continue
        else:
            # Still in the index: keep it on both sides.
            _emit(buf, f" {line.content}", line.no_trailing_newline)
            old_count += 1
            new_count += 1

    if not any_changes:
        return None
    h = hunk.header
    return (
        format_hunk_header(h.old_start_line, old_count, h.new_start_line, new_count, h.section_heading)
        + "".join(buf)
    )


def format_patch(file: WorkingDirectoryFileChange, diff: TextDiff) -> str:
    """Patch holding only the selected changes of *file*.

    Raises NoChangesError when no hunk keeps a change.
    """
    is_new_file = file.status.kind in (AppFileStatusKind.NEW, AppFileStatusKind.UNTRACKED)
    patch = ""
    for hunk in diff.hunks:
        formatted = _stage_hunk(hunk, file.selection, is_new_file)
        if formatted is not None:
            patch += formatted

    if not patch:
        raise NoChangesError(f"Could not generate a patch, no changes for file {file.path}")
    return format_patch_header_for_file(file) + patch


def format_patch_to_discard_changes(
    file_path: str, diff: TextDiff, selection: DiffSelection
) -> Optional[str]:
    """Patch that reverts the selected changes in the working tree.

    Returns None when the selection covers no change.
    """
    patch = ""
    for hunk in diff.hunks:
        buf: List[str] = []
        old_count = new_count = 0
        any_changes = False

        for line in hunk.lines:
            if line.type is DiffLineType.HUNK:
                continue
            if line.type is DiffLineType.CONTEXT:
                _emit(buf, line.text, line.no_trailing_newline)
                old_count += 1
                new_count += 1
            elif line.type is DiffLineType.ADD and selection.is_selected(line.absolute_index):
                _emit(buf, f"-{line.content}", line.no_trailing_newline)
                old_count += 1
                any_changes = True
            elif line.type is DiffLineType.DELETE and selection.is_selected(line.absolute_index):
                _emit(buf, f"+{line.content}", line.no_trailing_newline)
                new_count += 1
                any_changes = True
            elif line.type is DiffLineType.ADD:
                # Kept additions remain in the working copy.
                _emit(buf, f" {line.content}", line.no_trailing_newline)
                old_count += 1
                new_count += 1
            # Unselected deletions are already absent from the working copy.

        if not any_changes:
            continue

        # Both sides of a discard patch are positioned in the working copy.
        h = hunk.header
        patch += format_hunk_header(
            h.new_start_line, old_count, h.new_start_line, new_count, h.section_heading
        )
        patch += "".join(buf)

    if not patch:
        return None
    return format_patch_header(file_path, file_path) + patch
