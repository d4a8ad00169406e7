"""Conflict details and conversion of status entries to file changes."""

from __future__ import annotations

import re
from collections import Counter
from typing import Dict, Iterable, Optional

from gitglean.diff.selection import DiffSelection, DiffSelectionType
from gitglean.status.models import (
    AppFileStatus,
    AppFileStatusKind,
    ConflictFilesDetails,
    ConflictsWithMarkers,
    CopiedOrRenamedFileStatus,
    FileEntry,
    GitStatusEntry,
    ManualConflict,
    ManualConflictEntry,
    OrdinaryChangeType,
    OrdinaryEntry,
    PlainFileStatus,
    RenamedOrCopiedEntry,
    RenamedOrCopiedType,
    StatusEntry,
    TextConflictEntry,
    UnmergedEntrySummary,
    UntrackedEntry,
    UntrackedFileStatus,
    WorkingDirectoryFileChange,
)
from gitglean.status.parser import map_status

CONFLICT_STATUS_CODES = frozenset({"DD", "AU", "UD", "UA", "DU", "AA", "UU"})

_CONFLICT_MARKER_RE = re.compile(
    r"^(.+):\d+: leftover conflict marker$", re.IGNORECASE | re.MULTILINE
)

_ORDINARY_KINDS = {
    OrdinaryChangeType.ADDED: AppFileStatusKind.NEW,
    OrdinaryChangeType.MODIFIED: AppFileStatusKind.MODIFIED,
    OrdinaryChangeType.DELETED: AppFileStatusKind.DELETED,
}


def parse_conflict_markers(diff_check_output: str) -> Dict[str, int]:
    """Count leftover conflict markers per path in ``git diff --check`` output."""
    return dict(Counter(m.group(1) for m in _CONFLICT_MARKER_RE.finditer(diff_check_output)))


def conflicted_files_in_index(entries: Iterable[StatusEntry]) -> bool:
    return any(e.status_code in CONFLICT_STATUS_CODES for e in entries)


def _conflicted_status(
    entry: TextConflictEntry | ManualConflictEntry,
    path: str,
    conflict_details: ConflictFilesDetails,
) -> AppFileStatus:
    if isinstance(entry, TextConflictEntry) and entry.details.action in (
        UnmergedEntrySummary.BOTH_ADDED,
        UnmergedEntrySummary.BOTH_MODIFIED,
    ):
        if path not in conflict_details.binary_file_paths:
            return ConflictsWithMarkers(
                entry=entry,
                conflict_marker_count=conflict_details.conflict_counts_by_path.get(path, 0),
            )
    return ManualConflict(entry=entry)


def convert_to_app_status(
    path: str,
    entry: FileEntry,
    conflict_details: ConflictFilesDetails,
    old_path: Optional[str] = None,
) -> AppFileStatus:
    if isinstance(entry, OrdinaryEntry):
        return PlainFileStatus(kind=_ORDINARY_KINDS[entry.type], submodule_status=entry.submodule_status)
    if isinstance(entry, RenamedOrCopiedEntry):
        kind = (
            AppFileStatusKind.COPIED
            if entry.type is RenamedOrCopiedType.COPIED
            else AppFileStatusKind.RENAMED
        )
        if old_path is not None:
            return CopiedOrRenamedFileStatus(
                kind=kind, old_path=old_path, submodule_status=entry.submodule_status
            )
        # No recorded origin: report as a plain modification of the new path.
        return PlainFileStatus(kind=AppFileStatusKind.MODIFIED, submodule_status=entry.submodule_status)
    if isinstance(entry, UntrackedEntry):
        return UntrackedFileStatus(submodule_status=entry.submodule_status)
    return _conflicted_status(entry, path, conflict_details)


def build_status_map(
    entries: Iterable[StatusEntry],
    conflict_details: Optional[ConflictFilesDetails] = None,
) -> Dict[str, WorkingDirectoryFileChange]:
    """Fold status entries into a path -> file change map, in stream order."""
    conflict_details = conflict_details or ConflictFilesDetails()
    files: Dict[str, WorkingDirectoryFileChange] = {}

    for entry in entries:
        status = map_status(entry.status_code, entry.submodule_status_code)

        if isinstance(status, OrdinaryEntry):
            # Added then deleted: nothing left on disk or in HEAD.
            if status.index is GitStatusEntry.ADDED and status.working_tree is GitStatusEntry.DELETED:
                continue
        elif isinstance(status, UntrackedEntry):
            files.pop(entry.path, None)

        app_status = convert_to_app_status(entry.path, status, conflict_details, entry.old_path)

        submodule = app_status.submodule_status
        initial = (
            DiffSelectionType.NONE
            if app_status.kind is AppFileStatusKind.MODIFIED
            and submodule is not None
            and not submodule.commit_changed
            else DiffSelectionType.ALL
        )
        files[entry.path] = WorkingDirectoryFileChange(
            path=entry.path,
            status=app_status,
            selection=DiffSelection(initial),
        )

    return files
