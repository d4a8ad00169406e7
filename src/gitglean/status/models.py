"""Data models for decoded `git status --porcelain=2` output."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Union

from gitglean.diff.selection import DiffSelection, DiffSelectionType

# ---- raw stream items ----


@dataclass(frozen=True)
class StatusHeader:
    """A ``# key value`` header token, left uninterpreted."""

    kind: ClassVar[str] = "header"

    value: str


@dataclass(frozen=True)
class StatusEntry:
    """One file record: path plus its raw status and submodule codes."""

    kind: ClassVar[str] = "entry"

    path: str
    status_code: str
    submodule_status_code: str
    old_path: Optional[str] = None


StatusItem = Union[StatusHeader, StatusEntry]


# ---- decoded entry variants ----


class GitStatusEntry(str, Enum):
    MODIFIED = "M"
    ADDED = "A"
    DELETED = "D"
    RENAMED = "R"
    COPIED = "C"
    UNCHANGED = "."
    UNTRACKED = "?"
    IGNORED = "!"
    UPDATED_BUT_UNMERGED = "U"


class UnmergedEntrySummary(str, Enum):
    ADDED_BY_US = "added-by-us"
    DELETED_BY_US = "deleted-by-us"
    ADDED_BY_THEM = "added-by-them"
    DELETED_BY_THEM = "deleted-by-them"
    BOTH_DELETED = "both-deleted"
    BOTH_ADDED = "both-added"
    BOTH_MODIFIED = "both-modified"


class OrdinaryChangeType(str, Enum):
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"


class RenamedOrCopiedType(str, Enum):
    RENAMED = "renamed"
    COPIED = "copied"


@dataclass(frozen=True)
class SubmoduleStatus:
    commit_changed: bool
    modified_changes: bool
    untracked_changes: bool


@dataclass(frozen=True)
class OrdinaryEntry:
    kind: ClassVar[str] = "ordinary"

    type: OrdinaryChangeType
    index: Optional[GitStatusEntry] = None
    working_tree: Optional[GitStatusEntry] = None
    submodule_status: Optional[SubmoduleStatus] = None


@dataclass(frozen=True)
class RenamedOrCopiedEntry:
    kind: ClassVar[str] = "renamed_or_copied"

    type: RenamedOrCopiedType
    index: Optional[GitStatusEntry] = None
    working_tree: Optional[GitStatusEntry] = None
    submodule_status: Optional[SubmoduleStatus] = None


@dataclass(frozen=True)
class UntrackedEntry:
    kind: ClassVar[str] = "untracked"

    submodule_status: Optional[SubmoduleStatus] = None


@dataclass(frozen=True)
class ConflictDetails:
    action: UnmergedEntrySummary
    us: GitStatusEntry
    them: GitStatusEntry


@dataclass(frozen=True)
class TextConflictEntry:
    """Both sides edited the text; resolvable through in-file markers."""

    kind: ClassVar[str] = "conflicted"

    details: ConflictDetails
    submodule_status: Optional[SubmoduleStatus] = None


@dataclass(frozen=True)
class ManualConflictEntry:
    """A conflict the user must settle by choosing a side."""

    kind: ClassVar[str] = "conflicted"

    details: ConflictDetails
    submodule_status: Optional[SubmoduleStatus] = None


FileEntry = Union[
    OrdinaryEntry,
    RenamedOrCopiedEntry,
    UntrackedEntry,
    TextConflictEntry,
    ManualConflictEntry,
]


# ---- application-level file status ----


class AppFileStatusKind(str, Enum):
    NEW = "new"
    MODIFIED = "modified"
    DELETED = "deleted"
    COPIED = "copied"
    RENAMED = "renamed"
    CONFLICTED = "conflicted"
    UNTRACKED = "untracked"


@dataclass(frozen=True)
class PlainFileStatus:
    kind: AppFileStatusKind
    submodule_status: Optional[SubmoduleStatus] = None


@dataclass(frozen=True)
class CopiedOrRenamedFileStatus:
    kind: AppFileStatusKind
    old_path: str
    submodule_status: Optional[SubmoduleStatus] = None


@dataclass(frozen=True)
class UntrackedFileStatus:
    kind: AppFileStatusKind = AppFileStatusKind.UNTRACKED
    submodule_status: Optional[SubmoduleStatus] = None


@dataclass(frozen=True)
class ConflictsWithMarkers:
    entry: TextConflictEntry
    conflict_marker_count: int = 0
    submodule_status: Optional[SubmoduleStatus] = None
    kind: AppFileStatusKind = AppFileStatusKind.CONFLICTED


@dataclass(frozen=True)
class ManualConflict:
    entry: Union[TextConflictEntry, ManualConflictEntry]
    submodule_status: Optional[SubmoduleStatus] = None
    kind: AppFileStatusKind = AppFileStatusKind.CONFLICTED


AppFileStatus = Union[
    PlainFileStatus,
    CopiedOrRenamedFileStatus,
    UntrackedFileStatus,
    ConflictsWithMarkers,
    ManualConflict,
]


@dataclass(frozen=True)
class ConflictFilesDetails:
    conflict_counts_by_path: Dict[str, int] = field(default_factory=dict)
    binary_file_paths: List[str] = field(default_factory=list)


# ---- working directory ----


@dataclass(frozen=True)
class WorkingDirectoryFileChange:
    path: str
    status: AppFileStatus
    selection: DiffSelection = field(default_factory=DiffSelection)

    def with_include_all(self, include: bool) -> "WorkingDirectoryFileChange":
        selection = self.selection.with_select_all() if include else self.selection.with_select_none()
        return self.with_selection(selection)

    def with_selection(self, selection: DiffSelection) -> "WorkingDirectoryFileChange":
        return replace(self, selection=selection)


def include_all_state(files: List[WorkingDirectoryFileChange]) -> Optional[bool]:
    """True if every file is fully included, False if none is, None if mixed."""
    if not files:
        return True
    types = {f.selection.selection_type() for f in files}
    if types == {DiffSelectionType.ALL}:
        return True
    if types == {DiffSelectionType.NONE}:
        return False
    return None


@dataclass(frozen=True)
class WorkingDirectoryStatus:
    files: List[WorkingDirectoryFileChange] = field(default_factory=list)
    include_all: Optional[bool] = True

    @classmethod
    def from_files(cls, files: List[WorkingDirectoryFileChange]) -> "WorkingDirectoryStatus":
        return cls(files=list(files), include_all=include_all_state(files))

    def with_include_all_files(self, include: bool) -> "WorkingDirectoryStatus":
        return WorkingDirectoryStatus(
            files=[f.with_include_all(include) for f in self.files],
            include_all=include,
        )

    def find_file(self, path: str) -> Optional[WorkingDirectoryFileChange]:
        for f in self.files:
            if f.path == path:
                return f
        return None


@dataclass(frozen=True)
class AheadBehind:
    ahead: int
    behind: int


@dataclass(frozen=True)
class StatusHeadersData:
    current_branch: Optional[str] = None
    current_upstream_branch: Optional[str] = None
    current_tip: Optional[str] = None
    branch_ahead_behind: Optional[AheadBehind] = None


@dataclass(frozen=True)
class StatusResult:
    current_branch: Optional[str]
    current_upstream_branch: Optional[str]
    current_tip: Optional[str]
    branch_ahead_behind: Optional[AheadBehind]
    exists: bool
    merge_head_found: bool
    working_directory: WorkingDirectoryStatus
    do_conflicted_files_exist: bool
    entries: List[StatusEntry] = field(default_factory=list)
