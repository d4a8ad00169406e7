"""Porcelain status decoding: stream parser, code mapping, headers, conflicts."""

from gitglean.status.conflicts import (
    build_status_map,
    conflicted_files_in_index,
    convert_to_app_status,
    parse_conflict_markers,
)
from gitglean.status.headers import parse_status_headers
from gitglean.status.models import (
    AppFileStatusKind,
    ConflictFilesDetails,
    GitStatusEntry,
    OrdinaryEntry,
    StatusEntry,
    StatusHeader,
    StatusResult,
    WorkingDirectoryFileChange,
    WorkingDirectoryStatus,
)
from gitglean.status.parser import map_status, map_submodule_status, parse_porcelain
from gitglean.status.result import build_status_result

__all__ = [
    "AppFileStatusKind",
    "ConflictFilesDetails",
    "GitStatusEntry",
    "OrdinaryEntry",
    "StatusEntry",
    "StatusHeader",
    "StatusResult",
    "WorkingDirectoryFileChange",
    "WorkingDirectoryStatus",
    "build_status_map",
    "build_status_result",
    "conflicted_files_in_index",
    "convert_to_app_status",
    "map_status",
    "map_submodule_status",
    "parse_conflict_markers",
    "parse_porcelain",
    "parse_status_headers",
]
