"""Assemble a StatusResult from decoded porcelain items."""

from __future__ import annotations

from typing import Iterable, Optional

from gitglean.status.conflicts import build_status_map, conflicted_files_in_index
from gitglean.status.headers import parse_status_headers
from gitglean.status.models import (
    ConflictFilesDetails,
    StatusEntry,
    StatusHeader,
    StatusItem,
    StatusResult,
    WorkingDirectoryStatus,
)


def split_items(items: Iterable[StatusItem]) -> tuple[list[StatusHeader], list[StatusEntry]]:
    headers: list[StatusHeader] = []
    entries: list[StatusEntry] = []
    for item in items:
        if isinstance(item, StatusHeader):
            headers.append(item)
        else:
            entries.append(item)
    return headers, entries


def build_status_result(
    items: Iterable[StatusItem],
    *,
    merge_head_found: bool = False,
    conflict_details: Optional[ConflictFilesDetails] = None,
) -> StatusResult:
    headers, entries = split_items(items)
    header_data = parse_status_headers(headers)
    files = build_status_map(entries, conflict_details)
    return StatusResult(
        current_branch=header_data.current_branch,
        current_upstream_branch=header_data.current_upstream_branch,
        current_tip=header_data.current_tip,
        branch_ahead_behind=header_data.branch_ahead_behind,
        exists=True,
        merge_head_found=merge_head_found,
        working_directory=WorkingDirectoryStatus.from_files(list(files.values())),
        do_conflicted_files_exist=conflicted_files_in_index(entries),
        entries=entries,
    )
