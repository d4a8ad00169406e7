"""JSON reporter for scripts and CI pipelines."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Union

from gitglean.errors.models import Classification
from gitglean.progress.models import GitParsingResult, GitProgress
from gitglean.status.models import (
    ConflictsWithMarkers,
    CopiedOrRenamedFileStatus,
    ManualConflict,
    StatusResult,
    WorkingDirectoryFileChange,
)

REPORT_VERSION = "1.0"


def classification_to_dict(classification: Optional[Classification]) -> Dict[str, Any]:
    if classification is None:
        return {"version": REPORT_VERSION, "classified": False, "kind": None}
    return {
        "version": REPORT_VERSION,
        "classified": True,
        "kind": classification.kind.value,
        "name": classification.kind.name,
        "description": classification.description,
        **({"oversized_files": classification.oversized_files} if classification.oversized_files else {}),
    }


def _file_to_dict(file: WorkingDirectoryFileChange) -> Dict[str, Any]:
    status = file.status
    data: Dict[str, Any] = {
        "path": file.path,
        "status": status.kind.value,
        "selection": file.selection.selection_type().value,
    }
    if isinstance(status, CopiedOrRenamedFileStatus):
        data["old_path"] = status.old_path
    if isinstance(status, (ConflictsWithMarkers, ManualConflict)):
        data["conflict"] = {
            "action": status.entry.details.action.value,
            "us": status.entry.details.us.value,
            "them": status.entry.details.them.value,
        }
    if isinstance(status, ConflictsWithMarkers):
        data["conflict_marker_count"] = status.conflict_marker_count
    if status.submodule_status is not None:
        sub = status.submodule_status
        data["submodule"] = {
            "commit_changed": sub.commit_changed,
            "modified_changes": sub.modified_changes,
            "untracked_changes": sub.untracked_changes,
        }
    return data


def status_to_dict(result: StatusResult) -> Dict[str, Any]:
    ab = result.branch_ahead_behind
    files: List[Dict[str, Any]] = [_file_to_dict(f) for f in result.working_directory.files]
    return {
        "version": REPORT_VERSION,
        "branch": result.current_branch,
        "upstream": result.current_upstream_branch,
        "tip": result.current_tip,
        "ahead_behind": {"ahead": ab.ahead, "behind": ab.behind} if ab is not None else None,
        "merge_head_found": result.merge_head_found,
        "conflicted": result.do_conflicted_files_exist,
        "include_all": result.working_directory.include_all,
        "files": files,
    }


def progress_to_dict(event: GitParsingResult) -> Dict[str, Any]:
    if isinstance(event, GitProgress):
        info = event.details
        return {
            "kind": event.kind,
            "percent": event.percent,
            "title": info.title,
            "value": info.value,
            "total": info.total,
            "done": info.done,
        }
    return {"kind": event.kind, "percent": event.percent, "text": event.text}


def to_dict(result: Union[Classification, StatusResult, None]) -> Dict[str, Any]:
    """Convert a classification or status result to a JSON-serialisable dict."""
    if isinstance(result, StatusResult):
        return status_to_dict(result)
    return classification_to_dict(result)


def render(result: Union[Classification, StatusResult, None]) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(result), indent=2)
