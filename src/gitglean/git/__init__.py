"""Git interface layer: subprocess adapter, delimited record parsers, models."""

from gitglean.git.adapter import (
    apply_patch,
    check_patch,
    get_commit_summaries,
    get_repo_root,
    get_status,
    get_working_directory_diff,
    run_git,
)
from gitglean.git.delimiter import create_for_each_ref_parser, create_log_parser
from gitglean.git.models import CommitSummary, GitResult

__all__ = [
    "CommitSummary",
    "GitResult",
    "apply_patch",
    "check_patch",
    "create_for_each_ref_parser",
    "create_log_parser",
    "get_commit_summaries",
    "get_repo_root",
    "get_status",
    "get_working_directory_diff",
    "run_git",
]
