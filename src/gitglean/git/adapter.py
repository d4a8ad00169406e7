"""Git subprocess wrapper: invocation, failure classification, status and patch helpers."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path
from typing import Collection, Optional, Sequence

from loguru import logger

from gitglean.diff.models import TextDiff
from gitglean.diff.parser import DiffParser
from gitglean.errors.classifier import classify_output, describe_failure
from gitglean.errors.models import ErrorKind
from gitglean.errors.registry import ErrorRuleRegistry
from gitglean.exceptions import GitCommandError, GitError
from gitglean.git.delimiter import create_log_parser
from gitglean.git.models import CommitSummary, GitResult
from gitglean.status.conflicts import conflicted_files_in_index, parse_conflict_markers
from gitglean.status.models import ConflictFilesDetails, StatusResult
from gitglean.status.parser import parse_porcelain
from gitglean.status.result import build_status_result, split_items

DEFAULT_TIMEOUT = 30
DEFAULT_MAX_STATUS_BUFFER = 20_000_000


def run_git(
    args: Sequence[str],
    cwd: Path,
    *,
    success_exit_codes: Collection[int] = (0,),
    expected_errors: Collection[ErrorKind] = (),
    stdin: Optional[str] = None,
    timeout: int = DEFAULT_TIMEOUT,
    registry: Optional[ErrorRuleRegistry] = None,
) -> GitResult:
    """Run ``git *args`` in *cwd* and capture the outcome.

    An exit code outside *success_exit_codes* is classified; the result is
    still returned when the classified kind is listed in *expected_errors*.
    Anything else raises GitCommandError. GitError covers a missing git
    binary and timeouts.
    """
    args = list(args)
    env = {**os.environ, "TERM": "dumb"}
    try:
        proc = subprocess.run(
            ["git", *args],
            cwd=cwd,
            input=stdin,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
            env=env,
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    result = GitResult(
        args=args,
        exit_code=proc.returncode,
        stdout=proc.stdout,
        stderr=proc.stderr,
        cwd=cwd,
    )
    logger.debug(f"git {' '.join(args)} exited with {result.exit_code}")

    if result.exit_code in success_exit_codes:
        return result

    kind = classify_output(result.stderr, result.stdout, registry)
    if kind is not None:
        logger.debug(f"git failure classified as {kind.value}")
        result.error_kind = kind
        result.error_description = describe_failure(kind, result.stderr)
        if kind in expected_errors:
            return result

    raise GitCommandError(result, args)


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the root of the current git repository."""
    cwd = cwd or Path.cwd()
    result = run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    return Path(result.stdout.strip())


def get_porcelain_status(repo_root: Path, timeout: int = DEFAULT_TIMEOUT) -> GitResult:
    """Raw porcelain v2 status. Exit 128 (not a repository) is returned, not raised."""
    return run_git(
        [
            "--no-optional-locks",
            "status",
            "--untracked-files=all",
            "--branch",
            "--porcelain=2",
            "-z",
        ],
        cwd=repo_root,
        success_exit_codes=(0, 128),
        timeout=timeout,
    )


def get_conflict_markers(repo_root: Path) -> dict[str, int]:
    """Leftover conflict marker counts per path, from ``git diff --check``."""
    result = run_git(["diff", "--check"], cwd=repo_root, success_exit_codes=(0, 2))
    return parse_conflict_markers(result.stdout)


def get_binary_paths(repo_root: Path, ref: str) -> list[str]:
    """Paths that git reports as binary when diffed against *ref*."""
    result = run_git(["diff", "--numstat", "--no-color", ref], cwd=repo_root)
    paths: list[str] = []
    for line in result.stdout.splitlines():
        # Binary files show as: -\t-\tfilename
        if line.startswith("-\t-\t"):
            paths.append(line.split("\t", 2)[2])
    return paths


def is_merge_head_set(repo_root: Path) -> bool:
    result = run_git(
        ["rev-parse", "-q", "--verify", "MERGE_HEAD"],
        cwd=repo_root,
        success_exit_codes=(0, 1),
    )
    return result.exit_code == 0


def get_working_directory_diff(repo_root: Path, path: str, untracked: bool = False) -> TextDiff:
    """Diff of *path* between the index and the working tree.

    Untracked files are diffed against ``/dev/null``, for which git exits 1.
    """
    if untracked:
        args = ["diff", "--no-ext-diff", "--no-index", "--no-color", "--", "/dev/null", path]
        result = run_git(args, cwd=repo_root, success_exit_codes=(0, 1))
    else:
        args = ["diff", "--no-ext-diff", "--no-color", "--", path]
        result = run_git(args, cwd=repo_root)
    return DiffParser(result.stdout).parse()


def apply_patch(repo_root: Path, patch: str, cached: bool = True) -> GitResult:
    """Apply *patch* to the index (``cached``) or to the working tree."""
    args = ["apply"]
    if cached:
        args.append("--cached")
    args += ["--unidiff-zero", "--whitespace=nowarn", "-"]
    return run_git(args, cwd=repo_root, stdin=patch)


def check_patch(repo_root: Path, patch: str, cached: bool = True) -> bool:
    """True when *patch* would apply cleanly."""
    args = ["apply", "--check"]
    if cached:
        args.append("--cached")
    args += ["--unidiff-zero", "--whitespace=nowarn", "-"]
    result = run_git(
        args,
        cwd=repo_root,
        stdin=patch,
        expected_errors={ErrorKind.PATCH_DOES_NOT_APPLY},
    )
    return result.exit_code == 0


def _conflict_details(repo_root: Path, merge_head_found: bool) -> ConflictFilesDetails:
    return ConflictFilesDetails(
        conflict_counts_by_path=get_conflict_markers(repo_root),
        binary_file_paths=get_binary_paths(repo_root, "MERGE_HEAD" if merge_head_found else "HEAD"),
    )


def get_status(
    repo_root: Path,
    max_buffer: int = DEFAULT_MAX_STATUS_BUFFER,
    timeout: int = DEFAULT_TIMEOUT,
) -> Optional[StatusResult]:
    """Full working directory status, or None when *repo_root* is not a repository.

    None is also returned when the status output is larger than *max_buffer*
    characters.
    """
    result = get_porcelain_status(repo_root, timeout=timeout)
    if result.exit_code == 128:
        logger.debug(f"Not a git repository: {repo_root}")
        return None
    if len(result.stdout) > max_buffer:
        logger.warning(f"Status output of {len(result.stdout)} characters exceeds {max_buffer}")
        return None

    items = parse_porcelain(result.stdout)
    _, entries = split_items(items)
    merge_head_found = is_merge_head_set(repo_root)

    details = (
        _conflict_details(repo_root, merge_head_found)
        if conflicted_files_in_index(entries) or merge_head_found
        else ConflictFilesDetails()
    )
    return build_status_result(items, merge_head_found=merge_head_found, conflict_details=details)


def get_commit_summaries(repo_root: Path, revision_range: str) -> list[CommitSummary]:
    """Commits in *revision_range*, oldest first, as replayed by rebase or cherry-pick."""
    format_args, parse = create_log_parser(CommitSummary, {"sha": "%H", "summary": "%s"})
    result = run_git(["log", *format_args, "--reverse", revision_range, "--"], cwd=repo_root)
    return parse(result.stdout)
