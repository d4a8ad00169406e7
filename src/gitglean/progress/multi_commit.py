"""Progress for operations that replay a known list of commits."""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from gitglean.git.models import CommitSummary
from gitglean.progress.models import MultiCommitOperationProgress

_REBASING_RE = re.compile(r"Rebasing \((\d+)/(\d+)\)")
_CHERRY_PICK_RE = re.compile(r"^\[(.*\s.*)\]")


def format_rebase_value(value: float) -> float:
    """Clamp *value* to [0, 1] and round it to two decimals."""
    return round(max(0.0, min(value, 1.0)) * 100) / 100


def _summary_at(commits: Sequence[CommitSummary], position: int) -> str:
    index = position - 1
    if 0 <= index < len(commits):
        return commits[index].summary
    return ""


class GitRebaseParser:
    """Parse ``Rebasing (i/n)`` lines emitted during ``git rebase``."""

    def __init__(self, commits: Sequence[CommitSummary]) -> None:
        self.commits: List[CommitSummary] = list(commits)

    def parse(self, line: str) -> Optional[MultiCommitOperationProgress]:
        m = _REBASING_RE.search(line)
        if not m:
            return None
        position = int(m.group(1))
        total = int(m.group(2))
        value = format_rebase_value(position / total) if total else 0.0
        return MultiCommitOperationProgress(
            current_commit_summary=_summary_at(self.commits, position),
            position=position,
            total_commit_count=total,
            value=value,
        )


class GitCherryPickParser:
    """Parse ``[branch sha] summary`` lines emitted during ``git cherry-pick``.

    Cherry-pick output carries no index, so the parser counts lines itself.
    """

    def __init__(self, commits: Sequence[CommitSummary], count: int = 0) -> None:
        self.commits: List[CommitSummary] = list(commits)
        self.count = count

    def parse(self, line: str) -> Optional[MultiCommitOperationProgress]:
        if not _CHERRY_PICK_RE.match(line):
            return None
        self.count += 1
        total = len(self.commits)
        value = format_rebase_value(self.count / total) if total else 0.0
        return MultiCommitOperationProgress(
            current_commit_summary=_summary_at(self.commits, self.count),
            position=self.count,
            total_commit_count=total,
            value=value,
        )
