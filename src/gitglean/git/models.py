"""Data models for git invocations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from gitglean.errors.models import ErrorKind


@dataclass
class GitResult:
    """Captured outcome of one git invocation."""

    args: List[str]
    exit_code: int
    stdout: str = ""
    stderr: str = ""
    cwd: Optional[Path] = None
    error_kind: Optional[ErrorKind] = None
    error_description: Optional[str] = None

    @property
    def combined_output(self) -> str:
        return self.stdout + self.stderr


@dataclass(frozen=True)
class CommitSummary:
    """One commit as listed for a multi-commit operation."""

    sha: str
    summary: str
