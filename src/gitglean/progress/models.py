"""Progress event models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union


@dataclass(frozen=True)
class ProgressStep:
    """A named phase of a git operation and its relative weight.

    ``title`` is everything before the last colon of a progress line, so for
    ``remote: Compressing objects:  14% (159/1133)`` it is
    ``remote: Compressing objects``.
    """

    title: str
    weight: float


@dataclass(frozen=True)
class GitProgressInfo:
    """One progress line, as git reported it."""

    title: str
    value: int
    total: Optional[int]
    percent: Optional[int]
    done: bool
    text: str


@dataclass(frozen=True)
class GitProgress:
    """A progress update. ``percent`` is overall, across all phases."""

    kind: ClassVar[str] = "progress"

    percent: int
    details: GitProgressInfo


@dataclass(frozen=True)
class GitOutput:
    """A non-progress line, echoed with the last known overall percent."""

    kind: ClassVar[str] = "context"

    percent: int
    text: str


GitParsingResult = Union[GitProgress, GitOutput]


@dataclass(frozen=True)
class MultiCommitOperationProgress:
    kind: ClassVar[str] = "multiCommitOperation"

    current_commit_summary: str
    position: int
    total_commit_count: int
    value: float
