"""Progress decoding: weighted git progress, LFS transfers, multi-commit operations."""

from gitglean.progress.combined import CombinedProgress
from gitglean.progress.lfs import LFSProgressParser
from gitglean.progress.models import (
    GitOutput,
    GitProgress,
    GitProgressInfo,
    MultiCommitOperationProgress,
    ProgressStep,
)
from gitglean.progress.multi_commit import (
    GitCherryPickParser,
    GitRebaseParser,
    format_rebase_value,
)
from gitglean.progress.parser import GitProgressParser, parse_progress_line
from gitglean.progress.steps import CHECKOUT_STEPS, CLONE_STEPS, PULL_STEPS, parser_for

__all__ = [
    "CHECKOUT_STEPS",
    "CLONE_STEPS",
    "PULL_STEPS",
    "CombinedProgress",
    "GitCherryPickParser",
    "GitOutput",
    "GitProgress",
    "GitProgressInfo",
    "GitProgressParser",
    "GitRebaseParser",
    "LFSProgressParser",
    "MultiCommitOperationProgress",
    "ProgressStep",
    "format_rebase_value",
    "parse_progress_line",
    "parser_for",
]
