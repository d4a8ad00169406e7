"""Step presets for git operations that report progress."""

from __future__ import annotations

from typing import Dict, List

from gitglean.progress.models import ProgressStep
from gitglean.progress.parser import GitProgressParser

CLONE_STEPS: List[ProgressStep] = [
    ProgressStep("remote: Compressing objects", 0.1),
    ProgressStep("Receiving objects", 0.6),
    ProgressStep("Resolving deltas", 0.1),
    ProgressStep("Checking out files", 0.2),
]

PULL_STEPS: List[ProgressStep] = [
    ProgressStep("remote: Compressing objects", 0.1),
    ProgressStep("Receiving objects", 0.7),
    ProgressStep("Resolving deltas", 0.15),
    ProgressStep("Checking out files", 0.15),
]

CHECKOUT_STEPS: List[ProgressStep] = [
    ProgressStep("Checking out files", 1),
]

OPERATION_STEPS: Dict[str, List[ProgressStep]] = {
    "clone": CLONE_STEPS,
    "pull": PULL_STEPS,
    "checkout": CHECKOUT_STEPS,
}


def parser_for(operation: str) -> GitProgressParser:
    """A fresh progress parser for a named operation."""
    try:
        steps = OPERATION_STEPS[operation]
    except KeyError:
        raise ValueError(
            f"Unknown operation {operation!r}; expected one of {', '.join(OPERATION_STEPS)}"
        ) from None
    return GitProgressParser(steps)
