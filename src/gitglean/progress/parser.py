"""Weighted progress decoder for git's stderr progress lines."""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from loguru import logger

from gitglean.progress.models import (
    GitOutput,
    GitParsingResult,
    GitProgress,
    GitProgressInfo,
    ProgressStep,
)

_PERCENT_RE = re.compile(r"^(\d{1,3})% \((\d+)/(\d+)\)$")
_VALUE_ONLY_RE = re.compile(r"^\d+$")


def parse_progress_line(line: str) -> Optional[GitProgressInfo]:
    """Decode ``<title>: <value>`` or ``<title>: NN% (value/total)[, done.]``.

    Returns None for anything that is not a progress line.
    """
    title, sep, remainder = line.rpartition(": ")
    if not sep or not title:
        return None

    remainder = remainder.strip()
    if not remainder:
        return None

    parts = [p.strip() for p in remainder.split(",")]
    parts = [p for p in parts if p]
    if not parts:
        return None

    total: Optional[int] = None
    percent: Optional[int] = None
    if _VALUE_ONLY_RE.match(parts[0]):
        value = int(parts[0])
    elif m := _PERCENT_RE.match(parts[0]):
        percent = int(m.group(1))
        value = int(m.group(2))
        total = int(m.group(3))
    else:
        return None

    done = "done." in parts[1:]
    return GitProgressInfo(
        title=title, value=value, total=total, percent=percent, done=done, text=line
    )


class GitProgressParser:
    """Turn a stream of progress lines into an overall completion percentage.

    Steps are listed in the order git runs them. Once a line for step *n* is
    seen, every step before it counts as complete, even if it never reported.
    A parser holds state for one stream and is not meant to be reused.
    """

    def __init__(self, steps: Sequence[ProgressStep]) -> None:
        if not steps:
            raise ValueError("Must specify at least one step")

        total_weight = sum(s.weight for s in steps)
        self.steps: List[ProgressStep] = [
            ProgressStep(s.title, s.weight / total_weight if total_weight else 0.0)
            for s in steps
        ]
        self._step_index = 0
        self._last_percent = 0.0

    @property
    def step_index(self) -> int:
        return self._step_index

    @property
    def last_percent(self) -> int:
        return round(self._last_percent * 100)

    def parse(self, line: str) -> GitParsingResult:
        progress = parse_progress_line(line)
        if progress is None:
            return self._context(line)

        completed = 0.0
        for index, step in enumerate(self.steps):
            if index >= self._step_index and progress.title == step.title:
                percent = completed
                if progress.total:
                    percent += step.weight * progress.value / progress.total
                self._step_index = index
                self._last_percent = max(self._last_percent, percent)
                return GitProgress(percent=self.last_percent, details=progress)
            completed += step.weight

        return self._context(line)

    def _context(self, line: str) -> GitOutput:
        logger.debug(f"Progress context: {line}")
        return GitOutput(percent=self.last_percent, text=line)
