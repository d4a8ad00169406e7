"""Git LFS transfer progress (the ``GIT_LFS_PROGRESS`` file format)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict

from gitglean.progress.models import GitOutput, GitParsingResult, GitProgress, GitProgressInfo

# <direction> <done>/<estimated> <transferred>/<size> <name>
_LFS_PROGRESS_LINE_RE = re.compile(r"^(.+?)\s{1}(\d+)\/(\d+)\s{1}(\d+)\/(\d+)\s{1}(.+)$")

_VERBS = {
    "download": "Downloading",
    "upload": "Uploading",
    "checkout": "Checking out",
}


@dataclass
class FileProgress:
    transferred: int
    size: int
    done: bool


def direction_to_verb(direction: str) -> str:
    return _VERBS.get(direction, "Downloading")


class LFSProgressParser:
    """Aggregate per-file LFS progress lines into one running total.

    Files are never forgotten, so the byte total only grows as new files
    show up.
    """

    def __init__(self) -> None:
        self.files: Dict[str, FileProgress] = {}

    def parse(self, line: str) -> GitParsingResult:
        m = _LFS_PROGRESS_LINE_RE.match(line)
        if not m:
            return GitOutput(percent=0, text=line)

        direction = m.group(1)
        estimated_file_count = int(m.group(3))
        transferred = int(m.group(4))
        size = int(m.group(5))
        name = m.group(6)

        self.files[name] = FileProgress(transferred=transferred, size=size, done=transferred == size)

        file_count = max(estimated_file_count, len(self.files))
        total_transferred = sum(f.transferred for f in self.files.values())
        total_size = sum(f.size for f in self.files.values())
        finished = sum(1 for f in self.files.values() if f.done)

        percent = int(total_transferred / total_size * 100) if total_size > 0 else None
        verb = direction_to_verb(direction)
        info = GitProgressInfo(
            title=f'{verb} "{name}"',
            value=total_transferred,
            total=total_size,
            percent=percent,
            done=finished == file_count,
            text=(
                f"{verb} {name} ({finished} out of an estimated {file_count} completed, "
                f"{total_transferred} / {total_size})"
            ),
        )
        return GitProgress(percent=percent or 0, details=info)
