"""Merge git's own progress with Git LFS progress for one operation."""

from __future__ import annotations

from typing import Optional

from gitglean.progress.lfs import LFSProgressParser
from gitglean.progress.models import GitParsingResult, GitProgress
from gitglean.progress.parser import GitProgressParser, parse_progress_line

FILTERING_CONTENT_TITLE = "Filtering content"


class CombinedProgress:
    """Feed git stderr lines and LFS progress lines through one object.

    While LFS transfers are running, git's own context chatter and its
    ``Filtering content`` lines are held back so the LFS events are what the
    caller sees. A finished ``Filtering content`` line hands control back.
    """

    def __init__(
        self,
        git_parser: GitProgressParser,
        lfs_parser: Optional[LFSProgressParser] = None,
    ) -> None:
        self.git_parser = git_parser
        self.lfs_parser = lfs_parser or LFSProgressParser()
        self.lfs_active = False

    def on_lfs_line(self, line: str) -> Optional[GitProgress]:
        result = self.lfs_parser.parse(line)
        if isinstance(result, GitProgress):
            self.lfs_active = True
            return result
        return None

    def on_git_line(self, line: str) -> Optional[GitParsingResult]:
        if self.lfs_active:
            info = parse_progress_line(line)
            if info is not None and info.title == FILTERING_CONTENT_TITLE:
                if info.done:
                    self.lfs_active = False
                return None

        result = self.git_parser.parse(line)
        if self.lfs_active and not isinstance(result, GitProgress):
            return None
        return result
