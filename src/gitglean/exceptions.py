"""Exception hierarchy shared across gitglean."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from gitglean.errors.models import ErrorKind
    from gitglean.git.models import GitResult


class GitGleanError(Exception):
    """Base class for every error raised by gitglean."""


class ConfigError(GitGleanError):
    """Raised when config is malformed or unreadable."""


class GitError(GitGleanError):
    """Raised when git is unavailable or does not finish in time."""


class GitCommandError(GitError):
    """Raised when git exits with a code the caller did not accept.

    The message is the classified description when there is one, otherwise
    the raw output of the command. ``is_raw_message`` tells the two apart.
    """

    def __init__(self, result: "GitResult", git_args: List[str]) -> None:
        self.result = result
        self.git_args = list(git_args)
        self.message, self.is_raw_message = _failure_message(result)
        super().__init__(self.message)

    @property
    def error_kind(self) -> Optional["ErrorKind"]:
        return self.result.error_kind


class PatchError(GitGleanError):
    """Raised when a patch cannot be built from a diff and selection."""


class NoChangesError(PatchError):
    """The selection leaves no changes: nothing to stage or discard."""


def _failure_message(result: "GitResult") -> tuple[str, bool]:
    if result.error_description:
        return result.error_description, False
    if result.combined_output:
        return result.combined_output, True
    if result.stderr:
        return result.stderr, True
    if result.stdout:
        return result.stdout, True
    return "Unknown error", False
