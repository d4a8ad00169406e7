"""Error taxonomy data model: the closed ErrorKind enum and ErrorRule."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ErrorKind(str, Enum):
    """Causes of git command failure that can be recognised from its output."""

    SSH_KEY_AUDIT_UNVERIFIED = "SSHKeyAuditUnverified"
    SSH_AUTHENTICATION_FAILED = "SSHAuthenticationFailed"
    SSH_PERMISSION_DENIED = "SSHPermissionDenied"
    HTTPS_AUTHENTICATION_FAILED = "HTTPSAuthenticationFailed"
    REMOTE_DISCONNECTION = "RemoteDisconnection"
    HOST_DOWN = "HostDown"
    REBASE_CONFLICTS = "RebaseConflicts"
    MERGE_CONFLICTS = "MergeConflicts"
    HTTPS_REPOSITORY_NOT_FOUND = "HTTPSRepositoryNotFound"
    SSH_REPOSITORY_NOT_FOUND = "SSHRepositoryNotFound"
    PUSH_NOT_FAST_FORWARD = "PushNotFastForward"
    BRANCH_DELETION_FAILED = "BranchDeletionFailed"
    DEFAULT_BRANCH_DELETION_FAILED = "DefaultBranchDeletionFailed"
    REVERT_CONFLICTS = "RevertConflicts"
    EMPTY_REBASE_PATCH = "EmptyRebasePatch"
    NO_MATCHING_REMOTE_BRANCH = "NoMatchingRemoteBranch"
    NO_EXISTING_REMOTE_BRANCH = "NoExistingRemoteBranch"
    NOTHING_TO_COMMIT = "NothingToCommit"
    NO_SUBMODULE_MAPPING = "NoSubmoduleMapping"
    SUBMODULE_REPOSITORY_DOES_NOT_EXIST = "SubmoduleRepositoryDoesNotExist"
    INVALID_SUBMODULE_SHA = "InvalidSubmoduleSHA"
    LOCAL_PERMISSION_DENIED = "LocalPermissionDenied"
    INVALID_MERGE = "InvalidMerge"
    INVALID_REBASE = "InvalidRebase"
    NON_FAST_FORWARD_MERGE_INTO_EMPTY_HEAD = "NonFastForwardMergeIntoEmptyHead"
    PATCH_DOES_NOT_APPLY = "PatchDoesNotApply"
    BRANCH_ALREADY_EXISTS = "BranchAlreadyExists"
    BAD_REVISION = "BadRevision"
    NOT_A_GIT_REPOSITORY = "NotAGitRepository"
    CANNOT_MERGE_UNRELATED_HISTORIES = "CannotMergeUnrelatedHistories"
    LFS_ATTRIBUTE_DOES_NOT_MATCH = "LFSAttributeDoesNotMatch"
    BRANCH_RENAME_FAILED = "BranchRenameFailed"
    PATH_DOES_NOT_EXIST = "PathDoesNotExist"
    INVALID_OBJECT_NAME = "InvalidObjectName"
    OUTSIDE_REPOSITORY = "OutsideRepository"
    LOCK_FILE_ALREADY_EXISTS = "LockFileAlreadyExists"
    NO_MERGE_TO_ABORT = "NoMergeToAbort"
    LOCAL_CHANGES_OVERWRITTEN = "LocalChangesOverwritten"
    UNRESOLVED_CONFLICTS = "UnresolvedConflicts"
    GPG_FAILED_TO_SIGN_DATA = "GPGFailedToSignData"
    CONFLICT_MODIFY_DELETED_IN_BRANCH = "ConflictModifyDeletedInBranch"
    # GitHub-specific
    PUSH_WITH_FILE_SIZE_EXCEEDING_LIMIT = "PushWithFileSizeExceedingLimit"
    HEX_BRANCH_NAME_REJECTED = "HexBranchNameRejected"
    FORCE_PUSH_REJECTED = "ForcePushRejected"
    INVALID_REF_LENGTH = "InvalidRefLength"
    PROTECTED_BRANCH_REQUIRES_REVIEW = "ProtectedBranchRequiresReview"
    PROTECTED_BRANCH_FORCE_PUSH = "ProtectedBranchForcePush"
    PROTECTED_BRANCH_DELETE_REJECTED = "ProtectedBranchDeleteRejected"
    PROTECTED_BRANCH_REQUIRED_STATUS = "ProtectedBranchRequiredStatus"
    PUSH_WITH_PRIVATE_EMAIL = "PushWithPrivateEmail"
    # End of GitHub-specific
    CONFIG_LOCK_FILE_ALREADY_EXISTS = "ConfigLockFileAlreadyExists"
    REMOTE_ALREADY_EXISTS = "RemoteAlreadyExists"
    TAG_ALREADY_EXISTS = "TagAlreadyExists"
    MERGE_WITH_LOCAL_CHANGES = "MergeWithLocalChanges"
    REBASE_WITH_LOCAL_CHANGES = "RebaseWithLocalChanges"
    MERGE_COMMIT_NO_MAINLINE_OPTION = "MergeCommitNoMainlineOption"
    UNSAFE_DIRECTORY = "UnsafeDirectory"
    PATH_EXISTS_BUT_NOT_IN_REF = "PathExistsButNotInRef"

    @classmethod
    def from_name(cls, name: str) -> Optional["ErrorKind"]:
        """Look up a kind by member name (``MERGE_CONFLICTS``) or value (``MergeConflicts``)."""
        if name in cls.__members__:
            return cls[name]
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass
class ErrorRule:
    """A single (pattern, kind) entry of the classification table.

    ``pattern`` is stored as a raw string so the rule remains serialisable.
    The compiled regex is built lazily on first access via ``compiled_pattern``.
    ``example`` is a representative git output that the pattern must match.
    """

    kind: ErrorKind
    pattern: str
    example: Optional[str] = None
    enabled: bool = True

    _compiled_pattern: Optional[re.Pattern[str]] = field(
        default=None, init=False, repr=False, compare=False
    )

    @property
    def compiled_pattern(self) -> re.Pattern[str]:
        if self._compiled_pattern is None:
            self._compiled_pattern = re.compile(self.pattern)
        return self._compiled_pattern

    def matches(self, text: str) -> bool:
        return self.compiled_pattern.search(text) is not None


@dataclass(frozen=True)
class Classification:
    """A classified failure with its user-facing explanation."""

    kind: ErrorKind
    description: Optional[str] = None
    oversized_files: List[str] = field(default_factory=list)
