"""Human-readable descriptions for recognised error kinds."""

from __future__ import annotations

from typing import Dict, Optional

from gitglean.errors.models import ErrorKind

_REPOSITORY_GONE = (
    "The repository does not seem to exist anymore. You may not have access, "
    "or it may have been deleted or renamed."
)

DESCRIPTIONS: Dict[ErrorKind, str] = {
    ErrorKind.SSH_KEY_AUDIT_UNVERIFIED: "The SSH key is unverified.",
    ErrorKind.REMOTE_DISCONNECTION: (
        "The remote disconnected. Check your Internet connection and try again."
    ),
    ErrorKind.HOST_DOWN: "The host is down. Check your Internet connection and try again.",
    ErrorKind.REBASE_CONFLICTS: (
        "We found some conflicts while trying to rebase. "
        "Please resolve the conflicts before continuing."
    ),
    ErrorKind.MERGE_CONFLICTS: (
        "We found some conflicts while trying to merge. "
        "Please resolve the conflicts and commit the changes."
    ),
    ErrorKind.HTTPS_REPOSITORY_NOT_FOUND: _REPOSITORY_GONE,
    ErrorKind.SSH_REPOSITORY_NOT_FOUND: _REPOSITORY_GONE,
    ErrorKind.PUSH_NOT_FAST_FORWARD: (
        "The repository has been updated since you last pulled. Try pulling before pushing."
    ),
    ErrorKind.BRANCH_DELETION_FAILED: (
        "Could not delete the branch. It was probably already deleted."
    ),
    ErrorKind.DEFAULT_BRANCH_DELETION_FAILED: (
        "The branch is the repository's default branch and cannot be deleted."
    ),
    ErrorKind.REVERT_CONFLICTS: "To finish reverting, please merge and commit the changes.",
    ErrorKind.EMPTY_REBASE_PATCH: "There aren’t any changes left to apply.",
    ErrorKind.NO_MATCHING_REMOTE_BRANCH: (
        "There aren’t any remote branches that match the current branch."
    ),
    ErrorKind.NOTHING_TO_COMMIT: "There are no changes to commit.",
    ErrorKind.NO_SUBMODULE_MAPPING: (
        "A submodule was removed from .gitmodules, but the folder still exists in the "
        "repository. Delete the folder, commit the change, then try again."
    ),
    ErrorKind.SUBMODULE_REPOSITORY_DOES_NOT_EXIST: (
        "A submodule points to a location which does not exist."
    ),
    ErrorKind.INVALID_SUBMODULE_SHA: "A submodule points to a commit which does not exist.",
    ErrorKind.LOCAL_PERMISSION_DENIED: "Permission denied.",
    ErrorKind.INVALID_MERGE: "This is not something we can merge.",
    ErrorKind.INVALID_REBASE: "This is not something we can rebase.",
    ErrorKind.NON_FAST_FORWARD_MERGE_INTO_EMPTY_HEAD: (
        "The merge you attempted is not a fast-forward, so it cannot be performed "
        "on an empty branch."
    ),
    ErrorKind.PATCH_DOES_NOT_APPLY: (
        "The requested changes conflict with one or more files in the repository."
    ),
    ErrorKind.BRANCH_ALREADY_EXISTS: "A branch with that name already exists.",
    ErrorKind.BAD_REVISION: "Bad revision.",
    ErrorKind.NOT_A_GIT_REPOSITORY: "This is not a git repository.",
    ErrorKind.PROTECTED_BRANCH_FORCE_PUSH: (
        "This branch is protected from force-push operations."
    ),
    ErrorKind.PROTECTED_BRANCH_REQUIRES_REVIEW: (
        "This branch is protected and any changes require an approved review. "
        "Open a pull request with changes targeting this branch instead."
    ),
    ErrorKind.PUSH_WITH_FILE_SIZE_EXCEEDING_LIMIT: (
        "The push operation includes a file which exceeds GitHub's file size "
        "restriction of 100MB. Please remove the file from history and try again."
    ),
    ErrorKind.HEX_BRANCH_NAME_REJECTED: (
        "The branch name cannot be a 40-character string of hexadecimal characters, "
        "as this is the format that Git uses for representing objects."
    ),
    ErrorKind.FORCE_PUSH_REJECTED: "The force push has been rejected for the current branch.",
    ErrorKind.INVALID_REF_LENGTH: "A ref cannot be longer than 255 characters.",
    ErrorKind.CANNOT_MERGE_UNRELATED_HISTORIES: (
        "Unable to merge unrelated histories in this repository."
    ),
    ErrorKind.PUSH_WITH_PRIVATE_EMAIL: (
        "Cannot push these commits as they contain an email address marked as private "
        "on GitHub. To push anyway, visit https://github.com/settings/emails, uncheck "
        "'Keep my email address private', then try to push again. "
        "You can then enable the setting again."
    ),
    ErrorKind.LFS_ATTRIBUTE_DOES_NOT_MATCH: (
        "Git LFS attribute found in global Git configuration does not match the "
        "expected value."
    ),
    ErrorKind.PROTECTED_BRANCH_DELETE_REJECTED: (
        "This branch cannot be deleted from the remote repository because it is "
        "marked as protected."
    ),
    ErrorKind.PROTECTED_BRANCH_REQUIRED_STATUS: (
        "The push was rejected by the remote server because a required status check "
        "has not been satisfied."
    ),
    ErrorKind.BRANCH_RENAME_FAILED: "The branch could not be renamed.",
    ErrorKind.PATH_DOES_NOT_EXIST: "The path does not exist on disk.",
    ErrorKind.INVALID_OBJECT_NAME: "The object was not found in the Git repository.",
    ErrorKind.OUTSIDE_REPOSITORY: "This path is not a valid path inside the repository.",
    ErrorKind.LOCK_FILE_ALREADY_EXISTS: (
        "A lock file already exists in the repository, which blocks this operation "
        "from completing."
    ),
    ErrorKind.NO_MERGE_TO_ABORT: (
        "There is no merge in progress, so there is nothing to abort."
    ),
    ErrorKind.NO_EXISTING_REMOTE_BRANCH: "The remote branch does not exist.",
    ErrorKind.LOCAL_CHANGES_OVERWRITTEN: (
        "Unable to switch branches as there are working directory changes that would "
        "be overwritten. Please commit or stash your changes."
    ),
    ErrorKind.UNRESOLVED_CONFLICTS: "There are unresolved conflicts in the working directory.",
}


def describe(kind: ErrorKind) -> Optional[str]:
    """Return the user-facing description for *kind*, or None if it has none."""
    return DESCRIPTIONS.get(kind)
