"""Built-in error rules, in classification order.

The classifier reports the kind of the first rule whose pattern matches, so a
narrow pattern must come before any broader one that would also match its text
(HTTPS authentication before the bare ``fatal: Authentication failed``).
"""

from gitglean.errors.models import ErrorKind, ErrorRule

BUILTIN_ERROR_RULES: list[ErrorRule] = [
    ErrorRule(
        kind=ErrorKind.SSH_KEY_AUDIT_UNVERIFIED,
        pattern=r"ERROR: ([\s\S]+?)\n+\[EPOLICYKEYAGE\]\n+fatal: Could not read from remote repository.",
        example=(
            "ERROR: The key you are authenticating with has been marked as read only.\n"
            "\n"
            "[EPOLICYKEYAGE]\n"
            "\n"
            "fatal: Could not read from remote repository."
        ),
    ),
    ErrorRule(
        kind=ErrorKind.HTTPS_AUTHENTICATION_FAILED,
        pattern=r"fatal: Authentication failed for 'https://",
        example="fatal: Authentication failed for 'https://github.com/owner/repo.git/'",
    ),
    ErrorRule(
        kind=ErrorKind.SSH_AUTHENTICATION_FAILED,
        pattern=r"fatal: Authentication failed",
        example="fatal: Authentication failed",
    ),
    ErrorRule(
        kind=ErrorKind.SSH_PERMISSION_DENIED,
        pattern=r"fatal: Could not read from remote repository.",
        example=(
            "git@github.com: Permission denied (publickey).\n"
            "fatal: Could not read from remote repository."
        ),
    ),
    ErrorRule(
        kind=ErrorKind.HTTPS_AUTHENTICATION_FAILED,
        pattern=r"The requested URL returned error: 403",
        example=(
            "fatal: unable to access 'https://github.com/owner/repo.git/': "
            "The requested URL returned error: 403"
        ),
    ),
    ErrorRule(
        kind=ErrorKind.REMOTE_DISCONNECTION,
        pattern=r"fatal: [Tt]he remote end hung up unexpectedly",
        example="fatal: the remote end hung up unexpectedly",
    ),
    ErrorRule(
        kind=ErrorKind.HOST_DOWN,
        pattern=r"fatal: unable to access '(.+)': Failed to connect to (.+): Host is down",
        example=(
            "fatal: unable to access 'https://example.com/repo.git/': "
            "Failed to connect to example.com port 443: Host is down"
        ),
    ),
    ErrorRule(
        kind=ErrorKind.HOST_DOWN,
        pattern=r"Cloning into '(.+)'...\nfatal: unable to access '(.+)': Could not resolve host: (.+)",
        example=(
            "Cloning into 'repo'...\n"
            "fatal: unable to access 'https://example.com/repo.git/': "
            "Could not resolve host: example.com"
        ),
    ),
    ErrorRule(
        kind=ErrorKind.REBASE_CONFLICTS,
        pattern=r"Resolve all conflicts manually, mark them as resolved with",
        example=(
            "error: could not apply 1a2b3c4... change\n"
            "hint: Resolve all conflicts manually, mark them as resolved with\n"
            'hint: "git add/rm <conflicted_files>", then run "git rebase --continue".'
        ),
    ),
    ErrorRule(
        kind=ErrorKind.MERGE_CONFLICTS,
        pattern=r"(Merge conflict|Automatic merge failed; fix conflicts and then commit the result)",
        example=(
            "Auto-merging file.txt\n"
            "CONFLICT (content): Merge conflict in file.txt\n"
            "Automatic merge failed; fix conflicts and then commit the result."
        ),
    ),
    ErrorRule(
        kind=ErrorKind.HTTPS_REPOSITORY_NOT_FOUND,
        pattern=r"fatal: repository '(.+)' not found",
        example=(
            "remote: Repository not found.\n"
            "fatal: repository 'https://github.com/owner/missing.git/' not found"
        ),
    ),
    ErrorRule(
        kind=ErrorKind.SSH_REPOSITORY_NOT_FOUND,
        pattern=r"ERROR: Repository not found",
        example="ERROR: Repository not found.",
    ),
    ErrorRule(
        kind=ErrorKind.PUSH_NOT_FAST_FORWARD,
        pattern=r"\((non-fast-forward|fetch first)\)\nerror: failed to push some refs to '.*'",
        example=(
            " ! [rejected]        main -> main (fetch first)\n"
            "error: failed to push some refs to 'https://github.com/owner/repo.git'"
        ),
    ),
    ErrorRule(
        kind=ErrorKind.BRANCH_DELETION_FAILED,
        pattern=r"error: unable to delete '(.+)': remote ref does not exist",
        example="error: unable to delete 'feature': remote ref does not exist",
    ),
    ErrorRule(
        kind=ErrorKind.DEFAULT_BRANCH_DELETION_FAILED,
        pattern=r"\[remote rejected\] (.+) \(deletion of the current branch prohibited\)",
        example=" ! [remote rejected] main (deletion of the current branch prohibited)",
    ),
    ErrorRule(
        kind=ErrorKind.REVERT_CONFLICTS,
        pattern=(
            r"error: could not revert .*\n"
            r"hint: after resolving the conflicts, mark the corrected paths\n"
            r"hint: with 'git add <paths>' or 'git rm <paths>'\n"
            r"hint: and commit the result with 'git commit'"
        ),
        example=(
            "error: could not revert 0123abc... change\n"
            "hint: after resolving the conflicts, mark the corrected paths\n"
            "hint: with 'git add <paths>' or 'git rm <paths>'\n"
            "hint: and commit the result with 'git commit'"
        ),
    ),
    ErrorRule(
        kind=ErrorKind.EMPTY_REBASE_PATCH,
        pattern=(
            r"Applying: .*\n"
            r"No changes - did you forget to use 'git add'\?\n"
            r"If there is nothing left to stage, chances are that something else\n"
            r".*"
        ),
        example=(
            "Applying: Add feature\n"
            "No changes - did you forget to use 'git add'?\n"
            "If there is nothing left to stage, chances are that something else\n"
            "already introduced the same changes; you might want to skip this patch."
        ),
    ),
    ErrorRule(
        kind=ErrorKind.NO_MATCHING_REMOTE_BRANCH,
        pattern=(
            r"There are no candidates for (rebasing|merging) among the refs that you just fetched.\n"
            r"Generally this means that you provided a wildcard refspec which had no\n"
            r"matches on the remote end."
        ),
        example=(
            "There are no candidates for merging among the refs that you just fetched.\n"
            "Generally this means that you provided a wildcard refspec which had no\n"
            "matches on the remote end."
        ),
    ),
    ErrorRule(
        kind=ErrorKind.NO_EXISTING_REMOTE_BRANCH,
        pattern=(
            r"Your configuration specifies to merge with the ref '(.+)'\n"
            r"from the remote, but no such ref was fetched."
        ),
        example=(
            "Your configuration specifies to merge with the ref 'refs/heads/feature'\n"
            "from the remote, but no such ref was fetched."
        ),
    ),
    ErrorRule(
        kind=ErrorKind.NOTHING_TO_COMMIT,
        pattern=r"nothing to commit",
        example="On branch main\nnothing to commit, working tree clean",
    ),
    ErrorRule(
        kind=ErrorKind.NO_SUBMODULE_MAPPING,
        pattern=r"[Nn]o submodule mapping found in .gitmodules for path '(.+)'",
        example="fatal: no submodule mapping found in .gitmodules for path 'vendor/lib'",
    ),
    ErrorRule(
        kind=ErrorKind.SUBMODULE_REPOSITORY_DOES_NOT_EXIST,
        pattern=(
            r"fatal: repository '(.+)' does not exist\n"
            r"fatal: clone of '.+' into submodule path '(.+)' failed"
        ),
        example=(
            "fatal: repository '/tmp/missing' does not exist\n"
            "fatal: clone of '/tmp/missing' into submodule path 'vendor/lib' failed"
        ),
    ),
    ErrorRule(
        kind=ErrorKind.INVALID_SUBMODULE_SHA,
        pattern=(
            r"Fetched in submodule path '(.+)', but it did not contain (.+). "
            r"Direct fetching of that commit failed."
        ),
        example=(
            "Fetched in submodule path 'vendor/lib', but it did not contain 0123abcd. "
            "Direct fetching of that commit failed."
        ),
    ),
    ErrorRule(
        kind=ErrorKind.LOCAL_PERMISSION_DENIED,
        pattern=r"fatal: could not create work tree dir '(.+)'.*: Permission denied",
        example="fatal: could not create work tree dir 'repo': Permission denied",
    ),
    ErrorRule(
        kind=ErrorKind.INVALID_MERGE,
        pattern=r"merge: (.+) - not something we can merge",
        example="merge: nosuchbranch - not something we can merge",
    ),
    ErrorRule(
        kind=ErrorKind.INVALID_REBASE,
        pattern=r"invalid upstream (.+)",
        example="fatal: invalid upstream 'nosuchbranch'",
    ),
    ErrorRule(
        kind=ErrorKind.NON_FAST_FORWARD_MERGE_INTO_EMPTY_HEAD,
        pattern=r"fatal: Non-fast-forward commit does not make sense into an empty head",
        example="fatal: Non-fast-forward commit does not make sense into an empty head",
    ),
    ErrorRule(
        kind=ErrorKind.PATCH_DOES_NOT_APPLY,
        pattern=r"error: (.+): (patch does not apply|already exists in working directory)",
        example="error: patch failed: file.txt:1\nerror: file.txt: patch does not apply",
    ),
    ErrorRule(
        kind=ErrorKind.BRANCH_ALREADY_EXISTS,
        pattern=r"fatal: [Aa] branch named '(.+)' already exists.?",
        example="fatal: a branch named 'feature' already exists",
    ),
    ErrorRule(
        kind=ErrorKind.BAD_REVISION,
        pattern=r"fatal: bad revision '(.*)'",
        example="fatal: bad revision 'nosuchref'",
    ),
    ErrorRule(
        kind=ErrorKind.NOT_A_GIT_REPOSITORY,
        pattern=r"fatal: [Nn]ot a git repository \(or any of the parent directories\): (.*)",
        example="fatal: not a git repository (or any of the parent directories): .git",
    ),
    ErrorRule(
        kind=ErrorKind.CANNOT_MERGE_UNRELATED_HISTORIES,
        pattern=r"fatal: refusing to merge unrelated histories",
        example="fatal: refusing to merge unrelated histories",
    ),
    ErrorRule(
        kind=ErrorKind.LFS_ATTRIBUTE_DOES_NOT_MATCH,
        pattern=r"The .+ attribute should be .+ but is .+",
        example='The filter.lfs.clean attribute should be "git-lfs clean -- %f" but is "git lfs clean %f"',
    ),
    ErrorRule(
        kind=ErrorKind.BRANCH_RENAME_FAILED,
        pattern=r"fatal: Branch rename failed",
        example="fatal: Branch rename failed",
    ),
    ErrorRule(
        kind=ErrorKind.PATH_DOES_NOT_EXIST,
        pattern=r"fatal: path '(.+)' does not exist .+",
        example="fatal: path 'missing.txt' does not exist in 'HEAD'",
    ),
    ErrorRule(
        kind=ErrorKind.INVALID_OBJECT_NAME,
        pattern=r"fatal: invalid object name '(.+)'.",
        example="fatal: invalid object name 'nosuchref'.",
    ),
    ErrorRule(
        kind=ErrorKind.OUTSIDE_REPOSITORY,
        pattern=r"fatal: .+: '(.+)' is outside repository",
        example="fatal: /tmp/file.txt: '/tmp/file.txt' is outside repository",
    ),
    ErrorRule(
        kind=ErrorKind.LOCK_FILE_ALREADY_EXISTS,
        pattern=r"Another git process seems to be running in this repository, e.g.",
        example=(
            "fatal: Unable to create '/repo/.git/index.lock': File exists.\n"
            "\n"
            "Another git process seems to be running in this repository, e.g.\n"
            "an editor opened by 'git commit'."
        ),
    ),
    ErrorRule(
        kind=ErrorKind.NO_MERGE_TO_ABORT,
        pattern=r"fatal: There is no merge to abort",
        example="fatal: There is no merge to abort (MERGE_HEAD missing).",
    ),
    ErrorRule(
        kind=ErrorKind.LOCAL_CHANGES_OVERWRITTEN,
        pattern=(
            r"error: (?:Your local changes to the following|The following untracked working tree) "
            r"files would be overwritten by checkout:"
        ),
        example=(
            "error: Your local changes to the following files would be overwritten by checkout:\n"
            "\tfile.txt\n"
            "Please commit your changes or stash them before you switch branches.\n"
            "Aborting"
        ),
    ),
    ErrorRule(
        kind=ErrorKind.UNRESOLVED_CONFLICTS,
        pattern=(
            r"You must edit all merge conflicts and then\nmark them as resolved using git add"
            r"|fatal: Exiting because of an unresolved conflict"
        ),
        example=(
            "error: Committing is not possible because you have unmerged files.\n"
            "fatal: Exiting because of an unresolved conflict."
        ),
    ),
    ErrorRule(
        kind=ErrorKind.GPG_FAILED_TO_SIGN_DATA,
        pattern=r"error: gpg failed to sign the data",
        example="error: gpg failed to sign the data\nfatal: failed to write commit object",
    ),
    ErrorRule(
        kind=ErrorKind.CONFLICT_MODIFY_DELETED_IN_BRANCH,
        pattern=r"CONFLICT \(modify/delete\): (.+) deleted in (.+) and modified in (.+)",
        example=(
            "CONFLICT (modify/delete): file.txt deleted in HEAD and modified in feature. "
            "Version feature of file.txt left in tree."
        ),
    ),
    # GitHub-specific
    ErrorRule(
        kind=ErrorKind.PUSH_WITH_FILE_SIZE_EXCEEDING_LIMIT,
        pattern=r"error: GH001: ",
        example=(
            "remote: error: GH001: Large files detected. "
            "You may want to try Git Large File Storage - https://git-lfs.github.com.\n"
            "remote: error: File big.bin is 120.00 MB; "
            "this exceeds GitHub's file size limit of 100.00 MB"
        ),
    ),
    ErrorRule(
        kind=ErrorKind.HEX_BRANCH_NAME_REJECTED,
        pattern=r"error: GH002: ",
        example=(
            "remote: error: GH002: Sorry, branch or tag names consisting of "
            "40 hex characters are not allowed."
        ),
    ),
    ErrorRule(
        kind=ErrorKind.FORCE_PUSH_REJECTED,
        pattern=r"error: GH003: Sorry, force-pushing to (.+) is not allowed.",
        example="remote: error: GH003: Sorry, force-pushing to main is not allowed.",
    ),
    ErrorRule(
        kind=ErrorKind.INVALID_REF_LENGTH,
        pattern=r"error: GH005: Sorry, refs longer than (.+) bytes are not allowed",
        example="remote: error: GH005: Sorry, refs longer than 255 bytes are not allowed.",
    ),
    ErrorRule(
        kind=ErrorKind.PROTECTED_BRANCH_REQUIRES_REVIEW,
        pattern=(
            r"error: GH006: Protected branch update failed for (.+)\n"
            r"remote: error: At least one approved review is required"
        ),
        example=(
            "remote: error: GH006: Protected branch update failed for refs/heads/main.\n"
            "remote: error: At least one approved review is required"
        ),
    ),
    ErrorRule(
        kind=ErrorKind.PROTECTED_BRANCH_FORCE_PUSH,
        pattern=r"error: GH006: Protected branch update failed for (.+)\nremote: error: Cannot force-push to a protected branch",
        example=(
            "remote: error: GH006: Protected branch update failed for refs/heads/main.\n"
            "remote: error: Cannot force-push to a protected branch"
        ),
    ),
    ErrorRule(
        kind=ErrorKind.PROTECTED_BRANCH_DELETE_REJECTED,
        pattern=(
            r"error: GH006: Protected branch update failed for (.+).\n"
            r"remote: error: Cannot delete a protected branch"
        ),
        example=(
            "remote: error: GH006: Protected branch update failed for refs/heads/main.\n"
            "remote: error: Cannot delete a protected branch"
        ),
    ),
    ErrorRule(
        kind=ErrorKind.PROTECTED_BRANCH_REQUIRED_STATUS,
        pattern=(
            r"error: GH006: Protected branch update failed for (.+).\n"
            r'remote: error: Required status check "(.+)" is expected'
        ),
        example=(
            "remote: error: GH006: Protected branch update failed for refs/heads/main.\n"
            'remote: error: Required status check "ci" is expected.'
        ),
    ),
    ErrorRule(
        kind=ErrorKind.PUSH_WITH_PRIVATE_EMAIL,
        pattern=r"error: GH007: Your push would publish a private email address.",
        example="remote: error: GH007: Your push would publish a private email address.",
    ),
    # End of GitHub-specific
    ErrorRule(
        kind=ErrorKind.CONFIG_LOCK_FILE_ALREADY_EXISTS,
        pattern=r"error: could not lock config file (.+): File exists",
        example="error: could not lock config file .git/config: File exists",
    ),
    ErrorRule(
        kind=ErrorKind.REMOTE_ALREADY_EXISTS,
        pattern=r"error: remote (.+) already exists.",
        example="error: remote origin already exists.",
    ),
    ErrorRule(
        kind=ErrorKind.TAG_ALREADY_EXISTS,
        pattern=r"fatal: tag '(.+)' already exists",
        example="fatal: tag 'v1.0' already exists",
    ),
    ErrorRule(
        kind=ErrorKind.MERGE_WITH_LOCAL_CHANGES,
        pattern=r"error: Your local changes to the following files would be overwritten by merge:\n",
        example=(
            "error: Your local changes to the following files would be overwritten by merge:\n"
            "\tfile.txt\n"
            "Please commit your changes or stash them before you merge.\n"
            "Aborting"
        ),
    ),
    ErrorRule(
        kind=ErrorKind.REBASE_WITH_LOCAL_CHANGES,
        pattern=(
            r"error: cannot (pull with rebase|rebase): You have unstaged changes\.\n"
            r"\s*error: [Pp]lease commit or stash them\."
        ),
        example=(
            "error: cannot pull with rebase: You have unstaged changes.\n"
            "error: Please commit or stash them."
        ),
    ),
    ErrorRule(
        kind=ErrorKind.MERGE_COMMIT_NO_MAINLINE_OPTION,
        pattern=r"error: commit (.+) is a merge but no -m option was given",
        example="error: commit 0123abc is a merge but no -m option was given.\nfatal: cherry-pick failed",
    ),
    ErrorRule(
        kind=ErrorKind.UNSAFE_DIRECTORY,
        pattern=r"fatal: detected dubious ownership in repository at (.+)",
        example="fatal: detected dubious ownership in repository at '/repo'",
    ),
    ErrorRule(
        kind=ErrorKind.PATH_EXISTS_BUT_NOT_IN_REF,
        pattern=r"fatal: path '(.+)' exists on disk, but not in '(.+)'",
        example="fatal: path 'file.txt' exists on disk, but not in 'HEAD'",
    ),
]

__all__ = ["BUILTIN_ERROR_RULES"]
