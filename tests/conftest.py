"""Shared test fixtures: porcelain dumps, diffs, git stderr, temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def _silence_logging():
    """Keep loguru sinks from leaking between tests (the CLI installs one)."""
    yield
    logger.remove()
    logger.disable("gitglean")


@pytest.fixture
def sample_porcelain() -> str:
    """``git status --porcelain=2 --branch -z`` output covering every record type."""
    tokens = [
        "# branch.oid 1234567890abcdef1234567890abcdef12345678",
        "# branch.head main",
        "# branch.upstream origin/main",
        "# branch.ab +2 -1",
        "1 .M N... 100644 100644 100644 aaa111 aaa111 modified.txt",
        "1 A. N... 000000 100644 100644 0000000 bbb222 added.txt",
        "2 R. N... 100644 100644 100644 ccc333 ccc333 R100 renamed.txt",
        "original.txt",
        "u UU N... 100644 100644 100644 100644 ddd444 eee555 fff666 conflict.txt",
        "? untracked.txt",
        "! ignored.log",
    ]
    return "\0".join(tokens) + "\0"


@pytest.fixture
def sample_porcelain_clean() -> str:
    return "\0".join([
        "# branch.oid 1234567890abcdef1234567890abcdef12345678",
        "# branch.head main",
    ]) + "\0"


@pytest.fixture
def sample_diff_check() -> str:
    """``git diff --check`` output for a file with one unresolved conflict."""
    return textwrap.dedent("""\
        conflict.txt:3: leftover conflict marker
        conflict.txt:5: leftover conflict marker
        conflict.txt:7: leftover conflict marker
        other.txt:1: trailing whitespace.
    """)


@pytest.fixture
def sample_diff_modified() -> str:
    """One hunk replacing a line with two.

    Absolute indices: 0 hunk header, 1 context, 2 delete, 3 add, 4 add,
    5 context, 6 context.
    """
    return textwrap.dedent("""\
        diff --git a/file.txt b/file.txt
        index 1234567..abcdef0 100644
        --- a/file.txt
        +++ b/file.txt
        @@ -1,4 +1,5 @@
         line one
        -line two
        +line 2
        +line 2.5
         line three
         line four
    """)


@pytest.fixture
def sample_diff_two_hunks() -> str:
    """Two hunks; the second starts at absolute index 5."""
    return textwrap.dedent("""\
        diff --git a/app.py b/app.py
        index 1234567..abcdef0 100644
        --- a/app.py
        +++ b/app.py
        @@ -1,3 +1,3 @@ import os
         import os
        -import sys
        +import re

        @@ -20,2 +20,3 @@ def main():
             run()
        +    stop()
             return 0
    """)


@pytest.fixture
def sample_diff_new_file() -> str:
    return textwrap.dedent("""\
        diff --git a/hello.py b/hello.py
        new file mode 100644
        index 0000000..e69de29
        --- /dev/null
        +++ b/hello.py
        @@ -0,0 +1,3 @@
        +def greet(name):
        +    return f"Hello, {name}!"
        +
    """)


@pytest.fixture
def sample_diff_no_newline() -> str:
    """A diff with 'No newline at end of file' markers on both sides."""
    return textwrap.dedent("""\
        diff --git a/data.txt b/data.txt
        index 1234567..abcdef0 100644
        --- a/data.txt
        +++ b/data.txt
        @@ -1,2 +1,2 @@
         first
        -last
        \\ No newline at end of file
        +last line
        \\ No newline at end of file
    """)


@pytest.fixture
def sample_diff_binary() -> str:
    return textwrap.dedent("""\
        diff --git a/image.png b/image.png
        new file mode 100644
        Binary files /dev/null and b/image.png differ
    """)


@pytest.fixture
def sample_stderr_oversized() -> str:
    """GitHub GH001 push rejection naming two files."""
    return (
        "remote: error: GH001: Large files detected. You may want to try Git Large File "
        "Storage - https://git-lfs.github.com.\n"
        "remote: error: File big.bin is 120.00 MB; this exceeds GitHub's file size limit "
        "of 100.00 MB\n"
        "remote: error: File assets/video.mp4 is 250.50 MB; this exceeds GitHub's file "
        "size limit of 100.00 MB\n"
        "To github.com:owner/repo.git\n"
        " ! [remote rejected] main -> main (pre-receive hook declined)\n"
    )


@pytest.fixture
def sample_clone_stderr() -> str:
    return textwrap.dedent("""\
        Cloning into 'repo'...
        remote: Enumerating objects: 120, done.
        remote: Compressing objects:  50% (5/10)
        remote: Compressing objects: 100% (10/10), done.
        Receiving objects:  50% (60/120)
        Receiving objects: 100% (120/120), 1.20 MiB | 2.00 MiB/s, done.
        Resolving deltas: 100% (40/40), done.
    """)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    subprocess.run(
        ["git", "config", "user.email", "test@test.com"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    subprocess.run(
        ["git", "config", "user.name", "Test"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n")
    subprocess.run(["git", "add", "."], cwd=tmp_path, capture_output=True, check=True)
    subprocess.run(
        ["git", "commit", "-m", "init"],
        cwd=tmp_path, capture_output=True, check=True,
    )
    return tmp_path
