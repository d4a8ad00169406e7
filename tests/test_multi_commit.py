"""Tests for rebase and cherry-pick progress parsers."""

import pytest

from gitglean.git.models import CommitSummary
from gitglean.progress.multi_commit import (
    GitCherryPickParser,
    GitRebaseParser,
    format_rebase_value,
)


@pytest.fixture
def commits():
    return [
        CommitSummary(sha="a1", summary="Add parser"),
        CommitSummary(sha="b2", summary="Fix tokenizer"),
        CommitSummary(sha="c3", summary="Update docs"),
        CommitSummary(sha="d4", summary="Release 1.0"),
    ]


class TestFormatRebaseValue:
    @pytest.mark.parametrize("value,expected", [
        (0.5, 0.5),
        (1 / 3, 0.33),
        (2 / 3, 0.67),
        (1.5, 1.0),
        (-0.2, 0.0),
    ])
    def test_clamped_and_rounded(self, value, expected):
        assert format_rebase_value(value) == expected


class TestRebaseParser:
    def test_rebasing_line(self, commits):
        progress = GitRebaseParser(commits).parse("Rebasing (2/4)")
        assert progress.position == 2
        assert progress.total_commit_count == 4
        assert progress.value == 0.5
        assert progress.current_commit_summary == "Fix tokenizer"

    def test_line_with_surrounding_text(self, commits):
        progress = GitRebaseParser(commits).parse("\rRebasing (4/4)\r")
        assert progress.value == 1.0
        assert progress.current_commit_summary == "Release 1.0"

    def test_position_past_known_commits(self, commits):
        progress = GitRebaseParser(commits[:1]).parse("Rebasing (3/4)")
        assert progress.current_commit_summary == ""

    def test_unrelated_line(self, commits):
        assert GitRebaseParser(commits).parse("Successfully rebased and updated refs/heads/main.") is None


class TestCherryPickParser:
    def test_counts_picked_commits(self, commits):
        parser = GitCherryPickParser(commits)
        first = parser.parse("[main 1a2b3c4] Add parser")
        second = parser.parse("[main 5d6e7f8] Fix tokenizer")
        assert first.position == 1
        assert first.value == 0.25
        assert second.position == 2
        assert second.current_commit_summary == "Fix tokenizer"
        assert second.total_commit_count == 4

    def test_starting_count(self, commits):
        parser = GitCherryPickParser(commits, count=3)
        progress = parser.parse("[main 9f9f9f9] Release 1.0")
        assert progress.position == 4
        assert progress.value == 1.0

    def test_non_matching_lines_do_not_count(self, commits):
        parser = GitCherryPickParser(commits)
        assert parser.parse(" 1 file changed, 2 insertions(+)") is None
        assert parser.count == 0

    def test_no_commits(self):
        progress = GitCherryPickParser([]).parse("[main abc] Something")
        assert progress.value == 0.0
        assert progress.current_commit_summary == ""
