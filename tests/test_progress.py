"""Tests for the weighted progress decoder, LFS progress and step presets."""

import pytest

from gitglean.progress.combined import CombinedProgress
from gitglean.progress.lfs import LFSProgressParser, direction_to_verb
from gitglean.progress.models import GitOutput, GitProgress, ProgressStep
from gitglean.progress.parser import GitProgressParser, parse_progress_line
from gitglean.progress.steps import CLONE_STEPS, OPERATION_STEPS, parser_for


class TestParseProgressLine:
    def test_percent_line(self):
        info = parse_progress_line("Receiving objects:  50% (60/120)")
        assert info.title == "Receiving objects"
        assert info.percent == 50
        assert info.value == 60
        assert info.total == 120
        assert info.done is False

    def test_done_line_with_throughput(self):
        info = parse_progress_line("Receiving objects: 100% (120/120), 1.20 MiB | 2.00 MiB/s, done.")
        assert info.percent == 100
        assert info.done is True

    def test_title_keeps_remote_prefix(self):
        info = parse_progress_line("remote: Compressing objects:  14% (159/1133)")
        assert info.title == "remote: Compressing objects"
        assert info.value == 159

    def test_value_only(self):
        info = parse_progress_line("remote: Enumerating objects: 120, done.")
        assert info.title == "remote: Enumerating objects"
        assert info.value == 120
        assert info.total is None
        assert info.percent is None
        assert info.done is True

    @pytest.mark.parametrize("line", [
        "Cloning into 'repo'...",
        "Receiving objects: lots",
        ": 50% (1/2)",
        "Title: ",
        "",
    ])
    def test_not_progress(self, line):
        assert parse_progress_line(line) is None


class TestGitProgressParser:
    def test_weights_normalised(self):
        parser = GitProgressParser([ProgressStep("a", 1), ProgressStep("b", 1), ProgressStep("c", 2)])
        assert [s.weight for s in parser.steps] == [0.25, 0.25, 0.5]

    def test_later_step_counts_earlier_as_complete(self):
        parser = GitProgressParser([ProgressStep("a", 1), ProgressStep("b", 1), ProgressStep("c", 2)])
        result = parser.parse("c: 50% (5/10)")
        assert isinstance(result, GitProgress)
        assert result.percent == 75
        assert parser.step_index == 2

    def test_percent_never_decreases(self):
        parser = GitProgressParser([ProgressStep("a", 1), ProgressStep("b", 1), ProgressStep("c", 2)])
        parser.parse("c: 50% (5/10)")
        result = parser.parse("a: 100% (10/10)")
        assert isinstance(result, GitOutput)
        assert result.percent == 75

    def test_context_line_carries_last_percent(self):
        parser = GitProgressParser([ProgressStep("a", 1)])
        parser.parse("a: 40% (4/10)")
        result = parser.parse("warning: something unrelated happened")
        assert result == GitOutput(percent=40, text="warning: something unrelated happened")

    def test_unknown_title_is_context(self):
        parser = GitProgressParser([ProgressStep("a", 1)])
        assert isinstance(parser.parse("b: 50% (1/2)"), GitOutput)

    def test_value_only_line_reports_completed_steps(self):
        parser = GitProgressParser([ProgressStep("a", 1), ProgressStep("b", 1)])
        result = parser.parse("b: 17")
        assert isinstance(result, GitProgress)
        assert result.percent == 50

    def test_empty_steps_rejected(self):
        with pytest.raises(ValueError):
            GitProgressParser([])

    def test_zero_weights(self):
        parser = GitProgressParser([ProgressStep("a", 0), ProgressStep("b", 0)])
        assert [s.weight for s in parser.steps] == [0.0, 0.0]
        assert parser.parse("b: 50% (1/2)").percent == 0

    def test_clone_stream(self, sample_clone_stderr):
        parser = parser_for("clone")
        percents = [parser.parse(line).percent for line in sample_clone_stderr.splitlines()]
        assert percents == [0, 0, 5, 10, 40, 70, 80]


class TestSteps:
    def test_presets_available(self):
        assert set(OPERATION_STEPS) == {"clone", "pull", "checkout"}

    def test_clone_weights_sum_to_one(self):
        assert sum(s.weight for s in CLONE_STEPS) == pytest.approx(1.0)

    def test_fresh_parser_each_call(self):
        assert parser_for("pull") is not parser_for("pull")

    def test_unknown_operation(self):
        with pytest.raises(ValueError, match="Unknown operation"):
            parser_for("fetch-everything")


class TestLFSProgress:
    def test_single_file(self):
        parser = LFSProgressParser()
        result = parser.parse("download 1/2 50/100 file.bin")
        assert isinstance(result, GitProgress)
        assert result.percent == 50
        assert result.details.title == 'Downloading "file.bin"'
        assert result.details.done is False
        assert result.details.text == (
            "Downloading file.bin (0 out of an estimated 2 completed, 50 / 100)"
        )

    def test_totals_across_files(self):
        parser = LFSProgressParser()
        parser.parse("download 1/2 50/100 file.bin")
        result = parser.parse("download 2/2 200/200 other.bin")
        assert result.details.value == 250
        assert result.details.total == 300
        assert result.percent == 83
        assert result.details.done is False

    def test_all_done(self):
        parser = LFSProgressParser()
        parser.parse("upload 1/2 100/100 a.bin")
        result = parser.parse("upload 2/2 10/10 b.bin")
        assert result.details.done is True
        assert result.details.title.startswith("Uploading")

    def test_non_matching_line(self):
        result = LFSProgressParser().parse("not an lfs line")
        assert result == GitOutput(percent=0, text="not an lfs line")

    def test_zero_size(self):
        result = LFSProgressParser().parse("download 1/1 0/0 empty.bin")
        assert result.percent == 0
        assert result.details.percent is None

    def test_direction_verbs(self):
        assert direction_to_verb("checkout") == "Checking out"
        assert direction_to_verb("sideways") == "Downloading"


class TestCombinedProgress:
    def test_lfs_line_switches_to_lfs(self):
        combined = CombinedProgress(parser_for("checkout"))
        assert combined.on_lfs_line("download 1/1 5/10 big.psd") is not None
        assert combined.lfs_active is True

    def test_filtering_content_held_back_until_done(self):
        combined = CombinedProgress(parser_for("checkout"))
        combined.on_lfs_line("download 1/1 5/10 big.psd")
        assert combined.on_git_line("Filtering content:  50% (1/2)") is None
        assert combined.lfs_active is True
        assert combined.on_git_line("Filtering content: 100% (2/2), done.") is None
        assert combined.lfs_active is False

    def test_context_suppressed_while_lfs_active(self):
        combined = CombinedProgress(parser_for("checkout"))
        combined.on_lfs_line("download 1/1 5/10 big.psd")
        assert combined.on_git_line("some chatter") is None

    def test_git_progress_passes_through(self):
        combined = CombinedProgress(parser_for("checkout"))
        result = combined.on_git_line("Checking out files:  50% (1/2)")
        assert isinstance(result, GitProgress)
        assert result.percent == 50

    def test_non_lfs_line_ignored(self):
        combined = CombinedProgress(parser_for("clone"))
        assert combined.on_lfs_line("Receiving objects:  50% (60/120)") is None
        assert combined.lfs_active is False
