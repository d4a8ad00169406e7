"""Tests for the unified diff parser and its hunk model."""

from gitglean.diff.models import DiffLineType
from gitglean.diff.parser import DiffParser, parse_hunk_header


class TestHunkHeader:
    def test_full_header(self):
        header = parse_hunk_header("@@ -1,4 +1,5 @@")
        assert (header.old_start_line, header.old_line_count) == (1, 4)
        assert (header.new_start_line, header.new_line_count) == (1, 5)
        assert header.section_heading == ""

    def test_implicit_counts_and_heading(self):
        header = parse_hunk_header("@@ -10 +10,3 @@ def main():")
        assert header.old_line_count == 1
        assert header.new_line_count == 3
        assert header.section_heading == "def main():"

    def test_not_a_header(self):
        assert parse_hunk_header(" context line") is None
        assert parse_hunk_header("@@ broken @@") is None


class TestBasicParsing:
    def test_modified_file(self, sample_diff_modified):
        diff = DiffParser(sample_diff_modified).parse()
        assert len(diff.header_lines) == 4
        assert len(diff.hunks) == 1

        hunk = diff.hunks[0]
        assert hunk.unified_diff_start == 0
        assert hunk.unified_diff_end == 6
        assert [line.type for line in hunk.lines] == [
            DiffLineType.HUNK,
            DiffLineType.CONTEXT,
            DiffLineType.DELETE,
            DiffLineType.ADD,
            DiffLineType.ADD,
            DiffLineType.CONTEXT,
            DiffLineType.CONTEXT,
        ]
        assert [line.absolute_index for line in hunk.lines] == list(range(7))

    def test_line_numbers(self, sample_diff_modified):
        lines = DiffParser(sample_diff_modified).parse().hunks[0].lines
        assert (lines[1].old_line_number, lines[1].new_line_number) == (1, 1)
        assert lines[2].old_line_number == 2
        assert lines[2].new_line_number is None
        assert lines[4].new_line_number == 3
        assert (lines[6].old_line_number, lines[6].new_line_number) == (4, 5)

    def test_max_line_number(self, sample_diff_modified):
        assert DiffParser(sample_diff_modified).parse().max_line_number == 5

    def test_selectable_lines(self, sample_diff_modified):
        diff = DiffParser(sample_diff_modified).parse()
        assert diff.selectable_lines() == {2, 3, 4}
        assert diff.hunks[0].changed_lines()[0].text == "-line two"

    def test_content_strips_marker(self, sample_diff_modified):
        lines = DiffParser(sample_diff_modified).parse().hunks[0].lines
        assert lines[3].content == "line 2"
        assert lines[0].content == "@@ -1,4 +1,5 @@"

    def test_line_at(self, sample_diff_modified):
        diff = DiffParser(sample_diff_modified).parse()
        assert diff.line_at(3).text == "+line 2"
        assert diff.line_at(99) is None

    def test_new_file(self, sample_diff_new_file):
        diff = DiffParser(sample_diff_new_file).parse()
        lines = diff.hunks[0].lines
        assert [line.type for line in lines[1:]] == [DiffLineType.ADD] * 3
        assert lines[1].content == "def greet(name):"
        assert lines[3].content == ""


class TestMultipleHunks:
    def test_indices_continue_across_hunks(self, sample_diff_two_hunks):
        diff = DiffParser(sample_diff_two_hunks).parse()
        assert len(diff.hunks) == 2
        first, second = diff.hunks
        assert (first.unified_diff_start, first.unified_diff_end) == (0, 4)
        assert (second.unified_diff_start, second.unified_diff_end) == (5, 8)
        assert second.lines[0].type is DiffLineType.HUNK

    def test_section_heading(self, sample_diff_two_hunks):
        first, second = DiffParser(sample_diff_two_hunks).parse().hunks
        assert first.header.section_heading == "import os"
        assert second.header.section_heading == "def main():"

    def test_blank_context_line(self, sample_diff_two_hunks):
        first = DiffParser(sample_diff_two_hunks).parse().hunks[0]
        assert first.lines[4].type is DiffLineType.CONTEXT
        assert first.lines[4].text == " "

    def test_second_hunk_line_numbers(self, sample_diff_two_hunks):
        second = DiffParser(sample_diff_two_hunks).parse().hunks[1]
        assert second.lines[2].new_line_number == 21
        assert second.lines[3].old_line_number == 21


class TestEdgeCases:
    def test_binary_file(self, sample_diff_binary):
        diff = DiffParser(sample_diff_binary).parse()
        assert diff.is_binary is True
        assert diff.hunks == []

    def test_git_binary_patch(self):
        text = "diff --git a/x b/x\nGIT binary patch\nliteral 10\n"
        assert DiffParser(text).parse().is_binary is True

    def test_no_newline_marker_flags_previous_line(self, sample_diff_no_newline):
        lines = DiffParser(sample_diff_no_newline).parse().hunks[0].lines
        assert len(lines) == 4
        assert lines[1].no_trailing_newline is False
        assert lines[2].no_trailing_newline is True
        assert lines[3].no_trailing_newline is True

    def test_crlf_stripped(self):
        text = "@@ -1 +1 @@\r\n-old\r\n+new\r\n"
        lines = DiffParser(text).parse().hunks[0].lines
        assert lines[1].text == "-old"
        assert lines[2].text == "+new"

    def test_empty_diff(self):
        diff = DiffParser("").parse()
        assert diff.hunks == []
        assert diff.is_binary is False
