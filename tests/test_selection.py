"""Tests for DiffSelection and line-spec parsing."""

import pytest

from gitglean.diff.selection import DiffSelection, DiffSelectionType, parse_line_spec


class TestDiffSelection:
    def test_default_is_none(self):
        selection = DiffSelection()
        assert selection.selection_type() is DiffSelectionType.NONE
        assert not selection.is_selected(1)

    def test_partial_default_rejected(self):
        with pytest.raises(ValueError):
            DiffSelection(DiffSelectionType.PARTIAL)

    def test_from_lines(self):
        selection = DiffSelection.from_lines([2, 3]).with_selectable_lines({2, 3, 4})
        assert selection.is_selected(2)
        assert selection.is_selected(3)
        assert not selection.is_selected(4)
        assert selection.selection_type() is DiffSelectionType.PARTIAL

    def test_every_selectable_line_chosen_is_all(self):
        selection = DiffSelection.from_lines([2, 3]).with_selectable_lines({2, 3})
        assert selection.are_all_selected()

    def test_all_minus_every_line_is_none(self):
        selection = DiffSelection(DiffSelectionType.ALL, [1, 2], [1, 2])
        assert selection.are_none_selected()

    def test_all_minus_one(self):
        selection = DiffSelection(DiffSelectionType.ALL).with_selectable_lines({1, 2, 3})
        selection = selection.with_line_selection(2, False)
        assert selection.is_selected(1)
        assert not selection.is_selected(2)
        assert selection.selection_type() is DiffSelectionType.PARTIAL

    def test_unselectable_line_never_selected(self):
        selection = DiffSelection(DiffSelectionType.ALL).with_selectable_lines({2})
        assert not selection.is_selected(1)
        assert selection.with_line_selection(1, True) == selection

    def test_range_selection(self):
        selection = DiffSelection().with_range_selection(3, 3, True)
        assert [i for i in range(1, 8) if selection.is_selected(i)] == [3, 4, 5]
        selection = selection.with_range_selection(3, 3, False)
        assert selection.diverging_lines == frozenset()

    def test_toggle(self):
        selection = DiffSelection().with_toggle_line_selection(5)
        assert selection.is_selected(5)
        assert not selection.with_toggle_line_selection(5).is_selected(5)

    def test_select_all_and_none_reset_diverging(self):
        selection = DiffSelection.from_lines([1, 2])
        assert selection.with_select_all().diverging_lines == frozenset()
        assert selection.with_select_none().selection_type() is DiffSelectionType.NONE

    def test_selectable_lines_trim_diverging(self):
        selection = DiffSelection.from_lines([1, 9]).with_selectable_lines({1, 2})
        assert selection.diverging_lines == frozenset({1})

    def test_constructor_drops_unselectable_diverging_lines(self):
        selection = DiffSelection(DiffSelectionType.NONE, [1, 99], selectable_lines=[1, 2])
        assert selection.diverging_lines == frozenset({1})
        assert not selection.is_selected(2)
        assert not selection.are_all_selected()
        assert selection.selection_type() is DiffSelectionType.PARTIAL

    def test_updates_return_new_instances(self):
        original = DiffSelection()
        original.with_line_selection(1, True)
        assert original.diverging_lines == frozenset()

    def test_equality(self):
        assert DiffSelection.from_lines([1]) == DiffSelection(DiffSelectionType.NONE, {1})
        assert DiffSelection.from_lines([1]) != DiffSelection.from_lines([2])


class TestParseLineSpec:
    def test_single_and_range(self):
        assert parse_line_spec("3,5-7") == [3, 5, 6, 7]

    def test_sorted_and_deduplicated(self):
        assert parse_line_spec(" 7, 3 ,3,2-3") == [2, 3, 7]

    def test_empty_parts_ignored(self):
        assert parse_line_spec("1,,2,") == [1, 2]

    def test_empty(self):
        assert parse_line_spec("") == []

    def test_reversed_range(self):
        with pytest.raises(ValueError, match="Reversed"):
            parse_line_spec("5-3")

    def test_not_a_number(self):
        with pytest.raises(ValueError):
            parse_line_spec("three")
