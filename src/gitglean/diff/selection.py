"""Per-line selection over a diff, used for partial stage/discard.

A selection stores a default state plus the sparse set of lines that differ
from it, so "everything selected except line 12" costs one entry. All update
methods return a new selection; instances are never mutated.
"""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, Iterable, List, Optional


class DiffSelectionType(str, Enum):
    ALL = "all"
    PARTIAL = "partial"
    NONE = "none"


class DiffSelection:
    def __init__(
        self,
        default_selection_type: DiffSelectionType = DiffSelectionType.NONE,
        diverging_lines: Optional[Iterable[int]] = None,
        selectable_lines: Optional[Iterable[int]] = None,
    ) -> None:
        if default_selection_type is DiffSelectionType.PARTIAL:
            raise ValueError("default selection must be ALL or NONE")
        self.default_selection_type = default_selection_type
        self.selectable_lines: Optional[FrozenSet[int]] = (
            frozenset(selectable_lines) if selectable_lines is not None else None
        )
        diverging = frozenset(diverging_lines or ())
        if self.selectable_lines is not None:
            diverging &= self.selectable_lines
        self.diverging_lines: FrozenSet[int] = diverging

    @classmethod
    def from_lines(cls, selected: Iterable[int]) -> "DiffSelection":
        """A selection with exactly *selected* included."""
        return cls(DiffSelectionType.NONE, selected)

    def __repr__(self) -> str:
        return (
            f"DiffSelection({self.default_selection_type.value}, "
            f"diverging={sorted(self.diverging_lines)})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiffSelection):
            return NotImplemented
        return (
            self.default_selection_type == other.default_selection_type
            and self.diverging_lines == other.diverging_lines
            and self.selectable_lines == other.selectable_lines
        )

    __hash__ = None  # type: ignore[assignment]

    # ---- queries ----

    def selection_type(self) -> DiffSelectionType:
        if not self.diverging_lines:
            return self.default_selection_type
        if (
            self.selectable_lines is not None
            and len(self.diverging_lines) == len(self.selectable_lines)
        ):
            if self.default_selection_type is DiffSelectionType.ALL:
                return DiffSelectionType.NONE
            return DiffSelectionType.ALL
        return DiffSelectionType.PARTIAL

    def is_selectable(self, index: int) -> bool:
        return self.selectable_lines is None or index in self.selectable_lines

    def is_selected(self, index: int) -> bool:
        if not self.is_selectable(index):
            return False
        selected_by_default = self.default_selection_type is DiffSelectionType.ALL
        if index in self.diverging_lines:
            return not selected_by_default
        return selected_by_default

    def are_all_selected(self) -> bool:
        return self.selection_type() is DiffSelectionType.ALL

    def are_none_selected(self) -> bool:
        return self.selection_type() is DiffSelectionType.NONE

    # ---- updates ----

    def with_line_selection(self, index: int, selected: bool) -> "DiffSelection":
        return self.with_range_selection(index, 1, selected)

    def with_range_selection(self, start: int, count: int, selected: bool) -> "DiffSelection":
        selected_by_default = self.default_selection_type is DiffSelectionType.ALL
        diverging = set(self.diverging_lines)
        for index in range(start, start + count):
            if not self.is_selectable(index):
                continue
            if selected == selected_by_default:
                diverging.discard(index)
            else:
                diverging.add(index)
        return DiffSelection(self.default_selection_type, diverging, self.selectable_lines)

    def with_toggle_line_selection(self, index: int) -> "DiffSelection":
        return self.with_line_selection(index, not self.is_selected(index))

    def with_select_all(self) -> "DiffSelection":
        return DiffSelection(DiffSelectionType.ALL, None, self.selectable_lines)

    def with_select_none(self) -> "DiffSelection":
        return DiffSelection(DiffSelectionType.NONE, None, self.selectable_lines)

    def with_selectable_lines(self, lines: Iterable[int]) -> "DiffSelection":
        return DiffSelection(self.default_selection_type, self.diverging_lines, lines)


def parse_line_spec(spec: str) -> List[int]:
    """Expand ``"3,5-7"`` into ``[3, 5, 6, 7]``.

    Indices are absolute diff line indices. Raises ValueError on malformed
    input or a reversed range.
    """
    indices: List[int] = []
    for part in spec.split(","):
        part = part.strip()
        if not part:
            continue
        start, sep, end = part.partition("-")
        if not sep:
            indices.append(int(start))
            continue
        first, last = int(start), int(end)
        if last < first:
            raise ValueError(f"Reversed line range: {part}")
        indices.extend(range(first, last + 1))
    return sorted(set(indices))
