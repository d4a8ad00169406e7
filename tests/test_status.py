"""Tests for the porcelain v2 status decoder, headers and status-code mapping."""

from gitglean.status.headers import parse_status_headers
from gitglean.status.models import (
    AheadBehind,
    GitStatusEntry,
    ManualConflictEntry,
    OrdinaryChangeType,
    OrdinaryEntry,
    RenamedOrCopiedEntry,
    RenamedOrCopiedType,
    StatusEntry,
    StatusHeader,
    TextConflictEntry,
    UnmergedEntrySummary,
    UntrackedEntry,
)
from gitglean.status.parser import (
    STATUS_CODE_MAP,
    map_status,
    map_submodule_status,
    parse_porcelain,
)


class TestParsePorcelain:
    def test_headers_and_entries_in_order(self, sample_porcelain):
        items = parse_porcelain(sample_porcelain)
        headers = [i for i in items if isinstance(i, StatusHeader)]
        entries = [i for i in items if isinstance(i, StatusEntry)]
        assert len(headers) == 4
        assert [e.path for e in entries] == [
            "modified.txt",
            "added.txt",
            "renamed.txt",
            "conflict.txt",
            "untracked.txt",
        ]

    def test_header_value_strips_prefix(self, sample_porcelain):
        first = parse_porcelain(sample_porcelain)[0]
        assert first == StatusHeader("branch.oid 1234567890abcdef1234567890abcdef12345678")

    def test_ordinary_entry(self):
        token = "1 .M N... 100644 100644 100644 aaa bbb file.txt"
        (entry,) = parse_porcelain(token)
        assert entry == StatusEntry(path="file.txt", status_code=".M", submodule_status_code="N...")

    def test_rename_consumes_next_token(self, sample_porcelain):
        entries = [i for i in parse_porcelain(sample_porcelain) if isinstance(i, StatusEntry)]
        renamed = entries[2]
        assert renamed.status_code == "R."
        assert renamed.old_path == "original.txt"
        # The old path is not reported as a record of its own.
        assert "original.txt" not in [e.path for e in entries]

    def test_rename_without_old_path_dropped(self):
        token = "2 R. N... 100644 100644 100644 aaa aaa R100 renamed.txt"
        assert parse_porcelain(token) == []

    def test_unmerged_entry(self, sample_porcelain):
        entries = [i for i in parse_porcelain(sample_porcelain) if isinstance(i, StatusEntry)]
        assert entries[3].status_code == "UU"
        assert entries[3].path == "conflict.txt"

    def test_untracked_entry(self):
        (entry,) = parse_porcelain("? new file.txt\0")
        assert entry == StatusEntry(path="new file.txt", status_code="??", submodule_status_code="????")

    def test_ignored_dropped(self):
        assert parse_porcelain("! build/out.o\0") == []

    def test_malformed_token_skipped(self):
        output = "1 .M garbage\0? kept.txt\0"
        items = parse_porcelain(output)
        assert [i.path for i in items] == ["kept.txt"]

    def test_unknown_token_skipped(self):
        assert parse_porcelain("x what is this\0") == []

    def test_path_with_spaces(self):
        token = "1 M. N... 100644 100644 100644 abc def docs/my notes.md"
        (entry,) = parse_porcelain(token)
        assert entry.path == "docs/my notes.md"

    def test_submodule_code(self):
        token = "1 .M SC.. 160000 160000 160000 abc abc vendor/lib"
        (entry,) = parse_porcelain(token)
        assert entry.submodule_status_code == "SC.."

    def test_empty_output(self):
        assert parse_porcelain("") == []


class TestMapStatus:
    def test_working_tree_modification(self):
        entry = map_status(".M")
        assert entry == OrdinaryEntry(
            type=OrdinaryChangeType.MODIFIED,
            index=GitStatusEntry.UNCHANGED,
            working_tree=GitStatusEntry.MODIFIED,
        )

    def test_index_modification(self):
        entry = map_status("M.")
        assert entry.index is GitStatusEntry.MODIFIED
        assert entry.working_tree is GitStatusEntry.UNCHANGED

    def test_added(self):
        entry = map_status("A.")
        assert isinstance(entry, OrdinaryEntry)
        assert entry.type is OrdinaryChangeType.ADDED

    def test_renamed_and_copied(self):
        assert map_status("R.") == RenamedOrCopiedEntry(
            type=RenamedOrCopiedType.RENAMED,
            index=GitStatusEntry.RENAMED,
            working_tree=GitStatusEntry.UNCHANGED,
        )
        assert map_status(".C").type is RenamedOrCopiedType.COPIED

    def test_untracked(self):
        assert isinstance(map_status("??"), UntrackedEntry)

    def test_text_conflicts(self):
        both_modified = map_status("UU")
        both_added = map_status("AA")
        assert isinstance(both_modified, TextConflictEntry)
        assert both_modified.details.action is UnmergedEntrySummary.BOTH_MODIFIED
        assert isinstance(both_added, TextConflictEntry)
        assert both_added.details.action is UnmergedEntrySummary.BOTH_ADDED

    def test_manual_conflicts(self):
        expected = {
            "DD": UnmergedEntrySummary.BOTH_DELETED,
            "AU": UnmergedEntrySummary.ADDED_BY_US,
            "UD": UnmergedEntrySummary.DELETED_BY_THEM,
            "UA": UnmergedEntrySummary.ADDED_BY_THEM,
            "DU": UnmergedEntrySummary.DELETED_BY_US,
        }
        for code, action in expected.items():
            entry = map_status(code)
            assert isinstance(entry, ManualConflictEntry), code
            assert entry.details.action is action

    def test_unknown_code_falls_back_to_modified(self):
        entry = map_status("MM")
        assert entry == OrdinaryEntry(type=OrdinaryChangeType.MODIFIED)

    def test_every_mapped_code_resolves(self):
        for code in STATUS_CODE_MAP:
            assert map_status(code) is not None

    def test_submodule_status_attached(self):
        entry = map_status(".M", "SCMU")
        assert entry.submodule_status.commit_changed is True
        assert entry.submodule_status.modified_changes is True
        assert entry.submodule_status.untracked_changes is True


class TestSubmoduleStatus:
    def test_not_a_submodule(self):
        assert map_submodule_status("N...") is None

    def test_flags(self):
        status = map_submodule_status("S.M.")
        assert status.commit_changed is False
        assert status.modified_changes is True
        assert status.untracked_changes is False

    def test_short_code(self):
        assert map_submodule_status("S") is None


class TestHeaders:
    def test_all_headers(self, sample_porcelain):
        headers = [i for i in parse_porcelain(sample_porcelain) if isinstance(i, StatusHeader)]
        data = parse_status_headers(headers)
        assert data.current_tip == "1234567890abcdef1234567890abcdef12345678"
        assert data.current_branch == "main"
        assert data.current_upstream_branch == "origin/main"
        assert data.branch_ahead_behind == AheadBehind(ahead=2, behind=1)

    def test_detached_head(self):
        data = parse_status_headers([StatusHeader("branch.head (detached)")])
        assert data.current_branch is None

    def test_initial_commit_has_no_tip(self):
        data = parse_status_headers([StatusHeader("branch.oid (initial)")])
        assert data.current_tip is None

    def test_unknown_header_ignored(self):
        data = parse_status_headers([StatusHeader("stash 3")])
        assert data.current_branch is None
        assert data.branch_ahead_behind is None
