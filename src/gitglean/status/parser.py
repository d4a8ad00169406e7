"""Porcelain v2 status decoder.

Decodes the NUL-delimited output of
``git status --untracked-files=all --branch --porcelain=2 -z`` into header
and entry records, and maps two-character status codes onto entry variants.

Rename and copy records are the one place where a record spans two tokens:
the encoded fields come first and the original path follows as its own
NUL-terminated token, so the tokenizer looks one token ahead for them.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional

from loguru import logger

from gitglean.status.models import (
    ConflictDetails,
    FileEntry,
    GitStatusEntry,
    ManualConflictEntry,
    OrdinaryChangeType,
    OrdinaryEntry,
    RenamedOrCopiedEntry,
    RenamedOrCopiedType,
    StatusEntry,
    StatusHeader,
    StatusItem,
    SubmoduleStatus,
    TextConflictEntry,
    UnmergedEntrySummary,
    UntrackedEntry,
)

CHANGED_ENTRY_TYPE = "1"
RENAMED_OR_COPIED_ENTRY_TYPE = "2"
UNMERGED_ENTRY_TYPE = "u"
UNTRACKED_ENTRY_TYPE = "?"
IGNORED_ENTRY_TYPE = "!"

_SUBMODULE = r"(N\.\.\.|S[C.][M.][U.])"

_CHANGED_ENTRY_RE = re.compile(
    rf"^1 ([MADRCUTX?!.]{{2}}) {_SUBMODULE} (\d+) (\d+) (\d+) ([a-f0-9]+) ([a-f0-9]+) ([\s\S]*?)$"
)
_RENAMED_OR_COPIED_ENTRY_RE = re.compile(
    rf"^2 ([MADRCUTX?!.]{{2}}) {_SUBMODULE} (\d+) (\d+) (\d+) ([a-f0-9]+) ([a-f0-9]+) ([RC]\d+) ([\s\S]*?)$"
)
_UNMERGED_ENTRY_RE = re.compile(
    rf"^u ([DAU]{{2}}) {_SUBMODULE} (\d+) (\d+) (\d+) (\d+) ([a-f0-9]+) ([a-f0-9]+) ([a-f0-9]+) ([\s\S]*?)$"
)

U = GitStatusEntry


def parse_porcelain(output: str) -> List[StatusItem]:
    """Split porcelain v2 ``-z`` output into headers and entries, in order.

    Tokens that do not fit their record shape are logged and skipped.
    Ignored (``!``) records are always dropped.
    """
    items: List[StatusItem] = []
    tokens = [t for t in output.split("\0") if t]
    i = 0
    while i < len(tokens):
        token = tokens[i]
        i += 1

        if token.startswith("# "):
            items.append(StatusHeader(value=token[2:]))
            continue

        entry_kind = token[:1]
        entry: Optional[StatusEntry] = None
        if entry_kind == CHANGED_ENTRY_TYPE:
            entry = _parse_changed_entry(token)
        elif entry_kind == RENAMED_OR_COPIED_ENTRY_TYPE:
            old_path = tokens[i] if i < len(tokens) else None
            if old_path is not None:
                i += 1
            entry = _parse_renamed_or_copied_entry(token, old_path)
        elif entry_kind == UNMERGED_ENTRY_TYPE:
            entry = _parse_unmerged_entry(token)
        elif entry_kind == UNTRACKED_ENTRY_TYPE:
            entry = _parse_untracked_entry(token)
        elif entry_kind == IGNORED_ENTRY_TYPE:
            continue
        else:
            logger.warning(f"Skipped unknown status token: {token!r}")
            continue

        if entry is not None:
            items.append(entry)

    return items


def _parse_changed_entry(token: str) -> Optional[StatusEntry]:
    m = _CHANGED_ENTRY_RE.match(token)
    if not m:
        logger.warning(f"Skipped malformed changed entry: {token!r}")
        return None
    return StatusEntry(path=m.group(8), status_code=m.group(1), submodule_status_code=m.group(2))


def _parse_renamed_or_copied_entry(token: str, old_path: Optional[str]) -> Optional[StatusEntry]:
    m = _RENAMED_OR_COPIED_ENTRY_RE.match(token)
    if not m:
        logger.warning(f"Skipped malformed renamed or copied entry: {token!r}")
        return None
    if old_path is None:
        logger.warning(f"Skipped renamed or copied entry without an old path: {token!r}")
        return None
    return StatusEntry(
        path=m.group(9),
        status_code=m.group(1),
        submodule_status_code=m.group(2),
        old_path=old_path,
    )


def _parse_unmerged_entry(token: str) -> Optional[StatusEntry]:
    m = _UNMERGED_ENTRY_RE.match(token)
    if not m:
        logger.warning(f"Skipped malformed unmerged entry: {token!r}")
        return None
    return StatusEntry(path=m.group(10), status_code=m.group(1), submodule_status_code=m.group(2))


def _parse_untracked_entry(token: str) -> StatusEntry:
    return StatusEntry(path=token[2:], status_code="??", submodule_status_code="????")


def map_submodule_status(submodule_status_code: str) -> Optional[SubmoduleStatus]:
    """Decode an ``S<c><m><u>`` code; anything not starting with S is not a submodule."""
    if not submodule_status_code.startswith("S") or len(submodule_status_code) < 4:
        return None
    return SubmoduleStatus(
        commit_changed=submodule_status_code[1] == "C",
        modified_changes=submodule_status_code[2] == "M",
        untracked_changes=submodule_status_code[3] == "U",
    )


def _ordinary(type_: OrdinaryChangeType, index: GitStatusEntry, wt: GitStatusEntry):
    return lambda sub: OrdinaryEntry(type=type_, index=index, working_tree=wt, submodule_status=sub)


def _renamed(type_: RenamedOrCopiedType, index: GitStatusEntry, wt: GitStatusEntry):
    return lambda sub: RenamedOrCopiedEntry(
        type=type_, index=index, working_tree=wt, submodule_status=sub
    )


def _manual(action: UnmergedEntrySummary, us: GitStatusEntry, them: GitStatusEntry):
    details = ConflictDetails(action=action, us=us, them=them)
    return lambda sub: ManualConflictEntry(details=details, submodule_status=sub)


def _text(action: UnmergedEntrySummary, us: GitStatusEntry, them: GitStatusEntry):
    details = ConflictDetails(action=action, us=us, them=them)
    return lambda sub: TextConflictEntry(details=details, submodule_status=sub)


_ADDED = OrdinaryChangeType.ADDED
_MODIFIED = OrdinaryChangeType.MODIFIED
_DELETED = OrdinaryChangeType.DELETED
_RENAMED = RenamedOrCopiedType.RENAMED
_COPIED = RenamedOrCopiedType.COPIED
_S = UnmergedEntrySummary

STATUS_CODE_MAP: Dict[str, object] = {
    "??": lambda sub: UntrackedEntry(submodule_status=sub),
    ".M": _ordinary(_MODIFIED, U.UNCHANGED, U.MODIFIED),
    "M.": _ordinary(_MODIFIED, U.MODIFIED, U.UNCHANGED),
    ".A": _ordinary(_ADDED, U.UNCHANGED, U.ADDED),
    "A.": _ordinary(_ADDED, U.ADDED, U.UNCHANGED),
    ".D": _ordinary(_DELETED, U.UNCHANGED, U.DELETED),
    "D.": _ordinary(_DELETED, U.DELETED, U.UNCHANGED),
    ".R": _renamed(_RENAMED, U.UNCHANGED, U.RENAMED),
    "R.": _renamed(_RENAMED, U.RENAMED, U.UNCHANGED),
    ".C": _renamed(_COPIED, U.UNCHANGED, U.COPIED),
    "C.": _renamed(_COPIED, U.COPIED, U.UNCHANGED),
    "AD": _ordinary(_ADDED, U.ADDED, U.DELETED),
    "AM": _ordinary(_ADDED, U.ADDED, U.MODIFIED),
    "RM": _renamed(_RENAMED, U.RENAMED, U.MODIFIED),
    "RD": _renamed(_RENAMED, U.RENAMED, U.DELETED),
    "DD": _manual(_S.BOTH_DELETED, U.DELETED, U.DELETED),
    "AU": _manual(_S.ADDED_BY_US, U.ADDED, U.UPDATED_BUT_UNMERGED),
    "UD": _manual(_S.DELETED_BY_THEM, U.UPDATED_BUT_UNMERGED, U.DELETED),
    "UA": _manual(_S.ADDED_BY_THEM, U.UPDATED_BUT_UNMERGED, U.ADDED),
    "DU": _manual(_S.DELETED_BY_US, U.DELETED, U.UPDATED_BUT_UNMERGED),
    "AA": _text(_S.BOTH_ADDED, U.ADDED, U.ADDED),
    "UU": _text(_S.BOTH_MODIFIED, U.UPDATED_BUT_UNMERGED, U.UPDATED_BUT_UNMERGED),
}


def map_status(status_code: str, submodule_status_code: str = "N...") -> FileEntry:
    """Map a two-character status code to its entry variant.

    Codes outside the table become a modified entry with unknown index and
    working-tree state, so newer git versions never break decoding.
    """
    submodule_status = map_submodule_status(submodule_status_code)
    factory = STATUS_CODE_MAP.get(status_code)
    if factory is None:
        return OrdinaryEntry(type=_MODIFIED, submodule_status=submodule_status)
    return factory(submodule_status)  # type: ignore[operator]
