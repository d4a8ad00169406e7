"""Classify git failure output into an ErrorKind."""

from __future__ import annotations

import re
from typing import List, Optional

from gitglean.errors.descriptions import describe
from gitglean.errors.models import Classification, ErrorKind
from gitglean.errors.registry import ErrorRuleRegistry, default_registry

_OVERSIZED_BEGIN_RE = re.compile(r"(^remote:\serror:\sFile\s)", re.MULTILINE)
_OVERSIZED_END_RE = re.compile(
    r"(;\sthis\sexceeds\sGitHub's\sfile\ssize\slimit\sof\s100.00\sMB)"
)

_default: Optional[ErrorRuleRegistry] = None


def _default_registry() -> ErrorRuleRegistry:
    global _default
    if _default is None:
        _default = default_registry()
    return _default


def classify(text: str, registry: Optional[ErrorRuleRegistry] = None) -> Optional[ErrorKind]:
    """Return the kind of the first enabled rule matching *text*, else None.

    Never raises: empty or unrecognised text simply yields None.
    """
    if not text:
        return None
    rules = (registry or _default_registry()).enabled_rules()
    for rule in rules:
        if rule.matches(text):
            return rule.kind
    return None


def classify_output(
    stderr: str, stdout: str = "", registry: Optional[ErrorRuleRegistry] = None
) -> Optional[ErrorKind]:
    """Classify a failed invocation, trying stderr first and stdout second."""
    return classify(stderr, registry) or classify(stdout, registry)


def extract_oversized_files(text: str) -> List[str]:
    """List the files named in a GitHub "file size limit" push rejection.

    Each file is reported between a ``remote: error: File`` prefix and the
    size-limit suffix, and comes back as ``"name (size)"``. When the prefixes
    and suffixes do not pair up, nothing is returned.
    """
    begins = list(_OVERSIZED_BEGIN_RE.finditer(text))
    ends = list(_OVERSIZED_END_RE.finditer(text))
    if len(begins) != len(ends):
        return []

    files: List[str] = []
    for begin, end in zip(begins, ends):
        chunk = text[begin.end():end.start()]
        name, sep, size = chunk.rpartition(" is ")
        files.append(f"{name} ({size})" if sep else chunk)
    return files


def describe_failure(kind: ErrorKind, text: str) -> Optional[str]:
    """Description for *kind*, with the offending files appended for GH001 rejections."""
    description = describe(kind)
    if kind is ErrorKind.PUSH_WITH_FILE_SIZE_EXCEEDING_LIMIT:
        files = extract_oversized_files(text)
        if files:
            description = f"{description}\n\nFile causing error:\n\n" + "\n".join(files)
    return description


def explain(text: str, registry: Optional[ErrorRuleRegistry] = None) -> Optional[Classification]:
    kind = classify(text, registry)
    if kind is None:
        return None
    oversized = (
        extract_oversized_files(text)
        if kind is ErrorKind.PUSH_WITH_FILE_SIZE_EXCEEDING_LIMIT
        else []
    )
    return Classification(kind=kind, description=describe(kind), oversized_files=oversized)
