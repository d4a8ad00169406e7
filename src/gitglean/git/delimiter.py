"""Build git format strings and parsers for NUL-delimited record output.

``git log`` and ``git for-each-ref`` accept a custom ``--format``; joining the
placeholders with NUL lets field values contain anything but NUL. Each
factory returns the arguments to pass to git and a function that turns the
output back into typed records.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Tuple, Type, TypeVar

T = TypeVar("T")

Parser = Callable[[str], List[T]]


def create_log_parser(record_cls: Type[T], fields: Dict[str, str]) -> Tuple[List[str], Parser]:
    """Format args and parser for ``git log -z``.

    *fields* maps a record attribute to a format placeholder, e.g.
    ``{"sha": "%H", "summary": "%s"}``. Incomplete trailing groups are
    dropped.
    """
    keys = list(fields)
    format_args = ["-z", "--format=" + "%x00".join(fields.values())]

    def parse(output: str) -> List[T]:
        tokens = output.split("\0")
        records: List[T] = []
        width = len(keys)
        for start in range(0, len(tokens) - width + 1, width):
            group = tokens[start:start + width]
            records.append(record_cls(**dict(zip(keys, group))))
        return records

    return format_args, parse


def create_for_each_ref_parser(
    record_cls: Type[T], fields: Dict[str, str]
) -> Tuple[List[str], Parser]:
    """Format args and parser for ``git for-each-ref``.

    Every record is written as ``NUL f1 NUL f2 ... NUL`` and followed by a
    newline, so after splitting on NUL the groups are separated by ``"\\n"``
    tokens. Anything else in a separator position raises ValueError.
    """
    keys = list(fields)
    format_args = ["--format=%00" + "%00".join(fields.values()) + "%00"]

    def parse(output: str) -> List[T]:
        tokens = output.split("\0")
        # Leading empty token before the first record's opening NUL.
        if tokens and tokens[0] == "":
            tokens = tokens[1:]
        records: List[T] = []
        width = len(keys)
        idx = 0
        while idx + width <= len(tokens):
            group = tokens[idx:idx + width]
            records.append(record_cls(**dict(zip(keys, group))))
            idx += width
            if idx >= len(tokens):
                break
            separator = tokens[idx]
            if separator != "\n":
                raise ValueError(f"Unexpected separator in for-each-ref output: {separator!r}")
            idx += 1
        return records

    return format_args, parse
