"""Interpret ``# branch.*`` status headers."""

from __future__ import annotations

import re
from dataclasses import replace
from typing import Iterable

from gitglean.status.models import AheadBehind, StatusHeader, StatusHeadersData

_BRANCH_OID_RE = re.compile(r"^branch\.oid ([a-f0-9]+)$")
_BRANCH_HEAD_RE = re.compile(r"^branch\.head (.*)$")
_BRANCH_UPSTREAM_RE = re.compile(r"^branch\.upstream (.*)$")
_BRANCH_AB_RE = re.compile(r"^branch\.ab \+(\d+) -(\d+)$")


def parse_status_header(data: StatusHeadersData, header: StatusHeader) -> StatusHeadersData:
    """Fold one header into *data*. Unrecognised headers leave it unchanged."""
    value = header.value
    if m := _BRANCH_OID_RE.match(value):
        return replace(data, current_tip=m.group(1))
    if m := _BRANCH_HEAD_RE.match(value):
        if m.group(1) == "(detached)":
            return data
        return replace(data, current_branch=m.group(1))
    if m := _BRANCH_UPSTREAM_RE.match(value):
        return replace(data, current_upstream_branch=m.group(1))
    if m := _BRANCH_AB_RE.match(value):
        return replace(
            data,
            branch_ahead_behind=AheadBehind(ahead=int(m.group(1)), behind=int(m.group(2))),
        )
    return data


def parse_status_headers(headers: Iterable[StatusHeader]) -> StatusHeadersData:
    data = StatusHeadersData()
    for header in headers:
        data = parse_status_header(data, header)
    return data
