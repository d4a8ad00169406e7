"""Partial patch generation for staging and discarding selected lines."""

from gitglean.patch.formatter import (
    format_hunk_header,
    format_patch,
    format_patch_header,
    format_patch_header_for_file,
    format_patch_to_discard_changes,
)

__all__ = [
    "format_hunk_header",
    "format_patch",
    "format_patch_header",
    "format_patch_header_for_file",
    "format_patch_to_discard_changes",
]
