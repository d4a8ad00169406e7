"""Error taxonomy: ordered rule table, classifier and descriptions."""

from gitglean.errors.classifier import (
    classify,
    classify_output,
    describe_failure,
    explain,
    extract_oversized_files,
)
from gitglean.errors.descriptions import describe
from gitglean.errors.models import Classification, ErrorKind, ErrorRule
from gitglean.errors.registry import ErrorRuleRegistry, build_registry, default_registry
from gitglean.errors.rules import BUILTIN_ERROR_RULES

__all__ = [
    "BUILTIN_ERROR_RULES",
    "Classification",
    "ErrorKind",
    "ErrorRule",
    "ErrorRuleRegistry",
    "build_registry",
    "classify",
    "classify_output",
    "default_registry",
    "describe",
    "describe_failure",
    "explain",
    "extract_oversized_files",
]
