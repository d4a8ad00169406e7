"""Error rule registry: built-in table plus custom rules, filtered by config."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import yaml
from loguru import logger

from gitglean.config.schema import GitGleanConfig
from gitglean.errors.models import ErrorKind, ErrorRule


class ErrorRuleRegistry:
    """Ordered store of classification rules. Insertion order is match order."""

    def __init__(self) -> None:
        self._rules: List[ErrorRule] = []

    # ---- registration ----

    def register(self, rule: ErrorRule) -> None:
        self._rules.append(rule)

    def register_many(self, rules: list[ErrorRule]) -> None:
        for r in rules:
            self.register(r)

    # ---- queries ----

    @property
    def all_rules(self) -> List[ErrorRule]:
        return list(self._rules)

    def enabled_rules(self) -> List[ErrorRule]:
        return [r for r in self._rules if r.enabled]

    def rules_for(self, kind: ErrorKind) -> List[ErrorRule]:
        return [r for r in self._rules if r.kind is kind]

    def __len__(self) -> int:
        return len(self._rules)

    # ---- config filtering ----

    def apply_config(self, config: GitGleanConfig) -> None:
        """Switch off every rule whose kind is listed in ``[errors] disable``."""
        disabled = set()
        for name in config.errors.disable:
            kind = ErrorKind.from_name(name)
            if kind is None:
                logger.warning(f"Unknown error kind in disable list: {name}")
                continue
            disabled.add(kind)

        for rule in self._rules:
            if rule.kind in disabled:
                rule.enabled = False

    # ---- custom rule loading ----

    def load_custom_rules(self, directory: Path) -> int:
        """Load YAML rule files from *directory*. Returns count loaded."""
        count = 0
        if not directory.is_dir():
            return 0
        for path in sorted(directory.iterdir()):
            if path.suffix in (".yaml", ".yml"):
                count += self._load_yaml_rules(path)
        return count

    def _load_yaml_rules(self, path: Path) -> int:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.warning(f"Skipped unreadable rule file {path}: {e}")
            return 0
        if data is None:
            return 0
        if not isinstance(data, list):
            data = [data]
        count = 0
        for entry in data:
            if not isinstance(entry, dict) or "kind" not in entry or "pattern" not in entry:
                logger.warning(f"Skipped malformed rule in {path}: {entry!r}")
                continue
            kind = ErrorKind.from_name(str(entry["kind"]))
            if kind is None:
                logger.warning(f"Skipped rule with unknown kind in {path}: {entry['kind']}")
                continue
            self.register(
                ErrorRule(
                    kind=kind,
                    pattern=str(entry["pattern"]),
                    example=entry.get("example"),
                )
            )
            count += 1
        return count


def _fresh_copies(rules: List[ErrorRule]) -> List[ErrorRule]:
    # apply_config mutates ``enabled`` and the built-in table is shared.
    return [ErrorRule(kind=r.kind, pattern=r.pattern, example=r.example) for r in rules]


def default_registry() -> ErrorRuleRegistry:
    """A registry holding only the built-in table, in its declared order."""
    from gitglean.errors.rules import BUILTIN_ERROR_RULES

    registry = ErrorRuleRegistry()
    registry.register_many(_fresh_copies(BUILTIN_ERROR_RULES))
    return registry


def build_registry(config: GitGleanConfig, repo_root: Optional[Path]) -> ErrorRuleRegistry:
    """Create a fully populated, config-filtered rule registry."""
    from gitglean.errors.rules import BUILTIN_ERROR_RULES

    registry = ErrorRuleRegistry()
    registry.register_many(_fresh_copies(BUILTIN_ERROR_RULES))

    if repo_root is not None:
        loaded = registry.load_custom_rules(repo_root / config.errors.rules_dir)
        if loaded:
            logger.debug(f"Loaded {loaded} custom error rules")

    registry.apply_config(config)

    # Force-compile patterns up front
    for rule in registry.enabled_rules():
        _ = rule.compiled_pattern

    return registry
