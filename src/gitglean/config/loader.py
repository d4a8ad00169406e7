"""Load and merge configuration from .gitglean.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomllib  # type: ignore[import-not-found]
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]

from gitglean.config.schema import (
    LOG_LEVELS,
    OUTPUT_FORMATS,
    ErrorsConfig,
    GitConfig,
    GitGleanConfig,
    LoggingConfig,
    OutputConfig,
    ProgressConfig,
)
from gitglean.exceptions import ConfigError

CONFIG_FILENAME = ".gitglean.toml"


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _merge_env_overrides(cfg: GitGleanConfig) -> None:
    """Apply GITGLEAN_* environment variable overrides."""
    if val := os.environ.get("GITGLEAN_LOG_LEVEL"):
        if val.upper() in LOG_LEVELS:
            cfg.logging.level = val.upper()  # type: ignore[assignment]
    if val := os.environ.get("GITGLEAN_GIT_TIMEOUT"):
        try:
            cfg.git.timeout = int(val)
        except ValueError:
            pass
    if val := os.environ.get("GITGLEAN_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("GITGLEAN_DISABLE_ERRORS"):
        cfg.errors.disable.extend(k.strip() for k in val.split(",") if k.strip())


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table, got {type(raw).__name__}")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> GitGleanConfig:
    """Load, validate, and return a GitGleanConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = GitGleanConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = GitGleanConfig(
            version=raw.get("version", "1.0"),
            git=_build_section(raw, GitConfig, "git"),
            logging=_build_section(raw, LoggingConfig, "logging"),
            errors=_build_section(raw, ErrorsConfig, "errors"),
            progress=_build_section(raw, ProgressConfig, "progress"),
            output=_build_section(raw, OutputConfig, "output"),
        )

    _merge_env_overrides(cfg)
    return cfg
