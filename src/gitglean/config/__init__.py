"""Configuration loading, schema, and defaults."""

from gitglean.config.loader import load_config
from gitglean.config.schema import GitGleanConfig
from gitglean.exceptions import ConfigError

__all__ = [
    "ConfigError",
    "GitGleanConfig",
    "load_config",
]
