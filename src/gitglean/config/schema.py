"""Configuration schema: dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

LogLevel = Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"]
OutputFormat = Literal["terminal", "json"]

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR")
OUTPUT_FORMATS = ("terminal", "json")


@dataclass
class GitConfig:
    timeout: int = 30  # seconds per git invocation
    max_status_buffer_size: int = 20_000_000  # bytes of porcelain output


@dataclass
class LoggingConfig:
    level: LogLevel = "WARNING"


@dataclass
class ErrorsConfig:
    disable: List[str] = field(default_factory=list)  # ErrorKind names or values
    rules_dir: str = ".gitglean-rules"


@dataclass
class ProgressConfig:
    track_lfs: bool = False


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"


@dataclass
class GitGleanConfig:
    version: str = "1.0"
    git: GitConfig = field(default_factory=GitConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    errors: ErrorsConfig = field(default_factory=ErrorsConfig)
    progress: ProgressConfig = field(default_factory=ProgressConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
