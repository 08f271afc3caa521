"""Domain value objects, parser, and registry for configurable log levels."""

from __future__ import annotations

from .errors import (
    CodeOutOfRangeError,
    EmptyNameError,
    EmptyQueryError,
    InvalidLevelError,
    LevelError,
    LevelLookupError,
    LevelNotFoundError,
    LevelParseError,
    MalformedLineError,
    MissingFallbackSlotError,
    NameTooLongError,
    RegistryError,
    UnknownSyslogNameError,
)
from .levels import MAX_LEVEL_CODE, MAX_LEVEL_NAME_LENGTH, MIN_LEVEL_CODE, LevelRecord, SyslogPriority
from .parsing import parse_level_line
from .registry import DEFAULT_LEVEL_LINES, FALLBACK_CODE, LevelRegistry, build_registry

__all__ = [
    "CodeOutOfRangeError",
    "DEFAULT_LEVEL_LINES",
    "EmptyNameError",
    "EmptyQueryError",
    "FALLBACK_CODE",
    "InvalidLevelError",
    "LevelError",
    "LevelLookupError",
    "LevelNotFoundError",
    "LevelParseError",
    "LevelRecord",
    "LevelRegistry",
    "MAX_LEVEL_CODE",
    "MAX_LEVEL_NAME_LENGTH",
    "MIN_LEVEL_CODE",
    "MalformedLineError",
    "MissingFallbackSlotError",
    "NameTooLongError",
    "RegistryError",
    "SyslogPriority",
    "UnknownSyslogNameError",
    "build_registry",
    "parse_level_line",
]
