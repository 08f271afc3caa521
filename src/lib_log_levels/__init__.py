"""Public package surface of the configurable log level registry.

Exports the domain types, the :class:`LevelCatalog` owner, and the
process-wide :mod:`lib_log_levels.runtime` façade so hosts can write::

    from lib_log_levels import runtime
    runtime.init(["TRACE = 10, LOG_DEBUG"])
    runtime.lookup_by_code(10).name_upper
"""

from __future__ import annotations

from . import runtime
from .domain import (
    DEFAULT_LEVEL_LINES,
    FALLBACK_CODE,
    InvalidLevelError,
    LevelError,
    LevelLookupError,
    LevelNotFoundError,
    LevelParseError,
    LevelRecord,
    LevelRegistry,
    MissingFallbackSlotError,
    SyslogPriority,
    build_registry,
    parse_level_line,
)
from .lib_log_levels import build_catalog, summary_info
from .runtime import LevelCatalog

__all__ = [
    "DEFAULT_LEVEL_LINES",
    "FALLBACK_CODE",
    "InvalidLevelError",
    "LevelCatalog",
    "LevelError",
    "LevelLookupError",
    "LevelNotFoundError",
    "LevelParseError",
    "LevelRecord",
    "LevelRegistry",
    "MissingFallbackSlotError",
    "SyslogPriority",
    "build_catalog",
    "build_registry",
    "parse_level_line",
    "runtime",
    "summary_info",
]
