"""Composition helpers wiring settings, sources, and the level catalog.

Purpose
-------
Translate :class:`lib_log_levels.config.LevelSettings` into a ready
:class:`lib_log_levels.runtime.LevelCatalog`, so the CLI and host applications
share one construction path.

Contents
--------
* :func:`source_from_settings` - pick the configured level source.
* :func:`build_catalog` - assemble a catalog from settings.
* :func:`summary_info` - metadata banner used by the CLI.
"""

from __future__ import annotations

import logging

from .adapters.source import FileLevelSource
from .application.ports.source import LevelSourcePort
from .config import LevelSettings, load_settings
from .runtime import LevelCatalog

LOGGER = logging.getLogger(__name__)


def source_from_settings(settings: LevelSettings) -> LevelSourcePort | None:
    """Return a file source when ``settings`` names a levels file."""

    if settings.levels_file is None:
        return None
    return FileLevelSource(settings.levels_file)


def build_catalog(settings: LevelSettings | None = None) -> LevelCatalog:
    """Build a :class:`LevelCatalog` according to ``settings``.

    Parameters
    ----------
    settings:
        Resolved settings; ``None`` resolves them from the environment.

    Raises
    ------
    OSError, UnicodeDecodeError
        When the configured levels file cannot be read or is not UTF-8.
    InvalidLevelError, MissingFallbackSlotError
        When the definitions cannot form a registry.

    Examples
    --------
    >>> catalog = build_catalog(LevelSettings())
    >>> catalog.lookup_by_name("error")
    100
    """
    resolved = settings if settings is not None else load_settings()
    source = source_from_settings(resolved)
    lines = list(source.read_lines()) if source is not None else []
    LOGGER.debug(
        "building level catalog: %d lines, defaults=%s, require_fallback=%s",
        len(lines),
        resolved.include_defaults,
        resolved.require_fallback,
    )
    return LevelCatalog(lines, include_defaults=resolved.include_defaults, require_fallback=resolved.require_fallback)


def summary_info() -> str:
    """Return the metadata banner used by the CLI entry point.

    Examples
    --------
    >>> banner = summary_info()
    >>> "version" in banner
    True
    """
    from . import __init__conf__

    lines: list[str] = []

    def _capture(text: str) -> None:
        lines.append(text)

    __init__conf__.print_info(writer=_capture)
    return "".join(lines)


__all__ = ["build_catalog", "source_from_settings", "summary_info"]
