"""Runtime façade owning the process-wide level catalog.

Purpose
-------
Expose the stable entry points (`init`, `reset`, `reload`, `define`,
`lookup_by_name`, `lookup_by_code`, `shutdown`) a logging library calls
instead of passing a :class:`LevelCatalog` around.

Contents
--------
* :class:`LevelCatalog` - owned registry with atomic swap, usable standalone.
* ``init`` / ``shutdown`` - install and discard the process-wide catalog.
* ``reset`` / ``reload`` / ``define`` - replace or extend the live registry.
* ``lookup_by_name`` / ``lookup_by_code`` - hot-path queries.

System Role
-----------
Outer shell around the domain registry: hosts build the catalog once during
logging setup, reset it on configuration reload, and query it on every emitted
record.
"""

from __future__ import annotations

from threading import RLock
from typing import Iterable

from lib_log_levels.application.ports.source import LevelSourcePort
from lib_log_levels.application.use_cases.reload import create_reload
from lib_log_levels.domain import LevelRecord, LevelRegistry

from ._catalog import LevelCatalog

_CATALOG: LevelCatalog | None = None
_CATALOG_LOCK = RLock()


def _require_catalog() -> LevelCatalog:
    catalog = _CATALOG
    if catalog is None:
        raise RuntimeError("lib_log_levels.runtime.init() must be called before looking up levels")
    return catalog


def is_initialised() -> bool:
    """Return ``True`` while a process-wide catalog is installed."""

    return _CATALOG is not None


def init(
    lines: Iterable[str] = (),
    *,
    include_defaults: bool = True,
    require_fallback: bool = True,
) -> LevelCatalog:
    """Build the process-wide catalog and install it.

    Raises
    ------
    RuntimeError
        When a catalog is already installed; use :func:`reset` to replace its
        levels or :func:`shutdown` first.
    InvalidLevelError, MissingFallbackSlotError
        When the definitions are unusable; nothing is installed.

    Examples
    --------
    >>> catalog = init(["TRACE = 10, LOG_DEBUG"])
    >>> lookup_by_name("TRACE")
    10
    >>> shutdown()
    """
    global _CATALOG
    with _CATALOG_LOCK:
        if _CATALOG is not None:
            raise RuntimeError("lib_log_levels.runtime is already initialised; call reset() or shutdown() first")
        catalog = LevelCatalog(lines, include_defaults=include_defaults, require_fallback=require_fallback)
        _CATALOG = catalog
    return catalog


def shutdown() -> None:
    """Discard the process-wide catalog and its records."""

    global _CATALOG
    with _CATALOG_LOCK:
        _CATALOG = None


def current_registry() -> LevelRegistry:
    """Return the registry snapshot currently published."""

    return _require_catalog().registry


def reset(lines: Iterable[str] = (), *, include_defaults: bool = True) -> LevelRegistry:
    """Replace the live registry; the old one survives a failed rebuild."""

    return _require_catalog().reset(lines, include_defaults=include_defaults)


def reload(source: LevelSourcePort, *, include_defaults: bool = True) -> LevelRegistry:
    """Rebuild the live registry from ``source``."""

    return create_reload(table=_require_catalog(), source=source, include_defaults=include_defaults)()


def define(line: str) -> LevelRecord:
    """Add or replace one level in the live registry."""

    return _require_catalog().define(line)


def lookup_by_name(name: str | None) -> int:
    """Return the code configured for ``name``."""

    return _require_catalog().lookup_by_name(name)


def lookup_by_code(code: int) -> LevelRecord:
    """Return the record used to emit ``code``, degrading to UNKNOWN."""

    return _require_catalog().lookup_by_code(code)


__all__ = [
    "LevelCatalog",
    "current_registry",
    "define",
    "init",
    "is_initialised",
    "lookup_by_code",
    "lookup_by_name",
    "reload",
    "reset",
    "shutdown",
]
