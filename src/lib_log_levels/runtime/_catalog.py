"""Owner of the live level registry with atomic replacement."""

from __future__ import annotations

import logging
from threading import RLock
from typing import Iterable

from lib_log_levels.application.ports.table import LevelTablePort
from lib_log_levels.domain import (
    InvalidLevelError,
    LevelError,
    LevelParseError,
    LevelRecord,
    LevelRegistry,
    build_registry,
    parse_level_line,
)

LOGGER = logging.getLogger(__name__)


class LevelCatalog(LevelTablePort):
    """Publish one :class:`LevelRegistry` at a time to concurrent readers.

    Writers (:meth:`reset`, :meth:`define`) are serialised and always build a
    complete new registry before swapping the reference. Readers never take
    the lock; they see either the old or the new registry, never a mix.

    Parameters
    ----------
    lines:
        Initial definition lines applied after the defaults.
    include_defaults:
        Seed the initial registry with the default levels.
    require_fallback:
        Reject registries lacking the UNKNOWN slot, now and on every reset.
    """

    def __init__(
        self,
        lines: Iterable[str] = (),
        *,
        include_defaults: bool = True,
        require_fallback: bool = True,
    ) -> None:
        self._lock = RLock()
        self._require_fallback = require_fallback
        self._registry = build_registry(list(lines), include_defaults=include_defaults, require_fallback=require_fallback)

    @property
    def registry(self) -> LevelRegistry:
        """Return the currently published registry snapshot."""

        return self._registry

    def reset(self, lines: Iterable[str] = (), *, include_defaults: bool = True) -> LevelRegistry:
        """Replace the registry with one built from ``lines``.

        Raises
        ------
        InvalidLevelError, MissingFallbackSlotError
            When the new registry cannot be built; the previous one stays live.
        """
        with self._lock:
            try:
                registry = build_registry(list(lines), include_defaults=include_defaults, require_fallback=self._require_fallback)
            except LevelError as exc:
                LOGGER.error("level reset failed, keeping %d active levels: %s", len(self._registry), exc)
                raise
            self._registry = registry
        LOGGER.info("level registry reset with %d levels", len(registry))
        return registry

    def define(self, line: str) -> LevelRecord:
        """Add or replace a single level definition and publish the result."""

        try:
            record = parse_level_line(line)
        except LevelParseError as exc:
            LOGGER.error("level definition rejected: %s", exc)
            raise InvalidLevelError(line, exc) from exc
        with self._lock:
            self._registry = LevelRegistry((*self._registry, record), require_fallback=self._require_fallback)
        LOGGER.info("level %s defined", record.describe())
        return record

    def lookup_by_name(self, name: str | None) -> int:
        """Return the code configured for ``name`` in the live registry."""

        return self._registry.lookup_by_name(name)

    def lookup_by_code(self, code: int) -> LevelRecord:
        """Return the record used to emit ``code`` from the live registry."""

        return self._registry.lookup_by_code(code)


__all__ = ["LevelCatalog"]
