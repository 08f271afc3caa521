"""Port describing the live level table consulted by the logging pipeline."""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from lib_log_levels.domain.levels import LevelRecord
from lib_log_levels.domain.registry import LevelRegistry


@runtime_checkable
class LevelTablePort(Protocol):
    """Resolve level names and codes, and accept wholesale replacement."""

    def lookup_by_name(self, name: str | None) -> int:
        """Return the code configured for ``name``."""

    def lookup_by_code(self, code: int) -> LevelRecord:
        """Return the record used to emit ``code``."""

    def reset(self, lines: Iterable[str] = (), *, include_defaults: bool = True) -> LevelRegistry:
        """Replace the table with one built from ``lines``."""


__all__ = ["LevelTablePort"]
