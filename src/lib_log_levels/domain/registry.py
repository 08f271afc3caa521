"""Sparse table of level records indexed by numeric code.

Purpose
-------
Hold the configured severity levels and answer the two questions a logging
library asks: which code belongs to a name, and which record describes a code
that is about to be emitted.

Contents
--------
* :data:`DEFAULT_LEVEL_LINES` - definitions seeded into every registry unless
  suppressed.
* :class:`LevelRegistry` - immutable 256-slot snapshot with lookup helpers.
* :func:`build_registry` - all-or-nothing construction from definition lines.

System Role
-----------
Core of the domain layer. :class:`lib_log_levels.runtime.LevelCatalog` owns
the live instance and swaps it on reset; lookups run lock-free on the
snapshot.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence

from .errors import EmptyQueryError, InvalidLevelError, LevelNotFoundError, LevelParseError, MissingFallbackSlotError
from .levels import MAX_LEVEL_CODE, LevelRecord
from .parsing import parse_level_line

LOGGER = logging.getLogger(__name__)

FALLBACK_CODE = 254
#: Slot of the UNKNOWN level substituted for out-of-range or unpopulated codes.

_SLOT_COUNT = MAX_LEVEL_CODE + 1

DEFAULT_LEVEL_LINES: tuple[str, ...] = (
    "* = 0, LOG_INFO",
    "DEBUG = 20, LOG_DEBUG",
    "INFO = 40, LOG_INFO",
    "NOTICE = 60, LOG_NOTICE",
    "WARN = 80, LOG_WARNING",
    "ERROR = 100, LOG_ERR",
    "FATAL = 120, LOG_ALERT",
    "UNKNOWN = 254, LOG_ERR",
    "! = 255, LOG_INFO",
)
"""Built-in level definitions; ``*`` and ``!`` bracket the usable range."""


def _parse_all(lines: Iterable[str]) -> list[LevelRecord]:
    """Parse every line or raise :class:`InvalidLevelError` for the first bad one."""
    records: list[LevelRecord] = []
    for line in lines:
        try:
            records.append(parse_level_line(line))
        except LevelParseError as exc:
            raise InvalidLevelError(line, exc) from exc
    return records


class LevelRegistry:
    """Immutable snapshot of level records keyed by code.

    Instances are built once and never mutated; operations that add levels
    return a new registry. Use :func:`build_registry` or :meth:`from_lines`
    rather than the constructor when starting from configuration text.

    Parameters
    ----------
    records:
        Records inserted in order; a later record replaces an earlier one with
        the same code.
    require_fallback:
        When ``True`` (default) a registry without a record at
        :data:`FALLBACK_CODE` is rejected with
        :class:`MissingFallbackSlotError`.
    """

    __slots__ = ("_slots",)

    def __init__(self, records: Iterable[LevelRecord] = (), *, require_fallback: bool = True) -> None:
        slots: list[LevelRecord | None] = [None] * _SLOT_COUNT
        for record in records:
            if slots[record.code] is not None:
                LOGGER.debug("level slot %d redefined: %s replaces %s", record.code, record.name_upper, slots[record.code].name_upper)
            slots[record.code] = record
        if require_fallback and slots[FALLBACK_CODE] is None:
            raise MissingFallbackSlotError(FALLBACK_CODE)
        self._slots: tuple[LevelRecord | None, ...] = tuple(slots)

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str] = (),
        *,
        include_defaults: bool = True,
        require_fallback: bool = True,
    ) -> "LevelRegistry":
        """Build a registry from definition lines, optionally seeded with defaults.

        Raises
        ------
        InvalidLevelError
            When any line fails to parse; no registry is produced.
        MissingFallbackSlotError
            When ``require_fallback`` is set and no line defines code 254.
        """
        seed = DEFAULT_LEVEL_LINES if include_defaults else ()
        records = _parse_all((*seed, *lines))
        registry = cls(records, require_fallback=require_fallback)
        if LOGGER.isEnabledFor(logging.DEBUG):
            for entry in registry.profile():
                LOGGER.debug("level %s", entry)
        return registry

    def with_lines(self, lines: Iterable[str]) -> "LevelRegistry":
        """Return a new registry with ``lines`` applied on top of this one."""

        records = _parse_all(lines)
        return LevelRegistry((*self, *records), require_fallback=self.has_fallback)

    @property
    def has_fallback(self) -> bool:
        """Return ``True`` when the UNKNOWN slot is populated."""

        return self._slots[FALLBACK_CODE] is not None

    def get(self, code: int) -> LevelRecord | None:
        """Return the record stored at ``code`` or ``None`` when unpopulated."""

        if 0 <= code < _SLOT_COUNT:
            return self._slots[code]
        return None

    def lookup_by_name(self, name: str | None) -> int:
        """Return the code of the first level whose name matches ``name``.

        The comparison ignores case and scans slots in ascending code order.

        Raises
        ------
        EmptyQueryError
            When ``name`` is ``None`` or empty.
        LevelNotFoundError
            When no populated slot matches.

        Examples
        --------
        >>> build_registry().lookup_by_name("Warn")
        80
        """
        if not name:
            raise EmptyQueryError("level name to look up must not be empty", query=name)
        for record in self:
            if record.matches(name):
                return record.code
        raise LevelNotFoundError(f"level {name!r} is not defined", query=name)

    def lookup_by_code(self, code: int) -> LevelRecord:
        """Return the record for ``code``, degrading to the UNKNOWN level.

        Codes outside ``(0, 254]`` and unpopulated slots resolve to the record
        at :data:`FALLBACK_CODE`.

        Raises
        ------
        MissingFallbackSlotError
            When the fallback itself is needed but unpopulated, which only
            happens for registries built with ``require_fallback=False``.

        Examples
        --------
        >>> build_registry().lookup_by_code(300).name_upper
        'UNKNOWN'
        """
        if code <= 0 or code > FALLBACK_CODE:
            LOGGER.debug("level code %d not in (0,%d], using UNKNOWN", code, FALLBACK_CODE)
            code = FALLBACK_CODE
        record = self._slots[code]
        if record is None:
            LOGGER.debug("level code %d is not defined, using UNKNOWN", code)
            record = self._slots[FALLBACK_CODE]
            if record is None:
                raise MissingFallbackSlotError(FALLBACK_CODE)
        return record

    def codes(self) -> list[int]:
        """Return the populated codes in ascending order."""

        return [record.code for record in self]

    def profile(self) -> list[str]:
        """Return one ``NAME = code, LOG_PRIORITY`` line per populated slot."""

        return [f"{record.name_upper} = {record.code}, {record.syslog_priority.config_name}" for record in self]

    def to_dict(self) -> dict[int, dict[str, object]]:
        """Serialize populated slots keyed by code."""

        return {record.code: record.to_dict() for record in self}

    def __iter__(self) -> Iterator[LevelRecord]:
        """Iterate over populated records in ascending code order."""
        return (record for record in self._slots if record is not None)

    def __len__(self) -> int:
        return sum(1 for record in self._slots if record is not None)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, int) and self.get(code) is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(codes={self.codes()!r})"


def build_registry(
    lines: Sequence[str] = (),
    *,
    include_defaults: bool = True,
    require_fallback: bool = True,
) -> LevelRegistry:
    """Build a :class:`LevelRegistry` from definition lines.

    Defaults are applied first, then ``lines`` in order with last-write-wins
    per code. Construction is all-or-nothing: the first invalid line raises
    :class:`InvalidLevelError` and nothing is returned.

    Examples
    --------
    >>> registry = build_registry(["TRACE = 10, LOG_DEBUG"])
    >>> registry.lookup_by_name("trace"), registry.lookup_by_code(10).name_lower
    (10, 'trace')
    """
    return LevelRegistry.from_lines(lines, include_defaults=include_defaults, require_fallback=require_fallback)


__all__ = ["DEFAULT_LEVEL_LINES", "FALLBACK_CODE", "LevelRegistry", "build_registry"]
