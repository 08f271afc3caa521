"""Level records and syslog priorities.

Purpose
-------
Represent one configured severity level as an immutable value: its numeric
code, its name in both cases, and the syslog priority used when records are
forwarded to a system log sink.

Contents
--------
* :class:`SyslogPriority` enum with the eight POSIX syslog priorities.
* :class:`LevelRecord` frozen dataclass validated on construction.
* Constants :data:`MIN_LEVEL_CODE`, :data:`MAX_LEVEL_CODE`,
  :data:`MAX_LEVEL_NAME_LENGTH`.

System Role
-----------
Leaf of the domain layer. Records are produced by
:func:`lib_log_levels.domain.parsing.parse_level_line`, owned by
:class:`lib_log_levels.domain.registry.LevelRegistry`, and shared read-only
with formatters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

from .errors import CodeOutOfRangeError, EmptyNameError, NameTooLongError, UnknownSyslogNameError

MIN_LEVEL_CODE = 0
MAX_LEVEL_CODE = 255
MAX_LEVEL_NAME_LENGTH = 1024
#: Names must stay strictly shorter than this; reaching it counts as overflow.


class SyslogPriority(IntEnum):
    """Syslog priorities a level maps to, numbered as in ``<syslog.h>``."""

    EMERG = 0
    ALERT = 1
    CRIT = 2
    ERR = 3
    WARNING = 4
    NOTICE = 5
    INFO = 6
    DEBUG = 7

    @property
    def config_name(self) -> str:
        """Return the ``LOG_*`` spelling used in level definition lines."""

        return f"LOG_{self.name}"

    @classmethod
    def from_config_name(cls, text: str) -> "SyslogPriority":
        """Resolve a ``LOG_*`` token case-insensitively.

        Examples
        --------
        >>> SyslogPriority.from_config_name("log_warning")
        <SyslogPriority.WARNING: 4>
        """
        normalized = text.strip().upper()
        if normalized.startswith("LOG_"):
            try:
                return cls[normalized[4:]]
            except KeyError:
                pass
        raise UnknownSyslogNameError(f"unknown syslog priority: {text!r}", syslog_name=text)


@dataclass(slots=True, frozen=True)
class LevelRecord:
    """Immutable severity level owned by a registry.

    Attributes
    ----------
    name:
        Level name as written in the definition.
    code:
        Numeric code in ``[0, 255]``; also the registry slot index.
    syslog_priority:
        Priority used when forwarding to syslog, ``DEBUG`` unless given.
    name_upper / name_lower:
        Case-folded forms of ``name``, derived on construction.
    name_len:
        Cached length of ``name``.
    """

    name: str
    code: int
    syslog_priority: SyslogPriority = SyslogPriority.DEBUG
    name_upper: str = field(init=False, repr=False)
    name_lower: str = field(init=False, repr=False)
    name_len: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if isinstance(self.code, bool) or not isinstance(self.code, int):
            raise TypeError(f"level code must be an int, got {type(self.code).__name__}")
        if not MIN_LEVEL_CODE <= self.code <= MAX_LEVEL_CODE:
            raise CodeOutOfRangeError(
                f"level code {self.code} not in [{MIN_LEVEL_CODE},{MAX_LEVEL_CODE}]",
                code=self.code,
            )
        if not self.name:
            raise EmptyNameError("level name must not be empty")
        if len(self.name) >= MAX_LEVEL_NAME_LENGTH:
            raise NameTooLongError(
                f"level name exceeds {MAX_LEVEL_NAME_LENGTH - 1} characters",
                name=self.name,
                limit=MAX_LEVEL_NAME_LENGTH,
            )
        object.__setattr__(self, "syslog_priority", SyslogPriority(self.syslog_priority))
        object.__setattr__(self, "name_upper", "".join(char.upper() for char in self.name))
        object.__setattr__(self, "name_lower", "".join(char.lower() for char in self.name))
        object.__setattr__(self, "name_len", len(self.name))

    def matches(self, name: str) -> bool:
        """Return ``True`` when ``name`` equals this level's name ignoring case.

        Characters are compared one by one, so case mappings that change the
        length (``"ß"`` to ``"SS"``) never match.

        Examples
        --------
        >>> LevelRecord("STRASSE", 10).matches("strasse")
        True
        >>> LevelRecord("STRASSE", 10).matches("straße")
        False
        """
        if len(name) != self.name_len:
            return False
        return all(
            ours == theirs or ours.upper() == theirs.upper() or ours.lower() == theirs.lower()
            for ours, theirs in zip(self.name, name)
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize the record for structured payloads."""

        return {
            "code": self.code,
            "name": self.name_upper,
            "name_lower": self.name_lower,
            "syslog_priority": self.syslog_priority.config_name,
        }

    def describe(self) -> str:
        """Return a one-line profile of the record.

        Examples
        --------
        >>> LevelRecord("trace", 10, SyslogPriority.ERR).describe()
        'level[10,TRACE,trace,5,3]'
        """
        return f"level[{self.code},{self.name_upper},{self.name_lower},{self.name_len},{int(self.syslog_priority)}]"


__all__ = [
    "MAX_LEVEL_CODE",
    "MAX_LEVEL_NAME_LENGTH",
    "MIN_LEVEL_CODE",
    "LevelRecord",
    "SyslogPriority",
]
