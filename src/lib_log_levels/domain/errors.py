"""Error taxonomy for level parsing, registry construction, and lookups.

Purpose
-------
Give callers typed failures they can catch at the right granularity: a config
loader rejects one malformed definition, a runtime refuses to start without a
fallback slot, a logger factory reacts to an unknown level name.

Contents
--------
* :class:`LevelParseError` and its five single-line parse failures.
* :class:`RegistryError` with :class:`InvalidLevelError` and
  :class:`MissingFallbackSlotError`.
* :class:`LevelLookupError` with :class:`EmptyQueryError` and
  :class:`LevelNotFoundError`.

System Role
-----------
Shared by every layer; adapters and the CLI only ever catch these types.
"""

from __future__ import annotations


class LevelError(Exception):
    """Base class for every error raised by the level registry."""


class LevelParseError(LevelError, ValueError):
    """A single level definition line could not be turned into a record."""

    def __init__(self, message: str, *, line: str | None = None) -> None:
        super().__init__(message)
        self.line = line


class MalformedLineError(LevelParseError):
    """The ``NAME = CODE`` pair could not be extracted from the line."""


class EmptyNameError(LevelParseError):
    """The level name is empty."""


class NameTooLongError(LevelParseError):
    """The level name reaches the maximum name length."""

    def __init__(self, message: str, *, name: str, limit: int, line: str | None = None) -> None:
        super().__init__(message, line=line)
        self.name = name
        self.limit = limit


class CodeOutOfRangeError(LevelParseError):
    """The numeric level code lies outside ``[0, 255]``."""

    def __init__(self, message: str, *, code: int, line: str | None = None) -> None:
        super().__init__(message, line=line)
        self.code = code


class UnknownSyslogNameError(LevelParseError):
    """The syslog token is not one of the eight ``LOG_*`` priorities."""

    def __init__(self, message: str, *, syslog_name: str, line: str | None = None) -> None:
        super().__init__(message, line=line)
        self.syslog_name = syslog_name


class RegistryError(LevelError):
    """Registry construction or fallback resolution failed."""


class InvalidLevelError(RegistryError, ValueError):
    """A definition line aborted registry construction.

    Attributes
    ----------
    line:
        The offending configuration line as supplied by the caller.
    cause:
        The :class:`LevelParseError` raised for ``line``.
    """

    def __init__(self, line: str, cause: LevelParseError) -> None:
        super().__init__(f"invalid level definition {line!r}: {cause}")
        self.line = line
        self.cause = cause


class MissingFallbackSlotError(RegistryError, RuntimeError):
    """The UNKNOWN fallback slot is unpopulated."""

    def __init__(self, code: int) -> None:
        super().__init__(f"fallback level slot {code} is not populated")
        self.code = code


class LevelLookupError(LevelError, LookupError):
    """A name lookup did not resolve to a level code."""

    def __init__(self, message: str, *, query: str | None) -> None:
        super().__init__(message)
        self.query = query


class EmptyQueryError(LevelLookupError):
    """The level name to look up is ``None`` or empty."""


class LevelNotFoundError(LevelLookupError, KeyError):
    """No populated slot carries the requested name."""

    def __str__(self) -> str:
        # KeyError would otherwise quote the message
        return str(self.args[0])


__all__ = [
    "CodeOutOfRangeError",
    "EmptyNameError",
    "EmptyQueryError",
    "InvalidLevelError",
    "LevelError",
    "LevelLookupError",
    "LevelNotFoundError",
    "LevelParseError",
    "MalformedLineError",
    "MissingFallbackSlotError",
    "NameTooLongError",
    "RegistryError",
    "UnknownSyslogNameError",
]
