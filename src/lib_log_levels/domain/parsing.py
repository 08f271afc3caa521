"""Parser for ``NAME = CODE [, SYSLOG_NAME]`` level definition lines."""

from __future__ import annotations

import logging
import re
from dataclasses import replace

from .errors import LevelParseError, MalformedLineError
from .levels import LevelRecord, SyslogPriority

LOGGER = logging.getLogger(__name__)

_LINE_RE = re.compile(
    r"""
    ^\s*
    (?P<name>[^=\s]*)
    \s*=\s*
    (?P<code>[+-]?\d+)
    \s*
    (?:,\s*(?P<syslog>\S*))?
    \s*$
    """,
    re.VERBOSE | re.ASCII,
)


def parse_level_line(line: str) -> LevelRecord:
    """Parse one level definition into a :class:`LevelRecord`.

    Parameters
    ----------
    line:
        Definition such as ``"TRACE = 10, LOG_ERR"``. Whitespace around tokens
        is free; the syslog part is optional and defaults to ``LOG_DEBUG``.

    Returns
    -------
    LevelRecord
        Validated record; nothing is returned on failure.

    Raises
    ------
    MalformedLineError
        When the ``NAME = CODE`` pair cannot be extracted.
    CodeOutOfRangeError, EmptyNameError, NameTooLongError, UnknownSyslogNameError
        When a token fails validation.

    Examples
    --------
    >>> parse_level_line("TRACE = 10, LOG_ERR").describe()
    'level[10,TRACE,trace,5,3]'
    >>> parse_level_line("  notice=60  ").syslog_priority.name
    'DEBUG'
    """
    match = _LINE_RE.match(line)
    if match is None:
        raise MalformedLineError(f"level definition {line!r} is not 'NAME = CODE [, SYSLOG_NAME]'", line=line)

    syslog_token = match.group("syslog")
    try:
        record = LevelRecord(match.group("name"), int(match.group("code")))
        if syslog_token:
            record = replace(record, syslog_priority=SyslogPriority.from_config_name(syslog_token))
    except LevelParseError as exc:
        exc.line = line
        raise

    LOGGER.debug("parsed %s from %r", record.describe(), line)
    return record


__all__ = ["parse_level_line"]
