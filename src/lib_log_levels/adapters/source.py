"""Level sources reading definition lines from text or files.

Purpose
-------
Turn configuration text into the clean line sequence the registry expects:
blank lines and ``#`` comments removed, definition order preserved.

Contents
--------
* :func:`extract_level_lines` - strip comments and select the levels section.
* :class:`TextLevelSource` - in-memory source, handy for tests and env payloads.
* :class:`FileLevelSource` - re-reads a file on every ``read_lines`` call.

System Role
-----------
Concrete :class:`LevelSourcePort` implementations used by the CLI and by
:func:`lib_log_levels.runtime.reload`.

Alignment Notes
---------------
Files may be plain lists of definitions or sectioned configuration files; in
the latter case only the ``[levels]`` section is read.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from lib_log_levels.application.ports.source import LevelSourcePort

DEFAULT_SECTION = "levels"

_SECTION_RE = re.compile(r"^\[\s*(?P<name>[^\]]+?)\s*\]$")


def extract_level_lines(text: str | Iterable[str], *, section: str = DEFAULT_SECTION) -> list[str]:
    """Return the level definitions contained in ``text``.

    Text without any ``[section]`` header is taken as a whole. Otherwise only
    the lines below the ``section`` header, up to the next header, are kept.

    Examples
    --------
    >>> extract_level_lines("# levels\\nTRACE = 10\\n\\nAUDIT = 90, LOG_NOTICE\\n")
    ['TRACE = 10', 'AUDIT = 90, LOG_NOTICE']
    >>> extract_level_lines("[global]\\nstrict = true\\n[levels]\\nTRACE = 10\\n[rules]\\n*.* >stdout")
    ['TRACE = 10']
    """
    raw_lines = text.splitlines() if isinstance(text, str) else list(text)
    wanted = section.strip().lower()
    sectioned = False
    inside = True
    lines: list[str] = []
    for raw in raw_lines:
        stripped = raw.strip()
        if not stripped or stripped.startswith("#"):
            continue
        header = _SECTION_RE.match(stripped)
        if header is not None:
            if not sectioned:
                sectioned = True
                lines.clear()
            inside = header.group("name").lower() == wanted
            continue
        if inside:
            lines.append(stripped)
    return lines


class TextLevelSource(LevelSourcePort):
    """Serve level definitions parsed once from a string."""

    def __init__(self, text: str, *, section: str = DEFAULT_SECTION) -> None:
        self._lines = tuple(extract_level_lines(text, section=section))

    def read_lines(self) -> list[str]:
        return list(self._lines)


class FileLevelSource(LevelSourcePort):
    """Serve level definitions from a UTF-8 file, read fresh on every call."""

    def __init__(self, path: Path | str, *, section: str = DEFAULT_SECTION) -> None:
        self._path = Path(path)
        self._section = section

    @property
    def path(self) -> Path:
        """Return the file the source reads from."""

        return self._path

    def read_lines(self) -> list[str]:
        """Read and filter the file; ``OSError`` and ``UnicodeDecodeError`` propagate."""
        text = self._path.read_text(encoding="utf-8")
        return extract_level_lines(text, section=self._section)


__all__ = ["DEFAULT_SECTION", "FileLevelSource", "TextLevelSource", "extract_level_lines"]
