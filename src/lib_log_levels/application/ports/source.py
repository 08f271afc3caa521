"""Port for configuration loaders supplying level definition lines.

Purpose
-------
Decouple the application layer from where level definitions come from (a
config file section, an environment payload, a test fixture).

Contents
--------
* :class:`LevelSourcePort` - runtime-checkable protocol with ``read_lines``.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class LevelSourcePort(Protocol):
    """Provide raw level definitions, comments already stripped, in order."""

    def read_lines(self) -> Sequence[str]:
        """Return the current definition lines."""


__all__ = ["LevelSourcePort"]
