"""Use case reloading level definitions at runtime.

Purpose
-------
Provide the glue between a configuration source and the live level table so
hosts can re-read their level section when configuration changes.

System Role
-----------
Invoked by :func:`lib_log_levels.runtime.reload` and by hosts wiring their own
:class:`LevelCatalog`. A failed reload leaves the previous table live.
"""

from __future__ import annotations

import logging
from typing import Callable

from lib_log_levels.application.ports.source import LevelSourcePort
from lib_log_levels.application.ports.table import LevelTablePort
from lib_log_levels.domain.registry import LevelRegistry

LOGGER = logging.getLogger(__name__)


def create_reload(
    *,
    table: LevelTablePort,
    source: LevelSourcePort,
    include_defaults: bool = True,
) -> Callable[[], LevelRegistry]:
    """Return a callable that rebuilds ``table`` from ``source``.

    Parameters
    ----------
    table:
        Live level table replaced atomically on success.
    source:
        Supplier of definition lines, consulted on every call.
    include_defaults:
        Seed the rebuilt table with the default levels.

    Returns
    -------
    Callable[[], LevelRegistry]
        Function returning the newly published registry.

    Examples
    --------
    >>> from lib_log_levels.runtime import LevelCatalog
    >>> class StaticSource:
    ...     def read_lines(self):
    ...         return ["TRACE = 10"]
    >>> catalog = LevelCatalog()
    >>> reload = create_reload(table=catalog, source=StaticSource())
    >>> reload().lookup_by_name("trace")
    10
    """

    def reload() -> LevelRegistry:
        """Read the source and publish the rebuilt registry."""
        lines = list(source.read_lines())
        LOGGER.debug("reloading %d level definitions", len(lines))
        return table.reset(lines, include_defaults=include_defaults)

    return reload


__all__ = ["create_reload"]
