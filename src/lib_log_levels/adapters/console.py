"""Rich-powered rendering of a level registry for terminals.

Purpose
-------
Show operators which levels are active, their codes, and where they land in
syslog, using the same Rich console stack as the rest of the tooling.

Contents
--------
* :data:`_PRIORITY_STYLES` - default Rich style per syslog priority.
* :class:`RichLevelTable` - renders registries and single records.
"""

from __future__ import annotations

from typing import Mapping

from rich.console import Console
from rich.table import Table

from lib_log_levels.domain.levels import LevelRecord, SyslogPriority
from lib_log_levels.domain.registry import FALLBACK_CODE, LevelRegistry

_PRIORITY_STYLES: Mapping[SyslogPriority, str] = {
    SyslogPriority.EMERG: "bold white on red3",
    SyslogPriority.ALERT: "bold red",
    SyslogPriority.CRIT: "bold red",
    SyslogPriority.ERR: "red",
    SyslogPriority.WARNING: "yellow",
    SyslogPriority.NOTICE: "bright_white",
    SyslogPriority.INFO: "cyan",
    SyslogPriority.DEBUG: "dim",
}

#: Rich styles keyed by syslog priority.


class RichLevelTable:
    """Print registries as Rich tables and records as single lines."""

    def __init__(self, *, console: Console | None = None, force_color: bool = False, no_color: bool = False) -> None:
        self._console = console if console is not None else Console(force_terminal=force_color, no_color=no_color)
        self._no_color = no_color

    def build_table(self, registry: LevelRegistry) -> Table:
        """Return a :class:`rich.table.Table` listing every populated slot."""

        table = Table(title="Log levels")
        table.add_column("Code", justify="right")
        table.add_column("Name")
        table.add_column("Syslog")
        for record in registry:
            style = "" if self._no_color else _PRIORITY_STYLES[record.syslog_priority]
            name = f"{record.name_upper} (fallback)" if record.code == FALLBACK_CODE else record.name_upper
            table.add_row(str(record.code), name, record.syslog_priority.config_name, style=style)
        return table

    def render(self, registry: LevelRegistry) -> None:
        """Print ``registry`` as a table.

        Examples
        --------
        >>> from io import StringIO
        >>> from lib_log_levels.domain.registry import build_registry
        >>> console = Console(file=StringIO(), record=True, width=80)
        >>> RichLevelTable(console=console).render(build_registry())
        >>> "UNKNOWN (fallback)" in console.export_text()
        True
        """
        self._console.print(self.build_table(registry))

    def render_record(self, record: LevelRecord) -> None:
        """Print one record as ``NAME = code, LOG_PRIORITY``."""

        style = "" if self._no_color else _PRIORITY_STYLES[record.syslog_priority]
        self._console.print(
            f"{record.name_upper} = {record.code}, {record.syslog_priority.config_name}",
            style=style,
            highlight=False,
        )


__all__ = ["RichLevelTable"]
