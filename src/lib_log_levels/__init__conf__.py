"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

from typing import Callable

name = "lib_log_levels"
title = "Configurable log level registry with syslog priorities"
version = "0.1.0"
shell_command = "lib_log_levels"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Write the metadata banner through ``writer`` (defaults to ``print``).

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_log_levels:\\n\\n'
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    banner = [f"Info for {name}:\n\n"]
    banner.extend(f"    {label.ljust(pad)} = {value}\n" for label, value in fields)
    emit = writer if writer is not None else (lambda text: print(text, end=""))
    for line in banner:
        emit(line)


__all__ = ["print_info"]
