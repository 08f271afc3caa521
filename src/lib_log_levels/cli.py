"""Command line interface for inspecting level registries.

Purpose
-------
Let operators check a level definition file before deploying it: list the
resulting table, resolve names to codes, and see which record a code is
emitted under.

Contents
--------
* :func:`cli` - rich-click group holding the global options.
* ``info``, ``list``, ``lookup``, ``resolve`` subcommands.
* :func:`main` - entry point delegating exit-code handling to
  :mod:`lib_cli_exit_tools`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import lib_cli_exit_tools
import rich_click as click

from . import __init__conf__
from . import config as level_config
from .adapters.console import RichLevelTable
from .domain.errors import LevelError
from .lib_log_levels import build_catalog, summary_info
from .runtime import LevelCatalog

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _catalog_from_context(ctx: click.Context) -> LevelCatalog:
    """Build the catalog for the settings captured by the group callback."""
    try:
        return build_catalog(ctx.obj["settings"])
    except (LevelError, OSError, UnicodeDecodeError) as exc:
        raise click.ClickException(str(exc)) from exc


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(version=__init__conf__.version, prog_name=__init__conf__.shell_command, message="%(version)s")
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python tracebacks on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load the nearest .env before reading settings (default from {level_config.DOTENV_ENV_VAR}).",
)
@click.option(
    "--levels-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Level definition file; overrides LOG_LEVELS_FILE.",
)
@click.option(
    "--defaults/--no-defaults",
    default=None,
    help="Seed the default level set before the file's definitions.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    traceback: bool,
    use_dotenv: bool | None,
    levels_file: Path | None,
    defaults: bool | None,
) -> None:
    """Inspect configurable log levels and their syslog priorities."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    if use_dotenv is None:
        use_dotenv = level_config.env_bool(level_config.DOTENV_ENV_VAR, default=False)
    if use_dotenv:
        level_config.enable_dotenv()

    ctx.ensure_object(dict)
    ctx.obj["settings"] = level_config.load_settings(levels_file=levels_file, include_defaults=defaults)

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)


@cli.command("list", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--no-color", is_flag=True, default=False, help="Render the table without colours.")
@click.pass_context
def cli_list(ctx: click.Context, no_color: bool) -> None:
    """Show every defined level as a table."""

    catalog = _catalog_from_context(ctx)
    RichLevelTable(no_color=no_color).render(catalog.registry)


@cli.command("lookup", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@click.pass_context
def cli_lookup(ctx: click.Context, name: str) -> None:
    """Print the numeric code configured for NAME."""

    catalog = _catalog_from_context(ctx)
    try:
        code = catalog.lookup_by_name(name)
    except LevelError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(code)


@cli.command("resolve", context_settings={**CLICK_CONTEXT_SETTINGS, "ignore_unknown_options": True})
@click.argument("code", type=int)
@click.option("--no-color", is_flag=True, default=False, help="Print without colours.")
@click.pass_context
def cli_resolve(ctx: click.Context, code: int, no_color: bool) -> None:
    """Print the level a record with CODE is emitted under."""

    catalog = _catalog_from_context(ctx)
    try:
        record = catalog.lookup_by_code(code)
    except LevelError as exc:
        raise click.ClickException(str(exc)) from exc
    RichLevelTable(no_color=no_color).render_record(record)


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    unless ``restore_traceback`` is ``False``.
    """
    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main"]
