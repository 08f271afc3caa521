"""CLI behaviour coverage for the rich-click command group."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner, Result

from lib_log_levels import __init__conf__
from lib_log_levels import cli as cli_mod
from lib_log_levels import config as level_config
from lib_log_levels.lib_log_levels import summary_info


def invoke(args: list[str], env: dict[str, str] | None = None) -> Result:
    return CliRunner().invoke(cli_mod.cli, args, env=env, prog_name=__init__conf__.shell_command)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        level_config.LEVELS_FILE_ENV_VAR,
        level_config.DEFAULTS_ENV_VAR,
        level_config.REQUIRE_FALLBACK_ENV_VAR,
        level_config.DOTENV_ENV_VAR,
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def levels_file(tmp_path: Path) -> Path:
    path = tmp_path / "levels.conf"
    path.write_text("[levels]\nTRACE = 10, LOG_DEBUG\nAUDIT = 90, LOG_NOTICE\n", encoding="utf-8")
    return path


def test_cli_without_subcommand_prints_summary() -> None:
    result = invoke([])

    assert result.exit_code == 0
    assert result.output == summary_info()


def test_cli_info_command_matches_summary() -> None:
    result = invoke(["info"])

    assert result.exit_code == 0
    assert result.output == summary_info()


def test_cli_version_flag() -> None:
    result = invoke(["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == __init__conf__.version


def test_cli_list_shows_default_levels() -> None:
    result = invoke(["list", "--no-color"])

    assert result.exit_code == 0
    for fragment in ("DEBUG", "WARN", "LOG_WARNING", "UNKNOWN (fallback)"):
        assert fragment in result.output


@pytest.mark.parametrize("name, code", [("debug", "20"), ("FATAL", "120"), ("*", "0")])
def test_cli_lookup_prints_code(name: str, code: str) -> None:
    result = invoke(["lookup", name])

    assert result.exit_code == 0
    assert result.output.strip() == code


def test_cli_lookup_unknown_name_fails() -> None:
    result = invoke(["lookup", "nope"])

    assert result.exit_code == 1
    assert "not defined" in result.output


@pytest.mark.parametrize(
    "args, expected",
    [
        (["resolve", "20"], "DEBUG = 20, LOG_DEBUG"),
        (["resolve", "300"], "UNKNOWN = 254, LOG_ERR"),
        (["resolve", "21"], "UNKNOWN = 254, LOG_ERR"),
        (["resolve", "--", "-5"], "UNKNOWN = 254, LOG_ERR"),
    ],
)
def test_cli_resolve_prints_emitted_level(args: list[str], expected: str) -> None:
    result = invoke(args)

    assert result.exit_code == 0
    assert result.output.strip() == expected


def test_cli_resolve_accepts_negative_code_without_separator() -> None:
    result = invoke(["resolve", "-5", "--no-color"])

    assert result.exit_code == 0
    assert result.output.strip() == "UNKNOWN = 254, LOG_ERR"


def test_cli_levels_file_adds_definitions(levels_file: Path) -> None:
    result = invoke(["--levels-file", str(levels_file), "lookup", "audit"])

    assert result.exit_code == 0
    assert result.output.strip() == "90"


def test_cli_levels_file_from_environment(levels_file: Path) -> None:
    result = invoke(["resolve", "10"], env={level_config.LEVELS_FILE_ENV_VAR: str(levels_file)})

    assert result.exit_code == 0
    assert result.output.strip() == "TRACE = 10, LOG_DEBUG"


def test_cli_invalid_levels_file_fails(tmp_path: Path) -> None:
    path = tmp_path / "broken.conf"
    path.write_text("TRACE = ten\n", encoding="utf-8")

    result = invoke(["--levels-file", str(path), "list"])

    assert result.exit_code == 1
    assert "invalid level definition" in result.output


def test_cli_undecodable_levels_file_fails_cleanly(tmp_path: Path) -> None:
    path = tmp_path / "binary.conf"
    path.write_bytes(b"TRACE = 10\n\xff\n")

    result = invoke(["--levels-file", str(path), "list"])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "utf-8" in result.output


def test_cli_no_defaults_requires_fallback(levels_file: Path) -> None:
    result = invoke(["--levels-file", str(levels_file), "--no-defaults", "lookup", "trace"])

    assert result.exit_code == 1
    assert "fallback level slot 254" in result.output


def test_cli_missing_levels_file_fails(tmp_path: Path) -> None:
    result = invoke(["--levels-file", str(tmp_path / "missing.conf"), "list"])

    assert result.exit_code == 1


def test_cli_no_traceback_option(monkeypatch: pytest.MonkeyPatch) -> None:
    """`--no-traceback` disables verbose tracebacks for subsequent commands."""

    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    result = invoke(["--no-traceback", "info"])

    assert result.exit_code == 0
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(level_config, "enable_dotenv", record_enable)

    assert invoke(["--use-dotenv", "info"]).exit_code == 0
    assert len(calls) == 1

    calls.clear()
    assert invoke(["info"], env={level_config.DOTENV_ENV_VAR: "1"}).exit_code == 0
    assert len(calls) == 1

    calls.clear()
    assert invoke(["--no-use-dotenv", "info"], env={level_config.DOTENV_ENV_VAR: "1"}).exit_code == 0
    assert calls == []

    assert invoke(["info"]).exit_code == 0
    assert calls == []


def test_main_restores_traceback_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    recorded: dict[str, object] = {}

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, *, prog_name: str | None = None, **_: object) -> int:
        result = CliRunner().invoke(command, argv or [])
        if result.exception is not None and not isinstance(result.exception, SystemExit):
            raise result.exception
        recorded["traceback"] = lib_cli_exit_tools.config.traceback
        recorded["prog_name"] = prog_name
        recorded["output"] = result.output
        return result.exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    exit_code = cli_mod.main(["--traceback", "lookup", "error"])

    assert exit_code == 0
    assert recorded["traceback"] is True
    assert recorded["prog_name"] == __init__conf__.shell_command
    assert str(recorded["output"]).strip() == "100"
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_main_consumes_sys_argv(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: dict[str, object] = {}

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, **_: object) -> int:
        seen["argv"] = argv
        return 0

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command, "info"], raising=False)

    assert cli_mod.main() == 0
    assert seen["argv"] is None
