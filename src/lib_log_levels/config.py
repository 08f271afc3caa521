"""Configuration helpers: ``.env`` loading and environment-backed settings.

Purpose
-------
Resolve where level definitions come from and how the registry is seeded,
letting explicit arguments win over environment variables, which in turn win
over ``.env`` entries.

Contents
--------
* :func:`enable_dotenv` - load the nearest ``.env`` without overriding the
  environment.
* :class:`LevelSettings` / :func:`load_settings` - resolved settings.

Environment
-----------
``LOG_LEVELS_USE_DOTENV``
    Truthy value makes the CLI load ``.env`` unless ``--no-use-dotenv``.
``LOG_LEVELS_FILE``
    Path to a level definition file (plain or with a ``[levels]`` section).
``LOG_LEVELS_DEFAULTS``
    Seed the default level set (default on).
``LOG_LEVELS_REQUIRE_FALLBACK``
    Reject registries without the UNKNOWN slot 254 (default on).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

LOGGER = logging.getLogger(__name__)

DOTENV_ENV_VAR = "LOG_LEVELS_USE_DOTENV"
LEVELS_FILE_ENV_VAR = "LOG_LEVELS_FILE"
DEFAULTS_ENV_VAR = "LOG_LEVELS_DEFAULTS"
REQUIRE_FALLBACK_ENV_VAR = "LOG_LEVELS_REQUIRE_FALLBACK"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

_DOTENV_LOADED: Path | None = None


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` file walking upwards from ``search_from``.

    Existing environment variables keep precedence. The first successful load
    is remembered; later calls return the same path without reloading.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED is not None:
        return _DOTENV_LOADED
    start = (search_from or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            load_dotenv(candidate, override=False)
            _DOTENV_LOADED = candidate.resolve()
            LOGGER.debug("loaded environment from %s", _DOTENV_LOADED)
            return _DOTENV_LOADED
    return None


def _reset_dotenv_state_for_testing() -> None:
    """Forget which ``.env`` file was loaded."""
    global _DOTENV_LOADED
    _DOTENV_LOADED = None


def env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Raises
    ------
    ValueError
        When the variable holds something other than a recognised flag.

    Examples
    --------
    >>> import os
    >>> _ = os.environ.pop('LOG_LEVELS_EXAMPLE_BOOL', None)
    >>> env_bool('LOG_LEVELS_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_LEVELS_EXAMPLE_BOOL'] = 'off'
    >>> env_bool('LOG_LEVELS_EXAMPLE_BOOL', default=True)
    False
    >>> del os.environ['LOG_LEVELS_EXAMPLE_BOOL']
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    raise ValueError(f"{name} must be one of {sorted(_TRUTHY | _FALSY)}, got {value!r}")


@dataclass(slots=True, frozen=True)
class LevelSettings:
    """Resolved inputs for building a level registry."""

    levels_file: Path | None = None
    include_defaults: bool = True
    require_fallback: bool = True


def load_settings(
    *,
    levels_file: Path | str | None = None,
    include_defaults: bool | None = None,
    require_fallback: bool | None = None,
) -> LevelSettings:
    """Merge explicit arguments with environment variables.

    ``None`` arguments fall back to the matching ``LOG_LEVELS_*`` variable and
    then to the :class:`LevelSettings` defaults.
    """
    if levels_file is None:
        env_file = os.getenv(LEVELS_FILE_ENV_VAR, "").strip()
        levels_file = env_file or None
    if include_defaults is None:
        include_defaults = env_bool(DEFAULTS_ENV_VAR, default=True)
    if require_fallback is None:
        require_fallback = env_bool(REQUIRE_FALLBACK_ENV_VAR, default=True)
    return LevelSettings(
        levels_file=Path(levels_file) if levels_file is not None else None,
        include_defaults=include_defaults,
        require_fallback=require_fallback,
    )


__all__ = [
    "DEFAULTS_ENV_VAR",
    "DOTENV_ENV_VAR",
    "LEVELS_FILE_ENV_VAR",
    "LevelSettings",
    "REQUIRE_FALLBACK_ENV_VAR",
    "enable_dotenv",
    "env_bool",
    "load_settings",
]
