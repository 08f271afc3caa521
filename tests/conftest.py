from __future__ import annotations

from typing import Iterator

import pytest

from lib_log_levels import config as level_config
from lib_log_levels import runtime
from lib_log_levels.domain.registry import LevelRegistry, build_registry


@pytest.fixture
def default_registry() -> LevelRegistry:
    return build_registry()


@pytest.fixture(autouse=True)
def _reset_process_state() -> Iterator[None]:
    """Leave no process-wide catalog or dotenv memo behind."""

    runtime.shutdown()
    level_config._reset_dotenv_state_for_testing()
    yield
    runtime.shutdown()
    level_config._reset_dotenv_state_for_testing()
