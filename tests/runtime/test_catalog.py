from __future__ import annotations

import logging
import threading

import pytest

from lib_log_levels.application.ports import LevelTablePort
from lib_log_levels.domain.errors import InvalidLevelError, LevelNotFoundError, MissingFallbackSlotError
from lib_log_levels.domain.levels import SyslogPriority
from lib_log_levels.runtime import LevelCatalog


def test_catalog_satisfies_table_port() -> None:
    assert isinstance(LevelCatalog(), LevelTablePort)


def test_catalog_starts_with_defaults_and_caller_lines() -> None:
    catalog = LevelCatalog(["TRACE = 10, LOG_DEBUG"])

    assert catalog.lookup_by_name("trace") == 10
    assert catalog.lookup_by_name("fatal") == 120
    assert catalog.lookup_by_code(10).name_upper == "TRACE"


def test_reset_publishes_a_new_registry() -> None:
    catalog = LevelCatalog()
    before = catalog.registry

    after = catalog.reset(["AUDIT = 90, LOG_NOTICE"])

    assert catalog.registry is after
    assert after is not before
    assert catalog.lookup_by_name("audit") == 90
    with pytest.raises(LevelNotFoundError):
        before.lookup_by_name("audit")


def test_failed_reset_keeps_previous_registry_intact(caplog: pytest.LogCaptureFixture) -> None:
    catalog = LevelCatalog(["TRACE = 10"])
    live = catalog.registry
    snapshot = live.to_dict()

    with caplog.at_level(logging.ERROR, logger="lib_log_levels.runtime._catalog"):
        with pytest.raises(InvalidLevelError):
            catalog.reset(["AUDIT = 90", "BROKEN = 300"])

    assert catalog.registry is live
    assert catalog.registry.to_dict() == snapshot
    assert catalog.lookup_by_name("trace") == 10
    assert catalog.lookup_by_code(300).name_upper == "UNKNOWN"
    with pytest.raises(LevelNotFoundError):
        catalog.lookup_by_name("audit")
    assert any("level reset failed" in message for message in caplog.messages)


def test_reset_without_defaults_requires_fallback() -> None:
    catalog = LevelCatalog()
    live = catalog.registry

    with pytest.raises(MissingFallbackSlotError):
        catalog.reset(["DEBUG = 20"], include_defaults=False)
    assert catalog.registry is live


def test_catalog_without_fallback_requirement_defers_to_lookup() -> None:
    catalog = LevelCatalog(["DEBUG = 20"], include_defaults=False, require_fallback=False)

    assert catalog.lookup_by_code(20).name_upper == "DEBUG"
    with pytest.raises(MissingFallbackSlotError):
        catalog.lookup_by_code(21)


def test_invalid_initial_lines_raise() -> None:
    with pytest.raises(InvalidLevelError):
        LevelCatalog(["NOPE"])


def test_define_adds_a_single_level() -> None:
    catalog = LevelCatalog()
    before = catalog.registry

    record = catalog.define("AUDIT = 90, LOG_NOTICE")

    assert record.code == 90
    assert record.syslog_priority is SyslogPriority.NOTICE
    assert catalog.lookup_by_code(90) is record
    assert before.get(90) is None


def test_define_replaces_existing_code() -> None:
    catalog = LevelCatalog()
    catalog.define("VERBOSE = 20, LOG_INFO")
    assert catalog.lookup_by_code(20).name_upper == "VERBOSE"


def test_define_rejects_invalid_line_without_publishing() -> None:
    catalog = LevelCatalog()
    live = catalog.registry

    with pytest.raises(InvalidLevelError) as excinfo:
        catalog.define("AUDIT = 900")

    assert excinfo.value.line == "AUDIT = 900"
    assert catalog.registry is live


def test_readers_never_observe_partial_tables() -> None:
    catalog = LevelCatalog()
    definitions = [f"LEVEL{code} = {code}, LOG_INFO" for code in range(130, 200)]
    stop = threading.Event()
    failures: list[str] = []

    def reader() -> None:
        while not stop.is_set():
            registry = catalog.registry
            size = len(registry)
            if size not in (9, 9 + len(definitions)):
                failures.append(f"partial table with {size} levels")
            if registry.lookup_by_code(500).name_upper != "UNKNOWN":
                failures.append("fallback missing")

    threads = [threading.Thread(target=reader) for _ in range(4)]
    for thread in threads:
        thread.start()
    try:
        for _ in range(20):
            catalog.reset(definitions)
            catalog.reset()
    finally:
        stop.set()
        for thread in threads:
            thread.join()

    assert failures == []
