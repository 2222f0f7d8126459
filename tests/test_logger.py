import asyncio
import json
import logging
import os

import pytest

from shared.config import GlobalConfig, SafePassConfig
from shared.logger import SafePassLogger, configure_logging

from safepass.collectors import wordlist
from safepass.core.engine import SafePassEngine
from safepass.generators import password as generator


def test_json_file_records(tmp_path):
    log_file = tmp_path / "logs" / "safepass.log"
    log = SafePassLogger("unit", log_level="DEBUG", log_file=log_file, json_logs=True, console_output=False)

    with log.operation("load"):
        log.warning("Wordlist %s unavailable", "1m", path="/tmp/x.json")
    log.info("done")

    lines = log_file.read_text(encoding="utf-8").splitlines()
    first, second = (json.loads(line) for line in lines)
    assert first["level"] == "WARNING"
    assert first["logger"] == "safepass.unit"
    assert first["message"] == "Wordlist 1m unavailable"
    assert first["component"] == "unit"
    assert first["operation"] == "load"
    assert first["context"] == {"path": "/tmp/x.json"}
    assert "operation" not in second


def test_level_filtering(tmp_path):
    log_file = tmp_path / "safepass.log"
    log = SafePassLogger("quiet", log_level="ERROR", log_file=log_file, console_output=False)
    log.warning("ignored")
    log.error("kept")
    content = log_file.read_text(encoding="utf-8")
    assert "kept" in content
    assert "ignored" not in content


def test_reinstantiation_does_not_stack_handlers():
    SafePassLogger("repeat")
    log = SafePassLogger("repeat")
    assert len(log.underlying.handlers) == 1


def test_timed_measures_elapsed():
    log = SafePassLogger("timer", console_output=False)
    with log.timed("work") as timer:
        pass
    assert timer.elapsed >= 0


def test_unknown_level_falls_back_to_warning():
    log = SafePassLogger("fallback", log_level="LOUD", console_output=False)
    assert log.underlying.level == logging.WARNING


async def test_operation_scope_is_local_to_each_task():
    log = SafePassLogger("tasks", console_output=False)
    seen = {}

    async def scoped(name):
        with log.operation(name):
            await asyncio.sleep(0)
            seen[name] = log.current_operation

    await asyncio.gather(scoped("first"), scoped("second"))

    assert seen == {"first": "first", "second": "second"}
    assert log.current_operation is None


@pytest.fixture
def restore_logging():
    yield
    configure_logging(GlobalConfig())


async def test_global_settings_reach_every_component(tmp_path, restore_logging):
    log_file = tmp_path / "logs" / "safepass.log"
    config = SafePassConfig()
    config.global_settings.log_level = "DEBUG"
    config.global_settings.log_file = str(log_file)
    config.global_settings.log_json = True
    config.wordlist.data_dir = str(tmp_path / "no-lists")

    engine = SafePassEngine(config)

    for component in (engine.logger, wordlist._log, generator._log):
        assert component.underlying.level == logging.DEBUG
        assert any(
            getattr(handler, "baseFilename", None) == os.path.abspath(log_file)
            for handler in component.underlying.handlers
        )

    assert await engine.check_common("password", "10k") is False
    engine.generate(length=12)

    records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    components = {record["component"] for record in records}
    assert {"wordlist", "generator"} <= components
    warning = next(r for r in records if r["component"] == "wordlist" and r["level"] == "WARNING")
    assert warning["operation"] == "load"


def test_debug_flag_overrides_level(restore_logging):
    configure_logging(GlobalConfig(log_level="ERROR", debug=True))
    assert wordlist._log.underlying.level == logging.DEBUG
    assert generator._log.underlying.level == logging.DEBUG
