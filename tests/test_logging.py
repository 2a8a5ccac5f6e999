"""
Tests for the logging module.

Tests verify:
- JSON output carries ECS field names and the service name
- DEBUG logs are suppressed at INFO level
- LogContext binds and unbinds project context
"""

import json

from sparc_init.logging import LogContext, bind_context, clear_context, configure_logging, get_logger


def _json_lines(err: str) -> list[dict]:
    return [json.loads(line) for line in err.splitlines() if line.strip()]


class TestJsonOutput:
    def test_ecs_fields(self, capsys):
        configure_logging(level="INFO", json_format=True)
        get_logger("test").info("scaffold_started", files=14)

        (entry,) = _json_lines(capsys.readouterr().err)
        assert entry["event"] == "scaffold_started"
        assert entry["files"] == 14
        assert entry["log.level"] == "info"
        assert "@timestamp" in entry
        assert entry["service.name"] == "sparc-init"

    def test_custom_service_name(self, capsys):
        configure_logging(level="INFO", json_format=True, service="sparc-ci")
        get_logger("test").warning("modes_file_missing")
        (entry,) = _json_lines(capsys.readouterr().err)
        assert entry["service.name"] == "sparc-ci"

    def test_stdout_untouched(self, capsys):
        configure_logging(level="INFO", json_format=True)
        get_logger("test").info("x")
        assert capsys.readouterr().out == ""


class TestLevels:
    def test_debug_suppressed_at_info(self, capsys):
        configure_logging(level="INFO", json_format=True)
        get_logger("test").debug("file_written")
        assert capsys.readouterr().err == ""

    def test_info_suppressed_at_warning(self, capsys):
        configure_logging(level="WARNING", json_format=True)
        logger = get_logger("test")
        logger.info("quiet")
        logger.warning("loud")
        entries = _json_lines(capsys.readouterr().err)
        assert [e["event"] for e in entries] == ["loud"]

    def test_console_renderer(self, capsys):
        configure_logging(level="DEBUG", json_format=False)
        get_logger("test").debug("file_written", path="README.md")
        err = capsys.readouterr().err
        assert "file_written" in err
        assert "README.md" in err


class TestContext:
    def test_log_context_scoped(self, capsys):
        configure_logging(level="INFO", json_format=True)
        logger = get_logger("test")
        with LogContext(project_id="demo"):
            logger.info("inside")
        logger.info("outside")

        inside, outside = _json_lines(capsys.readouterr().err)
        assert inside["project_id"] == "demo"
        assert "project_id" not in outside

    def test_clear_context(self, capsys):
        configure_logging(level="INFO", json_format=True)
        bind_context(run="abc")
        clear_context()
        get_logger("test").info("after_clear")
        (entry,) = _json_lines(capsys.readouterr().err)
        assert "run" not in entry
