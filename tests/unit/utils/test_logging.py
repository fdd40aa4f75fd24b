"""Test structlog configuration."""
import json
import pytest
import structlog
from intl_datetime.duration.cldr import CldrDurationFormatter
from intl_datetime.international.duration import format_duration
from intl_datetime.utils.logging import get_logger, setup_logging
from tests.factories import utc


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestSetupLogging:
    def test_json_output(self, capsys):
        setup_logging("INFO")
        get_logger("test").warning("duration_format_failed", formatter="cldr")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        event = json.loads(line)
        assert event["event"] == "duration_format_failed"
        assert event["level"] == "warning"
        assert event["formatter"] == "cldr"

    def test_level_filtering(self, capsys):
        setup_logging("ERROR")
        get_logger("test").warning("ignored")
        assert capsys.readouterr().out == ""

    def test_level_from_settings(self, monkeypatch, capsys):
        monkeypatch.setenv("INTL_DATETIME_LOG_LEVEL", "WARNING")
        setup_logging()
        get_logger("test").info("ignored")
        assert capsys.readouterr().out == ""

    def test_console_renderer(self, capsys):
        setup_logging("INFO", log_format="console")
        get_logger("test").info("duration_formatter_selected")
        assert "duration_formatter_selected" in capsys.readouterr().out

    def test_failover_warning_logged(self, capsys, monkeypatch):
        def broken(self, duration, locale, options):
            raise RuntimeError("unit data missing")

        setup_logging("WARNING")
        monkeypatch.setattr(CldrDurationFormatter, "format", broken)
        assert format_duration(utc(2024, 1, 1), utc(2024, 1, 1, 0, 0, 5), "en-US") == "5 seconds"

        event = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert event["event"] == "duration_format_failed"
        assert event["error"] == "unit data missing"
