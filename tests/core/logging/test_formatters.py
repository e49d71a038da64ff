"""Tests for JSON and console log formatters."""

import json
import logging
import sys
from pathlib import Path

import pytest

from core.logging.context import clear_log_context, set_log_context
from core.logging.formatters import ConsoleFormatter, JSONFormatter
from core.types import ErrorCategory


def _make_record(
    msg="test message",
    level=logging.INFO,
    name="test.logger",
    exc_info=None,
    **extras,
):
    record = logging.LogRecord(
        name=name,
        level=level,
        pathname="test.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:

    @pytest.fixture(autouse=True)
    def clear_context(self):
        clear_log_context()
        yield
        clear_log_context()

    def test_formats_basic_json_with_required_fields(self):
        formatter = JSONFormatter()
        output = json.loads(formatter.format(_make_record()))

        assert output["level"] == "INFO"
        assert output["logger"] == "test.logger"
        assert output["message"] == "test message"
        assert output["ts"].endswith("Z")

    def test_includes_pipeline_id_from_context(self):
        set_log_context(pipeline_id="main")
        output = json.loads(JSONFormatter().format(_make_record()))

        assert output["pipeline_id"] == "main"

    def test_extra_field_overrides_context(self):
        set_log_context(pipeline_id="from-context")
        output = json.loads(JSONFormatter().format(_make_record(pipeline_id="from-extra")))

        assert output["pipeline_id"] == "from-extra"

    def test_omits_empty_context_fields(self):
        output = json.loads(JSONFormatter().format(_make_record()))

        assert "pipeline_id" not in output
        assert "worker_id" not in output
        assert "trace_id" not in output

    def test_includes_file_location_for_debug(self):
        output = json.loads(JSONFormatter().format(_make_record(level=logging.DEBUG)))
        assert output["file"] == "test.py:42"

    def test_omits_file_location_for_info(self):
        output = json.loads(JSONFormatter().format(_make_record(level=logging.INFO)))
        assert "file" not in output

    def test_extracts_plugin_extra_fields(self):
        record = _make_record(
            plugin_name="field_reverser",
            source_field="message",
            batch_size=3,
            records_processed=2,
            records_skipped=1,
            plugin_names=["field_reverser"],
        )
        output = json.loads(JSONFormatter().format(record))

        assert output["plugin_name"] == "field_reverser"
        assert output["source_field"] == "message"
        assert output["batch_size"] == 3
        assert output["records_processed"] == 2
        assert output["records_skipped"] == 1
        assert output["plugin_names"] == ["field_reverser"]

    def test_ignores_unknown_extra_fields(self):
        output = json.loads(JSONFormatter().format(_make_record(something_else="x")))
        assert "something_else" not in output

    def test_coerces_numeric_fields(self):
        record = _make_record(batch_size="10", duration_ms="1.5")
        output = json.loads(JSONFormatter().format(record))

        assert output["batch_size"] == 10
        assert output["duration_ms"] == 1.5

    def test_returns_none_for_unconvertible_numeric_fields(self):
        output = json.loads(JSONFormatter().format(_make_record(batch_size="many")))
        assert output["batch_size"] is None

    def test_serializes_enum_and_path_values(self):
        record = _make_record(error_category=ErrorCategory.PERMANENT, config_path=Path("/tmp/x.yaml"))
        output = json.loads(JSONFormatter().format(record))

        assert output["error_category"] == "permanent"
        assert output["config_path"] == "/tmp/x.yaml"

    def test_includes_structured_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            exc_info = sys.exc_info()

        output = json.loads(JSONFormatter().format(_make_record(level=logging.ERROR, exc_info=exc_info)))

        assert output["exception"]["type"] == "ValueError"
        assert output["exception"]["message"] == "boom"
        assert "Traceback" in output["exception"]["stacktrace"]

    def test_keeps_non_ascii(self):
        formatted = JSONFormatter().format(_make_record(msg="olleh 日本"))
        assert "日本" in formatted


class TestConsoleFormatter:

    @pytest.fixture(autouse=True)
    def clear_context(self):
        clear_log_context()
        yield
        clear_log_context()

    @pytest.fixture
    def formatter(self):
        formatter = ConsoleFormatter()
        formatter._use_colors = False
        return formatter

    def test_basic_format(self, formatter):
        output = formatter.format(_make_record())

        assert " - INFO - test message" in output

    def test_includes_pipeline_prefix(self, formatter):
        set_log_context(pipeline_id="main")
        output = formatter.format(_make_record())

        assert "INFO - [main] - test message" in output

    def test_includes_plugin_tag(self, formatter):
        output = formatter.format(_make_record(plugin_name="field_reverser"))

        assert "[plugin:field_reverser] test message" in output

    def test_includes_short_trace_id(self, formatter):
        output = formatter.format(_make_record(trace_id="abcdef1234567890"))

        assert "[abcdef12]" in output

    def test_colors_level_when_enabled(self):
        formatter = ConsoleFormatter()
        formatter._use_colors = True
        output = formatter.format(_make_record(level=logging.ERROR))

        assert "\033[31mERROR\033[0m" in output

    def test_appends_exception(self, formatter):
        try:
            raise RuntimeError("bad")
        except RuntimeError:
            exc_info = sys.exc_info()

        output = formatter.format(_make_record(level=logging.ERROR, exc_info=exc_info))

        assert "RuntimeError: bad" in output
