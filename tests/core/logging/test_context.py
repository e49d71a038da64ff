"""Tests for logging context variables."""

from core.logging.context import clear_log_context, get_log_context, set_log_context


class TestLogContext:
    def test_defaults_are_empty(self):
        assert get_log_context() == {
            "pipeline_id": "",
            "worker_id": "",
            "trace_id": "",
        }

    def test_set_and_get(self):
        set_log_context(pipeline_id="main", worker_id="w-1", trace_id="t-1")

        assert get_log_context() == {
            "pipeline_id": "main",
            "worker_id": "w-1",
            "trace_id": "t-1",
        }

    def test_partial_update_keeps_other_fields(self):
        set_log_context(pipeline_id="main")
        set_log_context(worker_id="w-1")

        ctx = get_log_context()
        assert ctx["pipeline_id"] == "main"
        assert ctx["worker_id"] == "w-1"

    def test_clear(self):
        set_log_context(pipeline_id="main", trace_id="t-1")
        clear_log_context()

        assert all(value == "" for value in get_log_context().values())
