"""Tests for structured logging helpers."""

import logging

import pytest

from grana.utils.logging_utils import (
    LogContext,
    _ContextFilter,
    get_log_context,
    log_function_call,
)


class TestLogContext:
    """Test LogContext context manager."""

    def test_fields_set_inside_context(self):
        """Test that fields are visible inside the block only."""
        with LogContext(source_file="overtime.csv"):
            assert get_log_context() == {"source_file": "overtime.csv"}
        assert get_log_context() == {}

    def test_nested_contexts_merge_and_restore(self):
        """Test nesting of contexts."""
        with LogContext(source_file="a.csv"):
            with LogContext(model="OvertimeRecord"):
                assert get_log_context() == {
                    "source_file": "a.csv",
                    "model": "OvertimeRecord",
                }
            assert get_log_context() == {"source_file": "a.csv"}

    def test_restored_after_exception(self):
        """Test that an exception inside the block restores the context."""
        with pytest.raises(ValueError):
            with LogContext(record_id=1):
                raise ValueError("boom")
        assert get_log_context() == {}

    def test_filter_copies_fields(self):
        """Test that the filter attaches context fields to records."""
        record = logging.LogRecord("test", logging.INFO, "", 0, "msg", (), None)
        with LogContext(record_count=3):
            assert _ContextFilter().filter(record) is True
        assert record.record_count == 3


class TestLogFunctionCall:
    """Test log_function_call decorator."""

    def test_logs_entry_and_exit(self, caplog):
        """Test logging around a successful call."""

        @log_function_call
        def add(a, b):
            return a + b

        with caplog.at_level(logging.DEBUG):
            assert add(1, 2) == 3

        assert "Entering add" in caplog.text
        assert "Exiting add" in caplog.text

    def test_include_args(self, caplog):
        """Test that arguments are logged when requested."""

        @log_function_call(include_args=True, level="INFO")
        def scale(value, factor=2):
            return value * factor

        with caplog.at_level(logging.INFO):
            scale(5, factor=3)

        assert "with args: 5, factor=3" in caplog.text

    def test_logs_and_reraises_exceptions(self, caplog):
        """Test that exceptions are logged and propagated."""

        @log_function_call
        def fail():
            raise RuntimeError("bad input")

        with caplog.at_level(logging.DEBUG):
            with pytest.raises(RuntimeError):
                fail()

        assert "Exception in fail: RuntimeError: bad input" in caplog.text

    def test_preserves_metadata(self):
        """Test that functools.wraps keeps the name and docstring."""

        @log_function_call
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."
