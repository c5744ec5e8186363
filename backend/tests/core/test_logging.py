"""
Tests for structured logging configuration.
"""

import logging

import structlog

from apps.core.logging import _rename_request_fields, configure_logging, get_logger


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def teardown_method(self):
        """Restore the console configuration used by the test settings."""
        configure_logging(json_format=False, log_level="WARNING")

    def test_configure_logging_json_format(self):
        """Should install a single stdout handler at the requested level."""
        configure_logging(json_format=True, log_level="INFO")

        root_logger = logging.getLogger()
        assert len(root_logger.handlers) == 1
        assert root_logger.level == logging.INFO
        assert structlog.is_configured()

    def test_unknown_level_falls_back_to_info(self):
        """Should default to INFO for an unrecognised level name."""
        configure_logging(json_format=False, log_level="chatty")

        assert logging.getLogger().level == logging.INFO


class TestRenameRequestFields:
    """Tests for the request field processor."""

    def test_correlation_id_renamed_to_trace_id(self):
        """Should move correlation_id to a string trace_id."""
        event = _rename_request_fields(None, "info", {"correlation_id": 123, "event": "x"})

        assert event == {"trace_id": "123", "event": "x"}

    def test_duration_ms_converted_to_nanoseconds(self):
        """Should replace duration_ms with integer nanoseconds."""
        event = _rename_request_fields(None, "info", {"duration_ms": 150.5})

        assert event == {"duration": 150_500_000}

    def test_events_without_fields_pass_through(self):
        event = {"event": "todo_created", "todo_id": 1}

        assert _rename_request_fields(None, "info", dict(event)) == event


class TestLogOutput:
    """Tests for actual log output."""

    def setup_method(self):
        structlog.contextvars.clear_contextvars()
        configure_logging(json_format=True, log_level="DEBUG")

    def teardown_method(self):
        structlog.contextvars.clear_contextvars()
        configure_logging(json_format=False, log_level="WARNING")

    def test_event_reaches_stdlib_logging(self, caplog):
        """Should emit through stdlib so caplog sees the event."""
        logger = get_logger("test.json_output")

        with caplog.at_level(logging.DEBUG, logger="test.json_output"):
            logger.info("todo_created", todo_id=42)

        assert "todo_created" in caplog.text

    def test_bound_context_is_merged(self, caplog):
        """Should include contextvars bound with dotted keys in the event."""
        logger = get_logger("test.context_output")
        structlog.contextvars.bind_contextvars(**{"usr.id": "7"})

        with caplog.at_level(logging.DEBUG, logger="test.context_output"):
            logger.info("todo_deleted")

        assert "usr.id" in caplog.text
