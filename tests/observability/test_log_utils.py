"""Tests for logging configuration and structured logging helpers."""

import logging

from webrag.observability import (
    configure_logging,
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)


class TestSafeLogValue:
    """Test value conversion for log records."""

    def test_non_string_values_are_stringified(self) -> None:
        """Should render counts and enum values as plain strings."""
        assert safe_log_value(3) == "3"
        assert safe_log_value("ingested") == "ingested"

    def test_long_values_are_truncated(self) -> None:
        """Should cut long strings and note the original length."""
        value = safe_log_value("x" * 600)

        assert value.startswith("x" * 500)
        assert "600 total" in value


class TestLogHelpers:
    """Test structured context on emitted records."""

    def test_log_with_context_attaches_extra(self, caplog) -> None:
        logger = logging.getLogger("webrag.test")

        with caplog.at_level(logging.INFO, logger="webrag.test"):
            log_with_context(logger, logging.INFO, "Ingested source", url="https://example.com", chunk_count=3)

        record = caplog.records[0]
        assert record.url == "https://example.com"
        assert record.chunk_count == "3"

    def test_warning_exception_has_no_traceback(self, caplog) -> None:
        """Should include error type and message, and attach exc_info only at ERROR."""
        logger = logging.getLogger("webrag.test")

        with caplog.at_level(logging.WARNING, logger="webrag.test"):
            log_exception_with_context(
                logger, "Skipped chunk", ValueError("bad"), level=logging.WARNING, chunk_id="abc-1"
            )
            log_exception_with_context(logger, "Source failed", RuntimeError("boom"))

        warning, error = caplog.records
        assert warning.getMessage() == "Skipped chunk (ValueError: bad)"
        assert warning.error_type == "ValueError"
        assert warning.chunk_id == "abc-1"
        assert warning.exc_info is None
        assert error.levelno == logging.ERROR
        assert error.exc_info is not None

    def test_configure_logging_installs_single_handler(self) -> None:
        """Should replace existing root handlers and quiet noisy libraries."""
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging("DEBUG")
            configure_logging("DEBUG")

            assert len(root.handlers) == 1
            assert root.level == logging.DEBUG
            assert logging.getLogger("botocore").level == logging.WARNING
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
