"""Unit tests for structured logging."""

import json
import logging
from io import StringIO

from atomfeed.logging_config import (
    ExecutionLogger,
    StructuredFormatter,
    create_execution_logger,
    setup_structured_logging,
)


class TestLoggingUnit:
    """Unit tests for the logging helpers."""

    def _capture(self, logger: ExecutionLogger) -> StringIO:
        stream = StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(StructuredFormatter())
        logger.logger.addHandler(handler)
        logger.logger.setLevel(logging.DEBUG)
        self._handler = handler
        return stream

    def teardown_method(self):
        handler = getattr(self, "_handler", None)
        if handler is not None:
            for name in ("atomfeed.codec", "atomfeed.test"):
                logging.getLogger(name).removeHandler(handler)

    def test_structured_output_contains_context(self):
        logger = ExecutionLogger("exec_test", component="test")
        stream = self._capture(logger)

        logger.log_document_processing("feed", "https://example.com/", 3)

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["level"] == "INFO"
        assert record["logger"] == "atomfeed.test"
        assert record["execution_id"] == "exec_test"
        assert record["component"] == "test"
        assert record["document_kind"] == "feed"
        assert record["document_id"] == "https://example.com/"
        assert record["message"] == "Decoded feed: 3 entries"

    def test_error_fields_are_included(self):
        logger = ExecutionLogger("exec_test", component="test")
        stream = self._capture(logger)

        logger.warning("Rejected", error="bad id", error_type="IdentifierInvalid")

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["level"] == "WARNING"
        assert record["error"] == "bad id"
        assert record["error_type"] == "IdentifierInvalid"

    def test_rejection_records_error_type(self):
        logger = ExecutionLogger("exec_test", component="test")
        stream = self._capture(logger)

        logger.log_rejection("entry", ValueError("missing summary"))

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["level"] == "WARNING"
        assert record["document_kind"] == "entry"
        assert record["error"] == "missing summary"
        assert record["error_type"] == "ValueError"

    def test_failed_execution_is_a_warning(self):
        logger = ExecutionLogger("exec_test", component="test")
        stream = self._capture(logger)

        logger.log_execution_end(success=False)

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["level"] == "WARNING"
        assert record["execution_success"] is False
        assert record["execution_duration_seconds"] is None

    def test_execution_start_and_end(self):
        logger = ExecutionLogger("exec_test", component="test")
        stream = self._capture(logger)

        logger.log_execution_start()
        logger.log_execution_end(success=True)

        lines = stream.getvalue().strip().splitlines()
        assert json.loads(lines[0])["message"] == "Starting test execution"
        assert json.loads(lines[1])["message"] == "Completed test execution"
        assert logger.end_time >= logger.start_time

    def test_create_execution_logger_generates_id(self):
        logger = create_execution_logger("codec")

        assert logger.execution_id.startswith("exec_")
        assert logger.logger.name == "atomfeed.codec"

    def test_create_execution_logger_keeps_given_id(self):
        assert create_execution_logger("codec", "run-1").execution_id == "run-1"

    def test_setup_structured_logging_sets_levels(self):
        root = logging.getLogger()
        original_handlers = root.handlers[:]
        original_level = root.level
        try:
            setup_structured_logging("warning")

            assert root.level == logging.WARNING
            assert logging.getLogger("atomfeed.codec").level == logging.WARNING
            assert isinstance(root.handlers[0].formatter, StructuredFormatter)
        finally:
            root.handlers[:] = original_handlers
            root.setLevel(original_level)
            for name in ("atomfeed", "atomfeed.codec", "atomfeed.cli"):
                logging.getLogger(name).setLevel(logging.NOTSET)
