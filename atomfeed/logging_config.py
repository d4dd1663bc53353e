"""Structured JSON logging for atomfeed."""

import json
import logging
import sys
import uuid
from datetime import UTC, datetime

LOGGER_NAMESPACE = "atomfeed"

# Record attributes copied into the JSON line when a call site sets them.
CONTEXT_FIELDS = (
    "execution_id",
    "component",
    "document_kind",
    "document_id",
    "entries_count",
    "path",
    "error",
    "error_type",
    "execution_success",
    "execution_duration_seconds",
)

COMPONENTS = ("codec", "cli")


class StructuredFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        payload.update(
            {key: getattr(record, key) for key in CONTEXT_FIELDS if hasattr(record, key)}
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


class ExecutionLogger:
    """Component logger that stamps every record with the execution context."""

    def __init__(self, execution_id: str, component: str = "cli"):
        """Initialize execution logger.

        Args:
            execution_id: Identifier shared by all records of one run
            component: Component name ('codec' or 'cli')
        """
        self.execution_id = execution_id
        self.component = component
        self.logger = logging.getLogger(f"{LOGGER_NAMESPACE}.{component}")
        self.start_time: datetime | None = None
        self.end_time: datetime | None = None

    def _log(self, level: int, message: str, **context) -> None:
        if not self.logger.isEnabledFor(level):
            return
        context.update(execution_id=self.execution_id, component=self.component)
        self.logger.log(level, message, extra=context)

    def debug(self, message: str, **context) -> None:
        self._log(logging.DEBUG, message, **context)

    def info(self, message: str, **context) -> None:
        self._log(logging.INFO, message, **context)

    def warning(self, message: str, **context) -> None:
        self._log(logging.WARNING, message, **context)

    def error(self, message: str, **context) -> None:
        self._log(logging.ERROR, message, **context)

    def log_execution_start(self, **context) -> None:
        self.start_time = datetime.now(UTC)
        self.info(f"Starting {self.component} execution", **context)

    def log_execution_end(self, success: bool = True, **context) -> None:
        """Log the end of the run with its outcome and duration."""
        self.end_time = datetime.now(UTC)
        duration = None
        if self.start_time is not None:
            duration = (self.end_time - self.start_time).total_seconds()

        self._log(
            logging.INFO if success else logging.WARNING,
            f"Completed {self.component} execution",
            execution_success=success,
            execution_duration_seconds=duration,
            **context,
        )

    def log_document_processing(
        self, document_kind: str, document_id: str, entries_count: int
    ) -> None:
        """Log a successfully decoded document."""
        self.info(
            f"Decoded {document_kind}: {entries_count} entries",
            document_kind=document_kind,
            document_id=document_id,
            entries_count=entries_count,
        )

    def log_rejection(self, document_kind: str, error: Exception) -> None:
        """Log a document that failed to decode or validate."""
        self.warning(
            f"Rejected {document_kind} document: {error}",
            document_kind=document_kind,
            error=str(error),
            error_type=type(error).__name__,
        )


def setup_structured_logging(log_level: str = "INFO") -> None:
    """Send JSON log lines to stderr at ``log_level``.

    Stdout is left to command output.
    """
    level = getattr(logging, log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(StructuredFormatter())
    root_logger.addHandler(handler)

    logging.getLogger(LOGGER_NAMESPACE).setLevel(level)
    for component in COMPONENTS:
        logging.getLogger(f"{LOGGER_NAMESPACE}.{component}").setLevel(level)


def create_execution_logger(
    component: str, execution_id: str | None = None
) -> ExecutionLogger:
    """Create a logger for ``component``, generating an execution ID if needed."""
    if not execution_id:
        execution_id = f"exec_{uuid.uuid4().hex[:12]}"

    return ExecutionLogger(execution_id, component)
