"""Structured logging configuration for the feed2text service."""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

# Context keys copied from a record into the JSON entry when present
CONTEXT_FIELDS = (
    "request_id",
    "component",
    "url",
    "status_code",
    "items_count",
    "content_length",
    "selector",
    "error",
)


class StructuredFormatter(logging.Formatter):
    """Custom formatter for structured JSON logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                log_entry[field] = getattr(record, field)

        if hasattr(record, "duration_seconds"):
            log_entry["duration_seconds"] = record.duration_seconds

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, ensure_ascii=False, default=str)


class ExecutionLogger:
    """Logger bound to one request and one component."""

    def __init__(self, request_id: str, component: str = "app"):
        """Initialize execution logger.

        Args:
            request_id: Unique identifier of the request being served
            component: Component name (e.g., 'feed_processor', 'html_extractor')
        """
        self.request_id = request_id
        self.component = component
        self.logger = logging.getLogger(f"feed2text.{component}")
        self.start_time: datetime | None = None

    def _log_with_context(self, level: int, message: str, **kwargs) -> None:
        extra = {
            "request_id": self.request_id,
            "component": self.component,
            **kwargs,
        }
        self.logger.log(level, message, extra=extra)

    def info(self, message: str, **kwargs) -> None:
        """Log info message with context."""
        self._log_with_context(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message with context."""
        self._log_with_context(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message with context."""
        self._log_with_context(logging.ERROR, message, **kwargs)

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message with context."""
        self._log_with_context(logging.DEBUG, message, **kwargs)

    def log_request_start(self, **kwargs) -> None:
        """Log request start and remember the timestamp."""
        self.start_time = datetime.now(UTC)
        self.info(f"Starting {self.component} request", **kwargs)

    def log_request_end(self, success: bool = True, **kwargs) -> None:
        """Log request end with its duration."""
        duration_seconds = None
        if self.start_time:
            duration_seconds = (datetime.now(UTC) - self.start_time).total_seconds()

        level = logging.INFO if success else logging.ERROR
        self._log_with_context(
            level,
            f"Completed {self.component} request",
            duration_seconds=duration_seconds,
            success=success,
            **kwargs,
        )


def setup_structured_logging(log_level: str = "INFO") -> None:
    """Setup structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    level = getattr(logging, log_level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(StructuredFormatter())
    root_logger.addHandler(console_handler)

    loggers = [
        "feed2text",
        "feed2text.app",
        "feed2text.feed_processor",
        "feed2text.html_extractor",
        "feed2text.config",
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


def create_request_logger(
    component: str, request_id: str | None = None
) -> ExecutionLogger:
    """Create an execution logger for a component.

    Args:
        component: Component name
        request_id: Optional request ID (will generate one if not provided)

    Returns:
        ExecutionLogger instance
    """
    if not request_id:
        request_id = f"req_{datetime.now(UTC).strftime('%Y%m%d_%H%M%S_%f')}"

    return ExecutionLogger(request_id, component)
