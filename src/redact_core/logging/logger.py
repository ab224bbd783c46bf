"""Structured logging with redaction and trace context.

Every formatter in this module passes a record's extra fields through the
redactor before they are written, so call sites may log request bodies and
error contexts directly.

Usage:
    from redact_core.logging import get_logger

    logger = get_logger("auth")
    logger.info("Login failed", username="jane", password="hunter2")
"""

import json
import logging
import sys
import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, TextIO

from opentelemetry import trace

from redact_core.logging.colors import CYAN, LIGHT_BLUE, RED, RESET, YELLOW
from redact_core.redaction import Redactor, sanitize_database_error, scrub_string
from redact_core.types import LogFormat, LogLevel

# Attributes every LogRecord has; anything else came in through `extra`
_RECORD_ATTRS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "pathname", "process", "processName", "relativeCreated",
        "stack_info", "exc_info", "exc_text", "thread", "threadName",
        "message", "taskName", "asctime",
    }
)  # fmt: skip

_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


@dataclass
class LogConfig:
    """Logger configuration."""

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON
    output: TextIO = field(default=sys.stderr)

    @property
    def python_level(self) -> int:
        """Level as a stdlib logging constant."""
        return _LEVELS[self.level]


def _span_context() -> dict[str, str]:
    span = trace.get_current_span()
    if span and span.is_recording():
        ctx = span.get_span_context()
        if ctx.is_valid:
            return {
                "trace_id": format(ctx.trace_id, "032x"),
                "span_id": format(ctx.span_id, "016x"),
            }
    return {}


class _RedactingFormatter(logging.Formatter):
    """Shared redaction of extra fields and exception text."""

    def __init__(self, redactor: Redactor | None = None) -> None:
        super().__init__()
        self._redactor = redactor or Redactor()

    def _fields(self, record: logging.LogRecord) -> dict[str, Any]:
        extra = {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRS}
        return self._redactor.redact(extra)

    def _exception(self, record: logging.LogRecord) -> str | None:
        if not record.exc_info:
            return None
        text = self.formatException(record.exc_info)
        return sanitize_database_error(scrub_string(text, "exception"))


class StructuredLogFormatter(_RedactingFormatter):
    """JSON formatter with trace context injection.

    Formats log records as JSON with:
    - timestamp (ISO 8601)
    - level
    - component (logger name)
    - message
    - trace_id / span_id (if a span is recording)
    - redacted extra fields
    - sanitized exception text
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "component": record.name,
            "message": record.getMessage(),
        }
        log_data.update(self._fields(record))
        log_data.update(_span_context())

        exception = self._exception(record)
        if exception:
            log_data["exception"] = exception

        return json.dumps(log_data, default=str)


class ConsoleLogFormatter(_RedactingFormatter):
    """Human-readable colored formatter.

    Format: ``[timestamp] LEVEL: message {context}``
    """

    LEVEL_COLORS = {
        logging.DEBUG: LIGHT_BLUE,
        logging.INFO: CYAN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, UTC).isoformat()
        color = self.LEVEL_COLORS.get(record.levelno, RESET)
        output = f"[{timestamp}] {color}{record.levelname}{RESET}: {record.getMessage()}"

        fields = self._fields(record)
        if fields:
            output += f" {LIGHT_BLUE}{json.dumps(fields, default=str)}{RESET}"

        exception = self._exception(record)
        if exception:
            output += f"\n{exception}"
        return output


def create_formatter(
    log_format: LogFormat, redactor: Redactor | None = None
) -> logging.Formatter:
    """Build the formatter for a log format.

    Args:
        log_format: Output format
        redactor: Optional redactor shared by the formatter

    Returns:
        Formatter instance
    """
    if log_format == LogFormat.COLORED:
        return ConsoleLogFormatter(redactor)
    return StructuredLogFormatter(redactor)


class AppLogger:
    """Structured logger with bound context.

    Wraps Python logging with:
    - Keyword fields collected under ``context`` and redacted on output
    - Child loggers that inherit and extend bound context
    - A per-record ``trace_id`` when no OpenTelemetry span is active
    """

    def __init__(
        self,
        name: str,
        config: LogConfig | None = None,
        context: dict[str, Any] | None = None,
    ):
        """Initialize logger.

        Args:
            name: Logger name (component name)
            config: Logger configuration (defaults to LogConfig())
            context: Fields bound to every record
        """
        self.name = name
        self.config = config or LogConfig()
        self.context = dict(context or {})
        self._logger = logging.getLogger(f"redact_core.{name}")
        self._logger.setLevel(self.config.python_level)

        # Add handler if not already configured
        if not self._logger.handlers:
            handler = logging.StreamHandler(self.config.output)
            handler.setFormatter(create_formatter(self.config.format))
            self._logger.addHandler(handler)

    def configure(self, config: LogConfig) -> None:
        """Update configuration (for hot-reload).

        Args:
            config: New logger configuration
        """
        self.config = config
        self._logger.setLevel(config.python_level)
        for handler in self._logger.handlers:
            if isinstance(handler, logging.StreamHandler):
                handler.setStream(config.output)
            handler.setFormatter(create_formatter(config.format))

    def child(self, **context: Any) -> "AppLogger":
        """Get a logger with additional bound context.

        Args:
            **context: Fields merged over the parent's context

        Returns:
            AppLogger sharing the parent's underlying logger
        """
        return AppLogger(self.name, self.config, {**self.context, **context})

    def _log(
        self, level: int, message: str, exc_info: bool = False, /, **kwargs: Any
    ) -> None:
        """Log message with context fields.

        Args:
            level: Log level
            message: Log message
            exc_info: Attach the exception being handled
            **kwargs: Additional fields to include
        """
        extra: dict[str, Any] = {"context": {**self.context, **kwargs}}
        if not _span_context():
            extra["trace_id"] = uuid.uuid4().hex
        self._logger.log(level, message, exc_info=exc_info, extra=extra)

    def debug(self, message: str, /, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, /, **kwargs: Any) -> None:
        """Log info message."""
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, /, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, /, **kwargs: Any) -> None:
        """Log error message."""
        self._log(logging.ERROR, message, **kwargs)

    def exception(self, message: str, /, **kwargs: Any) -> None:
        """Log exception with traceback."""
        self._log(logging.ERROR, message, True, **kwargs)


# Logger cache
_loggers: dict[str, AppLogger] = {}
_config = LogConfig()


def get_logger(name: str) -> AppLogger:
    """Get or create a structured logger.

    Args:
        name: Logger name (component name)

    Returns:
        AppLogger instance
    """
    if name not in _loggers:
        _loggers[name] = AppLogger(name, _config)
    return _loggers[name]


def configure_logging(config: LogConfig) -> None:
    """Apply configuration to existing and future loggers.

    Args:
        config: Logger configuration
    """
    global _config  # noqa: PLW0603
    _config = config
    for logger in _loggers.values():
        logger.configure(config)


def reset_loggers() -> None:
    """Reset logger cache (for testing)."""
    global _loggers, _config  # noqa: PLW0603
    for logger in _loggers.values():
        logger._logger.handlers.clear()
    _loggers = {}
    _config = LogConfig()
