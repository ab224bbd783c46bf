"""Redacting structured logging."""

from .colors import CYAN, LIGHT_BLUE, RED, RESET, YELLOW
from .logger import (
    AppLogger,
    ConsoleLogFormatter,
    LogConfig,
    StructuredLogFormatter,
    configure_logging,
    create_formatter,
    get_logger,
    reset_loggers,
)

__all__ = [
    # Logger classes
    "AppLogger",
    "LogConfig",
    "StructuredLogFormatter",
    "ConsoleLogFormatter",
    # Functions
    "create_formatter",
    "get_logger",
    "configure_logging",
    "reset_loggers",
    # Colors
    "RESET",
    "RED",
    "YELLOW",
    "CYAN",
    "LIGHT_BLUE",
]
