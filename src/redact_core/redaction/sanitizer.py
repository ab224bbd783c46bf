"""Sanitizer for raw database error messages."""

from .patterns import DATABASE_ERROR_PATTERNS


def sanitize_database_error(message: str) -> str:
    """Strip credentials from a database driver error message.

    Driver messages carry no field names, so only key=value pairs and URL
    credentials are recognised.

    Args:
        message: Raw exception text

    Returns:
        Message with credentials replaced by [REDACTED]
    """
    result = message
    for pattern in DATABASE_ERROR_PATTERNS:
        result = pattern.apply(result)
    return result
