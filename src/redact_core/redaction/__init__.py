"""Sensitive data redaction for logs and error payloads."""

from .classifier import Classification, classify_field
from .config import MAX_DEPTH_LIMIT, RedactionConfig
from .patterns import (
    CARD_REDACTED,
    CIRCULAR_REFERENCE,
    EMAIL_REDACTED,
    EXACT_SENSITIVE_FIELDS,
    JWT_REDACTED,
    MAX_DEPTH_EXCEEDED,
    REDACTED,
    SSN_REDACTED,
    RedactionPattern,
)
from .redactor import Redactor, redact_sensitive_data
from .sanitizer import sanitize_database_error
from .scrubber import scrub_string

__all__ = [
    # Entry points
    "redact_sensitive_data",
    "sanitize_database_error",
    # Components
    "Redactor",
    "RedactionConfig",
    "RedactionPattern",
    "EXACT_SENSITIVE_FIELDS",
    "MAX_DEPTH_LIMIT",
    "Classification",
    "classify_field",
    "scrub_string",
    # Sentinels
    "REDACTED",
    "CIRCULAR_REFERENCE",
    "MAX_DEPTH_EXCEEDED",
    "JWT_REDACTED",
    "CARD_REDACTED",
    "SSN_REDACTED",
    "EMAIL_REDACTED",
]
