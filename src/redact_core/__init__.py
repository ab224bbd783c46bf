"""redact-core - Sensitive data redaction for logs and error payloads.

Usage:
    from redact_core import redact_sensitive_data, sanitize_database_error

    safe = redact_sensitive_data({"username": "jane", "password": "hunter2"})
"""

from redact_core.redaction import redact_sensitive_data, sanitize_database_error

__version__ = "1.0.0"
__all__ = ["__version__", "redact_sensitive_data", "sanitize_database_error"]
