"""REST API integration."""

from redact_core.api.app import create_app
from redact_core.api.errors import setup_error_handlers
from redact_core.api.middleware import RequestIDMiddleware, get_request_id

__all__ = [
    "create_app",
    "setup_error_handlers",
    "RequestIDMiddleware",
    "get_request_id",
]
