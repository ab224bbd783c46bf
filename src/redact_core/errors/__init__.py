"""Error handling - Structured errors with redacted context."""

from .errors import (
    AppError,
    ConflictError,
    ErrorCategory,
    ErrorMatcher,
    MatchResult,
    NotFoundError,
    ValidationError,
)
from .handler import ErrorHandler, ErrorResponse, handle_error
from .matchers import (
    AppErrorMatcher,
    AuthErrorMatcher,
    DatabaseErrorMatcher,
    ErrorMatcherChain,
    GenericErrorMatcher,
)

__all__ = [
    # Core error types
    "AppError",
    "ErrorCategory",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    # Matching
    "ErrorMatcher",
    "MatchResult",
    "ErrorMatcherChain",
    "AppErrorMatcher",
    "DatabaseErrorMatcher",
    "AuthErrorMatcher",
    "GenericErrorMatcher",
    # Handling
    "ErrorHandler",
    "ErrorResponse",
    "handle_error",
]
