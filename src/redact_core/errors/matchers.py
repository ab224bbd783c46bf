"""Error matchers for converting exceptions to error responses."""

import sqlite3
import traceback
from typing import cast

from redact_core.redaction import sanitize_database_error
from redact_core.types import Environment

from .errors import AppError, ErrorCategory, ErrorMatcher, MatchResult

# DB-API 2.0 exception names plus the ORM base classes seen in practice
DATABASE_ERROR_NAMES = frozenset(
    {
        "DatabaseError",
        "DataError",
        "IntegrityError",
        "InterfaceError",
        "InternalError",
        "NotSupportedError",
        "OperationalError",
        "ProgrammingError",
        "SQLAlchemyError",
        "DBAPIError",
    }
)

INTEGRITY_ERROR_NAMES = frozenset({"IntegrityError", "UniqueViolation"})

AUTH_ERROR_NAMES = frozenset(
    {
        "AuthError",
        "AuthenticationError",
        "ExpiredSignatureError",
        "InvalidSignatureError",
        "InvalidTokenError",
    }
)


def _class_names(error: BaseException) -> set[str]:
    return {cls.__name__ for cls in type(error).__mro__}


class AppErrorMatcher(ErrorMatcher):
    """Matches errors raised by application code."""

    def matches(self, error: BaseException) -> bool:
        return isinstance(error, AppError)

    def extract(self, error: BaseException) -> MatchResult:
        app_error = cast(AppError, error)
        return MatchResult(
            code=app_error.code,
            category=app_error.category,
            message=app_error.message,
            http_status=app_error.http_status,
            context=app_error.context,
        )


class DatabaseErrorMatcher(ErrorMatcher):
    """Matches database driver and ORM errors."""

    def matches(self, error: BaseException) -> bool:
        """Check if error came from a database driver.

        Args:
            error: Exception to check

        Returns:
            True for sqlite3 errors, DB-API named errors and Prisma errors
        """
        if isinstance(error, sqlite3.Error):
            return True
        names = _class_names(error)
        return bool(names & DATABASE_ERROR_NAMES) or any(
            name.startswith("Prisma") for name in names
        )

    def extract(self, error: BaseException) -> MatchResult:
        """Extract a user-facing database error.

        The driver message is kept only in sanitized form.

        Args:
            error: Exception to extract from

        Returns:
            MatchResult with DATABASE_ERROR code
        """
        context = {"original_error": sanitize_database_error(str(error))}

        if _class_names(error) & INTEGRITY_ERROR_NAMES:
            return MatchResult(
                code="DATABASE_ERROR",
                category=ErrorCategory.DATABASE,
                message="Record already exists",
                http_status=409,
                context=context,
            )

        return MatchResult(
            code="DATABASE_ERROR",
            category=ErrorCategory.DATABASE,
            message="Database operation failed",
            http_status=500,
            context=context,
        )


class AuthErrorMatcher(ErrorMatcher):
    """Matches JWT and authentication errors."""

    def matches(self, error: BaseException) -> bool:
        names = _class_names(error)
        return bool(names & AUTH_ERROR_NAMES) or any("JWT" in name for name in names)

    def extract(self, error: BaseException) -> MatchResult:
        # Token errors say too much about why verification failed
        return MatchResult(
            code="AUTH_ERROR",
            category=ErrorCategory.AUTH,
            message="Authentication failed",
            http_status=401,
        )


class GenericErrorMatcher(ErrorMatcher):
    """Fallback matcher for any exception."""

    def __init__(self, environment: Environment = Environment.DEVELOPMENT) -> None:
        """Initialize matcher.

        Args:
            environment: Deployment environment; production hides details
        """
        self.environment = environment

    def matches(self, error: BaseException) -> bool:
        """Always matches."""
        return True

    def extract(self, error: BaseException) -> MatchResult:
        """Extract generic error info.

        Args:
            error: Exception to extract from

        Returns:
            MatchResult with INTERNAL_ERROR code
        """
        if self.environment == Environment.PRODUCTION:
            return MatchResult(
                code="INTERNAL_ERROR",
                category=ErrorCategory.SYSTEM,
                message="Internal server error",
            )

        stack = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        return MatchResult(
            code="INTERNAL_ERROR",
            category=ErrorCategory.SYSTEM,
            message=str(error) or type(error).__name__,
            context={"original_error": stack},
        )


class ErrorMatcherChain:
    """Ordered chain of matchers. First match wins."""

    def __init__(self, environment: Environment = Environment.DEVELOPMENT) -> None:
        """Initialize matcher chain with built-in matchers.

        Args:
            environment: Deployment environment passed to the fallback matcher
        """
        self.environment = environment
        self.matchers: list[ErrorMatcher] = []
        self._load_builtin_matchers()

    def match(self, error: BaseException) -> MatchResult:
        """Find first matching matcher and extract result.

        Args:
            error: Exception to match

        Returns:
            MatchResult from first matching matcher
        """
        for matcher in self.matchers:
            if matcher.matches(error):
                return matcher.extract(error)

        # Should never reach here due to GenericErrorMatcher
        return GenericErrorMatcher(self.environment).extract(error)

    def add(self, matcher: ErrorMatcher) -> None:
        """Register a matcher ahead of the built-in fallback.

        Args:
            matcher: Matcher to insert
        """
        self.matchers.insert(len(self.matchers) - 1, matcher)

    def _load_builtin_matchers(self) -> None:
        """Load built-in matchers in priority order."""
        # Order matters - more specific matchers first
        self.matchers = [
            AppErrorMatcher(),
            DatabaseErrorMatcher(),
            AuthErrorMatcher(),
            GenericErrorMatcher(self.environment),  # Fallback - must be last
        ]
