"""Error types and matcher interfaces."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error source categories."""

    VALIDATION = "VALIDATION"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    AUTH = "AUTH"
    DATABASE = "DATABASE"
    CONFIG = "CONFIG"
    SYSTEM = "SYSTEM"


@dataclass
class AppError(Exception):
    """Structured error with context. Base exception for all application errors."""

    # Identity
    code: str  # e.g., "NOT_FOUND"
    category: ErrorCategory

    # Messages
    message: str  # Human-readable summary
    http_status: int = 500

    # Arbitrary caller data; redacted before it leaves the process
    context: dict[str, Any] | None = None

    # Metadata
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Set Exception message."""
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API responses.

        Context is included as-is; callers redact it.

        Returns:
            Dictionary representation of the error
        """
        return {
            "code": self.code,
            "category": self.category.value,
            "message": self.message,
            "status_code": self.http_status,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }


class ValidationError(AppError):
    """Invalid input (400)."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="VALIDATION_ERROR",
            category=ErrorCategory.VALIDATION,
            message=message,
            http_status=400,
            context=context,
        )


class NotFoundError(AppError):
    """Missing resource (404)."""

    def __init__(self, resource: str, id: str | None = None) -> None:  # noqa: A002
        message = f"{resource} with id {id} not found" if id else f"{resource} not found"
        super().__init__(
            code="NOT_FOUND",
            category=ErrorCategory.NOT_FOUND,
            message=message,
            http_status=404,
            context={"resource": resource, "id": id},
        )


class ConflictError(AppError):
    """State conflict such as a duplicate record (409)."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="CONFLICT",
            category=ErrorCategory.CONFLICT,
            message=message,
            http_status=409,
            context=context,
        )


@dataclass
class MatchResult:
    """Result of matching an exception."""

    code: str
    category: ErrorCategory
    message: str
    http_status: int = 500
    context: dict[str, Any] | None = None


class ErrorMatcher(ABC):
    """Base class for exception matchers."""

    @abstractmethod
    def matches(self, error: BaseException) -> bool:
        """Check if this matcher handles the error.

        Args:
            error: Exception to check

        Returns:
            True if this matcher can handle the error
        """

    @abstractmethod
    def extract(self, error: BaseException) -> MatchResult:
        """Extract error info from the exception.

        Args:
            error: Exception to extract from

        Returns:
            MatchResult with error code and context
        """
