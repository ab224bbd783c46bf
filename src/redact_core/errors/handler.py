"""Error handler that turns any exception into a redacted response."""

from dataclasses import dataclass
from typing import Any

from redact_core.redaction import Redactor, scrub_string
from redact_core.types import Environment

from .errors import ErrorCategory
from .matchers import ErrorMatcherChain


@dataclass
class ErrorResponse:
    """User-facing error payload. Only ever built from redacted data."""

    code: str
    category: ErrorCategory
    message: str
    status_code: int
    context: Any = None

    def to_dict(self, request_id: str | None = None) -> dict[str, Any]:
        """Serialize as the JSON error body.

        Args:
            request_id: Optional request identifier to include

        Returns:
            Response body dictionary
        """
        error: dict[str, Any] = {
            "code": self.code,
            "category": self.category.value,
            "message": self.message,
            "status_code": self.status_code,
        }
        if self.context is not None:
            error["context"] = self.context
        if request_id is not None:
            error["request_id"] = request_id
        return {"success": False, "error": error}


class ErrorHandler:
    """Maps exceptions to error responses and scrubs what they expose."""

    def __init__(
        self,
        environment: Environment = Environment.DEVELOPMENT,
        redactor: Redactor | None = None,
        matcher_chain: ErrorMatcherChain | None = None,
    ) -> None:
        """Initialize error handler.

        Args:
            environment: Deployment environment
            redactor: Redactor for error context (defaults to Redactor())
            matcher_chain: Matcher chain (defaults to ErrorMatcherChain(environment))
        """
        self.environment = environment
        self.redactor = redactor or Redactor()
        self.matcher_chain = matcher_chain or ErrorMatcherChain(environment)

    def handle(self, error: BaseException) -> ErrorResponse:
        """Convert an exception to a redacted error response.

        Args:
            error: Exception raised anywhere in request handling

        Returns:
            ErrorResponse safe to log or return
        """
        result = self.matcher_chain.match(error)
        return ErrorResponse(
            code=result.code,
            category=result.category,
            message=scrub_string(result.message, "message"),
            status_code=result.http_status,
            context=self.redactor.redact(result.context),
        )


def handle_error(
    error: BaseException,
    environment: Environment = Environment.DEVELOPMENT,
    redactor: Redactor | None = None,
) -> ErrorResponse:
    """Convenience function to handle an error.

    Args:
        error: Exception to convert
        environment: Deployment environment
        redactor: Optional redactor

    Returns:
        Redacted ErrorResponse
    """
    return ErrorHandler(environment, redactor).handle(error)
