"""REST API error handlers.

Every handler builds its body from redacted data only; the raw exception
never reaches the response or the log.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from redact_core.api.middleware.request_id import get_request_id
from redact_core.api.models import ErrorBody, ErrorDetail
from redact_core.errors import AppError, ErrorCategory, ErrorHandler, ErrorResponse
from redact_core.logging import AppLogger, get_logger
from redact_core.redaction import REDACTED, classify_field


def _redact_validation_inputs(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Blank the submitted value of any invalid field with a sensitive name."""
    cleaned = []
    for error in errors:
        loc = error.get("loc") or ()
        field = loc[-1] if loc else None
        if "input" in error and isinstance(field, str) and classify_field(field).is_sensitive:
            error = {**error, "input": REDACTED}
        cleaned.append(error)
    return cleaned


def setup_error_handlers(
    app: FastAPI,
    handler: ErrorHandler | None = None,
    logger: AppLogger | None = None,
) -> None:
    """Configure error handlers for the FastAPI app.

    Args:
        app: Application to configure
        handler: Error handler (defaults to ErrorHandler())
        logger: Logger for failed requests (defaults to get_logger("api"))
    """
    error_handler = handler or ErrorHandler()
    log = logger or get_logger("api")

    def respond(
        response: ErrorResponse, headers: dict[str, str] | None = None
    ) -> JSONResponse:
        body = ErrorBody(
            error=ErrorDetail(
                code=response.code,
                category=response.category.value,
                message=response.message,
                status_code=response.status_code,
                context=response.context,
                request_id=get_request_id(),
            )
        )

        log_fields = {"code": response.code, "status_code": response.status_code}
        if response.status_code >= 500:
            log.error(response.message, context=response.context, **log_fields)
        else:
            log.warning(response.message, **log_fields)

        return JSONResponse(
            status_code=response.status_code,
            content=jsonable_encoder(body.model_dump(exclude_none=True)),
            headers=headers,
        )

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        """Handle application errors."""
        return respond(error_handler.handle(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle HTTP exceptions."""
        if isinstance(exc.detail, dict):
            message = f"HTTP {exc.status_code}"
            context = error_handler.redactor.redact(exc.detail)
        else:
            message = str(exc.detail)
            context = None

        response = ErrorResponse(
            code=f"HTTP_{exc.status_code}",
            category=ErrorCategory.SYSTEM,
            message=message,
            status_code=exc.status_code,
            context=context,
        )
        return respond(response, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request validation errors."""
        errors = _redact_validation_inputs(jsonable_encoder(exc.errors()))
        first_error = errors[0] if errors else {"msg": "Validation error"}

        response = ErrorResponse(
            code="VALIDATION_ERROR",
            category=ErrorCategory.VALIDATION,
            message=str(first_error.get("msg", "Validation error")),
            status_code=422,
            context=error_handler.redactor.redact({"errors": errors}),
        )
        return respond(response)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions, including database and auth errors."""
        return respond(error_handler.handle(exc))
