"""REST API application factory."""

from fastapi import FastAPI

from redact_core.api.errors import setup_error_handlers
from redact_core.api.middleware import RequestIDMiddleware
from redact_core.api.models import HealthResponse
from redact_core.config import Settings
from redact_core.errors import ErrorHandler
from redact_core.logging import AppLogger, get_logger
from redact_core.redaction import Redactor


def create_app(settings: Settings | None = None, logger: AppLogger | None = None) -> FastAPI:
    """Create FastAPI application with redacting error handlers.

    Routes are added by the embedding service; this factory only wires the
    request ID middleware, the error handlers and a health check.

    Args:
        settings: Configuration (defaults to Settings())
        logger: Optional logger for failed requests

    Returns:
        Configured FastAPI application
    """
    settings = settings or Settings()

    app = FastAPI(
        title=settings.server.title,
        version=settings.server.version,
    )

    app.state.settings = settings
    app.state.redactor = Redactor(settings.redaction)

    app.add_middleware(RequestIDMiddleware)
    setup_error_handlers(
        app,
        handler=ErrorHandler(settings.environment, app.state.redactor),
        logger=logger or get_logger("api"),
    )

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        """Health check."""
        return HealthResponse(
            version=settings.server.version,
            environment=settings.environment.value,
        )

    return app
