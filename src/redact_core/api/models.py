"""REST API models."""

from typing import Any

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Error detail model."""

    code: str
    category: str
    message: str
    status_code: int
    context: Any = None
    request_id: str | None = None


class ErrorBody(BaseModel):
    """Standard error response."""

    success: bool = False
    error: ErrorDetail


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str
    environment: str
