"""Request ID middleware.

Every request runs with an ID bound in a context variable, so error
responses and log lines can carry it without threading it through calls.
A client-supplied ``X-Request-ID`` is reused only when it is a short token;
anything else is replaced, since the value is echoed into headers and logs.
"""

import re
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

_VALID_REQUEST_ID = re.compile(r"[A-Za-z0-9._-]{1,128}")

request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)


def get_request_id() -> str | None:
    """Get the ID of the request being handled, or None outside a request."""
    return request_id_var.get()


def resolve_request_id(header_value: str | None) -> str:
    """Reuse a well-formed client ID or generate a new one.

    Args:
        header_value: Raw X-Request-ID header, if sent

    Returns:
        Request ID safe to echo back
    """
    if header_value and _VALID_REQUEST_ID.fullmatch(header_value):
        return header_value
    return uuid.uuid4().hex


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Bind a request ID for the duration of each request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))

        token = request_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
