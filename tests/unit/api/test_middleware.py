"""Tests for REST API middleware."""

import re

import pytest
from fastapi import FastAPI
from starlette.testclient import TestClient

from redact_core.api.middleware import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    get_request_id,
    resolve_request_id,
)

GENERATED_ID = re.compile(r"[0-9a-f]{32}")


def create_test_app() -> FastAPI:
    """Create a minimal test app."""
    app = FastAPI()
    app.add_middleware(RequestIDMiddleware)

    @app.get("/test")
    async def test_endpoint() -> dict:
        return {"request_id": get_request_id()}

    return app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_test_app())


class TestRequestIDMiddleware:
    """Tests for RequestIDMiddleware."""

    def test_binds_request_id(self, client: TestClient) -> None:
        """Test a generated ID is visible inside the handler."""
        response = client.get("/test")

        assert response.status_code == 200
        assert GENERATED_ID.fullmatch(response.json()["request_id"])

    def test_adds_request_id_header(self, client: TestClient) -> None:
        """Test the response header matches the bound ID."""
        response = client.get("/test")

        assert response.headers[REQUEST_ID_HEADER] == response.json()["request_id"]

    def test_uses_provided_request_id(self, client: TestClient) -> None:
        """Test a well-formed X-Request-ID is reused."""
        custom_id = "custom-request-id-123"
        response = client.get("/test", headers={REQUEST_ID_HEADER: custom_id})

        assert response.headers[REQUEST_ID_HEADER] == custom_id
        assert response.json()["request_id"] == custom_id

    @pytest.mark.parametrize(
        "header_value",
        ["has spaces", "a" * 200, "id;drop", "{json}"],
    )
    def test_replaces_malformed_request_id(
        self, client: TestClient, header_value: str
    ) -> None:
        """Test malformed client IDs are replaced by a generated one."""
        response = client.get("/test", headers={REQUEST_ID_HEADER: header_value})

        request_id = response.json()["request_id"]
        assert GENERATED_ID.fullmatch(request_id)
        assert response.headers[REQUEST_ID_HEADER] == request_id

    def test_ids_are_unique(self, client: TestClient) -> None:
        """Test generated IDs differ between requests."""
        first = client.get("/test").json()["request_id"]
        second = client.get("/test").json()["request_id"]

        assert first != second

    def test_no_request_id_outside_request(self, client: TestClient) -> None:
        """Test the context variable is unset outside a request."""
        client.get("/test")

        assert get_request_id() is None


class TestResolveRequestID:
    """Tests for resolve_request_id."""

    @pytest.mark.parametrize("value", ["req-123", "a.b_c-D", "x" * 128])
    def test_accepts_tokens(self, value: str) -> None:
        """Test short token IDs are kept."""
        assert resolve_request_id(value) == value

    @pytest.mark.parametrize(
        "value", [None, "", "line\nbreak", "x" * 129, "trailing\n", "<script>"]
    )
    def test_rejects_other_values(self, value: str | None) -> None:
        """Test missing or malformed IDs are regenerated."""
        assert GENERATED_ID.fullmatch(resolve_request_id(value))
