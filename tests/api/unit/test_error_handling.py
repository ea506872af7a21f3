"""Unit tests for API error handling.

Tests for custom exception classes and exception handlers. These tests verify
that errors are properly converted to consistent JSON responses.
"""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import status
from pydantic import BaseModel, ValidationError

from api.exceptions import (
    SessionNotFoundError,
    filesystem_error_handler,
    generic_exception_handler,
    runtime_error_handler,
    session_not_found_handler,
    validation_exception_handler,
    value_error_handler,
)
from models.errors import ErrorKind, FilesystemError


def body(response) -> dict:
    return json.loads(response.body.decode())


# =============================================================================
# SessionNotFoundError Tests
# =============================================================================


class TestSessionNotFoundError:
    """Tests for SessionNotFoundError exception class."""

    def test_stores_session_id(self):
        exc = SessionNotFoundError("abc")
        assert exc.session_id == "abc"

    def test_message_contains_session_id(self):
        assert "abc" in str(SessionNotFoundError("abc"))

    def test_can_be_raised_and_caught(self):
        with pytest.raises(SessionNotFoundError) as exc_info:
            raise SessionNotFoundError("xyz")
        assert exc_info.value.session_id == "xyz"


# =============================================================================
# Exception Handler Tests
# =============================================================================


class TestSessionNotFoundHandler:
    """Tests for session_not_found_handler function."""

    async def test_returns_404(self):
        response = await session_not_found_handler(MagicMock(), SessionNotFoundError("abc"))

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.media_type == "application/json"

    async def test_body(self):
        response = await session_not_found_handler(MagicMock(), SessionNotFoundError("abc"))

        data = body(response)
        assert data["error"] == "Session Not Found"
        assert data["session_id"] == "abc"
        assert "POST /sessions" in data["suggestion"]


class TestFilesystemErrorHandler:
    """Tests for filesystem_error_handler function."""

    async def test_returns_404_with_kind(self):
        exc = FilesystemError(ErrorKind.NOT_FOUND, "/nope")

        response = await filesystem_error_handler(MagicMock(), exc)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert body(response) == {
            "error": "Path Error",
            "detail": "/nope: No such file or directory",
            "path": "/nope",
            "type": "not_found",
        }


class TestValidationExceptionHandler:
    """Tests for validation_exception_handler function."""

    async def test_returns_422_with_errors(self):
        class Model(BaseModel):
            value: int

        with pytest.raises(ValidationError) as exc_info:
            Model(value="not a number")

        response = await validation_exception_handler(MagicMock(), exc_info.value)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        data = body(response)
        assert data["error"] == "Validation Error"
        assert data["validation_errors"][0]["loc"] == ["value"]


class TestValueErrorHandler:
    """Tests for value_error_handler function."""

    async def test_returns_400(self):
        response = await value_error_handler(MagicMock(), ValueError("bad value"))

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert body(response)["detail"] == "bad value"


class TestRuntimeErrorHandler:
    """Tests for runtime_error_handler function."""

    async def test_returns_500(self):
        response = await runtime_error_handler(MagicMock(), RuntimeError("not ready"))

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert body(response)["detail"] == "not ready"


class TestGenericExceptionHandler:
    """Tests for generic_exception_handler function."""

    async def test_hides_details(self):
        request = MagicMock()
        request.method = "GET"
        request.url.path = "/sessions"

        response = await generic_exception_handler(request, KeyError("secret"))

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        data = body(response)
        assert data["detail"] == "An unexpected error occurred"
        assert data["type"] == "KeyError"
        assert "secret" not in response.body.decode()


# =============================================================================
# Application Wiring Tests
# =============================================================================


class TestApplicationErrors:
    """Tests that errors raised inside routes reach the handlers."""

    def test_uninitialized_registry_returns_500(self):
        """Test that using the API without a registry reports a runtime error."""
        from fastapi.testclient import TestClient

        import api.dependencies as deps
        from main import app

        original = deps._session_registry
        deps._session_registry = None
        try:
            client = TestClient(app, raise_server_exceptions=False)
            response = client.get("/sessions")
        finally:
            deps._session_registry = original

        assert response.status_code == 500
        assert response.json()["error"] == "Runtime Error"

    def test_root_and_health(self, client_with_registry):
        client, _ = client_with_registry

        assert client.get("/health").json() == {"status": "healthy"}
        assert client.get("/").json()["docs_url"] == "/docs"
