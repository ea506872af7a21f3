"""Shared fixtures for API testing.

These fixtures provide a TestClient wired to a fresh SessionRegistry for
each test, ensuring test isolation.
"""

import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_session_registry
from main import app
from models.config import ShellConfig
from models.shell import SessionRegistry
from tests.fixtures.shell import fixed_clock


@pytest.fixture
def fresh_registry() -> SessionRegistry:
    """Provide a fresh SessionRegistry with default config and a fixed clock."""
    return SessionRegistry(config=ShellConfig(), clock=fixed_clock)


@pytest.fixture
def client_with_registry(fresh_registry):
    """Provide a TestClient with a fresh SessionRegistry injected.

    Uses FastAPI's dependency override system to inject the test registry
    instead of the global one.

    Yields:
        A tuple of (TestClient, SessionRegistry).

    Example:
        def test_something(client_with_registry):
            client, registry = client_with_registry
            response = client.post("/sessions")
            assert response.status_code == 200
    """
    app.dependency_overrides[get_session_registry] = lambda: fresh_registry

    client = TestClient(app, raise_server_exceptions=False)

    yield client, fresh_registry

    app.dependency_overrides.clear()


@pytest.fixture
def session_id(client_with_registry) -> str:
    """Create a session through the API and return its id."""
    client, _ = client_with_registry
    response = client.post("/sessions")
    assert response.status_code == 200, f"Failed to create session: {response.json()}"
    return response.json()["session_id"]
