"""Integration tests for the VTS API client library.

These tests run against a real VTS app instance using FastAPI's TestClient
and httpx's ASGITransport for async tests. This provides true end-to-end
testing of the client library against the actual API implementation.

To run these tests:
    uv run pytest tests/client/test_integration.py -v

Note: These tests create a fresh session registry for each test to ensure
isolation.
"""

import httpx
import pytest
from httpx import ASGITransport

from api.dependencies import initialize_session_registry, shutdown_session_registry
from client import AsyncVTSClient, NotFoundError, ValidationError, VTSClient
from main import app
from models.config import ShellConfig


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def setup_session_registry():
    """Initialize the session registry before each test.

    This fixture runs automatically for all tests in this module. It uses a
    default ShellConfig so the results don't depend on VTS_* variables.
    """
    initialize_session_registry(ShellConfig())
    yield
    shutdown_session_registry()


@pytest.fixture
def sync_client():
    """Create a synchronous VTS client connected to the test app.

    The TestClient from FastAPI/Starlette wraps the ASGI app for synchronous
    use; a small transport adapts it to httpx.
    """
    from starlette.testclient import TestClient

    test_client = TestClient(app, raise_server_exceptions=False)

    class SyncTestTransport(httpx.BaseTransport):
        def handle_request(self, request: httpx.Request) -> httpx.Response:
            response = test_client.request(
                method=request.method,
                url=str(request.url.path),
                params=dict(request.url.params) if request.url.params else None,
                content=request.content,
                headers=dict(request.headers),
            )
            return httpx.Response(
                status_code=response.status_code,
                headers=response.headers,
                content=response.content,
            )

    with VTSClient(base_url="http://test", transport=SyncTestTransport()) as client:
        yield client


@pytest.fixture
async def async_client():
    """Create an asynchronous VTS client connected to the test app.

    Uses httpx's ASGITransport to connect directly to the FastAPI app
    without needing an external server process.
    """
    transport = ASGITransport(app=app)
    async with AsyncVTSClient(base_url="http://test", transport=transport) as client:
        yield client


# =============================================================================
# Synchronous Client Tests
# =============================================================================


class TestServiceIntegration:
    """Integration tests for service endpoints."""

    def test_health(self, sync_client):
        assert sync_client.health().status == "healthy"

    def test_info(self, sync_client):
        info = sync_client.info()
        assert info.version == "0.1.0"
        assert info.docs_url == "/docs"


class TestSessionIntegration:
    """Integration tests for the sessions sub-client."""

    def test_session_lifecycle(self, sync_client):
        session = sync_client.sessions.create()
        assert session.prompt == "user@localhost:~$ "

        assert session.session_id in sync_client.sessions.list().session_ids

        sync_client.sessions.delete(session.session_id)

        with pytest.raises(NotFoundError):
            sync_client.sessions.get(session.session_id)

    def test_command_workflow(self, sync_client):
        session_id = sync_client.sessions.create().session_id

        assert sync_client.sessions.execute(session_id, "mkdir notes").outputs == []
        result = sync_client.sessions.execute(session_id, "cd notes")
        assert result.current_path == "/home/user/notes"
        assert result.prompt == "user@localhost:~/notes$ "

        sync_client.sessions.execute(session_id, "cd ..")
        listing = sync_client.sessions.execute(session_id, "ls")

        assert [output.text for output in listing.outputs] == ["<dir> notes", "      readme.txt"]

    def test_shell_errors_are_not_exceptions(self, sync_client):
        session_id = sync_client.sessions.create().session_id

        result = sync_client.sessions.execute(session_id, "cat /system")

        assert result.outputs[0].is_error
        assert result.outputs[0].text == "cat: /system: Is a directory"

    def test_recall_and_interrupt(self, sync_client):
        session_id = sync_client.sessions.create().session_id
        sync_client.sessions.execute(session_id, "whoami")

        assert sync_client.sessions.recall_previous(session_id).input_buffer == "whoami"
        state = sync_client.sessions.interrupt(session_id)

        assert state.input_buffer == ""
        transcript = sync_client.sessions.transcript(session_id)
        assert transcript.records[-1].text == "whoami^C"

    def test_set_input(self, sync_client):
        session_id = sync_client.sessions.create().session_id
        assert sync_client.sessions.set_input(session_id, "ls /s").input_buffer == "ls /s"

    def test_filesystem_inspection(self, sync_client):
        session_id = sync_client.sessions.create().session_id

        listing = sync_client.sessions.filesystem(session_id, "/sdcard")
        tree = sync_client.sessions.filesystem_tree(session_id)

        assert [entry["name"] for entry in listing.entries] == ["DCIM", "Documents", "Download"]
        assert tree.revision == 0

    def test_missing_path_raises_not_found(self, sync_client):
        session_id = sync_client.sessions.create().session_id

        with pytest.raises(NotFoundError):
            sync_client.sessions.filesystem(session_id, "/nope")

    def test_unknown_session_raises_not_found(self, sync_client):
        with pytest.raises(NotFoundError):
            sync_client.sessions.execute("missing", "pwd")


class TestHTTPErrorMapping:
    """Integration tests for raw HTTP error mapping."""

    def test_missing_line_raises_validation_error(self, sync_client):
        session_id = sync_client.sessions.create().session_id

        with pytest.raises(ValidationError):
            sync_client._http.post(f"/sessions/{session_id}/execute", json={})


# =============================================================================
# Asynchronous Client Tests
# =============================================================================


class TestAsyncIntegration:
    """Integration tests for AsyncVTSClient."""

    async def test_health(self, async_client):
        assert (await async_client.health()).status == "healthy"

    async def test_command_workflow(self, async_client):
        session = await async_client.sessions.create()

        await async_client.sessions.execute(session.session_id, "su")
        result = await async_client.sessions.execute(session.session_id, "whoami")

        assert result.outputs[0].text == "root"
        assert result.prompt == "root@localhost:~# "

    async def test_unknown_session(self, async_client):
        with pytest.raises(NotFoundError):
            await async_client.sessions.get("missing")
