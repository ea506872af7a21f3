"""Session sub-client for the VTS API.

This module provides SessionsClient and AsyncSessionsClient for the
/sessions/* endpoints: creating sessions, submitting lines, history recall,
Ctrl+C and filesystem inspection.

This is an internal module. Import from `client` instead.
"""

from typing import TYPE_CHECKING

from client._base import AsyncBaseClient, BaseClient
from client.models import (
    DeleteSessionResponse,
    ExecuteResponse,
    FilesystemListingResponse,
    FilesystemTreeResponse,
    InputStateResponse,
    SessionListResponse,
    SessionResponse,
    TranscriptResponse,
)

if TYPE_CHECKING:
    from client._http import AsyncHTTPClient, HTTPClient


class SessionsClient(BaseClient):
    """Synchronous client for the session endpoints (/sessions/*).

    Example:
        with VTSClient() as client:
            session = client.sessions.create()
            result = client.sessions.execute(session.session_id, "cat readme.txt")
            for output in result.outputs:
                print(output.text)
    """

    _BASE_PATH = "/sessions"

    def create(self) -> SessionResponse:
        """Create a new session on a fresh seed filesystem."""
        return SessionResponse(**self._post(self._BASE_PATH))

    def list(self) -> SessionListResponse:
        """List the ids of all active sessions."""
        return SessionListResponse(**self._get(self._BASE_PATH))

    def get(self, session_id: str) -> SessionResponse:
        """Get a complete snapshot of a session.

        Raises:
            NotFoundError: If the session does not exist.
        """
        return SessionResponse(**self._get(f"{self._BASE_PATH}/{session_id}"))

    def delete(self, session_id: str) -> DeleteSessionResponse:
        """Discard a session."""
        return DeleteSessionResponse(**self._delete(f"{self._BASE_PATH}/{session_id}"))

    def execute(self, session_id: str, line: str) -> ExecuteResponse:
        """Run one command line in a session.

        Shell errors (e.g. "No such file or directory") come back as output
        records with is_error=True, not as exceptions.

        Args:
            session_id: Target session.
            line: The line exactly as typed.

        Returns:
            Emitted outputs and the next prompt.

        Raises:
            NotFoundError: If the session does not exist.
        """
        data = self._post(f"{self._BASE_PATH}/{session_id}/execute", json={"line": line})
        return ExecuteResponse(**data)

    def recall_previous(self, session_id: str) -> InputStateResponse:
        """Load the next older command into the input line."""
        data = self._post(f"{self._BASE_PATH}/{session_id}/recall/previous")
        return InputStateResponse(**data)

    def recall_next(self, session_id: str) -> InputStateResponse:
        """Load the next newer command into the input line."""
        data = self._post(f"{self._BASE_PATH}/{session_id}/recall/next")
        return InputStateResponse(**data)

    def interrupt(self, session_id: str, line: str | None = None) -> InputStateResponse:
        """Abort the pending input line (Ctrl+C).

        Args:
            session_id: Target session.
            line: Pending input; defaults to the server-side input buffer.
        """
        data = self._post(f"{self._BASE_PATH}/{session_id}/interrupt", json={"line": line})
        return InputStateResponse(**data)

    def set_input(self, session_id: str, text: str) -> InputStateResponse:
        """Replace the input line buffer."""
        data = self._put(f"{self._BASE_PATH}/{session_id}/input", json={"text": text})
        return InputStateResponse(**data)

    def transcript(self, session_id: str) -> TranscriptResponse:
        """Get the transcript records of a session."""
        return TranscriptResponse(**self._get(f"{self._BASE_PATH}/{session_id}/transcript"))

    def filesystem(self, session_id: str, path: str | None = None) -> FilesystemListingResponse:
        """List a path resolved against the session's working directory.

        Raises:
            NotFoundError: If the session or the path does not exist.
        """
        data = self._get(f"{self._BASE_PATH}/{session_id}/filesystem", params={"path": path})
        return FilesystemListingResponse(**data)

    def filesystem_tree(self, session_id: str) -> FilesystemTreeResponse:
        """Get the whole filesystem tree of a session."""
        data = self._get(f"{self._BASE_PATH}/{session_id}/filesystem/tree")
        return FilesystemTreeResponse(**data)


class AsyncSessionsClient(AsyncBaseClient):
    """Asynchronous client for the session endpoints (/sessions/*).

    Example:
        async with AsyncVTSClient() as client:
            session = await client.sessions.create()
            await client.sessions.execute(session.session_id, "mkdir notes")
    """

    _BASE_PATH = "/sessions"

    async def create(self) -> SessionResponse:
        """Create a new session on a fresh seed filesystem."""
        return SessionResponse(**await self._post(self._BASE_PATH))

    async def list(self) -> SessionListResponse:
        """List the ids of all active sessions."""
        return SessionListResponse(**await self._get(self._BASE_PATH))

    async def get(self, session_id: str) -> SessionResponse:
        """Get a complete snapshot of a session."""
        return SessionResponse(**await self._get(f"{self._BASE_PATH}/{session_id}"))

    async def delete(self, session_id: str) -> DeleteSessionResponse:
        """Discard a session."""
        return DeleteSessionResponse(**await self._delete(f"{self._BASE_PATH}/{session_id}"))

    async def execute(self, session_id: str, line: str) -> ExecuteResponse:
        """Run one command line in a session."""
        data = await self._post(f"{self._BASE_PATH}/{session_id}/execute", json={"line": line})
        return ExecuteResponse(**data)

    async def recall_previous(self, session_id: str) -> InputStateResponse:
        """Load the next older command into the input line."""
        data = await self._post(f"{self._BASE_PATH}/{session_id}/recall/previous")
        return InputStateResponse(**data)

    async def recall_next(self, session_id: str) -> InputStateResponse:
        """Load the next newer command into the input line."""
        data = await self._post(f"{self._BASE_PATH}/{session_id}/recall/next")
        return InputStateResponse(**data)

    async def interrupt(self, session_id: str, line: str | None = None) -> InputStateResponse:
        """Abort the pending input line (Ctrl+C)."""
        data = await self._post(
            f"{self._BASE_PATH}/{session_id}/interrupt", json={"line": line}
        )
        return InputStateResponse(**data)

    async def set_input(self, session_id: str, text: str) -> InputStateResponse:
        """Replace the input line buffer."""
        data = await self._put(f"{self._BASE_PATH}/{session_id}/input", json={"text": text})
        return InputStateResponse(**data)

    async def transcript(self, session_id: str) -> TranscriptResponse:
        """Get the transcript records of a session."""
        data = await self._get(f"{self._BASE_PATH}/{session_id}/transcript")
        return TranscriptResponse(**data)

    async def filesystem(
        self, session_id: str, path: str | None = None
    ) -> FilesystemListingResponse:
        """List a path resolved against the session's working directory."""
        data = await self._get(
            f"{self._BASE_PATH}/{session_id}/filesystem", params={"path": path}
        )
        return FilesystemListingResponse(**data)

    async def filesystem_tree(self, session_id: str) -> FilesystemTreeResponse:
        """Get the whole filesystem tree of a session."""
        data = await self._get(f"{self._BASE_PATH}/{session_id}/filesystem/tree")
        return FilesystemTreeResponse(**data)
