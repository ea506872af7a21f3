"""Main VTS client classes.

This module provides the entry points for talking to the VTS API:
- VTSClient: Synchronous client
- AsyncVTSClient: Asynchronous client

Both expose the session endpoints through the `sessions` sub-client.

Example:
    Synchronous usage::

        from client import VTSClient

        with VTSClient(base_url="http://localhost:8000") as client:
            session = client.sessions.create()
            client.sessions.execute(session.session_id, "mkdir notes")
            listing = client.sessions.filesystem(session.session_id)

    Asynchronous usage::

        from client import AsyncVTSClient

        async with AsyncVTSClient() as client:
            session = await client.sessions.create()
            await client.sessions.execute(session.session_id, "pwd")
"""

from typing import Any

from client._http import AsyncHTTPClient, HTTPClient
from client._sessions import AsyncSessionsClient, SessionsClient
from client.models import HealthResponse, ServiceInfoResponse


class VTSClient:
    """Synchronous client for the VTS REST API.

    Attributes:
        base_url: The base URL of the VTS server.
        timeout: Request timeout in seconds.
        retry_enabled: Whether automatic retry is enabled.
        max_retries: Maximum number of retry attempts.

    Example:
        Manual lifecycle management::

            client = VTSClient()
            try:
                session = client.sessions.create()
            finally:
                client.close()
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: Any = None,
    ) -> None:
        """Initialize the VTS client.

        Args:
            base_url: The base URL of the VTS server.
            timeout: Request timeout in seconds.
            retry_enabled: Whether to retry on connection errors, timeouts
                and HTTP 502/503/504, with exponential backoff.
            max_retries: Maximum number of retry attempts when retry is enabled.
            transport: Custom HTTP transport (e.g., ASGITransport for testing).
        """
        self._http = HTTPClient(
            base_url=base_url,
            timeout=timeout,
            retry_enabled=retry_enabled,
            max_retries=max_retries,
            transport=transport,
        )
        self._sessions: SessionsClient | None = None

    def __enter__(self) -> "VTSClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()

    @property
    def base_url(self) -> str:
        return self._http.base_url

    @property
    def timeout(self) -> float:
        return self._http.timeout

    @property
    def retry_enabled(self) -> bool:
        return self._http.retry_enabled

    @property
    def max_retries(self) -> int:
        return self._http.max_retries

    @property
    def sessions(self) -> SessionsClient:
        """Sub-client for the /sessions endpoints."""
        if self._sessions is None:
            self._sessions = SessionsClient(self._http)
        return self._sessions

    def health(self) -> HealthResponse:
        """Check server health."""
        return HealthResponse(**self._http.get("/health"))

    def info(self) -> ServiceInfoResponse:
        """Get the server name and version."""
        return ServiceInfoResponse(**self._http.get("/"))


class AsyncVTSClient:
    """Asynchronous client for the VTS REST API.

    Mirrors VTSClient with awaitable methods.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: Any = None,
    ) -> None:
        self._http = AsyncHTTPClient(
            base_url=base_url,
            timeout=timeout,
            retry_enabled=retry_enabled,
            max_retries=max_retries,
            transport=transport,
        )
        self._sessions: AsyncSessionsClient | None = None

    async def __aenter__(self) -> "AsyncVTSClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()

    @property
    def base_url(self) -> str:
        return self._http.base_url

    @property
    def sessions(self) -> AsyncSessionsClient:
        """Sub-client for the /sessions endpoints."""
        if self._sessions is None:
            self._sessions = AsyncSessionsClient(self._http)
        return self._sessions

    async def health(self) -> HealthResponse:
        """Check server health."""
        return HealthResponse(**await self._http.get("/health"))

    async def info(self) -> ServiceInfoResponse:
        """Get the server name and version."""
        return ServiceInfoResponse(**await self._http.get("/"))
