"""Base classes for the VTS sub-clients.

Sub-clients group related endpoints (currently only /sessions/*) and share
one HTTP client owned by VTSClient or AsyncVTSClient. The helpers here
forward to that client so sub-clients only deal in paths and payloads.

This is an internal module and should not be imported directly by users.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from client._http import AsyncHTTPClient, HTTPClient


class BaseClient:
    """Base class for synchronous sub-clients.

    SessionsClient inherits from this class. Errors raised by the HTTP
    client (NotFoundError, ServerError, ...) propagate unchanged.

    Attributes:
        _http: The shared HTTP client for making requests.
    """

    def __init__(self, http_client: "HTTPClient") -> None:
        """Initialize the sub-client.

        Args:
            http_client: The HTTP client shared with the parent VTSClient.
        """
        self._http = http_client

    def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Send a GET request.

        Args:
            path: URL path relative to the base URL, e.g. "/sessions".
            params: Query parameters. None values are sent as given.

        Returns:
            The decoded JSON body.
        """
        return self._http.get(path, params=params)

    def _post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send a POST request.

        Args:
            path: URL path relative to the base URL.
            json: Request body, e.g. {"line": "ls"}.
            params: Query parameters.

        Returns:
            The decoded JSON body.
        """
        return self._http.post(path, json=json, params=params)

    def _put(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send a PUT request.

        Args:
            path: URL path relative to the base URL.
            json: Request body, e.g. {"text": "cat re"}.
            params: Query parameters.

        Returns:
            The decoded JSON body.
        """
        return self._http.put(path, json=json, params=params)

    def _delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Send a DELETE request.

        Args:
            path: URL path relative to the base URL.
            params: Query parameters.

        Returns:
            The decoded JSON body.
        """
        return self._http.delete(path, params=params)


class AsyncBaseClient:
    """Base class for asynchronous sub-clients.

    Mirrors BaseClient; every helper is a coroutine.

    Attributes:
        _http: The shared async HTTP client for making requests.
    """

    def __init__(self, http_client: "AsyncHTTPClient") -> None:
        """Initialize the sub-client.

        Args:
            http_client: The async HTTP client shared with the parent
                AsyncVTSClient.
        """
        self._http = http_client

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Send a GET request and return the decoded JSON body."""
        return await self._http.get(path, params=params)

    async def _post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send a POST request and return the decoded JSON body."""
        return await self._http.post(path, json=json, params=params)

    async def _put(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Send a PUT request and return the decoded JSON body."""
        return await self._http.put(path, json=json, params=params)

    async def _delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """Send a DELETE request and return the decoded JSON body."""
        return await self._http.delete(path, params=params)
