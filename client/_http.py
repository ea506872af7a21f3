"""Internal HTTP handling utilities for the VTS client.

This module provides the low-level HTTP layer used by the sub-clients:
- Making HTTP requests (sync and async)
- Mapping error responses to client exceptions
- Retry with exponential backoff on transient failures

This is an internal module and should not be imported directly by users.
"""

import asyncio
import logging
import time
from typing import Any, Literal

import httpx

from client.exceptions import (
    APIError,
    ConflictError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
)

logger = logging.getLogger(__name__)

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]

# Status codes that trigger automatic retry (when retry is enabled)
RETRYABLE_STATUS_CODES = {502, 503, 504}

DEFAULT_RETRY_BACKOFF_BASE = 0.5  # seconds
DEFAULT_RETRY_BACKOFF_MAX = 30.0  # seconds


def _parse_error_response(response: httpx.Response) -> tuple[str, str | None, dict | None]:
    """Extract message, error type and details from an error response.

    Understands FastAPI's {"detail": ...} bodies (string, validation list or
    dict) and the {"error": ..., "detail": ...} bodies produced by the VTS
    exception handlers. Falls back to the raw response text.

    Args:
        response: The HTTP response to parse.

    Returns:
        A tuple of (message, error_type, details).
    """
    try:
        body = response.json()
    except ValueError:
        text = response.text.strip()
        return (text or f"HTTP {response.status_code} error"), None, None

    if not isinstance(body, dict):
        return str(body), None, None

    detail = body.get("detail")
    if isinstance(detail, str):
        return detail, body.get("type"), body.get("details")
    if isinstance(detail, list):
        messages = [
            f"{err.get('loc', ['unknown'])[-1]}: {err.get('msg', 'invalid')}"
            for err in detail
        ]
        return "; ".join(messages), "validation_error", {"errors": detail}
    if isinstance(detail, dict):
        return detail.get("message", str(detail)), detail.get("type"), detail

    for key in ("message", "error"):
        if key in body:
            return body[key], body.get("type"), body.get("details")

    return str(body), None, None


def _raise_for_status(response: httpx.Response) -> None:
    """Raise the client exception matching an error status code.

    Raises:
        ValidationError: For HTTP 422 responses.
        NotFoundError: For HTTP 404 responses.
        ConflictError: For HTTP 409 responses.
        ServerError: For HTTP 5xx responses.
        APIError: For other HTTP 4xx responses.
    """
    if response.is_success:
        return

    message, error_type, details = _parse_error_response(response)
    status_code = response.status_code

    try:
        response_body = response.json()
    except ValueError:
        response_body = response.text

    if status_code == 422:
        raise ValidationError(message=message, details=details, response_body=response_body)
    if status_code == 404:
        raise NotFoundError(message=message, details=details, response_body=response_body)
    if status_code == 409:
        raise ConflictError(message=message, details=details, response_body=response_body)
    if status_code >= 500:
        raise ServerError(
            message=message,
            status_code=status_code,
            details=details,
            response_body=response_body,
        )
    raise APIError(
        message=message,
        status_code=status_code,
        error_type=error_type,
        details=details,
        response_body=response_body,
    )


def _calculate_backoff(attempt: int, base: float = DEFAULT_RETRY_BACKOFF_BASE) -> float:
    """Return base * 2^attempt seconds, capped at DEFAULT_RETRY_BACKOFF_MAX."""
    return min(base * (2 ** attempt), DEFAULT_RETRY_BACKOFF_MAX)


def _clean_params(params: dict[str, Any] | None) -> dict[str, Any] | None:
    if not params:
        return params
    return {k: v for k, v in params.items() if v is not None}


def _handle_response(response: httpx.Response) -> Any:
    _raise_for_status(response)
    if response.content:
        return response.json()
    return None


def _transport_error(exc: httpx.HTTPError, url: str, timeout: float) -> Exception:
    """Translate an httpx transport exception into a client exception."""
    if isinstance(exc, httpx.TimeoutException):
        return TimeoutError(message=f"Request to {url} timed out", timeout=timeout, url=url)
    return ConnectionError(message=f"Failed to connect to {url}", url=url, cause=exc)


class HTTPClient:
    """Synchronous HTTP client for the VTS API.

    Wraps httpx.Client with error mapping and optional retry.

    Attributes:
        base_url: The base URL for all API requests.
        timeout: Request timeout in seconds.
        retry_enabled: Whether to retry on transient failures.
        max_retries: Maximum number of retry attempts.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_enabled = retry_enabled
        self.max_retries = max_retries

        self._client = httpx.Client(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    def close(self) -> None:
        """Close the HTTP client and release resources."""
        self._client.close()

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Make an HTTP request and return the parsed JSON response.

        Args:
            method: The HTTP method.
            path: The URL path (appended to base_url).
            params: Query parameters; None values are dropped.
            json: JSON body to send with the request.

        Returns:
            The parsed JSON response body, or None for empty responses.

        Raises:
            ConnectionError: If the connection fails.
            TimeoutError: If the request times out.
            APIError: If the server returns an error response.
        """
        url = f"{self.base_url}{path}"
        params = _clean_params(params)
        attempts = self.max_retries + 1 if self.retry_enabled else 1

        for attempt in range(attempts):
            is_last = attempt >= attempts - 1
            try:
                response = self._client.request(method=method, url=path, params=params, json=json)
            except (httpx.ConnectError, httpx.TimeoutException) as e:
                if is_last:
                    raise _transport_error(e, url, self.timeout) from e
                logger.debug(f"{method} {url} failed ({e}); retrying")
                time.sleep(_calculate_backoff(attempt))
                continue

            if self.retry_enabled and response.status_code in RETRYABLE_STATUS_CODES and not is_last:
                logger.debug(f"{method} {url} returned {response.status_code}; retrying")
                time.sleep(_calculate_backoff(attempt))
                continue

            return _handle_response(response)

        raise RuntimeError("Unexpected error in request retry loop")

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("GET", path, params=params)

    def post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return self.request("POST", path, params=params, json=json)

    def put(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return self.request("PUT", path, params=params, json=json)

    def delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self.request("DELETE", path, params=params)


class AsyncHTTPClient:
    """Asynchronous HTTP client for the VTS API.

    Wraps httpx.AsyncClient with the same error mapping and retry policy as
    HTTPClient.

    Attributes:
        base_url: The base URL for all API requests.
        timeout: Request timeout in seconds.
        retry_enabled: Whether to retry on transient failures.
        max_retries: Maximum number of retry attempts.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        retry_enabled: bool = False,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.retry_enabled = retry_enabled
        self.max_retries = max_retries

        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client and release resources."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(
        self,
        method: HttpMethod,
        path: str,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Make an async HTTP request and return the parsed JSON response.

        See HTTPClient.request for the error and retry behavior.
        """
        url = f"{self.base_url}{path}"
        params = _clean_params(params)
        attempts = self.max_retries + 1 if self.retry_enabled else 1

        for attempt in range(attempts):
            is_last = attempt >= attempts - 1
            try:
                response = await self._client.request(
                    method=method, url=path, params=params, json=json
                )
            except (httpx.ConnectError, httpx.TimeoutException) as e:
                if is_last:
                    raise _transport_error(e, url, self.timeout) from e
                logger.debug(f"{method} {url} failed ({e}); retrying")
                await asyncio.sleep(_calculate_backoff(attempt))
                continue

            if self.retry_enabled and response.status_code in RETRYABLE_STATUS_CODES and not is_last:
                logger.debug(f"{method} {url} returned {response.status_code}; retrying")
                await asyncio.sleep(_calculate_backoff(attempt))
                continue

            return _handle_response(response)

        raise RuntimeError("Unexpected error in request retry loop")

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self.request("POST", path, params=params, json=json)

    async def put(
        self,
        path: str,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self.request("PUT", path, params=params, json=json)

    async def delete(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("DELETE", path, params=params)
