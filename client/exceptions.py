"""Exception hierarchy for the VTS API client.

Shell command failures (missing files, unknown commands, ...) are never
raised here: the server returns them as error-flagged output records. These
exceptions cover transport problems and HTTP error responses only.

Exception Hierarchy:
    VTSClientError (base)
    ├── ConnectionError - Network/connection failures
    ├── TimeoutError - Request timeout
    └── APIError - Server returned an error response
        ├── ValidationError (HTTP 422)
        ├── NotFoundError (HTTP 404)
        ├── ConflictError (HTTP 409)
        └── ServerError (HTTP 5xx)

Example:
    Handling a session that no longer exists::

        try:
            client.sessions.execute(session_id, "ls")
        except NotFoundError:
            session_id = client.sessions.create().session_id
"""

from typing import Any


class VTSClientError(Exception):
    """Base exception for all VTS client errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ConnectionError(VTSClientError):
    """Failed to connect to the VTS server.

    Attributes:
        message: Human-readable error description.
        url: The URL that failed to connect.
        cause: The underlying exception that caused the connection failure.
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.url = url
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.url:
            return f"{self.message} (url: {self.url})"
        return self.message


class TimeoutError(VTSClientError):
    """Request took longer than the configured timeout.

    Attributes:
        message: Human-readable error description.
        timeout: The timeout value in seconds.
        url: The URL that timed out.
    """

    def __init__(
        self,
        message: str,
        timeout: float | None = None,
        url: str | None = None,
    ) -> None:
        self.timeout = timeout
        self.url = url
        super().__init__(message)

    def __str__(self) -> str:
        extras = []
        if self.timeout is not None:
            extras.append(f"timeout: {self.timeout}s")
        if self.url:
            extras.append(f"url: {self.url}")
        if not extras:
            return self.message
        return f"{self.message} ({', '.join(extras)})"


class APIError(VTSClientError):
    """Server returned an HTTP error status (4xx or 5xx).

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code from the server.
        error_type: Error type/code from the response body (if available).
        details: Additional error details from the response (if available).
        response_body: Raw response body for debugging.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        error_type: str | None = None,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.error_type = error_type
        self.details = details
        self.response_body = response_body
        super().__init__(message)

    def __str__(self) -> str:
        if self.error_type:
            return f"[HTTP {self.status_code}] [{self.error_type}] {self.message}"
        return f"[HTTP {self.status_code}] {self.message}"


class ValidationError(APIError):
    """Request body failed validation (HTTP 422), e.g. a missing "line"."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=422,
            error_type="validation_error",
            details=details,
            response_body=response_body,
        )


class NotFoundError(APIError):
    """Unknown session id or path (HTTP 404).

    Attributes:
        resource_type: The type of resource that wasn't found (if known).
        resource_id: The identifier that wasn't found (if known).
    """

    def __init__(
        self,
        message: str,
        resource_type: str | None = None,
        resource_id: str | None = None,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(
            message=message,
            status_code=404,
            error_type="not_found",
            details=details,
            response_body=response_body,
        )


class ConflictError(APIError):
    """Operation conflicts with the current server state (HTTP 409)."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_type="conflict",
            details=details,
            response_body=response_body,
        )


class ServerError(APIError):
    """Server-side error (HTTP 5xx). Retried automatically when enabled."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=status_code,
            error_type="server_error",
            details=details,
            response_body=response_body,
        )
