"""VTS API Client Library.

A typed Python client for the VTS (Virtual Terminal Simulator) REST API,
usable synchronously or asynchronously.

Example:
    Synchronous usage::

        from client import VTSClient

        with VTSClient(base_url="http://localhost:8000") as client:
            session = client.sessions.create()
            result = client.sessions.execute(session.session_id, "ls /sdcard")
            print([output.text for output in result.outputs])

Exports:
    VTSClient: Synchronous client for the VTS REST API.
    AsyncVTSClient: Asynchronous client for the VTS REST API.

    Exceptions:
        VTSClientError: Base exception for all client errors.
        ConnectionError: Failed to connect to the server.
        TimeoutError: Request timed out.
        APIError: Server returned an error response.
        ValidationError: Request validation failed (HTTP 422).
        NotFoundError: Resource not found (HTTP 404).
        ConflictError: State conflict (HTTP 409).
        ServerError: Server-side error (HTTP 5xx).
"""

from client._sessions import AsyncSessionsClient, SessionsClient
from client.client import AsyncVTSClient, VTSClient
from client.exceptions import (
    APIError,
    ConflictError,
    ConnectionError,
    NotFoundError,
    ServerError,
    TimeoutError,
    ValidationError,
    VTSClientError,
)
from client.models import (
    CommandRecord,
    ExecuteResponse,
    FilesystemListingResponse,
    FilesystemTreeResponse,
    HealthResponse,
    InputStateResponse,
    OutputRecord,
    SessionListResponse,
    SessionResponse,
    TranscriptResponse,
)

__all__ = [
    # Main clients
    "VTSClient",
    "AsyncVTSClient",
    # Sub-clients
    "SessionsClient",
    "AsyncSessionsClient",
    # Models
    "CommandRecord",
    "ExecuteResponse",
    "FilesystemListingResponse",
    "FilesystemTreeResponse",
    "HealthResponse",
    "InputStateResponse",
    "OutputRecord",
    "SessionListResponse",
    "SessionResponse",
    "TranscriptResponse",
    # Exceptions
    "VTSClientError",
    "ConnectionError",
    "TimeoutError",
    "APIError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "ServerError",
]
