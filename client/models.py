"""Client response models for the VTS API client.

This module re-exports the wire models from the API layer and defines the
client-specific models that don't exist there.
"""

from pydantic import BaseModel, Field

# Re-export common models from API layer for client convenience
from api.models import (
    DeleteSessionResponse,
    ErrorResponse,
    ExecuteResponse,
    FilesystemListingResponse,
    FilesystemTreeResponse,
    InputStateResponse,
    SessionListResponse,
    SessionResponse,
    TranscriptResponse,
)
from models.session import CommandRecord, OutputRecord

__all__ = [
    # Re-exported from api.models
    "DeleteSessionResponse",
    "ErrorResponse",
    "ExecuteResponse",
    "FilesystemListingResponse",
    "FilesystemTreeResponse",
    "InputStateResponse",
    "SessionListResponse",
    "SessionResponse",
    "TranscriptResponse",
    # Transcript records
    "CommandRecord",
    "OutputRecord",
    # Client-specific models
    "HealthResponse",
    "ServiceInfoResponse",
]


class HealthResponse(BaseModel):
    """Response model for the health check endpoint.

    Attributes:
        status: "healthy" when the server is up.
    """

    status: str = Field(..., description="Server health status")


class ServiceInfoResponse(BaseModel):
    """Response model for the root endpoint.

    Attributes:
        message: Welcome message.
        version: Server version.
        docs_url: Path of the interactive API docs.
    """

    message: str
    version: str
    docs_url: str
