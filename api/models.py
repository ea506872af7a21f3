"""Request and response models for the session endpoints.

These models are shared by the API routes and the client library so that
both sides agree on the wire format.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from models.session import OutputRecord, TranscriptRecord


# Request Models


class ExecuteRequest(BaseModel):
    """Request to run one submitted command line.

    Attributes:
        line: The raw line, exactly as typed.
    """

    line: str = Field(description="The raw submitted line")


class InterruptRequest(BaseModel):
    """Request to abort the pending input line (Ctrl+C).

    Attributes:
        line: Text in the input line. Defaults to the session's input buffer.
    """

    line: Optional[str] = Field(
        default=None, description="Pending input (defaults to the session input buffer)"
    )


class InputRequest(BaseModel):
    """Request to replace the session's input buffer.

    Attributes:
        text: New input buffer content.
    """

    text: str = Field(description="New input buffer content")


# Response Models


class SessionResponse(BaseModel):
    """Complete snapshot of a shell session.

    Attributes:
        session_id: Session identifier.
        created_at: ISO format creation timestamp.
        current_path: Absolute working directory.
        display_path: Working directory with the home directory shown as "~".
        privilege: "standard" or "elevated".
        identity: Name shown by whoami.
        prompt: Prompt text for the next line.
        transcript: Ordered transcript records.
        command_history: Previously submitted lines, oldest first.
        recall_index: Recall cursor (-1 when not recalling).
        input_buffer: Current input line.
        filesystem_revision: Filesystem revision counter.
    """

    session_id: str
    created_at: str
    current_path: str
    display_path: str
    privilege: str
    identity: str
    prompt: str
    transcript: list[TranscriptRecord]
    command_history: list[str]
    recall_index: int
    input_buffer: str
    filesystem_revision: int


class SessionListResponse(BaseModel):
    """List of active session ids.

    Attributes:
        session_ids: Ids of all sessions.
        count: Number of sessions.
    """

    session_ids: list[str]
    count: int


class DeleteSessionResponse(BaseModel):
    """Confirmation of a session deletion.

    Attributes:
        deleted: Always True.
        session_id: Id of the deleted session.
    """

    deleted: bool = True
    session_id: str


class ExecuteResponse(BaseModel):
    """Result of running one command line.

    Attributes:
        line: The submitted line.
        outputs: Output records the command emitted.
        prompt: Prompt text for the next line.
        current_path: Working directory after the command.
        privilege: Privilege level after the command.
        filesystem_revision: Filesystem revision after the command.
        transcript_length: Number of transcript records after the command.
    """

    line: str
    outputs: list[OutputRecord]
    prompt: str
    current_path: str
    privilege: str
    filesystem_revision: int
    transcript_length: int


class InputStateResponse(BaseModel):
    """Input line state after a recall, interrupt or input update.

    Attributes:
        input_buffer: Current input line.
        recall_index: Recall cursor (-1 when not recalling).
        prompt: Prompt text for the input line.
    """

    input_buffer: str
    recall_index: int
    prompt: str


class TranscriptResponse(BaseModel):
    """Transcript of a session.

    Attributes:
        records: Ordered transcript records.
        count: Number of records.
    """

    records: list[TranscriptRecord]
    count: int


class FilesystemListingResponse(BaseModel):
    """Listing of one path.

    Attributes:
        path: Resolved absolute path.
        is_directory: Whether the path is a directory.
        entries: Sorted entries (a single entry for a file).
    """

    path: str
    is_directory: bool
    entries: list[dict[str, Any]]


class FilesystemTreeResponse(BaseModel):
    """The whole filesystem tree of a session.

    Attributes:
        revision: Filesystem revision counter.
        root: Nested node structure.
        summary: Human-readable size summary.
    """

    revision: int
    root: dict[str, Any]
    summary: str


class ErrorResponse(BaseModel):
    """Standard error response body.

    Attributes:
        error: Short error title.
        detail: Human-readable description.
    """

    error: str
    detail: str
