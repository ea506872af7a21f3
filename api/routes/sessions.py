"""Shell session endpoints.

Provides the boundary used by a terminal front end: creating sessions,
submitting command lines, history recall, Ctrl+C, and read-only inspection
of the transcript and the virtual filesystem.
"""

from typing import Optional

from fastapi import APIRouter, Query

from api.dependencies import SessionRegistryDep, ShellSessionDep
from api.models import (
    DeleteSessionResponse,
    ExecuteRequest,
    ExecuteResponse,
    FilesystemListingResponse,
    FilesystemTreeResponse,
    InputRequest,
    InputStateResponse,
    InterruptRequest,
    SessionListResponse,
    SessionResponse,
    TranscriptResponse,
)
from models.session import SessionState

router = APIRouter(
    prefix="/sessions",
    tags=["sessions"],
)


def _input_state(state: SessionState) -> InputStateResponse:
    return InputStateResponse(
        input_buffer=state.input_buffer,
        recall_index=state.recall_index,
        prompt=state.prompt_text,
    )


# Session lifecycle


@router.post("", response_model=SessionResponse)
async def create_session(registry: SessionRegistryDep):
    """Create a new session on a fresh seed filesystem.

    Returns:
        SessionResponse: Snapshot of the new session.
    """
    session = registry.create()
    return SessionResponse(**session.get_snapshot())


@router.get("", response_model=SessionListResponse)
async def list_sessions(registry: SessionRegistryDep):
    """List the ids of all active sessions."""
    session_ids = registry.list_ids()
    return SessionListResponse(session_ids=session_ids, count=len(session_ids))


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(session: ShellSessionDep):
    """Get a complete snapshot of a session.

    Returns:
        SessionResponse: Prompt, working directory, privilege, transcript,
            command history and input line state.
    """
    return SessionResponse(**session.get_snapshot())


@router.delete("/{session_id}", response_model=DeleteSessionResponse)
async def delete_session(session: ShellSessionDep, registry: SessionRegistryDep):
    """Discard a session and its filesystem."""
    registry.delete(session.session_id)
    return DeleteSessionResponse(session_id=session.session_id)


# Line input


@router.post("/{session_id}/execute", response_model=ExecuteResponse)
async def execute_line(request: ExecuteRequest, session: ShellSessionDep):
    """Run one submitted command line.

    Command failures are not HTTP errors: they come back as output records
    flagged with is_error.

    Args:
        request: The submitted line.
        session: The target session.

    Returns:
        ExecuteResponse: Emitted outputs and the state needed to render the
            next prompt.
    """
    result = session.execute(request.line)
    state = result.state
    return ExecuteResponse(
        line=request.line.strip(),
        outputs=list(result.outputs),
        prompt=state.prompt_text,
        current_path=state.current_path,
        privilege=state.privilege.value,
        filesystem_revision=result.filesystem.revision,
        transcript_length=len(state.transcript),
    )


@router.post("/{session_id}/recall/previous", response_model=InputStateResponse)
async def recall_previous(session: ShellSessionDep):
    """Load the next older command into the input line (arrow up)."""
    return _input_state(session.recall_previous())


@router.post("/{session_id}/recall/next", response_model=InputStateResponse)
async def recall_next(session: ShellSessionDep):
    """Load the next newer command into the input line (arrow down)."""
    return _input_state(session.recall_next())


@router.post("/{session_id}/interrupt", response_model=InputStateResponse)
async def interrupt(request: InterruptRequest, session: ShellSessionDep):
    """Abort the pending input line (Ctrl+C) without running it."""
    return _input_state(session.interrupt(request.line))


@router.put("/{session_id}/input", response_model=InputStateResponse)
async def set_input(request: InputRequest, session: ShellSessionDep):
    """Replace the input line buffer."""
    return _input_state(session.set_input(request.text))


# Inspection


@router.get("/{session_id}/transcript", response_model=TranscriptResponse)
async def get_transcript(session: ShellSessionDep):
    """Get the ordered transcript records of a session."""
    records = list(session.state.transcript)
    return TranscriptResponse(records=records, count=len(records))


@router.get("/{session_id}/filesystem/tree", response_model=FilesystemTreeResponse)
async def get_filesystem_tree(session: ShellSessionDep):
    """Get the whole filesystem tree of a session."""
    snapshot = session.filesystem.get_snapshot()
    return FilesystemTreeResponse(**snapshot, summary=session.filesystem.summary)


@router.get("/{session_id}/filesystem", response_model=FilesystemListingResponse)
async def list_filesystem_path(
    session: ShellSessionDep,
    path: Optional[str] = Query(default=None, description="Path to list (default: cwd)"),
):
    """List a path resolved against the session's working directory.

    Raises:
        FilesystemError: If the path does not exist (mapped to 404).
    """
    return FilesystemListingResponse(**session.list_path(path or "."))
