"""Shell session orchestration.

ShellSession binds one SessionState and one VirtualFilesystem to a
CommandInterpreter and commits each reducer step. SessionRegistry keeps the
independent sessions served by the API.
"""

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from pydantic import BaseModel, Field, PrivateAttr

from models.config import ShellConfig
from models.filesystem import VirtualFilesystem
from models.interpreter import CommandInterpreter, CommandResult
from models.paths import resolve
from models.seed import create_seed_filesystem
from models.session import SessionState

logger = logging.getLogger(__name__)


class ShellSession(BaseModel):
    """One interactive shell session.

    The session owns the current state and filesystem snapshot and replaces
    both after every command. Operations on one session are serialized by a
    lock so a command is fully committed before the next one starts.

    Attributes:
        session_id: Unique identifier for this session.
        state: Current session state.
        filesystem: Current filesystem snapshot.
        created_at: When the session was created.
    """

    session_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    state: SessionState
    filesystem: VirtualFilesystem
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    _interpreter: CommandInterpreter = PrivateAttr()
    _lock: threading.Lock = PrivateAttr()

    def __init__(self, interpreter: Optional[CommandInterpreter] = None, **data):
        """Initialize with private attributes."""
        super().__init__(**data)
        self._interpreter = interpreter or CommandInterpreter()
        self._lock = threading.Lock()

    @classmethod
    def create(
        cls,
        config: Optional[ShellConfig] = None,
        interpreter: Optional[CommandInterpreter] = None,
        session_id: Optional[str] = None,
    ) -> "ShellSession":
        """Create a session on a fresh seed filesystem.

        Args:
            config: Shell configuration (defaults to ShellConfig()).
            interpreter: Interpreter to dispatch with (defaults to a new one).
            session_id: Explicit id (defaults to a random UUID).

        Returns:
            New ShellSession starting in the home directory.

        Raises:
            ValueError: If the configured home path runs into a seeded file.
        """
        state = SessionState.create(config)
        data: dict[str, Any] = {
            "state": state,
            "filesystem": create_seed_filesystem(state.config.home_path),
        }
        if session_id is not None:
            data["session_id"] = session_id
        return cls(interpreter=interpreter, **data)

    @property
    def interpreter(self) -> CommandInterpreter:
        return self._interpreter

    def execute(self, line: str) -> CommandResult:
        """Run one submitted line and commit its result.

        Args:
            line: The raw submitted line.

        Returns:
            The CommandResult of the reducer step.
        """
        with self._lock:
            result = self._interpreter.execute(self.state, self.filesystem, line)
            self.state = result.state
            self.filesystem = result.filesystem
        logger.debug(
            "Session %s executed %r (%d outputs)", self.session_id, line.strip(), len(result.outputs)
        )
        return result

    def recall_previous(self) -> SessionState:
        """Load the next older command into the input buffer."""
        with self._lock:
            self.state = self.state.recall_previous()
            return self.state

    def recall_next(self) -> SessionState:
        """Load the next newer command into the input buffer."""
        with self._lock:
            self.state = self.state.recall_next()
            return self.state

    def interrupt(self, pending_input: Optional[str] = None) -> SessionState:
        """Abort the pending input line without dispatching it."""
        with self._lock:
            self.state = self.state.interrupt(pending_input)
            return self.state

    def set_input(self, text: str) -> SessionState:
        """Replace the input buffer."""
        with self._lock:
            self.state = self.state.with_input(text)
            return self.state

    def list_path(self, path: str = ".") -> dict[str, Any]:
        """List a path resolved against the working directory.

        Args:
            path: Absolute or relative path.

        Returns:
            Dictionary with the resolved path and its sorted entries.

        Raises:
            FilesystemError: NOT_FOUND if the path does not exist.
        """
        resolved = resolve(self.state.current_path, path)
        entries = self.filesystem.list_directory(resolved)
        return {
            "path": resolved,
            "is_directory": self.filesystem.is_directory(resolved),
            "entries": [entry.model_dump() for entry in entries],
        }

    def get_snapshot(self) -> dict[str, Any]:
        """Return a JSON-serializable snapshot for API responses."""
        snapshot = self.state.get_snapshot()
        snapshot["session_id"] = self.session_id
        snapshot["created_at"] = self.created_at.isoformat()
        snapshot["filesystem_revision"] = self.filesystem.revision
        return snapshot


class SessionRegistry:
    """Thread-safe collection of independent shell sessions.

    Args:
        config: Configuration given to every new session.
        clock: Clock used by the `date` builtin of every new session.

    Raises:
        ValueError: If the configured home path runs into a seeded file.
    """

    def __init__(
        self,
        config: Optional[ShellConfig] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.config = config or ShellConfig()
        # Every session must be able to start in its home directory
        create_seed_filesystem(self.config.home_path)
        self.clock = clock
        self._sessions: dict[str, ShellSession] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def create(self) -> ShellSession:
        """Create and register a new session."""
        session = ShellSession.create(
            config=self.config, interpreter=CommandInterpreter(clock=self.clock)
        )
        with self._lock:
            self._sessions[session.session_id] = session
        logger.info(f"Created shell session {session.session_id}")
        return session

    def get(self, session_id: str) -> ShellSession:
        """Retrieve a session by id.

        Raises:
            KeyError: If no session has that id.
        """
        with self._lock:
            session = self._sessions.get(session_id)
        if session is None:
            logger.warning(f"Shell session {session_id} not found")
            raise KeyError(f"Session '{session_id}' not found")
        return session

    def delete(self, session_id: str) -> None:
        """Remove a session.

        Raises:
            KeyError: If no session has that id.
        """
        with self._lock:
            if session_id not in self._sessions:
                raise KeyError(f"Session '{session_id}' not found")
            del self._sessions[session_id]
        logger.info(f"Deleted shell session {session_id}")

    def list_ids(self) -> list[str]:
        """Return ids of all sessions in creation order."""
        with self._lock:
            return list(self._sessions)

    def clear(self) -> None:
        """Remove every session."""
        with self._lock:
            self._sessions.clear()
