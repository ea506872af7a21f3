"""Session state model.

SessionState is an immutable value: every transition returns a new state
built with model_copy, so a reducer step can be tested as a pure function
and earlier states stay available for inspection.
"""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from models.config import ShellConfig
from models.errors import ErrorKind


class Privilege(str, Enum):
    """Cosmetic privilege level of a session."""

    STANDARD = "standard"
    ELEVATED = "elevated"


class CommandRecord(BaseModel):
    """A submitted (or interrupted) command line in the transcript.

    Args:
        kind: Always "command".
        prompt_text: Prompt that was shown when the line was entered.
        text: The line itself.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["command"] = "command"
    prompt_text: str = Field(description="Prompt shown when the line was entered")
    text: str = Field(description="The submitted line")


class OutputRecord(BaseModel):
    """One output line (possibly multi-line text) produced by a command.

    Args:
        kind: Always "output".
        text: Output text.
        is_error: Whether this line reports a failure.
        error_kind: Failure kind for error lines.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["output"] = "output"
    text: str = Field(description="Output text")
    is_error: bool = Field(default=False, description="Whether this line reports a failure")
    error_kind: Optional[ErrorKind] = Field(
        default=None, description="Failure kind for error lines"
    )


TranscriptRecord = Annotated[Union[CommandRecord, OutputRecord], Field(discriminator="kind")]


class SessionState(BaseModel):
    """Complete state of one shell session, excluding the filesystem.

    Args:
        config: Static shell configuration.
        current_path: Absolute normalized path of the working directory.
        privilege: Current privilege level.
        transcript: Ordered records shown to the user.
        command_history: Previously submitted lines, oldest first.
        recall_index: Position of the recall cursor (-1 = not recalling,
            0 = newest entry).
        input_buffer: Text currently in the input line.
    """

    model_config = ConfigDict(frozen=True)

    config: ShellConfig = Field(default_factory=ShellConfig, description="Shell configuration")
    current_path: str = Field(default="/", description="Working directory")
    privilege: Privilege = Field(default=Privilege.STANDARD, description="Privilege level")
    transcript: tuple[TranscriptRecord, ...] = Field(
        default=(), description="Ordered records shown to the user"
    )
    command_history: tuple[str, ...] = Field(
        default=(), description="Previously submitted lines, oldest first"
    )
    recall_index: int = Field(default=-1, ge=-1, description="Recall cursor (-1 = inactive)")
    input_buffer: str = Field(default="", description="Text currently in the input line")

    @classmethod
    def create(cls, config: Optional[ShellConfig] = None) -> "SessionState":
        """Create the state of a fresh session.

        The session starts in the home directory with the banner lines in
        its transcript.

        Args:
            config: Shell configuration (defaults to ShellConfig()).

        Returns:
            New SessionState.
        """
        config = config or ShellConfig()
        return cls(
            config=config,
            current_path=config.home_path,
            transcript=tuple(OutputRecord(text=line) for line in config.banner),
        )

    @property
    def is_elevated(self) -> bool:
        return self.privilege == Privilege.ELEVATED

    @property
    def identity(self) -> str:
        """Name reported by whoami and shown in the prompt."""
        return self.config.root_name if self.is_elevated else self.config.user_name

    @property
    def display_path(self) -> str:
        """Working directory with the home directory shown as "~"."""
        home = self.config.home_path
        if home == "/":
            return self.current_path
        if self.current_path == home:
            return "~"
        if self.current_path.startswith(home + "/"):
            return "~" + self.current_path[len(home):]
        return self.current_path

    @property
    def prompt_text(self) -> str:
        """Prompt in the form "<identity>@<host>:<path><symbol> "."""
        symbol = "#" if self.is_elevated else "$"
        return f"{self.identity}@{self.config.host_label}:{self.display_path}{symbol} "

    def append(self, *records: Union[CommandRecord, OutputRecord]) -> "SessionState":
        """Return a state with records appended to the transcript."""
        if not records:
            return self
        return self.model_copy(update={"transcript": self.transcript + tuple(records)})

    def record_command(self, line: str) -> "SessionState":
        """Register a submitted line before it is dispatched.

        Appends the line to the command history, resets the recall cursor,
        clears the input buffer and adds a CommandRecord with the current
        prompt to the transcript.

        Args:
            line: The trimmed command line.

        Returns:
            New SessionState.
        """
        history = self.command_history + (line,)
        max_size = self.config.max_history_size
        if max_size is not None and len(history) > max_size:
            history = history[-max_size:]
        return self.model_copy(
            update={
                "command_history": history,
                "recall_index": -1,
                "input_buffer": "",
                "transcript": self.transcript
                + (CommandRecord(prompt_text=self.prompt_text, text=line),),
            }
        )

    def with_input(self, text: str) -> "SessionState":
        """Return a state with the input buffer replaced."""
        return self.model_copy(update={"input_buffer": text})

    def recall_previous(self) -> "SessionState":
        """Move the recall cursor one entry towards older commands.

        Saturates at the oldest entry; no-op when the history is empty.
        """
        if not self.command_history:
            return self
        index = min(self.recall_index + 1, len(self.command_history) - 1)
        return self.model_copy(
            update={"recall_index": index, "input_buffer": self._recalled(index)}
        )

    def recall_next(self) -> "SessionState":
        """Move the recall cursor one entry towards newer commands.

        Moving past the newest entry stops recalling and clears the input.
        """
        if self.recall_index > 0:
            index = self.recall_index - 1
            return self.model_copy(
                update={"recall_index": index, "input_buffer": self._recalled(index)}
            )
        if self.recall_index == 0:
            return self.model_copy(update={"recall_index": -1, "input_buffer": ""})
        return self

    def interrupt(self, pending_input: Optional[str] = None) -> "SessionState":
        """Abort the current input line (Ctrl+C).

        The pending line is added to the transcript with a "^C" suffix but is
        neither dispatched nor added to the command history.

        Args:
            pending_input: Text in the input line (defaults to input_buffer).

        Returns:
            New SessionState.
        """
        text = self.input_buffer if pending_input is None else pending_input
        return self.model_copy(
            update={
                "recall_index": -1,
                "input_buffer": "",
                "transcript": self.transcript
                + (CommandRecord(prompt_text=self.prompt_text, text=text + "^C"),),
            }
        )

    def _recalled(self, index: int) -> str:
        return self.command_history[len(self.command_history) - 1 - index]

    def get_snapshot(self) -> dict[str, Any]:
        """Return a JSON-serializable snapshot for API responses."""
        return {
            "current_path": self.current_path,
            "display_path": self.display_path,
            "privilege": self.privilege.value,
            "identity": self.identity,
            "prompt": self.prompt_text,
            "transcript": [record.model_dump(mode="json") for record in self.transcript],
            "command_history": list(self.command_history),
            "recall_index": self.recall_index,
            "input_buffer": self.input_buffer,
        }
