"""Command interpreter for the virtual shell.

The interpreter is a reducer: given a session state, a filesystem snapshot
and a command line it returns the next state, the next filesystem and the
output records the command produced. Builtins live in a lookup table of
handlers sharing one signature, so each can be called and tested on its own.

User mistakes never raise. Every failure becomes a single output record
flagged as an error and leaves the state and filesystem unchanged.
"""

import logging
from datetime import datetime
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from models.errors import ERROR_MESSAGES, ErrorKind, FilesystemError
from models.filesystem import DirectoryNode, VirtualFilesystem
from models.paths import resolve
from models.session import OutputRecord, Privilege, SessionState

logger = logging.getLogger(__name__)

HELP_LINES = (
    "Available commands:",
    "  help      - Show this help message",
    "  clear     - Clear the terminal screen",
    "  ls        - List directory contents",
    "  cd <dir>  - Change current directory",
    "  pwd       - Print working directory",
    "  mkdir     - Create a new directory",
    "  touch     - Create an empty file",
    "  cat <file>- Concatenate and print files",
    "  echo      - Write arguments to standard output",
    "  whoami    - Print effective userid",
    "  su        - Switch to root user",
    "  exit      - Switch back to normal user (if root)",
    "  date      - Print current date and time",
    "  uname -a  - Print system information",
)

DATE_FORMAT = "%a %b %d %H:%M:%S %Z %Y"


class CommandResult(BaseModel):
    """Outcome of reducing one command line.

    Args:
        state: Session state after the command.
        filesystem: Filesystem snapshot after the command.
        outputs: Output records emitted by the command, in order.
    """

    model_config = ConfigDict(frozen=True)

    state: SessionState = Field(description="Session state after the command")
    filesystem: VirtualFilesystem = Field(description="Filesystem after the command")
    outputs: tuple[OutputRecord, ...] = Field(
        default=(), description="Output records emitted by the command"
    )


Handler = Callable[[SessionState, VirtualFilesystem, list[str]], CommandResult]


def _output(text: str) -> OutputRecord:
    return OutputRecord(text=text)


def _error(kind: ErrorKind, text: str) -> OutputRecord:
    return OutputRecord(text=text, is_error=True, error_kind=kind)


def parse_command_line(line: str) -> list[str]:
    """Split a command line into tokens on runs of whitespace.

    No quoting or escaping is recognized.
    """
    return line.split()


def _local_now() -> datetime:
    return datetime.now().astimezone()


class CommandInterpreter:
    """Parses command lines and dispatches them to builtin handlers.

    Example:
        interpreter = CommandInterpreter()
        result = interpreter.execute(state, filesystem, "mkdir notes")
        state, filesystem = result.state, result.filesystem

    Args:
        clock: Returns the time rendered by `date`. Defaults to local wall
            clock time.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.clock = clock or _local_now
        self._handlers: dict[str, Handler] = {
            "help": self.help,
            "clear": self.clear,
            "pwd": self.pwd,
            "whoami": self.whoami,
            "su": self.su,
            "exit": self.exit,
            "date": self.date,
            "uname": self.uname,
            "echo": self.echo,
            "ls": self.ls,
            "cd": self.cd,
            "mkdir": self.mkdir,
            "touch": self.touch,
            "cat": self.cat,
        }

    def register(self, name: str, handler: Handler) -> None:
        """Register (or replace) the handler for a command name.

        Raises:
            ValueError: If name is empty or contains whitespace.
        """
        if not name or name != name.strip() or len(name.split()) != 1:
            raise ValueError(f"Invalid command name: {name!r}")
        self._handlers[name] = handler

    def get_handler(self, name: str) -> Optional[Handler]:
        return self._handlers.get(name)

    def execute(
        self, state: SessionState, filesystem: VirtualFilesystem, line: str
    ) -> CommandResult:
        """Reduce one submitted command line.

        A blank line changes nothing. Otherwise the line is recorded in the
        command history and the transcript before the command runs, and the
        command's output records are appended after it.

        Args:
            state: Current session state.
            filesystem: Current filesystem snapshot.
            line: Raw submitted line.

        Returns:
            CommandResult with the new state, filesystem and emitted outputs.
        """
        trimmed = line.strip()
        if not trimmed:
            return CommandResult(state=state, filesystem=filesystem)

        state = state.record_command(trimmed)
        name, *args = parse_command_line(trimmed)

        handler = self.get_handler(name)
        if handler is None:
            logger.debug("Unknown command %r", name)
            result = CommandResult(
                state=state,
                filesystem=filesystem,
                outputs=(
                    _error(
                        ErrorKind.UNKNOWN_COMMAND,
                        f"{state.config.shell_name}: {name}: command not found",
                    ),
                ),
            )
        else:
            result = handler(state, filesystem, args)

        if result.filesystem.revision != filesystem.revision:
            logger.debug(
                "%s changed filesystem to revision %d", name, result.filesystem.revision
            )

        return CommandResult(
            state=result.state.append(*result.outputs),
            filesystem=result.filesystem,
            outputs=result.outputs,
        )

    # Builtins

    def help(self, state: SessionState, fs: VirtualFilesystem, args: list[str]) -> CommandResult:
        return CommandResult(
            state=state, filesystem=fs, outputs=tuple(_output(line) for line in HELP_LINES)
        )

    def clear(self, state: SessionState, fs: VirtualFilesystem, args: list[str]) -> CommandResult:
        return CommandResult(state=state.model_copy(update={"transcript": ()}), filesystem=fs)

    def pwd(self, state: SessionState, fs: VirtualFilesystem, args: list[str]) -> CommandResult:
        return CommandResult(state=state, filesystem=fs, outputs=(_output(state.current_path),))

    def whoami(self, state: SessionState, fs: VirtualFilesystem, args: list[str]) -> CommandResult:
        return CommandResult(state=state, filesystem=fs, outputs=(_output(state.identity),))

    def su(self, state: SessionState, fs: VirtualFilesystem, args: list[str]) -> CommandResult:
        return CommandResult(
            state=state.model_copy(update={"privilege": Privilege.ELEVATED}),
            filesystem=fs,
            outputs=(_output("Switched to root user."),),
        )

    def exit(self, state: SessionState, fs: VirtualFilesystem, args: list[str]) -> CommandResult:
        """Drop elevated privilege; the session itself never terminates."""
        if state.is_elevated:
            return CommandResult(
                state=state.model_copy(update={"privilege": Privilege.STANDARD}),
                filesystem=fs,
            )
        return CommandResult(
            state=state,
            filesystem=fs,
            outputs=(_output("Cannot exit. Emulator session active."),),
        )

    def date(self, state: SessionState, fs: VirtualFilesystem, args: list[str]) -> CommandResult:
        return CommandResult(
            state=state,
            filesystem=fs,
            outputs=(_output(self.clock().strftime(DATE_FORMAT)),),
        )

    def uname(self, state: SessionState, fs: VirtualFilesystem, args: list[str]) -> CommandResult:
        text = state.config.uname_full if args[:1] == ["-a"] else state.config.uname_short
        return CommandResult(state=state, filesystem=fs, outputs=(_output(text),))

    def echo(self, state: SessionState, fs: VirtualFilesystem, args: list[str]) -> CommandResult:
        return CommandResult(state=state, filesystem=fs, outputs=(_output(" ".join(args)),))

    def ls(self, state: SessionState, fs: VirtualFilesystem, args: list[str]) -> CommandResult:
        """List a directory, one record per entry, or echo a file name."""
        target = args[0] if args else "."
        path = resolve(state.current_path, target)
        try:
            entries = fs.list_directory(path)
        except FilesystemError as e:
            return CommandResult(
                state=state,
                filesystem=fs,
                outputs=(
                    _error(
                        e.kind,
                        f"ls: cannot access '{target}': {ERROR_MESSAGES[e.kind]}",
                    ),
                ),
            )

        if not fs.is_directory(path):
            return CommandResult(state=state, filesystem=fs, outputs=(_output(target),))

        outputs = tuple(
            _output(f"<dir> {entry.name}" if entry.is_directory else f"      {entry.name}")
            for entry in entries
        )
        return CommandResult(state=state, filesystem=fs, outputs=outputs)

    def cd(self, state: SessionState, fs: VirtualFilesystem, args: list[str]) -> CommandResult:
        target = args[0] if args else state.config.home_path
        new_path = resolve(state.current_path, target)
        node = fs.lookup(new_path)

        if node is None:
            kind = ErrorKind.NOT_FOUND
        elif not isinstance(node, DirectoryNode):
            kind = ErrorKind.NOT_A_DIRECTORY
        else:
            return CommandResult(
                state=state.model_copy(update={"current_path": new_path}), filesystem=fs
            )

        return CommandResult(
            state=state,
            filesystem=fs,
            outputs=(_error(kind, f"cd: {target}: {ERROR_MESSAGES[kind]}"),),
        )

    def mkdir(self, state: SessionState, fs: VirtualFilesystem, args: list[str]) -> CommandResult:
        if not args:
            return CommandResult(
                state=state,
                filesystem=fs,
                outputs=(_error(ErrorKind.MISSING_OPERAND, "mkdir: missing operand"),),
            )

        target = args[0]
        try:
            new_fs = fs.create_directory(resolve(state.current_path, target))
        except FilesystemError as e:
            return CommandResult(
                state=state,
                filesystem=fs,
                outputs=(
                    _error(
                        e.kind,
                        f"mkdir: cannot create directory '{target}': {ERROR_MESSAGES[e.kind]}",
                    ),
                ),
            )
        return CommandResult(state=state, filesystem=new_fs)

    def touch(self, state: SessionState, fs: VirtualFilesystem, args: list[str]) -> CommandResult:
        if not args:
            return CommandResult(
                state=state,
                filesystem=fs,
                outputs=(_error(ErrorKind.MISSING_OPERAND, "touch: missing file operand"),),
            )

        target = args[0]
        try:
            new_fs = fs.create_file(resolve(state.current_path, target))
        except FilesystemError as e:
            return CommandResult(
                state=state,
                filesystem=fs,
                outputs=(
                    _error(e.kind, f"touch: cannot touch '{target}': {ERROR_MESSAGES[e.kind]}"),
                ),
            )
        return CommandResult(state=state, filesystem=new_fs)

    def cat(self, state: SessionState, fs: VirtualFilesystem, args: list[str]) -> CommandResult:
        if not args:
            return CommandResult(
                state=state,
                filesystem=fs,
                outputs=(_error(ErrorKind.MISSING_OPERAND, "cat: missing operand"),),
            )

        target = args[0]
        try:
            content = fs.read_file(resolve(state.current_path, target))
        except FilesystemError as e:
            return CommandResult(
                state=state,
                filesystem=fs,
                outputs=(_error(e.kind, f"cat: {target}: {ERROR_MESSAGES[e.kind]}"),),
            )
        return CommandResult(state=state, filesystem=fs, outputs=(_output(content),))
