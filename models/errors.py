"""Error taxonomy for the virtual shell.

Every failure the shell can report to a user belongs to one of the
ErrorKind values below. Filesystem operations raise FilesystemError carrying
the kind; the command interpreter turns it into a single error output line.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of user-visible failure kinds."""

    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    IS_A_DIRECTORY = "is_a_directory"
    NO_SUCH_PARENT = "no_such_parent"
    ALREADY_EXISTS = "already_exists"
    MISSING_OPERAND = "missing_operand"
    UNKNOWN_COMMAND = "unknown_command"


# Text used when an error kind is rendered in a shell message
ERROR_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.NOT_FOUND: "No such file or directory",
    ErrorKind.NOT_A_DIRECTORY: "Not a directory",
    ErrorKind.IS_A_DIRECTORY: "Is a directory",
    ErrorKind.NO_SUCH_PARENT: "No such file or directory",
    ErrorKind.ALREADY_EXISTS: "File exists",
    ErrorKind.MISSING_OPERAND: "missing operand",
    ErrorKind.UNKNOWN_COMMAND: "command not found",
}


class FilesystemError(Exception):
    """Raised when a virtual filesystem operation cannot be applied.

    The filesystem is never modified when this is raised.

    Args:
        kind: Which failure occurred.
        path: The absolute path the operation was applied to.
    """

    def __init__(self, kind: ErrorKind, path: str):
        self.kind = kind
        self.path = path
        super().__init__(f"{path}: {ERROR_MESSAGES[kind]}")
