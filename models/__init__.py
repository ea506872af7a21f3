"""VTS data models package.

This package contains the core of the Virtual Terminal Simulator: path
resolution, the copy-on-write virtual filesystem, session state, the
command interpreter and the session orchestration used by the API.
"""

from models.config import ShellConfig
from models.errors import ErrorKind, FilesystemError
from models.filesystem import (
    DirectoryEntry,
    DirectoryNode,
    FileNode,
    FsNode,
    VirtualFilesystem,
)
from models.interpreter import CommandInterpreter, CommandResult
from models.session import CommandRecord, OutputRecord, Privilege, SessionState
from models.shell import SessionRegistry, ShellSession

__all__ = [
    "ShellConfig",
    "ErrorKind",
    "FilesystemError",
    "DirectoryEntry",
    "DirectoryNode",
    "FileNode",
    "FsNode",
    "VirtualFilesystem",
    "CommandInterpreter",
    "CommandResult",
    "CommandRecord",
    "OutputRecord",
    "Privilege",
    "SessionState",
    "SessionRegistry",
    "ShellSession",
]
