"""In-memory virtual filesystem model.

The filesystem is a tree of immutable nodes. Mutations never modify an
existing node: they rebuild only the directories on the path from the root
to the changed entry and share every other subtree by reference. Any root
obtained earlier therefore stays a valid, unchanged snapshot.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from models.errors import ErrorKind, FilesystemError
from models.paths import base_name, normalize, parent_path, split_path


class FileNode(BaseModel):
    """A regular file holding text content.

    Args:
        kind: Always "file".
        content: The file contents.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["file"] = Field(default="file", description="Node type tag")
    content: str = Field(default="", description="File contents")


class DirectoryNode(BaseModel):
    """A directory mapping child names to nodes.

    entries is never modified after construction; changes go through
    create_directory / create_file, which build new directories.

    Args:
        kind: Always "directory".
        entries: Child nodes keyed by name. Names are unique by construction.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["directory"] = Field(default="directory", description="Node type tag")
    entries: dict[str, "FsNode"] = Field(
        default_factory=dict, description="Child nodes keyed by name"
    )


FsNode = Annotated[Union[DirectoryNode, FileNode], Field(discriminator="kind")]

DirectoryNode.model_rebuild()


class DirectoryEntry(BaseModel):
    """A single line of a directory listing.

    Args:
        name: Entry name (or the path as given, for a file listing).
        is_directory: Whether the entry is a directory.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Entry name")
    is_directory: bool = Field(description="Whether the entry is a directory")


def lookup(root: DirectoryNode, path: str) -> Optional[Union[DirectoryNode, FileNode]]:
    """Find the node at an absolute path.

    Args:
        root: Root directory of the tree to search.
        path: Absolute path.

    Returns:
        The node, or None if any segment is missing or descends through a file.
    """
    node: Union[DirectoryNode, FileNode] = root
    for segment in split_path(path):
        if not isinstance(node, DirectoryNode) or segment not in node.entries:
            return None
        node = node.entries[segment]
    return node


def _with_entry(
    directory: DirectoryNode,
    segments: list[str],
    name: str,
    node: Union[DirectoryNode, FileNode],
) -> DirectoryNode:
    """Return a copy of directory with node inserted below segments/name.

    Only directories along segments are rebuilt; siblings keep their identity.
    Callers must have checked that every segment names an existing directory.
    """
    entries = dict(directory.entries)
    if segments:
        child = entries[segments[0]]
        entries[segments[0]] = _with_entry(child, segments[1:], name, node)
    else:
        entries[name] = node
    # Contents are already validated nodes, skip revalidation to keep shared references
    return DirectoryNode.model_construct(kind="directory", entries=entries)


def _parent_directory(root: DirectoryNode, path: str) -> tuple[DirectoryNode, list[str], str]:
    """Locate the parent directory of path.

    Returns:
        Tuple of (parent directory, parent segments, child name).

    Raises:
        FilesystemError: NO_SUCH_PARENT if the parent is missing or a file.
    """
    parent = lookup(root, parent_path(path))
    if not isinstance(parent, DirectoryNode):
        raise FilesystemError(ErrorKind.NO_SUCH_PARENT, normalize(path))
    segments = split_path(path)
    return parent, segments[:-1], segments[-1]


def create_directory(root: DirectoryNode, path: str) -> DirectoryNode:
    """Create an empty directory.

    Args:
        root: Root of the current tree (left untouched).
        path: Absolute path of the directory to create.

    Returns:
        Root of the new tree.

    Raises:
        FilesystemError: NO_SUCH_PARENT if the parent does not exist or is a
            file, ALREADY_EXISTS if an entry with that name exists.
    """
    if not split_path(path):
        raise FilesystemError(ErrorKind.ALREADY_EXISTS, "/")

    parent, parent_segments, name = _parent_directory(root, path)
    if name in parent.entries:
        raise FilesystemError(ErrorKind.ALREADY_EXISTS, normalize(path))

    return _with_entry(root, parent_segments, name, DirectoryNode())


def create_file(root: DirectoryNode, path: str) -> DirectoryNode:
    """Create an empty file unless an entry with that name already exists.

    Existing files are not truncated and existing directories are left alone;
    in both cases the same root object is returned.

    Args:
        root: Root of the current tree (left untouched).
        path: Absolute path of the file to create.

    Returns:
        Root of the new tree, or root itself if nothing changed.

    Raises:
        FilesystemError: NO_SUCH_PARENT if the parent does not exist or is a file.
    """
    if not split_path(path):
        return root

    parent, parent_segments, name = _parent_directory(root, path)
    if name in parent.entries:
        return root

    return _with_entry(root, parent_segments, name, FileNode())


def read_file(root: DirectoryNode, path: str) -> str:
    """Return the content of a file.

    Raises:
        FilesystemError: NOT_FOUND if missing, IS_A_DIRECTORY for directories.
    """
    node = lookup(root, path)
    if node is None:
        raise FilesystemError(ErrorKind.NOT_FOUND, normalize(path))
    if isinstance(node, DirectoryNode):
        raise FilesystemError(ErrorKind.IS_A_DIRECTORY, normalize(path))
    return node.content


def list_directory(root: DirectoryNode, path: str) -> list[DirectoryEntry]:
    """List a directory, or describe a single file.

    Directory entries are sorted by name in ascending, case-sensitive
    code point order ("A" < "b" < "c").

    Args:
        root: Root of the tree.
        path: Absolute path to list.

    Returns:
        Sorted entries of the directory, or one entry named after the file.

    Raises:
        FilesystemError: NOT_FOUND if the path does not exist.
    """
    node = lookup(root, path)
    if node is None:
        raise FilesystemError(ErrorKind.NOT_FOUND, normalize(path))
    if isinstance(node, FileNode):
        return [DirectoryEntry(name=base_name(path), is_directory=False)]
    return [
        DirectoryEntry(name=name, is_directory=isinstance(child, DirectoryNode))
        for name, child in sorted(node.entries.items())
    ]


class VirtualFilesystem(BaseModel):
    """A versioned snapshot of the virtual filesystem.

    Each mutating method returns a new VirtualFilesystem with the revision
    incremented; the instance it was called on never changes. Failed
    mutations raise before anything is built.

    Args:
        root: Root directory of this snapshot.
        revision: Number of successful mutations since the seed tree.
    """

    model_config = ConfigDict(frozen=True)

    root: DirectoryNode = Field(
        default_factory=DirectoryNode, description="Root directory of this snapshot"
    )
    revision: int = Field(
        default=0, ge=0, description="Number of successful mutations since creation"
    )

    def lookup(self, path: str) -> Optional[Union[DirectoryNode, FileNode]]:
        """Find the node at an absolute path, or None."""
        return lookup(self.root, path)

    def exists(self, path: str) -> bool:
        """Return True if something exists at path."""
        return self.lookup(path) is not None

    def is_directory(self, path: str) -> bool:
        """Return True if path names an existing directory."""
        return isinstance(self.lookup(path), DirectoryNode)

    def create_directory(self, path: str) -> "VirtualFilesystem":
        """Return a new snapshot with an empty directory at path."""
        return self._next(create_directory(self.root, path))

    def create_file(self, path: str) -> "VirtualFilesystem":
        """Return a snapshot with an empty file at path (self if it exists)."""
        new_root = create_file(self.root, path)
        if new_root is self.root:
            return self
        return self._next(new_root)

    def read_file(self, path: str) -> str:
        """Return file contents at path."""
        return read_file(self.root, path)

    def list_directory(self, path: str) -> list[DirectoryEntry]:
        """List the directory (or single file) at path."""
        return list_directory(self.root, path)

    def _next(self, new_root: DirectoryNode) -> "VirtualFilesystem":
        return VirtualFilesystem.model_construct(root=new_root, revision=self.revision + 1)

    def get_snapshot(self) -> dict[str, Any]:
        """Return the whole tree as JSON-serializable data.

        Returns:
            Dictionary with the revision and the nested node structure.
        """
        return {"revision": self.revision, "root": self.root.model_dump()}

    def validate_state(self) -> list[str]:
        """Check structural invariants of the tree.

        Checks for:
        - Entry names are non-empty and contain no "/"
        - Entry names are not "." or ".."
        - No directory object appears twice on a single root-to-leaf path

        Returns:
            List of validation error messages (empty list if valid).
        """
        issues: list[str] = []
        stack: list[tuple[str, DirectoryNode, frozenset[int]]] = [
            ("/", self.root, frozenset({id(self.root)}))
        ]
        while stack:
            path, directory, ancestors = stack.pop()
            for name, child in directory.entries.items():
                child_path = f"{path.rstrip('/')}/{name}"
                if not name or "/" in name:
                    issues.append(f"Invalid entry name {name!r} in {path}")
                elif name in (".", ".."):
                    issues.append(f"Reserved entry name {name!r} in {path}")
                if isinstance(child, DirectoryNode):
                    if id(child) in ancestors:
                        issues.append(f"Directory {child_path} is its own ancestor")
                        continue
                    stack.append((child_path, child, ancestors | {id(child)}))
        return issues

    @property
    def summary(self) -> str:
        """Return a brief summary of the tree size."""
        directories = files = 0
        stack = [self.root]
        while stack:
            directory = stack.pop()
            for child in directory.entries.values():
                if isinstance(child, DirectoryNode):
                    directories += 1
                    stack.append(child)
                else:
                    files += 1
        return f"revision {self.revision}: {directories} directories, {files} files"
