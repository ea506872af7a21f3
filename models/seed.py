"""Fixed seed tree every new session starts from."""

from models.filesystem import DirectoryNode, VirtualFilesystem, create_directory, lookup
from models.paths import split_path

README_TEXT = (
    "Welcome to the Android Web Terminal!\n"
    "\n"
    "This is a simulated bash environment.\n"
    'Type "help" to see available commands.\n'
    "Try exploring /sdcard or /system."
)

BUILD_PROP_TEXT = (
    "ro.build.version.release=14\n"
    "ro.product.model=Pixel Emulator\n"
    "ro.build.characteristics=emulator"
)

SEED_TREE: dict = {
    "kind": "directory",
    "entries": {
        "sdcard": {
            "kind": "directory",
            "entries": {
                "Download": {"kind": "directory"},
                "DCIM": {"kind": "directory"},
                "Documents": {"kind": "directory"},
            },
        },
        "system": {
            "kind": "directory",
            "entries": {
                "bin": {
                    "kind": "directory",
                    "entries": {"sh": {"kind": "file", "content": "<binary data>"}},
                },
                "etc": {"kind": "directory"},
                "build.prop": {"kind": "file", "content": BUILD_PROP_TEXT},
            },
        },
        "home": {
            "kind": "directory",
            "entries": {
                "user": {
                    "kind": "directory",
                    "entries": {"readme.txt": {"kind": "file", "content": README_TEXT}},
                },
            },
        },
        "dev": {
            "kind": "directory",
            "entries": {"null": {"kind": "file", "content": ""}},
        },
    },
}


def create_seed_root() -> DirectoryNode:
    """Build the root directory of the seed tree."""
    return DirectoryNode.model_validate(SEED_TREE)


def create_seed_filesystem(home_path: str = "/") -> VirtualFilesystem:
    """Build a revision-0 filesystem holding the seed tree.

    Directories on the way to home_path that the seed tree lacks are created
    as part of the seed, so a session can always start in its home directory.

    Args:
        home_path: Absolute home directory of the session.

    Returns:
        New VirtualFilesystem with revision 0.

    Raises:
        ValueError: If home_path, or one of its ancestors, is a seeded file.
    """
    root = create_seed_root()
    segments = split_path(home_path)
    for depth in range(1, len(segments) + 1):
        path = "/" + "/".join(segments[:depth])
        node = lookup(root, path)
        if node is None:
            root = create_directory(root, path)
        elif not isinstance(node, DirectoryNode):
            raise ValueError(f"Home path {home_path} is blocked by the file {path}")
    return VirtualFilesystem(root=root)
