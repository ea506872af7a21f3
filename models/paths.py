"""Path normalization and resolution for the virtual filesystem.

All functions here are pure and total: any input string produces a valid
absolute path. Whether the path exists is checked separately by lookup.
"""


def split_path(path: str) -> list[str]:
    """Return the segments of a path after normalization.

    Args:
        path: Any path string.

    Returns:
        List of non-empty segments, e.g. ["home", "user"] for "/home/user".
        The root path yields an empty list.
    """
    segments: list[str] = []
    for part in path.split("/"):
        if not part or part == ".":
            continue
        if part == "..":
            # Popping past the root is silently ignored
            if segments:
                segments.pop()
        else:
            segments.append(part)
    return segments


def normalize(path: str) -> str:
    """Normalize a path into its absolute canonical form.

    Empty segments and "." are dropped, ".." removes the previous segment.

    Examples:
        normalize("/home//user/./docs/..") -> "/home/user"
        normalize("../../..") -> "/"

    Args:
        path: Any path string.

    Returns:
        Absolute normalized path starting with "/".
    """
    return "/" + "/".join(split_path(path))


def resolve(current_path: str, target: str) -> str:
    """Resolve a target path against the current working directory.

    Args:
        current_path: Absolute path of the current directory.
        target: Absolute or relative path typed by the user.

    Returns:
        Absolute normalized path.
    """
    if target.startswith("/"):
        return normalize(target)
    if current_path == "/":
        return normalize(f"/{target}")
    return normalize(f"{current_path}/{target}")


def parent_path(path: str) -> str:
    """Return the normalized parent of a path ("/" is its own parent)."""
    return normalize(f"{path}/..")


def base_name(path: str) -> str:
    """Return the last segment of a normalized path ("" for the root)."""
    segments = split_path(path)
    return segments[-1] if segments else ""
