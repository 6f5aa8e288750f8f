"""Path normalization for the virtual file system."""
import re
from typing import Optional

ROOT = "/"

_SLASH_RUN = re.compile(r"/{2,}")


def normalize_path(path: Optional[str]) -> str:
    """Canonicalize a caller-supplied path.

    Ensures a single leading slash, collapses repeated slashes and drops a
    trailing slash. Segments are left as given: no ``.``/``..`` resolution
    and no percent-decoding. Never fails; ``None`` and the empty string map
    to the root.

    Args:
        path: Arbitrary path string, absolute or relative to root

    Returns:
        Normalized absolute path
    """
    if not path:
        return ROOT

    normalized = _SLASH_RUN.sub("/", path)
    if not normalized.startswith("/"):
        normalized = "/" + normalized

    if normalized != ROOT and normalized.endswith("/"):
        normalized = normalized[:-1]

    return normalized


def parent_path(path: str) -> Optional[str]:
    """Get the parent of a normalized path (None for root)."""
    if path == ROOT:
        return None
    head = path.rsplit("/", 1)[0]
    return head or ROOT


def base_name(path: str) -> str:
    """Get the last segment of a normalized path ('' for root)."""
    if path == ROOT:
        return ""
    return path.rsplit("/", 1)[1]


def join_path(parent: str, name: str) -> str:
    """Join a normalized parent path and a child name."""
    if parent == ROOT:
        return ROOT + name
    return f"{parent}/{name}"


def ancestors(path: str) -> list[str]:
    """List the ancestors of a normalized path, outermost first.

    The root and the path itself are not included, so ``/a/b/c.txt``
    yields ``['/a', '/a/b']``.
    """
    result = []
    current = parent_path(path)
    while current is not None and current != ROOT:
        result.append(current)
        current = parent_path(current)
    result.reverse()
    return result


def is_within(path: str, prefix: str) -> bool:
    """Check whether ``path`` equals ``prefix`` or lies below it."""
    if prefix == ROOT:
        return True
    return path == prefix or path.startswith(prefix + "/")
