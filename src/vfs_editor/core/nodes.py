"""Node types stored in the virtual file system."""
import time
from typing import NamedTuple, Optional, Union

from .paths import base_name, parent_path


class DirectoryEntry(NamedTuple):
    """Represents one child in a directory listing."""
    name: str
    is_file: bool


class FileNode:
    """A text file held in memory."""

    is_file = True

    def __init__(self, path: str, content: str = ""):
        """Initialize file node.

        Args:
            path: Normalized absolute path
            content: Initial text content
        """
        self.path = path
        self.name = base_name(path)
        self.parent_path = parent_path(path)
        self.content = content
        self.created_at = time.time()
        self.updated_at = self.created_at

    def write(self, content: str):
        """Replace content and bump the modification time."""
        self.content = content
        self.updated_at = time.time()

    def relocate(self, path: str):
        """Point this node at a new path."""
        self.path = path
        self.name = base_name(path)
        self.parent_path = parent_path(path)

    def __repr__(self) -> str:
        return f"FileNode({self.path!r}, {len(self.content)} chars)"


class DirectoryNode:
    """A directory owning its children by name."""

    is_file = False

    def __init__(self, path: str):
        """Initialize directory node.

        Args:
            path: Normalized absolute path
        """
        self.path = path
        self.name = base_name(path)
        self.parent_path = parent_path(path)
        self.children: dict[str, Node] = {}
        self.created_at = time.time()

    def relocate(self, path: str):
        """Point this node and its whole subtree at a new path."""
        pending = [(self, path)]
        while pending:
            node, new_path = pending.pop()
            node.path = new_path
            node.name = base_name(new_path)
            node.parent_path = parent_path(new_path)
            if not node.is_file:
                pending.extend(
                    (child, f"{new_path}/{name}") for name, child in node.children.items()
                )

    def entries(self) -> list[DirectoryEntry]:
        """List children in insertion order."""
        return [DirectoryEntry(name, child.is_file) for name, child in self.children.items()]

    def __repr__(self) -> str:
        return f"DirectoryNode({self.path!r}, {len(self.children)} children)"


Node = Union[FileNode, DirectoryNode]


def node_type(node: Optional[Node]) -> Optional[str]:
    """Get the snapshot type tag of a node."""
    if node is None:
        return None
    return "file" if node.is_file else "directory"
