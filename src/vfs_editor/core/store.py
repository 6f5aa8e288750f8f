"""In-memory hierarchical file store."""
import logging
from collections.abc import Iterator, Mapping
from typing import Any, Optional

from .errors import (
    AlreadyExistsError,
    FileTooLargeError,
    InvalidArgumentError,
    InvalidSnapshotError,
    NotADirError,
    NotAFileError,
    PathNotFoundError,
    RootProtectedError,
)
from .nodes import DirectoryEntry, DirectoryNode, FileNode, Node, node_type
from .paths import ROOT, ancestors, is_within, normalize_path, parent_path

logger = logging.getLogger(__name__)

DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024


class VirtualFileSystem:
    """Tree of directories and text files addressed by normalized path.

    Directories own their children by name; every node is also indexed by
    its full path so lookups never walk the tree. Parent links are plain
    path strings, so the structure holds no reference cycles.

    Failures are raised as ``VFSError`` subclasses and always leave the
    tree as it was before the call.
    """

    def __init__(self, max_file_size: Optional[int] = DEFAULT_MAX_FILE_SIZE):
        """Initialize an empty store holding only the root directory.

        Args:
            max_file_size: Maximum file length in characters (None for no limit)
        """
        self.max_file_size = max_file_size
        self.root = DirectoryNode(ROOT)
        self._nodes: dict[str, Node] = {ROOT: self.root}

    @classmethod
    def from_snapshot(
        cls,
        snapshot: Mapping[str, Mapping[str, Any]],
        max_file_size: Optional[int] = DEFAULT_MAX_FILE_SIZE,
    ) -> "VirtualFileSystem":
        """Build a store from a serialized snapshot."""
        store = cls(max_file_size=max_file_size)
        store.deserialize(snapshot)
        return store

    def __len__(self) -> int:
        return len(self._nodes) - 1

    def __contains__(self, path: str) -> bool:
        return self.exists(path)

    # Lookups

    def exists(self, path: str) -> bool:
        return normalize_path(path) in self._nodes

    def get_node(self, path: str) -> Optional[Node]:
        return self._nodes.get(normalize_path(path))

    def is_file(self, path: str) -> bool:
        node = self.get_node(path)
        return node is not None and node.is_file

    def is_directory(self, path: str) -> bool:
        node = self.get_node(path)
        return node is not None and not node.is_file

    def _require(self, path: str) -> Node:
        node = self._nodes.get(path)
        if node is None:
            raise PathNotFoundError(f"Path not found: {path}", path)
        return node

    def _require_file(self, path: str) -> FileNode:
        node = self._require(path)
        if not node.is_file:
            raise NotAFileError(f"Not a file: {path}", path)
        return node

    def _require_directory(self, path: str) -> DirectoryNode:
        node = self._require(path)
        if node.is_file:
            raise NotADirError(f"Not a directory: {path}", path)
        return node

    def _check_ancestors(self, path: str):
        """Ensure no existing ancestor of ``path`` is a file."""
        for ancestor in ancestors(path):
            node = self._nodes.get(ancestor)
            if node is None:
                # Everything below a missing ancestor is missing too
                return
            if node.is_file:
                raise NotADirError(f"Not a directory: {ancestor}", ancestor)

    def _check_size(self, path: str, content: str):
        if self.max_file_size is not None and len(content) > self.max_file_size:
            raise FileTooLargeError(
                f"File {path} ({len(content)} characters) exceeds maximum size "
                f"({self.max_file_size} characters)",
                path,
            )

    def _ensure_directory(self, path: str) -> DirectoryNode:
        """Return the directory at ``path``, creating it and its ancestors.

        Callers must have run ``_check_ancestors`` first.
        """
        parent = self.root
        for current in ancestors(path) + [path]:
            if current == ROOT:
                continue
            node = self._nodes.get(current)
            if node is None:
                node = DirectoryNode(current)
                parent.children[node.name] = node
                self._nodes[current] = node
                logger.debug(f"Created directory {current}")
            parent = node
        return parent

    # Mutations

    def create_file(self, path: str, content: str = "") -> FileNode:
        """Create a file, creating missing ancestor directories.

        Args:
            path: File path
            content: Initial content

        Returns:
            The new file node

        Raises:
            AlreadyExistsError: If a node already occupies the path
            NotADirError: If an ancestor is a file
            FileTooLargeError: If content exceeds the size limit
        """
        path = normalize_path(path)
        if path in self._nodes:
            raise AlreadyExistsError(f"Path already exists: {path}", path)
        self._check_ancestors(path)
        self._check_size(path, content)

        parent = self._ensure_directory(parent_path(path))
        file_node = FileNode(path, content)
        parent.children[file_node.name] = file_node
        self._nodes[path] = file_node

        logger.info(f"Created file {path} ({len(content)} characters)")
        return file_node

    def create_directory(self, path: str) -> DirectoryNode:
        """Create a directory and its missing ancestors.

        Creating a directory that already exists is a no-op.

        Raises:
            AlreadyExistsError: If a file occupies the path
            NotADirError: If an ancestor is a file
        """
        path = normalize_path(path)
        existing = self._nodes.get(path)
        if existing is not None:
            if existing.is_file:
                raise AlreadyExistsError(f"A file already exists at {path}", path)
            return existing

        self._check_ancestors(path)
        directory = self._ensure_directory(path)
        logger.info(f"Created directory {path}")
        return directory

    def read_file(self, path: str) -> str:
        """Read file content.

        Raises:
            PathNotFoundError: If nothing exists at the path
            NotAFileError: If the path names a directory
        """
        path = normalize_path(path)
        content = self._require_file(path).content
        logger.debug(f"Read {path} ({len(content)} characters)")
        return content

    def update_file(self, path: str, content: str):
        """Replace file content.

        Raises:
            PathNotFoundError: If nothing exists at the path
            NotAFileError: If the path names a directory
            FileTooLargeError: If content exceeds the size limit
        """
        path = normalize_path(path)
        file_node = self._require_file(path)
        self._check_size(path, content)
        file_node.write(content)
        logger.info(f"Updated file {path} ({len(content)} characters)")

    def delete_node(self, path: str):
        """Delete a file or a directory with its whole subtree.

        Raises:
            RootProtectedError: If the path is the root
            PathNotFoundError: If nothing exists at the path
        """
        path = normalize_path(path)
        if path == ROOT:
            raise RootProtectedError("Cannot delete the root directory", path)
        node = self._require(path)

        removed = [n.path for n in self._iter_subtree(node)]
        parent = self._nodes[node.parent_path]
        del parent.children[node.name]
        for removed_path in removed:
            del self._nodes[removed_path]

        logger.info(f"Deleted {path} ({len(removed)} node(s))")

    def rename_node(self, old_path: str, new_path: str):
        """Move a file or directory subtree to a new path.

        All checks run before the tree is touched. Descendants keep their
        content and relative layout.

        Raises:
            RootProtectedError: If either endpoint is the root
            PathNotFoundError: If the source does not exist
            AlreadyExistsError: If the destination is occupied
            InvalidArgumentError: If the destination lies inside the source
            NotADirError: If an ancestor of the destination is a file
        """
        old_path = normalize_path(old_path)
        new_path = normalize_path(new_path)

        if old_path == ROOT or new_path == ROOT:
            raise RootProtectedError("Cannot rename to or from the root directory", ROOT)
        node = self._require(old_path)
        if new_path in self._nodes:
            raise AlreadyExistsError(f"Path already exists: {new_path}", new_path)
        if is_within(new_path, old_path):
            raise InvalidArgumentError(
                f"Cannot move {old_path} into its own subtree: {new_path}", new_path
            )
        self._check_ancestors(new_path)

        moved = [n.path for n in self._iter_subtree(node)]
        new_parent = self._ensure_directory(parent_path(new_path))

        old_parent = self._nodes[node.parent_path]
        del old_parent.children[node.name]
        for moved_path in moved:
            del self._nodes[moved_path]

        node.relocate(new_path)
        new_parent.children[node.name] = node
        for moved_node in self._iter_subtree(node):
            self._nodes[moved_node.path] = moved_node

        logger.info(f"Renamed {old_path} to {new_path} ({len(moved)} node(s))")

    def list_directory(self, path: str = ROOT) -> list[DirectoryEntry]:
        """List immediate children in insertion order.

        Raises:
            PathNotFoundError: If nothing exists at the path
            NotADirError: If the path names a file
        """
        path = normalize_path(path)
        return self._require_directory(path).entries()

    def reset(self):
        """Drop every node except the root."""
        self.root = DirectoryNode(ROOT)
        self._nodes = {ROOT: self.root}
        logger.info("Reset file system")

    # Traversal and inspection

    def _iter_subtree(self, node: Node) -> Iterator[Node]:
        pending = [node]
        while pending:
            current = pending.pop()
            yield current
            if not current.is_file:
                pending.extend(reversed(list(current.children.values())))

    def walk(self, path: str = ROOT) -> Iterator[Node]:
        """Iterate over a subtree in pre-order, starting with the node itself."""
        yield from self._iter_subtree(self._require(normalize_path(path)))

    def get_all_files(self) -> dict[str, str]:
        """Map every file path to its content, in pre-order."""
        return {node.path: node.content for node in self.walk() if node.is_file}

    def stat(self, path: str) -> dict[str, Any]:
        """Get information about a node.

        Returns:
            Dictionary with path, type, size, line count and timestamps

        Raises:
            PathNotFoundError: If nothing exists at the path
        """
        path = normalize_path(path)
        node = self._require(path)

        if node.is_file:
            return {
                "path": path,
                "type": "file",
                "size": len(node.content),
                "lines": len(node.content.split("\n")),
                "created_at": node.created_at,
                "updated_at": node.updated_at,
                "file_type": detect_file_type(node.name),
            }

        return {
            "path": path,
            "type": "directory",
            "size": len(node.children),
            "lines": 0,
            "created_at": node.created_at,
            "updated_at": node.created_at,
            "file_type": "directory",
        }

    # Snapshot bridge

    def serialize(self) -> dict[str, dict[str, Any]]:
        """Flatten the tree into a path -> record mapping.

        Parents always precede their children. Files are recorded as
        ``{"type": "file", "content": ...}`` and directories as
        ``{"type": "directory"}``.
        """
        snapshot = {}
        for node in self.walk():
            if node.is_file:
                snapshot[node.path] = {"type": "file", "content": node.content}
            else:
                snapshot[node.path] = {"type": "directory"}
        return snapshot

    def deserialize(self, snapshot: Mapping[str, Mapping[str, Any]]):
        """Replace the current tree with the contents of a snapshot.

        The snapshot is rebuilt into a fresh tree first, so an invalid
        snapshot leaves this store untouched.

        Raises:
            InvalidSnapshotError: If a record is malformed or paths conflict
        """
        rebuilt = VirtualFileSystem(max_file_size=self.max_file_size)

        for raw_path, record in snapshot.items():
            if not isinstance(raw_path, str) or not isinstance(record, Mapping):
                raise InvalidSnapshotError(f"Invalid snapshot record for {raw_path!r}")

            kind = record.get("type")
            try:
                if kind == "directory":
                    rebuilt.create_directory(raw_path)
                elif kind == "file":
                    content = record.get("content", "")
                    if not isinstance(content, str):
                        raise InvalidSnapshotError(
                            f"File content must be text: {raw_path}", raw_path
                        )
                    rebuilt.create_file(raw_path, content)
                else:
                    raise InvalidSnapshotError(
                        f"Unknown node type {kind!r} for {raw_path}", raw_path
                    )
            except (AlreadyExistsError, NotADirError, FileTooLargeError) as e:
                raise InvalidSnapshotError(
                    f"Conflicting snapshot entry {raw_path}: {e}", raw_path
                ) from e

        self.root = rebuilt.root
        self._nodes = rebuilt._nodes
        logger.info(f"Loaded snapshot with {len(self)} node(s)")


def detect_file_type(file_name: str) -> str:
    """Detect file type based on extension."""
    suffix = ""
    if "." in file_name:
        suffix = "." + file_name.rsplit(".", 1)[1].lower()

    type_map = {
        ".md": "markdown",
        ".markdown": "markdown",
        ".txt": "text",
        ".csv": "csv",
        ".tsv": "csv",
        ".py": "python",
        ".js": "javascript",
        ".jsx": "javascript",
        ".ts": "typescript",
        ".tsx": "typescript",
        ".json": "json",
        ".xml": "xml",
        ".html": "html",
        ".css": "css",
        ".yaml": "yaml",
        ".yml": "yaml",
    }

    return type_map.get(suffix, "unknown")
