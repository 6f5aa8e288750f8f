"""Core store modules."""

from .paths import normalize_path, parent_path, base_name, join_path, ancestors, is_within
from .errors import (
    VFSError,
    PathNotFoundError,
    NotAFileError,
    NotADirError,
    AlreadyExistsError,
    RootProtectedError,
    InvalidArgumentError,
    InvalidCommandError,
    FileTooLargeError,
    InvalidSnapshotError,
)
from .nodes import FileNode, DirectoryNode, DirectoryEntry
from .store import VirtualFileSystem, detect_file_type
from .safety import (
    SafeFileOperation,
    safe_edit_context,
    PerformanceMonitor,
    performance_monitor,
)
from .snapshot import validate_snapshot, dumps_snapshot, loads_snapshot, save_snapshot, load_snapshot

__all__ = [
    # Paths
    'normalize_path',
    'parent_path',
    'base_name',
    'join_path',
    'ancestors',
    'is_within',

    # Errors
    'VFSError',
    'PathNotFoundError',
    'NotAFileError',
    'NotADirError',
    'AlreadyExistsError',
    'RootProtectedError',
    'InvalidArgumentError',
    'InvalidCommandError',
    'FileTooLargeError',
    'InvalidSnapshotError',

    # Store
    'FileNode',
    'DirectoryNode',
    'DirectoryEntry',
    'VirtualFileSystem',
    'detect_file_type',

    # Safety mechanisms
    'SafeFileOperation',
    'safe_edit_context',
    'PerformanceMonitor',
    'performance_monitor',

    # Snapshots
    'validate_snapshot',
    'dumps_snapshot',
    'loads_snapshot',
    'save_snapshot',
    'load_snapshot',
]
