"""In-memory virtual file system with agent-facing editor and file manager tools."""

from .agent import AgentSession
from .core import (
    DirectoryEntry,
    DirectoryNode,
    FileNode,
    VFSError,
    VirtualFileSystem,
    load_snapshot,
    normalize_path,
    performance_monitor,
    save_snapshot,
)
from .tools import FileManagerTool, TextEditorTool, ToolResult

__version__ = "0.1.0"

__all__ = [
    # Store
    "VirtualFileSystem",
    "FileNode",
    "DirectoryNode",
    "DirectoryEntry",
    "normalize_path",
    "VFSError",
    # Snapshots
    "save_snapshot",
    "load_snapshot",
    "performance_monitor",
    # Tools
    "TextEditorTool",
    "FileManagerTool",
    "ToolResult",
    # Agent interface
    "AgentSession",
]
