"""Command-driven tools that mutate the virtual file system."""

from .commands import (
    CreateCommand,
    DeleteCommand,
    InsertCommand,
    RenameCommand,
    StrReplaceCommand,
    UndoEditCommand,
    ViewCommand,
    parse_editor_command,
    parse_file_manager_command,
)
from .file_manager import FileManagerTool
from .results import ToolResult
from .text_editor import TextEditorTool

__all__ = [
    "TextEditorTool",
    "FileManagerTool",
    "ToolResult",
    "ViewCommand",
    "CreateCommand",
    "StrReplaceCommand",
    "InsertCommand",
    "UndoEditCommand",
    "RenameCommand",
    "DeleteCommand",
    "parse_editor_command",
    "parse_file_manager_command",
]
