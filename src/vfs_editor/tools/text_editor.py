"""Line-oriented text editor tool over the virtual file system."""
import logging
from collections.abc import Mapping
from typing import Any, Union

from ..core.errors import VFSError
from ..core.safety import performance_monitor
from ..core.store import VirtualFileSystem
from .commands import (
    EDITOR_COMMANDS,
    CreateCommand,
    EditorCommand,
    InsertCommand,
    StrReplaceCommand,
    UndoEditCommand,
    ViewCommand,
    parse_editor_command,
)
from .results import ToolResult

logger = logging.getLogger(__name__)

TOOL_NAME = "str_replace_editor"

UNDO_NOT_SUPPORTED = (
    "Error: undo_edit command is not supported in this version. "
    "Use str_replace to revert changes."
)

EMPTY_DIRECTORY = "(empty directory)"


class TextEditorTool:
    """Command-driven text editor for agents.

    Every command returns a ``ToolResult`` whose message is meant to be shown
    to the agent as-is. Paths in messages are echoed exactly as the caller
    wrote them.
    """

    name = TOOL_NAME
    description = (
        "View, create and edit text files in the virtual file system. "
        "Commands: view, create, str_replace, insert, undo_edit."
    )
    parameters = {
        "type": "object",
        "properties": {
            "command": {
                "type": "string",
                "enum": ["view", "create", "str_replace", "insert", "undo_edit"],
            },
            "path": {"type": "string"},
            "file_text": {"type": "string"},
            "insert_line": {"type": "integer"},
            "new_str": {"type": "string"},
            "old_str": {"type": "string"},
            "view_range": {
                "type": "array",
                "items": {"type": "integer"},
                "minItems": 2,
                "maxItems": 2,
            },
        },
        "required": ["command", "path"],
    }

    def __init__(self, file_system: VirtualFileSystem):
        """Initialize editor tool.

        Args:
            file_system: Store the commands operate on
        """
        self.file_system = file_system
        self._handlers = {
            ViewCommand: self.view,
            CreateCommand: self.create,
            StrReplaceCommand: self.str_replace,
            InsertCommand: self.insert,
            UndoEditCommand: self.undo_edit,
        }
        self._tags = {command_type: tag for tag, command_type in EDITOR_COMMANDS.items()}

    def execute(self, command: Union[EditorCommand, Mapping[str, Any]]) -> ToolResult:
        """Run one editor command.

        Args:
            command: Command tuple, or raw agent arguments to parse

        Returns:
            Result carrying the message for the agent
        """
        if isinstance(command, Mapping):
            try:
                command = parse_editor_command(command)
            except VFSError as e:
                logger.warning(f"Rejected editor command: {e}")
                return ToolResult.fail(f"Error: {e}")

        handler = self._handlers.get(type(command))
        if handler is None:
            logger.warning(f"Rejected editor command: {command!r}")
            return ToolResult.fail(f"Error: Invalid command: {command!r}")

        with performance_monitor.measure_operation(f"{TOOL_NAME}.{self._tags[type(command)]}"):
            result = handler(*command)

        if not result.success:
            logger.warning(f"{self._tags[type(command)]} {command.path}: {result.message}")
        return result

    def view(self, path: str, view_range=None) -> ToolResult:
        """Show a file with line numbers, or list a directory.

        Out-of-range ``view_range`` values are clamped to the file. ``end``
        of -1 means the last line.
        """
        node = self.file_system.get_node(path)
        if node is None:
            return ToolResult.fail(f"File not found: {path}")

        if not node.is_file:
            entries = self.file_system.list_directory(node.path)
            if not entries:
                return ToolResult.ok(EMPTY_DIRECTORY)
            return ToolResult.ok(
                "\n".join(
                    f"[FILE] {entry.name}" if entry.is_file else f"[DIR] {entry.name}"
                    for entry in entries
                )
            )

        lines = node.content.split("\n")
        start, end = 1, len(lines)
        if view_range is not None:
            start = max(1, view_range[0])
            end = len(lines) if view_range[1] == -1 else min(view_range[1], len(lines))

        return ToolResult.ok(
            "\n".join(f"{number}\t{lines[number - 1]}" for number in range(start, end + 1))
        )

    def create(self, path: str, file_text: str = "") -> ToolResult:
        if self.file_system.exists(path):
            return ToolResult.fail(f"Error: File already exists: {path}")

        try:
            self.file_system.create_file(path, file_text)
        except VFSError as e:
            return ToolResult.fail(f"Error: {e}")

        return ToolResult.ok(f"File created: {path}")

    def _editable(self, path: str):
        """Return the file node for an edit, or a failure result."""
        node = self.file_system.get_node(path)
        if node is None:
            return None, ToolResult.fail(f"Error: File not found: {path}")
        if not node.is_file:
            return None, ToolResult.fail(f"Error: Cannot edit a directory: {path}")
        return node, None

    def str_replace(self, path: str, old_str: str = "", new_str: str = "") -> ToolResult:
        """Replace every literal occurrence of ``old_str`` with ``new_str``."""
        node, failure = self._editable(path)
        if failure:
            return failure

        count = node.content.count(old_str) if old_str else 0
        if count == 0:
            return ToolResult.fail(f'Error: String not found in file: "{old_str}"')

        try:
            self.file_system.update_file(node.path, node.content.replace(old_str, new_str))
        except VFSError as e:
            return ToolResult.fail(f"Error: {e}")

        return ToolResult.ok(f"Replaced {count} occurrence(s) of the string in {path}")

    def insert(self, path: str, insert_line: int, new_str: str = "") -> ToolResult:
        """Insert ``new_str`` as a new line after line ``insert_line``.

        Line 0 prepends; the current line count appends.
        """
        node, failure = self._editable(path)
        if failure:
            return failure

        lines = node.content.split("\n")
        if insert_line < 0 or insert_line > len(lines):
            return ToolResult.fail(
                f"Error: Invalid line number: {insert_line}. File has {len(lines)} lines."
            )

        lines.insert(insert_line, new_str)
        try:
            self.file_system.update_file(node.path, "\n".join(lines))
        except VFSError as e:
            return ToolResult.fail(f"Error: {e}")

        return ToolResult.ok(f"Text inserted at line {insert_line} in {path}")

    def undo_edit(self, path: str) -> ToolResult:
        return ToolResult.fail(UNDO_NOT_SUPPORTED)
