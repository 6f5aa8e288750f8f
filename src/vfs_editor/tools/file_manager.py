"""Rename and delete tool over the virtual file system."""
import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from ..core.errors import InvalidCommandError, VFSError
from ..core.safety import performance_monitor
from ..core.store import VirtualFileSystem
from .commands import DeleteCommand, FileManagerCommand, RenameCommand, parse_file_manager_command
from .results import ToolResult

logger = logging.getLogger(__name__)

TOOL_NAME = "file_manager"

INVALID_COMMAND = "Invalid command"


class FileManagerTool:
    """Command-driven file manager for agents.

    Store failures are collapsed into one message per operation; the
    ``VirtualFileSystem`` API is where a host can tell causes apart.
    """

    name = TOOL_NAME
    description = (
        "Rename or delete files or folders in the virtual file system. "
        "Renaming also moves nodes between directories."
    )
    parameters = {
        "type": "object",
        "properties": {
            "command": {"type": "string", "enum": ["rename", "delete"]},
            "path": {"type": "string"},
            "new_path": {"type": "string"},
        },
        "required": ["command", "path"],
    }

    def __init__(self, file_system: VirtualFileSystem):
        self.file_system = file_system

    def execute(self, command: Union[FileManagerCommand, Mapping[str, Any]]) -> ToolResult:
        """Run one file manager command.

        Returns:
            Result whose ``to_dict()`` is the ``{success, message|error}`` envelope
        """
        if isinstance(command, Mapping):
            try:
                command = parse_file_manager_command(command)
            except InvalidCommandError as e:
                logger.warning(f"Rejected file manager command: {e}")
                return ToolResult.fail(INVALID_COMMAND)
            except VFSError as e:
                logger.warning(f"Rejected file manager command: {e}")
                return ToolResult.fail(str(e))

        if isinstance(command, RenameCommand):
            with performance_monitor.measure_operation(f"{TOOL_NAME}.rename"):
                return self.rename(command.path, command.new_path)
        if isinstance(command, DeleteCommand):
            with performance_monitor.measure_operation(f"{TOOL_NAME}.delete"):
                return self.delete(command.path)

        logger.warning(f"Rejected file manager command: {command!r}")
        return ToolResult.fail(INVALID_COMMAND)

    def rename(self, path: str, new_path: Optional[str] = None) -> ToolResult:
        if not new_path:
            return ToolResult.fail("new_path is required for rename command")

        try:
            self.file_system.rename_node(path, new_path)
        except VFSError as e:
            logger.warning(f"Rename {path} -> {new_path} failed: {e.kind}: {e}")
            return ToolResult.fail(f"Failed to rename {path} to {new_path}")

        return ToolResult.ok(f"Successfully renamed {path} to {new_path}")

    def delete(self, path: str) -> ToolResult:
        try:
            self.file_system.delete_node(path)
        except VFSError as e:
            logger.warning(f"Delete {path} failed: {e.kind}: {e}")
            return ToolResult.fail(f"Failed to delete {path}")

        return ToolResult.ok(f"Successfully deleted {path}")
