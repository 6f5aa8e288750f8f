"""Session interface for AI agents working on a virtual file system."""
import logging
import time
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional, Union

from ..core.snapshot import Snapshot, load_snapshot, save_snapshot
from ..core.store import DEFAULT_MAX_FILE_SIZE, VirtualFileSystem
from ..tools.file_manager import FileManagerTool
from ..tools.results import ToolResult
from ..tools.text_editor import TextEditorTool

logger = logging.getLogger(__name__)


class AgentSession:
    """One request/response cycle of agent tool calls.

    The host hands in the snapshot it holds, routes the agent's tool calls
    through ``execute``, and takes back ``snapshot()`` together with the
    operation log. Agents never touch the store directly.

    A session is not thread-safe; the host must give it one caller at a time.
    """

    def __init__(
        self,
        snapshot: Optional[Mapping[str, Mapping[str, Any]]] = None,
        max_file_size: Optional[int] = DEFAULT_MAX_FILE_SIZE,
    ):
        """Initialize agent session.

        Args:
            snapshot: Serialized store to start from (None for an empty store)
            max_file_size: Maximum file length in characters

        Raises:
            InvalidSnapshotError: If the snapshot is malformed
        """
        self.file_system = VirtualFileSystem(max_file_size=max_file_size)
        if snapshot:
            self.file_system.deserialize(snapshot)

        self.text_editor_tool = TextEditorTool(self.file_system)
        self.file_manager_tool = FileManagerTool(self.file_system)
        self._tools = {
            self.text_editor_tool.name: self.text_editor_tool,
            self.file_manager_tool.name: self.file_manager_tool,
        }
        self.operation_log = []

    @classmethod
    def load(
        cls,
        file_path: Union[str, Path],
        max_file_size: Optional[int] = DEFAULT_MAX_FILE_SIZE,
    ) -> "AgentSession":
        """Start a session from a snapshot file written by ``save``."""
        return cls(load_snapshot(file_path), max_file_size=max_file_size)

    def save(self, file_path: Union[str, Path]) -> Path:
        """Persist the current snapshot as JSON."""
        return save_snapshot(file_path, self.snapshot())

    def snapshot(self) -> Snapshot:
        return self.file_system.serialize()

    def _log_operation(self, tool: str, arguments: Mapping[str, Any], result: ToolResult):
        """Maintain audit trail for agent operations."""
        self.operation_log.append(
            {
                "timestamp": time.time(),
                "tool": tool,
                "command": arguments.get("command"),
                "path": arguments.get("path"),
                "success": result.success,
                "message": result.message,
            }
        )

    def execute(self, tool_name: str, arguments: Mapping[str, Any]) -> ToolResult:
        """Run one tool call from an agent.

        Args:
            tool_name: ``str_replace_editor`` or ``file_manager``
            arguments: Raw tool arguments, including the ``command`` tag

        Returns:
            Result to hand back to the agent
        """
        if not isinstance(arguments, Mapping):
            arguments = {}

        tool = self._tools.get(tool_name)
        if tool is None:
            logger.warning(f"Agent called unknown tool {tool_name!r}")
            result = ToolResult.fail(f"Unknown tool: {tool_name}")
        else:
            result = tool.execute(arguments)

        self._log_operation(tool_name, arguments, result)
        return result

    def text_editor(self, **arguments: Any) -> ToolResult:
        """Shortcut for ``execute('str_replace_editor', arguments)``."""
        return self.execute(self.text_editor_tool.name, arguments)

    def file_manager(self, **arguments: Any) -> ToolResult:
        """Shortcut for ``execute('file_manager', arguments)``."""
        return self.execute(self.file_manager_tool.name, arguments)

    def tool_definitions(self) -> list[dict[str, Any]]:
        """Describe both tools for registration with an LLM API."""
        return [
            {
                "name": tool.name,
                "description": tool.description,
                "input_schema": tool.parameters,
            }
            for tool in self._tools.values()
        ]

    def get_operation_log(self) -> list[dict[str, Any]]:
        """Get operation log for debugging and audit purposes."""
        return self.operation_log.copy()

    def clear_operation_log(self):
        """Clear the operation log."""
        self.operation_log.clear()
