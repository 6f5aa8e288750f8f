"""Result envelope returned by the tools."""
from typing import Any, NamedTuple


class ToolResult(NamedTuple):
    """Outcome of one tool command.

    Tools report failures through this value instead of raising, so a host
    can forward ``message`` verbatim to the calling agent.
    """
    success: bool
    message: str

    @classmethod
    def ok(cls, message: str) -> "ToolResult":
        return cls(True, message)

    @classmethod
    def fail(cls, message: str) -> "ToolResult":
        return cls(False, message)

    def to_dict(self) -> dict[str, Any]:
        """Render as ``{success, message}`` or ``{success, error}``."""
        if self.success:
            return {"success": True, "message": self.message}
        return {"success": False, "error": self.message}

    def __str__(self) -> str:
        return self.message
