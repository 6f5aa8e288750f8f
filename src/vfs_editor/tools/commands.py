"""Tool commands and parsing of raw agent arguments.

Each command is a ``NamedTuple`` carrying exactly the fields its tag
needs. Agents send JSON-like mappings such as
``{"command": "view", "path": "/App.jsx"}``; the parse functions turn
those into command tuples or raise ``InvalidCommandError`` /
``InvalidArgumentError``.
"""
from collections.abc import Mapping
from typing import Any, NamedTuple, Optional, Union

from ..core.errors import InvalidArgumentError, InvalidCommandError


class ViewCommand(NamedTuple):
    path: str
    view_range: Optional[tuple[int, int]] = None


class CreateCommand(NamedTuple):
    path: str
    file_text: str = ""


class StrReplaceCommand(NamedTuple):
    path: str
    old_str: str = ""
    new_str: str = ""


class InsertCommand(NamedTuple):
    path: str
    insert_line: int
    new_str: str = ""


class UndoEditCommand(NamedTuple):
    path: str


class RenameCommand(NamedTuple):
    path: str
    new_path: Optional[str] = None


class DeleteCommand(NamedTuple):
    path: str


EditorCommand = Union[
    ViewCommand, CreateCommand, StrReplaceCommand, InsertCommand, UndoEditCommand
]
FileManagerCommand = Union[RenameCommand, DeleteCommand]

EDITOR_COMMANDS = {
    "view": ViewCommand,
    "create": CreateCommand,
    "str_replace": StrReplaceCommand,
    "insert": InsertCommand,
    "undo_edit": UndoEditCommand,
}

FILE_MANAGER_COMMANDS = {
    "rename": RenameCommand,
    "delete": DeleteCommand,
}


def _as_int(value: Any, field: str) -> int:
    # bool is an int subclass but never a line number
    if isinstance(value, bool):
        raise InvalidArgumentError(f"{field} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            pass
    raise InvalidArgumentError(f"{field} must be an integer, got {value!r}")


def _as_text(value: Any, field: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{field} must be a string, got {type(value).__name__}")
    return value


def _parse_view_range(value: Any) -> Optional[tuple[int, int]]:
    if value is None:
        return None
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise InvalidArgumentError(f"view_range must be [start, end], got {value!r}")
    return (_as_int(value[0], "view_range start"), _as_int(value[1], "view_range end"))


def _require_path(arguments: Mapping[str, Any], command: str) -> str:
    path = arguments.get("path")
    if not isinstance(path, str) or not path:
        raise InvalidArgumentError(f"path is required for {command} command")
    return path


def _command_tag(arguments: Any) -> str:
    if not isinstance(arguments, Mapping):
        raise InvalidCommandError(
            f"Tool arguments must be a mapping, got {type(arguments).__name__}"
        )
    command = arguments.get("command")
    if not isinstance(command, str):
        raise InvalidCommandError(f"Invalid command: {command}")
    return command


def parse_editor_command(arguments: Mapping[str, Any]) -> EditorCommand:
    """Build an editor command from raw tool arguments.

    Args:
        arguments: Mapping with a ``command`` tag and its parameters

    Returns:
        Command tuple for the tag

    Raises:
        InvalidCommandError: If the tag is missing or unknown
        InvalidArgumentError: If a required parameter is missing or malformed
    """
    command = _command_tag(arguments)
    if command not in EDITOR_COMMANDS:
        raise InvalidCommandError(f"Invalid command: {command}")

    path = _require_path(arguments, command)

    if command == "view":
        return ViewCommand(path, _parse_view_range(arguments.get("view_range")))
    if command == "create":
        return CreateCommand(path, _as_text(arguments.get("file_text"), "file_text"))
    if command == "str_replace":
        return StrReplaceCommand(
            path,
            _as_text(arguments.get("old_str"), "old_str"),
            _as_text(arguments.get("new_str"), "new_str"),
        )
    if command == "insert":
        if arguments.get("insert_line") is None:
            raise InvalidArgumentError("insert_line is required for insert command")
        return InsertCommand(
            path,
            _as_int(arguments["insert_line"], "insert_line"),
            _as_text(arguments.get("new_str"), "new_str"),
        )
    return UndoEditCommand(path)


def parse_file_manager_command(arguments: Mapping[str, Any]) -> FileManagerCommand:
    """Build a file manager command from raw tool arguments.

    A missing ``new_path`` is left as None: the tool reports it.

    Raises:
        InvalidCommandError: If the tag is missing or unknown
        InvalidArgumentError: If ``path`` is missing or ``new_path`` is not text
    """
    command = _command_tag(arguments)
    if command not in FILE_MANAGER_COMMANDS:
        raise InvalidCommandError(f"Invalid command: {command}")

    path = _require_path(arguments, command)

    if command == "rename":
        new_path = arguments.get("new_path")
        if new_path is not None and not isinstance(new_path, str):
            raise InvalidArgumentError(
                f"new_path must be a string, got {type(new_path).__name__}"
            )
        return RenameCommand(path, new_path)
    return DeleteCommand(path)
