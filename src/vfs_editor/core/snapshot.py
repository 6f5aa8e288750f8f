"""Snapshot validation, JSON encoding and file persistence.

A snapshot is the flat ``path -> record`` mapping produced by
``VirtualFileSystem.serialize``. It is the only form in which a store
leaves a session, so hosts embed it in request bodies or write it to disk
with ``save_snapshot``.
"""
import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Union

from .errors import InvalidSnapshotError
from .safety import safe_edit_context

logger = logging.getLogger(__name__)

Snapshot = dict[str, dict[str, Any]]


def validate_snapshot(snapshot: Any) -> Snapshot:
    """Check the shape of a snapshot without building a store.

    Returns:
        The snapshot as a plain dict

    Raises:
        InvalidSnapshotError: If the mapping or any record is malformed
    """
    if not isinstance(snapshot, Mapping):
        raise InvalidSnapshotError(
            f"Snapshot must be a mapping, got {type(snapshot).__name__}"
        )

    validated = {}
    for path, record in snapshot.items():
        if not isinstance(path, str):
            raise InvalidSnapshotError(f"Snapshot path must be text: {path!r}")
        if not isinstance(record, Mapping):
            raise InvalidSnapshotError(f"Snapshot record must be a mapping: {path}", path)

        kind = record.get("type")
        if kind == "file":
            content = record.get("content", "")
            if not isinstance(content, str):
                raise InvalidSnapshotError(f"File content must be text: {path}", path)
            validated[path] = {"type": "file", "content": content}
        elif kind == "directory":
            validated[path] = {"type": "directory"}
        else:
            raise InvalidSnapshotError(f"Unknown node type {kind!r} for {path}", path)

    return validated


def dumps_snapshot(snapshot: Mapping[str, Mapping[str, Any]], indent: int = 2) -> str:
    """Encode a snapshot as JSON, keeping path order."""
    return json.dumps(validate_snapshot(snapshot), ensure_ascii=False, indent=indent)


def loads_snapshot(text: str) -> Snapshot:
    """Decode and validate a JSON snapshot.

    Raises:
        InvalidSnapshotError: If the text is not JSON or not a snapshot
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidSnapshotError(f"Snapshot is not valid JSON: {e}") from e
    return validate_snapshot(data)


def save_snapshot(
    file_path: Union[str, Path],
    snapshot: Mapping[str, Mapping[str, Any]],
    timeout: float = 30,
    create_backup: bool = True,
) -> Path:
    """Write a snapshot to disk under a file lock.

    The previous snapshot is restored if the write fails.

    Args:
        file_path: Destination JSON file
        snapshot: Snapshot to persist
        timeout: Lock timeout in seconds
        create_backup: Whether to keep a rollback copy during the write

    Returns:
        Path the snapshot was written to
    """
    file_path = Path(file_path)
    text = dumps_snapshot(snapshot)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with safe_edit_context(file_path, timeout=timeout, create_backup=create_backup) as safe_op:
        safe_op.write_text(text)

    logger.info(f"Saved snapshot with {len(snapshot)} entries to {file_path}")
    return file_path


def load_snapshot(file_path: Union[str, Path], timeout: float = 30) -> Snapshot:
    """Read a snapshot from disk under the same lock ``save_snapshot`` uses.

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidSnapshotError: If the file does not hold a snapshot
    """
    file_path = Path(file_path)
    with safe_edit_context(file_path, timeout=timeout, create_backup=False):
        text = file_path.read_text(encoding="utf-8")

    snapshot = loads_snapshot(text)
    logger.debug(f"Loaded snapshot with {len(snapshot)} entries from {file_path}")
    return snapshot
