#!/usr/bin/env python3
"""Basic usage examples for the vfs-editor library."""

import tempfile
from pathlib import Path

from vfs_editor import (
    FileManagerTool,
    TextEditorTool,
    VirtualFileSystem,
    load_snapshot,
    performance_monitor,
    save_snapshot,
)
from vfs_editor.core.errors import VFSError


def store_example():
    """Demonstrate the store API with typed errors."""
    print("=== Store Example ===")

    fs = VirtualFileSystem()
    fs.create_file("/src/App.jsx", "export default function App() {}")
    fs.create_directory("/public")

    print(f"Root contains: {[entry.name for entry in fs.list_directory('/')]}")
    print(f"App.jsx stat: {fs.stat('/src/App.jsx')}")

    try:
        fs.delete_node("/")
    except VFSError as e:
        print(f"Refused ({e.kind}): {e}")

    fs.rename_node("/src", "/app/src")
    print(f"Files after move: {list(fs.get_all_files())}")
    print()


def tools_example():
    """Demonstrate the editor and file manager tools."""
    print("=== Tools Example ===")

    fs = VirtualFileSystem()
    editor = TextEditorTool(fs)
    manager = FileManagerTool(fs)

    print(editor.execute({"command": "create", "path": "notes.txt", "file_text": "alpha\nbeta"}))
    print(editor.execute({"command": "insert", "path": "notes.txt", "insert_line": 1, "new_str": "between"}))
    print(editor.execute({"command": "str_replace", "path": "notes.txt", "old_str": "beta", "new_str": "gamma"}))
    print(editor.execute({"command": "view", "path": "notes.txt"}))
    print(editor.execute({"command": "view", "path": "notes.txt", "view_range": [2, -1]}))

    print(manager.execute({"command": "rename", "path": "notes.txt", "new_path": "docs/notes.txt"}).to_dict())
    print(manager.execute({"command": "delete", "path": "/missing"}).to_dict())
    print()


def snapshot_example():
    """Demonstrate persisting a store between sessions."""
    print("=== Snapshot Example ===")

    fs = VirtualFileSystem()
    fs.create_file("/README.md", "# Project")

    with tempfile.TemporaryDirectory() as temp_dir:
        snapshot_file = save_snapshot(Path(temp_dir) / "state.json", fs.serialize())
        restored = VirtualFileSystem.from_snapshot(load_snapshot(snapshot_file))
        print(f"Restored README: {restored.read_file('/README.md')!r}")
    print()


def performance_example():
    """Show timings recorded for tool commands."""
    print("=== Performance Stats ===")
    for operation, stats in performance_monitor.get_all_stats().items():
        print(f"{operation}: {stats['count']} call(s), avg {stats['average_time'] * 1000:.3f} ms")


if __name__ == "__main__":
    store_example()
    tools_example()
    snapshot_example()
    performance_example()
