"""Tests for the file_manager tool."""
from vfs_editor.core.store import VirtualFileSystem
from vfs_editor.tools.commands import DeleteCommand, RenameCommand
from vfs_editor.tools.file_manager import FileManagerTool


class TestToolStructure:
    """Test tool metadata."""

    def test_description_and_schema(self) -> None:
        tool = FileManagerTool(VirtualFileSystem())

        assert tool.name == "file_manager"
        assert "Rename or delete" in tool.description
        assert tool.parameters["properties"]["command"]["enum"] == ["rename", "delete"]


class TestRename:
    """Test the rename command."""

    def setup_method(self) -> None:
        self.fs = VirtualFileSystem()
        self.tool = FileManagerTool(self.fs)

    def test_rename_file(self) -> None:
        self.fs.create_file("/old.txt", "content")

        result = self.tool.execute(
            {"command": "rename", "path": "/old.txt", "new_path": "/new.txt"}
        )

        assert result.to_dict() == {
            "success": True,
            "message": "Successfully renamed /old.txt to /new.txt",
        }
        assert not self.fs.exists("/old.txt")
        assert self.fs.read_file("/new.txt") == "content"

    def test_move_into_existing_directory(self) -> None:
        self.fs.create_file("/file.txt", "content")
        self.fs.create_directory("/newdir")

        result = self.tool.execute(RenameCommand("/file.txt", "/newdir/file.txt"))

        assert result.success
        assert not self.fs.exists("/file.txt")
        assert self.fs.read_file("/newdir/file.txt") == "content"

    def test_move_creates_parent_directories(self) -> None:
        self.fs.create_file("/file.txt", "content")

        result = self.tool.execute(RenameCommand("/file.txt", "/deep/nested/dir/file.txt"))

        assert result.message == "Successfully renamed /file.txt to /deep/nested/dir/file.txt"
        assert self.fs.is_directory("/deep/nested/dir")
        assert self.fs.read_file("/deep/nested/dir/file.txt") == "content"

    def test_rename_directory(self) -> None:
        self.fs.create_file("/olddir/file.txt", "content")

        result = self.tool.execute(RenameCommand("/olddir", "/newdir"))

        assert result.message == "Successfully renamed /olddir to /newdir"
        assert not self.fs.exists("/olddir")
        assert self.fs.read_file("/newdir/file.txt") == "content"

    def test_rename_without_new_path(self) -> None:
        self.fs.create_file("/file.txt", "content")

        result = self.tool.execute({"command": "rename", "path": "/file.txt"})

        assert result.to_dict() == {
            "success": False,
            "error": "new_path is required for rename command",
        }
        assert self.fs.exists("/file.txt")

    def test_rename_empty_new_path(self) -> None:
        self.fs.create_file("/file.txt", "content")

        result = self.tool.execute(RenameCommand("/file.txt", ""))

        assert result.message == "new_path is required for rename command"

    def test_rename_missing_source(self) -> None:
        result = self.tool.execute(RenameCommand("/nonexistent.txt", "/new.txt"))

        assert result.to_dict() == {
            "success": False,
            "error": "Failed to rename /nonexistent.txt to /new.txt",
        }

    def test_rename_onto_existing(self) -> None:
        self.fs.create_file("/old.txt", "source")
        self.fs.create_file("/new.txt", "dest")

        result = self.tool.execute(RenameCommand("/old.txt", "/new.txt"))

        assert result.message == "Failed to rename /old.txt to /new.txt"
        assert self.fs.read_file("/new.txt") == "dest"
        assert self.fs.read_file("/old.txt") == "source"

    def test_rename_root(self) -> None:
        result = self.tool.execute(RenameCommand("/", "/newroot"))

        assert result.message == "Failed to rename / to /newroot"
        assert self.fs.is_directory("/")
        assert not self.fs.exists("/newroot")

    def test_rename_to_root(self) -> None:
        self.fs.create_file("/file.txt", "content")

        result = self.tool.execute(RenameCommand("/file.txt", "/"))

        assert result.message == "Failed to rename /file.txt to /"
        assert self.fs.exists("/file.txt")

    def test_rename_special_characters(self) -> None:
        self.fs.create_file("/my file (1).txt", "content")

        result = self.tool.execute(RenameCommand("/my file (1).txt", "/my_file_1.txt"))

        assert result.message == "Successfully renamed /my file (1).txt to /my_file_1.txt"
        assert self.fs.read_file("/my_file_1.txt") == "content"

    def test_rename_preserves_large_content(self) -> None:
        content = "x" * 10000
        self.fs.create_file("/large.txt", content)

        self.tool.execute(RenameCommand("/large.txt", "/renamed.txt"))

        assert self.fs.read_file("/renamed.txt") == content


class TestDelete:
    """Test the delete command."""

    def setup_method(self) -> None:
        self.fs = VirtualFileSystem()
        self.tool = FileManagerTool(self.fs)

    def test_delete_file(self) -> None:
        self.fs.create_file("/file.txt", "content")

        result = self.tool.execute({"command": "delete", "path": "/file.txt"})

        assert result.to_dict() == {"success": True, "message": "Successfully deleted /file.txt"}
        assert not self.fs.exists("/file.txt")

    def test_delete_empty_directory(self) -> None:
        self.fs.create_directory("/emptydir")

        result = self.tool.execute(DeleteCommand("/emptydir"))

        assert result.message == "Successfully deleted /emptydir"
        assert not self.fs.exists("/emptydir")

    def test_delete_directory_recursively(self) -> None:
        self.fs.create_file("/dir/file1.txt", "content1")
        self.fs.create_file("/dir/file2.txt", "content2")
        self.fs.create_file("/dir/subdir/file3.txt", "content3")

        result = self.tool.execute(DeleteCommand("/dir"))

        assert result.success
        assert not self.fs.exists("/dir")
        assert not self.fs.exists("/dir/file1.txt")
        assert not self.fs.exists("/dir/subdir")

    def test_delete_missing(self) -> None:
        result = self.tool.execute(DeleteCommand("/nonexistent.txt"))

        assert result.to_dict() == {"success": False, "error": "Failed to delete /nonexistent.txt"}

    def test_delete_root(self) -> None:
        result = self.tool.execute(DeleteCommand("/"))

        assert result.to_dict() == {"success": False, "error": "Failed to delete /"}
        assert self.fs.exists("/")

    def test_delete_without_leading_slash(self) -> None:
        self.fs.create_file("/file.txt", "content")

        result = self.tool.execute(DeleteCommand("file.txt"))

        assert result.message == "Successfully deleted file.txt"
        assert not self.fs.exists("/file.txt")

    def test_delete_with_trailing_slash(self) -> None:
        self.fs.create_directory("/mydir")

        result = self.tool.execute(DeleteCommand("/mydir/"))

        assert result.message == "Successfully deleted /mydir/"
        assert not self.fs.exists("/mydir")

    def test_delete_nested_file_keeps_parents(self) -> None:
        self.fs.create_file("/a/b/c/d/e/file.txt", "deep content")

        result = self.tool.execute(DeleteCommand("/a/b/c/d/e/file.txt"))

        assert result.success
        assert self.fs.exists("/a/b/c/d/e")
        assert not self.fs.exists("/a/b/c/d/e/file.txt")


class TestInvalidCommand:
    """Test malformed commands."""

    def setup_method(self) -> None:
        self.tool = FileManagerTool(VirtualFileSystem())

    def test_unknown_command(self) -> None:
        result = self.tool.execute({"command": "unknown", "path": "/file.txt"})

        assert result.to_dict() == {"success": False, "error": "Invalid command"}

    def test_missing_command(self) -> None:
        result = self.tool.execute({"path": "/file.txt"})

        assert result.to_dict() == {"success": False, "error": "Invalid command"}

    def test_missing_path(self) -> None:
        result = self.tool.execute({"command": "delete"})

        assert result.to_dict() == {
            "success": False,
            "error": "path is required for delete command",
        }
