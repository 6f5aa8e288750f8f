"""Tests for path normalization helpers."""
import pytest
from hypothesis import given
from hypothesis import strategies as st

from vfs_editor.core.paths import (
    ancestors,
    base_name,
    is_within,
    join_path,
    normalize_path,
    parent_path,
)


class TestNormalizePath:
    """Test path canonicalization."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("/", "/"),
            ("", "/"),
            ("   ", "/   "),
            (None, "/"),
            ("file.txt", "/file.txt"),
            ("/file.txt", "/file.txt"),
            ("/mydir/", "/mydir"),
            ("mydir/", "/mydir"),
            ("//a//b///c.txt", "/a/b/c.txt"),
            ("///", "/"),
            ("/my file (1).txt", "/my file (1).txt"),
            ("/ünïcode/файл.md", "/ünïcode/файл.md"),
            ("/a%20b", "/a%20b"),
        ],
    )
    def test_normalization(self, raw, expected) -> None:
        """Test leading slash, slash collapsing and trailing slash rules."""
        assert normalize_path(raw) == expected

    def test_dot_segments_are_not_resolved(self) -> None:
        """Test that '.' and '..' are kept as ordinary segments."""
        assert normalize_path("/a/../b") == "/a/../b"
        assert normalize_path("./x") == "/./x"

    @given(st.text(max_size=40))
    def test_always_absolute_and_idempotent(self, raw: str) -> None:
        """Property: result is absolute, never ends in '/', and is stable."""
        normalized = normalize_path(raw)

        assert normalized.startswith("/")
        assert normalized == "/" or not normalized.endswith("/")
        assert "//" not in normalized
        assert normalize_path(normalized) == normalized


class TestPathHelpers:
    """Test parent/base/join helpers."""

    def test_parent_path(self) -> None:
        assert parent_path("/") is None
        assert parent_path("/a") == "/"
        assert parent_path("/a/b/c.txt") == "/a/b"

    def test_base_name(self) -> None:
        assert base_name("/") == ""
        assert base_name("/a") == "a"
        assert base_name("/a/b/c.txt") == "c.txt"

    def test_join_path(self) -> None:
        assert join_path("/", "a") == "/a"
        assert join_path("/a/b", "c.txt") == "/a/b/c.txt"

    def test_ancestors(self) -> None:
        assert ancestors("/") == []
        assert ancestors("/a") == []
        assert ancestors("/a/b/c.txt") == ["/a", "/a/b"]

    def test_is_within(self) -> None:
        assert is_within("/a", "/a")
        assert is_within("/a/b", "/a")
        assert is_within("/anything", "/")
        assert not is_within("/ab", "/a")
        assert not is_within("/a", "/a/b")
