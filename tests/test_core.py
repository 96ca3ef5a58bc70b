"""Unit tests for core browsing primitives."""

from pathlib import Path

import pytest

from filenav.core import MENU_LABELS, Command, parent_directory, resolve_path
from filenav.exceptions import EmptyInputError


class TestResolvePath:
    """Tests for resolve_path function."""

    def test_absolute_input_returned_unchanged(self, tmp_path):
        """Test that an absolute path ignores the cursor."""
        target = tmp_path / "elsewhere" / "file.txt"
        assert resolve_path(Path("/some/cursor"), str(target)) == target

    def test_absolute_input_not_normalized(self):
        """Test that absolute input keeps its segments as typed."""
        assert resolve_path(Path("/cursor"), "/a/../b") == Path("/a/../b")

    def test_relative_input_joined_to_cursor(self, tmp_path):
        """Test that a relative path is joined to the cursor."""
        assert resolve_path(tmp_path, "docs/notes.txt") == tmp_path / "docs" / "notes.txt"

    def test_relative_parent_segment_kept(self, tmp_path):
        """Test that resolution is lexical and keeps '..'."""
        assert resolve_path(tmp_path, "../x") == tmp_path / ".." / "x"

    def test_nonexistent_path_resolves(self, tmp_path):
        """Test that resolution never checks the file system."""
        result = resolve_path(tmp_path, "does-not-exist")
        assert result == tmp_path / "does-not-exist"
        assert not result.exists()

    def test_empty_input_raises(self, tmp_path):
        """Test that empty input signals an aborted prompt."""
        with pytest.raises(EmptyInputError):
            resolve_path(tmp_path, "")


class TestParentDirectory:
    """Tests for parent_directory function."""

    def test_parent_of_nested(self, tmp_path):
        """Test moving up one level."""
        nested = tmp_path / "a" / "b"
        assert parent_directory(nested) == tmp_path / "a"

    def test_root_is_fixed_point(self, tmp_path):
        """Test that going up repeatedly stops at the root."""
        current = tmp_path
        for _ in range(len(tmp_path.parts) + 3):
            current = parent_directory(current)

        root = Path(tmp_path.anchor)
        assert current == root
        assert parent_directory(root) == root


class TestCommand:
    """Tests for the Command enum."""

    def test_from_token_all_commands(self):
        """Test that every digit maps to a command."""
        tokens = {command.value for command in Command}
        assert tokens == {str(digit) for digit in range(10)}
        for token in tokens:
            assert Command.from_token(token).value == token

    def test_from_token_strips_whitespace(self):
        """Test that surrounding whitespace is ignored."""
        assert Command.from_token(" 2 ") is Command.ENTER

    def test_from_token_invalid(self):
        """Test that unknown tokens return None."""
        assert Command.from_token("x") is None
        assert Command.from_token("") is None
        assert Command.from_token("10") is None

    def test_menu_lists_every_command(self):
        """Test that each command has a menu label."""
        assert set(MENU_LABELS) == set(Command)
