"""
Tests for the FileEntry entity.
"""

import os

import pytest

from file_explorer.entities.file import FileEntry
from file_explorer.entities.outcome import ErrorKind
from file_explorer.exceptions import FileRepositoryError


class TestFileEntry:
    """Test cases for the FileEntry entity."""

    def test_file_initialization_success(self, temp_directory: str):
        """Test successful FileEntry initialization with a regular file."""
        test_file = os.path.join(temp_directory, "test1.txt")
        entry = FileEntry(test_file)

        assert entry.path == os.path.abspath(test_file)
        assert entry.name == "test1.txt"
        assert entry.is_dir is False
        assert entry.kind == "file"
        assert entry.size == len("This is a test file.")

    def test_directory_has_no_size(self, temp_directory: str):
        """Test that directories are folders without a size."""
        entry = FileEntry(os.path.join(temp_directory, "subdir"))

        assert entry.is_dir is True
        assert entry.kind == "folder"
        assert entry.size is None

    def test_initialization_with_nonexistent_path(self):
        """Test FileEntry initialization with a non-existent path."""
        with pytest.raises(FileRepositoryError, match="Entry does not exist") as exc_info:
            FileEntry("/nonexistent/path/file.txt")

        assert exc_info.value.kind is ErrorKind.NOT_FOUND

    def test_initialization_with_empty_path(self):
        """Test FileEntry initialization with an empty path."""
        with pytest.raises(FileRepositoryError, match="Path must be a non-empty string"):
            FileEntry("")

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_dangling_symlink_is_a_file_without_size(self, temp_directory: str):
        """Test that a broken symlink is still listed."""
        link = os.path.join(temp_directory, "broken")
        os.symlink(os.path.join(temp_directory, "missing"), link)

        entry = FileEntry(link)

        assert entry.kind == "file"
        assert entry.size is None

    def test_get_details(self, temp_directory: str):
        """Test getting entry details."""
        test_file = os.path.join(temp_directory, "test2.py")
        details = FileEntry(test_file).get_details()

        assert details["path"] == test_file
        assert details["name"] == "test2.py"
        assert details["kind"] == "file"
        assert details["size"] > 0
        assert details["directory"] == temp_directory
