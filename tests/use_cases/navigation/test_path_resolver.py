"""
Tests for the PathResolver and resolve_path.
"""

import os

import pytest

from file_explorer.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_explorer.entities.outcome import ErrorKind, OutcomeStatus
from file_explorer.use_cases.navigation.path_resolver import PathResolver, resolve_path


@pytest.fixture
def resolver(temp_directory, mock_logger):
    return PathResolver(LocalFileSystemAdapter(mock_logger), temp_directory, mock_logger)


class TestResolvePath:
    """resolve_path is pure string manipulation."""

    def test_relative_is_joined(self):
        assert resolve_path("/home/me", "docs") == os.path.join("/home/me", "docs")

    def test_absolute_is_unchanged(self):
        absolute = os.path.abspath(os.sep + "etc")
        assert resolve_path("/home/me", absolute) == absolute

    def test_no_normalization(self):
        assert resolve_path("/home/me", "../x") == os.path.join("/home/me", "../x")

    def test_nonexistent_is_fine(self):
        assert resolve_path("/nope", "missing") == os.path.join("/nope", "missing")


class TestPathResolver:
    """Test cases for the cursor owner."""

    def test_defaults_to_process_directory(self, mock_logger):
        resolver = PathResolver(LocalFileSystemAdapter(mock_logger), logger=mock_logger)

        assert resolver.current() == os.path.realpath(os.getcwd())

    def test_change_directory_relative(self, resolver, temp_directory):
        result = resolver.change_directory("subdir")

        assert result.status is OutcomeStatus.SUCCESS
        assert resolver.current() == os.path.join(temp_directory, "subdir")
        assert result.message == f"Changed to: {resolver.current()}"

    def test_change_directory_is_canonical(self, resolver, temp_directory):
        resolver.change_directory("subdir/../subdir/.")

        assert resolver.current() == os.path.join(temp_directory, "subdir")

    def test_change_directory_not_found(self, resolver, temp_directory):
        result = resolver.change_directory("nowhere")

        assert result.kind is ErrorKind.NOT_FOUND
        assert result.message == "Directory 'nowhere' not found"
        assert resolver.current() == temp_directory

    def test_change_directory_to_file(self, resolver, temp_directory):
        result = resolver.change_directory("test1.txt")

        assert result.kind is ErrorKind.NOT_A_DIRECTORY
        assert resolver.current() == temp_directory

    def test_change_then_parent_round_trip(self, resolver, temp_directory):
        resolver.change_directory("subdir")
        result = resolver.go_to_parent()

        assert result.ok
        assert resolver.current() == temp_directory

    def test_parent_at_root_is_informational(self, mock_logger):
        root = os.path.abspath(os.sep)
        resolver = PathResolver(LocalFileSystemAdapter(mock_logger), root, mock_logger)

        result = resolver.go_to_parent()

        assert result.status is OutcomeStatus.INFO
        assert result.message == "Already at root directory"
        assert resolver.current() == root

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_change_directory_through_symlink(self, resolver, temp_directory):
        os.symlink(os.path.join(temp_directory, "subdir"), os.path.join(temp_directory, "alias"))

        resolver.change_directory("alias")

        assert resolver.current() == os.path.join(temp_directory, "subdir")

    def test_resolve_uses_cursor(self, resolver, temp_directory):
        assert resolver.resolve("a.txt") == os.path.join(temp_directory, "a.txt")
