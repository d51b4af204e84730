"""
Tests for the CreateFileUseCase and CreateDirectoryUseCase.
"""

from unittest.mock import MagicMock

import pytest

from file_explorer.entities.outcome import ErrorKind
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_repository_port import FileRepositoryPort
from file_explorer.use_cases.files.create_entry import (
    CreateDirectoryUseCase,
    CreateFileUseCase,
)


class TestCreateFileUseCase:
    """Test cases for the CreateFileUseCase."""

    def test_execute_success(self, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.exists.return_value = False

        use_case = CreateFileUseCase(mock_repository, mock_logger)

        assert use_case.execute("/tmp/x/new.txt") == "/tmp/x/new.txt"
        mock_repository.create_file.assert_called_once_with("/tmp/x/new.txt")
        mock_logger.info.assert_called_once_with("Creating file: /tmp/x/new.txt")

    def test_execute_already_exists(self, mock_logger):
        """Test that an existing entry is never touched."""
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.exists.return_value = True

        use_case = CreateFileUseCase(mock_repository, mock_logger)

        with pytest.raises(FileRepositoryError, match="already exists") as exc_info:
            use_case.execute("/tmp/x/old.txt")

        assert exc_info.value.kind is ErrorKind.ALREADY_EXISTS
        mock_repository.create_file.assert_not_called()

    def test_execute_unexpected_error(self, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.exists.return_value = False
        mock_repository.create_file.side_effect = Exception("Disk full")

        use_case = CreateFileUseCase(mock_repository, mock_logger)

        with pytest.raises(FileRepositoryError, match="Error creating file: Disk full"):
            use_case.execute("/tmp/x/new.txt")

        mock_logger.error.assert_called_once_with("Error creating file: Disk full")


class TestCreateDirectoryUseCase:
    """Test cases for the CreateDirectoryUseCase."""

    def test_execute_success(self, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.exists.return_value = False

        use_case = CreateDirectoryUseCase(mock_repository, mock_logger)

        assert use_case.execute("/tmp/x/dir") == "/tmp/x/dir"
        mock_repository.create_directory.assert_called_once_with("/tmp/x/dir")

    def test_execute_already_exists(self, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.exists.return_value = True

        use_case = CreateDirectoryUseCase(mock_repository, mock_logger)

        with pytest.raises(FileRepositoryError) as exc_info:
            use_case.execute("/tmp/x/dir")

        assert exc_info.value.kind is ErrorKind.ALREADY_EXISTS
        mock_repository.create_directory.assert_not_called()

    def test_execute_repository_error(self, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.exists.return_value = False
        mock_repository.create_directory.side_effect = FileRepositoryError(
            "Error creating directory: No such file or directory"
        )

        use_case = CreateDirectoryUseCase(mock_repository, mock_logger)

        with pytest.raises(FileRepositoryError, match="No such file") as exc_info:
            use_case.execute("/missing/parent/dir")

        assert exc_info.value.kind is ErrorKind.OPERATION_FAILED
        mock_logger.error.assert_not_called()
