"""
Tests for the DeleteEntryUseCase.
"""

from unittest.mock import MagicMock

import pytest

from file_explorer.entities.outcome import ErrorKind
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_repository_port import FileRepositoryPort
from file_explorer.use_cases.files.delete_entry import DeleteEntryUseCase


class TestDeleteEntryUseCase:
    """Test cases for the DeleteEntryUseCase."""

    def test_delete_file(self, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.exists.return_value = True
        mock_repository.delete.return_value = None

        assert DeleteEntryUseCase(mock_repository, mock_logger).execute("/d/f.txt") is None
        mock_repository.delete.assert_called_once_with("/d/f.txt")

    def test_delete_directory_reports_count(self, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.exists.return_value = True
        mock_repository.delete.return_value = 5

        assert DeleteEntryUseCase(mock_repository, mock_logger).execute("/d/sub") == 5
        mock_logger.info.assert_any_call("Removed directory /d/sub with 5 entries")

    def test_delete_missing(self, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.exists.return_value = False

        with pytest.raises(FileRepositoryError, match="'/d/nope' not found") as exc_info:
            DeleteEntryUseCase(mock_repository, mock_logger).execute("/d/nope")

        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        mock_repository.delete.assert_not_called()

    def test_delete_unexpected_error(self, mock_logger):
        mock_repository = MagicMock(spec=FileRepositoryPort)
        mock_repository.exists.return_value = True
        mock_repository.delete.side_effect = Exception("busy")

        with pytest.raises(FileRepositoryError, match="Error deleting: busy"):
            DeleteEntryUseCase(mock_repository, mock_logger).execute("/d/f")

        mock_logger.error.assert_called_once_with("Error deleting: busy")
