"""
Use case for deleting files and directory trees.
"""

import logging
from typing import Optional

from file_explorer.entities.outcome import ErrorKind
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_repository_port import FileRepositoryPort


class DeleteEntryUseCase:
    """Use case for deleting an entry."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> Optional[int]:
        """
        Delete ``path``; directories are removed recursively.

        Args:
            path: Entry to delete

        Returns:
            Number of entries a directory recursively contained, or None when a
            single file was deleted

        Raises:
            FileRepositoryError: If the entry is missing or deletion fails
        """
        if not self._file_repository.exists(path):
            raise FileRepositoryError(f"'{path}' not found", ErrorKind.NOT_FOUND)

        try:
            self._logger.info(f"Deleting: {path}")
            removed = self._file_repository.delete(path)
            if removed is not None:
                self._logger.info(f"Removed directory {path} with {removed} entries")
            return removed
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error deleting: {e}")
            raise FileRepositoryError(f"Error deleting: {str(e)}")
