"""
Use case for listing the entries of a directory.
"""

import logging
from typing import Optional

from file_explorer.entities.file import FileEntry
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_repository_port import FileRepositoryPort


class ListFilesUseCase:
    """Use case for listing the entries of a directory."""

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

    def execute(self, directory: str) -> list[FileEntry]:
        """
        List all entries in a directory.

        Args:
            directory: Path to the directory to list

        Returns:
            List of FileEntry entities

        Raises:
            FileRepositoryError: If listing fails
        """
        try:
            self._logger.info(f"Listing files in directory: {directory}")
            entries = self._file_repository.list_entries(directory)
            self._logger.info(f"Found {len(entries)} entries")
            return entries
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing files: {e}")
            raise FileRepositoryError(f"Failed to list files in {directory}: {str(e)}")
