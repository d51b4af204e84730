"""
Use cases for copying and moving entries.
"""

import logging
from typing import Optional

from file_explorer.entities.outcome import ErrorKind
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_repository_port import FileRepositoryPort


def _check_transfer(
    file_repository: FileRepositoryPort, source: str, destination: str
) -> None:
    if not file_repository.exists(source):
        raise FileRepositoryError(f"Source '{source}' not found", ErrorKind.NOT_FOUND)
    if file_repository.exists(destination):
        raise FileRepositoryError(
            f"Destination '{destination}' already exists", ErrorKind.ALREADY_EXISTS
        )


class CopyEntryUseCase:
    """Use case for copying a file or a directory tree."""

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

    def execute(self, source: str, destination: str) -> tuple[str, str]:
        """
        Copy ``source`` to ``destination``; existing entries are never overwritten.

        Args:
            source: Entry to copy
            destination: Path of the new copy

        Returns:
            The (source, destination) pair

        Raises:
            FileRepositoryError: If the source is missing, the destination exists,
                or the copy fails
        """
        _check_transfer(self._file_repository, source, destination)
        try:
            self._logger.info(f"Copying {source} -> {destination}")
            self._file_repository.copy(source, destination)
            return source, destination
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error copying: {e}")
            raise FileRepositoryError(f"Error copying: {str(e)}")


class MoveEntryUseCase:
    """Use case for moving or renaming an entry."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, source: str, destination: str) -> tuple[str, str]:
        """
        Move ``source`` to ``destination``.

        Raises:
            FileRepositoryError: If the source is missing, the destination exists,
                or the move fails
        """
        _check_transfer(self._file_repository, source, destination)
        try:
            self._logger.info(f"Moving {source} -> {destination}")
            self._file_repository.move(source, destination)
            return source, destination
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error moving: {e}")
            raise FileRepositoryError(f"Error moving: {str(e)}")
