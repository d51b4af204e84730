"""
Use cases for creating empty files and directories.
"""

import logging
from typing import Optional

from file_explorer.entities.outcome import ErrorKind
from file_explorer.exceptions import FileRepositoryError
from file_explorer.ports.files.file_repository_port import FileRepositoryPort


class CreateFileUseCase:
    """Use case for creating an empty file."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> str:
        """
        Create an empty file at ``path``.

        Returns:
            The path of the created file

        Raises:
            FileRepositoryError: If the path is taken or creation fails
        """
        if self._file_repository.exists(path):
            raise FileRepositoryError(
                f"File '{path}' already exists", ErrorKind.ALREADY_EXISTS
            )
        try:
            self._logger.info(f"Creating file: {path}")
            self._file_repository.create_file(path)
            return path
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error creating file: {e}")
            raise FileRepositoryError(f"Error creating file: {str(e)}")


class CreateDirectoryUseCase:
    """Use case for creating a directory."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> str:
        """
        Create a directory at ``path``; the parent must already exist.

        Returns:
            The path of the created directory

        Raises:
            FileRepositoryError: If the path is taken or creation fails
        """
        if self._file_repository.exists(path):
            raise FileRepositoryError(
                f"Directory '{path}' already exists", ErrorKind.ALREADY_EXISTS
            )
        try:
            self._logger.info(f"Creating directory: {path}")
            self._file_repository.create_directory(path)
            return path
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error creating directory: {e}")
            raise FileRepositoryError(f"Error creating directory: {str(e)}")
