"""
Working-directory cursor and path resolution.

The cursor is the only mutable state of the shell. ``PathResolver`` owns it and
is the only component that replaces it; every other operation receives the
cursor value as an argument and resolves its paths with ``resolve_path``.
"""

import logging
import os
from typing import Optional

from file_explorer.entities.outcome import CommandResult, ErrorKind
from file_explorer.ports.files.file_repository_port import FileRepositoryPort


def resolve_path(cursor: str, argument: str) -> str:
    """
    Resolve a user-supplied path against a cursor.

    Args:
        cursor: Absolute directory the path is relative to
        argument: Path as typed by the user

    Returns:
        ``argument`` unchanged if it is absolute, otherwise ``cursor`` joined with it.
        No existence check and no normalization.
    """
    if os.path.isabs(argument):
        return argument
    return os.path.join(cursor, argument)


class PathResolver:
    """Owner of the current-directory cursor."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        start_directory: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the resolver.

        Args:
            file_repository: Repository used to inspect and canonicalize targets
            start_directory: Initial cursor; defaults to the process working directory
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)
        self._cursor = file_repository.canonical(start_directory or os.getcwd())

    def current(self) -> str:
        return self._cursor

    def resolve(self, argument: str) -> str:
        return resolve_path(self._cursor, argument)

    def change_directory(self, argument: str) -> CommandResult:
        """
        Move the cursor to ``argument``.

        The cursor is replaced with the canonical form of the target only when
        the target exists and is a directory.
        """
        target = self.resolve(argument)

        if not self._file_repository.exists(target):
            return CommandResult.error(
                ErrorKind.NOT_FOUND, f"Directory '{argument}' not found"
            )

        if not self._file_repository.is_dir(target):
            return CommandResult.error(
                ErrorKind.NOT_A_DIRECTORY, f"'{argument}' is not a directory"
            )

        self._cursor = self._file_repository.canonical(target)
        self._logger.info(f"Cursor moved to: {self._cursor}")
        return CommandResult.success(f"Changed to: {self._cursor}", payload=self._cursor)

    def go_to_parent(self) -> CommandResult:
        parent = os.path.dirname(self._cursor)
        if not parent or parent == self._cursor:
            return CommandResult.info("Already at root directory")

        self._cursor = parent
        self._logger.info(f"Cursor moved to: {self._cursor}")
        return CommandResult.success(f"Changed to: {self._cursor}", payload=self._cursor)
