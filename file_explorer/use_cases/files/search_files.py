"""
Use case for searching entries by filename.
"""

import logging
import os
import re
from typing import Optional

from file_explorer.entities.outcome import SearchOutcome
from file_explorer.exceptions import CommandError, FileRepositoryError
from file_explorer.ports.files.file_repository_port import FileRepositoryPort


class SearchFilesUseCase:
    """Use case for searching a directory tree with a regular expression."""

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

    @staticmethod
    def compile_pattern(pattern: str) -> re.Pattern[str]:
        """
        Compile a case-insensitive search pattern.

        Raises:
            CommandError: If the pattern is not a valid regular expression
        """
        try:
            return re.compile(pattern, re.IGNORECASE)
        except re.error as e:
            raise CommandError(f"Invalid pattern '{pattern}': {e}")

    def execute(self, directory: str, pattern: str) -> SearchOutcome:
        """
        Search every entry below a directory whose name matches a pattern.

        Only the final path component is matched. Subtrees that cannot be read
        are skipped and reported in ``SearchOutcome.skipped``.

        Args:
            directory: Root of the search
            pattern: Regular expression, matched case-insensitively

        Returns:
            SearchOutcome with the full path of every match

        Raises:
            CommandError: If the pattern does not compile
            FileRepositoryError: If the search cannot start
        """
        regex = self.compile_pattern(pattern)
        outcome = SearchOutcome(pattern=pattern)

        def _skip(error: OSError) -> None:
            where = error.filename or directory
            self._logger.warning(f"Skipping unreadable entry {where}: {error.strerror or error}")
            outcome.skipped.append(f"{where}: {error.strerror or error}")

        try:
            self._logger.info(
                f"Searching for entries matching '{pattern}' in directory: {directory}"
            )
            for path in self._file_repository.iter_tree(directory, _skip):
                if regex.search(os.path.basename(path)):
                    outcome.matches.append(path)
            self._logger.info(f"Found {outcome.count} entries matching pattern '{pattern}'")
            return outcome
        except FileRepositoryError:
            raise
        except Exception as e:
            self._logger.error(f"Error searching files: {e}")
            raise FileRepositoryError(
                f"Failed to search files in {directory} with pattern {pattern}: {str(e)}"
            )
