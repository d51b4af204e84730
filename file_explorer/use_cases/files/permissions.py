"""
Use cases for inspecting and changing permission bits.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from file_explorer.entities.outcome import ErrorKind
from file_explorer.entities.permissions import PermissionTriad
from file_explorer.exceptions import FileRepositoryError, PermissionRefusedError
from file_explorer.ports.files.file_repository_port import FileRepositoryPort


@dataclass(frozen=True)
class PermissionReport:
    path: str
    triad: PermissionTriad
    is_dir: bool

    @property
    def kind(self) -> str:
        return "Directory" if self.is_dir else "File"


@dataclass(frozen=True)
class PermissionChange:
    path: str
    triad: PermissionTriad
    applied: bool
    warning: Optional[str] = None


def _require_existing(file_repository: FileRepositoryPort, path: str) -> None:
    # symlinks followed: a dangling link has no bits to read or change
    if not file_repository.target_exists(path):
        raise FileRepositoryError(f"'{path}' not found", ErrorKind.NOT_FOUND)


class ShowPermissionsUseCase:
    """Use case for reading the owner/group/other triad of an entry."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> PermissionReport:
        """
        Read the permission bits stored for ``path``.

        Raises:
            FileRepositoryError: If the entry is missing or cannot be stat'ed
        """
        _require_existing(self._file_repository, path)
        self._logger.info(f"Reading permissions: {path}")
        mode = self._file_repository.get_mode(path)
        return PermissionReport(
            path=path,
            triad=PermissionTriad.from_mode(mode),
            is_dir=self._file_repository.is_dir(path),
        )


class ChangePermissionsUseCase:
    """Use case for replacing the permission bits of an entry."""

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

    def execute(self, path: str, permissions: str) -> PermissionChange:
        """
        Apply a 3-digit triad to ``path`` with replace semantics.

        A platform that refuses the bits, or has no POSIX permission model, does
        not fail the command: the change is reported as not applied with a warning.

        Args:
            path: Entry to change
            permissions: Triad such as ``755``

        Returns:
            PermissionChange describing what happened

        Raises:
            FileRepositoryError: If the entry is missing or the change fails
            CommandError: If the triad is malformed
        """
        _require_existing(self._file_repository, path)
        triad = PermissionTriad.parse(permissions)

        self._logger.info(f"Changing permissions of {path} to {triad}")
        try:
            self._file_repository.set_mode(path, triad.mode)
        except PermissionRefusedError as e:
            self._logger.warning(f"Platform refused permissions {triad} on {path}: {e}")
            return PermissionChange(path, triad, applied=False, warning=str(e))

        if not self._file_repository.supports_posix_permissions():
            return PermissionChange(
                path,
                triad,
                applied=False,
                warning="This platform uses ACLs instead of Unix permissions",
            )
        return PermissionChange(path, triad, applied=True)
