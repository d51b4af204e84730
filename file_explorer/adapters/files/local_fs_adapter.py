"""
Local file system adapter implementation for file operations.
"""

import errno
import logging
import os
import shutil
from collections.abc import Callable, Iterator
from typing import Optional

from typing_extensions import override

from file_explorer.entities.file import FileEntry
from file_explorer.entities.outcome import ErrorKind
from file_explorer.exceptions import FileRepositoryError, PermissionRefusedError
from file_explorer.ports.files.file_repository_port import FileRepositoryPort


# errno values meaning the platform will not store POSIX bits here
_REFUSAL_ERRNOS = frozenset(
    code
    for code in (
        errno.EPERM,
        errno.EROFS,
        getattr(errno, "ENOTSUP", None),
        getattr(errno, "EOPNOTSUPP", None),
    )
    if code is not None
)


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Path to the directory to validate

        Raises:
            FileRepositoryError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise FileRepositoryError(
                f"Directory does not exist: {directory}", ErrorKind.NOT_FOUND
            )

        if not os.path.isdir(directory):
            raise FileRepositoryError(
                f"Path is not a directory: {directory}", ErrorKind.NOT_A_DIRECTORY
            )

    def _create_file_entries(self, paths: list[str]) -> list[FileEntry]:
        """
        Create FileEntry entities from a list of paths.

        Args:
            paths: List of paths to convert to FileEntry entities

        Returns:
            List of FileEntry entities
        """
        entries: list[FileEntry] = []
        for path in paths:
            try:
                entries.append(FileEntry(path))
            except FileRepositoryError as e:
                # Entry vanished or cannot be stat'ed; keep listing the rest
                self._logger.warning(f"Could not process entry {path}: {e}")
                continue

        return entries

    @override
    def exists(self, path: str) -> bool:
        return os.path.lexists(path)

    @override
    def target_exists(self, path: str) -> bool:
        return os.path.exists(path)

    @override
    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def canonical(self, path: str) -> str:
        return os.path.realpath(path)

    @override
    def list_entries(self, directory: str) -> list[FileEntry]:
        """
        List the immediate children of a directory.

        Args:
            directory: Path to the directory to list

        Returns:
            List of FileEntry entities sorted by name

        Raises:
            FileRepositoryError: If listing fails
        """
        try:
            self._validate_directory(directory)

            paths: list[str] = [
                os.path.join(directory, item) for item in sorted(os.listdir(directory))
            ]
            return self._create_file_entries(paths)

        except FileRepositoryError:
            raise
        except OSError as e:
            raise FileRepositoryError(f"Error listing files: {e}")

    @override
    def iter_tree(
        self, directory: str, on_error: Callable[[OSError], None]
    ) -> Iterator[str]:
        self._validate_directory(directory)
        for dirpath, dirnames, filenames in os.walk(directory, onerror=on_error):
            dirnames.sort()
            for name in sorted(dirnames + filenames):
                yield os.path.join(dirpath, name)

    @override
    def create_file(self, path: str) -> None:
        try:
            # "x" never truncates an existing file
            with open(path, "x", encoding="utf-8"):
                pass
        except FileExistsError:
            raise FileRepositoryError(
                f"File '{path}' already exists", ErrorKind.ALREADY_EXISTS
            )
        except OSError as e:
            raise FileRepositoryError(f"Error creating file: {e}")

    @override
    def create_directory(self, path: str) -> None:
        try:
            os.mkdir(path)
        except FileExistsError:
            raise FileRepositoryError(
                f"Directory '{path}' already exists", ErrorKind.ALREADY_EXISTS
            )
        except OSError as e:
            raise FileRepositoryError(f"Error creating directory: {e}")

    @override
    def copy(self, source: str, destination: str) -> None:
        if os.path.lexists(destination):
            raise FileRepositoryError(
                f"Destination '{destination}' already exists", ErrorKind.ALREADY_EXISTS
            )
        try:
            if os.path.isdir(source) and not os.path.islink(source):
                shutil.copytree(source, destination, symlinks=True)
            else:
                shutil.copy2(source, destination, follow_symlinks=False)
        except (OSError, shutil.Error) as e:
            raise FileRepositoryError(f"Error copying: {e}")

    @override
    def move(self, source: str, destination: str) -> None:
        if os.path.lexists(destination):
            raise FileRepositoryError(
                f"Destination '{destination}' already exists", ErrorKind.ALREADY_EXISTS
            )
        try:
            shutil.move(source, destination)
        except (OSError, shutil.Error) as e:
            raise FileRepositoryError(f"Error moving: {e}")

    @override
    def delete(self, path: str) -> Optional[int]:
        try:
            if os.path.isdir(path) and not os.path.islink(path):
                count = 0
                for _, dirnames, filenames in os.walk(path):
                    count += len(dirnames) + len(filenames)
                shutil.rmtree(path)
                return count
            os.remove(path)
            return None
        except OSError as e:
            raise FileRepositoryError(f"Error deleting: {e}")

    @override
    def get_mode(self, path: str) -> int:
        try:
            return os.stat(path).st_mode
        except FileNotFoundError:
            raise FileRepositoryError(f"'{path}' not found", ErrorKind.NOT_FOUND)
        except OSError as e:
            raise FileRepositoryError(f"Error reading permissions: {e}")

    @override
    def set_mode(self, path: str, mode: int) -> None:
        try:
            os.chmod(path, mode)
        except NotImplementedError as e:
            raise PermissionRefusedError(str(e) or "chmod is not supported on this platform")
        except FileNotFoundError:
            raise FileRepositoryError(f"'{path}' not found", ErrorKind.NOT_FOUND)
        except OSError as e:
            if e.errno in _REFUSAL_ERRNOS:
                raise PermissionRefusedError(e.strerror or str(e))
            raise FileRepositoryError(f"Error changing permissions: {e}")

    @override
    def supports_posix_permissions(self) -> bool:
        return os.name == "posix"
