"""
File repository port interface defining the contract for filesystem operations.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from typing import Optional

from file_explorer.entities.file import FileEntry


class FileRepositoryPort(ABC):
    """Port interface for file repository operations."""

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if anything (including a dangling symlink) exists at path."""
        pass

    @abstractmethod
    def target_exists(self, path: str) -> bool:
        """Return True if path exists with symlinks followed."""
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """Return True if path is a directory (symlinks followed)."""
        pass

    @abstractmethod
    def canonical(self, path: str) -> str:
        """
        Canonicalize a path, resolving symlinks, ``.`` and ``..``.

        Args:
            path: Absolute path to canonicalize

        Returns:
            The canonical absolute path
        """
        pass

    @abstractmethod
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
        pass

    @abstractmethod
    def iter_tree(
        self, directory: str, on_error: Callable[[OSError], None]
    ) -> Iterator[str]:
        """
        Yield the full path of every entry reachable from a directory.

        Args:
            directory: Root of the traversal
            on_error: Called for each subtree that cannot be read; traversal continues

        Returns:
            Iterator over absolute paths (directory symlinks are not followed)
        """
        pass

    @abstractmethod
    def create_file(self, path: str) -> None:
        """
        Create an empty file.

        Raises:
            FileRepositoryError: If the file exists or cannot be created
        """
        pass

    @abstractmethod
    def create_directory(self, path: str) -> None:
        """
        Create a single directory.

        Raises:
            FileRepositoryError: If the directory exists or cannot be created
        """
        pass

    @abstractmethod
    def copy(self, source: str, destination: str) -> None:
        """
        Copy a file or a directory tree without overwriting anything.

        Raises:
            FileRepositoryError: If the copy fails
        """
        pass

    @abstractmethod
    def move(self, source: str, destination: str) -> None:
        """
        Rename or move an entry.

        Raises:
            FileRepositoryError: If the move fails
        """
        pass

    @abstractmethod
    def delete(self, path: str) -> Optional[int]:
        """
        Delete a file, or a directory and everything below it.

        Args:
            path: Entry to delete

        Returns:
            Number of entries a directory recursively contained, or None when a
            single file or symlink was unlinked

        Raises:
            FileRepositoryError: If deletion fails
        """
        pass

    @abstractmethod
    def get_mode(self, path: str) -> int:
        """Return the ``st_mode`` of path (symlinks followed)."""
        pass

    @abstractmethod
    def set_mode(self, path: str, mode: int) -> None:
        """
        Replace the permission bits of path.

        Raises:
            PermissionRefusedError: If the platform refuses the change
            FileRepositoryError: If path is gone or the change fails otherwise
        """
        pass

    @abstractmethod
    def supports_posix_permissions(self) -> bool:
        """Return True if owner/group/other permission bits are honored."""
        pass
