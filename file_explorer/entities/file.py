"""
File domain entity.
"""

import os
from typing import Any, Optional

from file_explorer.entities.outcome import ErrorKind
from file_explorer.exceptions import FileRepositoryError


class FileEntry:
    """
    Directory entry entity (file or folder) as shown by ``ls``.
    """

    def __init__(self, path: str):
        """
        Initialize the FileEntry entity.

        Args:
            path: Path to the entry

        Raises:
            FileRepositoryError: If path is empty or the entry doesn't exist
        """
        if not path or not isinstance(path, str):
            raise FileRepositoryError(
                "Path must be a non-empty string", ErrorKind.INVALID_ARGUMENT
            )

        if not os.path.lexists(path):
            raise FileRepositoryError(f"Entry does not exist: {path}", ErrorKind.NOT_FOUND)

        self.path = os.path.abspath(path)
        self.name = os.path.basename(self.path)
        self.is_dir = os.path.isdir(self.path)
        self.size = self._find_size()

    def _find_size(self) -> Optional[int]:
        """Get the size in bytes; only regular files have one."""
        if not os.path.isfile(self.path):
            return None
        try:
            return os.path.getsize(self.path)
        except OSError as e:
            raise FileRepositoryError(f"Cannot get file size: {e}")

    @property
    def kind(self) -> str:
        return "folder" if self.is_dir else "file"

    def get_details(self) -> dict[str, Any]:
        """
        Get the entry details.

        Returns:
            Dictionary with entry information
        """
        return {
            "path": self.path,
            "name": self.name,
            "kind": self.kind,
            "size": self.size,
            "directory": os.path.dirname(self.path),
        }

    def __str__(self) -> str:
        """String representation of the FileEntry."""
        return f"FileEntry(name='{self.name}', kind='{self.kind}', size={self.size})"

    def __repr__(self) -> str:
        """Detailed string representation of the FileEntry."""
        return f"FileEntry(path='{self.path}')"
