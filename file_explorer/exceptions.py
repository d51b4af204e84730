"""
Custom exceptions for the application.
"""

from file_explorer.entities.outcome import ErrorKind


class BaseAppError(Exception):
    """Base exception class for application errors."""

    kind: ErrorKind = ErrorKind.OPERATION_FAILED

    def __init__(self, message: str, kind: ErrorKind | None = None):
        super().__init__(message)
        if kind is not None:
            self.kind = kind


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class CommandError(BaseAppError):
    """Exception raised for malformed command arguments."""

    kind = ErrorKind.INVALID_ARGUMENT


class PermissionRefusedError(FileRepositoryError):
    """Exception raised when the platform refuses to change permission bits."""

    pass
