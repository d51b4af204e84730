"""
Command outcome values returned by the dispatcher.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class OutcomeStatus(Enum):
    """How a command finished."""

    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class ErrorKind(Enum):
    """Failure taxonomy shared by every command handler."""

    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    NOT_A_DIRECTORY = "not_a_directory"
    INVALID_ARGUMENT = "invalid_argument"
    OPERATION_FAILED = "operation_failed"
    PERMISSION_SKIPPED = "permission_skipped"
    UNKNOWN_COMMAND = "unknown_command"


@dataclass(frozen=True)
class CommandResult:
    """
    Tagged outcome of a single command.

    ``kind`` is only set for ERROR results. ``payload`` carries structured data
    (listings, search matches, permission triads) for the renderer and for tests.
    """

    status: OutcomeStatus
    message: str = ""
    kind: Optional[ErrorKind] = None
    lines: tuple[str, ...] = ()
    payload: Any = None
    warnings: tuple[str, ...] = ()
    exit: bool = False

    @property
    def ok(self) -> bool:
        """True for every non-error outcome."""
        return self.status is not OutcomeStatus.ERROR

    @classmethod
    def success(cls, message: str = "", payload: Any = None, **kwargs: Any) -> "CommandResult":
        return cls(OutcomeStatus.SUCCESS, message, payload=payload, **kwargs)

    @classmethod
    def info(cls, message: str, **kwargs: Any) -> "CommandResult":
        return cls(OutcomeStatus.INFO, message, **kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: Any) -> "CommandResult":
        return cls(OutcomeStatus.WARNING, message, **kwargs)

    @classmethod
    def error(
        cls, kind: ErrorKind, message: str, lines: tuple[str, ...] = (), **kwargs: Any
    ) -> "CommandResult":
        return cls(OutcomeStatus.ERROR, message, kind=kind, lines=lines, **kwargs)


@dataclass(frozen=True)
class SearchOutcome:
    """Matches found by ``find`` plus any subtrees that could not be read."""

    pattern: str
    matches: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.matches)
