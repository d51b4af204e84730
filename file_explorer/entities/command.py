"""
Command invocation entity representing one parsed input line.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CommandInvocation:
    """Parsed input line: keyword, positional args and the arity the keyword requires."""

    keyword: str
    args: tuple[str, ...]
    arity: int = 0

    @classmethod
    def parse(cls, raw: str) -> Optional["CommandInvocation"]:
        """
        Split an input line into a keyword and positional arguments.

        Args:
            raw: Line as typed at the prompt

        Returns:
            CommandInvocation with arity 0, or None if the line is blank
        """
        # whitespace is the only delimiter; no quoting
        parts = raw.split()
        if not parts:
            return None
        return cls(keyword=parts[0], args=tuple(parts[1:]))

    def with_arity(self, arity: int) -> "CommandInvocation":
        """
        Return a copy carrying the number of arguments the keyword requires.

        Args:
            arity: Required positional argument count
        """
        return CommandInvocation(self.keyword, self.args, arity)

    def has_required_args(self) -> bool:
        """Return True if at least ``arity`` arguments were supplied."""
        return len(self.args) >= self.arity
