"""
Owner/group/other permission triad.
"""

import re
import stat
from dataclasses import dataclass

from file_explorer.exceptions import CommandError

_TRIAD_RE = re.compile(r"[0-7]{3}")

_CLASS_BITS: tuple[tuple[int, int, int], ...] = (
    (stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR),
    (stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP),
    (stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH),
)


@dataclass(frozen=True)
class PermissionTriad:
    """Three 3-bit masks (read=4, write=2, execute=1) for owner, group and other."""

    owner: int
    group: int
    other: int

    @classmethod
    def parse(cls, text: str) -> "PermissionTriad":
        """
        Parse a 3-digit string such as ``755``.

        Raises:
            CommandError: If the text is not exactly three digits 0-7
        """
        if not _TRIAD_RE.fullmatch(text or ""):
            raise CommandError(f"Invalid permissions '{text}'. Use 3-digit format (e.g., 755)")
        return cls(int(text[0]), int(text[1]), int(text[2]))

    @classmethod
    def from_mode(cls, mode: int) -> "PermissionTriad":
        digits = []
        for read, write, execute in _CLASS_BITS:
            value = 0
            if mode & read:
                value |= 4
            if mode & write:
                value |= 2
            if mode & execute:
                value |= 1
            digits.append(value)
        return cls(*digits)

    @property
    def mode(self) -> int:
        """Combined permission mask suitable for ``os.chmod``."""
        mask = 0
        for digit, (read, write, execute) in zip(self.digits, _CLASS_BITS):
            if digit & 4:
                mask |= read
            if digit & 2:
                mask |= write
            if digit & 1:
                mask |= execute
        return mask

    @property
    def digits(self) -> tuple[int, int, int]:
        return (self.owner, self.group, self.other)

    @staticmethod
    def _rwx(digit: int) -> str:
        return (
            ("r" if digit & 4 else "-")
            + ("w" if digit & 2 else "-")
            + ("x" if digit & 1 else "-")
        )

    @property
    def symbolic(self) -> str:
        """9-character form, e.g. ``rwxr-xr-x``."""
        return "".join(self._rwx(d) for d in self.digits)

    def classes(self) -> dict[str, str]:
        return {
            "owner": self._rwx(self.owner),
            "group": self._rwx(self.group),
            "other": self._rwx(self.other),
        }

    def __str__(self) -> str:
        return "".join(str(d) for d in self.digits)
