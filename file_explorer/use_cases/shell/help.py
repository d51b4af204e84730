"""
Static command reference printed by ``help`` and at startup.
"""

from dataclasses import dataclass

HELP_TITLE = "FILE EXPLORER COMMANDS"

HELP_SECTIONS: list[tuple[str, list[tuple[str, str]]]] = [
    (
        "Navigation",
        [
            ("ls", "List files in current directory"),
            ("cd <dir>", "Change to directory"),
            ("cd ..", "Go to parent directory"),
            ("pwd", "Print working directory"),
        ],
    ),
    (
        "File/Directory Operations",
        [
            ("touch <file>", "Create empty file"),
            ("mkdir <dir>", "Create directory"),
            ("cp <src> <dst>", "Copy file or directory"),
            ("mv <src> <dst>", "Move or rename file"),
            ("rm <path>", "Delete file or directory"),
        ],
    ),
    (
        "Search",
        [
            ("find <pattern>", "Search files (regex pattern, case-insensitive)"),
        ],
    ),
    (
        "Permissions",
        [
            ("stat <file>", "Show file permissions"),
            ("chmod <file> <perms>", "Change permissions (3-digit octal, e.g. 755 or 644)"),
        ],
    ),
    (
        "Other",
        [
            ("help", "Show this help menu"),
            ("exit | quit", "Exit the program"),
        ],
    ),
]


@dataclass(frozen=True)
class HelpReference:
    title: str
    sections: list[tuple[str, list[tuple[str, str]]]]


HELP = HelpReference(HELP_TITLE, HELP_SECTIONS)
