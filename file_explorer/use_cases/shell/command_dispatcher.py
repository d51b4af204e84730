"""
Command dispatcher: maps an input line onto the file use cases.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional

from file_explorer.entities.command import CommandInvocation
from file_explorer.entities.outcome import CommandResult, ErrorKind, SearchOutcome
from file_explorer.exceptions import BaseAppError, CommandError
from file_explorer.use_cases.files.create_entry import (
    CreateDirectoryUseCase,
    CreateFileUseCase,
)
from file_explorer.use_cases.files.delete_entry import DeleteEntryUseCase
from file_explorer.use_cases.files.list_files import ListFilesUseCase
from file_explorer.use_cases.files.permissions import (
    ChangePermissionsUseCase,
    ShowPermissionsUseCase,
)
from file_explorer.use_cases.files.search_files import SearchFilesUseCase
from file_explorer.use_cases.files.transfer_entry import CopyEntryUseCase, MoveEntryUseCase
from file_explorer.use_cases.navigation.path_resolver import PathResolver, resolve_path
from file_explorer.use_cases.shell.help import HELP

# A handler receives the cursor snapshot and the positional args.
_Handler = Callable[[str, tuple[str, ...]], CommandResult]


@dataclass(frozen=True)
class CommandSpec:
    """Entry of the command table."""

    arity: int
    usage: tuple[str, ...]
    handler: _Handler


class CommandDispatcher:
    """
    Parses input lines and routes them to the file use cases.

    Every failure raised below a handler is converted into an ERROR
    ``CommandResult`` here, so ``dispatch`` never raises for a bad command.
    """

    def __init__(
        self,
        path_resolver: PathResolver,
        list_files_uc: ListFilesUseCase,
        search_files_uc: SearchFilesUseCase,
        create_file_uc: CreateFileUseCase,
        create_directory_uc: CreateDirectoryUseCase,
        copy_entry_uc: CopyEntryUseCase,
        move_entry_uc: MoveEntryUseCase,
        delete_entry_uc: DeleteEntryUseCase,
        show_permissions_uc: ShowPermissionsUseCase,
        change_permissions_uc: ChangePermissionsUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            path_resolver: Owner of the current-directory cursor
            list_files_uc: Use case behind ``ls``
            search_files_uc: Use case behind ``find``
            create_file_uc: Use case behind ``touch``
            create_directory_uc: Use case behind ``mkdir``
            copy_entry_uc: Use case behind ``cp``
            move_entry_uc: Use case behind ``mv``
            delete_entry_uc: Use case behind ``rm``
            show_permissions_uc: Use case behind ``stat``
            change_permissions_uc: Use case behind ``chmod``
            logger: Logger instance to use for logging
        """
        self._resolver = path_resolver
        self._list_files_uc = list_files_uc
        self._search_files_uc = search_files_uc
        self._create_file_uc = create_file_uc
        self._create_directory_uc = create_directory_uc
        self._copy_entry_uc = copy_entry_uc
        self._move_entry_uc = move_entry_uc
        self._delete_entry_uc = delete_entry_uc
        self._show_permissions_uc = show_permissions_uc
        self._change_permissions_uc = change_permissions_uc
        self._logger = logger or logging.getLogger(__name__)

        self._commands: dict[str, CommandSpec] = {
            "ls": CommandSpec(0, ("Usage: ls",), self._cmd_ls),
            "pwd": CommandSpec(0, ("Usage: pwd",), self._cmd_pwd),
            "cd": CommandSpec(1, ("Usage: cd <directory>",), self._cmd_cd),
            "touch": CommandSpec(1, ("Usage: touch <filename>",), self._cmd_touch),
            "mkdir": CommandSpec(1, ("Usage: mkdir <dirname>",), self._cmd_mkdir),
            "cp": CommandSpec(2, ("Usage: cp <source> <destination>",), self._cmd_cp),
            "mv": CommandSpec(2, ("Usage: mv <source> <destination>",), self._cmd_mv),
            "rm": CommandSpec(1, ("Usage: rm <path>",), self._cmd_rm),
            "find": CommandSpec(
                1,
                ("Usage: find <pattern>", "Example: find \\.txt", "Example: find test"),
                self._cmd_find,
            ),
            "stat": CommandSpec(1, ("Usage: stat <file>",), self._cmd_stat),
            "chmod": CommandSpec(
                2,
                (
                    "Usage: chmod <file> <permissions>",
                    "Example: chmod file.txt 755",
                    "Example: chmod file.txt 644",
                ),
                self._cmd_chmod,
            ),
            "help": CommandSpec(0, ("Usage: help",), self._cmd_help),
            "exit": CommandSpec(0, ("Usage: exit",), self._cmd_exit),
            "quit": CommandSpec(0, ("Usage: quit",), self._cmd_exit),
        }

    @property
    def commands(self) -> list[str]:
        return list(self._commands)

    def dispatch(self, line: str) -> Optional[CommandResult]:
        """
        Execute one input line.

        Args:
            line: Raw input, e.g. ``cp a.txt b.txt``

        Returns:
            The command outcome, or None for a blank line
        """
        invocation = CommandInvocation.parse(line)
        if invocation is None:
            return None

        spec = self._commands.get(invocation.keyword)
        if spec is None:
            return CommandResult.error(
                ErrorKind.UNKNOWN_COMMAND,
                f"Unknown command: '{invocation.keyword}'. Type 'help' for available commands.",
            )

        invocation = invocation.with_arity(spec.arity)
        if not invocation.has_required_args():
            return CommandResult.error(
                ErrorKind.INVALID_ARGUMENT, spec.usage[0], lines=spec.usage[1:]
            )

        # Handlers only ever see this snapshot of the cursor.
        cursor = self._resolver.current()
        try:
            return spec.handler(cursor, invocation.args[: spec.arity])
        except BaseAppError as e:
            self._logger.info(f"{invocation.keyword} failed ({e.kind.value}): {e}")
            return CommandResult.error(e.kind, str(e))
        except OSError as e:
            self._logger.error(f"{invocation.keyword} failed: {e}")
            return CommandResult.error(ErrorKind.OPERATION_FAILED, str(e))

    # -- Navigation ----------------------------------------------------------

    def _cmd_ls(self, cursor: str, args: tuple[str, ...]) -> CommandResult:
        entries = self._list_files_uc.execute(cursor)
        return CommandResult.success(f"Contents of: {cursor}", payload=entries)

    def _cmd_pwd(self, cursor: str, args: tuple[str, ...]) -> CommandResult:
        return CommandResult.success(cursor, payload=cursor)

    def _cmd_cd(self, cursor: str, args: tuple[str, ...]) -> CommandResult:
        if args[0] == "..":
            return self._resolver.go_to_parent()
        return self._resolver.change_directory(args[0])

    # -- File/Directory operations -------------------------------------------

    def _cmd_touch(self, cursor: str, args: tuple[str, ...]) -> CommandResult:
        path = self._create_file_uc.execute(resolve_path(cursor, args[0]))
        return CommandResult.success(f"File created: {path}", payload=path)

    def _cmd_mkdir(self, cursor: str, args: tuple[str, ...]) -> CommandResult:
        path = self._create_directory_uc.execute(resolve_path(cursor, args[0]))
        return CommandResult.success(f"Directory created: {path}", payload=path)

    def _cmd_cp(self, cursor: str, args: tuple[str, ...]) -> CommandResult:
        src, dst = self._copy_entry_uc.execute(
            resolve_path(cursor, args[0]), resolve_path(cursor, args[1])
        )
        return CommandResult.success(f"Copied: {src} -> {dst}", payload=(src, dst))

    def _cmd_mv(self, cursor: str, args: tuple[str, ...]) -> CommandResult:
        src, dst = self._move_entry_uc.execute(
            resolve_path(cursor, args[0]), resolve_path(cursor, args[1])
        )
        return CommandResult.success(f"Moved: {src} -> {dst}", payload=(src, dst))

    def _cmd_rm(self, cursor: str, args: tuple[str, ...]) -> CommandResult:
        path = resolve_path(cursor, args[0])
        removed = self._delete_entry_uc.execute(path)
        if removed is None:
            return CommandResult.success(f"File deleted: {path}")
        return CommandResult.success(
            f"Directory deleted: {path} ({removed} items removed)", payload=removed
        )

    # -- Search --------------------------------------------------------------

    def _cmd_find(self, cursor: str, args: tuple[str, ...]) -> CommandResult:
        pattern = args[0]
        try:
            outcome = self._search_files_uc.execute(cursor, pattern)
        except CommandError as e:
            return CommandResult.error(e.kind, str(e), payload=SearchOutcome(pattern))
        return CommandResult.success(
            f"Search results for pattern: '{pattern}'",
            payload=outcome,
            warnings=tuple(outcome.skipped),
        )

    # -- Permissions ---------------------------------------------------------

    def _cmd_stat(self, cursor: str, args: tuple[str, ...]) -> CommandResult:
        report = self._show_permissions_uc.execute(resolve_path(cursor, args[0]))
        return CommandResult.success(f"Permissions for: {report.path}", payload=report)

    def _cmd_chmod(self, cursor: str, args: tuple[str, ...]) -> CommandResult:
        change = self._change_permissions_uc.execute(resolve_path(cursor, args[0]), args[1])
        if change.applied:
            return CommandResult.success(
                f"Permissions changed to: {change.triad}", payload=change
            )
        return CommandResult.warning(
            f"Permissions changed to: {change.triad} (conceptually)",
            payload=change,
            warnings=(change.warning,) if change.warning else (),
        )

    # -- Other ---------------------------------------------------------------

    def _cmd_help(self, cursor: str, args: tuple[str, ...]) -> CommandResult:
        return CommandResult.info("", payload=HELP)

    def _cmd_exit(self, cursor: str, args: tuple[str, ...]) -> CommandResult:
        return CommandResult.success("Goodbye!", exit=True)
