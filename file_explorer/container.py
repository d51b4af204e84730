"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Any, Optional

from file_explorer.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_explorer.ports.files.file_repository_port import FileRepositoryPort
from file_explorer.ui.console_renderer import ConsoleRenderer
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
from file_explorer.use_cases.navigation.path_resolver import PathResolver
from file_explorer.use_cases.shell.command_dispatcher import CommandDispatcher


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, start_directory: Optional[str] = None):
        """
        Args:
            start_directory: Initial cursor; defaults to the process working directory
        """
        self._instances: dict[str, Any] = {}
        self._start_directory = start_directory
        self._logger = logging.getLogger(__name__)

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            self._instances["file_repository"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_repository"]

    def get_path_resolver(self) -> PathResolver:
        """
        Get the cursor owner.

        Returns:
            PathResolver starting at the configured directory
        """
        if "path_resolver" not in self._instances:
            self._instances["path_resolver"] = PathResolver(
                self.get_file_repository(), self._start_directory, self._logger
            )
        return self._instances["path_resolver"]

    def _use_case(self, key: str, factory: Any) -> Any:
        if key not in self._instances:
            self._instances[key] = factory(self.get_file_repository(), self._logger)
        return self._instances[key]

    def get_list_files_use_case(self) -> ListFilesUseCase:
        return self._use_case("list_files_use_case", ListFilesUseCase)

    def get_search_files_use_case(self) -> SearchFilesUseCase:
        return self._use_case("search_files_use_case", SearchFilesUseCase)

    def get_create_file_use_case(self) -> CreateFileUseCase:
        return self._use_case("create_file_use_case", CreateFileUseCase)

    def get_create_directory_use_case(self) -> CreateDirectoryUseCase:
        return self._use_case("create_directory_use_case", CreateDirectoryUseCase)

    def get_copy_entry_use_case(self) -> CopyEntryUseCase:
        return self._use_case("copy_entry_use_case", CopyEntryUseCase)

    def get_move_entry_use_case(self) -> MoveEntryUseCase:
        return self._use_case("move_entry_use_case", MoveEntryUseCase)

    def get_delete_entry_use_case(self) -> DeleteEntryUseCase:
        return self._use_case("delete_entry_use_case", DeleteEntryUseCase)

    def get_show_permissions_use_case(self) -> ShowPermissionsUseCase:
        return self._use_case("show_permissions_use_case", ShowPermissionsUseCase)

    def get_change_permissions_use_case(self) -> ChangePermissionsUseCase:
        return self._use_case("change_permissions_use_case", ChangePermissionsUseCase)

    def get_command_dispatcher(self) -> CommandDispatcher:
        """
        Get the command dispatcher with every use case injected.

        Returns:
            Configured CommandDispatcher
        """
        if "command_dispatcher" not in self._instances:
            self._instances["command_dispatcher"] = CommandDispatcher(
                self.get_path_resolver(),
                self.get_list_files_use_case(),
                self.get_search_files_use_case(),
                self.get_create_file_use_case(),
                self.get_create_directory_use_case(),
                self.get_copy_entry_use_case(),
                self.get_move_entry_use_case(),
                self.get_delete_entry_use_case(),
                self.get_show_permissions_use_case(),
                self.get_change_permissions_use_case(),
                logger=self._logger,
            )
        return self._instances["command_dispatcher"]

    def get_renderer(self) -> ConsoleRenderer:
        if "renderer" not in self._instances:
            self._instances["renderer"] = ConsoleRenderer()
        return self._instances["renderer"]

    def set_renderer(self, renderer: ConsoleRenderer) -> None:
        self._instances["renderer"] = renderer

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
