"""
Dependency injection container for managing application dependencies.
"""

import logging

from taminal.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from taminal.adapters.process.subprocess_runner import SubprocessRunner
from taminal.entities.profile import ShellProfile
from taminal.ports.files.file_system_port import FileSystemPort
from taminal.ports.process.process_runner_port import ProcessRunnerPort
from taminal.use_cases.files.list_directory import ListDirectoryUseCase
from taminal.use_cases.files.make_directories import MakeDirectoriesUseCase
from taminal.use_cases.files.remove_directories import RemoveDirectoriesUseCase
from taminal.use_cases.files.remove_files import RemoveFilesUseCase
from taminal.use_cases.navigation.change_directory import ChangeDirectoryUseCase
from taminal.use_cases.paths.complete_path import CompletionEngine
from taminal.use_cases.paths.resolve_path import PathResolver
from taminal.use_cases.process.run_external import RunExternalCommandUseCase
from taminal.use_cases.shell.dispatcher import BuiltinDispatcher


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_file_system(self) -> FileSystemPort:
        """
        Get file system adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_system"]

    def get_process_runner(self) -> ProcessRunnerPort:
        """
        Get process runner adapter instance.

        Returns:
            ProcessRunnerPort implementation
        """
        if "process_runner" not in self._instances:
            self._instances["process_runner"] = SubprocessRunner(self._logger)
        return self._instances["process_runner"]

    def get_path_resolver(self) -> PathResolver:
        if "path_resolver" not in self._instances:
            self._instances["path_resolver"] = PathResolver(
                self.get_file_system(), self._logger
            )
        return self._instances["path_resolver"]

    def get_completion_engine(self) -> CompletionEngine:
        if "completion_engine" not in self._instances:
            self._instances["completion_engine"] = CompletionEngine(
                self.get_file_system(), self._logger
            )
        return self._instances["completion_engine"]

    def get_change_directory_use_case(self) -> ChangeDirectoryUseCase:
        """
        Get change directory use case with injected dependencies.

        Returns:
            Configured ChangeDirectoryUseCase
        """
        if "change_directory_use_case" not in self._instances:
            self._instances["change_directory_use_case"] = ChangeDirectoryUseCase(
                self.get_file_system(),
                self.get_path_resolver(),
                self.get_completion_engine(),
                self._logger,
            )
        return self._instances["change_directory_use_case"]

    def get_list_directory_use_case(self) -> ListDirectoryUseCase:
        if "list_directory_use_case" not in self._instances:
            self._instances["list_directory_use_case"] = ListDirectoryUseCase(
                self.get_file_system(), self._logger
            )
        return self._instances["list_directory_use_case"]

    def get_make_directories_use_case(self) -> MakeDirectoriesUseCase:
        if "make_directories_use_case" not in self._instances:
            self._instances["make_directories_use_case"] = MakeDirectoriesUseCase(
                self.get_file_system(), self._logger
            )
        return self._instances["make_directories_use_case"]

    def get_remove_directories_use_case(self) -> RemoveDirectoriesUseCase:
        if "remove_directories_use_case" not in self._instances:
            self._instances["remove_directories_use_case"] = RemoveDirectoriesUseCase(
                self.get_file_system(), self._logger
            )
        return self._instances["remove_directories_use_case"]

    def get_remove_files_use_case(self) -> RemoveFilesUseCase:
        if "remove_files_use_case" not in self._instances:
            self._instances["remove_files_use_case"] = RemoveFilesUseCase(
                self.get_file_system(), self._logger
            )
        return self._instances["remove_files_use_case"]

    def get_run_external_use_case(self) -> RunExternalCommandUseCase:
        if "run_external_use_case" not in self._instances:
            self._instances["run_external_use_case"] = RunExternalCommandUseCase(
                self.get_process_runner(), self._logger
            )
        return self._instances["run_external_use_case"]

    def get_dispatcher(self, profile: ShellProfile) -> BuiltinDispatcher:
        """
        Get the dispatcher for a front end profile.

        One dispatcher is kept per profile name, all sharing the same adapters.

        Returns:
            Configured BuiltinDispatcher
        """
        key = f"dispatcher:{profile.name}"
        if key not in self._instances:
            self._instances[key] = BuiltinDispatcher(
                profile,
                self.get_file_system(),
                self.get_change_directory_use_case(),
                self.get_list_directory_use_case(),
                self.get_make_directories_use_case(),
                self.get_remove_directories_use_case(),
                self.get_remove_files_use_case(),
                self.get_run_external_use_case(),
                self._logger,
            )
        return self._instances[key]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
