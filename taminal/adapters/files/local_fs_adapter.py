"""
Local file system adapter implementation for file operations.
"""

import logging
import os
import shutil

from typing_extensions import override

from taminal.entities.directory_entry import DirectoryEntry
from taminal.exceptions import (
    AlreadyExistsError,
    NotDirectoryError,
    PathNotFoundError,
    map_os_error,
)
from taminal.ports.files.file_system_port import FileSystemPort


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the file system port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def exists(self, path: str, follow_symlinks: bool = False) -> bool:
        if follow_symlinks:
            return os.path.exists(path)
        return os.path.lexists(path)

    @override
    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    @override
    def is_link(self, path: str) -> bool:
        return os.path.islink(path)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Path to the directory to validate

        Raises:
            PathNotFoundError: If directory does not exist
            NotDirectoryError: If the path is not a directory
        """
        if not os.path.exists(directory):
            raise PathNotFoundError(path=directory)

        if not os.path.isdir(directory):
            raise NotDirectoryError(path=directory)

    def _create_entries(self, directory: str, names: list[str]) -> list[DirectoryEntry]:
        """
        Create DirectoryEntry entities from the names found in a directory.

        Args:
            directory: Directory the names were read from
            names: Entry names as returned by the OS

        Returns:
            List of DirectoryEntry entities
        """
        entries: list[DirectoryEntry] = []
        for name in names:
            entry_path = os.path.join(directory, name)
            entries.append(DirectoryEntry(name, entry_path, os.path.isdir(entry_path)))
        return entries

    @override
    def list_entries(self, directory: str) -> list[DirectoryEntry]:
        """
        List all entries in a directory.

        Args:
            directory: Path to the directory to read

        Returns:
            List of DirectoryEntry entities

        Raises:
            FileSystemError: If listing fails
        """
        self._validate_directory(directory)
        try:
            names = os.listdir(directory)
        except OSError as e:
            self._logger.debug(f"Could not read directory {directory}: {e}")
            raise map_os_error(e, directory)
        return self._create_entries(directory, names)

    @override
    def make_directory(self, path: str) -> None:
        if os.path.lexists(path):
            raise AlreadyExistsError(path=path)
        try:
            os.mkdir(path)
        except OSError as e:
            raise map_os_error(e, path)
        self._logger.info(f"Created directory {path}")

    @override
    def remove_directory(self, path: str) -> None:
        if not os.path.lexists(path):
            raise PathNotFoundError(path=path)
        if not os.path.isdir(path):
            raise NotDirectoryError(path=path)
        try:
            os.rmdir(path)
        except OSError as e:
            raise map_os_error(e, path)
        self._logger.info(f"Removed directory {path}")

    @override
    def remove_file(self, path: str) -> None:
        try:
            os.remove(path)
        except OSError as e:
            raise map_os_error(e, path)
        self._logger.info(f"Removed file {path}")

    @override
    def remove_tree(self, path: str) -> None:
        try:
            shutil.rmtree(path)
        except OSError as e:
            raise map_os_error(e, path)
        self._logger.info(f"Removed tree {path}")

    @override
    def canonicalize(self, path: str) -> str:
        try:
            return os.path.realpath(path, strict=True)
        except OSError as e:
            raise map_os_error(e, path)

    @override
    def change_working_directory(self, path: str) -> None:
        try:
            os.chdir(path)
        except OSError as e:
            raise map_os_error(e, path)
        self._logger.debug(f"Process working directory is now {path}")

    @override
    def working_directory(self) -> str:
        try:
            return os.getcwd()
        except OSError as e:
            raise map_os_error(e)
