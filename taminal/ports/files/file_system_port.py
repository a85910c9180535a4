"""
File system port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod

from taminal.entities.directory_entry import DirectoryEntry


class FileSystemPort(ABC):
    """Port interface for every file system call the shell makes."""

    @abstractmethod
    def exists(self, path: str, follow_symlinks: bool = False) -> bool:
        """
        Return True if the path exists.

        A dangling symlink counts as existing unless follow_symlinks is set.
        """
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        pass

    @abstractmethod
    def is_link(self, path: str) -> bool:
        pass

    @abstractmethod
    def list_entries(self, directory: str) -> list[DirectoryEntry]:
        """
        List all entries of a directory, in file system order.

        Args:
            directory: Path to the directory to read

        Returns:
            List of DirectoryEntry entities

        Raises:
            FileSystemError: If the directory cannot be read
        """
        pass

    @abstractmethod
    def make_directory(self, path: str) -> None:
        """
        Create a single directory (parents are not created).

        Raises:
            AlreadyExistsError: If the path already exists
            FileSystemError: If creation fails
        """
        pass

    @abstractmethod
    def remove_directory(self, path: str) -> None:
        """
        Remove an empty directory.

        Raises:
            PathNotFoundError, NotDirectoryError, DirectoryNotEmptyError, FileSystemError
        """
        pass

    @abstractmethod
    def remove_file(self, path: str) -> None:
        """Unlink a file or symbolic link."""
        pass

    @abstractmethod
    def remove_tree(self, path: str) -> None:
        """Remove a directory and everything below it."""
        pass

    @abstractmethod
    def canonicalize(self, path: str) -> str:
        """Return the absolute real path with symlinks and '..' resolved."""
        pass

    @abstractmethod
    def change_working_directory(self, path: str) -> None:
        """Set the process working directory."""
        pass

    @abstractmethod
    def working_directory(self) -> str:
        """Return the process working directory."""
        pass
