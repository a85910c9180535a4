"""
Use case for listing the entries of a directory.
"""

import logging
from typing import Optional

from wcwidth import wcswidth

from taminal.exceptions import PermissionOrIoError, ShellError
from taminal.ports.files.file_system_port import FileSystemPort
from taminal.use_cases.paths.resolve_path import PathResolver

COLUMNS = 4
COLUMN_WIDTH = 20


def _cell_width(text: str) -> int:
    width = wcswidth(text)
    # non-printable characters make wcswidth give up
    return len(text) if width < 0 else width


def format_columns(
    names: list[str], columns: int = COLUMNS, width: int = COLUMN_WIDTH
) -> list[str]:
    """
    Lay names out left-aligned in fixed-width columns.

    Each name is padded to ``width`` terminal cells (names that are already
    wider are not truncated) and a row holds ``columns`` names.
    """
    rows: list[str] = []
    for start in range(0, len(names), columns):
        row = "".join(
            name + " " * max(0, width - _cell_width(name))
            for name in names[start : start + columns]
        )
        rows.append(row)
    return rows


class ListDirectoryUseCase:
    """Use case for listing a directory the way ``ls`` shows it."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port for file operations
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, directory: str, base: str) -> list[str]:
        """
        List a directory.

        Args:
            directory: Directory as typed by the user (relative to base)
            base: Absolute current directory

        Returns:
            Entry names sorted by code point, directories with a trailing separator

        Raises:
            ShellError: If the directory cannot be read
        """
        path = PathResolver.resolve(directory, base)
        try:
            self._logger.info(f"Listing directory: {path}")
            entries = self._file_system.list_entries(path)
            self._logger.info(f"Found {len(entries)} entries")
        except ShellError:
            raise
        except Exception as e:
            self._logger.error(f"Error listing directory: {e}")
            raise PermissionOrIoError(str(e), path=path)
        return sorted(entry.display_name for entry in entries)
