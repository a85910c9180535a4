"""
Use case for creating directories.
"""

import logging
from typing import Optional

from taminal.entities.output import TargetResult
from taminal.exceptions import MissingOperandError, ShellError
from taminal.ports.files.file_system_port import FileSystemPort
from taminal.use_cases.paths.resolve_path import PathResolver


class MakeDirectoriesUseCase:
    """Create each named directory; one failure does not stop the others."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, directories: list[str], base: str) -> list[TargetResult]:
        """
        Create directories in argument order (single segment, no parents).

        Args:
            directories: Directory names as typed by the user
            base: Absolute current directory

        Returns:
            One TargetResult per argument

        Raises:
            MissingOperandError: If no directory was given
        """
        if not directories:
            raise MissingOperandError()
        results: list[TargetResult] = []
        for directory in directories:
            try:
                self._file_system.make_directory(PathResolver.resolve(directory, base))
                results.append(TargetResult(directory))
            except ShellError as e:
                self._logger.info(f"mkdir {directory} failed: {e}")
                results.append(TargetResult(directory, e))
        return results
