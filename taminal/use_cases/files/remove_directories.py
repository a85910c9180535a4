"""
Use case for removing empty directories.
"""

import logging
from typing import Optional

from taminal.entities.output import TargetResult
from taminal.exceptions import MissingOperandError, ShellError
from taminal.ports.files.file_system_port import FileSystemPort
from taminal.use_cases.paths.resolve_path import PathResolver


class RemoveDirectoriesUseCase:
    """Remove each named directory if it is empty."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, directories: list[str], base: str) -> list[TargetResult]:
        """
        Remove directories in argument order.

        Missing paths, non-directories and non-empty directories each fail with
        their own error; processing continues with the next argument. Telling
        "not empty" apart relies on the OS error code and is best effort.

        Raises:
            MissingOperandError: If no directory was given
        """
        if not directories:
            raise MissingOperandError()
        results: list[TargetResult] = []
        for directory in directories:
            try:
                self._file_system.remove_directory(PathResolver.resolve(directory, base))
                results.append(TargetResult(directory))
            except ShellError as e:
                self._logger.info(f"rmdir {directory} failed: {e}")
                results.append(TargetResult(directory, e))
        return results
