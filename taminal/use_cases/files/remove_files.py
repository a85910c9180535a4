"""
Use case for removing files and directory trees.
"""

import logging
from typing import Optional

from taminal.entities.command import RemoveOptions
from taminal.entities.output import TargetResult
from taminal.exceptions import (
    IsDirectoryError,
    MissingOperandError,
    PathNotFoundError,
    ShellError,
)
from taminal.ports.files.file_system_port import FileSystemPort
from taminal.use_cases.paths.resolve_path import PathResolver


class RemoveFilesUseCase:
    """Remove targets according to parsed ``rm`` options."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def _remove(self, path: str, options: RemoveOptions) -> None:
        if not self._file_system.exists(path):
            if options.force:
                return
            raise PathNotFoundError(path=path)

        # a symlink is unlinked even when it points at a directory
        if self._file_system.is_link(path) or not self._file_system.is_dir(path):
            self._file_system.remove_file(path)
        elif options.recursive:
            self._file_system.remove_tree(path)
        else:
            raise IsDirectoryError(path=path)

    def execute(self, options: RemoveOptions, base: str) -> list[TargetResult]:
        """
        Remove every target.

        With ``force`` missing targets and OS failures are silent; a directory
        without ``recursive`` is always reported.

        Args:
            options: Parsed flags and targets
            base: Absolute current directory

        Returns:
            One TargetResult per target; failures hidden by force carry no error

        Raises:
            MissingOperandError: If there is no target
        """
        if not options.targets:
            raise MissingOperandError()
        results: list[TargetResult] = []
        for target in options.targets:
            try:
                self._remove(PathResolver.resolve(target, base), options)
                results.append(TargetResult(target))
            except IsDirectoryError as e:
                results.append(TargetResult(target, e))
            except ShellError as e:
                self._logger.info(f"rm {target} failed: {e}")
                results.append(TargetResult(target, None if options.force else e))
        return results
