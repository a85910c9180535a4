"""
Use case for completing a partially typed path.
"""

import logging
import os
from typing import Optional

from taminal.exceptions import ShellError
from taminal.ports.files.file_system_port import FileSystemPort

CURRENT_DIRECTORY = "."


class CompletionEngine:
    """List directory entries matching the last segment of a partial path."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    @staticmethod
    def split(partial: str) -> tuple[str, str]:
        """
        Split a partial path into the directory to read and the name prefix.

        ``"src/ma"`` gives ``("src", "ma")``, ``"src/"`` gives ``("src/", "")``
        and a bare name is looked up in the current directory.
        """
        if partial.endswith(os.sep):
            return partial, ""
        if not partial:
            return CURRENT_DIRECTORY, ""
        directory, prefix = os.path.split(partial)
        return directory or CURRENT_DIRECTORY, prefix

    def complete(self, partial: str, base: str) -> list[str]:
        """
        Build completion candidates for a partial path.

        Args:
            partial: The path typed so far
            base: Absolute directory relative partials are read from

        Returns:
            Sorted candidates rebuilt in the partial's own prefix style, with a
            trailing separator on directories; empty when nothing matches or
            the directory cannot be read
        """
        directory, prefix = self.split(partial)
        try:
            entries = self._file_system.list_entries(os.path.join(base, directory))
        except ShellError as e:
            self._logger.debug(f"No completions for {partial!r}: {e}")
            return []

        candidates: list[str] = []
        for entry in entries:
            if not entry.name.startswith(prefix):
                continue
            if directory == CURRENT_DIRECTORY:
                candidate = entry.name
            elif partial.endswith(os.sep):
                candidate = partial + entry.name
            else:
                candidate = os.path.join(directory, entry.name)
            if entry.is_dir:
                candidate += os.sep
            candidates.append(candidate)

        candidates.sort()
        self._logger.debug(f"{len(candidates)} completion(s) for {partial!r}")
        return candidates
