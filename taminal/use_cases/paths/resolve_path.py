"""
Use case for turning user supplied paths into absolute ones.
"""

import logging
import os
from typing import Mapping, Optional

from taminal.exceptions import NotDirectoryError, PathNotFoundError
from taminal.ports.files.file_system_port import FileSystemPort


class PathResolver:
    """Resolve possibly-relative paths against a base directory."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the resolver.

        Args:
            file_system: Port used for existence/type checks and canonicalization
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    @staticmethod
    def resolve(raw: str, base: str) -> str:
        """
        Join a relative path onto base; absolute paths are returned unchanged.

        No canonicalization is done: ``..`` segments and symlinks are kept.
        """
        if os.path.isabs(raw):
            return raw
        return os.path.join(base, raw)

    @staticmethod
    def default_target(environ: Optional[Mapping[str, str]] = None) -> str:
        """Directory used by ``cd`` without argument: $HOME, or the filesystem root."""
        env = os.environ if environ is None else environ
        return env.get("HOME") or os.sep

    def resolve_directory(self, raw: str, base: str, canonicalize: bool = True) -> str:
        """
        Resolve raw against base and check that it names a directory.

        Args:
            raw: Path typed by the user
            base: Absolute directory relative paths start from
            canonicalize: Return the real path ('..' and symlinks resolved)

        Returns:
            The absolute directory path

        Raises:
            PathNotFoundError: If the path does not exist
            NotDirectoryError: If the path exists but is not a directory
            PermissionOrIoError: If canonicalization fails
        """
        path = self.resolve(raw, base)
        if not self._file_system.exists(path, follow_symlinks=True):
            raise PathNotFoundError(path=path)
        if not self._file_system.is_dir(path):
            raise NotDirectoryError(path=path)
        if canonicalize:
            path = self._file_system.canonicalize(path)
        self._logger.debug(f"Resolved {raw!r} against {base} to {path}")
        return path
