"""
Use case for changing the session's current directory.
"""

import logging
from typing import Optional

from taminal.entities.profile import DirectoryTrackingMode
from taminal.entities.session import Session
from taminal.ports.files.file_system_port import FileSystemPort
from taminal.use_cases.paths.complete_path import CompletionEngine
from taminal.use_cases.paths.resolve_path import PathResolver


class ChangeDirectoryUseCase:
    """Change directory under one of the two tracking disciplines."""

    def __init__(
        self,
        file_system: FileSystemPort,
        resolver: PathResolver,
        completion: CompletionEngine,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port used to change/read the process working directory
            resolver: Resolver for relative paths and directory checks
            completion: Engine used for the tab-completion trigger
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._resolver = resolver
        self._completion = completion
        self._logger = logger or logging.getLogger(__name__)

    def complete(self, partial: str, session: Session) -> list[str]:
        return self._completion.complete(partial, session.current_directory)

    def execute(
        self,
        argument: Optional[str],
        session: Session,
        tracking: DirectoryTrackingMode,
    ) -> str:
        """
        Change directory and return the new current directory.

        OWNED_CANONICALIZED checks the target, canonicalizes it and stores it in
        the session only. OS_MANAGED hands the path straight to the OS and then
        reads the process working directory back.

        Args:
            argument: Target as typed; None means $HOME (or the root)
            session: Session whose current directory changes
            tracking: Directory tracking discipline of the front end

        Returns:
            The new current directory

        Raises:
            ShellError: If the directory cannot be entered; the session is unchanged
        """
        raw = argument if argument is not None else self._resolver.default_target()
        if tracking is DirectoryTrackingMode.OWNED_CANONICALIZED:
            new_directory = self._resolver.resolve_directory(
                raw, session.current_directory, canonicalize=True
            )
        else:
            self._file_system.change_working_directory(
                self._resolver.resolve(raw, session.current_directory)
            )
            new_directory = self._file_system.working_directory()

        self._logger.info(f"Current directory: {session.current_directory} -> {new_directory}")
        session.current_directory = new_directory
        return new_directory
