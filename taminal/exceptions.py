"""
Custom exceptions for the application.
"""

import errno
from typing import Optional


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class ShellError(BaseAppError):
    """
    Exception raised when a single command (or one of its targets) fails.

    The ``reason`` is the short human readable text shown after the last colon
    of an error line, e.g. ``No such file or directory``.
    """

    default_reason = "Input/output error"

    def __init__(self, reason: Optional[str] = None, path: Optional[str] = None):
        self.reason = reason or self.default_reason
        self.path = path
        super().__init__(self.reason)


class FileSystemError(ShellError):
    """Exception raised for file system errors."""

    pass


class PathNotFoundError(FileSystemError):
    default_reason = "No such file or directory"


class NotDirectoryError(FileSystemError):
    default_reason = "Not a directory"


class IsDirectoryError(FileSystemError):
    default_reason = "Is a directory"


class AlreadyExistsError(FileSystemError):
    default_reason = "File exists"


class DirectoryNotEmptyError(FileSystemError):
    default_reason = "Directory not empty"


class PermissionOrIoError(FileSystemError):
    """Catch-all wrapping the underlying OS error text."""

    pass


class CommandNotFoundError(ShellError):
    """Exception raised when an external command cannot be launched."""

    def __init__(self, command: str, reason: str):
        self.command = command
        super().__init__(reason)

    def __str__(self) -> str:
        return f"{self.command}: command not found ({self.reason})"


class InvalidOptionError(ShellError):
    """Exception raised for an unknown flag character in strict option parsing."""

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"invalid option -- '{option}'")


class MissingOperandError(ShellError):
    default_reason = "missing operand"


_ERRNO_TO_ERROR: dict[int, type[FileSystemError]] = {
    errno.ENOENT: PathNotFoundError,
    errno.ENOTDIR: NotDirectoryError,
    errno.EISDIR: IsDirectoryError,
    errno.EEXIST: AlreadyExistsError,
    errno.ENOTEMPTY: DirectoryNotEmptyError,
}


def os_error_text(exc: OSError) -> str:
    """Return the bare OS message of an exception, without the errno/filename decoration."""
    return exc.strerror or str(exc)


def map_os_error(exc: OSError, path: Optional[str] = None) -> FileSystemError:
    """
    Convert an ``OSError`` into the matching ``FileSystemError`` subclass.

    Args:
        exc: The error raised by the operating system
        path: Path the operation was applied to

    Returns:
        A FileSystemError carrying the OS message as reason
    """
    error_cls = _ERRNO_TO_ERROR.get(exc.errno or 0, PermissionOrIoError)
    return error_cls(os_error_text(exc), path=path or exc.filename)
