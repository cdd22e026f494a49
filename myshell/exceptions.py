"""
Custom exceptions for the application.
"""

import errno as errno_codes
import os
from typing import Optional, Union


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileSystemError(BaseAppError):
    """Exception raised when an operating system call on the filesystem fails."""

    def __init__(
        self,
        operation: str,
        path: str,
        reason: str,
        errno: Optional[int] = None,
    ):
        """
        Initialize the error.

        Args:
            operation: Short name of the attempted call (e.g. "open", "lstat")
            path: Path the call was made on
            reason: Human-readable OS error description
            errno: OS error number, when known
        """
        super().__init__(f"{operation} {path}: {reason}")
        self.operation = operation
        self.path = path
        self.reason = reason
        self.errno = errno

    @classmethod
    def from_os_error(
        cls, operation: str, path: str, exc: Union[OSError, ValueError]
    ) -> "FileSystemError":
        """
        Build the error from a failed OS call, keeping the OS-provided text.

        os functions raise ValueError for paths with an embedded NUL byte;
        that is reported as EINVAL.
        """
        if isinstance(exc, OSError):
            return cls(operation, path, exc.strerror or str(exc), exc.errno)
        return cls(operation, path, os.strerror(errno_codes.EINVAL), errno_codes.EINVAL)


class PathTooLongError(FileSystemError):
    """Exception raised when a joined path exceeds the platform path limit."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class ShellExit(BaseAppError):
    """Raised when the user asks the interpreter to terminate."""

    def __init__(self, exit_code: int = 0):
        super().__init__(f"exit requested with status {exit_code}")
        self.exit_code = exit_code
