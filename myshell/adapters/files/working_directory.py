"""
Working directory adapters.

ProcessWorkingDirectory drives the real process-wide directory through
os.getcwd()/os.chdir(). VirtualWorkingDirectory keeps the directory as an
explicit value so the interpreter can run without touching process state.
"""

import errno
import logging
import os
import stat
from typing import Optional

from typing_extensions import override

from myshell.exceptions import FileSystemError
from myshell.ports.files.working_directory_port import WorkingDirectoryPort


class ProcessWorkingDirectory(WorkingDirectoryPort):
    """Working directory backed by the operating system process state."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def current(self) -> str:
        try:
            return os.getcwd()
        except (OSError, ValueError) as e:
            raise FileSystemError.from_os_error("getcwd", ".", e) from e

    @override
    def change(self, path: str) -> None:
        try:
            os.chdir(path)
        except (OSError, ValueError) as e:
            raise FileSystemError.from_os_error("chdir", path, e) from e
        self._logger.debug(f"Process working directory changed to {path}")

    @override
    def resolve(self, path: str) -> str:
        # The kernel resolves relative paths against the process directory.
        return path


class VirtualWorkingDirectory(WorkingDirectoryPort):
    """Working directory held in memory and validated against the real filesystem."""

    def __init__(self, start: Optional[str] = None, logger: Optional[logging.Logger] = None):
        """
        Initialize the working directory.

        Args:
            start: Initial directory. Defaults to the process directory at creation time.
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._path: str = os.path.realpath(start or os.getcwd())
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def current(self) -> str:
        if not os.path.isdir(self._path):
            raise FileSystemError(
                "getcwd", self._path, os.strerror(errno.ENOENT), errno.ENOENT
            )
        return self._path

    @override
    def change(self, path: str) -> None:
        try:
            target = os.path.realpath(self.resolve(path))
            st = os.stat(target)
            accessible = os.access(target, os.X_OK)
        except (OSError, ValueError) as e:
            raise FileSystemError.from_os_error("chdir", path, e) from e
        if not stat.S_ISDIR(st.st_mode):
            raise FileSystemError(
                "chdir", path, os.strerror(errno.ENOTDIR), errno.ENOTDIR
            )
        if not accessible:
            raise FileSystemError("chdir", path, os.strerror(errno.EACCES), errno.EACCES)
        self._path = target
        self._logger.debug(f"Virtual working directory changed to {target}")

    @override
    def resolve(self, path: str) -> str:
        return os.path.join(self._path, path)
