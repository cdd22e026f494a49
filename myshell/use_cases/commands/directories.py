"""
mkdir / rmdir: create and remove a single directory.
"""

import logging
import stat
from typing import Optional

from typing_extensions import override

from myshell.entities.result import OperationResult
from myshell.exceptions import FileSystemError
from myshell.ports.commands.command_handler_port import (
    ArgumentPolicy,
    CommandHandlerPort,
)
from myshell.ports.files.file_system_port import FileSystemPort

# rwx for owner and group, r-x for others (before umask)
DIRECTORY_MODE = stat.S_IRWXU | stat.S_IRWXG | stat.S_IROTH | stat.S_IXOTH


class MakeDirectoryCommand(CommandHandlerPort):
    name = "mkdir"
    argument_policy = ArgumentPolicy.REQUIRED

    def __init__(self, file_system: FileSystemPort, logger: Optional[logging.Logger] = None):
        self._fs = file_system
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(self, argument: Optional[str] = None) -> OperationResult:
        path = argument or ""
        try:
            self._fs.make_directory(path, DIRECTORY_MODE)
        except FileSystemError as e:
            return OperationResult.failure(f"Error creating directory {path}: {e.reason}")
        self._logger.info(f"Created directory {path}")
        return OperationResult.success()


class RemoveDirectoryCommand(CommandHandlerPort):
    """Remove an empty directory; never recursive."""

    name = "rmdir"
    argument_policy = ArgumentPolicy.REQUIRED

    def __init__(self, file_system: FileSystemPort, logger: Optional[logging.Logger] = None):
        self._fs = file_system
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(self, argument: Optional[str] = None) -> OperationResult:
        path = argument or ""
        try:
            self._fs.remove_directory(path)
        except FileSystemError as e:
            return OperationResult.failure(f"Error removing directory {path}: {e.reason}")
        self._logger.info(f"Removed directory {path}")
        return OperationResult.success()
