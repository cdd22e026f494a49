"""
cd: change the working directory.
"""

import logging
from typing import Optional

from typing_extensions import override

from myshell.entities.result import OperationResult
from myshell.exceptions import FileSystemError
from myshell.ports.commands.command_handler_port import (
    ArgumentPolicy,
    CommandHandlerPort,
)
from myshell.ports.files.file_system_port import FileSystemPort


class ChangeDirectoryCommand(CommandHandlerPort):
    """Change the working directory; without an argument go to the user's home."""

    name = "cd"
    argument_policy = ArgumentPolicy.OPTIONAL

    def __init__(self, file_system: FileSystemPort, logger: Optional[logging.Logger] = None):
        self._fs = file_system
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(self, argument: Optional[str] = None) -> OperationResult:
        try:
            target = argument or self._fs.home_directory()
        except FileSystemError as e:
            return OperationResult.failure(f"cd: {e.reason}")

        try:
            self._fs.change_directory(target)
        except FileSystemError as e:
            self._logger.info(f"Could not change directory to {target}: {e.reason}")
            return OperationResult.failure(f"cd: {target}: {e.reason}")

        self._logger.info(f"Changed directory to {target}")
        return OperationResult.success()
