"""
rm: unlink a single file.
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


class RemoveFileCommand(CommandHandlerPort):
    name = "rm"
    argument_policy = ArgumentPolicy.REQUIRED

    def __init__(self, file_system: FileSystemPort, logger: Optional[logging.Logger] = None):
        self._fs = file_system
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(self, argument: Optional[str] = None) -> OperationResult:
        path = argument or ""
        try:
            self._fs.remove_file(path)
        except FileSystemError as e:
            return OperationResult.failure(f"Error removing file {path}: {e.reason}")
        self._logger.info(f"Removed file {path}")
        return OperationResult.success()
