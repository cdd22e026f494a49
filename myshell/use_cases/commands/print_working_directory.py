"""
pwd: print the working directory as a plain path.
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
from myshell.ports.console.output_port import OutputPort
from myshell.ports.files.file_system_port import FileSystemPort


class PrintWorkingDirectoryCommand(CommandHandlerPort):
    name = "pwd"
    argument_policy = ArgumentPolicy.IGNORED

    def __init__(
        self,
        file_system: FileSystemPort,
        output: OutputPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._fs = file_system
        self._output = output
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(self, argument: Optional[str] = None) -> OperationResult:
        try:
            cwd = self._fs.current_directory()
        except FileSystemError as e:
            return OperationResult.failure(
                f"Error outputting current directory: {e.reason}"
            )
        self._output.write_line(cwd)
        return OperationResult.success()
