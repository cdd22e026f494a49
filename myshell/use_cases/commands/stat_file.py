"""
stat: report metadata of a file, following symbolic links.
"""

import logging
from typing import Optional

from typing_extensions import override

from myshell.entities.file_metadata import FileMetadata
from myshell.entities.result import OperationResult
from myshell.exceptions import FileSystemError
from myshell.ports.commands.command_handler_port import (
    ArgumentPolicy,
    CommandHandlerPort,
)
from myshell.ports.console.output_port import OutputPort
from myshell.ports.files.file_system_port import FileSystemPort


class StatFileCommand(CommandHandlerPort):
    """Print size, block size, block count, links, inode and modification time."""

    name = "stat"
    argument_policy = ArgumentPolicy.REQUIRED

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
        path = argument or ""
        try:
            metadata = FileMetadata.from_stat(path, self._fs.stat(path))
        except FileSystemError as e:
            return OperationResult.failure(f"Error outputting stat: {path}: {e.reason}")

        for line in metadata.format_lines():
            self._output.write_line(line)
        self._logger.debug(f"Reported metadata of {path}")
        return OperationResult.success()
