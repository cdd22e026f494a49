"""
cat: write the contents of a file to the output stream.
"""

import logging
from contextlib import closing
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

DEFAULT_CHUNK_SIZE = 256


class ShowFileCommand(CommandHandlerPort):
    """Copy a file to the output chunk by chunk, then end with a newline."""

    name = "cat"
    argument_policy = ArgumentPolicy.REQUIRED

    def __init__(
        self,
        file_system: FileSystemPort,
        output: OutputPort,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        logger: Optional[logging.Logger] = None,
    ):
        if chunk_size <= 0:
            raise ValueError("chunk_size must be a positive integer")
        self._fs = file_system
        self._output = output
        self._chunk_size = chunk_size
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(self, argument: Optional[str] = None) -> OperationResult:
        path = argument or ""
        written = 0
        try:
            with closing(self._fs.read_chunks(path, self._chunk_size)) as chunks:
                for chunk in chunks:
                    # Only the bytes actually read, never a whole buffer.
                    self._output.write_bytes(chunk)
                    written += len(chunk)
        except FileSystemError as e:
            if e.operation == "open":
                return OperationResult.failure(f"Unable to open {path}: {e.reason}")
            return OperationResult.failure(f"Error reading data from {path}: {e.reason}")

        self._output.write_line("")
        self._logger.info(f"Wrote {written} bytes from {path}")
        return OperationResult.success()
