"""
ls: list the entries of a directory with their type and size.
"""

import logging
from typing import Optional

from typing_extensions import override

from myshell.entities.directory_entry import DirectoryEntry
from myshell.entities.result import OperationResult
from myshell.exceptions import FileSystemError, PathTooLongError
from myshell.ports.commands.command_handler_port import (
    ArgumentPolicy,
    CommandHandlerPort,
)
from myshell.ports.console.output_port import OutputPort
from myshell.ports.files.file_system_port import DirectoryStream, FileSystemPort


class ListDirectoryCommand(CommandHandlerPort):
    """
    List a directory, one line per entry, in OS enumeration order.

    Entries whose path is too long or whose metadata cannot be read are
    skipped with a warning. An error while reading the stream aborts the
    listing. The stream is closed on every path, and a failed close is
    reported as a failure.
    """

    name = "ls"
    argument_policy = ArgumentPolicy.OPTIONAL

    def __init__(
        self,
        file_system: FileSystemPort,
        output: OutputPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the handler.

        Args:
            file_system: Filesystem port used for the directory stream and lstat
            output: Destination of listing lines and per-entry warnings
            logger: Logger instance to use for logging
        """
        self._fs = file_system
        self._output = output
        self._logger = logger or logging.getLogger(__name__)

    @override
    def execute(self, argument: Optional[str] = None) -> OperationResult:
        directory = argument or "."
        try:
            stream = self._fs.open_directory(directory)
        except FileSystemError as e:
            return OperationResult.failure(
                f"Could not open directory {directory}: {e.reason}"
            )

        try:
            result = self._list_entries(directory, stream)
        finally:
            close_failure = self._close(directory, stream)

        if result.failed or close_failure is None:
            return result
        return close_failure

    def _list_entries(self, directory: str, stream: DirectoryStream) -> OperationResult:
        count = 0
        try:
            for name in stream:
                entry = self._describe(directory, name)
                if entry is None:
                    continue
                self._output.write_line(entry.format_line())
                count += 1
        except FileSystemError as e:
            self._logger.info(f"Listing of {directory} aborted after {count} entries")
            return OperationResult.failure(
                f"Error reading directory {directory}: {e.reason}"
            )

        self._logger.info(f"Listed {count} entries in {directory}")
        return OperationResult.success()

    def _describe(self, directory: str, name: str) -> Optional[DirectoryEntry]:
        try:
            path = self._fs.join_path(directory, name)
        except PathTooLongError:
            self._warn(f"path too long: {directory}/{name}")
            return None

        try:
            st = self._fs.lstat(path)
        except FileSystemError as e:
            # Typically the entry was removed after it was enumerated.
            self._warn(f"lstat failed for '{path}': {e.reason}")
            return None

        return DirectoryEntry.from_stat(name, st)

    def _close(self, directory: str, stream: DirectoryStream) -> Optional[OperationResult]:
        try:
            stream.close()
        except FileSystemError as e:
            return OperationResult.failure(
                f"Error closing directory {directory}: {e.reason}"
            )
        return None

    def _warn(self, message: str) -> None:
        self._logger.info(f"Skipping entry: {message}")
        self._output.error(message)
