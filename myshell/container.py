"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from rich.console import Console

from myshell.adapters.console.console_line_reader import ConsoleLineReader
from myshell.adapters.console.console_output import ConsoleOutput
from myshell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from myshell.adapters.files.working_directory import ProcessWorkingDirectory
from myshell.config.settings import Settings, settings as default_settings
from myshell.ports.commands.command_handler_port import CommandHandlerPort
from myshell.ports.console.line_reader_port import LineReaderPort
from myshell.ports.console.output_port import OutputPort
from myshell.ports.files.file_system_port import FileSystemPort
from myshell.ports.files.working_directory_port import WorkingDirectoryPort
from myshell.use_cases.command_registry import CommandRegistry
from myshell.use_cases.commands.change_directory import ChangeDirectoryCommand
from myshell.use_cases.commands.directories import (
    MakeDirectoryCommand,
    RemoveDirectoryCommand,
)
from myshell.use_cases.commands.list_directory import ListDirectoryCommand
from myshell.use_cases.commands.print_working_directory import (
    PrintWorkingDirectoryCommand,
)
from myshell.use_cases.commands.remove_file import RemoveFileCommand
from myshell.use_cases.commands.show_file import ShowFileCommand
from myshell.use_cases.commands.stat_file import StatFileCommand
from myshell.use_cases.dispatch_loop import DispatchLoop


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.

    Any dependency may be supplied up front (e.g. a VirtualWorkingDirectory or a
    recording output in tests); the rest is built lazily on first use.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        working_directory: Optional[WorkingDirectoryPort] = None,
        output: Optional[OutputPort] = None,
        line_reader: Optional[LineReaderPort] = None,
    ):
        self._settings = settings or default_settings
        self._instances: dict[str, object] = {}
        if working_directory is not None:
            self._instances["working_directory"] = working_directory
        if output is not None:
            self._instances["output"] = output
        if line_reader is not None:
            self._instances["line_reader"] = line_reader
        self._logger = logging.getLogger(__name__)

    def get_working_directory(self) -> WorkingDirectoryPort:
        """
        Get the working directory context.

        Returns:
            WorkingDirectoryPort implementation
        """
        if "working_directory" not in self._instances:
            self._instances["working_directory"] = ProcessWorkingDirectory(self._logger)
        return self._instances["working_directory"]  # type: ignore[return-value]

    def get_file_system(self) -> FileSystemPort:
        """
        Get filesystem adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(
                self.get_working_directory(), self._logger
            )
        return self._instances["file_system"]  # type: ignore[return-value]

    def get_output(self) -> OutputPort:
        if "output" not in self._instances:
            self._instances["output"] = ConsoleOutput(color=self._settings.color)
        return self._instances["output"]  # type: ignore[return-value]

    def get_line_reader(self) -> LineReaderPort:
        if "line_reader" not in self._instances:
            self._instances["line_reader"] = ConsoleLineReader(
                self.get_working_directory(),
                console=Console(highlight=False, no_color=not self._settings.color),
                prompt_name=self._settings.prompt_name,
                logger=self._logger,
            )
        return self._instances["line_reader"]  # type: ignore[return-value]

    def get_command_handlers(self) -> list[CommandHandlerPort]:
        """
        Build one handler per supported verb.

        Returns:
            Handlers sharing the filesystem and output instances
        """
        fs = self.get_file_system()
        output = self.get_output()
        return [
            ChangeDirectoryCommand(fs, self._logger),
            ListDirectoryCommand(fs, output, self._logger),
            ShowFileCommand(fs, output, self._settings.chunk_size, self._logger),
            MakeDirectoryCommand(fs, self._logger),
            RemoveDirectoryCommand(fs, self._logger),
            RemoveFileCommand(fs, self._logger),
            PrintWorkingDirectoryCommand(fs, output, self._logger),
            StatFileCommand(fs, output, self._logger),
        ]

    def get_command_registry(self) -> CommandRegistry:
        if "command_registry" not in self._instances:
            self._instances["command_registry"] = CommandRegistry(
                self.get_command_handlers(),
                prompt_name=self._settings.prompt_name,
                logger=self._logger,
            )
        return self._instances["command_registry"]  # type: ignore[return-value]

    def get_dispatch_loop(self) -> DispatchLoop:
        """
        Get the dispatch loop with injected dependencies.

        Returns:
            Configured DispatchLoop
        """
        if "dispatch_loop" not in self._instances:
            self._instances["dispatch_loop"] = DispatchLoop(
                self.get_line_reader(),
                self.get_command_registry(),
                self.get_output(),
                self._logger,
            )
        return self._instances["dispatch_loop"]  # type: ignore[return-value]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()
