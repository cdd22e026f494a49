"""
Console line reader: draws the prompt and reads one line of input.
"""

import logging
from typing import Optional, TextIO

from rich.console import Console
from rich.markup import escape
from typing_extensions import override

from myshell.exceptions import FileSystemError
from myshell.ports.console.line_reader_port import LineReaderPort
from myshell.ports.files.working_directory_port import WorkingDirectoryPort
from myshell.utils.text import printable


def strip_trailing_whitespace(line: str) -> str:
    return line.rstrip()


class ConsoleLineReader(LineReaderPort):
    """Reads command lines from stdin (or a given stream) behind a coloured prompt."""

    def __init__(
        self,
        working_directory: WorkingDirectoryPort,
        console: Optional[Console] = None,
        prompt_name: str = "myshell",
        stream: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the reader.

        Args:
            working_directory: Source of the directory shown in the prompt
            console: Console used to draw the prompt
            prompt_name: Label printed before the directory
            stream: Read from this stream instead of stdin; "" from it means end of input
            logger: Logger instance to use for logging
        """
        self._working_directory = working_directory
        self._console = console or Console(highlight=False)
        self._prompt_name = prompt_name
        self._stream = stream
        self._logger = logger or logging.getLogger(__name__)

    def prompt(self) -> str:
        """Console markup for the prompt: name, then the directory in bold green."""
        name = escape(printable(self._prompt_name))
        try:
            cwd = self._working_directory.current()
        except FileSystemError as e:
            self._logger.debug(f"Prompt without directory: {e}")
            return f"{name}> "
        return f"{name}:[bold green]{escape(printable(cwd))}[/bold green]> "

    @override
    def read_line(self) -> Optional[str]:
        try:
            line = self._console.input(self.prompt(), emoji=False, stream=self._stream)
        except EOFError:
            self._console.print()
            return None
        except KeyboardInterrupt:
            # Drop the partial line and prompt again.
            self._console.print()
            return ""
        if self._stream is not None and line == "":
            return None
        return strip_trailing_whitespace(line)
