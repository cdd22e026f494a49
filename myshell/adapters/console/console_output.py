"""
Console output adapter: command output on stdout, diagnostics on stderr.
"""

import sys
from typing import Optional, TextIO

from rich.console import Console
from typing_extensions import override

from myshell.ports.console.output_port import OutputPort
from myshell.utils.text import fs_bytes, printable


class ConsoleOutput(OutputPort):
    """Writes plain command output to a text stream and diagnostics through a rich Console."""

    def __init__(
        self,
        stdout: Optional[TextIO] = None,
        error_console: Optional[Console] = None,
        color: bool = True,
    ):
        """
        Initialize the adapter.

        Args:
            stdout: Stream for command output. Defaults to sys.stdout.
            error_console: Console for diagnostics. Defaults to a stderr Console.
            color: Whether diagnostics may be coloured
        """
        self._stdout: TextIO = stdout or sys.stdout
        self._errors: Console = error_console or Console(
            stderr=True, highlight=False, no_color=not color, soft_wrap=True
        )

    @override
    def write_line(self, text: str) -> None:
        # Plain write: rich would expand the tab separators of ls/stat lines.
        if getattr(self._stdout, "buffer", None) is not None:
            # Names are written back as the raw bytes the filesystem returned.
            self.write_bytes(fs_bytes(text + "\n"))
            return
        self._stdout.write(printable(text) + "\n")
        self._stdout.flush()

    @override
    def write_bytes(self, data: bytes) -> None:
        self._stdout.flush()
        buffer = getattr(self._stdout, "buffer", None)
        if buffer is not None:
            buffer.write(data)
            buffer.flush()
        else:
            self._stdout.write(data.decode(errors="replace"))
            self._stdout.flush()

    @override
    def error(self, text: str) -> None:
        self._errors.print(
            printable(text),
            style="red",
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
