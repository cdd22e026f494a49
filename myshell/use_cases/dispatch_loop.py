"""
Dispatch loop: read a line, parse it, run the command, report failures.
"""

import logging
from typing import Optional

from myshell.entities.result import OperationResult
from myshell.exceptions import BaseAppError, ShellExit
from myshell.ports.console.line_reader_port import LineReaderPort
from myshell.ports.console.output_port import OutputPort
from myshell.use_cases.command_registry import CommandRegistry
from myshell.use_cases.parse_command import parse_line

EXIT_VERB = "exit"


class DispatchLoop:
    """Top-level read-parse-execute cycle of the interpreter."""

    def __init__(
        self,
        reader: LineReaderPort,
        registry: CommandRegistry,
        output: OutputPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the loop.

        Args:
            reader: Source of input lines
            registry: Verb -> handler table
            output: Destination of failure diagnostics
            logger: Logger instance to use for logging
        """
        self._reader = reader
        self._registry = registry
        self._output = output
        self._logger = logger or logging.getLogger(__name__)

    def handle_line(self, line: str) -> Optional[OperationResult]:
        """
        Execute one input line.

        Every failure is written to the error stream as a single line.

        Args:
            line: Input line with trailing whitespace removed

        Returns:
            The command's OperationResult, or None for an empty line

        Raises:
            ShellExit: If the line is an exit command
        """
        command = parse_line(line)
        if command is None:
            return None

        if command.verb == EXIT_VERB:
            self._logger.info("Exit requested")
            raise ShellExit(0)

        try:
            result = self._registry.dispatch(command)
        except (BaseAppError, OSError, ValueError) as e:
            # Errors no handler mapped, e.g. a closed stdout (BrokenPipeError).
            self._logger.error(f"Unexpected error running {command.verb}: {e!r}")
            reason = getattr(e, "strerror", None) or str(e)
            result = OperationResult.failure(f"{command.verb}: {reason}")

        if result.failed:
            self._output.error(result.reason or f"{command.verb}: failed")
        return result

    def run(self) -> int:
        """
        Run until `exit` or end of input.

        Returns:
            Process exit status
        """
        self._logger.info("Interpreter started")
        while True:
            line = self._reader.read_line()
            if line is None:
                self._logger.info("End of input")
                return 0
            try:
                self.handle_line(line)
            except ShellExit as e:
                return e.exit_code
