"""
Registry mapping command verbs to their handlers.
"""

import logging
from typing import Iterable, Optional

from myshell.entities.command import Command
from myshell.entities.result import OperationResult
from myshell.ports.commands.command_handler_port import (
    ArgumentPolicy,
    CommandHandlerPort,
)


class CommandRegistry:
    """Fixed verb -> handler table enforcing each handler's argument policy."""

    def __init__(
        self,
        handlers: Iterable[CommandHandlerPort],
        prompt_name: str = "myshell",
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the registry.

        Args:
            handlers: One handler per verb
            prompt_name: Prefix of registry-level diagnostics
            logger: Logger instance to use for logging

        Raises:
            ValueError: If two handlers claim the same verb
        """
        self._handlers: dict[str, CommandHandlerPort] = {}
        for handler in handlers:
            if handler.name in self._handlers:
                raise ValueError(f"Duplicate handler for command: {handler.name}")
            self._handlers[handler.name] = handler
        self._prompt_name = prompt_name
        self._logger = logger or logging.getLogger(__name__)

    def commands(self) -> list[str]:
        return sorted(self._handlers)

    def dispatch(self, command: Command) -> OperationResult:
        """
        Run the handler registered for the command's verb.

        A missing required argument fails without invoking the handler.

        Args:
            command: Parsed command

        Returns:
            OperationResult of the handler, or a failure for an unknown verb
        """
        handler = self._handlers.get(command.verb)
        if handler is None:
            self._logger.info(f"Unknown command: {command.verb}")
            return OperationResult.failure(
                f"{self._prompt_name}: {command.verb}: no such command"
            )

        policy = handler.argument_policy
        if policy is ArgumentPolicy.REQUIRED and not command.has_argument():
            self._logger.info(f"Missing argument for command: {command.verb}")
            return OperationResult.failure(
                f"{self._prompt_name}: {command.verb}: missing operand"
            )

        argument = None if policy is ArgumentPolicy.IGNORED else command.argument
        self._logger.debug(f"Dispatching {command.verb} with argument {argument!r}")
        return handler.execute(argument)
