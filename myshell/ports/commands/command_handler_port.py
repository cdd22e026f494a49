"""
Command handler port defining the contract shared by every command verb.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional

from myshell.entities.result import OperationResult


class ArgumentPolicy(str, Enum):
    """How a handler treats the single optional argument of a command."""

    REQUIRED = "required"
    OPTIONAL = "optional"
    IGNORED = "ignored"


class CommandHandlerPort(ABC):
    """
    Port interface for a command handler.

    One implementation per verb; the registry dispatches to it by name.
    """

    name: str
    argument_policy: ArgumentPolicy = ArgumentPolicy.IGNORED

    @abstractmethod
    def execute(self, argument: Optional[str] = None) -> OperationResult:
        """
        Run the command.

        Args:
            argument: The command argument. Always present for REQUIRED handlers,
                possibly None for OPTIONAL ones and None for IGNORED ones.

        Returns:
            OperationResult describing the outcome
        """
        pass
