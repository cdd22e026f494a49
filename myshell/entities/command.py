"""
Command domain entity.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Command:
    """A parsed input line: a verb and at most one argument."""

    verb: str
    argument: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.verb:
            raise ValueError("Command verb must be a non-empty string")

    def has_argument(self) -> bool:
        return bool(self.argument)
