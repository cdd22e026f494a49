"""
Line reader port: source of interactive input lines.
"""

from abc import ABC, abstractmethod
from typing import Optional


class LineReaderPort(ABC):
    """Port interface for reading one command line at a time."""

    @abstractmethod
    def read_line(self) -> Optional[str]:
        """
        Show the prompt and read one line.

        Returns:
            The line with trailing whitespace removed, or None at end of input
        """
        pass
