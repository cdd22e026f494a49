"""
Output port: where command output and diagnostics go.
"""

from abc import ABC, abstractmethod


class OutputPort(ABC):
    """Port interface for the output and error streams."""

    @abstractmethod
    def write_line(self, text: str) -> None:
        """Write one line of command output."""
        pass

    @abstractmethod
    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes verbatim to the output stream and flush."""
        pass

    @abstractmethod
    def error(self, text: str) -> None:
        """Write one diagnostic line to the error stream."""
        pass
