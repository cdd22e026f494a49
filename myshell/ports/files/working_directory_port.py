"""
Working directory port: the explicit context every relative path resolves against.
"""

from abc import ABC, abstractmethod


class WorkingDirectoryPort(ABC):
    """Port interface for the interpreter's current working directory."""

    @abstractmethod
    def current(self) -> str:
        """
        Get the absolute path of the current working directory.

        Returns:
            Absolute path

        Raises:
            FileSystemError: If the directory cannot be resolved (e.g. it was removed)
        """
        pass

    @abstractmethod
    def change(self, path: str) -> None:
        """
        Make `path` the current working directory.

        The change is all-or-nothing: on failure the previous directory is kept.

        Args:
            path: Absolute or relative target directory

        Raises:
            FileSystemError: If the target does not exist, is not a directory
                or cannot be searched
        """
        pass

    @abstractmethod
    def resolve(self, path: str) -> str:
        """
        Resolve a user-supplied path against the working directory.

        Args:
            path: Absolute or relative path

        Returns:
            A path usable directly with OS calls
        """
        pass
