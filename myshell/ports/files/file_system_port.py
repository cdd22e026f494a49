"""
Filesystem port interface defining the OS calls used by the command handlers.
"""

import os
from abc import ABC, abstractmethod
from typing import Generator, Iterator


class DirectoryStream(ABC):
    """An open directory stream; must be closed by whoever opened it."""

    @abstractmethod
    def __iter__(self) -> Iterator[str]:
        """
        Iterate over entry names in OS enumeration order.

        Raises:
            FileSystemError: If advancing the stream fails
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """
        Release the stream.

        Raises:
            FileSystemError: If closing fails
        """
        pass


class FileSystemPort(ABC):
    """Port interface for filesystem operations.

    Every method raises FileSystemError carrying the OS error text on failure.
    Relative paths are resolved against the injected working directory.
    """

    @abstractmethod
    def current_directory(self) -> str:
        """Return the absolute path of the working directory."""
        pass

    @abstractmethod
    def change_directory(self, path: str) -> None:
        """Change the working directory to `path`."""
        pass

    @abstractmethod
    def home_directory(self) -> str:
        """Return the home directory of the invoking user (user database lookup)."""
        pass

    @abstractmethod
    def open_directory(self, path: str) -> DirectoryStream:
        """
        Open a directory stream.

        Args:
            path: Directory to open

        Returns:
            An open DirectoryStream
        """
        pass

    @abstractmethod
    def join_path(self, directory: str, name: str) -> str:
        """
        Join a directory and an entry name.

        Raises:
            PathTooLongError: If the result exceeds the platform path limit
        """
        pass

    @abstractmethod
    def lstat(self, path: str) -> os.stat_result:
        """Metadata of `path` itself, not following symbolic links."""
        pass

    @abstractmethod
    def stat(self, path: str) -> os.stat_result:
        """Metadata of `path`, following symbolic links."""
        pass

    @abstractmethod
    def read_chunks(self, path: str, chunk_size: int) -> Generator[bytes, None, None]:
        """
        Read a file as a sequence of chunks of at most `chunk_size` bytes.

        The file is opened on first iteration and closed when the iterator is
        exhausted, fails or is closed.

        Args:
            path: File to read
            chunk_size: Maximum bytes per chunk

        Returns:
            Generator over non-empty chunks; close it to release the file early

        Raises:
            FileSystemError: With operation "open" or "read"
        """
        pass

    @abstractmethod
    def make_directory(self, path: str, mode: int) -> None:
        """Create a single directory with the given permission bits."""
        pass

    @abstractmethod
    def remove_directory(self, path: str) -> None:
        """Remove an empty directory."""
        pass

    @abstractmethod
    def remove_file(self, path: str) -> None:
        """Unlink a file."""
        pass
