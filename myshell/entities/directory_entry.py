"""
Directory entry entity built while listing a directory.
"""

import os
import stat
from dataclasses import dataclass
from enum import Enum


class EntryKind(str, Enum):
    """Coarse classification of an entry."""

    DIRECTORY = "DIR"
    FILE = "FILE"


class FileType(str, Enum):
    """Finer file-type classification taken from the mode bits."""

    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    CHAR_DEVICE = "char-device"
    BLOCK_DEVICE = "block-device"
    FIFO = "fifo"
    SOCKET = "socket"
    UNKNOWN = "unknown"

    @classmethod
    def from_mode(cls, mode: int) -> "FileType":
        """Map the S_IFMT bits of a mode to a file type."""
        fmt = stat.S_IFMT(mode)
        return _FORMATS.get(fmt, cls.UNKNOWN)


_FORMATS = {
    stat.S_IFREG: FileType.REGULAR,
    stat.S_IFDIR: FileType.DIRECTORY,
    stat.S_IFLNK: FileType.SYMLINK,
    stat.S_IFCHR: FileType.CHAR_DEVICE,
    stat.S_IFBLK: FileType.BLOCK_DEVICE,
    stat.S_IFIFO: FileType.FIFO,
    stat.S_IFSOCK: FileType.SOCKET,
}


@dataclass(frozen=True)
class DirectoryEntry:
    """One entry of a directory listing, described by link-aware metadata."""

    name: str
    kind: EntryKind
    file_type: FileType
    size_bytes: int

    @classmethod
    def from_stat(cls, name: str, st: os.stat_result) -> "DirectoryEntry":
        """
        Build an entry from the metadata of the entry itself.

        Args:
            name: Entry name as returned by the directory stream
            st: Result of an lstat() call on the joined path

        Returns:
            DirectoryEntry describing the entry
        """
        kind = EntryKind.DIRECTORY if stat.S_ISDIR(st.st_mode) else EntryKind.FILE
        return cls(
            name=name,
            kind=kind,
            file_type=FileType.from_mode(st.st_mode),
            size_bytes=int(st.st_size),
        )

    def format_line(self) -> str:
        return (
            f"{self.name}\t[{self.kind.value}]\t(type={self.file_type.value})"
            f"\tsize={self.size_bytes} bytes"
        )
