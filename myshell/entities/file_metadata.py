"""
File metadata entity reported by the stat command.
"""

import os
import time
from dataclasses import dataclass


@dataclass(frozen=True)
class FileMetadata:
    """Metadata of a file, following symbolic links."""

    path: str
    size_bytes: int
    block_size_bytes: int
    block_count: int
    link_count: int
    inode_number: int
    last_modified: float

    @classmethod
    def from_stat(cls, path: str, st: os.stat_result) -> "FileMetadata":
        # st_blksize/st_blocks are absent on some platforms
        return cls(
            path=path,
            size_bytes=int(st.st_size),
            block_size_bytes=int(getattr(st, "st_blksize", 0)),
            block_count=int(getattr(st, "st_blocks", 0)),
            link_count=int(st.st_nlink),
            inode_number=int(st.st_ino),
            last_modified=float(st.st_mtime),
        )

    def last_modified_text(self) -> str:
        """Human-readable modification time, e.g. 'Sun Oct 18 13:35:00 2026'."""
        return time.ctime(self.last_modified)

    def format_lines(self) -> list[str]:
        return [
            f"File: {self.path}",
            f"Size: {self.size_bytes} bytes\tBlocks: {self.block_count}"
            f"\tLinks: {self.link_count}",
            f"Block size: {self.block_size_bytes} bytes\tInode: {self.inode_number}",
            f"Time Modified: {self.last_modified_text()}",
        ]
