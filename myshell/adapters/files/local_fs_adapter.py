"""
Local file system adapter implementation for the command handlers.
"""

import errno
import logging
import os
import pwd
from typing import Generator, Iterator, Optional

from typing_extensions import override

from myshell.exceptions import FileSystemError, PathTooLongError
from myshell.ports.files.file_system_port import DirectoryStream, FileSystemPort
from myshell.ports.files.working_directory_port import WorkingDirectoryPort

DEFAULT_PATH_MAX = 4096


def _platform_path_max() -> int:
    try:
        return os.pathconf("/", "PC_PATH_MAX")
    except (OSError, ValueError):
        return DEFAULT_PATH_MAX


class ScandirStream(DirectoryStream):
    """Directory stream over os.scandir(); yields entry names."""

    def __init__(self, path: str, iterator: "os._ScandirIterator[str]"):
        self._path = path
        self._iterator = iterator

    @override
    def __iter__(self) -> Iterator[str]:
        while True:
            try:
                entry = next(self._iterator)
            except StopIteration:
                return
            except (OSError, ValueError) as e:
                raise FileSystemError.from_os_error("readdir", self._path, e) from e
            yield entry.name

    @override
    def close(self) -> None:
        try:
            self._iterator.close()
        except (OSError, ValueError) as e:
            raise FileSystemError.from_os_error("closedir", self._path, e) from e


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the filesystem port."""

    def __init__(
        self,
        working_directory: WorkingDirectoryPort,
        logger: Optional[logging.Logger] = None,
        path_max: Optional[int] = None,
    ):
        """
        Initialize the adapter.

        Args:
            working_directory: Context relative paths are resolved against
            logger: Logger instance to use for logging. If None, a default logger will be created.
            path_max: Maximum path length in bytes. Defaults to the platform limit.
        """
        self._working_directory = working_directory
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._path_max = path_max or _platform_path_max()

    @override
    def current_directory(self) -> str:
        return self._working_directory.current()

    @override
    def change_directory(self, path: str) -> None:
        self._working_directory.change(path)

    @override
    def home_directory(self) -> str:
        uid = os.getuid()
        try:
            return pwd.getpwuid(uid).pw_dir
        except KeyError:
            raise FileSystemError(
                "getpwuid", str(uid), "No user database entry for current user"
            )

    @override
    def open_directory(self, path: str) -> DirectoryStream:
        try:
            iterator = os.scandir(self._working_directory.resolve(path))
        except (OSError, ValueError) as e:
            raise FileSystemError.from_os_error("opendir", path, e) from e
        self._logger.debug(f"Opened directory stream on {path}")
        return ScandirStream(path, iterator)

    @override
    def join_path(self, directory: str, name: str) -> str:
        joined = os.path.join(directory, name)
        resolved = self._working_directory.resolve(joined)
        if len(os.fsencode(resolved)) >= self._path_max:
            raise PathTooLongError(
                "join", joined, os.strerror(errno.ENAMETOOLONG), errno.ENAMETOOLONG
            )
        return joined

    @override
    def lstat(self, path: str) -> os.stat_result:
        try:
            return os.lstat(self._working_directory.resolve(path))
        except (OSError, ValueError) as e:
            raise FileSystemError.from_os_error("lstat", path, e) from e

    @override
    def stat(self, path: str) -> os.stat_result:
        try:
            return os.stat(self._working_directory.resolve(path))
        except (OSError, ValueError) as e:
            raise FileSystemError.from_os_error("stat", path, e) from e

    @override
    def read_chunks(self, path: str, chunk_size: int) -> Generator[bytes, None, None]:
        try:
            handle = open(self._working_directory.resolve(path), "rb", buffering=0)
        except (OSError, ValueError) as e:
            raise FileSystemError.from_os_error("open", path, e) from e
        with handle:
            while True:
                try:
                    chunk = handle.read(chunk_size)
                except (OSError, ValueError) as e:
                    raise FileSystemError.from_os_error("read", path, e) from e
                if not chunk:
                    return
                yield chunk

    @override
    def make_directory(self, path: str, mode: int) -> None:
        try:
            os.mkdir(self._working_directory.resolve(path), mode)
        except (OSError, ValueError) as e:
            raise FileSystemError.from_os_error("mkdir", path, e) from e

    @override
    def remove_directory(self, path: str) -> None:
        try:
            os.rmdir(self._working_directory.resolve(path))
        except (OSError, ValueError) as e:
            raise FileSystemError.from_os_error("rmdir", path, e) from e

    @override
    def remove_file(self, path: str) -> None:
        try:
            os.unlink(self._working_directory.resolve(path))
        except (OSError, ValueError) as e:
            raise FileSystemError.from_os_error("unlink", path, e) from e
