"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from unittest.mock import MagicMock

import pytest
from typing_extensions import override

from myshell.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from myshell.adapters.files.working_directory import VirtualWorkingDirectory
from myshell.ports.console.output_port import OutputPort


class RecordingOutput(OutputPort):
    """Output port that keeps everything written to it."""

    def __init__(self):
        self.stdout = bytearray()
        self.errors: list[str] = []

    @override
    def write_line(self, text: str) -> None:
        self.stdout.extend(os.fsencode(text) + b"\n")

    @override
    def write_bytes(self, data: bytes) -> None:
        self.stdout.extend(data)

    @override
    def error(self, text: str) -> None:
        self.errors.append(text)

    def lines(self) -> list[str]:
        return bytes(self.stdout).decode().splitlines()


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Layout:
        a.txt   regular file, 10 bytes
        sub/    directory holding inner.txt

    Returns:
        Real path of the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_dir = os.path.realpath(temp_dir)
        with open(os.path.join(temp_dir, "a.txt"), "w") as f:
            f.write("0123456789")

        subdir = os.path.join(temp_dir, "sub")
        os.makedirs(subdir)
        with open(os.path.join(subdir, "inner.txt"), "w") as f:
            f.write("inner")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def working_directory(temp_directory, mock_logger):
    """Virtual working directory starting in the temporary directory."""
    return VirtualWorkingDirectory(temp_directory, mock_logger)


@pytest.fixture
def file_system(working_directory, mock_logger):
    """Local filesystem adapter resolving paths against the virtual working directory."""
    return LocalFileSystemAdapter(working_directory, mock_logger)


@pytest.fixture
def recording_output():
    return RecordingOutput()
