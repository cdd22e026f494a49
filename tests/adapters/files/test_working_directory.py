"""
Tests for the working directory adapters.
"""

import errno
import os

import pytest

from myshell.adapters.files.working_directory import (
    ProcessWorkingDirectory,
    VirtualWorkingDirectory,
)
from myshell.exceptions import FileSystemError


class TestVirtualWorkingDirectory:
    def test_starts_in_given_directory(self, working_directory, temp_directory):
        assert working_directory.current() == temp_directory

    def test_change_relative(self, working_directory, temp_directory):
        working_directory.change("sub")

        assert working_directory.current() == os.path.join(temp_directory, "sub")

    def test_change_parent(self, working_directory, temp_directory):
        working_directory.change("sub")
        working_directory.change("..")

        assert working_directory.current() == temp_directory

    def test_change_absolute(self, working_directory, temp_directory):
        working_directory.change(os.path.join(temp_directory, "sub"))

        assert working_directory.current().endswith(os.sep + "sub")

    def test_change_nonexistent_keeps_directory(self, working_directory, temp_directory):
        """Test a failed change leaves the previous directory in place."""
        with pytest.raises(FileSystemError, match="No such file or directory"):
            working_directory.change("missing")

        assert working_directory.current() == temp_directory

    def test_change_to_file(self, working_directory, temp_directory):
        with pytest.raises(FileSystemError, match="Not a directory"):
            working_directory.change("a.txt")

        assert working_directory.current() == temp_directory

    def test_does_not_touch_process_directory(self, working_directory):
        before = os.getcwd()

        working_directory.change("sub")

        assert os.getcwd() == before

    def test_current_after_removal(self, working_directory, temp_directory):
        """Test the directory cannot be resolved once removed."""
        gone = os.path.join(temp_directory, "gone")
        os.mkdir(gone)
        working_directory.change("gone")
        os.rmdir(gone)

        with pytest.raises(FileSystemError, match="No such file or directory"):
            working_directory.current()

    def test_change_with_nul_byte_keeps_directory(self, working_directory, temp_directory):
        with pytest.raises(FileSystemError, match="Invalid argument") as exc:
            working_directory.change("sub\x00x")

        assert exc.value.errno == errno.EINVAL
        assert working_directory.current() == temp_directory

    def test_resolve(self, working_directory, temp_directory):
        assert working_directory.resolve("a.txt") == os.path.join(temp_directory, "a.txt")
        assert working_directory.resolve("/etc") == "/etc"


class TestProcessWorkingDirectory:
    def test_change_moves_process(self, monkeypatch, temp_directory, mock_logger):
        monkeypatch.chdir(temp_directory)
        wd = ProcessWorkingDirectory(mock_logger)

        wd.change("sub")

        assert os.getcwd() == os.path.join(temp_directory, "sub")
        assert wd.current() == os.getcwd()

    def test_change_failure(self, monkeypatch, temp_directory, mock_logger):
        monkeypatch.chdir(temp_directory)
        wd = ProcessWorkingDirectory(mock_logger)

        with pytest.raises(FileSystemError, match="No such file or directory") as exc:
            wd.change("missing")

        assert exc.value.operation == "chdir"
        assert os.getcwd() == temp_directory

    def test_resolve_is_identity(self, mock_logger):
        assert ProcessWorkingDirectory(mock_logger).resolve("x/y") == "x/y"

    def test_change_with_nul_byte(self, monkeypatch, temp_directory, mock_logger):
        monkeypatch.chdir(temp_directory)
        wd = ProcessWorkingDirectory(mock_logger)

        with pytest.raises(FileSystemError, match="Invalid argument") as exc:
            wd.change("a\x00b")

        assert exc.value.errno == errno.EINVAL
        assert os.getcwd() == temp_directory
