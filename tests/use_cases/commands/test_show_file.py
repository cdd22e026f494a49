"""
Tests for the cat command.
"""

import os
from unittest.mock import MagicMock

import pytest

from myshell.exceptions import FileSystemError
from myshell.ports.files.file_system_port import FileSystemPort
from myshell.use_cases.commands.show_file import ShowFileCommand


class TestShowFileCommand:
    def test_writes_exact_bytes_then_newline(self, file_system, recording_output, temp_directory, mock_logger):
        """Test N bytes in, N bytes plus one newline out, with a partial last chunk."""
        content = bytes(range(256)) * 2 + b"tail"
        with open(os.path.join(temp_directory, "data.bin"), "wb") as f:
            f.write(content)
        command = ShowFileCommand(file_system, recording_output, 256, mock_logger)

        result = command.execute("data.bin")

        assert result.ok
        assert bytes(recording_output.stdout) == content + b"\n"

    def test_small_file(self, file_system, recording_output, mock_logger):
        result = ShowFileCommand(file_system, recording_output, logger=mock_logger).execute("a.txt")

        assert result.ok
        assert bytes(recording_output.stdout) == b"0123456789\n"

    def test_empty_file(self, file_system, recording_output, temp_directory, mock_logger):
        open(os.path.join(temp_directory, "empty"), "wb").close()

        ShowFileCommand(file_system, recording_output, logger=mock_logger).execute("empty")

        assert bytes(recording_output.stdout) == b"\n"

    def test_nonexistent_file(self, file_system, recording_output, mock_logger):
        result = ShowFileCommand(file_system, recording_output, logger=mock_logger).execute("missing")

        assert result.failed
        assert result.reason == "Unable to open missing: No such file or directory"
        assert recording_output.stdout == bytearray()

    def test_read_error(self, recording_output, mock_logger):
        """Test a read failure after some output stops without the trailing newline."""
        released = []

        def chunks(path, size):
            try:
                yield b"abc"
                raise FileSystemError("read", path, "Input/output error")
            finally:
                released.append(path)

        fs = MagicMock(spec=FileSystemPort)
        fs.read_chunks.side_effect = chunks

        result = ShowFileCommand(fs, recording_output, logger=mock_logger).execute("f")

        assert result.failed
        assert result.reason == "Error reading data from f: Input/output error"
        assert bytes(recording_output.stdout) == b"abc"
        assert released == ["f"]

    def test_handle_released_when_output_fails(self, mock_logger):
        released = []

        def chunks(path, size):
            try:
                yield b"abc"
                yield b"def"
            finally:
                released.append(path)

        fs = MagicMock(spec=FileSystemPort)
        fs.read_chunks.side_effect = chunks
        output = MagicMock()
        output.write_bytes.side_effect = BrokenPipeError

        with pytest.raises(BrokenPipeError):
            ShowFileCommand(fs, output, logger=mock_logger).execute("f")

        assert released == ["f"]

    def test_invalid_chunk_size(self, file_system, recording_output):
        with pytest.raises(ValueError, match="chunk_size"):
            ShowFileCommand(file_system, recording_output, chunk_size=0)
