"""
Tests for the Command and OperationResult entities.
"""

import pytest

from myshell.entities.command import Command
from myshell.entities.result import OperationResult


class TestCommand:
    def test_command_with_argument(self):
        command = Command("ls", "sub")

        assert command.verb == "ls"
        assert command.argument == "sub"
        assert command.has_argument() is True

    def test_command_without_argument(self):
        assert Command("pwd").has_argument() is False

    def test_empty_verb_rejected(self):
        with pytest.raises(ValueError, match="non-empty"):
            Command("")

    def test_command_is_immutable(self):
        command = Command("cd", "/tmp")

        with pytest.raises(AttributeError):
            command.verb = "ls"  # type: ignore[misc]


class TestOperationResult:
    def test_success(self):
        result = OperationResult.success()

        assert result.ok is True
        assert result.failed is False
        assert result.reason is None
        assert str(result) == "Success"

    def test_failure(self):
        result = OperationResult.failure("rm: x: No such file or directory")

        assert result.ok is False
        assert result.failed is True
        assert str(result) == "Failure(rm: x: No such file or directory)"
