"""
Command parser: turns one normalized input line into a Command.
"""

from typing import Optional

from myshell.entities.command import Command


def parse_line(line: str) -> Optional[Command]:
    """
    Parse a line into a verb and at most one argument.

    The verb is the first whitespace-delimited token and the argument the
    second one; further tokens are dropped.

    Args:
        line: Input line with trailing whitespace already removed

    Returns:
        The Command, or None when the line holds no tokens
    """
    tokens = line.split()
    if not tokens:
        return None
    argument = tokens[1] if len(tokens) > 1 else None
    return Command(verb=tokens[0], argument=argument)
