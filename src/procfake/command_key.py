"""Lookup keys for canned command results.

A key is the command's positional arguments joined by single spaces.
Environment and working directory never take part in the key.
"""

from collections.abc import Sequence


def command_key(args: Sequence[str]) -> str:
    """Build the lookup key for a command invocation.

    Args:
        args: Positional command-line arguments, program first

    Returns:
        The arguments joined with single spaces (e.g. "git status")
    """
    return " ".join(args)


def split_command_line(command_line: str) -> list[str]:
    """Split an expected command line back into argument tokens.

    Splits on single spaces only, so it is the exact inverse of command_key()
    for arguments without embedded spaces.
    """
    return command_line.split(" ")
