"""Base class for printing gateway wrappers.

Printing wrappers echo a styled line for each mutating operation, then
delegate to the wrapped implementation.
"""

from typing import Any

import click


class PrintingBase:
    """Shared state and helpers for printing wrappers."""

    def __init__(self, wrapped: Any, *, script_mode: bool = False, dry_run: bool = False) -> None:
        """Create a printing wrapper.

        Args:
            wrapped: The implementation to delegate to
            script_mode: Send output to stderr so stdout stays machine-readable
            dry_run: Mark every printed command as a dry run
        """
        self._wrapped = wrapped
        self._script_mode = script_mode
        self._dry_run = dry_run

    def _emit(self, message: str) -> None:
        click.echo(message, err=self._script_mode)

    def _format_command(self, cmd: str) -> str:
        styled = click.style(f"  $ {cmd}", dim=True)
        if self._dry_run:
            styled += click.style(" (dry run)", fg="yellow", dim=True)
        return styled
