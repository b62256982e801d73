"""Output helpers that make the destination stream explicit.

user_output writes to stderr (status messages, errors) so that stdout only
carries the data a command was asked to produce. machine_output writes to
stdout.
"""

from typing import Any

import click


def user_output(message: Any = None, nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = None, nl: bool = True) -> None:
    """Write command results to stdout."""
    click.echo(message, nl=nl)
