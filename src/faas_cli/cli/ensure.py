"""CLI error handling utilities with styled output.

Ensure asserts invariants in CLI commands and exits with a red "Error:"
prefixed message on stderr when they do not hold.
"""

from typing import NoReturn, TypeVar

import click

from faas_cli.cli.output import user_output

T = TypeVar("T")


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def fail(error_message: str) -> NoReturn:
        """Output styled error and exit with status 1.

        Raises:
            SystemExit: Always (with exit code 1)
        """
        user_output(click.style("Error: ", fg="red") + error_message)
        raise SystemExit(1)

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Args:
            condition: Boolean condition to check
            error_message: Error message to display if condition is false.
                          "Error: " prefix will be added automatically in red.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            Ensure.fail(error_message)

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        Narrows `T | None` to `T` for the type checker.

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            Ensure.fail(error_message)
        return value
