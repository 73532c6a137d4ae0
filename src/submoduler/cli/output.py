"""Output utilities for CLI commands.

Everything the status report prints, errors included, goes to stdout.
"""

import click


def user_output(message: str = "") -> None:
    """Print a line of the report to stdout."""
    click.echo(message)
