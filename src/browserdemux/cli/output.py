"""Output helpers.

User-facing messages go to stderr; machine-readable results go to stdout so
they can be piped.
"""

import click


def user_output(message: str = "") -> None:
    """Write a message meant for a human to stderr."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Write a result meant for scripts to stdout."""
    click.echo(message)
