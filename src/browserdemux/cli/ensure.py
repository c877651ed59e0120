"""User-facing CLI errors.

Errors from the core are converted into UserFacingCliError exactly once, at the
command boundary, with the failing stage as context.
"""

from typing import IO, Any

import click

from browserdemux.cli.output import user_output


class UserFacingCliError(click.ClickException):
    """Error shown to the user as ``Error: <message>`` with exit code 1."""

    exit_code = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def show(self, file: IO[Any] | None = None) -> None:
        line = click.style("Error: ", fg="red") + self.message
        if file is None:
            user_output(line)
        else:
            click.echo(line, file=file)


def with_stage(stage: str, error: Exception) -> UserFacingCliError:
    """Wrap error with the stage it happened in.

    Example:
        >>> error = ConfigParseError("missing field 'default'")
        >>> with_stage("while parsing config file 'config.toml'", error).message
        "while parsing config file 'config.toml': missing field 'default'"
    """
    detail = getattr(error, "message", None) or str(error)
    return UserFacingCliError(f"{stage}: {detail}")
