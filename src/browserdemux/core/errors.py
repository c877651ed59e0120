"""Error taxonomy for config loading and browser launch.

Each error is terminal. The CLI reports it with the stage context it carries
and exits non-zero; nothing in browserdemux retries or falls back.
"""

from pathlib import Path


class ConfigLocationError(Exception):
    """The per-user configuration directory could not be determined."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigReadError(Exception):
    """The config file exists but could not be read."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path
        self.message = message


class ConfigParseError(Exception):
    """The config file is not valid TOML or does not follow the schema.

    Attributes:
        message: Description of the problem, including the offending key path
            where one is known (e.g. ``rule[1].match``)
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class LaunchError(Exception):
    """The browser command could not be executed.

    Attributes:
        command: The argument list that was attempted
        message: Description of the failure
    """

    def __init__(self, command: list[str], message: str) -> None:
        super().__init__(message)
        self.command = list(command)
        self.message = message
