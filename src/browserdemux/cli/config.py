import logging
import tomllib
from pathlib import Path
from typing import Any

import click

from browserdemux.core.browser import Browser
from browserdemux.core.errors import ConfigLocationError, ConfigParseError, ConfigReadError
from browserdemux.core.matcher import parse_matcher
from browserdemux.core.router import RouterConfig
from browserdemux.core.rule import Rule

logger = logging.getLogger(__name__)

APP_NAME = "browserdemux"
CONFIG_FILE_NAME = "config.toml"

TOP_LEVEL_KEYS = ("default", "rule")
RULE_KEYS = ("to", "match")


def config_dir() -> Path:
    """Return the per-user config directory, e.g. ``~/.config/browserdemux`` on Linux.

    Note: Not cached so tests can monkeypatch the environment.

    Raises:
        ConfigLocationError: If no absolute directory can be determined
            (typically because the home directory is unknown)
    """
    path = Path(click.get_app_dir(APP_NAME))
    if not path.is_absolute():
        raise ConfigLocationError(f"could not determine a config directory (got '{path}')")
    return path


def config_path() -> Path:
    """Return the default config file path inside config_dir()."""
    return config_dir() / CONFIG_FILE_NAME


def _reject_unknown_keys(table: dict[str, Any], allowed: tuple[str, ...], *, where: str) -> None:
    for key in table:
        if key not in allowed:
            expected = ", ".join(f"'{k}'" for k in allowed)
            prefix = f"{where}: " if where else ""
            raise ConfigParseError(f"{prefix}unknown field '{key}' (expected one of {expected})")


def _parse_browser(raw: Any, *, where: str) -> Browser:
    if not isinstance(raw, str):
        raise ConfigParseError(f"{where}: expected a browser name, got {type(raw).__name__}")
    try:
        return Browser.from_config_id(raw)
    except ConfigParseError as e:
        raise ConfigParseError(f"{where}: {e.message}") from e


def _parse_rule(raw: Any, *, where: str) -> Rule:
    if not isinstance(raw, dict):
        raise ConfigParseError(f"{where}: expected a table, got {type(raw).__name__}")
    _reject_unknown_keys(raw, RULE_KEYS, where=where)

    for key in RULE_KEYS:
        if key not in raw:
            raise ConfigParseError(f"{where}: missing field '{key}'")

    return Rule(
        matcher=parse_matcher(raw["match"], where=f"{where}.match"),
        target=_parse_browser(raw["to"], where=f"{where}.to"),
    )


def parse_router_config(text: str) -> RouterConfig:
    """Parse config.toml text into a RouterConfig.

    The schema is strict: unknown fields anywhere are rejected so a typo in a
    rule fails loudly instead of quietly routing to the default browser.

    Example config:
      default = "firefox"

      [[rule]]
      to = "google-chrome"
      match = { authority = "meet.google.com" }

      [[rule]]
      to = "chromium"
      match = { domain = "internal.example.com" }

    Raises:
        ConfigParseError: If text is not valid TOML or violates the schema
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"invalid TOML: {e}") from e

    _reject_unknown_keys(data, TOP_LEVEL_KEYS, where="")

    if "default" not in data:
        raise ConfigParseError("missing field 'default'")
    default = _parse_browser(data["default"], where="default")

    raw_rules = data.get("rule", [])
    if not isinstance(raw_rules, list):
        raise ConfigParseError(
            f"rule: expected an array of tables ([[rule]]), got {type(raw_rules).__name__}"
        )
    rules = tuple(_parse_rule(raw, where=f"rule[{i}]") for i, raw in enumerate(raw_rules))

    return RouterConfig(default=default, rules=rules)


def load_router_config(path: Path) -> RouterConfig:
    """Load the config file at path if present; otherwise return defaults.

    Raises:
        ConfigReadError: If the file exists but cannot be read
        ConfigParseError: If the file contents are invalid
    """
    if not path.exists():
        logger.debug("no config file at %s, using defaults", path)
        return RouterConfig.default_config()

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(path, str(e)) from e

    config = parse_router_config(text)
    logger.debug("loaded %d rule(s) from %s", len(config.rules), path)
    return config
