import logging
import shlex
from pathlib import Path

import click

from browserdemux.cli.config import load_router_config
from browserdemux.cli.context import DemuxContext, create_context
from browserdemux.cli.ensure import UserFacingCliError, with_stage
from browserdemux.cli.output import machine_output
from browserdemux.core.browser import build_browser_args
from browserdemux.core.errors import (
    ConfigLocationError,
    ConfigParseError,
    ConfigReadError,
    LaunchError,
)
from browserdemux.core.router import RouterConfig
from browserdemux.core.url import InvalidUrlError, ParsedUrl, parse_url

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


class UrlParamType(click.ParamType):
    """Click parameter type that parses an absolute URL."""

    name = "url"

    def convert(
        self, value: object, param: click.Parameter | None, ctx: click.Context | None
    ) -> ParsedUrl:
        if isinstance(value, ParsedUrl):
            return value
        try:
            return parse_url(str(value))
        except InvalidUrlError as e:
            self.fail(str(e), param, ctx)


def _load_config(demux: DemuxContext, config_file: Path | None) -> RouterConfig:
    if config_file is None:
        try:
            config_file = demux.locate_config()
        except ConfigLocationError as e:
            raise with_stage("while looking for config dir", e) from e

    try:
        return load_router_config(config_file)
    except ConfigReadError as e:
        raise with_stage(f"while reading config file '{config_file}'", e) from e
    except ConfigParseError as e:
        raise with_stage(f"while parsing config file '{config_file}'", e) from e


@click.command("browserdemux", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="browserdemux")
@click.argument("url", type=UrlParamType())
@click.option(
    "--config",
    "config_file",
    type=click.Path(path_type=Path),
    envvar="BROWSERDEMUX_CONFIG",
    help="Config file to use instead of the per-user config.toml.",
)
@click.option("--dry-run", is_flag=True, help="Print the browser command instead of running it.")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context, url: ParsedUrl, config_file: Path | None, dry_run: bool, debug: bool
) -> None:
    """Open URL in the browser selected by the rules in config.toml.

    Rules are tried in file order and the first match wins. Without a config
    file, every URL opens in firefox.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    demux: DemuxContext = ctx.obj

    config = _load_config(demux, config_file)
    browser = config.route(url)

    if dry_run:
        machine_output(shlex.join(build_browser_args(browser, url)))
        return

    try:
        demux.launcher.launch(browser, url)
    except LaunchError as e:
        raise UserFacingCliError(
            f"while execing browser: {shlex.join(e.command)}: {e.message}"
        ) from e


def main() -> None:
    """CLI entry point used by the `browserdemux` console script."""
    cli()
