"""Application context with dependency injection."""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from browserdemux.cli.config import config_path
from browserdemux.gateway.browser_launcher.abc import BrowserLauncher
from browserdemux.gateway.browser_launcher.fake import FakeBrowserLauncher
from browserdemux.gateway.browser_launcher.real import RealBrowserLauncher


@dataclass(frozen=True)
class DemuxContext:
    """Immutable context holding the dependencies of one browserdemux run.

    Created at the CLI entry point. Tests pass their own via ``obj=``.

    Attributes:
        launcher: Launches the chosen browser
        locate_config: Returns the default config file path. Called lazily so
            a missing config directory is reported like other config errors.
    """

    launcher: BrowserLauncher
    locate_config: Callable[[], Path]


def create_context() -> DemuxContext:
    """Create a DemuxContext with real implementations."""
    return DemuxContext(launcher=RealBrowserLauncher(), locate_config=config_path)


def context_for_test(
    *,
    launcher: BrowserLauncher | None = None,
    config_file: Path | None = None,
) -> DemuxContext:
    """Create a DemuxContext for tests.

    Args:
        launcher: Launcher to use. Defaults to a fresh FakeBrowserLauncher.
        config_file: Default config path. Defaults to a path that does not
            exist, so the built-in default config is used.
    """
    resolved_launcher = launcher if launcher is not None else FakeBrowserLauncher()
    resolved_path = (
        config_file if config_file is not None else Path("/test/nonexistent/config.toml")
    )
    return DemuxContext(launcher=resolved_launcher, locate_config=lambda: resolved_path)
