"""Fake BrowserLauncher implementation for testing.

FakeBrowserLauncher records launch calls without replacing the process,
enabling fast and deterministic tests.
"""

from dataclasses import dataclass
from typing import NoReturn

from browserdemux.core.browser import Browser, build_browser_args
from browserdemux.core.errors import LaunchError
from browserdemux.core.url import ParsedUrl
from browserdemux.gateway.browser_launcher.abc import BrowserLauncher


@dataclass(frozen=True)
class BrowserLaunchCall:
    """Record of a launch call for test assertions.

    Attributes:
        browser: Browser that was launched
        url: URL that was passed
        args: Argument list the real launcher would have executed
    """

    browser: Browser
    url: ParsedUrl
    args: list[str]


class FakeBrowserLauncher(BrowserLauncher):
    """In-memory fake implementation that tracks launch calls.

    This class has NO public setup methods. All state is captured during execution.
    """

    def __init__(self, *, launch_error: str | None = None) -> None:
        """Create FakeBrowserLauncher.

        Args:
            launch_error: If set, launch raises LaunchError with this message.
                Use to simulate a browser that is not installed.
        """
        self._launch_calls: list[BrowserLaunchCall] = []
        self._launch_error = launch_error

    @property
    def launch_calls(self) -> list[BrowserLaunchCall]:
        """Get a copy of the launch calls that were made.

        This property is for test assertions only.
        """
        return list(self._launch_calls)

    @property
    def last_call(self) -> BrowserLaunchCall | None:
        """Get the last launch call, or None if no calls were made.

        This property is for test assertions only.
        """
        if not self._launch_calls:
            return None
        return self._launch_calls[-1]

    def launch(self, browser: Browser, url: ParsedUrl) -> NoReturn:
        """Track launch call.

        In production, this replaces the process. In tests, we record the call
        and raise SystemExit to simulate the process ending.

        Raises:
            LaunchError: If launch_error was configured
            SystemExit: Otherwise, to simulate process replacement
        """
        args = build_browser_args(browser, url)
        if self._launch_error is not None:
            raise LaunchError(args, self._launch_error)
        self._launch_calls.append(BrowserLaunchCall(browser=browser, url=url, args=args))
        raise SystemExit(0)
