"""Browser launcher abstraction for testing.

This module provides an ABC for browser launches to enable testing without
actually replacing the process.
"""

from abc import ABC, abstractmethod
from typing import NoReturn

from browserdemux.core.browser import Browser
from browserdemux.core.url import ParsedUrl


class BrowserLauncher(ABC):
    """Abstract browser launcher for dependency injection."""

    @abstractmethod
    def launch(self, browser: Browser, url: ParsedUrl) -> NoReturn:
        """Replace the current process with browser opening url.

        Args:
            browser: Browser chosen by the router
            url: URL passed to the browser as its only argument

        Raises:
            LaunchError: If the browser executable is missing or cannot be executed

        Note:
            This method never returns - the process is replaced.
        """
        ...
