"""Real BrowserLauncher implementation.

RealBrowserLauncher replaces the current process with the browser via
os.execvp(). On platforms without exec semantics it runs the browser as a
child process and exits with its status instead.
"""

import logging
import os
import shutil
import subprocess
from typing import NoReturn

from browserdemux.core.browser import Browser, build_browser_args
from browserdemux.core.errors import LaunchError
from browserdemux.core.url import ParsedUrl
from browserdemux.gateway.browser_launcher.abc import BrowserLauncher

logger = logging.getLogger(__name__)


def _supports_exec() -> bool:
    return os.name == "posix"


class RealBrowserLauncher(BrowserLauncher):
    """Production implementation that hands the process over to the browser."""

    def launch(self, browser: Browser, url: ParsedUrl) -> NoReturn:
        """Replace current process with the browser.

        Raises:
            LaunchError: If the executable is not on PATH or exec fails

        Note:
            This method never returns - the process is replaced.
        """
        args = build_browser_args(browser, url)
        executable = args[0]

        if shutil.which(executable) is None:
            raise LaunchError(args, f"'{executable}' not found on PATH")

        logger.debug("executing %s", args)

        if not _supports_exec():
            try:
                result = subprocess.run(args, check=False)
            except OSError as e:
                raise LaunchError(args, str(e)) from e
            raise SystemExit(result.returncode)

        try:
            os.execvp(executable, args)
        except OSError as e:
            raise LaunchError(args, str(e)) from e
