"""Supported browsers and the executables that launch them."""

from enum import Enum

from browserdemux.core.errors import ConfigParseError
from browserdemux.core.url import ParsedUrl


class Browser(Enum):
    """Browsers a URL can be routed to.

    Values are the identifiers used in config files.
    """

    FIREFOX = "firefox"
    GOOGLE_CHROME = "google-chrome"
    CHROMIUM = "chromium"

    @classmethod
    def from_config_id(cls, text: str) -> "Browser":
        """Look up a browser by its config identifier, ignoring case.

        Raises:
            ConfigParseError: If no browser has that identifier
        """
        normalized = text.lower()
        for browser in cls:
            if browser.value == normalized:
                return browser
        known = ", ".join(f"'{b.value}'" for b in cls)
        raise ConfigParseError(f"unknown browser '{text}' (expected one of {known})")


# Used when there is no config file
DEFAULT_BROWSER = Browser.FIREFOX

BROWSER_EXECUTABLES: dict[Browser, str] = {
    Browser.FIREFOX: "firefox",
    Browser.GOOGLE_CHROME: "google-chrome",
    Browser.CHROMIUM: "chromium",
}


def build_browser_args(browser: Browser, url: ParsedUrl) -> list[str]:
    """Build the argument list that opens url in browser.

    The URL is always the sole argument after the executable name.
    """
    return [BROWSER_EXECUTABLES[browser], url.text]
