"""Routing: pick the browser for a URL from an ordered rule list."""

import logging
from dataclasses import dataclass

from browserdemux.core.browser import DEFAULT_BROWSER, Browser
from browserdemux.core.rule import Rule
from browserdemux.core.url import ParsedUrl

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouterConfig:
    """Loaded routing configuration.

    Rule order matters: the first rule that matches wins and later rules are
    never evaluated. When no rule matches, ``default`` is used.

    Example config.toml:
      default = "firefox"

      [[rule]]
      to = "google-chrome"
      match = { domain = "facebook.com" }
    """

    default: Browser
    rules: tuple[Rule, ...]

    @staticmethod
    def default_config() -> "RouterConfig":
        """Config used when no config file exists."""
        return RouterConfig(default=DEFAULT_BROWSER, rules=())

    def route(self, url: ParsedUrl) -> Browser:
        """Return the browser that should open url."""
        for index, rule in enumerate(self.rules):
            if rule.matches(url):
                logger.debug(
                    "rule %d (%s) matched %r, routing to %s",
                    index,
                    rule.matcher,
                    url.authority,
                    rule.target.value,
                )
                return rule.target
        logger.debug("no rule matched %r, routing to default %s", url.authority, self.default.value)
        return self.default
