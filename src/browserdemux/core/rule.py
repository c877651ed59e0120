from dataclasses import dataclass

from browserdemux.core.browser import Browser
from browserdemux.core.matcher import Matcher, matcher_matches
from browserdemux.core.url import ParsedUrl


@dataclass(frozen=True)
class Rule:
    """Sends URLs accepted by matcher to target."""

    matcher: Matcher
    target: Browser

    def matches(self, url: ParsedUrl) -> bool:
        return matcher_matches(self.matcher, url.authority)
