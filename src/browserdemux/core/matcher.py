"""Matchers decide whether a rule applies to a URL's authority.

Matchers form a closed union. Adding a kind means adding a dataclass, a case
in matcher_matches(), and an entry in MATCHER_KINDS; the type checker flags
any dispatch site that was missed.
"""

from dataclasses import dataclass
from typing import Any, assert_never

from browserdemux.core.errors import ConfigParseError


@dataclass(frozen=True)
class AuthorityMatcher:
    """Matches one exact authority, e.g. ``example.com:8080``."""

    authority: str


@dataclass(frozen=True)
class DomainMatcher:
    """Matches a domain and every subdomain of it.

    ``DomainMatcher("facebook.com")`` matches ``facebook.com`` and
    ``the.facebook.com`` but not ``thefacebook.com``.
    """

    domain: str


Matcher = AuthorityMatcher | DomainMatcher

# Config keys accepted inside a rule's ``match`` table
MATCHER_KINDS = ("authority", "domain")


def matcher_matches(matcher: Matcher, authority: str) -> bool:
    """Return True if matcher accepts authority."""
    match matcher:
        case AuthorityMatcher():
            return authority == matcher.authority
        case DomainMatcher():
            return authority == matcher.domain or authority.endswith("." + matcher.domain)
        case _:
            assert_never(matcher)


def parse_matcher(raw: Any, *, where: str) -> Matcher:
    """Build a Matcher from a rule's ``match`` table.

    Args:
        raw: Parsed TOML value, expected to be a table with exactly one key
        where: Location used in error messages, e.g. ``rule[0].match``

    Raises:
        ConfigParseError: If raw is not a single-key table naming a known
            matcher kind with a non-empty string value
    """
    if not isinstance(raw, dict):
        raise ConfigParseError(f"{where}: expected a table, got {type(raw).__name__}")

    unknown = [key for key in raw if key not in MATCHER_KINDS]
    if unknown:
        expected = ", ".join(f"'{kind}'" for kind in MATCHER_KINDS)
        raise ConfigParseError(
            f"{where}: unknown matcher kind '{unknown[0]}' (expected one of {expected})"
        )
    if len(raw) != 1:
        raise ConfigParseError(f"{where}: expected exactly one matcher kind, got {len(raw)}")

    kind, value = next(iter(raw.items()))
    if not isinstance(value, str):
        raise ConfigParseError(f"{where}.{kind}: expected a string, got {type(value).__name__}")
    if not value:
        raise ConfigParseError(f"{where}.{kind}: must not be empty")

    if kind == "authority":
        return AuthorityMatcher(authority=value)
    return DomainMatcher(domain=value)
