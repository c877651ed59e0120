"""Tests for rules and RouterConfig.route."""

from browserdemux.core.browser import Browser
from browserdemux.core.matcher import AuthorityMatcher, DomainMatcher
from browserdemux.core.router import RouterConfig
from browserdemux.core.rule import Rule
from browserdemux.core.url import parse_url


class TestRule:
    """Tests for Rule.matches."""

    def test_delegates_to_matcher_with_authority(self) -> None:
        rule = Rule(matcher=AuthorityMatcher("example.com:8080"), target=Browser.CHROMIUM)

        assert rule.matches(parse_url("http://example.com:8080/path"))
        assert not rule.matches(parse_url("http://example.com/path"))


class TestRoute:
    """Tests for RouterConfig.route."""

    def test_empty_rules_use_default(self) -> None:
        config = RouterConfig(default=Browser.FIREFOX, rules=())

        assert config.route(parse_url("https://example.com")) == Browser.FIREFOX

    def test_default_config_routes_everything_to_firefox(self) -> None:
        config = RouterConfig.default_config()

        assert config.rules == ()
        assert config.route(parse_url("https://example.com")) == Browser.FIREFOX
        assert config.route(parse_url("https://facebook.com")) == Browser.FIREFOX

    def test_authority_rule(self) -> None:
        """Exact authority rules route only that authority."""
        config = RouterConfig(
            default=Browser.FIREFOX,
            rules=(Rule(matcher=AuthorityMatcher("facebook.com"), target=Browser.GOOGLE_CHROME),),
        )

        assert config.route(parse_url("https://facebook.com")) == Browser.GOOGLE_CHROME
        assert config.route(parse_url("https://thefacebook.com")) == Browser.FIREFOX

    def test_domain_rule_matches_subdomain(self) -> None:
        config = RouterConfig(
            default=Browser.FIREFOX,
            rules=(Rule(matcher=DomainMatcher("facebook.com"), target=Browser.GOOGLE_CHROME),),
        )

        assert config.route(parse_url("https://drop.the.facebook.com")) == Browser.GOOGLE_CHROME

    def test_no_matching_rule_uses_default(self) -> None:
        config = RouterConfig(
            default=Browser.CHROMIUM,
            rules=(Rule(matcher=DomainMatcher("facebook.com"), target=Browser.GOOGLE_CHROME),),
        )

        assert config.route(parse_url("https://example.com")) == Browser.CHROMIUM

    def test_first_matching_rule_wins(self) -> None:
        """When several rules match, the earliest one decides."""
        config = RouterConfig(
            default=Browser.FIREFOX,
            rules=(
                Rule(matcher=DomainMatcher("facebook.com"), target=Browser.GOOGLE_CHROME),
                Rule(matcher=AuthorityMatcher("www.facebook.com"), target=Browser.CHROMIUM),
            ),
        )

        assert config.route(parse_url("https://www.facebook.com")) == Browser.GOOGLE_CHROME

    def test_later_rule_applies_when_earlier_does_not_match(self) -> None:
        config = RouterConfig(
            default=Browser.FIREFOX,
            rules=(
                Rule(matcher=AuthorityMatcher("facebook.com"), target=Browser.GOOGLE_CHROME),
                Rule(matcher=DomainMatcher("facebook.com"), target=Browser.CHROMIUM),
            ),
        )

        assert config.route(parse_url("https://m.facebook.com")) == Browser.CHROMIUM
        assert config.route(parse_url("https://facebook.com")) == Browser.GOOGLE_CHROME
