"""Tests for Browser identifiers and command building."""

import pytest

from browserdemux.core.browser import (
    BROWSER_EXECUTABLES,
    DEFAULT_BROWSER,
    Browser,
    build_browser_args,
)
from browserdemux.core.errors import ConfigParseError
from browserdemux.core.url import parse_url


class TestBrowserFromConfigId:
    """Tests for Browser.from_config_id."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("firefox", Browser.FIREFOX),
            ("Firefox", Browser.FIREFOX),
            ("google-chrome", Browser.GOOGLE_CHROME),
            ("Google-Chrome", Browser.GOOGLE_CHROME),
            ("CHROMIUM", Browser.CHROMIUM),
        ],
    )
    def test_parses_ids_case_insensitively(self, text: str, expected: Browser) -> None:
        assert Browser.from_config_id(text) == expected

    @pytest.mark.parametrize(
        "text", ["safari", "googlechrome", "google_chrome", "", " firefox", "firefox "]
    )
    def test_rejects_unknown_ids(self, text: str) -> None:
        """Only hyphenated ids of known browsers are accepted."""
        with pytest.raises(ConfigParseError, match="unknown browser"):
            Browser.from_config_id(text)

    def test_error_lists_known_browsers(self) -> None:
        with pytest.raises(ConfigParseError) as exc_info:
            Browser.from_config_id("safari")

        assert exc_info.value.message == (
            "unknown browser 'safari' (expected one of 'firefox', 'google-chrome', 'chromium')"
        )


class TestBuildBrowserArgs:
    """Tests for the browser -> command mapping."""

    def test_every_browser_has_an_executable(self) -> None:
        assert set(BROWSER_EXECUTABLES) == set(Browser)

    def test_firefox(self) -> None:
        url = parse_url("https://example.com/a?b=c")

        assert build_browser_args(Browser.FIREFOX, url) == ["firefox", "https://example.com/a?b=c"]

    def test_google_chrome(self) -> None:
        url = parse_url("https://facebook.com")

        assert build_browser_args(Browser.GOOGLE_CHROME, url) == [
            "google-chrome",
            "https://facebook.com",
        ]

    def test_default_browser_is_firefox(self) -> None:
        assert DEFAULT_BROWSER == Browser.FIREFOX
