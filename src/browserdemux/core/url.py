"""URL parsing and authority extraction.

Rules match against a URL's authority: the host, lowercased and IDNA-encoded,
followed by ``:port`` when the port is explicit and not the scheme's default.
Userinfo is never part of the authority.
"""

from dataclasses import dataclass
from urllib.parse import urlsplit

# Schemes whose URLs must carry a host
HOST_REQUIRED_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})

DEFAULT_PORTS: dict[str, int] = {
    "http": 80,
    "https": 443,
    "ws": 80,
    "wss": 443,
    "ftp": 21,
}

# Code points that may not appear in a host (WHATWG forbidden domain code points)
FORBIDDEN_HOST_CHARS = frozenset(
    "#/?@[\\]^|<>%" + "".join(chr(i) for i in range(0x21)) + "\x7f"
)


class InvalidUrlError(Exception):
    """Raised when text cannot be parsed as an absolute URL."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"invalid URL '{text}': {reason}")
        self.text = text
        self.reason = reason


@dataclass(frozen=True)
class ParsedUrl:
    """An absolute URL together with the authority used for routing.

    Attributes:
        text: The URL as given on the command line (surrounding whitespace removed).
            This is what gets handed to the browser.
        scheme: Lowercased scheme, e.g. ``https``
        authority: ``host`` or ``host:port``; empty for URLs without a host
    """

    text: str
    scheme: str
    authority: str

    def __str__(self) -> str:
        return self.text


def _encode_host(text: str, host: str) -> str:
    if any(ch in FORBIDDEN_HOST_CHARS or ch.isspace() for ch in host):
        raise InvalidUrlError(text, "invalid character in host")
    if host.isascii():
        return host
    try:
        return host.encode("idna").decode("ascii")
    except UnicodeError as e:
        raise InvalidUrlError(text, f"invalid international domain name: {e}") from e


def parse_url(text: str) -> ParsedUrl:
    """Parse text into a ParsedUrl.

    Args:
        text: Absolute URL, e.g. ``https://example.com:8443/path``

    Returns:
        ParsedUrl with the normalized authority

    Raises:
        InvalidUrlError: If the text has no scheme, an invalid port, or no host
            for a scheme that requires one
    """
    stripped = text.strip()
    if not stripped:
        raise InvalidUrlError(text, "empty URL")

    try:
        parts = urlsplit(stripped)
    except ValueError as e:
        raise InvalidUrlError(text, str(e)) from e

    if not parts.scheme:
        raise InvalidUrlError(text, "relative URL without a scheme")

    try:
        port = parts.port
    except ValueError as e:
        raise InvalidUrlError(text, "invalid port number") from e

    host = parts.hostname or ""
    if not host and parts.scheme in HOST_REQUIRED_SCHEMES:
        raise InvalidUrlError(text, "empty host")

    host = _encode_host(text, host)
    if ":" in host:
        # IPv6 literal
        host = f"[{host}]"

    authority = host
    if port is not None and DEFAULT_PORTS.get(parts.scheme) != port:
        authority = f"{host}:{port}"

    return ParsedUrl(text=stripped, scheme=parts.scheme, authority=authority)
