"""URL helpers: input classification, validation and HTTPS upgrading."""
from typing import Optional
from urllib.parse import urlparse

from metascraper.errors import InvalidUrlError

ALLOWED_SCHEMES = ("http", "https")


def is_url(value: str) -> bool:
    """Return True if the scrape input should be fetched rather than parsed."""
    return value.startswith("http://") or value.startswith("https://")


def validate_url(url: str) -> str:
    """
    Check that url is an absolute http(s) URL.

    Raises:
        InvalidUrlError: If the scheme is not http/https or the host is missing
    """
    parsed = urlparse(url)
    if parsed.scheme.lower() not in ALLOWED_SCHEMES:
        raise InvalidUrlError("Only HTTP(S) protocols are supported")
    if not parsed.netloc:
        raise InvalidUrlError(f"Invalid URL: {url}")
    return url


def to_secure_url(url: Optional[str]) -> Optional[str]:
    """
    Upgrade an insecure URL to HTTPS.

    Protocol-relative URLs ("//host/path") and http URLs become https;
    anything else, including https URLs and relative paths, is returned as is.

    >>> to_secure_url("//example.com")
    'https://example.com'
    >>> to_secure_url("http://example.com")
    'https://example.com'
    >>> to_secure_url(None) is None
    True
    """
    if not url:
        return None

    if url.startswith("//"):
        return f"https:{url}"

    if url.startswith("http:"):
        return url.replace("http:", "https:", 1)

    return url
