"""
Error types raised by the metadata scraper.

Callers only need to catch ScraperError: every failure of a scrape call
arrives as one, with the underlying exception kept as ``cause``.
"""
from typing import Optional


class ScraperError(Exception):
    """A scrape call failed. ``cause`` holds the original exception, if any."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class FetchError(ScraperError):
    """The URL could not be fetched as an HTML document."""


class FetchTimeoutError(FetchError):
    """The fetch deadline elapsed before the response completed."""


class InvalidUrlError(ValueError):
    """Input looked like a URL but does not use the http(s) protocol."""
