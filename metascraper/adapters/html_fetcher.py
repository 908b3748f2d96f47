"""
HTML fetch adapter for the metadata scraper.
Resolves a URL to HTML text with a single GET request.
"""
import asyncio
from typing import Optional

import httpx

from metascraper.errors import FetchError, FetchTimeoutError
from metascraper.models.options import ScraperOptions
from metascraper.utils.logger import LayerLogger

ACCEPT_HEADER = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"


class HTMLFetcher:
    """
    Fetch HTML documents over HTTP(S).

    One request per call, no retries. The whole request is bounded by
    options.timeout milliseconds and cancelled when the deadline passes.
    """

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.transport = transport
        self.logger = LayerLogger("html_fetcher")

    async def fetch(self, url: str, options: ScraperOptions) -> str:
        """
        Fetch url and return the response body as text.

        Args:
            url: Absolute http(s) URL
            options: Scraper options (timeout, user agent, redirect policy)

        Returns:
            The HTML document

        Raises:
            FetchTimeoutError: If the deadline elapsed
            FetchError: On transport errors, non-2xx status or non-HTML content
        """
        self.logger.log_action(
            "fetch_html",
            "started",
            url=url,
            timeout_ms=options.timeout,
            follow_redirects=options.follow_redirects,
        )

        try:
            html = await asyncio.wait_for(
                self._get(url, options),
                timeout=options.timeout / 1000,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            self.logger.log_error(
                f"Request timeout after {options.timeout}ms",
                error_type="timeout",
                url=url,
            )
            raise FetchTimeoutError(f"Request timeout after {options.timeout}ms", e) from e
        except FetchError:
            raise
        except httpx.HTTPError as e:
            self.logger.log_error(
                f"Failed to fetch URL: {str(e)}",
                error_type="http_error",
                url=url,
            )
            raise FetchError(f"Failed to fetch URL: {url}", e) from e

        self.logger.log_action(
            "fetch_html",
            "completed",
            url=url,
            content_length=len(html),
        )
        return html

    async def _get(self, url: str, options: ScraperOptions) -> str:
        async with httpx.AsyncClient(
            timeout=options.timeout / 1000,
            follow_redirects=options.follow_redirects,
            transport=self.transport,
        ) as client:
            response = await client.get(url, headers=self._get_headers(options))

        if not response.is_success:
            self._fail(url, f"HTTP error! status: {response.status_code}", response.status_code)

        content_type = response.headers.get("content-type", "")
        if "text/html" not in content_type:
            self._fail(url, f"Invalid content type: {content_type or None}", response.status_code)

        return response.text

    def _fail(self, url: str, reason: str, status_code: int):
        self.logger.log_error(reason, error_type="bad_response", url=url, status_code=status_code)
        raise FetchError(f"Failed to fetch URL: {url}", ValueError(reason))

    def _get_headers(self, options: ScraperOptions) -> dict:
        """Get request headers for an HTML document request."""
        return {
            "Accept": ACCEPT_HEADER,
            "User-Agent": options.user_agent,
        }
