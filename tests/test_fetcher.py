"""Tests for the HTML fetch adapter and URL inputs."""
import asyncio

import httpx
import pytest

from metascraper import FetchError, FetchTimeoutError, create_scraper, default_plugins
from metascraper.adapters.html_fetcher import ACCEPT_HEADER
from metascraper.models.options import DEFAULT_USER_AGENT, ScraperOptions

PAGE = "<html><head><title>Remote Page</title></head></html>"


class TestHTMLFetcher:
    @pytest.mark.asyncio
    async def test_returns_html(self, make_fetcher, html_response):
        fetcher = make_fetcher(lambda request: html_response(PAGE))
        html = await fetcher.fetch("https://example.com/", ScraperOptions())
        assert html == PAGE

    @pytest.mark.asyncio
    async def test_sends_default_headers(self, make_fetcher, html_response):
        requests = []

        def handler(request):
            requests.append(request)
            return html_response(PAGE)

        await make_fetcher(handler).fetch("https://example.com/", ScraperOptions())

        assert requests[0].method == "GET"
        assert requests[0].headers["user-agent"] == DEFAULT_USER_AGENT
        assert requests[0].headers["accept"] == ACCEPT_HEADER

    @pytest.mark.asyncio
    async def test_sends_configured_user_agent(self, make_fetcher, html_response):
        requests = []

        def handler(request):
            requests.append(request)
            return html_response(PAGE)

        options = ScraperOptions(user_agent="TestBot/2.0")
        await make_fetcher(handler).fetch("https://example.com/", options)
        assert requests[0].headers["user-agent"] == "TestBot/2.0"

    @pytest.mark.asyncio
    async def test_non_success_status(self, make_fetcher, html_response):
        fetcher = make_fetcher(lambda request: html_response("missing", status_code=404))

        with pytest.raises(FetchError) as exc_info:
            await fetcher.fetch("https://example.com/missing", ScraperOptions())

        assert exc_info.value.message == "Failed to fetch URL: https://example.com/missing"
        assert "404" in str(exc_info.value.cause)

    @pytest.mark.asyncio
    async def test_non_html_content_type(self, make_fetcher, html_response):
        fetcher = make_fetcher(lambda request: html_response("{}", content_type="application/json"))

        with pytest.raises(FetchError) as exc_info:
            await fetcher.fetch("https://example.com/api", ScraperOptions())

        assert not isinstance(exc_info.value, FetchTimeoutError)
        assert "application/json" in str(exc_info.value.cause)

    @pytest.mark.asyncio
    async def test_transport_error(self, make_fetcher):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(FetchError) as exc_info:
            await make_fetcher(handler).fetch("https://example.com/", ScraperOptions())

        assert isinstance(exc_info.value.cause, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_client_timeout(self, make_fetcher):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(FetchTimeoutError) as exc_info:
            await make_fetcher(handler).fetch("https://example.com/", ScraperOptions(timeout=5000))

        assert exc_info.value.message == "Request timeout after 5000ms"

    @pytest.mark.asyncio
    async def test_deadline_cancels_slow_request(self, make_fetcher, html_response):
        async def handler(request):
            await asyncio.sleep(5)
            return html_response(PAGE)

        with pytest.raises(FetchTimeoutError):
            await make_fetcher(handler).fetch("https://example.com/", ScraperOptions(timeout=50))

    @pytest.mark.asyncio
    async def test_follows_redirects(self, make_fetcher, html_response):
        def handler(request):
            if request.url.path == "/old":
                return httpx.Response(301, headers={"location": "https://example.com/new"})
            return html_response(PAGE)

        html = await make_fetcher(handler).fetch("https://example.com/old", ScraperOptions())
        assert html == PAGE

    @pytest.mark.asyncio
    async def test_redirect_not_followed(self, make_fetcher, html_response):
        def handler(request):
            if request.url.path == "/old":
                return httpx.Response(301, headers={"location": "https://example.com/new"})
            return html_response(PAGE)

        with pytest.raises(FetchError):
            await make_fetcher(handler).fetch(
                "https://example.com/old",
                ScraperOptions(follow_redirects=False),
            )


class TestScrapeUrl:
    @pytest.mark.asyncio
    async def test_url_input_is_fetched(self, make_fetcher, html_response):
        fetcher = make_fetcher(lambda request: html_response(PAGE))
        scraper = create_scraper(default_plugins(), fetcher=fetcher)

        metadata = await scraper.scrape("https://example.com/")
        assert metadata.base.title == "Remote Page"

    @pytest.mark.asyncio
    async def test_html_input_skips_network(self, make_fetcher):
        def handler(request):
            raise AssertionError("network must not be used for HTML input")

        scraper = create_scraper(default_plugins(), fetcher=make_fetcher(handler))
        metadata = await scraper.scrape(PAGE)
        assert metadata.base.title == "Remote Page"

    @pytest.mark.asyncio
    async def test_timeout_reaches_caller(self, make_fetcher):
        def handler(request):
            raise httpx.ConnectTimeout("timed out", request=request)

        scraper = create_scraper(default_plugins(), fetcher=make_fetcher(handler))
        with pytest.raises(FetchTimeoutError):
            await scraper.scrape("http://example.com/", {"timeout": 100})
