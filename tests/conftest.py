"""Shared fixtures for scraper tests."""
import httpx
import pytest

from metascraper.adapters.html_fetcher import HTMLFetcher

FULL_HTML = """
<!DOCTYPE html>
<html lang="en">
  <head>
    <title>  Test
      Page  </title>
    <meta charset="utf-8">
    <meta name="description" content="Page   Description">
    <meta name="keywords" content="key1, key2, key3">
    <meta name="author" content="John Doe">
    <meta name="theme-color" content="#ffffff">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <meta name="robots" content="index, follow">
    <link rel="canonical" href="https://example.com/page">
    <link rel="icon" href="http://example.com/favicon.ico">
    <link rel="image_src" href="http://example.com/preview.png">
    <link rel="alternate" hreflang="de" href="https://example.com/de/page">
    <link rel="alternate" type="application/rss+xml" href="https://example.com/feed.xml">
    <meta property="og:title" content="OG Test Title">
    <meta property="og:description" content="OG Test Description">
    <meta property="og:image" content="http://example.com/image.jpg">
    <meta property="og:url" content="https://example.com/page">
    <meta property="og:type" content="article">
    <meta property="og:site_name" content="Test Site">
    <meta property="og:locale" content="en_US">
    <meta name="twitter:title" content="Twitter Test Title">
    <meta name="twitter:description" content="Twitter Test Description">
    <meta name="twitter:image" content="http://example.com/card.jpg">
    <meta name="twitter:card" content="summary_large_image">
    <meta name="twitter:site" content="@testsite">
    <meta name="twitter:creator" content="@testuser">
    <script type="application/ld+json">
      {"@context": "https://schema.org", "@type": "Article", "headline": "Test Article"}
    </script>
  </head>
  <body><h1>Hello</h1></body>
</html>
"""

EMPTY_HTML = "<!DOCTYPE html><html><head></head><body></body></html>"


@pytest.fixture
def full_html():
    return FULL_HTML


@pytest.fixture
def empty_html():
    return EMPTY_HTML


def build_html_response(html: str, status_code: int = 200, content_type: str = "text/html; charset=utf-8"):
    """Build an httpx response carrying an HTML body."""
    return httpx.Response(
        status_code,
        headers={"content-type": content_type},
        content=html.encode("utf-8"),
    )


@pytest.fixture
def html_response():
    return build_html_response


@pytest.fixture
def make_fetcher():
    """Return a factory building an HTMLFetcher around a mock handler."""
    def factory(handler):
        return HTMLFetcher(transport=httpx.MockTransport(handler))
    return factory
