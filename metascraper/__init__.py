"""
Metadata scraper.

Extracts title, description, images, OpenGraph, Twitter card and JSON-LD
metadata from an HTML document or a URL pointing to one.
"""
from metascraper.errors import FetchError, FetchTimeoutError, InvalidUrlError, ScraperError
from metascraper.layers.scraper import Scraper, create_scraper, scrape
from metascraper.models import Metadata, MetadataFragment, ScraperOptions
from metascraper.plugins import (
    FunctionPlugin,
    JsonLdPlugin,
    MetaTagsPlugin,
    OpenGraphPlugin,
    Plugin,
    RawTagsPlugin,
    TwitterPlugin,
    default_plugins,
)

__version__ = "1.0.0"

__all__ = [
    "FetchError",
    "FetchTimeoutError",
    "InvalidUrlError",
    "ScraperError",
    "Scraper",
    "create_scraper",
    "scrape",
    "Metadata",
    "MetadataFragment",
    "ScraperOptions",
    "FunctionPlugin",
    "JsonLdPlugin",
    "MetaTagsPlugin",
    "OpenGraphPlugin",
    "Plugin",
    "RawTagsPlugin",
    "TwitterPlugin",
    "default_plugins",
]
