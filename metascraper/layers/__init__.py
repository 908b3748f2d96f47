"""Layers package initialization."""
from metascraper.layers.scraper import (
    Scraper,
    create_scraper,
    merge_fragment,
    process_metadata,
    scrape,
)

__all__ = [
    "Scraper",
    "create_scraper",
    "merge_fragment",
    "process_metadata",
    "scrape",
]
