"""Adapters package initialization."""
from metascraper.adapters.html_fetcher import HTMLFetcher

__all__ = ["HTMLFetcher"]
