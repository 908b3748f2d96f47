"""
Raw tags plugin.

Captures the document's <title>, meta and link tags verbatim into the raw
bucket. Does nothing unless raw extraction is enabled.
"""
from typing import Dict, List

from bs4 import BeautifulSoup

from metascraper.models.metadata import MetadataFragment, RawMetadata
from metascraper.models.options import ScraperOptions
from metascraper.plugins.base import Plugin
from metascraper.utils.dom import element_attr, get_document, select_all

META_KEY_ATTRS = ("name", "property", "http-equiv", "itemprop")


class RawTagsPlugin(Plugin):
    """Capture meta and link tags without interpretation."""

    name = "raw_tags"

    async def extract(self, html: str, options: ScraperOptions) -> MetadataFragment:
        if not options.extract_raw:
            return MetadataFragment()

        soup = get_document(html)
        title = soup.find("title")

        return MetadataFragment(
            raw=RawMetadata(
                title=title.get_text().strip() if title else None,
                meta=self._collect_meta(soup),
                links=self._collect_links(soup),
            )
        )

    def _collect_meta(self, soup: BeautifulSoup) -> Dict[str, str]:
        meta: Dict[str, str] = {}
        for tag in select_all(soup, "meta"):
            charset = element_attr(tag, "charset")
            if charset:
                meta["charset"] = charset
                continue

            content = element_attr(tag, "content")
            if content is None:
                continue

            for attr in META_KEY_ATTRS:
                key = element_attr(tag, attr)
                if key:
                    meta[key] = content
                    break
        return meta

    def _collect_links(self, soup: BeautifulSoup) -> List[Dict[str, str]]:
        links: List[Dict[str, str]] = []
        for tag in select_all(soup, "link[rel][href]"):
            links.append({attr: element_attr(tag, attr) or "" for attr in tag.attrs})
        return links
