"""
Base meta tags plugin.

Reads the generic page metadata: <title>, standard <meta name=...> tags and
the canonical, icon and alternate <link> tags.
"""
from typing import Dict, List, Optional

from bs4 import BeautifulSoup

from metascraper.models.metadata import AlternatesMetadata, BaseMetadata, MetadataFragment
from metascraper.models.options import ScraperOptions
from metascraper.plugins.base import Plugin
from metascraper.utils.dom import element_attr, get_attr, get_document, get_text, select_all
from metascraper.utils.url import to_secure_url


class MetaTagsPlugin(Plugin):
    """
    Extract the base metadata bucket.

    title, description and author are always strings and keywords is always
    a list, so the bucket stays total even for an empty document. Other
    fields are only set when the page declares them.
    """

    name = "meta_tags"

    async def extract(self, html: str, options: ScraperOptions) -> MetadataFragment:
        soup = get_document(html)
        return MetadataFragment(base=self._extract_base(soup, options.secure_images))

    def _extract_base(self, soup: BeautifulSoup, secure_images: bool) -> BaseMetadata:
        base = BaseMetadata(
            title=get_text(soup, "title"),
            description=get_attr(soup, 'meta[name="description"]', "content") or "",
            author=get_attr(soup, 'meta[name="author"]', "content") or "",
            keywords=self._parse_keywords(get_attr(soup, 'meta[name="keywords"]', "content")),
        )

        canonical_url = get_attr(soup, 'link[rel="canonical"]', "href")
        if canonical_url:
            base.canonical_url = canonical_url

        favicon = get_attr(soup, 'link[rel="icon"], link[rel="shortcut icon"]', "href")
        if favicon:
            base.favicon = to_secure_url(favicon) if secure_images else favicon

        # Upgraded to https during post-processing, not here
        image = get_attr(soup, 'link[rel="image_src"]', "href")
        if image:
            base.image = image

        theme_color = get_attr(soup, 'meta[name="theme-color"]', "content")
        if theme_color:
            base.theme_color = theme_color

        viewport = get_attr(soup, 'meta[name="viewport"]', "content")
        if viewport:
            base.viewport = viewport

        robots = get_attr(soup, 'meta[name="robots"]', "content")
        if robots:
            base.robots = robots

        base.alternates = self._extract_alternates(soup, canonical_url)
        return base

    def _parse_keywords(self, content: Optional[str]) -> List[str]:
        """Split a comma separated keywords list, dropping empty entries."""
        if not content:
            return []
        return [keyword.strip() for keyword in content.split(",") if keyword.strip()]

    def _extract_alternates(
        self,
        soup: BeautifulSoup,
        canonical_url: Optional[str],
    ) -> Optional[AlternatesMetadata]:
        """Group link[rel=alternate] tags by hreflang, media and type."""
        languages: Dict[str, str] = {}
        media: Dict[str, str] = {}
        types: Dict[str, str] = {}

        for link in select_all(soup, 'link[rel="alternate"]'):
            href = element_attr(link, "href")
            if not href:
                continue

            hreflang = element_attr(link, "hreflang")
            media_query = element_attr(link, "media")
            mime_type = element_attr(link, "type")

            if hreflang:
                languages[hreflang] = href
            elif media_query:
                media[media_query] = href
            elif mime_type:
                types[mime_type] = href

        if not (canonical_url or languages or media or types):
            return None

        return AlternatesMetadata(
            canonical=canonical_url or None,
            languages=languages or None,
            media=media or None,
            types=types or None,
        )
