"""
Twitter card plugin.

Reads twitter:* meta tags into the twitter bucket.
"""
from bs4 import BeautifulSoup

from metascraper.models.metadata import ImageMetadata, MetadataFragment, TwitterMetadata
from metascraper.models.options import ScraperOptions
from metascraper.plugins.base import Plugin
from metascraper.plugins.open_graph import collect_properties
from metascraper.utils.dom import get_document
from metascraper.utils.text import to_truncated_text
from metascraper.utils.url import to_secure_url


class TwitterPlugin(Plugin):
    """Extract Twitter card metadata; the last tag per key wins."""

    name = "twitter"

    async def extract(self, html: str, options: ScraperOptions) -> MetadataFragment:
        soup = get_document(html)
        return MetadataFragment(twitter=self._extract_twitter(soup, options))

    def _extract_twitter(self, soup: BeautifulSoup, options: ScraperOptions) -> TwitterMetadata:
        twitter = dict(collect_properties(soup, 'meta[name^="twitter:"]', "name", "twitter:"))

        description = twitter.get("description")
        if description and options.max_description_length:
            description = to_truncated_text(description, options.max_description_length)

        image = twitter.get("image") or twitter.get("image:src")
        if image and options.secure_images:
            image = to_secure_url(image)

        images = None
        if image:
            images = [ImageMetadata(url=image, alt=twitter.get("image:alt"))]

        return TwitterMetadata(
            title=twitter.get("title") or "",
            description=description or None,
            image=image,
            card=twitter.get("card"),
            site=twitter.get("site"),
            creator=twitter.get("creator"),
            images=images,
        )
