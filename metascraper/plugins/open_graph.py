"""
OpenGraph plugin.

Reads og:* meta tags into the open_graph bucket.
"""
from typing import Dict, List, Optional, Tuple

from bs4 import BeautifulSoup

from metascraper.models.metadata import (
    ImageMetadata,
    MetadataFragment,
    OpenGraphMetadata,
    VideoMetadata,
)
from metascraper.models.options import ScraperOptions
from metascraper.plugins.base import Plugin
from metascraper.utils.dom import element_attr, get_document, select_all
from metascraper.utils.text import to_truncated_text
from metascraper.utils.url import to_secure_url

Property = Tuple[str, str]


def collect_properties(soup: BeautifulSoup, selector: str, attr: str, prefix: str) -> List[Property]:
    """
    Return (key, content) pairs for matching meta tags in document order.

    The prefix is stripped from the attribute value to form the key. Tags
    with an empty key or missing/empty content are skipped.
    """
    properties = []
    for tag in select_all(soup, selector):
        name = element_attr(tag, attr)
        content = element_attr(tag, "content")
        if not name or not content:
            continue
        key = name[len(prefix):] if name.startswith(prefix) else name
        if key:
            properties.append((key, content))
    return properties


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse a dimension attribute, ignoring anything non-numeric."""
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


class OpenGraphPlugin(Plugin):
    """
    Extract OpenGraph metadata.

    When a key appears more than once, the last tag in document order wins
    for the scalar fields; images and videos keep every occurrence.
    """

    name = "open_graph"

    async def extract(self, html: str, options: ScraperOptions) -> MetadataFragment:
        soup = get_document(html)
        return MetadataFragment(open_graph=self._extract_open_graph(soup, options))

    def _extract_open_graph(self, soup: BeautifulSoup, options: ScraperOptions) -> OpenGraphMetadata:
        properties = collect_properties(soup, 'meta[property^="og:"]', "property", "og:")
        og: Dict[str, str] = dict(properties)

        description = og.get("description")
        if description and options.max_description_length:
            description = to_truncated_text(description, options.max_description_length)

        image = og.get("image")
        if image and options.secure_images:
            image = to_secure_url(image)

        images, videos = self._extract_media(properties, options.secure_images)

        return OpenGraphMetadata(
            title=og.get("title") or "",
            description=description or None,
            image=image,
            url=og.get("url"),
            type=og.get("type"),
            site_name=og.get("site_name"),
            locale=og.get("locale"),
            images=images or None,
            videos=videos or None,
        )

    def _extract_media(
        self,
        properties: List[Property],
        secure_images: bool,
    ) -> Tuple[List[ImageMetadata], List[VideoMetadata]]:
        """
        Group structured og:image and og:video properties.

        Each og:image (or og:image:url) opens a new entry; the structured
        properties that follow it describe that entry.
        """
        images: List[ImageMetadata] = []
        videos: List[VideoMetadata] = []

        def secure(url: str) -> str:
            return to_secure_url(url) if secure_images else url

        for key, content in properties:
            if key in ("image", "image:url"):
                images.append(ImageMetadata(url=secure(content)))
            elif key.startswith("image:") and images:
                current = images[-1]
                if key == "image:secure_url":
                    current.url = content
                elif key == "image:alt":
                    current.alt = content
                elif key == "image:type":
                    current.type = content
                elif key == "image:width":
                    current.width = parse_int(content)
                elif key == "image:height":
                    current.height = parse_int(content)
            elif key in ("video", "video:url"):
                videos.append(VideoMetadata(url=secure(content)))
            elif key.startswith("video:") and videos:
                current_video = videos[-1]
                if key == "video:secure_url":
                    current_video.url = content
                elif key == "video:type":
                    current_video.type = content
                elif key == "video:width":
                    current_video.width = parse_int(content)
                elif key == "video:height":
                    current_video.height = parse_int(content)

        return images, videos
