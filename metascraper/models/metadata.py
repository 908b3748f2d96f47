"""
Metadata models for the scraper.

These models define the record returned by a scrape call and the fragments
plugins contribute to it. Attribute names are snake_case; the serialized
record uses the camelCase aliases (openGraph, jsonLd, canonicalUrl, ...).
"""
import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MetadataModel(BaseModel):
    """Base class for metadata models: camelCase aliases, snake_case names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ImageMetadata(MetadataModel):
    """An image attached to an OpenGraph or Twitter card."""
    url: str
    alt: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    type: Optional[str] = None


class VideoMetadata(MetadataModel):
    """A video attached to an OpenGraph object."""
    url: str
    type: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


class AlternatesMetadata(MetadataModel):
    """Canonical and alternate versions of the page."""
    canonical: Optional[str] = None
    languages: Optional[Dict[str, str]] = None
    media: Optional[Dict[str, str]] = None
    types: Optional[Dict[str, str]] = None


class BaseMetadata(MetadataModel):
    """Generic metadata from <title> and standard <meta>/<link> tags."""
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    url: Optional[str] = None
    favicon: Optional[str] = None
    canonical_url: Optional[str] = None
    keywords: Optional[List[str]] = None
    author: Optional[str] = None
    theme_color: Optional[str] = None
    viewport: Optional[str] = None
    robots: Optional[str] = None
    alternates: Optional[AlternatesMetadata] = None


class OpenGraphMetadata(MetadataModel):
    """Metadata from og:* meta tags."""
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    url: Optional[str] = None
    type: Optional[str] = None  # website, article, profile, book, music, video
    site_name: Optional[str] = None
    locale: Optional[str] = None
    images: Optional[List[ImageMetadata]] = None
    videos: Optional[List[VideoMetadata]] = None


class TwitterMetadata(MetadataModel):
    """Metadata from twitter:* meta tags."""
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    card: Optional[str] = None  # summary, summary_large_image, app, player
    site: Optional[str] = None
    creator: Optional[str] = None
    images: Optional[List[ImageMetadata]] = None


class RawMetadata(MetadataModel):
    """Verbatim capture of the document's title, meta and link tags."""
    title: Optional[str] = None
    meta: Dict[str, str] = Field(default_factory=dict)
    links: List[Dict[str, str]] = Field(default_factory=list)


class MetadataFragment(MetadataModel):
    """
    Partial metadata returned by one plugin.

    A plugin sets only the top-level keys it owns; unset keys stay None and
    are ignored when fragments are merged.
    """
    base: Optional[BaseMetadata] = None
    open_graph: Optional[OpenGraphMetadata] = None
    twitter: Optional[TwitterMetadata] = None
    json_ld: Optional[List[Dict[str, Any]]] = None
    raw: Optional[RawMetadata] = None
    custom: Optional[Dict[str, Any]] = None


class Metadata(MetadataModel):
    """
    The complete metadata record produced by a scrape call.

    base, open_graph and twitter are always present and json_ld is always a
    list; raw only exists when raw extraction was requested.
    """
    base: BaseMetadata = Field(default_factory=BaseMetadata)
    open_graph: OpenGraphMetadata = Field(default_factory=OpenGraphMetadata)
    twitter: TwitterMetadata = Field(default_factory=TwitterMetadata)
    json_ld: List[Dict[str, Any]] = Field(default_factory=list)
    raw: Optional[RawMetadata] = None
    custom: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase record, omitting absent fields."""
        # JSON-LD entries are copied verbatim so their null values survive
        data = self.model_dump(by_alias=True, exclude_none=True, exclude={"json_ld"})
        data["jsonLd"] = [dict(entry) for entry in self.json_ld]
        return data

    def to_json(self, indent: Optional[int] = None) -> str:
        """Serialize the record as JSON."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
