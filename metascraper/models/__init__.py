"""Models package initialization."""
from metascraper.models.metadata import (
    AlternatesMetadata,
    BaseMetadata,
    ImageMetadata,
    Metadata,
    MetadataFragment,
    OpenGraphMetadata,
    RawMetadata,
    TwitterMetadata,
    VideoMetadata,
)
from metascraper.models.options import DEFAULT_OPTIONS, DEFAULT_USER_AGENT, ScraperOptions

__all__ = [
    "AlternatesMetadata",
    "BaseMetadata",
    "ImageMetadata",
    "Metadata",
    "MetadataFragment",
    "OpenGraphMetadata",
    "RawMetadata",
    "TwitterMetadata",
    "VideoMetadata",
    "DEFAULT_OPTIONS",
    "DEFAULT_USER_AGENT",
    "ScraperOptions",
]
