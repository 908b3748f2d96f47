"""
Scraper orchestrator.

Resolves the input to HTML, runs every plugin concurrently, merges their
fragments in registration order and post-processes the base bucket.
"""
import asyncio
from typing import Any, List, Mapping, Optional, Sequence, Union

from metascraper.adapters.html_fetcher import HTMLFetcher
from metascraper.errors import ScraperError
from metascraper.models.metadata import Metadata, MetadataFragment, RawMetadata
from metascraper.models.options import DEFAULT_OPTIONS, ScraperOptions
from metascraper.plugins import default_plugins
from metascraper.plugins.base import Plugin, PluginFunction, as_plugin
from metascraper.utils.logger import LayerLogger
from metascraper.utils.text import to_normalized_text, to_truncated_text
from metascraper.utils.url import is_url, validate_url

# Top-level keys a fragment may set, in the order they are merged
MERGE_KEYS = ("base", "open_graph", "twitter", "json_ld", "raw", "custom")

OptionsInput = Optional[Union[ScraperOptions, Mapping[str, Any]]]


def create_initial_metadata(options: ScraperOptions) -> Metadata:
    """
    Empty record the fragments are merged into.

    With extract_raw the raw bucket is a RawMetadata, so even when no plugin
    fills it the record dumps it as {"meta": {}, "links": []} rather than {}.
    """
    metadata = Metadata()
    if options.extract_raw:
        metadata.raw = RawMetadata()
    return metadata


def merge_fragment(metadata: Metadata, fragment: MetadataFragment) -> Metadata:
    """
    Fold one plugin fragment into the accumulated record.

    Every key the fragment sets replaces the accumulator's value for that
    key as a whole; nested values are never merged.
    """
    update = {}
    for key in MERGE_KEYS:
        value = getattr(fragment, key)
        if value is not None:
            update[key] = value
    return metadata.model_copy(update=update)


def process_metadata(metadata: Metadata, options: ScraperOptions) -> Metadata:
    """Normalize title and description and secure the image of the base bucket."""
    base = metadata.base.model_copy()

    if base.title:
        base.title = to_normalized_text(base.title)

    if base.description and options.max_description_length:
        base.description = to_truncated_text(
            to_normalized_text(base.description),
            options.max_description_length,
        )

    if options.secure_images and base.image and base.image.startswith("http:"):
        base.image = base.image.replace("http:", "https:", 1)

    return metadata.model_copy(update={"base": base})


class Scraper:
    """
    Metadata scraper built from an ordered list of plugins.

    Plugins registered later win when two plugins set the same top-level
    key. A scraper holds no per-call state and can be shared.
    """

    def __init__(
        self,
        plugins: Sequence[Union[Plugin, PluginFunction]] = (),
        fetcher: Optional[HTMLFetcher] = None,
    ):
        self.plugins: List[Plugin] = [as_plugin(plugin) for plugin in plugins]
        self.fetcher = fetcher or HTMLFetcher()
        self.logger = LayerLogger("scraper")

    async def __call__(self, input: str, options: OptionsInput = None) -> Metadata:
        return await self.scrape(input, options)

    async def scrape(self, input: str, options: OptionsInput = None) -> Metadata:
        """
        Extract metadata from literal HTML or an http(s) URL.

        Args:
            input: HTML text, or a URL starting with http:// or https://
            options: Overrides for the default ScraperOptions

        Returns:
            The merged, post-processed Metadata record

        Raises:
            ScraperError: On any failure; the original exception is the cause
        """
        self.logger.log_action("scrape", "started", plugins=len(self.plugins))

        try:
            merged_options = DEFAULT_OPTIONS.merge(options)

            if merged_options.validate_urls and input.startswith("http"):
                validate_url(input)

            html = await self._get_html_content(input, merged_options)
            metadata = await self._execute_plugins(html, merged_options)
            metadata = process_metadata(metadata, merged_options)
        except ScraperError as e:
            self.logger.log_error(e.message, error_type=type(e).__name__)
            raise
        except Exception as e:
            self.logger.log_error(str(e), error_type=type(e).__name__)
            raise ScraperError("Failed to scrape metadata", e) from e

        self.logger.log_action(
            "scrape",
            "completed",
            json_ld_entries=len(metadata.json_ld),
            raw=metadata.raw is not None,
        )
        return metadata

    async def _get_html_content(self, input: str, options: ScraperOptions) -> str:
        """Return input itself when it is HTML, otherwise fetch it."""
        if not is_url(input):
            self.logger.log_decision(
                decision="use_literal_html",
                reason="Input is not an http(s) URL",
                content_length=len(input),
            )
            return input

        self.logger.log_decision(
            decision="fetch_url",
            reason="Input is an http(s) URL",
            url=input,
        )
        return await self.fetcher.fetch(input, options)

    async def _execute_plugins(self, html: str, options: ScraperOptions) -> Metadata:
        """Run all plugins concurrently and merge their fragments in order."""
        fragments = await asyncio.gather(
            *(plugin.extract(html, options) for plugin in self.plugins)
        )

        metadata = create_initial_metadata(options)
        for plugin, fragment in zip(self.plugins, fragments):
            self.logger.log_debug(
                "plugin_fragment",
                plugin=plugin.plugin_name,
                keys=[key for key in MERGE_KEYS if getattr(fragment, key) is not None],
            )
            metadata = merge_fragment(metadata, fragment)
        return metadata


def create_scraper(
    plugins: Optional[Sequence[Union[Plugin, PluginFunction]]] = None,
    fetcher: Optional[HTMLFetcher] = None,
) -> Scraper:
    """
    Create a scraper that runs the given plugins.

    Example:
        scraper = create_scraper([JsonLdPlugin(), OpenGraphPlugin()])
        metadata = await scraper.scrape("https://example.com", {"timeout": 5000})
    """
    return Scraper(plugins if plugins is not None else [], fetcher=fetcher)


async def scrape(
    input: str,
    options: OptionsInput = None,
    plugins: Optional[Sequence[Union[Plugin, PluginFunction]]] = None,
) -> Metadata:
    """Scrape input with the built-in plugins (or the given ones)."""
    scraper = create_scraper(plugins if plugins is not None else default_plugins())
    return await scraper.scrape(input, options)
