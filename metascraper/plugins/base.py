"""
Plugin interface for metadata extraction.

A plugin reads the HTML of one page and returns a MetadataFragment that
touches only its own top-level keys. Plugins are stateless: the same
instance may serve any number of concurrent scrape calls.
"""
import inspect
from abc import ABC, abstractmethod
from typing import Any, Callable, Mapping, Union

from metascraper.models.metadata import MetadataFragment
from metascraper.models.options import ScraperOptions


class Plugin(ABC):
    """Base class for all extraction plugins."""

    #: Identifier used in logs; defaults to the class name.
    name: str = ""

    @property
    def plugin_name(self) -> str:
        return self.name or type(self).__name__

    @abstractmethod
    async def extract(self, html: str, options: ScraperOptions) -> MetadataFragment:
        """Extract a metadata fragment from html."""
        pass


PluginFunction = Callable[[str, ScraperOptions], Any]


class FunctionPlugin(Plugin):
    """
    Adapt a plain callable to the Plugin interface.

    The callable receives (html, options) and may be sync or async. It may
    return a MetadataFragment or a mapping of fragment keys (camelCase or
    snake_case), which is validated into a fragment.
    """

    def __init__(self, func: PluginFunction, name: str = ""):
        self.func = func
        self.name = name or getattr(func, "__name__", "function_plugin")

    async def extract(self, html: str, options: ScraperOptions) -> MetadataFragment:
        result = self.func(html, options)
        if inspect.isawaitable(result):
            result = await result
        return to_fragment(result)


def to_fragment(result: Union[MetadataFragment, Mapping[str, Any], None]) -> MetadataFragment:
    """Coerce a plugin result into a MetadataFragment."""
    if result is None:
        return MetadataFragment()
    if isinstance(result, MetadataFragment):
        return result
    if isinstance(result, Mapping):
        return MetadataFragment.model_validate(dict(result))
    raise TypeError(
        f"Plugin returned {type(result).__name__}, expected MetadataFragment or mapping"
    )


def as_plugin(candidate: Union[Plugin, PluginFunction]) -> Plugin:
    """Return candidate as a Plugin, wrapping bare callables."""
    if isinstance(candidate, Plugin):
        return candidate
    if callable(candidate):
        return FunctionPlugin(candidate)
    raise TypeError(f"Not a plugin: {candidate!r}")
