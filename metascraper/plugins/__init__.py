"""Plugins package initialization."""
from metascraper.plugins.base import FunctionPlugin, Plugin, as_plugin, to_fragment
from metascraper.plugins.meta_tags import MetaTagsPlugin
from metascraper.plugins.open_graph import OpenGraphPlugin
from metascraper.plugins.twitter import TwitterPlugin
from metascraper.plugins.json_ld import JsonLdPlugin
from metascraper.plugins.raw_tags import RawTagsPlugin


def default_plugins():
    """Return fresh instances of the built-in plugins in merge order."""
    return [
        MetaTagsPlugin(),
        OpenGraphPlugin(),
        TwitterPlugin(),
        JsonLdPlugin(),
        RawTagsPlugin(),
    ]


__all__ = [
    "FunctionPlugin",
    "Plugin",
    "as_plugin",
    "to_fragment",
    "MetaTagsPlugin",
    "OpenGraphPlugin",
    "TwitterPlugin",
    "JsonLdPlugin",
    "RawTagsPlugin",
    "default_plugins",
]
