"""
JSON-LD plugin.

Parses every <script type="application/ld+json"> block into the json_ld
list. A malformed block contributes nothing instead of failing the scrape.
"""
import json
from typing import Any, Dict, List

from metascraper.models.metadata import MetadataFragment
from metascraper.models.options import ScraperOptions
from metascraper.plugins.base import Plugin
from metascraper.utils.dom import get_document, select_all
from metascraper.utils.logger import LayerLogger


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are accepted by json.loads but are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


class JsonLdPlugin(Plugin):
    """Extract JSON-LD structured data in document order."""

    name = "json_ld"

    def __init__(self):
        self.logger = LayerLogger("json_ld_plugin")

    async def extract(self, html: str, options: ScraperOptions) -> MetadataFragment:
        soup = get_document(html)
        entries: List[Dict[str, Any]] = []

        for index, script in enumerate(select_all(soup, 'script[type="application/ld+json"]')):
            entries.extend(self._parse_script(script.get_text(), index))

        return MetadataFragment(json_ld=entries)

    def _parse_script(self, content: str, index: int) -> List[Dict[str, Any]]:
        """Parse one script body; return [] when it is empty or malformed."""
        content = content.strip()
        if not content:
            return []

        try:
            data = json.loads(content, parse_constant=_reject_constant)
        except (ValueError, RecursionError) as e:
            self.logger.log_debug("jsonld_parse_skipped", script_index=index, error=str(e))
            return []

        return self._flatten(data)

    def _flatten(self, data: Any) -> List[Dict[str, Any]]:
        """
        Turn one parsed script into JSON-LD entries.

        A top-level array is spread, an object with an @graph array becomes
        its graph members, any other object is a single entry.
        """
        if isinstance(data, list):
            return [item for item in data if isinstance(item, dict)]

        if not isinstance(data, dict):
            return []

        graph = data.get("@graph")
        if isinstance(graph, list):
            return [item for item in graph if isinstance(item, dict)]

        return [data]
