"""Utils package initialization."""
from metascraper.utils.logger import get_logger, LayerLogger, set_trace_id, get_trace_id
from metascraper.utils.text import to_normalized_text, to_truncated_text
from metascraper.utils.url import is_url, validate_url, to_secure_url
from metascraper.utils.dom import get_document, select_all, get_text, get_attr, element_attr

__all__ = [
    "get_logger",
    "LayerLogger",
    "set_trace_id",
    "get_trace_id",
    "to_normalized_text",
    "to_truncated_text",
    "is_url",
    "validate_url",
    "to_secure_url",
    "get_document",
    "select_all",
    "get_text",
    "get_attr",
    "element_attr",
]
