"""
DOM access helpers.

Thin wrappers around BeautifulSoup so plugins query documents with CSS
selectors and always get trimmed strings back.
"""
from typing import List, Optional, Union

from bs4 import BeautifulSoup, Tag

Node = Union[BeautifulSoup, Tag]


def get_document(html: str) -> BeautifulSoup:
    """Parse an HTML string into a queryable document."""
    return BeautifulSoup(html, "lxml")


def select_all(node: Node, selector: str) -> List[Tag]:
    """Return every element matching selector, in document order."""
    return node.select(selector)


def get_text(node: Node, selector: str) -> str:
    """Return the trimmed text of the first element matching selector, or ""."""
    element = node.select_one(selector)
    if element is None:
        return ""
    return element.get_text().strip()


def get_attr(node: Node, selector: str, attr: str) -> Optional[str]:
    """Return the trimmed attribute value of the first matching element."""
    element = node.select_one(selector)
    if element is None:
        return None
    return element_attr(element, attr)


def element_attr(element: Tag, attr: str) -> Optional[str]:
    """Return the trimmed attribute value of element, or None if missing."""
    value = element.get(attr)
    if value is None:
        return None
    # Multi-valued attributes (rel, class) come back as lists
    if isinstance(value, list):
        value = " ".join(value)
    return value.strip()
