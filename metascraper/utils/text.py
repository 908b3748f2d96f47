"""Text helpers shared by the plugins and the orchestrator."""
import re

_WHITESPACE_RE = re.compile(r"\s+")


def to_truncated_text(text: str, max_length: int) -> str:
    """
    Truncate text to max_length characters and append an ellipsis.

    Text that already fits is returned unchanged. Otherwise the text is cut
    to exactly max_length characters, trailing whitespace of the cut is
    removed and "..." is appended, so the result is at most max_length + 3
    characters long.

    >>> to_truncated_text("Hello World", 8)
    'Hello Wo...'
    >>> to_truncated_text("Hi", 5)
    'Hi'
    """
    if len(text) <= max_length:
        return text
    return text[:max_length].rstrip() + "..."


def to_normalized_text(text: str) -> str:
    """Collapse runs of whitespace to a single space and trim both ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()
