"""Tests for the text, URL, DOM and trace id helpers."""
import pytest

from metascraper.errors import InvalidUrlError
from metascraper.utils.dom import element_attr, get_attr, get_document, get_text, select_all
from metascraper.utils.logger import get_trace_id, inject_trace_id, set_trace_id
from metascraper.utils.text import to_normalized_text, to_truncated_text
from metascraper.utils.url import is_url, to_secure_url, validate_url


class TestNormalizedText:
    def test_collapses_whitespace(self):
        assert to_normalized_text("Hello   World\n  ") == "Hello World"
        assert to_normalized_text("\t\tHi  there") == "Hi there"

    def test_is_idempotent(self):
        once = to_normalized_text("  a \n\n b\tc ")
        assert to_normalized_text(once) == once

    def test_empty_string(self):
        assert to_normalized_text("   ") == ""


class TestTruncatedText:
    def test_short_text_unchanged(self):
        assert to_truncated_text("Hi", 5) == "Hi"
        assert to_truncated_text("Hello", 5) == "Hello"

    def test_cuts_and_appends_ellipsis(self):
        assert to_truncated_text("Hello World", 8) == "Hello Wo..."

    def test_strips_trailing_whitespace_of_cut(self):
        assert to_truncated_text("Hello World", 6) == "Hello..."

    @pytest.mark.parametrize("length,limit", [(10, 3), (200, 100), (101, 100), (50, 0)])
    def test_truncation_bound(self, length, limit):
        result = to_truncated_text("a" * length, limit)
        assert len(result) <= limit + 3
        assert result.endswith("...")


class TestSecureUrl:
    def test_protocol_relative(self):
        assert to_secure_url("//example.com/x.png") == "https://example.com/x.png"

    def test_http(self):
        assert to_secure_url("http://example.com") == "https://example.com"

    def test_https_unchanged(self):
        assert to_secure_url("https://example.com") == "https://example.com"

    def test_none(self):
        assert to_secure_url(None) is None

    def test_only_scheme_is_replaced(self):
        url = "http://example.com/?next=http://other.com"
        assert to_secure_url(url) == "https://example.com/?next=http://other.com"

    def test_relative_path_unchanged(self):
        assert to_secure_url("/favicon.ico") == "/favicon.ico"


class TestUrlValidation:
    def test_is_url(self):
        assert is_url("http://example.com")
        assert is_url("https://example.com")
        assert not is_url("<html></html>")
        assert not is_url("ftp://example.com")

    def test_valid_url(self):
        assert validate_url("https://example.com/a") == "https://example.com/a"

    @pytest.mark.parametrize("url", ["httpfoo", "http://", "httpx://example.com"])
    def test_invalid_url(self, url):
        with pytest.raises(InvalidUrlError):
            validate_url(url)


class TestDom:
    HTML = """
    <html><head>
      <title> Title </title>
      <link rel="shortcut icon" href=" /favicon.ico ">
      <meta name="a" content="first"><meta name="a" content="second">
    </head></html>
    """

    def test_get_text_first_match(self):
        doc = get_document(self.HTML)
        assert get_text(doc, "title") == "Title"

    def test_get_text_missing(self):
        assert get_text(get_document("<p>x</p>"), "title") == ""

    def test_get_attr_first_match(self):
        doc = get_document(self.HTML)
        assert get_attr(doc, 'meta[name="a"]', "content") == "first"

    def test_get_attr_missing(self):
        doc = get_document(self.HTML)
        assert get_attr(doc, 'meta[name="b"]', "content") is None
        assert get_attr(doc, 'meta[name="a"]', "missing") is None

    def test_multi_valued_attribute(self):
        doc = get_document(self.HTML)
        link = select_all(doc, 'link[rel="shortcut icon"]')[0]
        assert element_attr(link, "rel") == "shortcut icon"
        assert element_attr(link, "href") == "/favicon.ico"


class TestTraceIds:
    def test_set_and_get(self):
        assert set_trace_id("abc123") == "abc123"
        assert get_trace_id() == "abc123"

    def test_generated_when_missing(self):
        trace_id = set_trace_id()
        assert len(trace_id) == 8
        assert get_trace_id() == trace_id

    def test_injected_into_events(self):
        set_trace_id("feed0001")
        event = inject_trace_id(None, "info", {"event": "scrape_started"})
        assert event["trace_id"] == "feed0001"

    def test_explicit_trace_id_is_kept(self):
        set_trace_id("feed0001")
        event = inject_trace_id(None, "info", {"event": "scrape_request", "trace_id": "other"})
        assert event["trace_id"] == "other"
