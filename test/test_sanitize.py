"""
Tests for input sanitization utilities
"""

from blog.utils.sanitize import sanitize_html, sanitize_plain_text, sanitize_rich_content, sanitize_url


class TestPlainTextSanitization:
    """Plain text fields drop all HTML"""

    def test_strips_script_tags(self):
        clean = sanitize_plain_text("<script>alert('xss')</script>Hello World")
        assert "<script>" not in clean
        assert "Hello World" in clean

    def test_strips_all_html_tags(self):
        clean = sanitize_plain_text("<div><p>Hello <strong>World</strong></p></div>")
        assert clean == "Hello World"

    def test_normalizes_whitespace(self):
        assert sanitize_plain_text("  Hello \n\n  World  ") == "Hello World"

    def test_none(self):
        assert sanitize_plain_text(None) == ""


class TestRichContentSanitization:
    """Post bodies keep formatting but lose scripts and handlers"""

    def test_keeps_formatting(self):
        html = "<p>Hello <strong>World</strong></p>"
        assert sanitize_rich_content(html) == html

    def test_drops_event_handlers(self):
        clean = sanitize_rich_content('<img src="https://example.com/a.png" onerror="alert(1)">')
        assert "onerror" not in clean
        assert "https://example.com/a.png" in clean

    def test_drops_javascript_links(self):
        clean = sanitize_rich_content('<a href="javascript:alert(1)">x</a>')
        assert "javascript:" not in clean

    def test_custom_allow_list(self):
        assert sanitize_html("<p><em>x</em></p>", tags=["em"], attributes={}) == "<em>x</em>"


class TestUrlSanitization:
    def test_allows_http(self):
        assert sanitize_url(" https://example.com/page ") == "https://example.com/page"

    def test_rejects_dangerous_schemes(self):
        assert sanitize_url("javascript:alert(1)") is None
        assert sanitize_url("DATA:text/html;base64,xyz") is None

    def test_empty(self):
        assert sanitize_url("") is None
        assert sanitize_url(None) is None
