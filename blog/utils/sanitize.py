"""
HTML cleaning for user supplied text.

Titles, names and excerpts are stored as plain text. Post and translation
bodies keep a small formatting vocabulary; everything else, including
scripts, styles and event handler attributes, is stripped before storage.
"""

import re
from typing import Optional

import bleach

BODY_TAGS = frozenset({
    "p", "br", "hr", "strong", "em", "u", "s", "sub", "sup",
    "h2", "h3", "h4", "h5", "h6",
    "blockquote", "code", "pre",
    "ul", "ol", "li",
    "a", "img", "figure", "figcaption",
    "table", "thead", "tbody", "tr", "th", "td",
    "span",
})

BODY_ATTRIBUTES = {
    "a": ["href", "title", "rel", "target", "hreflang"],
    "img": ["src", "alt", "title", "width", "height", "loading"],
    "code": ["class"],
    "pre": ["class"],
    "span": ["class", "lang", "dir"],
    "p": ["dir"],
}

LINK_PROTOCOLS = frozenset({"http", "https", "mailto"})

UNSAFE_URL_SCHEMES = ("javascript:", "data:", "vbscript:", "file:")

_SPACES = re.compile(r"\s+")


def sanitize_html(text: Optional[str], tags=BODY_TAGS, attributes=None) -> str:
    """Strip every tag and attribute not explicitly allowed."""
    if text is None:
        return ""
    return bleach.clean(
        text,
        tags=tags,
        attributes=BODY_ATTRIBUTES if attributes is None else attributes,
        protocols=LINK_PROTOCOLS,
        strip=True,
    )


def sanitize_plain_text(text: Optional[str]) -> str:
    """Drop all markup and collapse whitespace."""
    if text is None:
        return ""
    return _SPACES.sub(" ", bleach.clean(text, tags=set(), strip=True)).strip()


def sanitize_rich_content(text: Optional[str]) -> str:
    return sanitize_html(text)


def sanitize_url(url: Optional[str]) -> Optional[str]:
    """Return ``url`` trimmed, or None when it is blank or uses an unsafe scheme."""
    if not url or not url.strip():
        return None
    url = url.strip()
    if url.lower().startswith(UNSAFE_URL_SCHEMES):
        return None
    return url
