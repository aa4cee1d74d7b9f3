import re

from unidecode import unidecode

_WHITESPACE_RE = re.compile(r"\s+")


def slugify(text):
    """Build a URL slug from free text, transliterating non-ASCII characters."""
    if not text:
        raise ValueError("slugify() requires a non-empty string")
    text = unidecode(text).lower()
    text = re.sub(r'[^a-z0-9]+', '-', text).strip('-')
    return text or "n-a"


def tag_slug(name: str) -> str:
    """Slug used as the identity of a tag.

    Only lower-cases, trims and joins whitespace runs with a single hyphen;
    other characters are kept as typed. Names that reduce to the same slug
    refer to the same tag.
    """
    return _WHITESPACE_RE.sub("-", name.strip().lower())
