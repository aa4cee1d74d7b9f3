"""
Locale tags for post translations.

Translations are keyed by a BCP 47 style tag: a 2-3 letter language,
optionally followed by a 4 letter script and/or a region ("en", "pt-BR",
"zh-Hant", "es-419"). Tags are stored exactly as submitted.
"""

import re

# Base languages written right-to-left
RTL_LOCALES = frozenset({"ar", "fa", "he", "ku", "ur", "yi"})

_LOCALE_PATTERN = re.compile(
    r"""
    [A-Za-z]{2,3}                  # language
    (-[A-Za-z]{4})?                # script
    (-(?:[A-Za-z]{2}|[0-9]{3}))?   # region
    """,
    re.VERBOSE,
)


def is_valid_locale(locale: str) -> bool:
    return bool(locale) and _LOCALE_PATTERN.fullmatch(locale) is not None


def is_rtl_locale(locale: str) -> bool:
    """True for "ar", "ar-SA", "he-IL" and other right-to-left languages."""
    return locale.partition("-")[0].lower() in RTL_LOCALES
