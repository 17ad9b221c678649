"""Localized user-facing strings."""
from typing import Optional

from messenger_translator.locale.strings import DEFAULT_LOCALE, STRINGS


def normalize_locale(locale: Optional[str]) -> str:
    """
    Reduce a locale to a supported string table.

    "en_US", "fr-CA" and "FR" map to their language; unsupported or empty
    locales fall back to DEFAULT_LOCALE.
    """
    if not locale:
        return DEFAULT_LOCALE

    candidate = locale.replace("-", "_").lower()
    if candidate in STRINGS:
        return candidate

    language = candidate.split("_", 1)[0]
    if language == "tl":
        language = "fil"
    return language if language in STRINGS else DEFAULT_LOCALE


def get_string(locale: Optional[str], key: str, **kwargs) -> str:
    """
    Look up a localized string, falling back to the default locale.

    Raises:
        KeyError: If the key does not exist in the default locale either
    """
    table = STRINGS[normalize_locale(locale)]
    template = table.get(key) or STRINGS[DEFAULT_LOCALE][key]
    return template.format(**kwargs) if kwargs else template


__all__ = ["DEFAULT_LOCALE", "STRINGS", "get_string", "normalize_locale"]
