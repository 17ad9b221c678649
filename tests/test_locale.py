"""Localized string tests."""
import pytest

from messenger_translator.locale import DEFAULT_LOCALE, STRINGS, get_string, normalize_locale


def test_every_locale_has_every_key():
    keys = set(STRINGS[DEFAULT_LOCALE])
    for locale, table in STRINGS.items():
        assert set(table) == keys, locale


@pytest.mark.parametrize("locale, expected", [
    ("en_US", "en"),
    ("fr-CA", "fr"),
    ("DE", "de"),
    ("es_LA", "es"),
    ("tl_PH", "fil"),
    ("fil", "fil"),
    ("ja_JP", "en"),
    ("", "en"),
    (None, "en"),
])
def test_normalize_locale(locale, expected):
    assert normalize_locale(locale) == expected


def test_placeholders_are_filled():
    assert "French" in get_string("fr", "language_changed", language="French")


def test_unknown_locale_falls_back():
    assert get_string("xx_XX", "help") == STRINGS["en"]["help"]
