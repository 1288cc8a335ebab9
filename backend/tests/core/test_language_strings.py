"""Language Strings — localized user-facing messages.

Tests:
    - every key exists for every locale
    - unknown locale falls back to English, unknown key to itself
"""

from stoneboard.core.domain_types import Locale
from stoneboard.core.language_strings import _MESSAGES, get_message


def test_all_locales_have_same_keys():
    keys = set(_MESSAGES[Locale.EN])
    for locale in Locale:
        assert set(_MESSAGES[locale]) == keys


def test_japanese_messages():
    assert get_message("STONE_UNRESOLVED", Locale.JA) == "石IDが取得できませんでした"
    assert get_message("VALIDATION_ERROR", "ja") == "ニックネームは必須です"


def test_english_messages():
    assert get_message("VALIDATION_ERROR", Locale.EN) == "Nickname is required"


def test_unknown_locale_falls_back_to_english():
    assert get_message("DATABASE_ERROR", "fr") == "A database operation failed"


def test_unknown_key_returns_key():
    assert get_message("NOPE", Locale.JA) == "NOPE"
