"""Language Strings — user-facing messages for API responses.

Invariants:
    - All strings are pure data (no IO)
    - Every key exists for every Locale
    - Internal error detail never appears here; it only goes to logs

Design Decisions:
    - Keyed by error code so the global error handler can localize any StoneboardError
    - Japanese is the default locale: the boards are deployed on stones in Japan
"""

from stoneboard.core.domain_types import Locale


_MESSAGES: dict[Locale, dict[str, str]] = {
    Locale.JA: {
        "STONE_UNRESOLVED": "石IDが取得できませんでした",
        "VALIDATION_ERROR": "ニックネームは必須です",
        "REQUEST_INVALID": "リクエストの形式が正しくありません",
        "STONE_NOT_FOUND": "投稿の保存に失敗しました",
        "DATABASE_ERROR": "データベースの処理に失敗しました",
        "INTERNAL_ERROR": "予期しないエラーが発生しました",
        "CLEAR_ALL_DONE": "すべてのデータを削除しました",
        "API_ROOT": "Backend API",
    },
    Locale.EN: {
        "STONE_UNRESOLVED": "Could not determine the stone ID",
        "VALIDATION_ERROR": "Nickname is required",
        "REQUEST_INVALID": "Invalid request data",
        "STONE_NOT_FOUND": "Failed to save the post",
        "DATABASE_ERROR": "A database operation failed",
        "INTERNAL_ERROR": "An unexpected error occurred",
        "CLEAR_ALL_DONE": "All data deleted",
        "API_ROOT": "Backend API",
    },
}


def get_message(key: str, locale: Locale | str = Locale.JA) -> str:
    """Localized message for key; falls back to English, then to the key itself."""
    try:
        loc = Locale(locale)
    except ValueError:
        loc = Locale.EN
    return _MESSAGES[loc].get(key) or _MESSAGES[Locale.EN].get(key, key)
