"""Settings — environment parsing and validation."""

import pytest
from pydantic import ValidationError

from stoneboard.config import Settings
from stoneboard.core.domain_types import ColorPolicy, DEFAULT_PIN_PALETTE, Locale


def test_postgres_urls_rewritten_for_asyncpg():
    for url in ("postgresql://u:p@h/db", "postgres://u:p@h/db"):
        assert Settings(database_url=url).database_url == "postgresql+asyncpg://u:p@h/db"


def test_sqlite_url_untouched():
    url = "sqlite+aiosqlite:///local.db"
    assert Settings(database_url=url).database_url == url


def test_defaults():
    settings = Settings(_env_file=None, pin_color_policy="rotation", locale="ja")
    assert settings.pin_color_policy is ColorPolicy.ROTATION
    assert settings.pin_palette == list(DEFAULT_PIN_PALETTE)
    assert settings.locale is Locale.JA


def test_policy_from_env(monkeypatch):
    monkeypatch.setenv("PIN_COLOR_POLICY", "client")
    assert Settings().pin_color_policy is ColorPolicy.CLIENT


def test_palette_from_env(monkeypatch):
    monkeypatch.setenv("PIN_PALETTE", '["#000000", "#111111", "#222222", "#333333"]')
    assert Settings().pin_palette[3] == "#333333"


@pytest.mark.parametrize("palette", [
    ["#000000", "#111111", "#222222"],
    ["#000000", "#111111", "#222222", "blue"],
])
def test_palette_validation(palette):
    with pytest.raises(ValidationError):
        Settings(pin_palette=palette)


def test_unknown_policy_rejected():
    with pytest.raises(ValidationError):
        Settings(pin_color_policy="random")
