"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - pin_palette always holds exactly 4 "#RRGGBB" colors

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from stoneboard.core.domain_types import (
    ColorPolicy, Locale, DEFAULT_PIN_PALETTE, PALETTE_SIZE,
)
from stoneboard.core.pin_color import is_valid_pin_color


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://stoneboard:stoneboard@db:5432/stoneboard"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Render/Heroku provide postgres(ql):// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str):
            for prefix in ("postgresql://", "postgres://"):
                if v.startswith(prefix):
                    return v.replace(prefix, "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 10
    database_max_overflow: int = 5
    database_create_tables: bool = True

    # Pin colors
    pin_color_policy: ColorPolicy = ColorPolicy.ROTATION
    pin_palette: list[str] = list(DEFAULT_PIN_PALETTE)

    @field_validator("pin_palette")
    @classmethod
    def check_palette(cls, v: list[str]) -> list[str]:
        if len(v) != PALETTE_SIZE:
            raise ValueError(f"pin_palette needs exactly {PALETTE_SIZE} colors")
        bad = [c for c in v if not is_valid_pin_color(c)]
        if bad:
            raise ValueError(f"pin_palette has invalid colors: {bad}")
        return v

    # API
    cors_origins: list[str] = ["*"]
    locale: Locale = Locale.JA

    # Google Maps (passed through to the frontend)
    google_maps_api_key: str = ""
    google_maps_map_id: str = ""

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
