"""Root conftest — shared test configuration."""

import os

# Keep tests off any real database and on deterministic settings
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOCALE", "ja")
os.environ.setdefault("PIN_COLOR_POLICY", "rotation")
