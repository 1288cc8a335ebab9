"""Service test fixtures — SQLite database, post store and FastAPI test client.

Invariants:
    - Every test gets a fresh SQLite file database under tmp_path
    - The client goes through the real get_db → app.state.db_manager path
    - Dependency overrides and app.state are reset after each test

Design Decisions:
    - File database instead of :memory: so concurrent sessions get their own
      connections (needed for the ensure_stone race test)
    - Default client host is isi7.example.com, i.e. stone-007
"""

import pytest
from httpx import ASGITransport, AsyncClient

from stoneboard.infrastructure.database import DatabaseSessionManager
from stoneboard.infrastructure.post_store import SqlPostStore
from stoneboard.main import app


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'stoneboard.db'}"


@pytest.fixture
async def db_manager(database_url):
    manager = DatabaseSessionManager(database_url, create_tables=True)
    await manager.open()
    yield manager
    await manager.close()


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
def store(test_db):
    return SqlPostStore(test_db)


@pytest.fixture
async def client(db_manager):
    """FastAPI test client bound to the per-test database."""
    app.state.db_manager = db_manager
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://isi7.example.com",
    ) as c:
        yield c
    app.dependency_overrides.clear()
    app.state.db_manager = None
