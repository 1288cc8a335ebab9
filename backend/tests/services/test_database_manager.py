"""Database Session Manager — explicit open/close lifecycle.

Invariants:
    - open() creates tables when asked and is idempotent
    - close() releases the engine; health_check is False afterwards
    - an unreachable database at open() raises DatabaseError
    - the app lifespan exits the process when the database is unreachable
"""

import pytest
from sqlalchemy import inspect

from stoneboard.config import Settings
from stoneboard.core.errors import DatabaseError
from stoneboard.infrastructure.database import DatabaseSessionManager
import stoneboard.main as main_module
from stoneboard.main import app, lifespan


async def test_open_creates_tables(database_url):
    manager = DatabaseSessionManager(database_url, create_tables=True)
    await manager.open()
    try:
        async with manager.engine.connect() as conn:
            tables = await conn.run_sync(
                lambda sync_conn: inspect(sync_conn).get_table_names(),
            )
        assert {"stones", "posts"} <= set(tables)
        assert await manager.health_check() is True
    finally:
        await manager.close()


async def test_open_is_idempotent(database_url):
    manager = DatabaseSessionManager(database_url)
    await manager.open()
    engine = manager.engine
    await manager.open()
    assert manager.engine is engine
    await manager.close()


async def test_pool_checks_connections_before_use(database_url):
    manager = DatabaseSessionManager(database_url)
    await manager.open()
    try:
        assert manager.engine.pool._pre_ping is True
    finally:
        await manager.close()


async def test_close_releases_engine(database_url):
    manager = DatabaseSessionManager(database_url)
    await manager.open()
    await manager.close()
    assert manager.is_open is False
    assert await manager.health_check() is False
    await manager.close()


async def test_session_before_open_raises(database_url):
    manager = DatabaseSessionManager(database_url)
    with pytest.raises(RuntimeError):
        async with manager.session():
            pass


async def test_open_unreachable_database_raises(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'nope.db'}"
    manager = DatabaseSessionManager(url)
    with pytest.raises(DatabaseError):
        await manager.open()
    assert manager.is_open is False


async def test_lifespan_exits_when_database_unreachable(tmp_path, monkeypatch):
    url = f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'nope.db'}"
    monkeypatch.setattr(
        main_module, "get_settings", lambda: Settings(database_url=url),
    )
    monkeypatch.setattr(main_module, "setup_logging", lambda *args: None)
    with pytest.raises(SystemExit):
        async with lifespan(app):
            pass


async def test_lifespan_opens_and_closes_manager(database_url, monkeypatch):
    monkeypatch.setattr(
        main_module, "get_settings", lambda: Settings(database_url=database_url),
    )
    monkeypatch.setattr(main_module, "setup_logging", lambda *args: None)
    try:
        async with lifespan(app):
            manager = app.state.db_manager
            assert manager.is_open
        assert manager.is_open is False
    finally:
        app.state.db_manager = None
