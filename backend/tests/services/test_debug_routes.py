"""Debug, Config & Readiness API — cross-stone listing, bulk clear, maps config.

Invariants:
    - /api/debug/posts lists posts of every stone, newest first
    - clear-all reports deleted counts; afterwards any stone reads as empty
    - /api/google-maps-config passes settings through
    - /api/health/ready reflects database reachability
"""

from stoneboard.config import Settings, get_settings
from stoneboard.main import app


async def test_debug_posts_spans_stones(client):
    await client.post("/api/posts", json={"nickname": "alice"})
    await client.post(
        "/api/posts", json={"nickname": "bob"}, headers={"host": "isi12.example.com"},
    )

    res = await client.get("/api/debug/posts")
    assert res.status_code == 200
    feed = res.json()
    assert [(p["nickname"], p["stoneId"]) for p in feed] == [
        ("bob", "stone-012"), ("alice", "stone-007"),
    ]


async def test_debug_posts_empty(client):
    res = await client.get("/api/debug/posts")
    assert res.json() == []


async def test_clear_all_then_feed_is_empty(client):
    await client.post("/api/posts", json={"nickname": "alice", "comment": "1"})
    await client.post("/api/posts", json={"nickname": "bob", "comment": "2"})
    await client.get("/api/posts", headers={"host": "isi3.example.com"})

    res = await client.delete("/api/debug/clear-all")
    assert res.status_code == 200
    assert res.json() == {
        "success": True,
        "message": "すべてのデータを削除しました",
        "deletedPosts": 2,
        "deletedStones": 2,
    }

    res = await client.get("/api/posts")
    assert res.status_code == 200
    assert res.json() == []


async def test_first_post_after_clear_restarts_palette(client):
    await client.post("/api/posts", json={"nickname": "alice"})
    await client.post("/api/posts", json={"nickname": "bob"})
    await client.delete("/api/debug/clear-all")

    res = await client.post("/api/posts", json={"nickname": "carol"})
    palette = Settings().pin_palette
    assert res.json()["post"]["pinColor"] == palette[0]


async def test_google_maps_config_passthrough(client):
    app.dependency_overrides[get_settings] = lambda: Settings(
        google_maps_api_key="key-123", google_maps_map_id="map-abc",
    )
    res = await client.get("/api/google-maps-config")
    assert res.status_code == 200
    assert res.json() == {"apiKey": "key-123", "mapId": "map-abc"}


async def test_readiness_with_database(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_after_close(client, db_manager):
    await db_manager.close()
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"
