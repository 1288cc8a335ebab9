"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - PostLike mirrors the ORM row so services and tests can pass any object with
      the same attributes
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from stoneboard.core.domain_types import StoneId


class PostLike(Protocol):
    """Structural contract for stored posts (immutable once written)."""
    id: int
    stone_id: str
    nickname: str
    comment: str
    post_location_lat: float | None
    post_location_lng: float | None
    user_id: str | None
    pin_color: str | None
    created_at: datetime


@dataclass(frozen=True)
class ClearResult:
    """Row counts removed by clear_all."""
    deleted_posts: int
    deleted_stones: int


class PostStore(Protocol):
    """Contract for stone and post persistence — implemented by shell.

    Ordering everywhere is created_at DESC, id DESC.
    """
    async def ensure_stone(
        self, stone_id: StoneId,
        lat: float | None = None, lng: float | None = None,
    ) -> None: ...

    async def append_post(
        self,
        stone_id: StoneId,
        nickname: str,
        comment: str = "",
        lat: float | None = None,
        lng: float | None = None,
        color: str | None = None,
        user_id: str | None = None,
    ) -> PostLike: ...

    async def list_posts(self, stone_id: StoneId) -> list[PostLike]: ...

    async def latest_post(self, stone_id: StoneId) -> PostLike | None: ...

    async def recent_posts(self, limit: int = 100) -> list[PostLike]: ...

    async def clear_all(self) -> ClearResult: ...
