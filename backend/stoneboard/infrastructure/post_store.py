"""SQL Post Store — PostStore implementation over an AsyncSession.

Invariants:
    - ensure_stone is insert-if-absent (ON CONFLICT DO NOTHING): concurrent calls
      for the same id never fail, never duplicate, never overwrite location fields
    - append_post never creates stones; an unknown stone is a StoneReferenceError
    - Posts are never updated; the only delete is clear_all (posts first, then stones)
    - Feed order is created_at DESC, id DESC everywhere
    - Every write commits immediately; SQLAlchemy errors roll back and surface as
      DatabaseError with no retry

Design Decisions:
    - Dialect-specific insert (postgresql / sqlite) for ON CONFLICT: both support
      on_conflict_do_nothing with the same signature
    - latest_post is a LIMIT 1 query with the same ORDER BY as list_posts
"""

import logging
from typing import NoReturn

from sqlalchemy import select, delete
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from stoneboard.core.domain_types import StoneId
from stoneboard.core.errors import (
    ErrorContext, PostValidationError, StoneReferenceError,
)
from stoneboard.core.repository_protocols import ClearResult
from stoneboard.infrastructure.database import map_sqlalchemy_error
from stoneboard.models.post import Post
from stoneboard.models.stone import Stone

logger = logging.getLogger(__name__)

_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}

_FEED_ORDER = (Post.created_at.desc(), Post.id.desc())


class SqlPostStore:
    """Stones and posts persisted through SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _fail(self, e: SQLAlchemyError, operation: str) -> NoReturn:
        await self.db.rollback()
        logger.error(f"Post store {operation} failed: {e}")
        raise map_sqlalchemy_error(e, operation) from e

    async def ensure_stone(
        self, stone_id: StoneId,
        lat: float | None = None, lng: float | None = None,
    ) -> None:
        """Create the stone if it does not exist yet. No-op otherwise."""
        dialect = self.db.get_bind().dialect.name
        insert = _INSERTS.get(dialect)
        if insert is None:
            raise RuntimeError(f"Unsupported database dialect: {dialect}")
        stmt = (
            insert(Stone)
            .values(id=stone_id, location_lat=lat, location_lng=lng)
            .on_conflict_do_nothing(index_elements=["id"])
        )
        try:
            await self.db.execute(stmt)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._fail(e, "ensure_stone")

    async def append_post(
        self,
        stone_id: StoneId,
        nickname: str,
        comment: str = "",
        lat: float | None = None,
        lng: float | None = None,
        color: str | None = None,
        user_id: str | None = None,
    ) -> Post:
        """Insert one immutable post; the stone must already exist."""
        if not nickname or not nickname.strip():
            raise PostValidationError(
                "nickname is required", "nickname",
                ErrorContext(stone_id=stone_id),
            )
        try:
            exists = await self.db.scalar(
                select(Stone.id).where(Stone.id == stone_id),
            )
            if exists is None:
                raise StoneReferenceError(stone_id)

            post = Post(
                stone_id=stone_id,
                nickname=nickname,
                comment=comment or "",
                post_location_lat=lat,
                post_location_lng=lng,
                user_id=user_id,
                pin_color=color,
            )
            self.db.add(post)
            await self.db.commit()
            await self.db.refresh(post)
        except SQLAlchemyError as e:
            await self._fail(e, "append_post")
        logger.info(
            "Post stored",
            extra={"stone_id": stone_id, "post_id": post.id, "pin_color": color},
        )
        return post

    async def list_posts(self, stone_id: StoneId) -> list[Post]:
        """All posts of a stone, newest first."""
        try:
            result = await self.db.execute(
                select(Post).where(Post.stone_id == stone_id).order_by(*_FEED_ORDER),
            )
        except SQLAlchemyError as e:
            await self._fail(e, "list_posts")
        return list(result.scalars().all())

    async def latest_post(self, stone_id: StoneId) -> Post | None:
        """The row list_posts(stone_id)[0] would return, or None."""
        try:
            result = await self.db.execute(
                select(Post)
                .where(Post.stone_id == stone_id)
                .order_by(*_FEED_ORDER)
                .limit(1),
            )
        except SQLAlchemyError as e:
            await self._fail(e, "latest_post")
        return result.scalar_one_or_none()

    async def recent_posts(self, limit: int = 100) -> list[Post]:
        """Newest posts across all stones."""
        try:
            result = await self.db.execute(
                select(Post).order_by(*_FEED_ORDER).limit(limit),
            )
        except SQLAlchemyError as e:
            await self._fail(e, "recent_posts")
        return list(result.scalars().all())

    async def clear_all(self) -> ClearResult:
        """Delete every post, then every stone, in one transaction."""
        try:
            posts_result = await self.db.execute(delete(Post))
            stones_result = await self.db.execute(delete(Stone))
            await self.db.commit()
        except SQLAlchemyError as e:
            await self._fail(e, "clear_all")
        cleared = ClearResult(
            deleted_posts=posts_result.rowcount,
            deleted_stones=stones_result.rowcount,
        )
        logger.warning(
            f"All data cleared: {cleared.deleted_posts} posts, "
            f"{cleared.deleted_stones} stones",
        )
        return cleared
