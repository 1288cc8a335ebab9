"""Board Service — list and create posts for one stone, plus maintenance operations.

Invariants:
    - Reading a stone's feed creates the stone if it is unknown (auto-create-on-read);
      the created row has no location
    - Creating a post: validate nickname -> ensure stone -> read latest post ->
      assign color -> append. An invalid nickname never creates a stone
    - No retries: any DatabaseError from the store propagates to the caller

Design Decisions:
    - The read-then-append in create_post is not serialized: two concurrent posts may
      both see the same latest post and get the same rotated color
    - recent_posts and clear_all are maintenance-only and bypass stone resolution
"""

import logging
from typing import Sequence

from stoneboard.core.domain_types import StoneId
from stoneboard.core.errors import ErrorContext, PostValidationError
from stoneboard.core.pin_color import ColorAssignmentStrategy, LatestPost
from stoneboard.core.repository_protocols import ClearResult, PostLike, PostStore

logger = logging.getLogger(__name__)

DEBUG_FEED_LIMIT = 100


class BoardService:
    """Feed operations for stones."""

    def __init__(
        self,
        store: PostStore,
        strategy: ColorAssignmentStrategy,
        palette: Sequence[str],
    ):
        self.store = store
        self.strategy = strategy
        self.palette = palette

    async def list_posts(self, stone_id: StoneId) -> list[PostLike]:
        """Feed for a stone, newest first. Creates the stone on first sight."""
        await self.store.ensure_stone(stone_id)
        return await self.store.list_posts(stone_id)

    async def create_post(
        self,
        stone_id: StoneId,
        nickname: str,
        comment: str = "",
        lat: float | None = None,
        lng: float | None = None,
        requested_color: str | None = None,
        user_id: str | None = None,
    ) -> PostLike:
        """Append a post to the stone with a color picked by the active strategy."""
        if not nickname or not nickname.strip():
            raise PostValidationError(
                "nickname is required", "nickname",
                ErrorContext(stone_id=stone_id),
            )

        await self.store.ensure_stone(stone_id)

        latest_row = await self.store.latest_post(stone_id)
        latest = (
            LatestPost(nickname=latest_row.nickname, color=latest_row.pin_color)
            if latest_row is not None else None
        )
        color = self.strategy.assign(
            stone_id, nickname, requested_color, latest, self.palette,
        )

        return await self.store.append_post(
            stone_id,
            nickname,
            comment=comment,
            lat=lat,
            lng=lng,
            color=color,
            user_id=user_id,
        )

    async def recent_posts(self, limit: int = DEBUG_FEED_LIMIT) -> list[PostLike]:
        return await self.store.recent_posts(limit)

    async def clear_all(self) -> ClearResult:
        return await self.store.clear_all()
