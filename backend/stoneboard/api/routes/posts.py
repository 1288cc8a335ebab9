"""Posts — the per-stone feed: list and create.

Invariants:
    - Stone id comes from the Host header ("isi7.example.com" -> "stone-007");
      the explicit stoneId (query on GET, body on POST) is only a fallback
    - Unresolvable stone → StoneResolutionError (400), before any DB access
    - GET creates the stone when it is unknown (see BoardService.list_posts)
    - Responses are camelCase, newest post first
"""

import logging

from fastapi import APIRouter, Depends, Query, Request

from stoneboard.api.dependencies import get_board_service
from stoneboard.core.domain_types import StoneId
from stoneboard.core.errors import StoneResolutionError
from stoneboard.core.resolve_stone import resolve_stone_id
from stoneboard.schemas.post import CreatePostResponse, PostCreate, PostResponse
from stoneboard.services.board_service import BoardService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/posts", tags=["posts"])


def _resolve_or_400(request: Request, override: str | None) -> StoneId:
    host = request.headers.get("host")
    stone_id = resolve_stone_id(host, override)
    if stone_id is None:
        raise StoneResolutionError(host)
    return stone_id


@router.get("", response_model=list[PostResponse])
async def list_posts(
    request: Request,
    stone_id: str | None = Query(None, alias="stoneId", max_length=50),
    service: BoardService = Depends(get_board_service),
):
    """Posts of the stone this host belongs to."""
    resolved = _resolve_or_400(request, stone_id)
    posts = await service.list_posts(resolved)
    return [PostResponse.model_validate(p) for p in posts]


@router.post("", response_model=CreatePostResponse)
async def create_post(
    request: Request,
    body: PostCreate,
    service: BoardService = Depends(get_board_service),
):
    """Add a post to the stone this host belongs to."""
    resolved = _resolve_or_400(request, body.stone_id)
    location = body.post_location
    post = await service.create_post(
        resolved,
        body.nickname,
        comment=body.comment,
        lat=location.lat if location else None,
        lng=location.lng if location else None,
        requested_color=body.pin_color,
        user_id=body.user_id,
    )
    return CreatePostResponse(success=True, post=PostResponse.model_validate(post))
