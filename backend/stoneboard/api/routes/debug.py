"""Debug & Maintenance — cross-stone listing and bulk clear.

Invariants:
    - No stone resolution: these endpoints span every stone
    - clear-all deletes all posts, then all stones, and reports both counts
"""

import logging

from fastapi import APIRouter, Depends

from stoneboard.api.dependencies import get_board_service
from stoneboard.config import Settings, get_settings
from stoneboard.core.language_strings import get_message
from stoneboard.schemas.post import ClearAllResponse, PostResponse
from stoneboard.services.board_service import BoardService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/debug", tags=["debug"])


@router.get("/posts", response_model=list[PostResponse])
async def list_recent_posts(
    service: BoardService = Depends(get_board_service),
):
    """Latest 100 posts across all stones, newest first."""
    posts = await service.recent_posts()
    return [PostResponse.model_validate(p) for p in posts]


@router.delete("/clear-all", response_model=ClearAllResponse)
async def clear_all(
    service: BoardService = Depends(get_board_service),
    settings: Settings = Depends(get_settings),
):
    """Delete every post and every stone."""
    cleared = await service.clear_all()
    return ClearAllResponse(
        success=True,
        message=get_message("CLEAR_ALL_DONE", settings.locale),
        deleted_posts=cleared.deleted_posts,
        deleted_stones=cleared.deleted_stones,
    )
