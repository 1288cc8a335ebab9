"""Route Dependencies — wires the request-scoped store and service.

Invariants:
    - One AsyncSession per request (from get_db), shared by store and service
    - Color strategy comes from settings, never from the request

Design Decisions:
    - Plain Depends chain so tests override get_db / get_settings only
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from stoneboard.config import Settings, get_settings
from stoneboard.core.pin_color import ColorAssignmentStrategy, select_color_strategy
from stoneboard.infrastructure.database import get_db
from stoneboard.infrastructure.post_store import SqlPostStore
from stoneboard.services.board_service import BoardService


def get_post_store(db: AsyncSession = Depends(get_db)) -> SqlPostStore:
    return SqlPostStore(db)


def get_color_strategy(
    settings: Settings = Depends(get_settings),
) -> ColorAssignmentStrategy:
    return select_color_strategy(settings.pin_color_policy)


def get_board_service(
    store: SqlPostStore = Depends(get_post_store),
    strategy: ColorAssignmentStrategy = Depends(get_color_strategy),
    settings: Settings = Depends(get_settings),
) -> BoardService:
    return BoardService(store, strategy, settings.pin_palette)
