"""Post ORM — one immutable message on a stone's board.

Invariants:
    - Always belongs to an existing Stone (stone_id FK)
    - nickname is non-nullable; comment defaults to ""
    - pin_color is "#RRGGBB" or NULL
    - created_at is assigned at insert time and is the ordering key (ties: id DESC)

Design Decisions:
    - BigInteger id with an Integer variant on SQLite: SQLite only autoincrements
      INTEGER PRIMARY KEY
    - Index on stone_id: every feed read filters by stone
"""

from datetime import datetime, timezone

from sqlalchemy import (
    BigInteger, Integer, String, Text, Numeric, DateTime, ForeignKey, Index,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stoneboard.db.base import Base


class Post(Base):
    """Post entity — a nickname, a comment and a pin color on one stone."""
    __tablename__ = "posts"
    __table_args__ = (
        Index("idx_posts_stone_id", "stone_id"),
    )

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    stone_id: Mapped[str] = mapped_column(
        String(50), ForeignKey("stones.id"), nullable=False,
    )
    nickname: Mapped[str] = mapped_column(String(100), nullable=False)
    comment: Mapped[str] = mapped_column(Text, nullable=False, default="")
    post_location_lat: Mapped[float | None] = mapped_column(
        Numeric(10, 8, asdecimal=False), nullable=True,
    )
    post_location_lng: Mapped[float | None] = mapped_column(
        Numeric(11, 8, asdecimal=False), nullable=True,
    )
    user_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    pin_color: Mapped[str | None] = mapped_column(String(7), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    stone: Mapped["Stone"] = relationship(
        "Stone", back_populates="posts", lazy="noload",
    )
