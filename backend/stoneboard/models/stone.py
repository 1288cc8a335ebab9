"""Stone ORM — one physical stone, owner of a feed of posts.

Invariants:
    - id is "stone-NNN" (string primary key, assigned by the resolver, never generated)
    - Rows are created lazily with insert-if-absent and never updated
    - Deleted only by the bulk clear, after all posts are gone

Design Decisions:
    - No ORM cascade to posts: clear_all deletes posts explicitly first, and a
      stray delete of a stone with posts must fail on the FK
"""

from datetime import datetime, timezone

from sqlalchemy import String, Numeric, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from stoneboard.db.base import Base


class Stone(Base):
    """Stone aggregate root — owns its posts."""
    __tablename__ = "stones"

    id: Mapped[str] = mapped_column(String(50), primary_key=True)
    location_lat: Mapped[float | None] = mapped_column(
        Numeric(10, 8, asdecimal=False), nullable=True,
    )
    location_lng: Mapped[float | None] = mapped_column(
        Numeric(11, 8, asdecimal=False), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    posts: Mapped[list["Post"]] = relationship(
        "Post", back_populates="stone", lazy="noload",
    )
