"""Initial schema — stones, posts, and the posts.stone_id index.

Revision ID: 001_stones_posts
Revises: None
Create Date: 2026-09-20

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_stones_posts"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "stones",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("location_lat", sa.Numeric(10, 8), nullable=True),
        sa.Column("location_lng", sa.Numeric(11, 8), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "posts",
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=True),
        sa.Column("stone_id", sa.String(50), sa.ForeignKey("stones.id"), nullable=False),
        sa.Column("nickname", sa.String(100), nullable=False),
        sa.Column("comment", sa.Text, nullable=False, server_default=""),
        sa.Column("post_location_lat", sa.Numeric(10, 8), nullable=True),
        sa.Column("post_location_lng", sa.Numeric(11, 8), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_index("idx_posts_stone_id", "posts", ["stone_id"])


def downgrade() -> None:
    op.drop_index("idx_posts_stone_id", table_name="posts")
    op.drop_table("posts")
    op.drop_table("stones")
