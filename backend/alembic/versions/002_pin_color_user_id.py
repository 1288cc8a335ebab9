"""Add pin_color and user_id to posts.

Revision ID: 002_pin_color_user_id
Revises: 001_stones_posts
Create Date: 2026-10-04

Existing posts keep pin_color NULL; the rotation strategy treats a NULL
latest color as "start from the first palette color".
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002_pin_color_user_id"
down_revision: Union[str, None] = "001_stones_posts"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column("posts", sa.Column("user_id", sa.String(100), nullable=True))
    op.add_column("posts", sa.Column("pin_color", sa.String(7), nullable=True))


def downgrade() -> None:
    op.drop_column("posts", "pin_color")
    op.drop_column("posts", "user_id")
