"""ORM Models — SQLAlchemy declarative models for stones and posts.

Invariants:
    - All models inherit from Base (db/base.py)
    - Stone is the aggregate root; every post belongs to exactly one stone

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from stoneboard.models.stone import Stone  # noqa: F401
from stoneboard.models.post import Post  # noqa: F401
