"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - StoneId is always "stone-" followed by at least 3 digits
    - PinColor is "#" followed by 6 hex digits when present
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and parse from env vars without custom code
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

StoneId = NewType("StoneId", str)
PostId = NewType("PostId", int)


# ─── Value Types ─────────────────────────────────────────────────

PinColor = NewType("PinColor", str)


# ─── Enums ───────────────────────────────────────────────────────

class ColorPolicy(str, Enum):
    """Pin color assignment policies — exactly one is active per process."""
    ROTATION = "rotation"
    CLIENT = "client"


class Locale(str, Enum):
    """Locales for user-facing error messages."""
    JA = "ja"
    EN = "en"


# ─── Constants ───────────────────────────────────────────────────

PALETTE_SIZE: int = 4

DEFAULT_PIN_PALETTE: tuple[str, ...] = (
    "#FF6B6B",
    "#4ECDC4",
    "#FFD93D",
    "#6C5CE7",
)
