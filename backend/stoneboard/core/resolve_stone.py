"""Stone Resolution — maps an inbound host string to a stone identifier.

Invariants:
    - resolve_stone_id is PURE: no IO, never raises, returns None when unresolved
    - Host pattern is anchored at the start and case-sensitive ("isi" + digits)
    - Digits are left-padded to 3 characters; longer runs are kept as-is

Design Decisions:
    - Independent of the FastAPI Request object so it is testable without HTTP
    - Same function for read and write paths: callers that serve the page from a
      different host than the API must send the stone id explicitly (override)
"""

import re

from stoneboard.core.domain_types import StoneId

STONE_HOST_PATTERN = re.compile(r"^isi([0-9]+)")
STONE_ID_PREFIX = "stone-"
STONE_NUMBER_WIDTH = 3


def format_stone_id(number: str) -> StoneId:
    """Build a stone id from its digit run, e.g. "2" -> "stone-002"."""
    return StoneId(f"{STONE_ID_PREFIX}{number.rjust(STONE_NUMBER_WIDTH, '0')}")


def resolve_stone_id(
    host: str | None, override: str | None = None,
) -> StoneId | None:
    """Resolve host (e.g. "isi2.onrender.com") to "stone-002", else fall back to override."""
    match = STONE_HOST_PATTERN.match(host or "")
    if match:
        return format_stone_id(match.group(1))
    if override:
        return StoneId(override)
    return None
