"""Pin Color Assignment — picks the pin color for a new post from the stone's latest post.

Invariants:
    - Strategies are PURE: no IO, never raise, always return a definite value
    - Exactly one strategy is active per process (selected from settings, never per request)
    - RotationStrategy ignores client-supplied colors
    - ClientColorStrategy returns None for anything that is not "#RRGGBB"

Design Decisions:
    - Two named strategies behind one Protocol instead of a merged rule: earlier
      revisions rotated server-side, later ones trusted the client color, and the
      two are not mixed
    - Concurrent posts to the same stone can read the same latest post and get the
      same rotated color. Colors only group consecutive posts visually, so no
      serialization is applied
"""

import re
from dataclasses import dataclass
from typing import Protocol, Sequence

from stoneboard.core.domain_types import ColorPolicy, PinColor, StoneId

HEX_COLOR_PATTERN = re.compile(r"^#[0-9A-Fa-f]{6}$")


@dataclass(frozen=True)
class LatestPost:
    """The part of the stone's most recent post that drives color assignment."""
    nickname: str
    color: str | None


def is_valid_pin_color(value: str | None) -> bool:
    return bool(value) and HEX_COLOR_PATTERN.match(value) is not None


def _palette_index(palette: Sequence[str], color: str) -> int | None:
    wanted = color.upper()
    for index, candidate in enumerate(palette):
        if candidate.upper() == wanted:
            return index
    return None


class ColorAssignmentStrategy(Protocol):
    """Contract for pin color policies."""
    name: ColorPolicy

    def assign(
        self,
        stone_id: StoneId,
        nickname: str,
        requested_color: str | None,
        latest: LatestPost | None,
        palette: Sequence[str],
    ) -> PinColor | None: ...


class RotationStrategy:
    """Server-side rotation through the palette.

    - no prior post: first palette color
    - same nickname as the prior post (which has a color): repeat that color
    - otherwise: the palette color after the prior one, wrapping around;
      first palette color when the prior color is missing or not in the palette
    """
    name = ColorPolicy.ROTATION

    def assign(
        self,
        stone_id: StoneId,
        nickname: str,
        requested_color: str | None,
        latest: LatestPost | None,
        palette: Sequence[str],
    ) -> PinColor | None:
        if latest is None:
            return PinColor(palette[0])
        if latest.nickname == nickname and latest.color:
            return PinColor(latest.color)
        if not latest.color:
            return PinColor(palette[0])

        index = _palette_index(palette, latest.color)
        if index is None:
            return PinColor(palette[0])
        return PinColor(palette[(index + 1) % len(palette)])


class ClientColorStrategy:
    """Trust the color sent by the client if it is well-formed, else store no color."""
    name = ColorPolicy.CLIENT

    def assign(
        self,
        stone_id: StoneId,
        nickname: str,
        requested_color: str | None,
        latest: LatestPost | None,
        palette: Sequence[str],
    ) -> PinColor | None:
        if is_valid_pin_color(requested_color):
            return PinColor(requested_color)
        return None


_STRATEGIES: dict[ColorPolicy, type] = {
    ColorPolicy.ROTATION: RotationStrategy,
    ColorPolicy.CLIENT: ClientColorStrategy,
}


def select_color_strategy(policy: ColorPolicy | str) -> ColorAssignmentStrategy:
    """Build the strategy for a configured policy name."""
    return _STRATEGIES[ColorPolicy(policy)]()
