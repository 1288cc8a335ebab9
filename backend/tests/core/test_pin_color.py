"""Pin Color Assignment — tests for the rotation and client-supplied strategies.

Tests cover:
    - rotation: first post, repeat for same nickname, advance for other nickname, wrap-around
    - rotation: NULL or unknown prior color restarts the palette
    - rotation: ignores client-supplied colors
    - client: accepts "#RRGGBB" (any case), stores None otherwise
    - select_color_strategy maps policy names to strategies
"""

import pytest

from stoneboard.core.domain_types import ColorPolicy, DEFAULT_PIN_PALETTE
from stoneboard.core.pin_color import (
    ClientColorStrategy,
    LatestPost,
    RotationStrategy,
    is_valid_pin_color,
    select_color_strategy,
)

A, B, C, D = "#AA0000", "#00BB00", "#0000CC", "#DDDD00"
PALETTE = [A, B, C, D]
STONE = "stone-001"


# ─── RotationStrategy ────────────────────────────────────────────

def _rotate(nickname, latest, requested=None):
    return RotationStrategy().assign(STONE, nickname, requested, latest, PALETTE)


def test_rotation_first_post_gets_first_color():
    assert _rotate("x", None) == A


def test_rotation_same_nickname_repeats_color():
    assert _rotate("x", LatestPost(nickname="x", color=B)) == B


def test_rotation_other_nickname_advances():
    assert _rotate("y", LatestPost(nickname="x", color=B)) == C


def test_rotation_wraps_after_last_color():
    assert _rotate("y", LatestPost(nickname="x", color=D)) == A


def test_rotation_same_nickname_without_color_starts_palette():
    assert _rotate("x", LatestPost(nickname="x", color=None)) == A


def test_rotation_other_nickname_without_color_starts_palette():
    assert _rotate("y", LatestPost(nickname="x", color=None)) == A


def test_rotation_unknown_prior_color_starts_palette():
    assert _rotate("y", LatestPost(nickname="x", color="#123456")) == A


def test_rotation_same_nickname_keeps_off_palette_color():
    assert _rotate("x", LatestPost(nickname="x", color="#123456")) == "#123456"


def test_rotation_palette_lookup_ignores_case():
    assert _rotate("y", LatestPost(nickname="x", color=B.lower())) == C


def test_rotation_ignores_requested_color():
    assert _rotate("x", None, requested="#FFFFFF") == A


def test_rotation_nickname_match_is_exact():
    assert _rotate("X", LatestPost(nickname="x", color=B)) == C


def test_rotation_cycles_through_alternating_authors():
    latest = None
    seen = []
    for nickname in ["a", "b", "a", "b", "a"]:
        color = _rotate(nickname, latest)
        seen.append(color)
        latest = LatestPost(nickname=nickname, color=color)
    assert seen == [A, B, C, D, A]


# ─── ClientColorStrategy ─────────────────────────────────────────

@pytest.mark.parametrize("requested", ["#FF6B6B", "#ff6b6b", "#0a0B0c"])
def test_client_accepts_hex_colors(requested):
    result = ClientColorStrategy().assign(STONE, "x", requested, None, PALETTE)
    assert result == requested


@pytest.mark.parametrize("requested", [
    None, "", "red", "FF6B6B", "#FFF", "#FF6B6BAA", "#GG0000", " #FF6B6B",
])
def test_client_invalid_color_becomes_none(requested):
    assert ClientColorStrategy().assign(STONE, "x", requested, None, PALETTE) is None


def test_client_ignores_latest_post():
    latest = LatestPost(nickname="x", color=B)
    assert ClientColorStrategy().assign(STONE, "x", "#123456", latest, PALETTE) == "#123456"


# ─── helpers ─────────────────────────────────────────────────────

def test_is_valid_pin_color():
    assert is_valid_pin_color("#A1B2C3")
    assert not is_valid_pin_color(None)
    assert not is_valid_pin_color("#A1B2C")


def test_select_color_strategy_by_enum_and_name():
    assert isinstance(select_color_strategy(ColorPolicy.ROTATION), RotationStrategy)
    assert isinstance(select_color_strategy("client"), ClientColorStrategy)


def test_select_color_strategy_rejects_unknown_policy():
    with pytest.raises(ValueError):
        select_color_strategy("random")


def test_default_palette_has_four_valid_colors():
    assert len(DEFAULT_PIN_PALETTE) == 4
    assert all(is_valid_pin_color(c) for c in DEFAULT_PIN_PALETTE)
