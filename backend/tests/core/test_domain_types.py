"""Domain Types — verifies identity types and enum values.

Tests:
    - NewType wrappers exist and are callable
    - Enums parse from the strings used in environment variables
"""

from stoneboard.core.domain_types import (
    StoneId, PostId, PinColor, ColorPolicy, Locale,
)


def test_identity_types_wrap_primitives():
    assert StoneId("stone-001") == "stone-001"
    assert PostId(3) == 3
    assert PinColor("#FFFFFF") == "#FFFFFF"


def test_color_policy_has_two_strategies():
    assert set(ColorPolicy) == {ColorPolicy.ROTATION, ColorPolicy.CLIENT}
    assert ColorPolicy("rotation") is ColorPolicy.ROTATION


def test_locale_values():
    assert Locale("ja") is Locale.JA
    assert Locale.EN.value == "en"
