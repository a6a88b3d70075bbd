"""Tests for the Rect value type."""

import dataclasses

import pytest

from squarified_treemap.core.rect import Rect


def test_default_is_unit_square():
    """Rect() is the unit square at the origin."""
    assert Rect() == Rect(0.0, 0.0, 1.0, 1.0)


def test_aspect_ratio():
    """Aspect ratio is the larger of w/h and h/w."""
    assert Rect().aspect_ratio() == 1.0
    assert Rect(1.0, 1.0, 1.0, 5.0).aspect_ratio() == 5.0
    assert Rect(0.0, 0.0, 8.0, 2.0).aspect_ratio() == 4.0


def test_aspect_ratio_degenerate():
    """A zero dimension yields 0.0 instead of dividing by zero."""
    assert Rect(0.0, 0.0, 0.0, 3.0).aspect_ratio() == 0.0
    assert Rect(0.0, 0.0, 3.0, 0.0).aspect_ratio() == 0.0
    assert Rect(0.0, 0.0, 0.0, 0.0).aspect_ratio() == 0.0


def test_area_and_degenerate_flag():
    assert Rect(1.0, 2.0, 3.0, 4.0).area == 12.0
    assert not Rect(1.0, 2.0, 3.0, 4.0).is_degenerate
    assert Rect(1.0, 2.0, 0.0, 4.0).is_degenerate


def test_rect_is_immutable():
    """Rect fields cannot be reassigned."""
    r = Rect()
    with pytest.raises(dataclasses.FrozenInstanceError):
        r.x = 5.0  # type: ignore[misc]


def test_from_rect_copies():
    original = Rect(1.0, 2.0, 3.0, 4.0)
    copy = Rect.from_rect(original)
    assert copy == original
    assert copy is not original


def test_dict_conversion():
    """to_dict/from_dict preserve all fields."""
    r = Rect(0.5, 1.5, 2.5, 3.5)
    assert r.to_dict() == {"x": 0.5, "y": 1.5, "w": 2.5, "h": 3.5}
    assert Rect.from_dict(r.to_dict()) == r


def test_from_dict_defaults():
    """Missing keys fall back to the unit square."""
    assert Rect.from_dict({}) == Rect()
