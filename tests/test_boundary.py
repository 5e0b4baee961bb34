"""Tests for Boundary ordering across sides and shapes."""

import pytest

from intervalmap import Boundary, Side


def test_inclusive_lower_sorts_before_exclusive_lower():
    assert Boundary.lower(5, inclusive=True) < Boundary.lower(5, inclusive=False)


def test_exclusive_upper_sorts_before_inclusive_upper():
    assert Boundary.upper(5, inclusive=False) < Boundary.upper(5, inclusive=True)


def test_cuts_at_same_position_are_equal_across_sides():
    """Upper of (a, 5) and lower of [5, c) are the same cut."""
    assert Boundary.upper(5, inclusive=False) == Boundary.lower(5, inclusive=True)
    assert Boundary.upper(5, inclusive=True) == Boundary.lower(5, inclusive=False)
    assert hash(Boundary.upper(5, inclusive=True)) == hash(
        Boundary.lower(5, inclusive=False)
    )


def test_value_dominates_inclusivity():
    assert Boundary.lower(4, inclusive=False) < Boundary.lower(5, inclusive=True)
    assert Boundary.upper(6, inclusive=False) > Boundary.upper(5, inclusive=True)


def test_sentinels_bracket_everything():
    below, above = Boundary.below_all(), Boundary.above_all()

    assert below < Boundary.lower(-(10**9))
    assert above > Boundary.upper(10**9)
    assert below < above
    assert below == Boundary.below_all()
    assert below.compare(Boundary.below_all()) == 0


class TestComparePoint:
    """compare_point() places a point on either side of a cut."""

    def test_inclusive_lower(self):
        boundary = Boundary.lower(5, inclusive=True)
        assert boundary.compare_point(5) == -1
        assert boundary.compare_point(4) == 1
        assert boundary.admits(5)
        assert not boundary.admits(4)

    def test_exclusive_lower(self):
        boundary = Boundary.lower(5, inclusive=False)
        assert boundary.compare_point(5) == 1
        assert not boundary.admits(5)
        assert boundary.admits(6)

    def test_inclusive_upper(self):
        boundary = Boundary.upper(5, inclusive=True)
        assert boundary.admits(5)
        assert not boundary.admits(6)

    def test_exclusive_upper(self):
        boundary = Boundary.upper(5, inclusive=False)
        assert not boundary.admits(5)
        assert boundary.admits(4.999)

    def test_sentinels_admit_everything(self):
        assert Boundary.below_all().admits(-(10**12))
        assert Boundary.above_all().admits(10**12)


def test_flipped_keeps_position():
    boundary = Boundary.lower(3, inclusive=True)
    flipped = boundary.flipped()

    assert flipped.side is Side.UPPER
    assert flipped.inclusive is False
    assert flipped == boundary


def test_flipping_sentinel_raises():
    with pytest.raises(ValueError, match="Cannot flip an unbounded lower boundary"):
        Boundary.below_all().flipped()


def test_str():
    assert str(Boundary.lower(1, inclusive=False)) == "(1"
    assert str(Boundary.upper(2, inclusive=True)) == "2]"
    assert str(Boundary.above_all()) == "inf"
