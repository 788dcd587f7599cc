"""Tests for overlap, union, intersection and subtraction.

Each operation is checked against hand-worked cases, then against membership
over a grid of sample values so that every edge combination is exercised.
"""

from itertools import product

import pytest

from intervalgebra import (
    EmptyInterval,
    InconsistentSubtraction,
    Interval,
    SeparatedIntervals,
    parse,
)

SAMPLES = [
    Interval(0, 10, True, True),
    Interval(0, 10, True, False),
    Interval(0, 10, False, True),
    Interval(0, 10),
    Interval(5, 15),
    Interval(10, 20),
    Interval(10, 20, True, True),
    Interval(12, 18),
    Interval(-5, 0, True, False),
    Interval(3, 3),
    Interval(10, 10),
    Interval(None, 5),
    Interval(None, 0, exclude_end=True),
    Interval(5, None),
    Interval(10, None, exclude_start=True),
    Interval(None, None),
]

# Half steps so that values strictly between integer edges are probed too
VALUES = [step / 2 for step in range(-30, 62)]

PAIRS = list(product(SAMPLES, repeat=2))


def _members(interval: Interval[int]) -> set[float]:
    return {v for v in VALUES if v in interval}


class TestOverlap:
    def test_touching_excluded_edges(self) -> None:
        assert not parse("(0,10]").has_overlap(parse("(10,20)"))
        assert not parse("[0,10)").has_overlap(parse("[10,20]"))
        assert not parse("[0,10]").has_overlap(parse("(10,20]"))

    def test_touching_included_edges(self) -> None:
        assert parse("[0,10]").has_overlap(parse("[10,20]"))
        assert parse("(-∞,5]").has_overlap(parse("[5,+∞)"))

    def test_shared_interior(self) -> None:
        assert parse("[10,20]").has_overlap(parse("(10,20)"))
        assert parse("(0,10)").has_overlap(parse("[5,15]"))

    def test_gap(self) -> None:
        assert not Interval(0, 5).has_overlap(Interval(6, 9))
        assert not Interval(6, 9).has_overlap(Interval(0, 5))

    def test_unbounded_never_separates(self) -> None:
        everything = Interval(None, None)

        assert everything.has_overlap(Interval(3, 3))
        assert everything.has_overlap(Interval(None, -(10**9)))
        assert not Interval(None, 5, exclude_end=True).has_overlap(Interval(5, None))

    def test_symmetric(self) -> None:
        for a, b in PAIRS:
            assert a.has_overlap(b) == b.has_overlap(a), (str(a), str(b))

    def test_matches_shared_members(self) -> None:
        for a, b in PAIRS:
            shared = _members(a) & _members(b)
            assert a.has_overlap(b) == bool(shared), (str(a), str(b))


class TestUnion:
    def test_scenario(self) -> None:
        assert str(parse("(0,10)") | parse("[5,15]")) == "(0,15]"

    def test_contiguous_at_included_edge(self) -> None:
        assert Interval(1, 5) | Interval(5, 9) == Interval(1, 9)
        assert Interval(5, 9) | Interval(1, 5) == Interval(1, 9)

    def test_touching_at_excluded_edges_is_separated(self) -> None:
        with pytest.raises(SeparatedIntervals):
            parse("(1,5)").union(parse("(5,9)"))
        with pytest.raises(SeparatedIntervals):
            parse("[1,5)") | parse("[5,9]")

    def test_gap_is_separated(self) -> None:
        with pytest.raises(SeparatedIntervals):
            Interval(0, 4) | Interval(6, 9)

    def test_equal_edges_include_if_either_does(self) -> None:
        assert parse("(0,10]") | parse("[0,5)") == parse("[0,10]")
        assert parse("(0,10)") | parse("(0,10]") == parse("(0,10]")
        assert parse("(0,10)") | parse("(0,10)") == parse("(0,10)")

    def test_outer_edge_keeps_its_flag(self) -> None:
        assert parse("[0,10)") | parse("[5,20]") == parse("[0,20]")
        assert parse("(0,10)") | parse("[5,20)") == parse("(0,20)")

    def test_unbounded_wins(self) -> None:
        assert parse("(-∞,5]") | parse("[3,8)") == parse("(-∞,8)")
        assert Interval(0, 1) | Interval(None, None) == Interval(None, None)

    def test_plus_is_union(self) -> None:
        assert Interval(0, 5) + Interval(3, 9) == Interval(0, 5) | Interval(3, 9)

    def test_commutative(self) -> None:
        for a, b in PAIRS:
            if a.has_overlap(b):
                assert a | b == b | a, (str(a), str(b))
            else:
                with pytest.raises(SeparatedIntervals):
                    a | b
                with pytest.raises(SeparatedIntervals):
                    b | a

    def test_members_are_those_of_either_operand(self) -> None:
        for a, b in PAIRS:
            if a.has_overlap(b):
                assert _members(a | b) == _members(a) | _members(b), (str(a), str(b))


class TestIntersection:
    def test_scenario(self) -> None:
        assert str(parse("(0,10)") & parse("[5,15]")) == "[5,10)"

    def test_equal_edges_exclude_if_either_does(self) -> None:
        assert parse("[0,10]") & parse("(0,10)") == parse("(0,10)")
        assert parse("[0,10]") & parse("[0,10)") == parse("[0,10)")

    def test_unbounded_defers_to_other_side(self) -> None:
        assert parse("(-∞,5]") & parse("[3,+∞)") == parse("[3,5]")
        assert parse("(-∞,+∞)") & parse("(2,4]") == parse("(2,4]")
        assert parse("(-∞,+∞)") & parse("(-∞,+∞)") == parse("(-∞,+∞)")

    def test_touching_included_edges_give_a_point(self) -> None:
        assert Interval(0, 10) & Interval(10, 20) == Interval(10, 10)

    def test_separated(self) -> None:
        with pytest.raises(SeparatedIntervals):
            parse("(0,10]").intersection(parse("(10,20)"))

    def test_commutative(self) -> None:
        for a, b in PAIRS:
            if a.has_overlap(b):
                assert a & b == b & a, (str(a), str(b))

    def test_members_are_those_of_both_operands(self) -> None:
        for a, b in PAIRS:
            if not a.has_overlap(b):
                continue
            common = a & b
            for v in _members(common):
                assert v in a and v in b, (str(a), str(b), v)
            assert _members(common) == _members(a) & _members(b), (str(a), str(b))


class TestSubtraction:
    def test_scenario(self) -> None:
        first = parse("(0,10)")
        second = parse("[5,15]")

        assert str(first - second) == "(0,5)"
        assert str(second - first) == "[10,15]"

    def test_disjoint_leaves_minuend(self) -> None:
        assert Interval(0, 10) - Interval(20, 30) == Interval(0, 10)
        assert parse("(0,10]") - parse("(10,20)") == parse("(0,10]")

    def test_fully_covered(self) -> None:
        with pytest.raises(EmptyInterval):
            Interval(0, 10) - Interval(0, 10)
        with pytest.raises(EmptyInterval):
            Interval(2, 8) - Interval(None, None)

    def test_hole_in_the_middle(self) -> None:
        with pytest.raises(InconsistentSubtraction):
            Interval(0, 10) - Interval(3, 5)

    def test_prefix_and_suffix(self) -> None:
        assert Interval(0, 10) - Interval(0, 4) == parse("(4,10]")
        assert Interval(0, 10) - Interval(10, 20) == parse("[0,10)")
        assert Interval(0, 10) - parse("[0,4)") == parse("[4,10]")

    def test_unbounded_edges(self) -> None:
        assert parse("(-∞,+∞)") - parse("[0,+∞)") == parse("(-∞,0)")
        assert parse("(-∞,+∞)") - parse("(-∞,0]") == parse("(0,+∞)")
        assert parse("(-∞,5]") - parse("(-∞,0)") == parse("[0,5]")

    def test_edge_left_behind_by_subtrahend_is_dropped(self) -> None:
        # Only 0 would remain, and it is not carried over
        with pytest.raises(EmptyInterval):
            Interval(0, 10) - parse("(0,10]")
        # 0 would remain alongside (5,10]; only the suffix is kept
        assert Interval(0, 10) - parse("(0,5]") == parse("(5,10]")
        assert Interval(0, 10) - parse("[5,10)") == parse("[0,5)")

    def test_subtract_from(self) -> None:
        assert parse("[5,15]").subtract_from(parse("(0,10)")) == parse("(0,5)")

    def test_disjoint_identity(self) -> None:
        for a, b in PAIRS:
            if not a.has_overlap(b):
                assert a - b == a, (str(a), str(b))

    def test_remainder_lies_in_minuend_only(self) -> None:
        for a, b in PAIRS:
            remaining = _members(a) - _members(b)
            try:
                result = a - b
            except (EmptyInterval, InconsistentSubtraction):
                continue
            assert _members(result) <= remaining, (str(a), str(b))

    def test_remainder_is_exact_when_edges_agree(self) -> None:
        for a, b in PAIRS:
            if not a.has_overlap(b):
                continue
            common = a & b
            if (common.exclude_start, common.exclude_end) != (
                a.exclude_start,
                a.exclude_end,
            ):
                continue
            remaining = _members(a) - _members(b)
            try:
                result = a - b
            except EmptyInterval:
                assert not remaining, (str(a), str(b))
                continue
            except InconsistentSubtraction:
                continue
            assert _members(result) == remaining, (str(a), str(b))
