from datetime import date

import pytest

from intervalsets import (
    CHARS,
    DAYS,
    INTEGERS,
    REALS,
    DomainError,
    IntegerDomain,
    IntervalSet,
    closed,
    closed_open,
    complement,
    difference,
    from_intervals,
    from_values,
    intersection,
    open_closed,
    symmetric_difference,
    union,
    universe,
)

from conftest import as_pairs, assert_canonical


def test_incremental_inclusion_and_exclusion():
    s4 = IntervalSet(domain=INTEGERS)
    s4.incl(0)
    assert as_pairs(s4) == [(0, 0)]
    s4.incl(1)
    assert as_pairs(s4) == [(0, 1)]
    s4.incl(closed(4, 5))
    assert as_pairs(s4) == [(0, 1), (4, 5)]
    s4.incl(closed(2, 3))
    assert as_pairs(s4) == [(0, 5)]
    s4.excl(1)
    assert as_pairs(s4) == [(0, 0), (2, 5)]
    s4.excl(closed(0, 2))
    assert as_pairs(s4) == [(3, 5)]
    s4.excl(4)
    assert as_pairs(s4) == [(3, 3), (5, 5)]
    s4.excl(5)
    assert as_pairs(s4) == [(3, 3)]
    s4.excl(3)
    assert as_pairs(s4) == []
    assert s4.is_empty


def test_domain_is_taken_from_first_value():
    s = IntervalSet()
    s.incl(3)
    assert s.domain == INTEGERS
    assert as_pairs(s) == [(3, 3)]


def test_char_intersection():
    s5 = IntervalSet(domain=CHARS)
    s5.incl("a")
    assert as_pairs(s5) == [("a", "a")]
    s5.incl("b")
    assert as_pairs(s5) == [("a", "b")]
    s5.incl(closed("c", "d", CHARS))
    assert as_pairs(s5) == [("a", "d")]
    s6 = s5 * from_values(["b", "d"], domain=CHARS)
    assert as_pairs(s6) == [("b", "b"), ("d", "d")]
    assert as_pairs(s5) == [("a", "d")]


def test_hole_in_dense_interval():
    s7 = from_intervals([closed(0.0, 1.0)])
    s7.excl(0.5)
    assert list(s7.intervals()) == [closed_open(0.0, 0.5), open_closed(0.5, 1.0)]
    assert str(s7) == "{0.0 ..< 0.5, 0.5 <.. 1.0}"
    s7.incl(0.5)
    assert list(s7.intervals()) == [closed(0.0, 1.0)]


def test_hole_in_discrete_interval():
    s = from_intervals([(1, 10)])
    s.excl(5)
    assert as_pairs(s) == [(1, 4), (6, 10)]
    s.incl(5)
    assert as_pairs(s) == [(1, 10)]


def test_inclusion_bridges_several_entries():
    s = from_intervals([(0, 1), (4, 5), (8, 9), (20, 30)])
    s.incl(closed(2, 10))
    assert as_pairs(s) == [(0, 10), (20, 30)]


def test_inclusion_inside_an_entry_is_a_noop():
    s = from_intervals([(0, 10)])
    before = s.copy()
    s.incl(closed(3, 4))
    assert s == before


def test_exclusion_across_several_entries():
    s = from_intervals([(0, 3), (5, 6), (8, 9), (11, 15)])
    s.excl(closed(2, 12))
    assert as_pairs(s) == [(0, 1), (13, 15)]


def test_exclusion_of_whole_entries():
    s = from_intervals([(0, 3), (5, 6), (8, 9)])
    s.excl(closed(5, 9))
    assert as_pairs(s) == [(0, 3)]
    s.excl(closed(-5, 50))
    assert s.is_empty


def test_exclusion_of_adjacent_values_is_a_noop():
    s = from_intervals([(0, 3), (8, 9)])
    s.excl(closed(4, 7))
    assert as_pairs(s) == [(0, 3), (8, 9)]


def test_dense_exclusion_keeps_touching_ends():
    s = from_intervals([closed(0.0, 1.0), closed(2.0, 3.0)])
    s.excl(open_closed(1.0, 2.0))
    assert list(s.intervals()) == [closed(0.0, 1.0), open_closed(2.0, 3.0)]


def test_set_inclusion_and_exclusion():
    a = from_intervals([(1, 2)])
    a.incl(from_intervals([(2, 4)]))
    assert len(a) == 4
    a.excl(from_intervals([(2, 2), (4, 4)]))
    assert as_pairs(a) == [(1, 1), (3, 3)]


def test_operators():
    a = from_intervals([(0, 5), (10, 15)])
    b = from_intervals([(3, 12)])
    assert as_pairs(a + b) == [(0, 15)]
    assert as_pairs(a | b) == [(0, 15)]
    assert as_pairs(a - b) == [(0, 2), (13, 15)]
    assert as_pairs(a * b) == [(3, 5), (10, 12)]
    assert as_pairs(a & b) == [(3, 5), (10, 12)]
    assert as_pairs(a ^ b) == [(0, 2), (6, 9), (13, 15)]
    assert as_pairs(a) == [(0, 5), (10, 15)]
    assert as_pairs(b) == [(3, 12)]


def test_in_place_operators():
    a = from_intervals([(0, 5)])
    a |= from_intervals([(6, 8)])
    assert as_pairs(a) == [(0, 8)]
    a -= from_intervals([(2, 3)])
    assert as_pairs(a) == [(0, 1), (4, 8)]


def test_complement_of_bounded_domain():
    byte = IntegerDomain(0, 255)
    s = from_intervals([(0, 9), (100, 199)], domain=byte)
    assert as_pairs(complement(s)) == [(10, 99), (200, 255)]
    assert as_pairs(~s) == [(10, 99), (200, 255)]
    assert complement(complement(s)) == s
    assert complement(universe(byte)).is_empty
    assert complement(IntervalSet(domain=byte)) == universe(byte)


def test_complement_of_reals():
    s = from_intervals([closed(0.0, 1.0)])
    c = complement(s)
    assert list(c.intervals()) == [
        REALS.span(REALS.below(float("-inf")), REALS.below(0.0)),
        REALS.span(REALS.above(1.0), REALS.above(float("inf"))),
    ]
    assert 0.0 not in c and 1.0 not in c and 1.5 in c and -7.0 in c
    assert complement(c) == s


def test_complement_of_strings():
    s = from_intervals([("b", "d")])
    c = complement(s)
    assert "a" in c and "c" not in c and "e" in c
    assert complement(c) == s


def test_day_sets():
    weeks = from_intervals([(date(2024, 1, 1), date(2024, 1, 7)), (date(2024, 1, 8), date(2024, 1, 14))])
    assert weeks.domain == DAYS
    assert weeks.interval_count == 1
    assert len(weeks) == 14
    weeks.excl(date(2024, 1, 10))
    assert date(2024, 1, 10) not in weeks
    assert date(2024, 1, 11) in weeks


def test_named_operations_do_not_mutate():
    a = from_intervals([(0, 5)])
    b = from_intervals([(3, 8)])
    for op in (union, difference, intersection, symmetric_difference):
        op(a, b)
    assert as_pairs(a) == [(0, 5)]
    assert as_pairs(b) == [(3, 8)]


def test_operations_with_domainless_empty_sets():
    a = from_intervals([(0, 5)])
    empty = IntervalSet()
    assert intersection(a, empty).is_empty
    assert intersection(empty, a).is_empty
    assert union(empty, a) == a
    assert symmetric_difference(a, empty) == a
    with pytest.raises(DomainError):
        complement(empty)


def test_results_are_canonical():
    a = from_intervals([(0, 2), (6, 9), (20, 21)])
    b = from_intervals([(3, 5), (10, 19)])
    for result in (a + b, a - b, a * b, a ^ b, ~a):
        assert_canonical(result)
    assert as_pairs(a + b) == [(0, 21)]


def test_equality_and_hash():
    a = from_intervals([(0, 2), (4, 6)])
    b = from_values([0, 1, 2, 4, 5, 6])
    assert a == b
    assert hash(a) == hash(b)
    assert a != from_intervals([(0, 6)])
    assert IntervalSet() == IntervalSet(domain=INTEGERS)
    assert from_intervals([(0, 2)], domain=IntegerDomain(0, 10)) != a


def test_pairs_and_ranges_are_intervals_when_mutating():
    s = from_intervals([(10, 12)])
    s.incl((1, 3))
    s.incl(range(5, 8))
    assert as_pairs(s) == [(1, 3), (5, 7), (10, 12)]
    s.excl((2, 6))
    s.excl(range(11, 13))
    assert as_pairs(s) == [(1, 1), (7, 7), (10, 10)]
    assert_canonical(s)
    with pytest.raises(ValueError):
        s.incl(range(0, 10, 2))
