"""Shorthands for building boundaries, intervals and sets.

Every endpoint combination is a pair of cuts passed to `span`:

    closed(1, 3)        == span(below(1), above(3))    # 1 .. 3
    closed_open(1, 3)   == span(below(1), below(3))    # 1 ..< 3
    open_closed(1, 3)   == span(above(1), above(3))    # 1 <.. 3
    open_open(1, 3)     == span(above(1), below(3))    # 1 <..< 3

The domain is looked up from the first value unless one is passed.
"""
from __future__ import annotations

from typing import Any, Iterable

from loguru import logger

from .boundaries import Boundary
from .domains import INTEGERS, DiscreteDomain, Domain, domain_for
from .intervals import BaseInterval
from .interval_set import IntervalSet


def _resolve(value: Any, domain: Domain | None) -> Domain:
    return domain if domain is not None else domain_for(value)


def below[V](value: V, domain: Domain[V] | None = None) -> Boundary[V]:
    return _resolve(value, domain).below(value)


def above[V](value: V, domain: Domain[V] | None = None) -> Boundary[V]:
    return _resolve(value, domain).above(value)


def span[V](lower: Boundary[V], upper: Boundary[V]) -> BaseInterval[V]:
    """Constructs the interval between cuts `lower` and `upper`."""
    return lower.domain.span(lower, upper)


def closed[V](a: V, b: V, domain: Domain[V] | None = None) -> BaseInterval[V]:
    d = _resolve(a, domain)
    return d.span(d.below(a), d.above(b))


def closed_open[V](a: V, b: V, domain: Domain[V] | None = None) -> BaseInterval[V]:
    d = _resolve(a, domain)
    return d.span(d.below(a), d.below(b))


def open_closed[V](a: V, b: V, domain: Domain[V] | None = None) -> BaseInterval[V]:
    d = _resolve(a, domain)
    return d.span(d.above(a), d.above(b))


def open_open[V](a: V, b: V, domain: Domain[V] | None = None) -> BaseInterval[V]:
    d = _resolve(a, domain)
    return d.span(d.above(a), d.below(b))


def singleton[V](value: V, domain: Domain[V] | None = None) -> BaseInterval[V]:
    return _resolve(value, domain).singleton(value)


def from_intervals[V](items: Iterable[Any], domain: Domain[V] | None = None) -> IntervalSet[V]:
    """Builds a set from intervals, closed `(a, b)` pairs or ranges.

    Intervals are sorted, empty ones dropped and overlaps merged.

        >>> str(from_intervals([(0, 0), (2, 4), (5, 6)]))
        '{0, 2 .. 6}'
    """
    return IntervalSet(items, domain=domain)


def from_values[V](values: Iterable[V], domain: Domain[V] | None = None) -> IntervalSet[V]:
    """Builds a set holding exactly `values`.

    In a discrete domain runs of consecutive values become a single interval.
    """
    ordered = sorted(set(values))
    if not ordered:
        return IntervalSet(domain=domain)
    d = _resolve(ordered[0], domain)
    runs: list[BaseInterval[V]] = []
    start = prev = ordered[0]
    for value in ordered[1:]:
        if not d.adjacent(prev, value):
            runs.append(d.interval(start, prev))
            start = value
        prev = value
    runs.append(d.interval(start, prev))
    logger.debug("Built {} intervals from {} values", len(runs), len(ordered))
    return IntervalSet._from_canonical(runs, d)


def _bit_runs(mask: int) -> Iterable[tuple[int, int]]:
    # yields (first, last) bit positions of each run of set bits, lowest first
    position = 0
    while mask:
        zeros = (mask & -mask).bit_length() - 1
        mask >>= zeros
        position += zeros
        ones = (~mask & (mask + 1)).bit_length() - 1
        yield position, position + ones - 1
        mask >>= ones
        position += ones


def from_bitmask[V](mask: int, domain: DiscreteDomain[V] = INTEGERS, offset: int = 0) -> IntervalSet[V]:
    """Builds a set from an integer used as a bit set.

    Bit `i` set means the value with ordinal `i + offset` is in the set. Runs
    of set bits are already sorted and separated, so they are taken as is.

        >>> str(from_bitmask(0b1110_1001))
        '{0, 3, 5 .. 7}'
    """
    if mask < 0:
        raise ValueError(f"a bit set must not be negative, got {mask}")
    runs = [
        domain.interval(domain.from_ordinal(first + offset), domain.from_ordinal(last + offset))
        for first, last in _bit_runs(mask)
    ]
    return IntervalSet._from_canonical(runs, domain)
