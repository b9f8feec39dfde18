"""The disjoint interval set.

An `IntervalSet` stores a set of values as a sorted list of intervals that
are non-empty, pairwise disjoint and never fusible: in a discrete domain two
stored runs always have at least one missing value between them. Every
public mutation restores that form before it returns, touching only the run
of entries the mutation affects, which is located by binary search.
"""
from __future__ import annotations

from bisect import bisect_left, bisect_right
from operator import attrgetter
from typing import Any, Iterable, Iterator

from loguru import logger

from .domains import Domain, domain_for
from .errors import DomainError
from .intervals import BaseInterval

_lower = attrgetter("lower")
_upper = attrgetter("upper")


def coalesce[V](intervals: list[BaseInterval[V]]) -> list[BaseInterval[V]]:
    """Fuses overlapping or adjacent neighbours of a sorted interval list."""
    merged: list[BaseInterval[V]] = []
    for iv in intervals:
        if merged and merged[-1].overlaps(iv):
            merged[-1] = merged[-1].extent(iv)
        else:
            merged.append(iv)
    return merged


class IntervalSet[V]:
    """An ordered collection of disjoint intervals over one domain.

    `intervals` may hold intervals, closed `(a, b)` pairs and step-1 ranges;
    they are sorted, empties are dropped and overlaps are merged. The domain
    is taken from the first item when it is not given explicitly.

        >>> s = IntervalSet([(1, 3), (2, 4), (0, 0)])
        >>> str(s)
        '{0 .. 4}'
    """

    def __init__(self, intervals: Iterable[Any] = (), domain: Domain[V] | None = None):
        self.domain = domain
        self._intervals: list[BaseInterval[V]] = []
        fragments = [self._coerce(item) for item in intervals]
        kept = sorted(iv for iv in fragments if not iv.is_empty)
        if len(kept) < len(fragments):
            logger.debug("Dropped {} empty intervals", len(fragments) - len(kept))
        self._intervals = coalesce(kept)

    @classmethod
    def _from_canonical(cls, intervals: list[BaseInterval[V]], domain: Domain[V]) -> IntervalSet[V]:
        result = cls(domain=domain)
        result._intervals = intervals
        return result

    # ----- coercion -----
    def _adopt(self, domain: Domain[V]) -> None:
        if self.domain is None:
            self.domain = domain
        elif domain != self.domain:
            raise DomainError(f"cannot mix {domain} with {self.domain}")

    def _coerce(self, item: Any) -> BaseInterval[V]:
        if isinstance(item, BaseInterval):
            self._adopt(item.domain)
            return item
        if isinstance(item, range):
            if item.step != 1:
                raise ValueError(f"only ranges with step 1 describe an interval, got {item!r}")
            if self.domain is None:
                self._adopt(domain_for(item.start))
            return self.domain.interval(item.start, item.stop - 1)
        a, b = item
        if self.domain is None:
            self._adopt(domain_for(a))
        return self.domain.interval(a, b)

    def _singleton(self, value: V) -> BaseInterval[V]:
        if self.domain is None:
            self._adopt(domain_for(value))
        return self.domain.singleton(value)

    def _operand(self, item: Any) -> list[BaseInterval[V]]:
        """The intervals making up a mutation argument.

        Sets, intervals, closed `(a, b)` pairs and ranges are read as in the
        constructor; anything else is a single value.
        """
        if isinstance(item, IntervalSet):
            if item.domain is not None:
                self._adopt(item.domain)
            return item._intervals
        if isinstance(item, (BaseInterval, tuple, range)):
            return [self._coerce(item)]
        return [self._singleton(item)]

    # ----- overlap-range search -----
    def _fusing_range(self, iv: BaseInterval[V]) -> tuple[int, int]:
        """Index range of the entries that overlap `iv` or touch it.

        If the range is empty (`lo > hi`), `lo` is where `iv` belongs.
        """
        lo = bisect_left(self._intervals, iv.lower, key=_upper)
        hi = bisect_right(self._intervals, iv.upper, key=_lower) - 1
        return lo, hi

    def _overlapping_range(self, iv: BaseInterval[V]) -> tuple[int, int]:
        """Index range of the entries sharing at least one value with `iv`."""
        lo = bisect_right(self._intervals, iv.lower, key=_upper)
        hi = bisect_left(self._intervals, iv.upper, key=_lower) - 1
        return lo, hi

    # ----- mutation -----
    def _include(self, iv: BaseInterval[V]) -> None:
        if iv.is_empty:
            return
        lo, hi = self._fusing_range(iv)
        if lo > hi:
            self._intervals.insert(lo, iv)
            return
        first = self._intervals[lo]
        if lo == hi and first.contains_interval(iv):
            return
        fused = first.extent(iv).extent(self._intervals[hi])
        logger.debug("Fusing {} with entries {}..{} into {}", iv, lo, hi, fused)
        self._intervals[lo:hi + 1] = [fused]

    def _exclude(self, iv: BaseInterval[V]) -> None:
        if iv.is_empty or not self._intervals:
            return
        lo, hi = self._overlapping_range(iv)
        if lo > hi:
            return
        below, _ = self._intervals[lo].difference(iv)
        _, above = self._intervals[hi].difference(iv)
        remainder = [part for part in (below, above) if not part.is_empty]
        logger.debug("Removing {} from entries {}..{} leaves {}", iv, lo, hi, remainder)
        self._intervals[lo:hi + 1] = remainder

    def incl(self, item: Any) -> None:
        """Includes a value, an interval or every interval of another set.

        Does nothing for what is already in the set.
        """
        for iv in list(self._operand(item)):
            self._include(iv)

    def excl(self, item: Any) -> None:
        """Excludes a value, an interval or every interval of another set.

        Does nothing for what is not in the set.
        """
        for iv in list(self._operand(item)):
            self._exclude(iv)

    # ----- queries -----
    @property
    def is_empty(self) -> bool:
        return not self._intervals

    @property
    def interval_count(self) -> int:
        return len(self._intervals)

    def contains_value(self, value: V) -> bool:
        # first entry whose upper cut lies above the value
        idx = bisect_left(self._intervals, value, key=_upper)
        return idx < len(self._intervals) and self._intervals[idx].contains_value(value)

    def contains_interval(self, iv: BaseInterval[V]) -> bool:
        """True if `iv` is enclosed by a single entry of the set."""
        if iv.is_empty or not self._intervals:
            return False
        if iv.is_singleton:
            return self.contains_value(iv.lower.value)
        lo, hi = self._overlapping_range(iv)
        return lo == hi and self._intervals[lo].contains_interval(iv)

    def contains_set(self, other: IntervalSet[V]) -> bool:
        """True if every interval of `other` lies in this set.

        An empty set contains nothing, not even another empty set.
        """
        if self.is_empty:
            return False
        return all(self.contains_interval(iv) for iv in other._intervals)

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, IntervalSet):
            return self.contains_set(item)
        if isinstance(item, BaseInterval):
            return self.contains_interval(item)
        return self.contains_value(item)

    def intervals(self) -> Iterator[BaseInterval[V]]:
        """Iterates over the intervals in ascending order."""
        return iter(list(self._intervals))

    def values(self) -> Iterator[V]:
        """Iterates over every value of every interval; discrete domains only."""
        self._require_discrete("iterate over the values of")
        return (value for iv in list(self._intervals) for value in iv)

    def _require_discrete(self, action: str) -> None:
        if self.domain is not None and not self.domain.discrete:
            raise TypeError(f"cannot {action} a set over the dense domain {self.domain}")

    def __iter__(self) -> Iterator[V]:
        return self.values()

    def __len__(self) -> int:
        """The number of values in the set; discrete domains only."""
        self._require_discrete("count the values of")
        return sum(len(iv) for iv in self._intervals)

    def __bool__(self) -> bool:
        return bool(self._intervals)

    def __getitem__(self, index: int) -> BaseInterval[V]:
        return self._intervals[index]

    def copy(self) -> IntervalSet[V]:
        return self._from_canonical(list(self._intervals), self.domain)

    __copy__ = copy

    def __eq__(self, other) -> bool:
        if not isinstance(other, IntervalSet):
            return NotImplemented
        if self._intervals and other._intervals and self.domain != other.domain:
            return False
        return self._intervals == other._intervals

    def __hash__(self) -> int:
        return hash(tuple(self._intervals))

    def __str__(self) -> str:
        return "{" + ", ".join(str(iv) for iv in self._intervals) + "}"

    def __repr__(self) -> str:
        return f"IntervalSet({self})"

    # ----- set algebra -----
    def __or__(self, other: IntervalSet[V]) -> IntervalSet[V]:
        from .algebra import union
        return union(self, other)

    __add__ = __or__

    def __sub__(self, other: IntervalSet[V]) -> IntervalSet[V]:
        from .algebra import difference
        return difference(self, other)

    def __and__(self, other: IntervalSet[V]) -> IntervalSet[V]:
        from .algebra import intersection
        return intersection(self, other)

    __mul__ = __and__

    def __xor__(self, other: IntervalSet[V]) -> IntervalSet[V]:
        from .algebra import symmetric_difference
        return symmetric_difference(self, other)

    def __invert__(self) -> IntervalSet[V]:
        from .algebra import complement
        return complement(self)

    def __ior__(self, other: IntervalSet[V]) -> IntervalSet[V]:
        self.incl(other)
        return self

    __iadd__ = __ior__

    def __isub__(self, other: IntervalSet[V]) -> IntervalSet[V]:
        self.excl(other)
        return self
