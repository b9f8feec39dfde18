from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator

from .boundaries import Boundary, Side
from .infinity import Infinity

if TYPE_CHECKING:
    from .domains import DiscreteDomain, Domain


def render_value(value) -> str:
    if isinstance(value, Infinity):
        return str(value)
    return repr(value)


class BaseInterval[V](ABC):
    """A contiguous, possibly empty range of values between two cuts."""

    lower: Boundary[V]
    upper: Boundary[V]
    domain: Domain[V]

    @property
    @abstractmethod
    def is_empty(self) -> bool: ...

    @property
    @abstractmethod
    def is_singleton(self) -> bool: ...

    @abstractmethod
    def contains_value(self, value: V) -> bool: ...

    @abstractmethod
    def contains_interval(self, other: BaseInterval[V]) -> bool: ...

    @abstractmethod
    def overlaps(self, other: BaseInterval[V]) -> bool:
        """True if the two intervals share a value or must be fused into one."""

    @abstractmethod
    def intersection(self, other: BaseInterval[V]) -> BaseInterval[V]: ...

    @abstractmethod
    def extent(self, other: BaseInterval[V]) -> BaseInterval[V]:
        """The smallest interval enclosing both intervals."""

    @abstractmethod
    def difference(self, other: BaseInterval[V]) -> tuple[BaseInterval[V], BaseInterval[V]]:
        """Computes self - other as the part below `other` and the part above it.

        Either fragment may be empty; both are empty if `other` encloses self.
        """

    @property
    def open_below(self) -> bool:
        """True if the interval does not include its lower value."""
        return self.lower.is_above

    @property
    def open_above(self) -> bool:
        """True if the interval does not include its upper value."""
        return self.upper.is_below

    @property
    def is_open(self) -> bool:
        return self.open_below and self.open_above

    @property
    def is_closed(self) -> bool:
        return not self.open_below and not self.open_above

    def __contains__(self, item) -> bool:
        if isinstance(item, BaseInterval):
            return self.contains_interval(item)
        return self.contains_value(item)

    def __lt__(self, other: BaseInterval[V]) -> bool:
        # empty intervals sort first
        if self.is_empty:
            return True
        if other.is_empty:
            return False
        return self.lower < other.lower or (self.lower == other.lower and self.upper < other.upper)

    def __str__(self) -> str:
        if self.is_empty:
            return "∅"
        text = render_value(self.lower.value)
        if not self.is_singleton:
            opening = "<" if self.open_below else ""
            closing = "<" if self.open_above else ""
            text += f" {opening}..{closing} {render_value(self.upper.value)}"
        return text


@dataclass(frozen=True)
class Interval[V](BaseInterval[V]):
    """An interval over a dense domain, stored as an explicit pair of cuts."""
    lower: Boundary[V]
    upper: Boundary[V]

    @property
    def domain(self) -> Domain[V]:
        return self.lower.domain

    @property
    def is_empty(self) -> bool:
        return self.upper <= self.lower

    @property
    def is_singleton(self) -> bool:
        return self.is_closed and self.lower.value == self.upper.value

    def contains_value(self, value: V) -> bool:
        return self.lower < value and self.upper > value

    def contains_interval(self, other: BaseInterval[V]) -> bool:
        if self.is_empty or other.is_empty:
            return False
        return self.lower <= other.lower and other.upper <= self.upper

    def overlaps(self, other: BaseInterval[V]) -> bool:
        return self.upper >= other.lower and other.upper >= self.lower

    def intersection(self, other: BaseInterval[V]) -> Interval[V]:
        return Interval(max(self.lower, other.lower), min(self.upper, other.upper))

    def extent(self, other: BaseInterval[V]) -> Interval[V]:
        return Interval(min(self.lower, other.lower), max(self.upper, other.upper))

    def difference(self, other: BaseInterval[V]) -> tuple[Interval[V], Interval[V]]:
        return (
            Interval(self.lower, min(self.upper, other.lower)),
            Interval(max(self.lower, other.upper), self.upper),
        )


@dataclass(frozen=True)
class OrdinalInterval[V](BaseInterval[V]):
    """An interval over a discrete domain, stored as inclusive values `a .. b`.

    The interval is empty when `a > b`.
    """
    a: V
    b: V
    domain: DiscreteDomain[V] = field(compare=False, repr=False)

    @property
    def lower(self) -> Boundary[V]:
        return Boundary(self.a, Side.BELOW, self.domain)

    @property
    def upper(self) -> Boundary[V]:
        return Boundary(self.b, Side.ABOVE, self.domain)

    @property
    def is_empty(self) -> bool:
        return self.a > self.b

    @property
    def is_singleton(self) -> bool:
        return self.a == self.b

    def contains_value(self, value: V) -> bool:
        return self.a <= value <= self.b

    def contains_interval(self, other: OrdinalInterval[V]) -> bool:
        if self.is_empty or other.is_empty:
            return False
        return self.a <= other.a and other.b <= self.b

    def overlaps(self, other: OrdinalInterval[V]) -> bool:
        # intervals with no value between them count as overlapping
        adjacent = self.domain.adjacent
        return (
            (self.a <= other.b and other.a <= self.b)
            or adjacent(self.b, other.a)
            or adjacent(other.b, self.a)
        )

    def intersection(self, other: OrdinalInterval[V]) -> OrdinalInterval[V]:
        return OrdinalInterval(max(self.a, other.a), min(self.b, other.b), self.domain)

    def extent(self, other: OrdinalInterval[V]) -> OrdinalInterval[V]:
        return OrdinalInterval(min(self.a, other.a), max(self.b, other.b), self.domain)

    def difference(self, other: OrdinalInterval[V]) -> tuple[OrdinalInterval[V], OrdinalInterval[V]]:
        domain = self.domain
        if other.a <= domain.min:
            below = domain.empty()
        else:
            below = OrdinalInterval(self.a, min(self.b, domain.pred(other.a)), domain)
        if other.b >= domain.max:
            above = domain.empty()
        else:
            above = OrdinalInterval(max(self.a, domain.succ(other.b)), self.b, domain)
        return below, above

    def __len__(self) -> int:
        if self.is_empty:
            return 0
        return self.domain.to_ordinal(self.b) - self.domain.to_ordinal(self.a) + 1

    def __iter__(self) -> Iterator[V]:
        if self.is_empty:
            return
        from_ordinal = self.domain.from_ordinal
        for n in range(self.domain.to_ordinal(self.a), self.domain.to_ordinal(self.b) + 1):
            yield from_ordinal(n)

    def __lt__(self, other: OrdinalInterval[V]) -> bool:
        if self.is_empty:
            return True
        if other.is_empty:
            return False
        return (self.a, self.b) < (other.a, other.b)
