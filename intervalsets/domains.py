"""Value domains: the strategy that tells intervals how their values are ordered.

A discrete domain has a successor and predecessor for every value between its
bounds; its intervals are stored as inclusive value pairs and neighbouring
runs are fused. A dense domain has no notion of a next value; its intervals
keep explicit cuts so that open and closed ends can be told apart.

The domain of a value is looked up once, when an interval or set is built,
through a small registry keyed by type (see `domain_for`).
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from fractions import Fraction
from typing import Any, ClassVar

from .boundaries import Boundary, Side
from .errors import DomainError
from .infinity import NEG_INF, POS_INF
from .intervals import BaseInterval, Interval, OrdinalInterval


class Domain[V](ABC):
    discrete: ClassVar[bool]
    min: Any
    max: Any

    def below(self, value: V) -> Boundary[V]:
        """The cut immediately below `value`."""
        return Boundary(value, Side.BELOW, self)

    def above(self, value: V) -> Boundary[V]:
        """The cut immediately above `value`."""
        return Boundary(value, Side.ABOVE, self)

    @abstractmethod
    def adjacent(self, a: V, b: V) -> bool:
        """True if `b` is the next value after `a`."""

    @abstractmethod
    def value_above(self, boundary: Boundary[V]) -> V: ...

    @abstractmethod
    def value_below(self, boundary: Boundary[V]) -> V: ...

    @abstractmethod
    def span(self, lower: Boundary[V], upper: Boundary[V]) -> BaseInterval[V]:
        """Constructs the interval between cuts `lower` and `upper`."""

    @abstractmethod
    def empty(self) -> BaseInterval[V]: ...

    @abstractmethod
    def canonical(self, boundary: Boundary[V]) -> tuple:
        """A hashable key equal for every boundary denoting the same cut."""

    def interval(self, a: V, b: V) -> BaseInterval[V]:
        """The closed interval `a .. b`."""
        return self.span(self.below(a), self.above(b))

    def singleton(self, value: V) -> BaseInterval[V]:
        return self.interval(value, value)

    def universe(self) -> BaseInterval[V]:
        """The interval spanning the whole domain."""
        return self.interval(self.min, self.max)


class DiscreteDomain[V](Domain[V]):
    """A bounded domain whose values map one-to-one onto a range of integers."""
    discrete = True

    @abstractmethod
    def to_ordinal(self, value: V) -> int: ...

    @abstractmethod
    def from_ordinal(self, ordinal: int) -> V: ...

    def succ(self, value: V) -> V:
        if value >= self.max:
            raise DomainError(f"no value above {value!r} in {self}")
        return self.from_ordinal(self.to_ordinal(value) + 1)

    def pred(self, value: V) -> V:
        if value <= self.min:
            raise DomainError(f"no value below {value!r} in {self}")
        return self.from_ordinal(self.to_ordinal(value) - 1)

    def adjacent(self, a: V, b: V) -> bool:
        return self.to_ordinal(a) + 1 == self.to_ordinal(b)

    def value_above(self, boundary: Boundary[V]) -> V:
        if boundary.is_below:
            return boundary.value
        return self.succ(boundary.value)

    def value_below(self, boundary: Boundary[V]) -> V:
        if boundary.is_above:
            return boundary.value
        return self.pred(boundary.value)

    def interval(self, a: V, b: V) -> OrdinalInterval[V]:
        if not (self.represents(a) and self.represents(b)):
            raise DomainError(f"{a!r} .. {b!r} is not an interval of {self}")
        if a <= b:
            self.check(a)
            self.check(b)
        return OrdinalInterval(a, b, self)

    def span(self, lower: Boundary[V], upper: Boundary[V]) -> OrdinalInterval[V]:
        # cuts outside the extreme values enclose nothing on their far side
        if (lower.is_above and lower.value >= self.max) or \
                (upper.is_below and upper.value <= self.min):
            return self.empty()
        return self.interval(self.value_above(lower), self.value_below(upper))

    def empty(self) -> OrdinalInterval[V]:
        return OrdinalInterval(self.max, self.min, self)

    def canonical(self, boundary: Boundary[V]) -> tuple:
        if boundary.is_above and boundary.value < self.max:
            return (self.succ(boundary.value), Side.BELOW)
        return (boundary.value, boundary.side)

    def represents(self, value: Any) -> bool:
        """True if `value` is of the kind this domain counts."""
        return self.from_ordinal(self.to_ordinal(value)) == value

    def check(self, value: V) -> None:
        """Raises `DomainError` unless `value` is a value of this domain within its bounds."""
        if not self.represents(value):
            raise DomainError(f"{value!r} is not a value of {self}")
        if not self.min <= value <= self.max:
            raise DomainError(f"{value!r} is outside {self}")


@dataclass(frozen=True)
class IntegerDomain(DiscreteDomain[int]):
    min: int = -2**63
    max: int = 2**63 - 1

    def to_ordinal(self, value: int) -> int:
        return value

    def from_ordinal(self, ordinal: int) -> int:
        return ordinal

    def adjacent(self, a: int, b: int) -> bool:
        return a + 1 == b

    def represents(self, value: Any) -> bool:
        return isinstance(value, int)


@dataclass(frozen=True)
class CharDomain(DiscreteDomain[str]):
    """Single-character strings ordered by code point."""
    min: str = "\x00"
    max: str = "\U0010ffff"

    def to_ordinal(self, value: str) -> int:
        return ord(value)

    def from_ordinal(self, ordinal: int) -> str:
        return chr(ordinal)

    def represents(self, value: Any) -> bool:
        return isinstance(value, str) and len(value) == 1


@dataclass(frozen=True)
class DateDomain(DiscreteDomain[date]):
    """Calendar days."""
    min: date = date.min
    max: date = date.max

    def to_ordinal(self, value: date) -> int:
        return value.toordinal()

    def from_ordinal(self, ordinal: int) -> date:
        return date.fromordinal(ordinal)

    def represents(self, value: Any) -> bool:
        return isinstance(value, date) and not isinstance(value, datetime)


@dataclass(frozen=True)
class OrderedDomain[V](Domain[V]):
    """A dense domain over any totally ordered type.

    No two distinct cuts are ever equal, and there is no value next to a
    value, so open and closed ends are kept apart explicitly.
    """
    min: Any = NEG_INF
    max: Any = POS_INF
    discrete: ClassVar[bool] = False

    def adjacent(self, a: V, b: V) -> bool:
        return False

    def value_above(self, boundary: Boundary[V]) -> V:
        if boundary.is_below:
            return boundary.value
        raise DomainError(f"the value above {boundary!r} is undefined in a dense domain")

    def value_below(self, boundary: Boundary[V]) -> V:
        if boundary.is_above:
            return boundary.value
        raise DomainError(f"the value below {boundary!r} is undefined in a dense domain")

    def span(self, lower: Boundary[V], upper: Boundary[V]) -> Interval[V]:
        return Interval(lower, upper)

    def empty(self) -> Interval[V]:
        return Interval(self.above(self.max), self.below(self.min))

    def canonical(self, boundary: Boundary[V]) -> tuple:
        return (boundary.value, boundary.side)


INTEGERS = IntegerDomain()
CHARS = CharDomain()
DAYS = DateDomain()
REALS = OrderedDomain(-math.inf, math.inf)
ORDERED = OrderedDomain()

_registry: dict[type, Domain] = {
    int: INTEGERS,
    float: REALS,
    date: DAYS,
    datetime: ORDERED,
    str: ORDERED,
    Fraction: ORDERED,
    Decimal: ORDERED,
}


def register_domain(cls: type, domain: Domain) -> None:
    """Makes `domain` the default for values of type `cls` and its subclasses."""
    _registry[cls] = domain


def domain_for(value: Any) -> Domain:
    """The registered domain for `value`'s type, or `ORDERED` if there is none."""
    for cls in type(value).__mro__:
        if cls in _registry:
            return _registry[cls]
    return ORDERED
