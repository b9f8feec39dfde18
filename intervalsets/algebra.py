"""Set algebra over `IntervalSet`s.

Every operation copies its left operand and then applies `incl`/`excl`, so
the operands themselves are never modified.
"""
from __future__ import annotations

from .domains import Domain
from .errors import DomainError
from .interval_set import IntervalSet


def _domain_of(*sets: IntervalSet) -> Domain:
    for s in sets:
        if s.domain is not None:
            return s.domain
    raise DomainError("cannot build a universe for sets without a domain")


def universe[V](domain: Domain[V]) -> IntervalSet[V]:
    """Returns a set containing every value of `domain`."""
    return IntervalSet([domain.universe()], domain=domain)


def complement[V](s: IntervalSet[V]) -> IntervalSet[V]:
    """Returns every value of `s`'s domain that is not in `s`."""
    result = universe(_domain_of(s))
    result.excl(s)
    return result


def union[V](a: IntervalSet[V], b: IntervalSet[V]) -> IntervalSet[V]:
    result = a.copy()
    result.incl(b)
    return result


def difference[V](a: IntervalSet[V], b: IntervalSet[V]) -> IntervalSet[V]:
    result = a.copy()
    result.excl(b)
    return result


def intersection[V](a: IntervalSet[V], b: IntervalSet[V]) -> IntervalSet[V]:
    """Returns the values in both `a` and `b`, computed as `a` minus everything outside `b`."""
    result = a.copy()
    if result.is_empty:
        return result
    outside = universe(_domain_of(a, b))
    outside.excl(b)
    result.excl(outside)
    return result


def symmetric_difference[V](a: IntervalSet[V], b: IntervalSet[V]) -> IntervalSet[V]:
    """Returns the values in exactly one of `a` and `b`."""
    result = difference(a, b)
    result.incl(difference(b, a))
    return result
