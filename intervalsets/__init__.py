"""Sets of values stored as sorted, disjoint, maximally merged intervals.

    >>> from intervalsets import from_intervals, closed
    >>> s = from_intervals([(1, 3), (2, 4), (0, 0)])
    >>> str(s)
    '{0 .. 4}'
    >>> s.excl(2)
    >>> str(s)
    '{0 .. 1, 3 .. 4}'
    >>> closed(1, 4) in s
    False
"""
from loguru import logger

from .algebra import complement, difference, intersection, symmetric_difference, union, universe
from .boundaries import Boundary, Side
from .construct import (
    above,
    below,
    closed,
    closed_open,
    from_bitmask,
    from_intervals,
    from_values,
    open_closed,
    open_open,
    singleton,
    span,
)
from .domains import (
    CHARS,
    DAYS,
    INTEGERS,
    ORDERED,
    REALS,
    CharDomain,
    DateDomain,
    DiscreteDomain,
    Domain,
    IntegerDomain,
    OrderedDomain,
    domain_for,
    register_domain,
)
from .errors import DomainError
from .infinity import NEG_INF, POS_INF, Infinity
from .interval_set import IntervalSet
from .intervals import BaseInterval, Interval, OrdinalInterval
from .log import configure_logging

logger.disable("intervalsets")

__all__ = [
    "Boundary", "Side",
    "BaseInterval", "Interval", "OrdinalInterval",
    "Domain", "DiscreteDomain", "IntegerDomain", "CharDomain", "DateDomain", "OrderedDomain",
    "INTEGERS", "CHARS", "DAYS", "REALS", "ORDERED", "domain_for", "register_domain",
    "IntervalSet",
    "universe", "complement", "union", "difference", "intersection", "symmetric_difference",
    "below", "above", "span", "closed", "closed_open", "open_closed", "open_open", "singleton",
    "from_intervals", "from_values", "from_bitmask",
    "DomainError", "Infinity", "POS_INF", "NEG_INF",
    "configure_logging",
]
