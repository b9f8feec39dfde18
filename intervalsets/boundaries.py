from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .domains import Domain


class Side(Enum):
    BELOW = auto()
    ABOVE = auto()


def _cmp(x: Any, y: Any) -> int:
    return (x > y) - (x < y)


@dataclass(frozen=True, eq=False)
class Boundary[V]:
    """A cut point immediately below or immediately above `value`.

    No value ever sits on a boundary: `below(v)` lies between `v` and
    everything smaller, `above(v)` between `v` and everything larger. A range
    starting at `below(v)` or ending at `above(v)` therefore includes `v`.

    In a discrete domain `above(v)` and `below(succ(v))` are the same cut and
    compare (and hash) as equal.
    """
    value: V
    side: Side
    domain: Domain[V] = field(repr=False)

    @property
    def is_below(self) -> bool:
        return self.side is Side.BELOW

    @property
    def is_above(self) -> bool:
        return self.side is Side.ABOVE

    def cmp(self, other: Boundary[V]) -> int:
        """Three-way comparison of two cuts."""
        if self.side is other.side:
            return _cmp(self.value, other.value)
        if self.is_below:
            if self.value > other.value:
                return 0 if self.domain.adjacent(other.value, self.value) else 1
            return -1
        if self.value < other.value:
            return 0 if self.domain.adjacent(self.value, other.value) else -1
        return 1

    def value_above(self) -> V:
        """The nearest value above this cut."""
        return self.domain.value_above(self)

    def value_below(self) -> V:
        """The nearest value below this cut."""
        return self.domain.value_below(self)

    # Against a bare value a cut is never equal, so `<=` is `<` and `>=` is `>`.
    def __lt__(self, other):
        if isinstance(other, Boundary):
            return self.cmp(other) < 0
        if self.is_below:
            return self.value <= other
        return self.value < other

    def __gt__(self, other):
        if isinstance(other, Boundary):
            return self.cmp(other) > 0
        if self.is_below:
            return other < self.value
        return other <= self.value

    def __le__(self, other):
        if isinstance(other, Boundary):
            return self.cmp(other) <= 0
        return self < other

    def __ge__(self, other):
        if isinstance(other, Boundary):
            return self.cmp(other) >= 0
        return self > other

    def __eq__(self, other):
        if not isinstance(other, Boundary):
            return NotImplemented
        return self.cmp(other) == 0

    def __hash__(self):
        return hash(self.domain.canonical(self))

    def __repr__(self):
        return f"{self.side.name.lower()}({self.value!r})"
