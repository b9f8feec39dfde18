from functools import total_ordering


@total_ordering
class Infinity:
    """An endpoint lying beyond every value of every type.

    `ORDERED` uses the two instances as its bounds, so sets of strings,
    fractions or datetimes have a universe and a complement. Comparisons
    against any non-`Infinity` value are decided by the sign alone, which
    also answers the reflected comparisons (`"a" < POS_INF`).
    """
    __slots__ = ("sign",)

    def __init__(self, sign: int):
        self.sign = sign

    def __eq__(self, other):
        return isinstance(other, Infinity) and self.sign == other.sign

    def __lt__(self, other):
        if isinstance(other, Infinity):
            return self.sign < other.sign
        return self.sign < 0

    def __hash__(self):
        return hash((Infinity, self.sign))

    def __str__(self):
        return "∞" if self.sign > 0 else "-∞"

    def __repr__(self):
        return "POS_INF" if self.sign > 0 else "NEG_INF"


POS_INF = Infinity(1)
NEG_INF = Infinity(-1)
