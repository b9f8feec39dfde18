"""
Shared helpers for the intervalsets tests.
"""

import pytest

from intervalsets import IntegerDomain


def assert_canonical(s):
    """Entries are non-empty, strictly ascending and pairwise unfusable."""
    entries = list(s.intervals())
    for iv in entries:
        assert not iv.is_empty
    for left, right in zip(entries, entries[1:]):
        assert left < right
        assert not left.overlaps(right)


def as_pairs(s):
    return [(iv.a, iv.b) for iv in s.intervals()]


@pytest.fixture
def byte_domain():
    return IntegerDomain(0, 255)
