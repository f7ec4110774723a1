import itertools

import pytest

from pgrange import Range, between


@pytest.fixture
def int_ranges() -> list[Range[int]]:
    """Every distinct integer range with endpoints in 0..3, absent ones included."""
    endpoints = [None, 0, 1, 2, 3]
    ranges = [
        between(lo, hi, bounds)  # type: ignore[arg-type]
        for lo, hi in itertools.product(endpoints, repeat=2)
        for bounds in ("[]", "[)", "(]", "()")
    ] + [Range.empty()]
    return list(dict.fromkeys(ranges))


@pytest.fixture
def sample_values() -> range:
    return range(-1, 6)
