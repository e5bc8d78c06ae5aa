"""Small bit-manipulation helpers."""

from functools import reduce
from operator import xor
from typing import Iterable


def is_odd(n: int) -> bool:
    """Return True when the lowest bit of ``n`` is set."""
    return bool(n & 1)


def unique_element(values: Iterable[int]) -> int:
    """Return the value that occurs an odd number of times.

    Every other value is expected to occur an even number of times, so the
    pairs cancel out under XOR. An empty input gives 0.
    """
    return reduce(xor, values, 0)