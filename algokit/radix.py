"""Least-significant-digit radix sort for non-negative integers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import List

__all__ = ["count_digits", "radix_sort"]


def count_digits(x: int) -> int:
    """Return the number of decimal digits in ``x``, ignoring its sign.

    Zero has no digits by this count, so ``count_digits(0)`` is 0.
    """
    x = abs(x)
    count = 0
    while x:
        x //= 10
        count += 1
    return count


def radix_sort(items: Iterable[int]) -> List[int]:
    """Sort non-negative integers ascending using ten decimal-digit bins.

    Raises TypeError for non-integers and ValueError for negative values.
    """
    values = list(items)
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"radix_sort accepts only integers, got {value!r}")
        if value < 0:
            raise ValueError(f"radix_sort accepts only non-negative values, got {value}")
    if not values:
        return values

    for position in range(count_digits(max(values))):
        divisor = 10**position
        bins: List[List[int]] = [[] for _ in range(10)]
        for value in values:
            bins[(value // divisor) % 10].append(value)
        values = [value for bucket in bins for value in bucket]
    return values