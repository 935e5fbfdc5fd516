"""Small numeric routines: factorials, Fibonacci, Josephus, Hanoi, roots and change."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from typing import List, Tuple

__all__ = [
    "DENOMINATIONS",
    "factorial_digits",
    "factorial",
    "fibonacci",
    "fibonacci_series",
    "josephus",
    "hanoi_moves",
    "bisect_sqrt",
    "min_denominations",
    "count_digits_in_text",
]

DENOMINATIONS: Tuple[int, ...] = (1, 2, 5, 10, 20, 50, 100, 500, 1000)


def factorial(n: int) -> int:
    """Return the product 1 * 2 * ... * n; for n below 2 this is 1."""
    return math.prod(range(2, n + 1))


def factorial_digits(n: int) -> List[int]:
    """Return the decimal digits of ``factorial(n)``, most significant first."""
    return [int(digit) for digit in str(factorial(n))]


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    if n < 0:
        raise ValueError(f"fibonacci is undefined for negative index {n}")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def _fibonacci_numbers() -> Iterator[int]:
    current, following = 0, 1
    while True:
        yield current
        current, following = following, current + following


def fibonacci_series(count: int) -> List[int]:
    """Return the first ``count`` Fibonacci numbers."""
    numbers = _fibonacci_numbers()
    return [next(numbers) for _ in range(max(count, 0))]


def josephus(n: int, k: int) -> int:
    """Return the 1-based position of the survivor when every k-th of n people is removed."""
    if n < 1:
        raise ValueError(f"josephus needs at least one person, got {n}")
    if k < 1:
        raise ValueError(f"josephus needs a positive step, got {k}")
    survivor = 1
    for size in range(2, n + 1):
        survivor = (survivor + k - 1) % size + 1
    return survivor


def hanoi_moves(
    count: int, source: int = 1, spare: int = 2, target: int = 3
) -> Iterator[Tuple[int, int]]:
    """Yield (from_peg, to_peg) moves that carry ``count`` rings from source to target."""
    if count <= 0:
        return
    yield from hanoi_moves(count - 1, source, target, spare)
    yield source, target
    yield from hanoi_moves(count - 1, spare, source, target)


def bisect_sqrt(x: float, epsilon: float = 1e-6) -> float:
    """Approximate the square root of ``x`` by bisection, returning the lower bound.

    The result lies within ``epsilon`` below the true root.
    """
    if x < 0:
        raise ValueError(f"cannot take the square root of negative {x}")
    if epsilon <= 0:
        raise ValueError(f"epsilon must be positive, got {epsilon}")
    low, high = (float(x), 1.0) if x < 1 else (1.0, float(x))
    while high - low > epsilon:
        mid = (high + low) / 2
        if mid * mid < x:
            low = mid
        else:
            high = mid
    return low


def min_denominations(value: int, denominations: Iterable[int] = DENOMINATIONS) -> List[int]:
    """Make change for ``value`` greedily, largest denomination first.

    Raises ValueError for a negative value, a non-positive denomination, or
    when the denominations cannot make the exact amount.
    """
    if value < 0:
        raise ValueError(f"cannot make change for negative value {value}")
    coins = sorted(denominations, reverse=True)
    if any(coin <= 0 for coin in coins):
        raise ValueError("denominations must be positive")
    change: List[int] = []
    remaining = value
    for coin in coins:
        times, remaining = divmod(remaining, coin)
        change.extend([coin] * times)
    if remaining:
        raise ValueError(f"cannot make exact change for {value}; {remaining} left over")
    return change


def count_digits_in_text(text: str) -> int:
    """Count the ASCII digits 0-9 in ``text``."""
    return sum(1 for ch in text if "0" <= ch <= "9")