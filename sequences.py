"""
Factorials and Fibonacci numbers computed with HugeInt.

Everything here is built from the public HugeInt operations only, so
these double as end-to-end exercises of the arithmetic.  Arguments may
be plain ints or HugeInts; results wrap like any other HugeInt result,
so callers that care should stay below the limits.
"""

from __future__ import annotations

from capacity import Capacity, DEFAULT
from hugeint import HugeInt


# Largest arguments whose results fit the default 300-limb capacity.
FACTORIAL_LIMIT = 1100
FIBONACCI_LIMIT = 13000


def _as_hugeint(n: int | HugeInt, capacity: Capacity) -> HugeInt:
    if isinstance(n, HugeInt):
        return n
    return HugeInt(n, capacity=capacity)


def factorial_limit(capacity: Capacity = DEFAULT) -> int:
    """Largest n (at most FACTORIAL_LIMIT) with n! inside ``capacity``."""
    n, value = 0, 1
    while n < FACTORIAL_LIMIT and capacity.contains(value * (n + 1)):
        n += 1
        value *= n
    return n


def fibonacci_limit(capacity: Capacity = DEFAULT) -> int:
    """Largest n (at most FIBONACCI_LIMIT) with F(n) inside ``capacity``."""
    n, previous, current = 1, 0, 1
    while n < FIBONACCI_LIMIT and capacity.contains(previous + current):
        previous, current = current, previous + current
        n += 1
    return n


def factorial_iterative(n: int | HugeInt, capacity: Capacity = DEFAULT) -> HugeInt:
    """n! for n >= 0."""
    n = _as_hugeint(n, capacity)
    result = HugeInt(1, capacity=n.capacity)

    i = n.copy()
    while i >= 1:
        result *= i
        i -= 1

    return result


def factorial_recursive(n: int | HugeInt, capacity: Capacity = DEFAULT) -> HugeInt:
    """n! for n >= 0, one stack frame per factor.

    Limited by the interpreter's recursion limit rather than by the
    capacity.
    """
    n = _as_hugeint(n, capacity)
    one = HugeInt(1, capacity=n.capacity)

    if n <= one:
        return one
    return n * factorial_recursive(n - one)


def fibonacci_iterative(n: int | HugeInt, capacity: Capacity = DEFAULT) -> HugeInt:
    """The n-th Fibonacci number, F(0) = 0, F(1) = 1."""
    n = _as_hugeint(n, capacity)
    zero = HugeInt(0, capacity=n.capacity)
    one = HugeInt(1, capacity=n.capacity)

    if n == zero or n == one:
        return n.copy()

    previous, current = zero, one
    i = HugeInt(2, capacity=n.capacity)
    while i <= n:
        previous, current = current, current + previous
        i += 1

    return current


def fibonacci_recursive(n: int | HugeInt, capacity: Capacity = DEFAULT) -> HugeInt:
    """The n-th Fibonacci number by the textbook recursion.

    Exponential time; only for small n.
    """
    n = _as_hugeint(n, capacity)

    if n == 0 or n == 1:
        return n.copy()
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)
