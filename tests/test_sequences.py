"""Tests for factorials and Fibonacci numbers on HugeInt."""

from __future__ import annotations

import math

import pytest

from capacity import DEFAULT, INT32, INT64, INT256
from hugeint import HugeInt
from sequences import (
    FACTORIAL_LIMIT,
    FIBONACCI_LIMIT,
    factorial_iterative,
    factorial_limit,
    factorial_recursive,
    fibonacci_iterative,
    fibonacci_limit,
    fibonacci_recursive,
)


def fib(n: int) -> int:
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


# ---------------------------------------------------------------------------
# Factorial
# ---------------------------------------------------------------------------

class TestFactorial:
    @pytest.mark.parametrize("n", [0, 1, 2, 5, 12, 20])
    def test_iterative(self, n):
        assert int(factorial_iterative(n, INT64)) == math.factorial(n)

    @pytest.mark.parametrize("n", [0, 1, 2, 5, 12, 20])
    def test_recursive(self, n):
        assert int(factorial_recursive(n, INT64)) == math.factorial(n)

    def test_twenty_factorial_at_default(self):
        assert factorial_iterative(20) == HugeInt("2432902008176640000")

    def test_accepts_hugeint_argument(self):
        result = factorial_iterative(HugeInt(10, capacity=INT64))
        assert result.capacity == INT64
        assert int(result) == 3628800

    def test_large_factorial(self):
        assert int(factorial_iterative(50, INT256)) == math.factorial(50)
        assert int(factorial_recursive(50, INT256)) == math.factorial(50)

    def test_wraps_past_limit(self):
        assert int(factorial_iterative(13, INT32)) == INT32.wrap(math.factorial(13))

    def test_factorial_limit_at_default(self):
        result = factorial_iterative(FACTORIAL_LIMIT)
        assert int(result) == math.factorial(FACTORIAL_LIMIT)


# ---------------------------------------------------------------------------
# Fibonacci
# ---------------------------------------------------------------------------

class TestFibonacci:
    @pytest.mark.parametrize("n", [0, 1, 2, 10, 46, 92])
    def test_iterative(self, n):
        assert int(fibonacci_iterative(n, INT64)) == fib(n)

    @pytest.mark.parametrize("n", [0, 1, 2, 10, 15])
    def test_recursive(self, n):
        assert int(fibonacci_recursive(n, INT64)) == fib(n)

    def test_accepts_hugeint_argument(self):
        result = fibonacci_recursive(HugeInt(12, capacity=INT64))
        assert result.capacity == INT64
        assert int(result) == 144

    def test_large_fibonacci(self):
        assert int(fibonacci_iterative(300, INT256)) == fib(300)

    def test_wraps_past_limit(self):
        assert int(fibonacci_iterative(47, INT32)) == INT32.wrap(fib(47))


# ---------------------------------------------------------------------------
# Limits
# ---------------------------------------------------------------------------

class TestLimits:
    def test_constants(self):
        assert FACTORIAL_LIMIT == 1100
        assert FIBONACCI_LIMIT == 13000

    @pytest.mark.parametrize("capacity, n", [(INT32, 12), (INT64, 20)])
    def test_factorial_limit(self, capacity, n):
        assert factorial_limit(capacity) == n
        assert capacity.contains(math.factorial(n))
        assert not capacity.contains(math.factorial(n + 1))

    @pytest.mark.parametrize("capacity, n", [(INT32, 46), (INT64, 92)])
    def test_fibonacci_limit(self, capacity, n):
        assert fibonacci_limit(capacity) == n
        assert capacity.contains(fib(n))
        assert not capacity.contains(fib(n + 1))

    def test_default_limits_are_the_constants(self):
        assert factorial_limit(DEFAULT) == FACTORIAL_LIMIT
        assert fibonacci_limit(DEFAULT) == FIBONACCI_LIMIT
        assert DEFAULT.contains(math.factorial(FACTORIAL_LIMIT))
        assert DEFAULT.contains(fib(FIBONACCI_LIMIT))
