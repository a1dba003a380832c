"""
Calculator layer over HugeInt.

Each operation is a plain method that:
  1. Coerces its operands (int, decimal text or HugeInt) into the
     calculator's capacity
  2. Performs the HugeInt arithmetic, which wraps at the capacity

The calculator adds no semantics of its own; the factory *verifies* it
against the laws before handing it out, and the HTTP layer talks only
to a calculator.
"""

from __future__ import annotations

from dataclasses import dataclass

from capacity import Capacity, DEFAULT
from hugeint import HugeInt


Value = int | str | HugeInt


@dataclass(frozen=True)
class HugeIntCalculator:
    """
    A calculator whose every operation works on HugeInts of one
    configured capacity.
    """

    capacity: Capacity = DEFAULT

    def value(self, x: Value) -> HugeInt:
        """Coerce ``x`` into this calculator's capacity."""
        if isinstance(x, HugeInt):
            if x.capacity != self.capacity:
                raise ValueError(
                    f"{x.capacity.num_limbs}-limb value given to a "
                    f"{self.capacity.num_limbs}-limb calculator"
                )
            return x
        return HugeInt(x, capacity=self.capacity)

    # -- core operations --------------------------------------------------

    def add(self, a: Value, b: Value) -> HugeInt:
        return self.value(a) + self.value(b)

    def sub(self, a: Value, b: Value) -> HugeInt:
        return self.value(a) - self.value(b)

    def mul(self, a: Value, b: Value) -> HugeInt:
        return self.value(a) * self.value(b)

    def div(self, a: Value, b: Value) -> HugeInt:
        """Quotient truncated toward zero.  b == 0 is not checked."""
        return self.value(a) // self.value(b)

    def mod(self, a: Value, b: Value) -> HugeInt:
        """Remainder with the sign of ``a``.  b == 0 is not checked."""
        return self.value(a) % self.value(b)

    def divmod(self, a: Value, b: Value) -> tuple[HugeInt, HugeInt]:
        return divmod(self.value(a), self.value(b))

    def compare(self, a: Value, b: Value) -> int:
        """-1, 0 or 1 as a is less than, equal to or greater than b."""
        x, y = self.value(a), self.value(b)
        if x == y:
            return 0
        return -1 if x < y else 1

    # -- convenience ------------------------------------------------------

    def neg(self, a: Value) -> HugeInt:
        return -self.value(a)

    def abs(self, a: Value) -> HugeInt:
        return abs(self.value(a))

    def pow(self, base: Value, exp: int) -> HugeInt:
        """Wrap-around exponentiation (exp >= 0 only)."""
        if exp < 0:
            raise ValueError("negative exponents not supported")
        factor = self.value(base)
        result = HugeInt(1, capacity=self.capacity)
        for _ in range(exp):
            result *= factor
        return result

    def parse(self, text: str) -> HugeInt:
        return HugeInt.from_string(text, capacity=self.capacity)

    def format(self, a: Value) -> str:
        return self.value(a).to_decimal_string()

    def minimum(self) -> HugeInt:
        return HugeInt.minimum(self.capacity)

    def maximum(self) -> HugeInt:
        return HugeInt.maximum(self.capacity)
