"""
Law layer for fixed-capacity huge integers.

A LawSet defines the *contract* HugeInt arithmetic must satisfy.
It is purely declarative - it says WHAT must be true, not HOW.

Each law is a named property with:
  - a human-readable description
  - a callable predicate that returns True if the law holds
  - the capacity under which the law is claimed

Predicates receive the operation(s) under test first and plain Python
ints after.  Python's unbounded integers, reduced with
``Capacity.wrap``, serve as the reference model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from capacity import Capacity
from hugeint import HugeInt


# ---------------------------------------------------------------------------
# Core law primitives
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Law:
    """A single verifiable property of the arithmetic."""

    name: str
    description: str
    predicate: Callable[..., bool]
    capacity: Capacity

    def check(self, *args: Any) -> bool:
        """Evaluate the law predicate with the given arguments."""
        return self.predicate(*args)


@dataclass
class LawSet:
    """An ordered collection of laws that together form a contract."""

    name: str
    laws: list[Law] = field(default_factory=list)

    def add(self, law: Law) -> None:
        self.laws.append(law)

    def __iter__(self):
        return iter(self.laws)

    def __len__(self):
        return len(self.laws)


# ---------------------------------------------------------------------------
# Helpers used inside the predicates
# ---------------------------------------------------------------------------

def truncdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero (not floor division).

    Python's ``//`` rounds toward negative infinity; HugeInt, like C,
    truncates toward zero.
    """
    q, r = divmod(a, b)
    # divmod rounds toward -inf; adjust when the result is negative
    # and there is a remainder.
    if r != 0 and (a < 0) != (b < 0):
        q += 1
    return q


def truncmod(a: int, b: int) -> int:
    """Remainder matching ``truncdiv``; it takes the sign of ``a``."""
    return a - truncdiv(a, b) * b


# ---------------------------------------------------------------------------
# Law builders
# ---------------------------------------------------------------------------

def addition_laws(capacity: Capacity) -> LawSet:
    """Laws for wrap-around addition."""
    wrap = capacity.wrap

    laws = LawSet(name="addition")

    laws.add(Law(
        name="matches_oracle",
        description="int(a + b) == wrap(a + b)",
        predicate=lambda add, a, b: int(add(a, b)) == wrap(a + b),
        capacity=capacity,
    ))

    laws.add(Law(
        name="commutativity",
        description="a + b == b + a",
        predicate=lambda add, a, b: add(a, b) == add(b, a),
        capacity=capacity,
    ))

    laws.add(Law(
        name="identity",
        description="a + 0 == a",
        predicate=lambda add, a: int(add(a, 0)) == a,
        capacity=capacity,
    ))

    laws.add(Law(
        name="inverse",
        description="a + (-a) == 0  [the minimum is its own negation]",
        predicate=lambda add, a: add(a, -HugeInt(a, capacity=capacity)).is_zero(),
        capacity=capacity,
    ))

    return laws


def subtraction_laws(capacity: Capacity) -> LawSet:
    """Laws for wrap-around subtraction."""
    wrap = capacity.wrap

    laws = LawSet(name="subtraction")

    laws.add(Law(
        name="matches_oracle",
        description="int(a - b) == wrap(a - b)",
        predicate=lambda sub, a, b: int(sub(a, b)) == wrap(a - b),
        capacity=capacity,
    ))

    laws.add(Law(
        name="identity",
        description="a - 0 == a",
        predicate=lambda sub, a: int(sub(a, 0)) == a,
        capacity=capacity,
    ))

    laws.add(Law(
        name="self_inverse",
        description="a - a == 0",
        predicate=lambda sub, a: sub(a, a).is_zero(),
        capacity=capacity,
    ))

    return laws


def multiplication_laws(capacity: Capacity) -> LawSet:
    """Laws for truncating multiplication."""
    wrap = capacity.wrap

    laws = LawSet(name="multiplication")

    laws.add(Law(
        name="matches_oracle",
        description="int(a * b) == wrap(a * b)",
        predicate=lambda mul, a, b: int(mul(a, b)) == wrap(a * b),
        capacity=capacity,
    ))

    laws.add(Law(
        name="commutativity",
        description="a * b == b * a",
        predicate=lambda mul, a, b: mul(a, b) == mul(b, a),
        capacity=capacity,
    ))

    laws.add(Law(
        name="identity",
        description="a * 1 == a",
        predicate=lambda mul, a: int(mul(a, 1)) == a,
        capacity=capacity,
    ))

    laws.add(Law(
        name="zero",
        description="a * 0 == 0",
        predicate=lambda mul, a: mul(a, 0).is_zero(),
        capacity=capacity,
    ))

    return laws


def division_laws(capacity: Capacity) -> LawSet:
    """
    Laws for truncating division and modulo.

    The predicate receives ``divmod_`` returning (quotient, remainder).
    Every law is vacuous for b == 0: division by zero is unchecked.
    """
    wrap = capacity.wrap

    def remainder_sign_ok(r: HugeInt, a: int) -> bool:
        return r.is_zero() or r.is_negative() == (a < 0)

    def reassembles(divmod_: Callable[..., tuple[HugeInt, HugeInt]], a: int, b: int) -> bool:
        if b == 0:
            return True
        q, r = divmod_(a, b)
        return int(q * b + r) == a

    laws = LawSet(name="division")

    laws.add(Law(
        name="matches_oracle",
        description="int(a // b) == wrap(truncdiv(a, b))",
        predicate=lambda divmod_, a, b: (
            b == 0 or int(divmod_(a, b)[0]) == wrap(truncdiv(a, b))
        ),
        capacity=capacity,
    ))

    laws.add(Law(
        name="remainder_matches_oracle",
        description="int(a % b) == truncmod(a, b)",
        predicate=lambda divmod_, a, b: (
            b == 0 or int(divmod_(a, b)[1]) == truncmod(a, b)
        ),
        capacity=capacity,
    ))

    laws.add(Law(
        name="division_identity",
        description="(a // b) * b + a % b == a",
        predicate=reassembles,
        capacity=capacity,
    ))

    laws.add(Law(
        name="remainder_sign",
        description="a % b is zero or has the sign of a",
        predicate=lambda divmod_, a, b: (
            b == 0 or remainder_sign_ok(divmod_(a, b)[1], a)
        ),
        capacity=capacity,
    ))

    laws.add(Law(
        name="remainder_bound",
        description="|a % b| < |b|",
        predicate=lambda divmod_, a, b: (
            b == 0 or abs(int(divmod_(a, b)[1])) < abs(b)
        ),
        capacity=capacity,
    ))

    laws.add(Law(
        name="identity",
        description="a // 1 == a",
        predicate=lambda divmod_, a: int(divmod_(a, 1)[0]) == a,
        capacity=capacity,
    ))

    return laws


def comparison_laws(capacity: Capacity) -> LawSet:
    """
    Laws for the relational operators.

    The predicate receives ``compare`` returning -1, 0 or 1.  ``<`` reads
    the sign of a - b while ``>`` and ``==`` read b - a, so ordering is
    only claimed where neither difference wraps.
    """
    laws = LawSet(name="comparison")

    def orderable(a: int, b: int) -> bool:
        return capacity.contains(a - b) and capacity.contains(b - a)

    laws.add(Law(
        name="totality",
        description=(
            "compare(a, b) == -compare(b, a), zero only when a == b"
            "  [when neither a - b nor b - a wraps]"
        ),
        predicate=lambda compare, a, b: (
            not orderable(a, b)
            or (
                compare(a, b) == -compare(b, a)
                and (compare(a, b) == 0) == (a == b)
            )
        ),
        capacity=capacity,
    ))

    laws.add(Law(
        name="matches_oracle",
        description="compare(a, b) == sign(a - b)  [when neither a - b nor b - a wraps]",
        predicate=lambda compare, a, b: (
            not orderable(a, b) or compare(a, b) == (a > b) - (a < b)
        ),
        capacity=capacity,
    ))

    return laws


def conversion_laws(capacity: Capacity) -> LawSet:
    """Laws for decimal text and int conversion."""
    laws = LawSet(name="conversion")

    laws.add(Law(
        name="decimal_round_trip",
        description="parse(format(a)) == a",
        predicate=lambda parse, a: (
            parse(str(HugeInt(a, capacity=capacity)).replace(",", "")) == a
        ),
        capacity=capacity,
    ))

    laws.add(Law(
        name="int_round_trip",
        description="int(HugeInt(a)) == a",
        predicate=lambda parse, a: int(HugeInt(a, capacity=capacity)) == a,
        capacity=capacity,
    ))

    return laws
